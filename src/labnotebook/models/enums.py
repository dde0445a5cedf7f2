"""Shared enums for models.

Stored as their string values; compare against members, never raw codes.
"""

from enum import Enum


class TeamRole(str, Enum):
    """User role within a team."""

    ADMIN = "admin"
    MEMBER = "member"


class ProjectRole(str, Enum):
    """User role within a project."""

    OWNER = "owner"
    NORMAL_USER = "normal_user"
    TECHNICIAN = "technician"
    VIEWER = "viewer"


class Visibility(str, Enum):
    """Default access to a project for team members without a project link."""

    HIDDEN = "hidden"
    VISIBLE = "visible"


class PermissionLevel(str, Enum):
    """Sharing grade of a repository, globally or per team link."""

    NOT_SHARED = "not_shared"
    SHARED_READ = "shared_read"
    SHARED_WRITE = "shared_write"


GLOBALLY_SHARED_LEVELS = frozenset({PermissionLevel.SHARED_READ, PermissionLevel.SHARED_WRITE})


class ColumnDataType(str, Enum):
    """Data type of a repository column."""

    TEXT = "text"
    NUMBER = "number"
    LIST = "list"
    CHECKLIST = "checklist"
    STATUS = "status"
    ASSET = "asset"
    DATE = "date"
    DATE_TIME = "date_time"
    TIME = "time"
    STOCK = "stock"


# Cell types whose values take part in repository row search
EXTRA_SEARCHABLE_DATA_TYPES = frozenset(
    {
        ColumnDataType.TEXT,
        ColumnDataType.NUMBER,
        ColumnDataType.LIST,
        ColumnDataType.CHECKLIST,
        ColumnDataType.STATUS,
        ColumnDataType.ASSET,
    }
)
