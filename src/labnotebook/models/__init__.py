"""Model exports.

Import from here: `from src.labnotebook.models import Project, Team`
"""

from src.labnotebook.models.enums import (
    EXTRA_SEARCHABLE_DATA_TYPES,
    GLOBALLY_SHARED_LEVELS,
    ColumnDataType,
    PermissionLevel,
    ProjectRole,
    TeamRole,
    Visibility,
)
from src.labnotebook.models.project import Project, UserProject
from src.labnotebook.models.repository import (
    Repository,
    RepositoryCell,
    RepositoryColumn,
    RepositoryRow,
    RepositoryShare,
)
from src.labnotebook.models.team import Team, User, UserTeam

__all__ = [
    # Enums
    "EXTRA_SEARCHABLE_DATA_TYPES",
    "GLOBALLY_SHARED_LEVELS",
    "ColumnDataType",
    "PermissionLevel",
    "ProjectRole",
    "TeamRole",
    "Visibility",
    # Teams
    "Team",
    "User",
    "UserTeam",
    # Projects
    "Project",
    "UserProject",
    # Repositories
    "Repository",
    "RepositoryCell",
    "RepositoryColumn",
    "RepositoryRow",
    "RepositoryShare",
]
