"""Access policies."""

from src.labnotebook.policies.visibility import (
    Principal,
    can_manage_project,
    is_admin_of_team,
    project_role,
    project_visible,
    repository_shared_by,
    repository_shared_with,
    repository_shared_with_anybody,
    repository_shared_with_read,
    repository_visible,
    repository_writable,
)

__all__ = [
    "Principal",
    "can_manage_project",
    "is_admin_of_team",
    "project_role",
    "project_visible",
    "repository_shared_by",
    "repository_shared_with",
    "repository_shared_with_anybody",
    "repository_shared_with_read",
    "repository_visible",
    "repository_writable",
]
