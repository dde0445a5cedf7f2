from src.labnotebook.schemas.pagination import PageResponse
from src.labnotebook.schemas.project import (
    ProjectCreate,
    ProjectMemberAssign,
    ProjectMemberRead,
    ProjectRead,
    ProjectUpdate,
)
from src.labnotebook.schemas.repository import (
    RepositoryCopy,
    RepositoryCreate,
    RepositoryPermissionUpdate,
    RepositoryRead,
    RepositoryRowCounts,
    RepositoryRowRead,
    RepositoryShareRead,
    RepositoryShareRequest,
)

__all__ = [
    # Pagination
    "PageResponse",
    # Project
    "ProjectCreate",
    "ProjectMemberAssign",
    "ProjectMemberRead",
    "ProjectRead",
    "ProjectUpdate",
    # Repository
    "RepositoryCopy",
    "RepositoryCreate",
    "RepositoryPermissionUpdate",
    "RepositoryRead",
    "RepositoryRowCounts",
    "RepositoryRowRead",
    "RepositoryShareRead",
    "RepositoryShareRequest",
]
