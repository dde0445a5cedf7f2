"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenient imports.
"""

from src.labnotebook.api.dependencies.auth import CurrentUser, get_current_user
from src.labnotebook.api.dependencies.db import DBSession, get_db_session
from src.labnotebook.api.dependencies.repositories import (
    InventoryRepo,
    InventoryRowRepo,
    MembershipRepo,
    ProjectRepo,
    TeamRepo,
    UserRepo,
)
from src.labnotebook.api.dependencies.services import (
    InventoryServiceDep,
    ProjectServiceDep,
    SearchServiceDep,
    get_inventory_service,
    get_project_service,
    get_search_service,
)
from src.labnotebook.api.dependencies.team import (
    CurrentTeam,
    OptionalTeam,
    get_current_team,
    get_optional_team,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "CurrentUser",
    "get_current_user",
    # Team
    "CurrentTeam",
    "OptionalTeam",
    "get_current_team",
    "get_optional_team",
    # Repositories
    "InventoryRepo",
    "InventoryRowRepo",
    "MembershipRepo",
    "ProjectRepo",
    "TeamRepo",
    "UserRepo",
    # Services
    "InventoryServiceDep",
    "ProjectServiceDep",
    "SearchServiceDep",
    "get_inventory_service",
    "get_project_service",
    "get_search_service",
]
