"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.labnotebook.api.dependencies.db import DBSession
from src.labnotebook.api.dependencies.repositories import (
    InventoryRepo,
    InventoryRowRepo,
    MembershipRepo,
    ProjectRepo,
    TeamRepo,
    UserRepo,
)
from src.labnotebook.services import InventoryService, ProjectService, SearchService


def get_search_service(
    membership_repo: MembershipRepo,
    project_repo: ProjectRepo,
    inventory_repo: InventoryRepo,
    row_repo: InventoryRowRepo,
    user_repo: UserRepo,
) -> SearchService:
    """Get search service (read-only, no session control needed)."""
    return SearchService(membership_repo, project_repo, inventory_repo, row_repo, user_repo)


def get_project_service(
    project_repo: ProjectRepo,
    membership_repo: MembershipRepo,
    session: DBSession,
) -> ProjectService:
    return ProjectService(project_repo, membership_repo, session)


def get_inventory_service(
    inventory_repo: InventoryRepo,
    membership_repo: MembershipRepo,
    team_repo: TeamRepo,
    session: DBSession,
) -> InventoryService:
    return InventoryService(inventory_repo, membership_repo, team_repo, session)


SearchServiceDep = Annotated[SearchService, Depends(get_search_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
InventoryServiceDep = Annotated[InventoryService, Depends(get_inventory_service)]
