"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.labnotebook.api.dependencies.db import DBSession
from src.labnotebook.repositories import (
    InventoryRepository,
    InventoryRowRepository,
    MembershipRepository,
    ProjectRepository,
    TeamRepository,
    UserRepository,
)


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepository(session)


def get_team_repository(session: DBSession) -> TeamRepository:
    return TeamRepository(session)


def get_membership_repository(session: DBSession) -> MembershipRepository:
    return MembershipRepository(session)


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_inventory_repository(session: DBSession) -> InventoryRepository:
    return InventoryRepository(session)


def get_inventory_row_repository(session: DBSession) -> InventoryRowRepository:
    return InventoryRowRepository(session)


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
TeamRepo = Annotated[TeamRepository, Depends(get_team_repository)]
MembershipRepo = Annotated[MembershipRepository, Depends(get_membership_repository)]
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
InventoryRepo = Annotated[InventoryRepository, Depends(get_inventory_repository)]
InventoryRowRepo = Annotated[InventoryRowRepository, Depends(get_inventory_row_repository)]
