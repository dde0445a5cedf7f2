"""Inventory repository endpoints.

Sharing, permission changes, copying and archiving are limited to admins
of the owning team.
"""

from uuid import UUID

from fastapi import APIRouter, status

from src.labnotebook.api.dependencies import CurrentTeam, CurrentUser, InventoryServiceDep
from src.labnotebook.schemas import (
    RepositoryCopy,
    RepositoryCreate,
    RepositoryPermissionUpdate,
    RepositoryRead,
    RepositoryShareRead,
    RepositoryShareRequest,
)

router = APIRouter(prefix="/repositories", tags=["repositories"])


@router.get(
    "",
    response_model=list[RepositoryRead],
    summary="List repositories",
    description=(
        "Repositories the X-Team-ID team can access: its own, those shared "
        "with it, and globally shared ones."
    ),
)
async def list_repositories(
    current_user: CurrentUser,
    team: CurrentTeam,
    service: InventoryServiceDep,
) -> list[RepositoryRead]:
    repositories = await service.list_accessible(current_user, team)
    return [RepositoryRead.model_validate(r) for r in repositories]


@router.post(
    "",
    response_model=RepositoryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create repository",
    responses={
        201: {"description": "Repository created"},
        409: {"description": "Name taken or repository limit reached"},
    },
)
async def create_repository(
    request: RepositoryCreate,
    current_user: CurrentUser,
    team: CurrentTeam,
    service: InventoryServiceDep,
) -> RepositoryRead:
    repository = await service.create_repository(current_user, team, request.name)
    return RepositoryRead.model_validate(repository)


@router.post(
    "/{repository_id}/copy",
    response_model=RepositoryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Copy repository",
    description="Copy a repository's columns (not its rows) into a new repository.",
)
async def copy_repository(
    repository_id: UUID,
    request: RepositoryCopy,
    current_user: CurrentUser,
    service: InventoryServiceDep,
) -> RepositoryRead:
    repository = await service.copy_repository(current_user, repository_id, request.name)
    return RepositoryRead.model_validate(repository)


@router.patch(
    "/{repository_id}/permission",
    response_model=RepositoryRead,
    summary="Set global sharing level",
)
async def set_permission_level(
    repository_id: UUID,
    request: RepositoryPermissionUpdate,
    current_user: CurrentUser,
    service: InventoryServiceDep,
) -> RepositoryRead:
    repository = await service.set_permission_level(
        current_user, repository_id, request.permission_level
    )
    return RepositoryRead.model_validate(repository)


@router.put(
    "/{repository_id}/shares/{team_id}",
    response_model=RepositoryShareRead,
    summary="Share repository with a team",
    responses={
        400: {"description": "Invalid level or the owning team"},
        404: {"description": "Repository or team not found"},
    },
)
async def share_repository(
    repository_id: UUID,
    team_id: UUID,
    request: RepositoryShareRequest,
    current_user: CurrentUser,
    service: InventoryServiceDep,
) -> RepositoryShareRead:
    share = await service.share_repository(
        current_user, repository_id, team_id, request.permission_level
    )
    return RepositoryShareRead.model_validate(share)


@router.delete(
    "/{repository_id}/shares/{team_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Stop sharing repository with a team",
)
async def unshare_repository(
    repository_id: UUID,
    team_id: UUID,
    current_user: CurrentUser,
    service: InventoryServiceDep,
) -> None:
    await service.unshare_repository(current_user, repository_id, team_id)


@router.post(
    "/{repository_id}/archive",
    response_model=RepositoryRead,
    summary="Archive repository",
)
async def archive_repository(
    repository_id: UUID,
    current_user: CurrentUser,
    service: InventoryServiceDep,
) -> RepositoryRead:
    repository = await service.archive_repository(current_user, repository_id)
    return RepositoryRead.model_validate(repository)


@router.post(
    "/{repository_id}/restore",
    response_model=RepositoryRead,
    summary="Restore repository",
)
async def restore_repository(
    repository_id: UUID,
    current_user: CurrentUser,
    service: InventoryServiceDep,
) -> RepositoryRead:
    repository = await service.restore_repository(current_user, repository_id)
    return RepositoryRead.model_validate(repository)
