"""Project endpoints.

Listing is filtered by visibility. Mutations require a team admin or the
project owner and fail with 403 otherwise.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from src.labnotebook.api.dependencies import (
    CurrentTeam,
    CurrentUser,
    OptionalTeam,
    ProjectServiceDep,
)
from src.labnotebook.schemas import (
    ProjectCreate,
    ProjectMemberAssign,
    ProjectMemberRead,
    ProjectRead,
    ProjectUpdate,
)
from src.labnotebook.search import DEFAULT_SORT, SortKey

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List projects",
    description=(
        "List the projects the caller can view, archived ones included. "
        "Limited to the X-Team-ID team when the header is sent."
    ),
)
async def list_projects(
    current_user: CurrentUser,
    team: OptionalTeam,
    service: ProjectServiceDep,
    sort: SortKey = DEFAULT_SORT,
) -> list[ProjectRead]:
    team_ids = {team.id} if team is not None else None
    projects = await service.list_viewable(current_user, team_ids=team_ids, sort=sort)
    return [ProjectRead.model_validate(p) for p in projects]


@router.get(
    "/autocomplete",
    response_model=list[ProjectRead],
    summary="Autocomplete project names",
    description="Active projects in the X-Team-ID team whose name contains `name`.",
    responses={400: {"description": "X-Team-ID header missing"}},
)
async def autocomplete_projects(
    current_user: CurrentUser,
    team: CurrentTeam,
    service: ProjectServiceDep,
    name: Annotated[str | None, Query(max_length=255)] = None,
) -> list[ProjectRead]:
    projects = await service.autocomplete(current_user, team, name)
    return [ProjectRead.model_validate(p) for p in projects]


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get project",
    responses={
        403: {"description": "Project not visible to the caller"},
        404: {"description": "Project not found"},
    },
)
async def get_project(
    project_id: UUID,
    current_user: CurrentUser,
    service: ProjectServiceDep,
) -> ProjectRead:
    project = await service.get_project(current_user, project_id)
    return ProjectRead.model_validate(project)


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    description="Create a project in the X-Team-ID team. The caller becomes its owner.",
    responses={
        201: {"description": "Project created"},
        409: {"description": "Project with this name already exists"},
    },
)
async def create_project(
    request: ProjectCreate,
    current_user: CurrentUser,
    team: CurrentTeam,
    service: ProjectServiceDep,
) -> ProjectRead:
    project = await service.create_project(
        current_user, team, request.name, visibility=request.visibility
    )
    return ProjectRead.model_validate(project)


@router.patch(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Update project",
    responses={
        403: {"description": "Not a team admin or project owner"},
        404: {"description": "Project not found"},
        409: {"description": "Project with this name already exists"},
    },
)
async def update_project(
    project_id: UUID,
    request: ProjectUpdate,
    current_user: CurrentUser,
    service: ProjectServiceDep,
) -> ProjectRead:
    project = await service.update_project(
        current_user, project_id, name=request.name, visibility=request.visibility
    )
    return ProjectRead.model_validate(project)


@router.post(
    "/{project_id}/archive",
    response_model=ProjectRead,
    summary="Archive project",
)
async def archive_project(
    project_id: UUID,
    current_user: CurrentUser,
    service: ProjectServiceDep,
) -> ProjectRead:
    project = await service.archive_project(current_user, project_id)
    return ProjectRead.model_validate(project)


@router.post(
    "/{project_id}/restore",
    response_model=ProjectRead,
    summary="Restore project",
)
async def restore_project(
    project_id: UUID,
    current_user: CurrentUser,
    service: ProjectServiceDep,
) -> ProjectRead:
    project = await service.restore_project(current_user, project_id)
    return ProjectRead.model_validate(project)


@router.put(
    "/{project_id}/members/{user_id}",
    response_model=ProjectMemberRead,
    summary="Assign project member",
    description="Give a member of the project's team a role in the project.",
    responses={
        400: {"description": "User is not a member of the project's team"},
        403: {"description": "Not a team admin or project owner"},
    },
)
async def assign_member(
    project_id: UUID,
    user_id: UUID,
    request: ProjectMemberAssign,
    current_user: CurrentUser,
    service: ProjectServiceDep,
) -> ProjectMemberRead:
    link = await service.assign_member(current_user, project_id, user_id, request.role)
    return ProjectMemberRead.model_validate(link)
