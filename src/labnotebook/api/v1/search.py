"""Search endpoints.

Both searches filter by what the caller may see; a caller without access
to anything gets an empty page, never a 403.
"""

from typing import Annotated, TypeVar
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from src.labnotebook.api.dependencies import (
    CurrentUser,
    InventoryRepo,
    OptionalTeam,
    SearchServiceDep,
)
from src.labnotebook.core.exceptions import NotFoundError
from src.labnotebook.schemas import (
    PageResponse,
    ProjectRead,
    RepositoryRowCounts,
    RepositoryRowRead,
)
from src.labnotebook.search import DEFAULT_SORT, MatchOptions, Page, SortKey

router = APIRouter(prefix="/search", tags=["search"])


def get_match_options(
    exact: Annotated[bool, Query(description="Match whole values only")] = False,
    case_sensitive: Annotated[bool, Query()] = False,
    whole_word: Annotated[bool, Query(description="Match terms on word boundaries")] = False,
    whole_phrase: Annotated[
        bool, Query(description="Match the query as one phrase rather than any of its words")
    ] = True,
) -> MatchOptions:
    return MatchOptions(
        exact=exact,
        case_sensitive=case_sensitive,
        whole_word=whole_word,
        whole_phrase=whole_phrase,
    )


MatchOptionsDep = Annotated[MatchOptions, Depends(get_match_options)]

T = TypeVar("T")


def _page_response(page: Page, items: list[T]) -> PageResponse[T]:
    return PageResponse(
        items=items,
        page=page.page,
        per_page=page.limit,
        total=page.total,
        has_more=page.has_more,
    )


@router.get(
    "/projects",
    response_model=PageResponse[ProjectRead],
    summary="Search projects",
    description=(
        "Search project names in the team selected by X-Team-ID, or in all of the "
        "caller's teams. Only projects visible to the caller are returned."
    ),
    responses={
        200: {"description": "A page of matching projects"},
        400: {"description": "Invalid page or query"},
    },
)
async def search_projects(
    current_user: CurrentUser,
    team: OptionalTeam,
    service: SearchServiceDep,
    options: MatchOptionsDep,
    query: Annotated[str | None, Query(description="Free text; blank matches all")] = None,
    page: Annotated[int, Query(description="Page number, or -1 for all results")] = 1,
    include_archived: bool = False,
    sort: SortKey = DEFAULT_SORT,
) -> PageResponse[ProjectRead]:
    result = await service.search_projects(
        current_user,
        include_archived=include_archived,
        query=query,
        page=page,
        current_team=team,
        options=options,
        sort=sort,
    )
    return _page_response(result, [ProjectRead.model_validate(p) for p in result.items])


@router.get(
    "/repository-rows",
    response_model=PageResponse[RepositoryRowRead] | RepositoryRowCounts,
    summary="Search repository rows",
    description=(
        "Search rows of every repository visible to any of the caller's teams by name, "
        "id, creator name and searchable cell values. With page=-1 the response holds "
        "the number of matching rows per repository instead of rows."
    ),
    responses={
        200: {"description": "A page of matching rows, or counts per repository"},
        400: {"description": "Invalid page or query"},
        404: {"description": "Repository not found"},
    },
)
async def search_repository_rows(
    current_user: CurrentUser,
    service: SearchServiceDep,
    inventory_repo: InventoryRepo,
    options: MatchOptionsDep,
    query: Annotated[str | None, Query(description="Free text; blank matches all")] = None,
    page: Annotated[int, Query(description="Page number, or -1 for counts")] = 1,
    repository_id: Annotated[
        UUID | None, Query(description="Restrict the search to one repository")
    ] = None,
    sort: SortKey = DEFAULT_SORT,
) -> PageResponse[RepositoryRowRead] | RepositoryRowCounts:
    repository = None
    if repository_id is not None:
        repository = await inventory_repo.get_by_id(repository_id)
        if repository is None:
            raise NotFoundError(f"Repository {repository_id} not found")

    result = await service.search_repository_rows(
        current_user,
        query=query,
        page=page,
        repository=repository,
        options=options,
        sort=sort,
    )
    if isinstance(result, dict):
        return RepositoryRowCounts(counts=result)
    return _page_response(result, [RepositoryRowRead.model_validate(r) for r in result.items])
