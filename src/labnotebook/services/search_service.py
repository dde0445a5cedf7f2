"""Permission-scoped search over projects and repository rows.

Search filters, it never forbids: a principal without access gets an empty
page rather than an error.
"""

from collections import Counter
from operator import attrgetter
from uuid import UUID

from src.labnotebook.core.config import Settings, get_settings
from src.labnotebook.core.exceptions import InvalidArgumentError
from src.labnotebook.core.logging import get_logger
from src.labnotebook.models import Project, Repository, RepositoryRow, Team, User
from src.labnotebook.policies import project_visible, repository_visible
from src.labnotebook.repositories import (
    InventoryRepository,
    InventoryRowRepository,
    MembershipRepository,
    ProjectRepository,
    UserRepository,
)
from src.labnotebook.search import (
    DEFAULT_MATCH_OPTIONS,
    DEFAULT_SORT,
    MatchOptions,
    Page,
    SortKey,
    apply_filters,
    attributes_match,
    distinct,
    normalize_query,
    paginate,
    sort_items,
    text_matches,
    validate_page,
    when,
    where,
)
from src.labnotebook.services.principal import load_principal
from src.labnotebook.services.validation import check_query

logger = get_logger(__name__)


class SearchService:
    """Builds filtered, ordered, paginated result sets for a principal."""

    def __init__(
        self,
        membership_repo: MembershipRepository,
        project_repo: ProjectRepository,
        inventory_repo: InventoryRepository,
        row_repo: InventoryRowRepository,
        user_repo: UserRepository,
        settings: Settings | None = None,
    ):
        self.membership_repo = membership_repo
        self.project_repo = project_repo
        self.inventory_repo = inventory_repo
        self.row_repo = row_repo
        self.user_repo = user_repo
        self.settings = settings or get_settings()

    def _check_request(self, user: User | None, query: object, page: object) -> None:
        if user is None:
            raise InvalidArgumentError("A user is required to search")
        check_query(query, self.settings)
        validate_page(page, self.settings.search_no_limit)

    async def search_projects(
        self,
        user: User,
        include_archived: bool = False,
        query: str | None = None,
        page: int = 1,
        current_team: Team | None = None,
        options: MatchOptions = DEFAULT_MATCH_OPTIONS,
        sort: SortKey = DEFAULT_SORT,
    ) -> Page[Project]:
        """Search project names within the current team, or all of the user's teams.

        Args:
            user: The authenticated principal.
            include_archived: Keep archived projects in the results.
            query: Free text matched against project names; blank matches all.
            page: Page number starting at 1, or the configured no-limit sentinel.
            current_team: Restrict the search to this team's projects.
            options: Text matching options.
            sort: Result ordering.

        Raises:
            InvalidArgumentError: On a missing user, bad page or malformed query.
        """
        self._check_request(user, query, page)
        principal = await load_principal(user, self.membership_repo, self.project_repo)

        team_ids = {current_team.id} if current_team is not None else principal.team_ids
        candidates = await self.project_repo.list_by_team_ids(team_ids)

        projects = apply_filters(
            candidates,
            [
                where(lambda project: project_visible(principal, project)),
                where(lambda project: text_matches(project.name, query, options)),
                when(not include_archived, where(lambda project: not project.archived)),
                distinct(attrgetter("id")),
            ],
        )
        result = paginate(
            sort_items(projects, sort),
            page,
            self.settings.search_limit,
            self.settings.search_no_limit,
        )
        logger.debug(
            "Project search",
            query=normalize_query(query),
            page=page,
            team_count=len(team_ids),
            total=result.total,
        )
        return result

    async def _searched_repositories(
        self, team_ids: frozenset[UUID], repository: Repository | None
    ) -> list[Repository]:
        if repository is not None:
            return [repository]

        candidates = await self.inventory_repo.list_share_candidates(team_ids)
        shares = await self.inventory_repo.list_shares([r.id for r in candidates])

        return apply_filters(
            candidates,
            [
                where(
                    lambda repo: any(
                        repository_visible(team_id, repo, shares) for team_id in team_ids
                    )
                ),
                distinct(attrgetter("id")),
            ],
        )

    async def _matching_row_ids(
        self, rows: list[RepositoryRow], query: str | None, options: MatchOptions
    ) -> set[int | None]:
        """Union of rows matched by name or id, by creator name, and by searchable cells."""
        if normalize_query(query) is None:
            return {row.id for row in rows}

        by_attributes = {
            row.id for row in rows if attributes_match((row.name, row.id), query, options)
        }

        full_names = await self.user_repo.get_full_names({row.created_by_id for row in rows})
        by_creator = {
            row.id
            for row in rows
            if text_matches(full_names.get(row.created_by_id), query, options)
        }

        cell_values = await self.row_repo.list_searchable_cell_values([row.id for row in rows])
        by_cell = {row_id for row_id, value in cell_values if text_matches(value, query, options)}

        return by_attributes | by_creator | by_cell

    async def search_repository_rows(
        self,
        user: User,
        query: str | None = None,
        page: int = 1,
        repository: Repository | None = None,
        options: MatchOptions = DEFAULT_MATCH_OPTIONS,
        sort: SortKey = DEFAULT_SORT,
    ) -> Page[RepositoryRow] | dict[UUID, int]:
        """Search rows of the repositories visible to any of the user's teams.

        With the no-limit sentinel page the result is a mapping of repository id
        to the number of distinct matching rows, for summary views. Otherwise it
        is a page of rows.

        Raises:
            InvalidArgumentError: On a missing user, bad page or malformed query.
        """
        self._check_request(user, query, page)
        principal = await load_principal(user, self.membership_repo, self.project_repo)

        repositories = await self._searched_repositories(principal.team_ids, repository)
        rows = await self.row_repo.list_by_repository_ids([r.id for r in repositories])
        matching_ids = await self._matching_row_ids(rows, query, options)

        matched = apply_filters(
            rows,
            [
                where(lambda row: row.id in matching_ids),
                distinct(attrgetter("id")),
            ],
        )

        if page == self.settings.search_no_limit:
            counts = dict(Counter(row.repository_id for row in matched))
            logger.debug(
                "Repository row search summary",
                query=normalize_query(query),
                repository_count=len(counts),
            )
            return counts

        result = paginate(
            sort_items(matched, sort),
            page,
            self.settings.search_limit,
            self.settings.search_no_limit,
        )
        logger.debug(
            "Repository row search",
            query=normalize_query(query),
            page=page,
            repository_count=len(repositories),
            total=result.total,
        )
        return result
