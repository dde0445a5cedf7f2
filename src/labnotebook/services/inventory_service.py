"""Repository (inventory) listing, sharing and lifecycle operations."""

from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.labnotebook.core.config import Settings, get_settings
from src.labnotebook.core.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidArgumentError,
    NotFoundError,
)
from src.labnotebook.core.logging import get_logger
from src.labnotebook.models import (
    GLOBALLY_SHARED_LEVELS,
    PermissionLevel,
    Repository,
    RepositoryColumn,
    RepositoryShare,
    Team,
    TeamRole,
    User,
)
from src.labnotebook.models.base import utc_now
from src.labnotebook.policies import repository_visible
from src.labnotebook.repositories import (
    InventoryRepository,
    MembershipRepository,
    TeamRepository,
)
from src.labnotebook.search import SortKey, apply_filters, sort_items, where
from src.labnotebook.services.validation import clean_name

logger = get_logger(__name__)


class InventoryService:
    """Inventory business logic.

    Only admins of the owning team may share, re-level, copy or archive a
    repository. Shared access never grants these rights.
    """

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        membership_repo: MembershipRepository,
        team_repo: TeamRepository,
        session: AsyncSession,
        settings: Settings | None = None,
    ):
        self.inventory_repo = inventory_repo
        self.membership_repo = membership_repo
        self.team_repo = team_repo
        self.session = session
        self.settings = settings or get_settings()

    async def _get_owned_repository(self, user: User, repository_id: UUID) -> Repository:
        repository = await self.inventory_repo.get_by_id(repository_id)
        if repository is None:
            raise NotFoundError(f"Repository {repository_id} not found")
        membership = await self.membership_repo.get_membership(user.id, repository.team_id)
        if membership is None or membership.role_enum is not TeamRole.ADMIN:
            raise ForbiddenError("Admin role in the owning team required for this operation")
        return repository

    async def _check_new_repository(self, team_id: UUID, name: str) -> str:
        """Validate a name for a new repository in the team and enforce the limits."""
        name = clean_name(name, self.settings, "Repository name")
        if await self.inventory_repo.get_by_name_in_team(team_id, name) is not None:
            raise ConflictError(f"Repository with name '{name}' already exists")

        global_limit = self.settings.global_repositories_limit
        if global_limit > 0 and await self.inventory_repo.count_all() >= global_limit:
            raise ConflictError("Global repository limit reached")

        team_limit = self.settings.team_repositories_limit
        if team_limit > 0 and await self.inventory_repo.count_by_team(team_id) >= team_limit:
            raise ConflictError("Team repository limit reached")
        return name

    async def _flush(self, conflict_detail: str) -> None:
        try:
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError(conflict_detail) from e
        except Exception:
            await self.session.rollback()
            raise

    async def _commit(self, conflict_detail: str) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError(conflict_detail) from e
        except Exception:
            await self.session.rollback()
            raise

    async def list_accessible(self, user: User, team: Team) -> list[Repository]:
        """Repositories the team can see: owned, shared with it, or globally shared."""
        if not await self.membership_repo.user_is_member(user.id, team.id):
            return []
        candidates = await self.inventory_repo.list_share_candidates({team.id})
        shares = await self.inventory_repo.list_shares([r.id for r in candidates])
        repositories = apply_filters(
            candidates, [where(lambda repo: repository_visible(team.id, repo, shares))]
        )
        return sort_items(repositories, SortKey.ATOZ)

    async def create_repository(self, user: User, team: Team, name: str) -> Repository:
        if not await self.membership_repo.user_is_member(user.id, team.id):
            raise ForbiddenError("User is not a member of this team")
        name = await self._check_new_repository(team.id, name)

        repository = Repository(team_id=team.id, name=name, created_by_id=user.id)
        self.inventory_repo.add(repository)
        await self._commit(f"Repository with name '{name}' already exists")
        await self.session.refresh(repository)

        logger.info("Repository created", repository_id=str(repository.id), team_id=str(team.id))
        return repository

    async def copy_repository(self, user: User, repository_id: UUID, name: str) -> Repository:
        """Duplicate a repository and its columns (not its rows) within the team."""
        original = await self._get_owned_repository(user, repository_id)
        name = await self._check_new_repository(original.team_id, name)

        copy = Repository(
            team_id=original.team_id,
            name=name,
            permission_level=original.permission_level,
            created_by_id=user.id,
        )
        self.inventory_repo.add(copy)
        await self._flush(f"Repository with name '{name}' already exists")

        for column in await self.inventory_repo.list_columns(original.id):
            self.session.add(
                RepositoryColumn(
                    repository_id=copy.id,
                    name=column.name,
                    data_type=column.data_type,
                    created_by_id=user.id,
                )
            )
        await self._commit(f"Repository with name '{name}' already exists")
        await self.session.refresh(copy)

        logger.info(
            "Repository copied",
            repository_id=str(copy.id),
            original_id=str(original.id),
        )
        return copy

    async def share_repository(
        self,
        user: User,
        repository_id: UUID,
        target_team_id: UUID,
        permission_level: PermissionLevel,
    ) -> RepositoryShare:
        """Share with another team, or change the level of an existing share."""
        if permission_level not in GLOBALLY_SHARED_LEVELS:
            raise InvalidArgumentError("A share must be shared_read or shared_write")

        repository = await self._get_owned_repository(user, repository_id)
        if target_team_id == repository.team_id:
            raise InvalidArgumentError("A repository cannot be shared with its own team")
        if await self.team_repo.get_by_id(target_team_id) is None:
            raise NotFoundError(f"Team {target_team_id} not found")

        share = await self.inventory_repo.get_share(repository.id, target_team_id)
        if share is None:
            share = RepositoryShare(
                repository_id=repository.id,
                team_id=target_team_id,
                permission_level=permission_level.value,
            )
            self.session.add(share)
        else:
            share.permission_level = permission_level.value
        await self._commit("Repository share could not be saved")

        logger.info(
            "Repository shared",
            repository_id=str(repository.id),
            target_team_id=str(target_team_id),
            permission_level=permission_level.value,
        )
        return share

    async def unshare_repository(
        self, user: User, repository_id: UUID, target_team_id: UUID
    ) -> None:
        repository = await self._get_owned_repository(user, repository_id)
        share = await self.inventory_repo.get_share(repository.id, target_team_id)
        if share is None:
            raise NotFoundError("Repository is not shared with this team")

        await self.session.delete(share)
        await self._commit("Repository share could not be removed")

        logger.info(
            "Repository unshared",
            repository_id=str(repository.id),
            target_team_id=str(target_team_id),
        )

    async def set_permission_level(
        self, user: User, repository_id: UUID, permission_level: PermissionLevel
    ) -> Repository:
        """Change the global sharing grade of a repository."""
        repository = await self._get_owned_repository(user, repository_id)
        repository.permission_level = permission_level.value
        repository.updated_at = utc_now()
        await self._commit("Repository could not be updated")
        await self.session.refresh(repository)

        logger.info(
            "Repository permission level changed",
            repository_id=str(repository.id),
            permission_level=permission_level.value,
        )
        return repository

    async def archive_repository(self, user: User, repository_id: UUID) -> Repository:
        repository = await self._get_owned_repository(user, repository_id)
        if repository.archived:
            raise InvalidArgumentError("Repository is already archived")

        repository.archived = True
        repository.archived_on = utc_now()
        repository.updated_at = repository.archived_on
        await self._commit("Repository could not be archived")
        await self.session.refresh(repository)

        logger.info("Repository archived", repository_id=str(repository.id))
        return repository

    async def restore_repository(self, user: User, repository_id: UUID) -> Repository:
        repository = await self._get_owned_repository(user, repository_id)
        if not repository.archived:
            raise InvalidArgumentError("Repository is not archived")

        repository.archived = False
        repository.archived_on = None
        repository.updated_at = utc_now()
        await self._commit("Repository could not be restored")
        await self.session.refresh(repository)

        logger.info("Repository restored", repository_id=str(repository.id))
        return repository
