"""Project listing and authorized lifecycle operations."""

from collections.abc import Collection
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
from src.labnotebook.models import Project, ProjectRole, Team, User, UserProject, Visibility
from src.labnotebook.models.base import utc_now
from src.labnotebook.policies import Principal, can_manage_project, project_visible
from src.labnotebook.repositories import MembershipRepository, ProjectRepository
from src.labnotebook.search import (
    DEFAULT_SORT,
    SortKey,
    apply_filters,
    sort_items,
    text_matches,
    where,
)
from src.labnotebook.services.principal import load_principal
from src.labnotebook.services.validation import clean_name

logger = get_logger(__name__)


class ProjectService:
    """Project business logic. Every mutation re-checks the caller's rights."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        membership_repo: MembershipRepository,
        session: AsyncSession,
        settings: Settings | None = None,
    ):
        self.project_repo = project_repo
        self.membership_repo = membership_repo
        self.session = session
        self.settings = settings or get_settings()

    async def _principal(self, user: User) -> Principal:
        return await load_principal(user, self.membership_repo, self.project_repo)

    async def _get_managed_project(self, user: User, project_id: UUID) -> Project:
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError(f"Project {project_id} not found")
        principal = await self._principal(user)
        if not can_manage_project(principal, project):
            raise ForbiddenError("Only team admins and project owners can manage this project")
        return project

    async def _ensure_unique_name(
        self, team_id: UUID, name: str, exclude_id: UUID | None = None
    ) -> None:
        existing = await self.project_repo.get_by_name_in_team(team_id, name)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError(f"Project with name '{name}' already exists")

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
            # Fallback in case of race condition
            await self.session.rollback()
            raise ConflictError(conflict_detail) from e
        except Exception:
            await self.session.rollback()
            raise

    async def list_viewable(
        self,
        user: User,
        team_ids: Collection[UUID] | None = None,
        sort: SortKey = DEFAULT_SORT,
    ) -> list[Project]:
        """Projects the user can view in the given teams (default: all of theirs).

        Archived projects are included.
        """
        principal = await self._principal(user)
        if team_ids is None:
            team_ids = principal.team_ids
        candidates = await self.project_repo.list_by_team_ids(team_ids)
        projects = apply_filters(
            candidates, [where(lambda project: project_visible(principal, project))]
        )
        return sort_items(projects, sort)

    async def autocomplete(self, user: User, team: Team, name: str | None) -> list[Project]:
        """Active projects in a team, visible to the user, whose name contains `name`."""
        principal = await self._principal(user)
        candidates = await self.project_repo.list_by_team_ids({team.id})
        projects = apply_filters(
            candidates,
            [
                where(lambda project: not project.archived),
                where(lambda project: project_visible(principal, project)),
                where(lambda project: text_matches(project.name, name)),
            ],
        )
        return sort_items(projects, SortKey.ATOZ)

    async def get_project(self, user: User, project_id: UUID) -> Project:
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError(f"Project {project_id} not found")
        principal = await self._principal(user)
        if not project_visible(principal, project):
            raise ForbiddenError("You do not have access to this project")
        return project

    async def create_project(
        self,
        user: User,
        team: Team,
        name: str,
        visibility: Visibility = Visibility.HIDDEN,
    ) -> Project:
        """Create a project in a team; the creator becomes its owner."""
        if not await self.membership_repo.user_is_member(user.id, team.id):
            raise ForbiddenError("User is not a member of this team")

        name = clean_name(name, self.settings, "Project name")
        await self._ensure_unique_name(team.id, name)

        project = Project(
            team_id=team.id,
            name=name,
            visibility=visibility.value,
            created_by_id=user.id,
            last_modified_by_id=user.id,
        )
        self.project_repo.add(project)
        await self._flush(f"Project with name '{name}' already exists")
        self.project_repo.add_member_link(
            user.id, project.id, ProjectRole.OWNER, assigned_by_id=user.id
        )
        await self._commit(f"Project with name '{name}' already exists")
        await self.session.refresh(project)

        logger.info("Project created", project_id=str(project.id), team_id=str(team.id))
        return project

    async def update_project(
        self,
        user: User,
        project_id: UUID,
        name: str | None = None,
        visibility: Visibility | None = None,
    ) -> Project:
        """Rename a project or change its visibility."""
        project = await self._get_managed_project(user, project_id)

        if name is not None:
            name = clean_name(name, self.settings, "Project name")
            if name != project.name:
                await self._ensure_unique_name(project.team_id, name, exclude_id=project.id)
            project.name = name
        if visibility is not None:
            project.visibility = visibility.value

        project.last_modified_by_id = user.id
        project.updated_at = utc_now()
        await self._commit(f"Project with name '{project.name}' already exists")
        await self.session.refresh(project)

        logger.info(
            "Project updated",
            project_id=str(project.id),
            visibility=project.visibility,
        )
        return project

    async def archive_project(self, user: User, project_id: UUID) -> Project:
        project = await self._get_managed_project(user, project_id)
        if project.archived:
            raise InvalidArgumentError("Project is already archived")

        project.archived = True
        project.archived_on = utc_now()
        project.archived_by_id = user.id
        project.updated_at = project.archived_on
        await self._commit("Project could not be archived")
        await self.session.refresh(project)

        logger.info("Project archived", project_id=str(project.id))
        return project

    async def restore_project(self, user: User, project_id: UUID) -> Project:
        project = await self._get_managed_project(user, project_id)
        if not project.archived:
            raise InvalidArgumentError("Project is not archived")

        project.archived = False
        project.archived_on = None
        project.restored_on = utc_now()
        project.restored_by_id = user.id
        project.updated_at = project.restored_on
        await self._commit("Project could not be restored")
        await self.session.refresh(project)

        logger.info("Project restored", project_id=str(project.id))
        return project

    async def assign_member(
        self,
        user: User,
        project_id: UUID,
        member_id: UUID,
        role: ProjectRole,
    ) -> UserProject:
        """Link a team member to the project, or change their project role."""
        project = await self._get_managed_project(user, project_id)
        if not await self.membership_repo.user_is_member(member_id, project.team_id):
            raise InvalidArgumentError("User is not a member of the project's team")

        link = await self.project_repo.get_member_link(member_id, project.id)
        if link is None:
            link = self.project_repo.add_member_link(
                member_id, project.id, role, assigned_by_id=user.id
            )
        else:
            link.role = role.value
            link.assigned_by_id = user.id
        await self._commit("Project membership could not be saved")

        logger.info(
            "Project member assigned",
            project_id=str(project.id),
            member_id=str(member_id),
            role=role.value,
        )
        return link
