"""Repository for Project entity and its member links."""

from collections.abc import Collection
from uuid import UUID

from sqlalchemy import func
from sqlmodel import col, select

from src.labnotebook.models import Project, ProjectRole, UserProject
from src.labnotebook.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity."""

    model = Project

    async def list_by_team_ids(self, team_ids: Collection[UUID]) -> list[Project]:
        """List projects owned by any of the given teams, archived included."""
        if not team_ids:
            return []
        result = await self.session.execute(
            select(Project).where(col(Project.team_id).in_(team_ids))
        )
        return list(result.scalars().all())

    async def get_by_name_in_team(self, team_id: UUID, name: str) -> Project | None:
        """Get project by name within a team, ignoring case."""
        result = await self.session.execute(
            select(Project).where(
                Project.team_id == team_id,
                func.lower(Project.name) == name.lower(),
            )
        )
        return result.scalars().first()

    async def list_project_roles(self, user_id: UUID) -> dict[UUID, ProjectRole]:
        """Map project id to the user's role for every project the user is linked to."""
        result = await self.session.execute(
            select(UserProject.project_id, UserProject.role).where(UserProject.user_id == user_id)
        )
        return {project_id: ProjectRole(role) for project_id, role in result.all()}

    async def get_member_link(self, user_id: UUID, project_id: UUID) -> UserProject | None:
        result = await self.session.execute(
            select(UserProject).where(
                UserProject.user_id == user_id,
                UserProject.project_id == project_id,
            )
        )
        return result.scalar_one_or_none()

    def add_member_link(
        self,
        user_id: UUID,
        project_id: UUID,
        role: ProjectRole,
        assigned_by_id: UUID | None = None,
    ) -> UserProject:
        """Create a user-project link (add to session, no commit)."""
        link = UserProject(
            user_id=user_id,
            project_id=project_id,
            role=role.value,
            assigned_by_id=assigned_by_id,
        )
        self.session.add(link)
        return link
