"""Repository for UserTeam memberships."""

from uuid import UUID

from sqlmodel import select

from src.labnotebook.models import TeamRole, UserTeam
from src.labnotebook.repositories.base import BaseRepository


class MembershipRepository(BaseRepository[UserTeam]):
    """Repository for user-team memberships."""

    model = UserTeam

    async def get_membership(self, user_id: UUID, team_id: UUID) -> UserTeam | None:
        """Get membership for a user in a team."""
        result = await self.session.execute(
            select(UserTeam).where(
                UserTeam.user_id == user_id,
                UserTeam.team_id == team_id,
            )
        )
        return result.scalar_one_or_none()

    async def list_user_memberships(self, user_id: UUID) -> list[UserTeam]:
        """List all team memberships of a user."""
        result = await self.session.execute(select(UserTeam).where(UserTeam.user_id == user_id))
        return list(result.scalars().all())

    async def user_is_member(self, user_id: UUID, team_id: UUID) -> bool:
        membership = await self.get_membership(user_id, team_id)
        return membership is not None

    def create_membership(
        self,
        user_id: UUID,
        team_id: UUID,
        role: TeamRole = TeamRole.MEMBER,
    ) -> UserTeam:
        """Create a new membership (add to session, no commit)."""
        membership = UserTeam(user_id=user_id, team_id=team_id, role=role.value)
        self.session.add(membership)
        return membership
