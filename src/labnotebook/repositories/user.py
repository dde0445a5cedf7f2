"""Repository for User entity."""

from collections.abc import Collection
from uuid import UUID

from sqlmodel import col, select

from src.labnotebook.models import User
from src.labnotebook.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User entity."""

    model = User

    async def get_full_names(self, user_ids: Collection[UUID]) -> dict[UUID, str]:
        """Map user ids to full names."""
        if not user_ids:
            return {}
        result = await self.session.execute(
            select(User.id, User.full_name).where(col(User.id).in_(user_ids))
        )
        return {user_id: full_name for user_id, full_name in result.all()}
