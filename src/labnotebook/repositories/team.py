"""Repository for Team entity."""

from collections.abc import Collection
from uuid import UUID

from sqlmodel import col, select

from src.labnotebook.models import Team
from src.labnotebook.repositories.base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    """Repository for Team entity."""

    model = Team

    async def list_by_ids(self, team_ids: Collection[UUID]) -> list[Team]:
        if not team_ids:
            return []
        result = await self.session.execute(select(Team).where(col(Team.id).in_(team_ids)))
        return list(result.scalars().all())
