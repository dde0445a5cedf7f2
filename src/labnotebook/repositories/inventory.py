"""Repositories for inventories (the Repository entity), their shares, columns and rows."""

from collections.abc import Collection
from uuid import UUID

from sqlalchemy import func, or_
from sqlmodel import col, select

from src.labnotebook.models import (
    EXTRA_SEARCHABLE_DATA_TYPES,
    GLOBALLY_SHARED_LEVELS,
    Repository,
    RepositoryCell,
    RepositoryColumn,
    RepositoryRow,
    RepositoryShare,
)
from src.labnotebook.repositories.base import BaseRepository


class InventoryRepository(BaseRepository[Repository]):
    """Repository for Repository (inventory) entity and its share links."""

    model = Repository

    async def list_share_candidates(self, team_ids: Collection[UUID]) -> list[Repository]:
        """Repositories that may be visible to any of the teams.

        Owned by, linked to, or globally shared. The visibility policy makes
        the final decision per team.
        """
        if not team_ids:
            return []
        query = (
            select(Repository)
            .outerjoin(RepositoryShare, RepositoryShare.repository_id == Repository.id)
            .where(
                or_(
                    col(Repository.team_id).in_(team_ids),
                    col(RepositoryShare.team_id).in_(team_ids),
                    col(Repository.permission_level).in_(
                        [level.value for level in GLOBALLY_SHARED_LEVELS]
                    ),
                )
            )
            .distinct()
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_shares(self, repository_ids: Collection[UUID]) -> list[RepositoryShare]:
        """Share links of the given repositories."""
        if not repository_ids:
            return []
        result = await self.session.execute(
            select(RepositoryShare).where(col(RepositoryShare.repository_id).in_(repository_ids))
        )
        return list(result.scalars().all())

    async def get_share(self, repository_id: UUID, team_id: UUID) -> RepositoryShare | None:
        result = await self.session.execute(
            select(RepositoryShare).where(
                RepositoryShare.repository_id == repository_id,
                RepositoryShare.team_id == team_id,
            )
        )
        return result.scalar_one_or_none()

    async def get_by_name_in_team(self, team_id: UUID, name: str) -> Repository | None:
        """Get repository by name within a team, ignoring case."""
        result = await self.session.execute(
            select(Repository).where(
                Repository.team_id == team_id,
                func.lower(Repository.name) == name.lower(),
            )
        )
        return result.scalars().first()

    async def count_all(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Repository))
        return result.scalar_one()

    async def count_by_team(self, team_id: UUID) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(Repository).where(Repository.team_id == team_id)
        )
        return result.scalar_one()

    async def list_columns(self, repository_id: UUID) -> list[RepositoryColumn]:
        """Columns of a repository in creation order."""
        result = await self.session.execute(
            select(RepositoryColumn)
            .where(RepositoryColumn.repository_id == repository_id)
            .order_by(col(RepositoryColumn.created_at))
        )
        return list(result.scalars().all())


class InventoryRowRepository(BaseRepository[RepositoryRow]):
    """Repository for RepositoryRow entity and its searchable cells."""

    model = RepositoryRow

    async def list_by_repository_ids(self, repository_ids: Collection[UUID]) -> list[RepositoryRow]:
        if not repository_ids:
            return []
        result = await self.session.execute(
            select(RepositoryRow).where(col(RepositoryRow.repository_id).in_(repository_ids))
        )
        return list(result.scalars().all())

    async def list_searchable_cell_values(self, row_ids: Collection[int]) -> list[tuple[int, str]]:
        """(row id, value) for cells in columns whose type takes part in search."""
        if not row_ids:
            return []
        result = await self.session.execute(
            select(RepositoryCell.repository_row_id, RepositoryCell.value)
            .join(RepositoryColumn, RepositoryColumn.id == RepositoryCell.repository_column_id)
            .where(
                col(RepositoryCell.repository_row_id).in_(row_ids),
                col(RepositoryColumn.data_type).in_(
                    [data_type.value for data_type in EXTRA_SEARCHABLE_DATA_TYPES]
                ),
            )
        )
        return [(row_id, value) for row_id, value in result.all()]
