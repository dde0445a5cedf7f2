"""Repository (inventory) models: repositories, share links, columns, rows and cells."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.labnotebook.models.base import utc_now
from src.labnotebook.models.enums import ColumnDataType, PermissionLevel


class Repository(SQLModel, table=True):
    """Inventory owned by one team, optionally shared with others."""

    __tablename__ = "repositories"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    team_id: UUID = Field(foreign_key="teams.id", index=True)
    name: str = Field(max_length=255, index=True)
    permission_level: str = Field(default=PermissionLevel.NOT_SHARED.value, max_length=20)
    archived: bool = Field(default=False)
    archived_on: datetime | None = Field(default=None)
    created_by_id: UUID | None = Field(default=None, foreign_key="users.id")
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def permission_level_enum(self) -> PermissionLevel:
        return PermissionLevel(self.permission_level)


class RepositoryShare(SQLModel, table=True):
    """Share link granting another team read or write access to a repository."""

    __tablename__ = "team_repositories"

    repository_id: UUID = Field(foreign_key="repositories.id", primary_key=True)
    team_id: UUID = Field(foreign_key="teams.id", primary_key=True)
    permission_level: str = Field(default=PermissionLevel.SHARED_READ.value, max_length=20)
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def permission_level_enum(self) -> PermissionLevel:
        return PermissionLevel(self.permission_level)


class RepositoryColumn(SQLModel, table=True):
    """Custom column of a repository."""

    __tablename__ = "repository_columns"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    repository_id: UUID = Field(foreign_key="repositories.id", index=True)
    name: str = Field(max_length=255)
    data_type: str = Field(default=ColumnDataType.TEXT.value, max_length=20)
    created_by_id: UUID | None = Field(default=None, foreign_key="users.id")
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def data_type_enum(self) -> ColumnDataType:
        return ColumnDataType(self.data_type)


class RepositoryRow(SQLModel, table=True):
    """Item of a repository. The integer id is user-facing and searchable."""

    __tablename__ = "repository_rows"

    id: int | None = Field(default=None, primary_key=True)
    repository_id: UUID = Field(foreign_key="repositories.id", index=True)
    name: str = Field(max_length=255)
    created_by_id: UUID = Field(foreign_key="users.id")
    archived: bool = Field(default=False)
    archived_on: datetime | None = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class RepositoryCell(SQLModel, table=True):
    """Value of one column for one row, stored as its text rendering."""

    __tablename__ = "repository_cells"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    repository_row_id: int = Field(foreign_key="repository_rows.id", index=True)
    repository_column_id: UUID = Field(foreign_key="repository_columns.id")
    value: str = Field(default="")
    created_at: datetime = Field(default_factory=utc_now)
