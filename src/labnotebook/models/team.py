"""Team (tenant boundary), user and membership models."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.labnotebook.models.base import utc_now
from src.labnotebook.models.enums import TeamRole


class Team(SQLModel, table=True):
    """Tenant boundary owning projects and repositories."""

    __tablename__ = "teams"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100, index=True)
    created_at: datetime = Field(default_factory=utc_now)


class User(SQLModel, table=True):
    """A principal. Authentication happens elsewhere; we only read identity."""

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(max_length=255, unique=True, index=True)
    full_name: str = Field(max_length=100)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class UserTeam(SQLModel, table=True):
    """Junction table for user-team membership. Owned by the team side."""

    __tablename__ = "user_teams"

    user_id: UUID = Field(foreign_key="users.id", primary_key=True)
    team_id: UUID = Field(foreign_key="teams.id", primary_key=True)
    role: str = Field(default=TeamRole.MEMBER.value, max_length=50)
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def role_enum(self) -> TeamRole:
        return TeamRole(self.role)
