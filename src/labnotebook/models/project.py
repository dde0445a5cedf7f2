"""Project models."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.labnotebook.models.base import utc_now
from src.labnotebook.models.enums import ProjectRole, Visibility


class Project(SQLModel, table=True):
    """Project owned by exactly one team.

    Archived rather than deleted; `visibility` decides default access for
    team members without an explicit project link.
    """

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    team_id: UUID = Field(foreign_key="teams.id", index=True)
    name: str = Field(max_length=255, index=True)
    visibility: str = Field(default=Visibility.HIDDEN.value, max_length=20)
    archived: bool = Field(default=False)
    archived_on: datetime | None = Field(default=None)
    archived_by_id: UUID | None = Field(default=None, foreign_key="users.id")
    restored_on: datetime | None = Field(default=None)
    restored_by_id: UUID | None = Field(default=None, foreign_key="users.id")
    created_by_id: UUID | None = Field(default=None, foreign_key="users.id")
    last_modified_by_id: UUID | None = Field(default=None, foreign_key="users.id")
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def visibility_enum(self) -> Visibility:
        return Visibility(self.visibility)


class UserProject(SQLModel, table=True):
    """Explicit user-project membership link."""

    __tablename__ = "user_projects"

    user_id: UUID = Field(foreign_key="users.id", primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", primary_key=True)
    role: str = Field(default=ProjectRole.NORMAL_USER.value, max_length=50)
    assigned_by_id: UUID | None = Field(default=None, foreign_key="users.id")
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def role_enum(self) -> ProjectRole:
        return ProjectRole(self.role)
