"""Project schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.labnotebook.models.enums import ProjectRole, Visibility


class ProjectCreate(BaseModel):
    """Schema for creating a project in the current team."""

    name: str = Field(min_length=1, max_length=255)
    visibility: Visibility = Visibility.HIDDEN

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Project name cannot be empty or whitespace only")
        return v


class ProjectUpdate(BaseModel):
    """Schema for updating a project. Omitted fields are left unchanged."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    visibility: Visibility | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                raise ValueError("Project name cannot be empty or whitespace only")
        return v


class ProjectMemberAssign(BaseModel):
    role: ProjectRole = ProjectRole.NORMAL_USER


class ProjectMemberRead(BaseModel):
    user_id: UUID
    project_id: UUID
    role: ProjectRole
    assigned_by_id: UUID | None = None
    created_at: datetime

    model_config = {"from_attributes": True}


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    id: UUID
    team_id: UUID
    name: str
    visibility: Visibility
    archived: bool
    archived_on: datetime | None = None
    created_by_id: UUID | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
