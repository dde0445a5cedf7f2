"""Repository (inventory) schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.labnotebook.models.enums import PermissionLevel


class RepositoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Repository name cannot be empty or whitespace only")
        return v


class RepositoryCopy(RepositoryCreate):
    """Name for the copy of a repository."""


class RepositoryPermissionUpdate(BaseModel):
    permission_level: PermissionLevel


class RepositoryShareRequest(BaseModel):
    permission_level: PermissionLevel = PermissionLevel.SHARED_READ


class RepositoryShareRead(BaseModel):
    repository_id: UUID
    team_id: UUID
    permission_level: PermissionLevel
    created_at: datetime

    model_config = {"from_attributes": True}


class RepositoryRead(BaseModel):
    id: UUID
    team_id: UUID
    name: str
    permission_level: PermissionLevel
    archived: bool
    archived_on: datetime | None = None
    created_by_id: UUID | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class RepositoryRowRead(BaseModel):
    id: int
    repository_id: UUID
    name: str
    created_by_id: UUID
    archived: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class RepositoryRowCounts(BaseModel):
    """Matching row counts per repository, for the unpaginated summary search."""

    counts: dict[UUID, int]
