"""Pydantic schemas for the Project API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ProjectCreate(BaseModel):
    """Schema for creating a new project."""

    name: str = Field(min_length=1, max_length=255)
    creator_id: UUID | None = Field(
        default=None,
        description="User creating the project; added as ADMIN member",
    )


class ProjectUpdate(BaseModel):
    """Schema for renaming a project."""

    name: str = Field(min_length=1, max_length=255)


class ProjectResponse(BaseModel):
    """Schema for project in API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    creator_id: UUID | None
    create_time: datetime
