"""Pydantic schemas for the Member API."""

from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict


# === Enums (match SQLAlchemy enums) ===


class ProjectRole(str, Enum):
    """Role of a member within a project."""

    ADMIN = "ADMIN"
    USER = "USER"


# === API Request/Response Schemas ===


class MemberCreate(BaseModel):
    """Schema for adding a member to a project."""

    user_id: UUID
    project_role: ProjectRole = ProjectRole.USER


class MemberUpdate(BaseModel):
    """Schema for changing a member's role."""

    project_role: ProjectRole


class MemberResponse(BaseModel):
    """Schema for member in API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    project_id: UUID
    user_id: UUID
    project_role: ProjectRole
