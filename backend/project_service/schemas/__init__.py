"""Pydantic schemas."""

from project_service.schemas.member import (
    MemberCreate,
    MemberResponse,
    MemberUpdate,
    ProjectRole,
)
from project_service.schemas.project import (
    ProjectCreate,
    ProjectResponse,
    ProjectUpdate,
)

__all__ = [
    # Project schemas
    "ProjectCreate",
    "ProjectResponse",
    "ProjectUpdate",
    # Member schemas
    "MemberCreate",
    "MemberResponse",
    "MemberUpdate",
    "ProjectRole",
]
