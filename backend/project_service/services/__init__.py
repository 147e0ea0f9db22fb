"""Service layer mediating between routes and repositories."""

from project_service.services.exceptions import (
    MemberConflictError,
    MemberNotFoundError,
    ProjectNotFoundError,
)
from project_service.services.members import MemberService
from project_service.services.projects import ProjectService

__all__ = [
    "MemberConflictError",
    "MemberNotFoundError",
    "MemberService",
    "ProjectNotFoundError",
    "ProjectService",
]
