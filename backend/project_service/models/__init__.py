"""SQLAlchemy models."""

from project_service.models.member import Member, ProjectRole
from project_service.models.project import Project

__all__ = [
    "Member",
    "Project",
    "ProjectRole",
]
