"""Repository layer for data access.

Repositories encapsulate database operations and provide a clean interface
for queries and writes on projects and members.
"""

from project_service.repositories.member import MemberRepository
from project_service.repositories.project import ProjectRepository

__all__ = ["MemberRepository", "ProjectRepository"]
