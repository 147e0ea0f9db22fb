"""Project service.

Implements the functionality to handle projects. List operations return the
repository's async iterator unchanged; the caller decides when to drain it.
"""

import logging
import uuid
from collections.abc import AsyncIterator

from project_service.models.member import ProjectRole
from project_service.models.project import Project
from project_service.repositories.project import ProjectRepository
from project_service.schemas.project import ProjectCreate
from project_service.services.exceptions import ProjectNotFoundError
from project_service.services.members import MemberService

logger = logging.getLogger(__name__)


class ProjectService:
    """Service for project queries and writes."""

    def __init__(self, project_repo: ProjectRepository, member_service: MemberService):
        self.project_repo = project_repo
        self.member_service = member_service

    def get_all_projects(self) -> AsyncIterator[Project]:
        """Return all stored projects.

        Calls the repository exactly once and hands back its sequence as is.
        """
        logger.debug("get_all_projects")
        return self.project_repo.find_all()

    def get_all_projects_of_user(self, user_id: uuid.UUID) -> AsyncIterator[Project]:
        """Return all projects that include the user as a member."""
        logger.debug("get_all_projects_of_user %s", user_id)
        return self.project_repo.find_all_by_member(user_id)

    async def get_project_by_id(self, project_id: uuid.UUID) -> Project:
        """Return the project with the given id.

        Raises:
            ProjectNotFoundError: If the project does not exist.
        """
        logger.debug("get_project_by_id %s", project_id)
        project = await self.project_repo.find_by_id(project_id)
        if project is None:
            raise ProjectNotFoundError(f"Project {project_id} not found")
        return project

    async def create_project(self, project_data: ProjectCreate) -> Project:
        """Create a project and add its creator as the first ADMIN member.

        Args:
            project_data: Name and optional creator of the new project.

        Returns:
            The persisted project.
        """
        logger.debug("create_project %s %s", project_data.name, project_data.creator_id)
        project = await self.project_repo.save(
            Project(name=project_data.name, creator_id=project_data.creator_id)
        )
        if project.creator_id is not None:
            await self.member_service.add_member(project.id, project.creator_id, ProjectRole.ADMIN)
        logger.info("Created project %s (%s)", project.id, project.name)
        return project

    async def update_project_name(self, project_id: uuid.UUID, name: str) -> Project:
        """Rename a project.

        Raises:
            ProjectNotFoundError: If the project does not exist.
        """
        logger.debug("update_project_name %s %s", project_id, name)
        project = await self.get_project_by_id(project_id)
        old_name = project.name
        project.name = name
        project = await self.project_repo.save(project)
        logger.info("Renamed project %s from %r to %r", project_id, old_name, name)
        return project

    async def delete_project(self, project_id: uuid.UUID) -> uuid.UUID:
        """Delete a project together with its members.

        Raises:
            ProjectNotFoundError: If the project does not exist.

        Returns:
            Id of the deleted project.
        """
        logger.debug("delete_project %s", project_id)
        project = await self.get_project_by_id(project_id)
        await self.member_service.delete_members_of_project(project_id)
        await self.project_repo.delete(project)
        logger.info("Deleted project %s", project_id)
        return project_id
