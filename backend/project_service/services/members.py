"""Member service."""

import logging
import uuid
from collections.abc import AsyncIterator

from sqlalchemy.exc import IntegrityError

from project_service.models.member import Member, ProjectRole
from project_service.repositories.member import MemberRepository
from project_service.repositories.project import ProjectRepository
from project_service.services.exceptions import (
    MemberConflictError,
    MemberNotFoundError,
    ProjectNotFoundError,
)

logger = logging.getLogger(__name__)


class MemberService:
    """Service for project membership."""

    def __init__(self, member_repo: MemberRepository, project_repo: ProjectRepository):
        self.member_repo = member_repo
        self.project_repo = project_repo

    def get_members(self, project_id: uuid.UUID) -> AsyncIterator[Member]:
        """Return all members of a project."""
        logger.debug("get_members %s", project_id)
        return self.member_repo.find_by_project_id(project_id)

    async def is_member(self, project_id: uuid.UUID, user_id: uuid.UUID) -> bool:
        logger.debug("is_member %s %s", project_id, user_id)
        return await self.member_repo.exists_by_user_id_and_project_id(user_id, project_id)

    async def add_member(
        self, project_id: uuid.UUID, user_id: uuid.UUID, role: ProjectRole
    ) -> Member:
        """Add a user to a project. Idempotent.

        Adding a user that already is a member with the same role returns the
        existing member.

        Raises:
            ProjectNotFoundError: If the project does not exist.
            MemberConflictError: If the user is a member with a different role.
        """
        logger.debug("add_member %s %s %s", project_id, user_id, role)
        role = ProjectRole(role)
        if await self.project_repo.find_by_id(project_id) is None:
            raise ProjectNotFoundError(f"Project {project_id} not found")

        existing = await self.member_repo.find_member_of_project(project_id, user_id)
        if existing is not None:
            return self._existing_member(existing, role)

        try:
            member = await self.member_repo.insert(
                Member(project_id=project_id, user_id=user_id, project_role=role)
            )
        except IntegrityError:
            # Lost a race against a concurrent insert of the same membership
            existing = await self.member_repo.find_member_of_project(project_id, user_id)
            if existing is None:
                raise
            logger.debug("add_member %s %s raced with a concurrent insert", project_id, user_id)
            return self._existing_member(existing, role)

        logger.info("Added user %s to project %s as %s", user_id, project_id, role.value)
        return member

    @staticmethod
    def _existing_member(existing: Member, role: ProjectRole) -> Member:
        if existing.project_role == role:
            return existing
        raise MemberConflictError(
            "User is already member of project with a different project role"
        )

    async def update_member_role(
        self, project_id: uuid.UUID, user_id: uuid.UUID, role: ProjectRole
    ) -> Member:
        """Change the role of a member.

        Raises:
            MemberNotFoundError: If the user is not a member of the project.
        """
        logger.debug("update_member_role %s %s %s", project_id, user_id, role)
        role = ProjectRole(role)
        member = await self.member_repo.find_member_of_project(project_id, user_id)
        if member is None:
            raise MemberNotFoundError("Member does not exist")

        old_role = member.project_role
        member.project_role = role
        member = await self.member_repo.save(member)
        logger.info(
            "Changed role of user %s in project %s from %s to %s",
            user_id,
            project_id,
            ProjectRole(old_role).value,
            role.value,
        )
        return member

    async def delete_member(self, project_id: uuid.UUID, user_id: uuid.UUID) -> uuid.UUID:
        """Remove a user from a project.

        Raises:
            MemberNotFoundError: If the user is not a member of the project.

        Returns:
            Id of the removed user.
        """
        logger.debug("delete_member %s %s", project_id, user_id)
        deleted = await self.member_repo.delete_by_user_id_and_project_id(user_id, project_id)
        if not deleted:
            raise MemberNotFoundError("Member does not exist")
        logger.info("Removed user %s from project %s", user_id, project_id)
        return user_id

    async def delete_members_of_project(self, project_id: uuid.UUID) -> int:
        """Remove every member of a project.

        Returns:
            Number of removed members.
        """
        logger.debug("delete_members_of_project %s", project_id)
        return await self.member_repo.delete_by_project_id(project_id)
