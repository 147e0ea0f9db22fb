"""Project repository.

List queries stream rows from the database lazily and hand them out as an
async iterator, so callers can forward the sequence without materializing it.
"""

from __future__ import annotations

import uuid
from collections.abc import AsyncIterator

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from project_service.models.member import Member
from project_service.models.project import Project


class ProjectRepository:
    """Repository for Project persistence."""

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session.

        Args:
            db: Async SQLAlchemy session.
        """
        self.db = db

    async def find_all(self) -> AsyncIterator[Project]:
        """Stream all stored projects, oldest first.

        Yields:
            Project rows as they arrive from the database.
        """
        result = await self.db.stream_scalars(
            select(Project).order_by(Project.create_time, Project.id)
        )
        async for project in result:
            yield project

    async def find_all_by_member(self, user_id: uuid.UUID) -> AsyncIterator[Project]:
        """Stream all projects in which the user is a member.

        Args:
            user_id: UUID of the user.

        Yields:
            Project rows the user belongs to.
        """
        result = await self.db.stream_scalars(
            select(Project)
            .join(Member, Member.project_id == Project.id)
            .where(Member.user_id == user_id)
            .order_by(Project.create_time, Project.id)
        )
        async for project in result:
            yield project

    async def find_by_id(self, project_id: uuid.UUID) -> Project | None:
        """Get project by ID.

        Args:
            project_id: UUID of the project.

        Returns:
            Project if found, None otherwise.
        """
        result = await self.db.execute(select(Project).where(Project.id == project_id))
        return result.scalar_one_or_none()

    async def save(self, project: Project) -> Project:
        """Insert or update a project.

        Args:
            project: Project to persist.

        Returns:
            The saved project with server defaults loaded.
        """
        self.db.add(project)
        await self.db.flush()
        await self.db.refresh(project)
        return project

    async def delete(self, project: Project) -> None:
        """Delete a project (members cascade via FK)."""
        await self.db.delete(project)
        await self.db.flush()
