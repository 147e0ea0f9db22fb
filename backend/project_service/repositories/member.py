"""Member repository."""

from __future__ import annotations

import uuid
from collections.abc import AsyncIterator

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from project_service.models.member import Member


class MemberRepository:
    """Repository for Member persistence."""

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session.

        Args:
            db: Async SQLAlchemy session.
        """
        self.db = db

    async def find_by_project_id(self, project_id: uuid.UUID) -> AsyncIterator[Member]:
        """Stream all members of a project.

        Args:
            project_id: UUID of the project.

        Yields:
            Member rows of the project.
        """
        result = await self.db.stream_scalars(
            select(Member).where(Member.project_id == project_id).order_by(Member.id)
        )
        async for member in result:
            yield member

    async def find_member_of_project(
        self, project_id: uuid.UUID, user_id: uuid.UUID
    ) -> Member | None:
        """Get the membership of a user in a project.

        Returns:
            Member if the user belongs to the project, None otherwise.
        """
        result = await self.db.execute(
            select(Member).where(
                Member.project_id == project_id,
                Member.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def exists_by_user_id_and_project_id(
        self, user_id: uuid.UUID, project_id: uuid.UUID
    ) -> bool:
        """Check whether a user is a member of a project."""
        result = await self.db.execute(
            select(
                exists().where(
                    Member.user_id == user_id,
                    Member.project_id == project_id,
                )
            )
        )
        return bool(result.scalar())

    async def save(self, member: Member) -> Member:
        """Insert or update a member.

        Args:
            member: Member to persist.

        Returns:
            The saved member.
        """
        self.db.add(member)
        await self.db.flush()
        await self.db.refresh(member)
        return member

    async def insert(self, member: Member) -> Member:
        """Insert a new member inside a savepoint.

        A unique-constraint violation rolls back only the savepoint, so the
        session stays usable for a follow-up read.

        Raises:
            IntegrityError: If the user already is a member of the project.
        """
        async with self.db.begin_nested():
            self.db.add(member)
            await self.db.flush()
        await self.db.refresh(member)
        return member

    async def delete_by_user_id_and_project_id(
        self, user_id: uuid.UUID, project_id: uuid.UUID
    ) -> bool:
        """Remove a user from a project.

        Returns:
            True if a member row was deleted, False if none matched.
        """
        result = await self.db.execute(
            delete(Member).where(
                Member.user_id == user_id,
                Member.project_id == project_id,
            )
        )
        return result.rowcount > 0

    async def delete_by_project_id(self, project_id: uuid.UUID) -> int:
        """Remove all members of a project.

        Returns:
            Number of deleted member rows.
        """
        result = await self.db.execute(
            delete(Member).where(Member.project_id == project_id)
        )
        return result.rowcount
