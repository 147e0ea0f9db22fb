"""FastAPI dependencies wiring repositories into services."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from project_service.database import get_db
from project_service.repositories import MemberRepository, ProjectRepository
from project_service.services import MemberService, ProjectService


def get_member_service(db: AsyncSession = Depends(get_db)) -> MemberService:
    """Build a MemberService bound to the request's session."""
    return MemberService(MemberRepository(db), ProjectRepository(db))


def get_project_service(
    db: AsyncSession = Depends(get_db),
    member_service: MemberService = Depends(get_member_service),
) -> ProjectService:
    """Build a ProjectService bound to the request's session."""
    return ProjectService(ProjectRepository(db), member_service)
