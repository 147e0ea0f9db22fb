"""Pytest configuration and shared fixtures.

This module provides centralized test fixtures for:
- Project and member factories
- Repository and service doubles
- HTTP client for API testing
- PostgreSQL test database sessions (only when DATABASE_TEST_URL is set)
"""

import os
import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from project_service.database import Base, get_db
from project_service.dependencies import get_member_service, get_project_service
from project_service.main import app
from project_service.models import Member, Project, ProjectRole
from project_service.services import MemberService, ProjectService


async def async_iter(items):
    """Yield items as an async iterator, standing in for a streamed query."""
    for item in items:
        yield item


def make_project(name: str = "Test Project", creator_id: uuid.UUID | None = None) -> Project:
    """Build a detached Project with all fields populated."""
    return Project(
        id=uuid.uuid4(),
        name=name,
        creator_id=creator_id,
        create_time=datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
    )


def make_member(
    project_id: uuid.UUID,
    user_id: uuid.UUID | None = None,
    role: ProjectRole = ProjectRole.USER,
) -> Member:
    """Build a detached Member."""
    return Member(
        id=uuid.uuid4(),
        project_id=project_id,
        user_id=user_id or uuid.uuid4(),
        project_role=role,
    )


# =============================================================================
# Repository / Service Doubles
# =============================================================================


@pytest.fixture
def project_repo() -> MagicMock:
    """Mock ProjectRepository; list queries are plain mocks returning async iterators."""
    repo = MagicMock()
    repo.find_all = MagicMock(return_value=async_iter([]))
    repo.find_all_by_member = MagicMock(return_value=async_iter([]))
    repo.find_by_id = AsyncMock(return_value=None)
    repo.save = AsyncMock(side_effect=lambda obj: obj)
    repo.delete = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def member_repo() -> MagicMock:
    """Mock MemberRepository."""
    repo = MagicMock()
    repo.find_by_project_id = MagicMock(return_value=async_iter([]))
    repo.find_member_of_project = AsyncMock(return_value=None)
    repo.exists_by_user_id_and_project_id = AsyncMock(return_value=False)
    repo.save = AsyncMock(side_effect=lambda obj: obj)
    repo.insert = AsyncMock(side_effect=lambda obj: obj)
    repo.delete_by_user_id_and_project_id = AsyncMock(return_value=True)
    repo.delete_by_project_id = AsyncMock(return_value=0)
    return repo


@pytest.fixture
def member_service(member_repo, project_repo) -> MemberService:
    return MemberService(member_repo, project_repo)


@pytest.fixture
def project_service(project_repo, member_service) -> ProjectService:
    return ProjectService(project_repo, member_service)


@pytest.fixture
def mock_project_service() -> MagicMock:
    """Mock ProjectService for route tests."""
    service = MagicMock()
    service.get_all_projects = MagicMock(return_value=async_iter([]))
    service.get_all_projects_of_user = MagicMock(return_value=async_iter([]))
    service.get_project_by_id = AsyncMock()
    service.create_project = AsyncMock()
    service.update_project_name = AsyncMock()
    service.delete_project = AsyncMock()
    return service


@pytest.fixture
def mock_member_service() -> MagicMock:
    """Mock MemberService for route tests."""
    service = MagicMock()
    service.get_members = MagicMock(return_value=async_iter([]))
    service.is_member = AsyncMock(return_value=False)
    service.add_member = AsyncMock()
    service.update_member_role = AsyncMock()
    service.delete_member = AsyncMock()
    return service


# =============================================================================
# HTTP Client Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def client(mock_project_service, mock_member_service):
    """Async test client for the FastAPI app with mocked services."""
    app.dependency_overrides[get_project_service] = lambda: mock_project_service
    app.dependency_overrides[get_member_service] = lambda: mock_member_service

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    # Clean up overrides
    app.dependency_overrides.pop(get_project_service, None)
    app.dependency_overrides.pop(get_member_service, None)


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine with automatic schema management.

    Creates all tables before tests, drops them after. Skips the test when
    DATABASE_TEST_URL is not set.
    """
    db_url = os.environ.get("DATABASE_TEST_URL")
    if not db_url:
        pytest.skip("DATABASE_TEST_URL not set")

    engine = create_async_engine(db_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncSession:
    """Create test database session with automatic rollback."""
    session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def db_client(test_engine):
    """Async test client wired to the test database through get_db."""
    test_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db():
        async with test_session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.pop(get_db, None)
