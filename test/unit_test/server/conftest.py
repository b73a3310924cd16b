"""
Shared fixtures for the API tests.

Every test gets a fresh in-memory SQLite database, an ASGI client whose
session and report storage are overridden, and a small cast of users:
an administrator, an agency user of the "home" agency and a user of a second
agency.
"""

from typing import AsyncGenerator, Dict
from unittest.mock import patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.pool import StaticPool

from swat_manager.core.database.entities.agencies import Agency
from swat_manager.core.database.entities.users import User
from swat_manager.core.database.repositories import SqlRepoBundle, build_sql_repos_from_session
from swat_manager.core.security import create_access_token, hash_password
from swat_manager.server.core.config import StorageConfig
from swat_manager.server.services.reports import ReportStorage

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def auth_headers(user: User) -> Dict[str, str]:
    """Bearer header for a user."""
    token = create_access_token(user.id, user.role, user.agency_id)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def test_engine():
    """Create a test database engine with every table."""
    from swat_manager.core.database import entities  # noqa: F401
    from swat_manager.core.database.base import Base

    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    async_session_maker = sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async with async_session_maker() as session:  # type: ignore[attr-defined]
        yield session


@pytest.fixture
def repos(session: AsyncSession) -> SqlRepoBundle:
    return build_sql_repos_from_session(session=session)


@pytest.fixture
def report_storage(tmp_path) -> ReportStorage:
    """Report storage rooted in the test's temporary directory."""
    return ReportStorage(StorageConfig(reports_dir=str(tmp_path / "reports")))


@pytest_asyncio.fixture(name="client")
async def client_fixture(session: AsyncSession, report_storage: ReportStorage) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with mocked lifespan and overridden dependencies."""
    from swat_manager.core.database import get_session
    from swat_manager.server.main import app
    from swat_manager.server.services.reports import get_report_storage

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_report_storage] = lambda: report_storage

    # Mock the lifespan to prevent database initialization during tests
    async def mock_lifespan(app):
        yield

    with patch("swat_manager.server.main.lifespan", mock_lifespan):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            yield client

    app.dependency_overrides.clear()


# =====================================================================
# Accounts
# =====================================================================


@pytest_asyncio.fixture
async def agency(repos: SqlRepoBundle, sample_agency_data) -> Agency:
    return await repos.agencies.create(Agency(**sample_agency_data))


@pytest_asyncio.fixture
async def other_agency(repos: SqlRepoBundle) -> Agency:
    return await repos.agencies.create(
        Agency(
            name="Miami-Dade Police Department",
            jurisdiction="Miami-Dade County, FL",
            contact_name="Maria Rodriguez",
            contact_email="mrodriguez@mdpd.gov",
        )
    )


@pytest_asyncio.fixture
async def admin_user(repos: SqlRepoBundle, test_config) -> User:
    return await repos.users.create(
        User(
            first_name="Root",
            last_name="Admin",
            email=test_config.accounts.admin_email,
            role="admin",
            password_hash=hash_password(test_config.accounts.password),
        )
    )


@pytest_asyncio.fixture
async def agency_user(repos: SqlRepoBundle, agency: Agency, test_config) -> User:
    return await repos.users.create(
        User(
            first_name="Jane",
            last_name="Doe",
            email=test_config.accounts.agency_email,
            role="agency",
            agency_id=agency.id,
            password_hash=hash_password(test_config.accounts.password),
        )
    )


@pytest_asyncio.fixture
async def other_user(repos: SqlRepoBundle, other_agency: Agency, test_config) -> User:
    return await repos.users.create(
        User(
            first_name="Carlos",
            last_name="Vega",
            email="cvega@mdpd.org",
            role="agency",
            agency_id=other_agency.id,
            password_hash=hash_password(test_config.accounts.password),
        )
    )


@pytest.fixture
def admin_headers(admin_user: User) -> Dict[str, str]:
    return auth_headers(admin_user)


@pytest.fixture
def agency_headers(agency_user: User) -> Dict[str, str]:
    return auth_headers(agency_user)


@pytest.fixture
def other_headers(other_user: User) -> Dict[str, str]:
    return auth_headers(other_user)


@pytest_asyncio.fixture
async def questionnaire(session: AsyncSession):
    """Load the official questionnaire (no sample agencies)."""
    from swat_manager.core.seed.loader import seed_database

    return await seed_database(session, include_samples=False)
