"""
Fixtures for the end-to-end tests.

The application runs against a file-backed SQLite database seeded with the
official questionnaire, with a fresh session per request exactly as in
production. Only the engine and the report directory are swapped.
"""

from typing import AsyncGenerator, Dict

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from swat_manager.core.database.utils import create_all, create_engine, create_sessionmaker
from swat_manager.core.seed.loader import seed_database
from swat_manager.server.core.config import StorageConfig, settings
from swat_manager.server.services.reports import ReportStorage


@pytest_asyncio.fixture
async def e2e_sessionmaker(tmp_path):
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'swat.db'}")
    await create_all(engine)
    session_maker = create_sessionmaker(engine)
    async with session_maker() as session:
        await seed_database(session, include_samples=True)

    yield session_maker

    await engine.dispose()


@pytest.fixture
def e2e_storage(tmp_path) -> ReportStorage:
    return ReportStorage(StorageConfig(reports_dir=str(tmp_path / "reports")))


@pytest_asyncio.fixture
async def e2e_client(e2e_sessionmaker, e2e_storage) -> AsyncGenerator[AsyncClient, None]:
    from swat_manager.core.database import get_session
    from swat_manager.server.main import app
    from swat_manager.server.services.reports import get_report_storage

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        async with e2e_sessionmaker() as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_report_storage] = lambda: e2e_storage

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def admin_headers(e2e_client: AsyncClient) -> Dict[str, str]:
    response = await e2e_client.post(
        "/api/v1/login", json={"email": settings.admin_email, "password": settings.admin_password}
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
