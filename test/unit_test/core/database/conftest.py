"""Test configuration for database unit tests.

This module provides common fixtures for testing the persistence layer with
in-memory SQLite and mocked sessions.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from swat_manager.core.database import entities  # noqa: F401  registers every table
from swat_manager.core.database.base import Base
from swat_manager.core.database.repositories import SqlRepoBundle, build_sql_repos_from_session

UTC = timezone.utc


@pytest_asyncio.fixture
async def in_memory_engine() -> AsyncGenerator:
    """Create in-memory SQLite engine with every table created."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def in_memory_session(in_memory_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    session_maker = async_sessionmaker(bind=in_memory_engine, class_=AsyncSession, expire_on_commit=False)

    async with session_maker() as session:
        yield session


@pytest.fixture
def repos(in_memory_session: AsyncSession) -> SqlRepoBundle:
    return build_sql_repos_from_session(session=in_memory_session)


@pytest.fixture
def mock_session() -> AsyncMock:
    """Session double for repositories that only need add/commit/refresh/delete."""
    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    session.commit = AsyncMock()
    session.refresh = AsyncMock()
    session.delete = AsyncMock()
    session.execute = AsyncMock()
    return session


@pytest.fixture
def sample_agency_data() -> dict:
    return {
        "name": "Los Angeles Police Department",
        "jurisdiction": "Los Angeles, CA",
        "contact_name": "Jane Doe",
        "contact_email": "jane.doe@lapd.org",
        "population_served": 3_900_000,
    }


@pytest.fixture
def sample_user_data() -> dict:
    return {
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "Jane.Doe@LAPD.org",
        "role": "agency",
        "password_hash": "hashed",
    }


@pytest.fixture
def sample_event_data() -> dict:
    return {
        "title": "Range qualification",
        "start_date": datetime(2025, 3, 12, 9, 0, tzinfo=UTC),
        "start_time": "09:00",
        "event_type": "training",
    }
