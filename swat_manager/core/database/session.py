"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from swat_manager.core.logging_config import get_logger
from swat_manager.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)

engine = create_engine(settings.database_url)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """
    Initialize the database.

    Creates any missing tables from the ORM metadata. Against PostgreSQL the
    Alembic migration is the source of truth and has already created them,
    so this is a no-op there; SQLite deployments and local runs rely on it.
    """
    if engine.dialect.name == "postgresql":
        logger.debug("Skipping create_all on PostgreSQL, schema is managed by Alembic")
        return
    await create_all(engine)
    logger.info(f"Database tables ensured on {engine.dialect.name}")
