"""
Command line entry point for seeding a database.

    swat-manager-seed --database-url sqlite+aiosqlite:///./swat.db --prune
"""

from __future__ import annotations

import asyncio
from typing import Optional

import click

from swat_manager.core.database.utils import create_all, create_engine, create_sessionmaker
from swat_manager.core.logging_config import get_logger, setup_logging
from swat_manager.server.core.config import settings

from .loader import SeedReport, seed_database

logger = get_logger(__name__)


async def _run(database_url: str, prune: bool, include_samples: bool) -> SeedReport:
    engine = create_engine(database_url)
    try:
        if engine.dialect.name != "postgresql":
            await create_all(engine)
        async with create_sessionmaker(engine)() as session:
            return await seed_database(session, prune=prune, include_samples=include_samples)
    finally:
        await engine.dispose()


@click.command()
@click.option(
    "--database-url",
    type=str,
    default=None,
    help="Database to seed. Defaults to DATABASE_URL from the environment.",
)
@click.option(
    "--prune/--no-prune",
    default=False,
    show_default=True,
    help="Delete questions of seeded categories that are no longer in the official templates.",
)
@click.option(
    "--skip-samples",
    is_flag=True,
    default=False,
    help="Do not insert the sample agencies.",
)
def main(database_url: Optional[str], prune: bool, skip_samples: bool) -> None:
    """Load the official questionnaires, the administrator and the sample agencies."""
    setup_logging(enable_file=False)
    url = database_url or settings.database_url
    report = asyncio.run(_run(url, prune=prune, include_samples=not skip_samples))
    click.echo(f"Seed finished: {report}")


if __name__ == "__main__":
    main()
