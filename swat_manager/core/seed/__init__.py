"""
Seed data for a fresh SWAT Manager database.

``seed_database`` is safe to run repeatedly: from the server lifespan when
``SWAT_AUTO_SEED`` is set, from the Alembic migration, or through the
``swat-manager-seed`` command.
"""

from .loader import SeedReport, seed_database

__all__ = ["SeedReport", "seed_database"]
