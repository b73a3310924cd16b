"""
Data access layer.

One repository per aggregate, all built on ``SQLModelRepository`` and
collected in ``SqlRepoBundle``.
"""

from .base import AgencyScopedRepository, BaseRepository, QueryBuilder, SQLModelRepository
from .bundle import SqlRepoBundle, build_sql_repos_from_session

__all__ = [
    "AgencyScopedRepository",
    "BaseRepository",
    "QueryBuilder",
    "SQLModelRepository",
    "SqlRepoBundle",
    "build_sql_repos_from_session",
]
