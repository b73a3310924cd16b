"""Unit tests for the persistence layer in swat_manager/core/database.

- Entity model validation tests (SQLModel)
- Repository tests, mocked and against in-memory SQLite
"""
