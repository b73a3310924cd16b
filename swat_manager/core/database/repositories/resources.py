"""Resource library repository."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.resources import Resource
from .base import AgencyScopedRepository


class ResourceRepository(AgencyScopedRepository[Resource]):
    """Repository for library resources."""

    default_order = "title"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Resource)
