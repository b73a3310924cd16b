"""Mission repository."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.missions import Mission
from .base import AgencyScopedRepository


class MissionRepository(AgencyScopedRepository[Mission]):
    """Repository for missions."""

    default_order = "start_date"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Mission)
