"""
Personnel repository.

Team members are listed per agency; badge numbers are unique platform-wide.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.personnel import Personnel
from .base import AgencyScopedRepository


class PersonnelRepository(AgencyScopedRepository[Personnel]):
    """Repository for team members."""

    default_order = "last_name"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Personnel)

    async def get_by_badge_number(self, badge_number: str) -> Optional[Personnel]:
        """Get the team member holding a badge number."""
        stmt = select(Personnel).where(Personnel.badge_number == badge_number)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
