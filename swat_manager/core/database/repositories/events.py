"""
Calendar event repository.

Events are listed per owner, optionally inside a [start, end) window.
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.events import Event
from .base import SQLModelRepository


class EventRepository(SQLModelRepository[Event]):
    """Repository for calendar events."""

    default_order = "start_date"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Event)

    async def list_by_user(self, user_id: str) -> List[Event]:
        """List every event owned by a user, earliest first."""
        return await self.list(filters={"user_id": user_id})

    async def list_by_user_in_range(self, user_id: str, start: datetime, end: datetime) -> List[Event]:
        """List a user's events starting inside [start, end)."""
        stmt = (
            select(Event)
            .where((Event.user_id == user_id) & (Event.start_date >= start) & (Event.start_date < end))
            .order_by(Event.start_date)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
