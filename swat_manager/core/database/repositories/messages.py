"""
Message repository.

Sent and received listings are newest first.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utc_now
from ..entities.messages import Message
from .base import SQLModelRepository


class MessageRepository(SQLModelRepository[Message]):
    """Repository for internal messages."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Message)

    async def list_sent(self, user_id: str) -> List[Message]:
        """List messages sent by a user."""
        stmt = select(Message).where(Message.sender_id == user_id).order_by(Message.sent_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_received(
        self, user_id: str, agency_id: Optional[str] = None, include_broadcasts: bool = False
    ) -> List[Message]:
        """List messages addressed to a user.

        Args:
            user_id: Recipient
            agency_id: The recipient's agency, used to match agency-wide messages
            include_broadcasts: Also return messages without a recipient that target
                the agency, or every agency when their agency is null
        """
        condition = Message.recipient_id == user_id
        if include_broadcasts:
            broadcast = Message.recipient_id.is_(None) & (Message.sender_id != user_id)
            scope = Message.agency_id.is_(None)
            if agency_id:
                scope = or_(scope, Message.agency_id == agency_id)
            condition = or_(condition, broadcast & scope)
        stmt = select(Message).where(condition).order_by(Message.sent_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def mark_read(self, message: Message) -> Message:
        """Flag a message as read now."""
        message.read = True
        message.read_at = utc_now()
        return await self.update(message)
