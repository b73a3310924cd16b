"""
Message entity model.

Internal messages between administrators and agency users. A null
``recipient_id`` addresses the agency as a whole (or, with a null agency too,
every agency user).
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, UTCDateTime, new_id, utc_now



class MessageBase(Base):
    """Base fields for messages."""

    subject: str = Field(max_length=255, description="Subject line")
    content: str = Field(description="Message body")
    recipient_id: Optional[str] = Field(
        default=None, foreign_key="users.id", ondelete="SET NULL", index=True, description="Addressed user"
    )
    category: str = Field(default="general", max_length=16, description="Message category")
    priority: str = Field(default="medium", max_length=8, description="low, medium, high or urgent")
    parent_message_id: Optional[str] = Field(default=None, max_length=64, description="Message this replies to")


class Message(MessageBase, table=True):
    """Persistent message.

    Table: messages
    """

    __tablename__ = "messages"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    sender_id: str = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    agency_id: Optional[str] = Field(default=None, foreign_key="agencies.id", ondelete="SET NULL", index=True)
    sent_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    read: bool = Field(default=False)
    read_at: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
    archived: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)

    def __repr__(self) -> str:
        return f"Message(id={self.id}, sender={self.sender_id}, recipient={self.recipient_id})"
