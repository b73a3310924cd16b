"""
Message I/O models.

``MessageRead`` is enriched with display names so clients do not have to
resolve user ids themselves.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..domain.enums import MessageCategory, MessagePriority


class MessageCreate(BaseModel):
    """Schema for sending a message. Sender and agency come from the current user."""

    subject: str = Field(min_length=1)
    content: str = Field(min_length=1)
    recipient_id: Optional[str] = Field(default=None, description="Addressed user; empty for a broadcast")
    category: MessageCategory = MessageCategory.general
    priority: MessagePriority = MessagePriority.medium
    parent_message_id: Optional[str] = None

    class Config:
        use_enum_values = True


class MessageRead(BaseModel):
    id: str
    subject: str
    content: str
    sender_id: str
    recipient_id: Optional[str] = None
    agency_id: Optional[str] = None
    category: str
    priority: str
    parent_message_id: Optional[str] = None
    sent_at: datetime
    read: bool = False
    read_at: Optional[datetime] = None
    archived: bool = False
    sender_name: Optional[str] = None
    sender_role: Optional[str] = None
    recipient_name: Optional[str] = None

    class Config:
        from_attributes = True
