"""
Calendar event entity model.

Events belong to the user who scheduled them and optionally to an agency.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlmodel import JSON, Field

from ..base import Base, UTCDateTime, new_id, utc_now



class EventBase(Base):
    """Base fields for calendar events."""

    title: str = Field(max_length=255, description="Event title")
    description: Optional[str] = Field(default=None, description="Event details")
    start_date: datetime = Field(index=True, description="UTC start of the event", sa_type=UTCDateTime)
    end_date: Optional[datetime] = Field(default=None, description="UTC end of the event", sa_type=UTCDateTime)
    start_time: Optional[str] = Field(default=None, max_length=5, description="Local start time (HH:MM)")
    end_time: Optional[str] = Field(default=None, max_length=5, description="Local end time (HH:MM)")
    location: Optional[str] = Field(default=None, description="Where the event happens")
    event_type: str = Field(default="other", max_length=16, description="Event category")
    priority: str = Field(default="medium", max_length=8, description="low, medium or high")
    status: str = Field(default="scheduled", max_length=16, description="Lifecycle status")
    participants: List[str] = Field(default_factory=list, sa_type=JSON, description="Participant ids or names")
    required_equipment: List[str] = Field(default_factory=list, sa_type=JSON, description="Equipment to bring")
    training_objectives: List[str] = Field(default_factory=list, sa_type=JSON, description="Objectives for trainings")
    agency_id: Optional[str] = Field(
        default=None, foreign_key="agencies.id", ondelete="CASCADE", index=True, description="Agency, if any"
    )
    user_id: str = Field(foreign_key="users.id", ondelete="CASCADE", index=True, description="Owner")


class Event(EventBase, table=True):
    """Persistent calendar event.

    Table: events
    """

    __tablename__ = "events"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now}, sa_type=UTCDateTime)

    def __repr__(self) -> str:
        return f"Event(id={self.id}, title={self.title}, start={self.start_date})"
