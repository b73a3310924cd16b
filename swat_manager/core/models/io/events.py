"""
Calendar event I/O models.

Clients send the start as separate ``date`` (YYYY-MM-DD) and ``time`` (HH:MM)
fields; the server combines them into a UTC ``start_date``.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ..domain.enums import EventType, Priority, ScheduleStatus

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^\d{2}:\d{2}$"


class EventRead(BaseModel):
    """Schema for reading an event from the API."""

    id: str
    title: str
    description: Optional[str] = None
    start_date: datetime
    end_date: Optional[datetime] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    location: Optional[str] = None
    event_type: str
    priority: str
    status: str
    participants: List[str] = Field(default_factory=list)
    required_equipment: List[str] = Field(default_factory=list)
    training_objectives: List[str] = Field(default_factory=list)
    agency_id: Optional[str] = None
    user_id: str

    class Config:
        from_attributes = True


class EventCreate(BaseModel):
    """Schema for scheduling an event. The owner is the authenticated user."""

    title: str = Field(min_length=1)
    description: Optional[str] = None
    date: str = Field(pattern=DATE_PATTERN, description="Start date, YYYY-MM-DD")
    time: str = Field(default="00:00", pattern=TIME_PATTERN, description="Start time, HH:MM")
    end_date: Optional[str] = Field(default=None, pattern=DATE_PATTERN)
    end_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    location: Optional[str] = None
    event_type: EventType = EventType.other
    priority: Priority = Priority.medium
    status: ScheduleStatus = ScheduleStatus.scheduled
    participants: List[str] = Field(default_factory=list)
    required_equipment: List[str] = Field(default_factory=list)
    training_objectives: List[str] = Field(default_factory=list)
    agency_id: Optional[str] = None

    class Config:
        use_enum_values = True


class EventUpdate(BaseModel):
    """Schema for rescheduling or editing an event."""

    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = Field(default=None, pattern=DATE_PATTERN)
    time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    end_date: Optional[str] = Field(default=None, pattern=DATE_PATTERN)
    end_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    location: Optional[str] = None
    event_type: Optional[EventType] = None
    priority: Optional[Priority] = None
    status: Optional[ScheduleStatus] = None
    participants: Optional[List[str]] = None
    required_equipment: Optional[List[str]] = None
    training_objectives: Optional[List[str]] = None

    class Config:
        use_enum_values = True
