"""
Training I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..domain.enums import Priority, ScheduleStatus, TrainingOutcome, TrainingType


class TrainingCompletion(BaseModel):
    """Outcome of a training for one participant."""

    personnel_id: str
    status: TrainingOutcome
    score: Optional[float] = None
    notes: Optional[str] = None

    class Config:
        use_enum_values = True


class TrainingRead(BaseModel):
    """Schema for reading a training session from the API."""

    id: str
    agency_id: str
    title: str
    description: Optional[str] = None
    training_type: str
    start_date: datetime
    end_date: Optional[datetime] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    location: Optional[str] = None
    instructor: Optional[str] = None
    participants: List[str] = Field(default_factory=list)
    required_equipment: List[str] = Field(default_factory=list)
    training_objectives: List[str] = Field(default_factory=list)
    prerequisites: List[str] = Field(default_factory=list)
    priority: str
    status: str
    completion_status: List[Dict[str, Any]] = Field(default_factory=list)
    notes: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class TrainingCreate(BaseModel):
    """Schema for scheduling a training session. The agency comes from the URL."""

    title: str = Field(min_length=1)
    description: Optional[str] = None
    training_type: TrainingType = TrainingType.tactical
    start_date: datetime
    end_date: Optional[datetime] = None
    start_time: Optional[str] = Field(default=None, pattern=r"^\d{2}:\d{2}$")
    end_time: Optional[str] = Field(default=None, pattern=r"^\d{2}:\d{2}$")
    location: Optional[str] = None
    instructor: Optional[str] = None
    participants: List[str] = Field(default_factory=list)
    required_equipment: List[str] = Field(default_factory=list)
    training_objectives: List[str] = Field(default_factory=list)
    prerequisites: List[str] = Field(default_factory=list)
    priority: Priority = Priority.medium
    status: ScheduleStatus = ScheduleStatus.scheduled
    completion_status: List[TrainingCompletion] = Field(default_factory=list)
    notes: Optional[str] = None

    class Config:
        use_enum_values = True
