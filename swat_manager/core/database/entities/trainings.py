"""
Training entity model.

Scheduled training sessions with per-participant outcomes recorded in
``completion_status``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlmodel import JSON, Field

from ..base import Base, UTCDateTime, new_id, utc_now



class TrainingBase(Base):
    """Base fields for trainings."""

    agency_id: str = Field(foreign_key="agencies.id", ondelete="CASCADE", index=True, description="Owning agency")
    title: str = Field(max_length=255, description="Training title")
    description: Optional[str] = Field(default=None, description="Training details")
    training_type: str = Field(default="tactical", max_length=16, description="Training discipline")
    start_date: datetime = Field(description="UTC start", sa_type=UTCDateTime)
    end_date: Optional[datetime] = Field(default=None, description="UTC end", sa_type=UTCDateTime)
    start_time: Optional[str] = Field(default=None, max_length=5, description="Local start time (HH:MM)")
    end_time: Optional[str] = Field(default=None, max_length=5, description="Local end time (HH:MM)")
    location: Optional[str] = Field(default=None, description="Training site")
    instructor: Optional[str] = Field(default=None, description="Lead instructor")
    participants: List[str] = Field(default_factory=list, sa_type=JSON, description="Personnel ids")
    required_equipment: List[str] = Field(default_factory=list, sa_type=JSON, description="Equipment to bring")
    training_objectives: List[str] = Field(default_factory=list, sa_type=JSON, description="Learning objectives")
    prerequisites: List[str] = Field(default_factory=list, sa_type=JSON, description="Required prior trainings")
    priority: str = Field(default="medium", max_length=8, description="low, medium or high")
    status: str = Field(default="scheduled", max_length=16, description="Lifecycle status")
    completion_status: List[Dict[str, Any]] = Field(
        default_factory=list, sa_type=JSON, description="Outcome per participant"
    )
    notes: Optional[str] = Field(default=None, description="Free-form notes")


class Training(TrainingBase, table=True):
    """Persistent training session.

    Table: trainings
    """

    __tablename__ = "trainings"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now}, sa_type=UTCDateTime)

    def __repr__(self) -> str:
        return f"Training(id={self.id}, title={self.title}, type={self.training_type})"
