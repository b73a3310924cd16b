"""
Corrective action entity model.

Follow-up work items raised from assessments, trainings or missions.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlmodel import JSON, Field

from ..base import Base, UTCDateTime, new_id, utc_now



class CorrectiveActionBase(Base):
    """Base fields for corrective actions."""

    agency_id: str = Field(foreign_key="agencies.id", ondelete="CASCADE", index=True, description="Owning agency")
    title: str = Field(max_length=255, description="Short title")
    description: Optional[str] = Field(default=None, description="What has to change")
    category: str = Field(default="other", max_length=16, description="training, equipment, personnel, policy, other")
    date_identified: datetime = Field(
        default_factory=utc_now, description="When the issue was found", sa_type=UTCDateTime
    )
    target_completion_date: Optional[datetime] = Field(default=None, description="Due date", sa_type=UTCDateTime)
    responsible_party: Optional[str] = Field(
        default=None, foreign_key="personnel.id", ondelete="SET NULL", description="Team member in charge"
    )
    priority: str = Field(default="medium", max_length=8, description="low, medium or high")
    status: str = Field(default="open", max_length=16, description="open, in-progress, completed or cancelled")
    action_plan: List[str] = Field(default_factory=list, sa_type=JSON, description="Planned steps")
    progress: int = Field(default=0, ge=0, le=100, description="Percent done")
    completion_date: Optional[datetime] = Field(default=None, description="When it was closed", sa_type=UTCDateTime)
    verification_method: Optional[str] = Field(default=None, description="How completion is verified")
    notes: Optional[str] = Field(default=None, description="Free-form notes")


class CorrectiveAction(CorrectiveActionBase, table=True):
    """Persistent corrective action.

    Table: corrective_actions
    """

    __tablename__ = "corrective_actions"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now}, sa_type=UTCDateTime)

    def __repr__(self) -> str:
        return f"CorrectiveAction(id={self.id}, status={self.status}, progress={self.progress})"
