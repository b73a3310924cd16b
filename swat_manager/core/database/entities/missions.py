"""
Mission entity model.

Deployments planned and tracked by an agency, from planning through the
after-action report.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlmodel import JSON, Field

from ..base import Base, UTCDateTime, new_id, utc_now



class MissionBase(Base):
    """Base fields for missions."""

    agency_id: str = Field(foreign_key="agencies.id", ondelete="CASCADE", index=True, description="Owning agency")
    title: str = Field(max_length=255, description="Mission title")
    mission_type: str = Field(default="other", max_length=24, description="Mission category")
    description: Optional[str] = Field(default=None, description="Mission details")
    location: Optional[str] = Field(default=None, description="Address or area")
    latitude: Optional[float] = Field(default=None, description="Latitude of the objective")
    longitude: Optional[float] = Field(default=None, description="Longitude of the objective")
    start_date: datetime = Field(description="UTC start", sa_type=UTCDateTime)
    end_date: Optional[datetime] = Field(default=None, description="UTC end", sa_type=UTCDateTime)
    priority: str = Field(default="medium", max_length=8, description="low, medium or high")
    risk_level: Optional[str] = Field(default=None, max_length=16, description="Assessed risk")
    status: str = Field(default="planned", max_length=16, description="planned, active, completed or aborted")
    team_size: Optional[int] = Field(default=None, description="Number of operators deployed")
    team_lead: Optional[str] = Field(
        default=None, foreign_key="personnel.id", ondelete="SET NULL", description="Leading team member"
    )
    team: List[str] = Field(default_factory=list, sa_type=JSON, description="Personnel ids")
    equipment: List[str] = Field(default_factory=list, sa_type=JSON, description="Equipment ids")
    objectives: List[str] = Field(default_factory=list, sa_type=JSON, description="Mission objectives")
    tactical_plan: Optional[str] = Field(default=None, description="Plan of action")
    contingency_plans: List[str] = Field(default_factory=list, sa_type=JSON, description="Fallback plans")
    attachments: List[Dict[str, Any]] = Field(
        default_factory=list, sa_type=JSON, description="Attached documents (name, url, type)"
    )
    notes: Optional[str] = Field(default=None, description="Free-form notes")
    after_action_report: Optional[str] = Field(default=None, description="After-action report")
    response_time: Optional[int] = Field(default=None, description="Minutes from callout to arrival")


class Mission(MissionBase, table=True):
    """Persistent mission.

    Table: missions
    """

    __tablename__ = "missions"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now}, sa_type=UTCDateTime)

    def __repr__(self) -> str:
        return f"Mission(id={self.id}, title={self.title}, status={self.status})"
