"""
Mission I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ..domain.enums import MissionStatus, MissionType, Priority


class MissionAttachment(BaseModel):
    name: str
    url: str
    type: Optional[str] = None


class MissionRead(BaseModel):
    """Schema for reading a mission from the API."""

    id: str
    agency_id: str
    title: str
    mission_type: str
    description: Optional[str] = None
    location: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    start_date: datetime
    end_date: Optional[datetime] = None
    priority: str
    risk_level: Optional[str] = None
    status: str
    team_size: Optional[int] = None
    team_lead: Optional[str] = None
    team: List[str] = Field(default_factory=list)
    equipment: List[str] = Field(default_factory=list)
    objectives: List[str] = Field(default_factory=list)
    tactical_plan: Optional[str] = None
    contingency_plans: List[str] = Field(default_factory=list)
    attachments: List[MissionAttachment] = Field(default_factory=list)
    notes: Optional[str] = None
    after_action_report: Optional[str] = None
    response_time: Optional[int] = None
    created_at: datetime

    class Config:
        from_attributes = True


class MissionCreate(BaseModel):
    """Schema for planning a mission. The agency comes from the URL."""

    title: str = Field(min_length=1)
    mission_type: MissionType = MissionType.other
    description: Optional[str] = None
    location: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    start_date: datetime
    end_date: Optional[datetime] = None
    priority: Priority = Priority.medium
    risk_level: Optional[str] = None
    status: MissionStatus = MissionStatus.planned
    team_size: Optional[int] = Field(default=None, ge=0)
    team_lead: Optional[str] = None
    team: List[str] = Field(default_factory=list)
    equipment: List[str] = Field(default_factory=list)
    objectives: List[str] = Field(default_factory=list)
    tactical_plan: Optional[str] = None
    contingency_plans: List[str] = Field(default_factory=list)
    attachments: List[MissionAttachment] = Field(default_factory=list)
    notes: Optional[str] = None
    after_action_report: Optional[str] = None
    response_time: Optional[int] = Field(default=None, ge=0, description="Minutes from callout to arrival")

    class Config:
        use_enum_values = True
