"""
Personnel entity model.

Team members of an agency's SWAT unit, with their role, readiness and
emergency contacts. Badge numbers are unique across the platform.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlmodel import JSON, Field

from ..base import Base, UTCDateTime, new_id, utc_now



class PersonnelBase(Base):
    """Base fields for personnel."""

    agency_id: str = Field(foreign_key="agencies.id", ondelete="CASCADE", index=True, description="Owning agency")
    first_name: str = Field(max_length=128, description="Given name")
    last_name: str = Field(max_length=128, description="Family name")
    badge_number: str = Field(max_length=64, unique=True, description="Badge number, unique platform-wide")
    email: Optional[str] = Field(default=None, description="Contact email")
    phone: Optional[str] = Field(default=None, description="Contact phone")
    team: Optional[str] = Field(default=None, description="Squad or element")
    role: Optional[str] = Field(default=None, description="Primary role (operator, sniper, medic, ...)")
    secondary_role: Optional[str] = Field(default=None, description="Secondary role")
    status: str = Field(default="available", max_length=16, description="Duty status")
    certifications: List[str] = Field(default_factory=list, sa_type=JSON, description="Held certification names")
    specialties: List[str] = Field(default_factory=list, sa_type=JSON, description="Specialty skills")
    fitness_score: Optional[int] = Field(default=None, description="Latest fitness evaluation score")
    last_evaluation: Optional[datetime] = Field(default=None, description="Last evaluation date", sa_type=UTCDateTime)
    next_evaluation: Optional[datetime] = Field(default=None, description="Next evaluation due", sa_type=UTCDateTime)
    assigned_equipment: List[str] = Field(default_factory=list, sa_type=JSON, description="Assigned equipment ids")
    emergency_contacts: List[Dict[str, Any]] = Field(
        default_factory=list, sa_type=JSON, description="Emergency contacts with an is_primary flag"
    )
    notes: Optional[str] = Field(default=None, description="Free-form notes")
    active_status: bool = Field(default=True, description="Whether the member is active on the team")
    team_leader: bool = Field(default=False, description="Whether the member leads a team")


class Personnel(PersonnelBase, table=True):
    """Persistent team member.

    Table: personnel
    """

    __tablename__ = "personnel"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now}, sa_type=UTCDateTime)

    def __repr__(self) -> str:
        return f"Personnel(id={self.id}, badge={self.badge_number}, status={self.status})"
