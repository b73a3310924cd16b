"""
Agency entity models.

An agency is the top-level tenant: a law-enforcement organization that owns
users, personnel, equipment, schedules and assessments.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlmodel import JSON, Field

from ..base import Base, UTCDateTime, new_id, utc_now



class AgencyBase(Base):
    """Base fields for agencies."""

    # Identity
    name: str = Field(max_length=255, description="Agency name")
    jurisdiction: str = Field(max_length=255, description="City, county or state the agency serves")
    population_served: Optional[int] = Field(default=None, description="Population inside the jurisdiction")
    operational_environment: Optional[str] = Field(default=None, description="Urban, suburban, rural, mixed")
    swat_classification: Optional[str] = Field(default=None, description="Self-reported team classification")
    address: Optional[str] = Field(default=None, description="Mailing address")

    # Primary contact
    contact_name: str = Field(max_length=255, description="Primary contact person")
    contact_position: Optional[str] = Field(default=None, description="Primary contact's position")
    contact_email: str = Field(max_length=255, unique=True, index=True, description="Primary contact email")
    contact_phone: Optional[str] = Field(default=None, description="Primary contact phone")
    website: Optional[str] = Field(default=None, description="Agency website")
    liaison_name: Optional[str] = Field(default=None, description="Assessment liaison")
    liaison_contact: Optional[str] = Field(default=None, description="Liaison phone or email")

    # Staffing
    sworn_officers: Optional[int] = Field(default=None, description="Sworn officers in the agency")
    support_staff: Optional[int] = Field(default=None, description="Civilian support staff")
    total_swat_personnel: Optional[int] = Field(default=None, description="Members of the SWAT team")
    department_structure: Optional[str] = Field(default=None, description="Free-form structure description")
    personnel_gaps: Optional[str] = Field(default=None, description="Known staffing gaps")

    # Capabilities
    mission_capabilities: Optional[List[str]] = Field(
        default=None, sa_type=JSON, description="Mission types the team supports"
    )
    equipment_status: Optional[str] = Field(default=None, description="Overall equipment readiness")
    required_equipment: Optional[List[str]] = Field(default=None, sa_type=JSON, description="Equipment still needed")
    training_status: Optional[Dict[str, Any]] = Field(
        default=None, sa_type=JSON, description="Training readiness by discipline"
    )
    training_gaps: Optional[str] = Field(default=None, description="Known training gaps")

    # Platform status
    access_status: bool = Field(default=False, description="Whether the agency has been granted platform access")
    last_assessment_date: Optional[datetime] = Field(
        default=None, description="When the last tier report was issued", sa_type=UTCDateTime
    )
    evaluation_summary: Optional[str] = Field(default=None, description="Latest evaluator summary")
    paid_status: bool = Field(default=False, description="Premium subscription unlocking the tracking interface")
    tier_level: Optional[int] = Field(default=None, ge=1, le=4, description="Current tier classification (1-4)")


class Agency(AgencyBase, table=True):
    """Persistent agency record.

    Table: agencies
    """

    __tablename__ = "agencies"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now}, sa_type=UTCDateTime)

    def __repr__(self) -> str:
        return f"Agency(id={self.id}, name={self.name}, tier={self.tier_level})"
