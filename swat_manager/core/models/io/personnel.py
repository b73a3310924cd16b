"""
Personnel I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ..domain.enums import PersonnelStatus


class EmergencyContact(BaseModel):
    name: str
    relationship: str
    phone: str
    email: Optional[str] = None
    address: Optional[str] = None
    is_primary: bool = False


class PersonnelRead(BaseModel):
    """Schema for reading a team member from the API."""

    id: str
    agency_id: str
    first_name: str
    last_name: str
    badge_number: str
    email: Optional[str] = None
    phone: Optional[str] = None
    team: Optional[str] = None
    role: Optional[str] = None
    secondary_role: Optional[str] = None
    status: str
    certifications: List[str] = Field(default_factory=list)
    specialties: List[str] = Field(default_factory=list)
    fitness_score: Optional[int] = None
    last_evaluation: Optional[datetime] = None
    next_evaluation: Optional[datetime] = None
    assigned_equipment: List[str] = Field(default_factory=list)
    emergency_contacts: List[EmergencyContact] = Field(default_factory=list)
    notes: Optional[str] = None
    active_status: bool = True
    team_leader: bool = False
    created_at: datetime

    class Config:
        from_attributes = True


class PersonnelCreate(BaseModel):
    """Schema for adding a team member. The agency comes from the URL."""

    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    badge_number: str = Field(min_length=1, description="Badge number, unique platform-wide")
    email: Optional[str] = None
    phone: Optional[str] = None
    team: Optional[str] = None
    role: Optional[str] = None
    secondary_role: Optional[str] = None
    status: PersonnelStatus = PersonnelStatus.available
    certifications: List[str] = Field(default_factory=list)
    specialties: List[str] = Field(default_factory=list)
    fitness_score: Optional[int] = Field(default=None, ge=0, le=100)
    last_evaluation: Optional[datetime] = None
    next_evaluation: Optional[datetime] = None
    assigned_equipment: List[str] = Field(default_factory=list)
    emergency_contacts: List[EmergencyContact] = Field(default_factory=list)
    notes: Optional[str] = None
    active_status: bool = True
    team_leader: bool = False

    class Config:
        use_enum_values = True


class PersonnelUpdate(BaseModel):
    """Schema for updating a team member via API."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    badge_number: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    team: Optional[str] = None
    role: Optional[str] = None
    secondary_role: Optional[str] = None
    status: Optional[PersonnelStatus] = None
    certifications: Optional[List[str]] = None
    specialties: Optional[List[str]] = None
    fitness_score: Optional[int] = Field(default=None, ge=0, le=100)
    last_evaluation: Optional[datetime] = None
    next_evaluation: Optional[datetime] = None
    assigned_equipment: Optional[List[str]] = None
    emergency_contacts: Optional[List[EmergencyContact]] = None
    notes: Optional[str] = None
    active_status: Optional[bool] = None
    team_leader: Optional[bool] = None

    class Config:
        use_enum_values = True
