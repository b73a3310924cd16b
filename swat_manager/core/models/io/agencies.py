"""
Agency I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, EmailStr, Field


class AgencyRead(BaseModel):
    """Schema for reading an agency from the API."""

    id: str
    name: str
    jurisdiction: str
    population_served: Optional[int] = None
    operational_environment: Optional[str] = None
    swat_classification: Optional[str] = None
    address: Optional[str] = None
    contact_name: str
    contact_position: Optional[str] = None
    contact_email: str
    contact_phone: Optional[str] = None
    website: Optional[str] = None
    liaison_name: Optional[str] = None
    liaison_contact: Optional[str] = None
    sworn_officers: Optional[int] = None
    support_staff: Optional[int] = None
    total_swat_personnel: Optional[int] = None
    department_structure: Optional[str] = None
    personnel_gaps: Optional[str] = None
    mission_capabilities: Optional[List[str]] = None
    equipment_status: Optional[str] = None
    required_equipment: Optional[List[str]] = None
    training_status: Optional[Dict[str, Any]] = None
    training_gaps: Optional[str] = None
    access_status: bool = False
    last_assessment_date: Optional[datetime] = None
    evaluation_summary: Optional[str] = None
    paid_status: bool = False
    tier_level: Optional[int] = None
    created_at: datetime

    class Config:
        from_attributes = True


class AgencyCreate(BaseModel):
    """Schema for creating an agency via API."""

    name: str = Field(min_length=1, description="Agency name")
    jurisdiction: str = Field(min_length=1, description="City, county or state served")
    contact_name: str = Field(min_length=1, description="Primary contact person")
    contact_email: EmailStr = Field(description="Primary contact email, unique")
    contact_position: Optional[str] = None
    contact_phone: Optional[str] = None
    population_served: Optional[int] = Field(default=None, ge=0)
    operational_environment: Optional[str] = None
    swat_classification: Optional[str] = None
    address: Optional[str] = None
    website: Optional[str] = None
    liaison_name: Optional[str] = None
    liaison_contact: Optional[str] = None
    sworn_officers: Optional[int] = Field(default=None, ge=0)
    support_staff: Optional[int] = Field(default=None, ge=0)
    total_swat_personnel: Optional[int] = Field(default=None, ge=0)
    department_structure: Optional[str] = None
    personnel_gaps: Optional[str] = None
    mission_capabilities: Optional[List[str]] = None
    equipment_status: Optional[str] = None
    required_equipment: Optional[List[str]] = None
    training_status: Optional[Dict[str, Any]] = None
    training_gaps: Optional[str] = None
    access_status: bool = False
    paid_status: bool = False
    tier_level: Optional[int] = Field(default=None, ge=1, le=4)


class AgencyUpdate(BaseModel):
    """Schema for updating an agency via API."""

    name: Optional[str] = None
    jurisdiction: Optional[str] = None
    contact_name: Optional[str] = None
    contact_email: Optional[EmailStr] = None
    contact_position: Optional[str] = None
    contact_phone: Optional[str] = None
    population_served: Optional[int] = Field(default=None, ge=0)
    operational_environment: Optional[str] = None
    swat_classification: Optional[str] = None
    address: Optional[str] = None
    website: Optional[str] = None
    liaison_name: Optional[str] = None
    liaison_contact: Optional[str] = None
    sworn_officers: Optional[int] = Field(default=None, ge=0)
    support_staff: Optional[int] = Field(default=None, ge=0)
    total_swat_personnel: Optional[int] = Field(default=None, ge=0)
    department_structure: Optional[str] = None
    personnel_gaps: Optional[str] = None
    mission_capabilities: Optional[List[str]] = None
    equipment_status: Optional[str] = None
    required_equipment: Optional[List[str]] = None
    training_status: Optional[Dict[str, Any]] = None
    training_gaps: Optional[str] = None
    access_status: Optional[bool] = None
    evaluation_summary: Optional[str] = None
    paid_status: Optional[bool] = None
    tier_level: Optional[int] = Field(default=None, ge=1, le=4)
