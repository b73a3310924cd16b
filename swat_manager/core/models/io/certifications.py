"""
Certification I/O models: certification definitions and the certifications
held by individual team members.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ..domain.enums import PersonnelCertificationStatus


class CertificationRead(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    issuing_authority: Optional[str] = None
    required_training: List[str] = Field(default_factory=list)
    validity_period: Optional[int] = None
    renewal_requirements: Optional[str] = None
    agency_id: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class CertificationCreate(BaseModel):
    """Schema for defining a certification. The agency comes from the URL."""

    name: str = Field(min_length=1)
    description: Optional[str] = None
    issuing_authority: Optional[str] = None
    required_training: List[str] = Field(default_factory=list)
    validity_period: Optional[int] = Field(default=None, ge=0, description="Validity in months")
    renewal_requirements: Optional[str] = None


class PersonnelCertificationRead(BaseModel):
    id: str
    personnel_id: str
    certification_id: str
    issue_date: datetime
    expiry_date: Optional[datetime] = None
    status: str
    notes: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class PersonnelCertificationCreate(BaseModel):
    """Schema for recording a certification held by a team member."""

    certification_id: str
    issue_date: datetime
    expiry_date: Optional[datetime] = None
    status: PersonnelCertificationStatus = PersonnelCertificationStatus.active
    notes: Optional[str] = None

    class Config:
        use_enum_values = True
