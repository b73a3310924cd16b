"""
Certification entity models.

``certifications`` describes what an agency recognizes; ``personnel_certifications``
records who holds which certification and until when.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlmodel import JSON, Field

from ..base import Base, UTCDateTime, new_id, utc_now



class CertificationBase(Base):
    """Base fields for certifications."""

    name: str = Field(max_length=255, description="Certification name")
    description: Optional[str] = Field(default=None, description="What the certification covers")
    issuing_authority: Optional[str] = Field(default=None, description="Body that issues it")
    required_training: List[str] = Field(default_factory=list, sa_type=JSON, description="Trainings required first")
    validity_period: Optional[int] = Field(default=None, description="Validity in months")
    renewal_requirements: Optional[str] = Field(default=None, description="How to renew")
    agency_id: Optional[str] = Field(
        default=None, foreign_key="agencies.id", ondelete="CASCADE", index=True, description="Owning agency"
    )


class Certification(CertificationBase, table=True):
    """Persistent certification definition.

    Table: certifications
    """

    __tablename__ = "certifications"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)

    def __repr__(self) -> str:
        return f"Certification(id={self.id}, name={self.name})"


class PersonnelCertificationBase(Base):
    """Base fields for certifications held by team members."""

    personnel_id: str = Field(foreign_key="personnel.id", ondelete="CASCADE", index=True, description="Holder")
    certification_id: str = Field(
        foreign_key="certifications.id", ondelete="CASCADE", description="Certification held"
    )
    issue_date: datetime = Field(description="When it was issued", sa_type=UTCDateTime)
    expiry_date: Optional[datetime] = Field(default=None, description="When it lapses", sa_type=UTCDateTime)
    status: str = Field(default="active", max_length=24, description="active, expired, revoked or renewal_required")
    notes: Optional[str] = Field(default=None, description="Free-form notes")


class PersonnelCertification(PersonnelCertificationBase, table=True):
    """Persistent certification record for a team member.

    Table: personnel_certifications
    """

    __tablename__ = "personnel_certifications"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)

    def __repr__(self) -> str:
        return f"PersonnelCertification(personnel={self.personnel_id}, certification={self.certification_id})"
