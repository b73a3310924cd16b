"""
Report entity model.

A report is the stored outcome of an assessment: a generated or uploaded file
plus the text summary and tier classification recorded at generation time.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, UTCDateTime, new_id, utc_now



class ReportBase(Base):
    """Base fields for reports."""

    assessment_id: str = Field(
        foreign_key="assessments.id", ondelete="CASCADE", index=True, description="Source assessment"
    )
    report_type: str = Field(default="tier-assessment", max_length=32, description="tier-assessment or gap-analysis")
    tier_level: Optional[int] = Field(default=None, ge=1, le=4, description="Tier recorded on the report")
    report_url: Optional[str] = Field(default=None, description="Where the report file is served from")
    summary: Optional[str] = Field(default=None, description="Plain-text summary")


class Report(ReportBase, table=True):
    """Persistent report.

    Table: reports
    """

    __tablename__ = "reports"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    generated_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)

    def __repr__(self) -> str:
        return f"Report(id={self.id}, type={self.report_type}, assessment={self.assessment_id})"
