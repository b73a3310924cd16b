"""
Report I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..domain.enums import AssessmentType


class ReportRead(BaseModel):
    """Schema for reading a report from the API."""

    id: str
    assessment_id: str
    report_type: str
    tier_level: Optional[int] = None
    report_url: Optional[str] = None
    generated_at: datetime
    summary: Optional[str] = None

    class Config:
        from_attributes = True


class ReportSummaryRead(ReportRead):
    """Report enriched with its agency and assessment for listings."""

    agency_id: Optional[str] = None
    agency_name: str = "Unknown Agency"
    assessment_name: str = "Unknown Assessment"
    assessment_type: str = "tier-assessment"
    assessment_date: Optional[datetime] = None
    tier_classification: int = 0


class ReportUpdate(BaseModel):
    """Schema for editing a report's metadata."""

    summary: Optional[str] = None
    tier_level: Optional[int] = Field(default=None, ge=1, le=4)
    report_type: Optional[AssessmentType] = None

    class Config:
        use_enum_values = True


class ReportFileUpload(BaseModel):
    """Schema for replacing a report file with a base64 data URL."""

    file_data: Optional[str] = Field(default=None, description="data:<mime>;base64,<payload>")
    file_type: Optional[str] = Field(default=None, description="MIME type or extension of the file")


class ReportUploadResult(BaseModel):
    report: ReportRead
    message: str
