"""
Assessment I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from ..domain.enums import AssessmentType


class AssessmentRead(BaseModel):
    """Schema for reading an assessment from the API."""

    id: str
    agency_id: str
    name: str
    assessment_type: str
    tier_level: Optional[int] = None
    status: str
    progress_percentage: int
    started_at: datetime
    completed_at: Optional[datetime] = None
    mission_profile: Optional[str] = None
    equipment_assessment: Optional[Dict[str, Any]] = None
    completion_status: bool = False
    gap_analysis: Optional[str] = None
    recommendations: Optional[str] = None

    class Config:
        from_attributes = True


class AssessmentCreate(BaseModel):
    """Schema for starting an assessment. The agency comes from the URL."""

    name: str = Field(min_length=1, description="Display name")
    assessment_type: AssessmentType = Field(default=AssessmentType.tier_assessment)
    mission_profile: Optional[str] = None
    equipment_assessment: Optional[Dict[str, Any]] = None

    class Config:
        use_enum_values = True


class AssessmentResponseSubmit(BaseModel):
    """Schema for answering one question of an assessment.

    Supply the field matching the question's type; the others stay null.
    """

    assessment_id: str
    question_id: str
    response: Optional[bool] = Field(default=None, description="Answer to a boolean question")
    text_response: Optional[str] = Field(default=None, description="Answer to a text question")
    numeric_response: Optional[float] = Field(default=None, description="Answer to a numeric question")
    select_response: Optional[str] = Field(default=None, description="Answer to a select question")
    notes: Optional[str] = None


class AssessmentResponseRead(BaseModel):
    """Schema for reading a stored response."""

    id: str
    assessment_id: str
    question_id: str
    response: Optional[bool] = None
    text_response: Optional[str] = None
    numeric_response: Optional[float] = None
    select_response: Optional[str] = None
    notes: Optional[str] = None
    updated_at: datetime

    class Config:
        from_attributes = True
