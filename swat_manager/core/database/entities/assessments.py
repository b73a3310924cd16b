"""
Assessment entity models.

An assessment is one run of the questionnaire by an agency, either a Tier
Assessment or a Gap Analysis. Responses hold one answer per (assessment,
question) pair.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import JSON, Field

from ..base import Base, UTCDateTime, new_id, utc_now



class AssessmentBase(Base):
    """Base fields for assessments."""

    agency_id: str = Field(foreign_key="agencies.id", ondelete="CASCADE", index=True, description="Owning agency")
    name: str = Field(max_length=255, description="Display name")
    assessment_type: str = Field(
        default="tier-assessment", max_length=32, description="tier-assessment or gap-analysis"
    )
    tier_level: Optional[int] = Field(default=None, ge=1, le=4, description="Tier computed by the last tier report")
    status: str = Field(default="in_progress", max_length=16, description="in_progress or completed")
    progress_percentage: int = Field(default=0, ge=0, le=100, description="Share of questions answered")
    mission_profile: Optional[str] = Field(default=None, description="Mission profile notes")
    equipment_assessment: Optional[Dict[str, Any]] = Field(
        default=None, sa_type=JSON, description="Free-form equipment checklist"
    )
    completion_status: bool = Field(default=False, description="Whether the agency marked the assessment done")
    gap_analysis: Optional[str] = Field(default=None, description="Evaluator gap notes")
    recommendations: Optional[str] = Field(default=None, description="Evaluator recommendations")


class Assessment(AssessmentBase, table=True):
    """Persistent assessment.

    Table: assessments
    """

    __tablename__ = "assessments"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    started_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    completed_at: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now}, sa_type=UTCDateTime)

    def __repr__(self) -> str:
        return f"Assessment(id={self.id}, type={self.assessment_type}, progress={self.progress_percentage})"


class AssessmentResponseBase(Base):
    """Base fields for assessment responses."""

    assessment_id: str = Field(
        foreign_key="assessments.id", ondelete="CASCADE", index=True, description="Assessment being answered"
    )
    question_id: str = Field(foreign_key="questions.id", ondelete="CASCADE", description="Question being answered")
    response: Optional[bool] = Field(default=None, description="Answer to a boolean question")
    text_response: Optional[str] = Field(default=None, description="Answer to a text question")
    numeric_response: Optional[float] = Field(default=None, description="Answer to a numeric question")
    select_response: Optional[str] = Field(default=None, description="Answer to a select question")
    notes: Optional[str] = Field(default=None, description="Supporting notes")


class AssessmentResponse(AssessmentResponseBase, table=True):
    """Persistent answer to one question within one assessment.

    Table: assessment_responses
    """

    __tablename__ = "assessment_responses"
    __table_args__ = (
        UniqueConstraint("assessment_id", "question_id", name="uq_assessment_responses_assessment_question"),
        {"extend_existing": True},
    )

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now}, sa_type=UTCDateTime)

    def __repr__(self) -> str:
        return f"AssessmentResponse(assessment={self.assessment_id}, question={self.question_id})"
