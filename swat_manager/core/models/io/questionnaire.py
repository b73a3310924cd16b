"""
Questionnaire I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class QuestionCategoryRead(BaseModel):
    """Schema for reading a question category."""

    id: str
    name: str
    description: Optional[str] = None
    order_index: int
    created_at: datetime

    class Config:
        from_attributes = True


class QuestionRead(BaseModel):
    """Schema for reading a question."""

    id: str
    category_id: str
    text: str
    description: Optional[str] = None
    order_index: int
    impacts_tier: bool = True
    question_type: str = "boolean"
    validation_rules: Optional[Dict[str, Any]] = None

    class Config:
        from_attributes = True


class QuestionnaireSection(BaseModel):
    """A category together with its questions, in questionnaire order."""

    category: QuestionCategoryRead
    is_gap_analysis: bool = Field(description="Whether the category belongs to the Gap Analysis")
    questions: List[QuestionRead] = Field(default_factory=list)
