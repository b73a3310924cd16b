"""
Questionnaire entity models.

Questions are grouped into ordered categories. The first sixteen categories
make up the Tier Assessment; the gap-analysis categories follow them. A
question's ``impacts_tier`` flag decides whether it counts toward the tier
classification.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import JSON, Field

from ..base import Base, UTCDateTime, new_id, utc_now



class QuestionCategoryBase(Base):
    """Base fields for question categories."""

    name: str = Field(max_length=255, unique=True, description="Category name without numeric prefix")
    description: Optional[str] = Field(default=None, description="What the category assesses")
    order_index: int = Field(description="Display and report order")


class QuestionCategory(QuestionCategoryBase, table=True):
    """Persistent question category.

    Table: question_categories
    """

    __tablename__ = "question_categories"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)

    def __repr__(self) -> str:
        return f"QuestionCategory(name={self.name}, order={self.order_index})"


class QuestionBase(Base):
    """Base fields for questions."""

    category_id: str = Field(
        foreign_key="question_categories.id", ondelete="CASCADE", index=True, description="Owning category"
    )
    text: str = Field(description="Question text shown to the agency")
    description: Optional[str] = Field(default=None, description="Answering hint")
    order_index: int = Field(description="Order inside the category, starting at 1")
    impacts_tier: bool = Field(default=True, description="Whether a Yes answer counts toward the tier")
    question_type: str = Field(default="boolean", max_length=16, description="boolean, text, numeric or select")
    validation_rules: Optional[Dict[str, Any]] = Field(
        default=None, sa_type=JSON, description="Optional min/max/pattern/options"
    )


class Question(QuestionBase, table=True):
    """Persistent questionnaire question.

    Table: questions
    """

    __tablename__ = "questions"
    __table_args__ = (
        UniqueConstraint("category_id", "text", name="uq_questions_category_text"),
        {"extend_existing": True},
    )

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)

    def __repr__(self) -> str:
        return f"Question(id={self.id}, category={self.category_id}, order={self.order_index})"
