"""
Questionnaire Endpoints.

Read-only access to question categories and questions, plus the grouped
questionnaire used to render an assessment form.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter

from swat_manager.core.logging_config import get_logger
from swat_manager.core.models.domain.enums import AssessmentType
from swat_manager.core.models.io.questionnaire import (
    QuestionCategoryRead,
    QuestionnaireSection,
    QuestionRead,
)
from swat_manager.server.services.deps import CurrentUser, ReposDep
from swat_manager.server.services.scoring import build_questionnaire

logger = get_logger(__name__)

router = APIRouter(tags=["questionnaire"])


@router.get(
    "/question-categories",
    response_model=list[QuestionCategoryRead],
    summary="List Question Categories",
    description="List question categories in questionnaire order.",
)
async def list_question_categories(repos: ReposDep, _: CurrentUser) -> list[QuestionCategoryRead]:
    categories = await repos.categories.list_ordered()
    return [QuestionCategoryRead.model_validate(c) for c in categories]


@router.get(
    "/questions",
    response_model=list[QuestionRead],
    summary="List Questions",
    description="List questions, optionally restricted to one category.",
)
async def list_questions(
    repos: ReposDep, _: CurrentUser, category_id: Optional[str] = None
) -> list[QuestionRead]:
    """
    List questions.

    - **category_id**: Only return the questions of this category.
    """
    questions = await repos.questions.list(category_id=category_id)
    return [QuestionRead.model_validate(q) for q in questions]


@router.get(
    "/questionnaire",
    response_model=list[QuestionnaireSection],
    summary="Get Questionnaire",
    description="Return the questionnaire grouped by category for an assessment type.",
)
async def get_questionnaire(
    repos: ReposDep, _: CurrentUser, assessment_type: Optional[AssessmentType] = None
) -> list[QuestionnaireSection]:
    """
    Get the grouped questionnaire.

    - **assessment_type**: `tier-assessment` returns the 16 tier categories,
      `gap-analysis` the 8 gap analysis categories. Without it, tier sections
      come first, followed by the gap analysis ones.
    """
    categories = await repos.categories.list_ordered()
    questions = await repos.questions.list()
    sections = build_questionnaire(
        categories, questions, assessment_type.value if assessment_type else None
    )
    logger.debug(f"Built questionnaire with {len(sections)} sections (type={assessment_type})")
    return [
        QuestionnaireSection(
            category=QuestionCategoryRead.model_validate(section.category),
            is_gap_analysis=section.is_gap_analysis,
            questions=[QuestionRead.model_validate(q) for q in section.questions],
        )
        for section in sections
    ]
