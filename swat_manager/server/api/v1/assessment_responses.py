"""
API endpoints for assessment responses.

Submitting a response upserts the answer for one (assessment, question) pair
and recomputes the assessment's progress over the questions of its type.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from swat_manager.core.database.base import utc_now
from swat_manager.core.database.repositories.assessments import RESPONSE_FIELDS
from swat_manager.core.logging_config import get_logger
from swat_manager.core.models.domain.enums import AssessmentStatus
from swat_manager.core.models.io.assessments import AssessmentResponseRead, AssessmentResponseSubmit
from swat_manager.core.monitoring import log_assessment_progress
from swat_manager.server.services.deps import AdminUser, CurrentUser, ReposDep, get_accessible_assessment
from swat_manager.server.services.scoring import assessment_progress, progress_status, questions_for

logger = get_logger(__name__)

router = APIRouter(tags=["assessment-responses"])


@router.post(
    "",
    response_model=AssessmentResponseRead,
    status_code=status.HTTP_201_CREATED,
    summary="Submit Response",
    description="Answer one question of an assessment, replacing any earlier answer.",
    responses={
        201: {"description": "Response stored"},
        403: {"description": "Access denied to this assessment"},
        404: {"description": "Assessment or question not found"},
    },
)
async def submit_response(
    payload: AssessmentResponseSubmit, repos: ReposDep, user: CurrentUser
) -> AssessmentResponseRead:
    """
    Submit a response.

    Supply the field that matches the question type: **response** for
    boolean questions, **text_response**, **numeric_response** or
    **select_response** otherwise. **notes** are kept with the answer.

    After storing the answer the assessment's progress is recomputed; it
    becomes `completed` once every question of its type is answered.
    """
    assessment = await get_accessible_assessment(repos, user, payload.assessment_id)
    question = await repos.questions.get_by_id(payload.question_id)
    if not question:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Question not found")

    values = payload.model_dump(include=set(RESPONSE_FIELDS))
    try:
        stored = await repos.responses.upsert(assessment.id, question.id, values)

        categories = await repos.categories.list_ordered()
        questions = await repos.questions.list()
        scored = questions_for(categories, questions, assessment.assessment_type)
        responses = await repos.responses.list_by_assessment(assessment.id)
        progress = assessment_progress(scored, responses)

        assessment.progress_percentage = progress
        assessment.status = progress_status(progress)
        if assessment.status == AssessmentStatus.completed.value and assessment.completed_at is None:
            assessment.completed_at = utc_now()
        await repos.assessments.update(assessment)
    except Exception as e:
        logger.error(f"Failed to store response for assessment {assessment.id}: {str(e)}", exc_info=True)
        raise

    log_assessment_progress(assessment.id, progress, assessment.status)
    return AssessmentResponseRead.model_validate(stored)


@router.get(
    "",
    response_model=list[AssessmentResponseRead],
    summary="List All Responses",
    description="List every stored response. Administrators only.",
)
async def list_all_responses(repos: ReposDep, _: AdminUser) -> list[AssessmentResponseRead]:
    responses = await repos.responses.list()
    return [AssessmentResponseRead.model_validate(r) for r in responses]


@router.get(
    "/{assessment_id}",
    response_model=list[AssessmentResponseRead],
    summary="List Assessment Responses",
    description="List the responses of one assessment.",
    responses={403: {"description": "Access denied"}, 404: {"description": "Assessment not found"}},
)
async def list_assessment_responses(
    assessment_id: str, repos: ReposDep, user: CurrentUser
) -> list[AssessmentResponseRead]:
    assessment = await get_accessible_assessment(repos, user, assessment_id, forbidden_detail="Access denied")
    responses = await repos.responses.list_by_assessment(assessment.id)
    return [AssessmentResponseRead.model_validate(r) for r in responses]
