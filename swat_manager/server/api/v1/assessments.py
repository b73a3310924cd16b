"""
API endpoints for assessments.

An assessment is one run of the questionnaire by an agency, either a Tier
Assessment or a Gap Analysis. Agency users work on their own agency's
assessments; administrators see all of them.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from swat_manager.core.database.entities.assessments import Assessment
from swat_manager.core.logging_config import get_logger
from swat_manager.core.models.io.assessments import AssessmentCreate, AssessmentRead
from swat_manager.server.services.deps import (
    AdminUser,
    AgencyUser,
    CurrentUser,
    ReposDep,
    get_accessible_assessment,
)

logger = get_logger(__name__)

router = APIRouter(tags=["assessments"])


@router.post(
    "/agencies/{agency_id}/assessments",
    response_model=AssessmentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Start Assessment",
    description="Start a new Tier Assessment or Gap Analysis for an agency.",
    responses={
        201: {"description": "Assessment created"},
        403: {"description": "Access denied to this agency"},
        404: {"description": "Agency not found"},
    },
)
async def create_assessment(
    agency_id: str, payload: AssessmentCreate, repos: ReposDep, user: AgencyUser
) -> AssessmentRead:
    """
    Start an assessment.

    The owning agency is always the one in the path, whatever the body says.

    - **name**: Display name.
    - **assessment_type**: `tier-assessment` (default) or `gap-analysis`.
    """
    if not await repos.agencies.get_by_id(agency_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Agency not found")
    assessment = await repos.assessments.create(Assessment(**payload.model_dump(), agency_id=agency_id))
    logger.info(f"User {user.id} started {assessment.assessment_type} assessment {assessment.id} for agency {agency_id}")
    return AssessmentRead.model_validate(assessment)


@router.get(
    "/agencies/{agency_id}/assessments",
    response_model=list[AssessmentRead],
    summary="List Agency Assessments",
    description="List an agency's assessments, newest first.",
)
async def list_agency_assessments(agency_id: str, repos: ReposDep, _: AgencyUser) -> list[AssessmentRead]:
    assessments = await repos.assessments.list_by_agency(agency_id)
    return [AssessmentRead.model_validate(a) for a in assessments]


@router.get(
    "/agencies/{agency_id}/assessments/{assessment_id}",
    response_model=AssessmentRead,
    summary="Get Agency Assessment",
    description="Retrieve one assessment of an agency.",
    responses={403: {"description": "Access denied"}, 404: {"description": "Assessment not found"}},
)
async def get_agency_assessment(
    agency_id: str, assessment_id: str, repos: ReposDep, user: CurrentUser
) -> AssessmentRead:
    """
    Get an assessment through its agency.

    Returns 404 when the assessment does not exist or is not filed under
    `agency_id`, and 403 when it belongs to an agency the user cannot see.
    """
    assessment = await get_accessible_assessment(repos, user, assessment_id, forbidden_detail="Access denied")
    if assessment.agency_id != agency_id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assessment not found")
    return AssessmentRead.model_validate(assessment)


@router.get(
    "/assessments",
    response_model=list[AssessmentRead],
    summary="List All Assessments",
    description="List every assessment on the platform. Administrators only.",
)
async def list_assessments(repos: ReposDep, _: AdminUser) -> list[AssessmentRead]:
    assessments = await repos.assessments.list()
    logger.debug(f"Retrieved {len(assessments)} assessments")
    return [AssessmentRead.model_validate(a) for a in assessments]


@router.get(
    "/assessments/{assessment_id}",
    response_model=AssessmentRead,
    summary="Get Assessment",
    description="Retrieve an assessment by ID.",
    responses={403: {"description": "Access denied"}, 404: {"description": "Assessment not found"}},
)
async def get_assessment(assessment_id: str, repos: ReposDep, user: CurrentUser) -> AssessmentRead:
    assessment = await get_accessible_assessment(repos, user, assessment_id, forbidden_detail="Access denied")
    return AssessmentRead.model_validate(assessment)
