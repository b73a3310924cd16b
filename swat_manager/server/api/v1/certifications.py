"""
API endpoints for the certifications an agency tracks.

Certifications held by individual team members live under
``/personnel/{personnel_id}/certifications``.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from swat_manager.core.database.entities.certifications import Certification
from swat_manager.core.logging_config import get_logger
from swat_manager.core.models.io.certifications import CertificationCreate, CertificationRead
from swat_manager.server.services.deps import AgencyUser, ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["certifications"])


@router.post(
    "/agencies/{agency_id}/certifications",
    response_model=CertificationRead,
    status_code=status.HTTP_201_CREATED,
    summary="Define Certification",
    description="Define a certification an agency's members can hold.",
    responses={201: {"description": "Certification created"}, 403: {"description": "Access denied to this agency"}},
)
async def create_certification(
    agency_id: str, payload: CertificationCreate, repos: ReposDep, user: AgencyUser
) -> CertificationRead:
    """
    Define a certification.

    - **name**: Certification name.
    - **issuing_authority**: Who grants it.
    - **validity_period**: Months before renewal is due.
    """
    certification = await repos.certifications.create(Certification(**payload.model_dump(), agency_id=agency_id))
    logger.info(f"User {user.id} defined certification {certification.id} for agency {agency_id}")
    return CertificationRead.model_validate(certification)


@router.get(
    "/agencies/{agency_id}/certifications",
    response_model=list[CertificationRead],
    summary="List Certifications",
    description="List the certifications defined by an agency.",
)
async def list_certifications(agency_id: str, repos: ReposDep, _: AgencyUser) -> list[CertificationRead]:
    certifications = await repos.certifications.list_by_agency(agency_id)
    return [CertificationRead.model_validate(c) for c in certifications]
