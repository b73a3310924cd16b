"""
API endpoints for managing agencies.

Agencies are the tenants of the platform: every user, team member, piece of
equipment and assessment belongs to one.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Response, status

from swat_manager.core.database.entities.agencies import Agency
from swat_manager.core.logging_config import get_logger
from swat_manager.core.models.io.agencies import AgencyCreate, AgencyRead, AgencyUpdate
from swat_manager.server.services.deps import AdminUser, CurrentUser, ReposDep, ensure_agency_access

logger = get_logger(__name__)

router = APIRouter(tags=["agencies"])


@router.get(
    "",
    response_model=list[AgencyRead],
    summary="List Agencies",
    description="List every agency. The response is never cached.",
)
async def list_agencies(response: Response, repos: ReposDep, _: CurrentUser) -> list[AgencyRead]:
    """
    List agencies.

    Agency details change often during onboarding, so caches are told not to
    keep the response.
    """
    response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate"
    response.headers["Pragma"] = "no-cache"
    response.headers["Expires"] = "0"
    agencies = await repos.agencies.list()
    logger.debug(f"Retrieved {len(agencies)} agencies")
    return [AgencyRead.model_validate(a) for a in agencies]


@router.post(
    "",
    response_model=AgencyRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Agency",
    description="Register a new agency. Administrators only.",
    responses={
        201: {"description": "Agency created successfully"},
        400: {"description": "An agency with this contact email already exists"},
    },
)
async def create_agency(payload: AgencyCreate, repos: ReposDep, _: AdminUser) -> AgencyRead:
    """
    Create an agency.

    - **name**: Agency name.
    - **jurisdiction**: Area served.
    - **contact_name** / **contact_email**: Primary contact; the email is unique.
    - **paid_status**: Whether the agency has the premium Tracking product.
    """
    if await repos.agencies.get_by_contact_email(payload.contact_email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="An agency with this contact email already exists",
        )
    agency = await repos.agencies.create(Agency(**payload.model_dump()))
    logger.info(f"Created agency {agency.id} ({agency.name})")
    return AgencyRead.model_validate(agency)


@router.get(
    "/{agency_id}",
    response_model=AgencyRead,
    summary="Get Agency",
    description="Retrieve one agency. Agency users may only read their own.",
    responses={403: {"description": "Access denied to this agency"}, 404: {"description": "Agency not found"}},
)
async def get_agency(agency_id: str, repos: ReposDep, user: CurrentUser) -> AgencyRead:
    ensure_agency_access(user, agency_id)
    agency = await repos.agencies.get_by_id(agency_id)
    if not agency:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Agency not found")
    return AgencyRead.model_validate(agency)


@router.patch(
    "/{agency_id}",
    response_model=AgencyRead,
    summary="Update Agency",
    description="Update an agency's profile. Administrators only.",
    responses={404: {"description": "Agency not found"}},
)
async def update_agency(agency_id: str, payload: AgencyUpdate, repos: ReposDep, _: AdminUser) -> AgencyRead:
    agency = await repos.agencies.get_by_id(agency_id)
    if not agency:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Agency not found")
    update_data = payload.model_dump(exclude_unset=True)
    repos.agencies.apply_changes(agency, update_data)
    agency = await repos.agencies.update(agency)
    logger.info(f"Updated agency {agency.id}: {sorted(update_data)}")
    return AgencyRead.model_validate(agency)
