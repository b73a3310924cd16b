"""
API endpoints for team personnel.

Team members belong to an agency; every route is nested under the agency and
checks that the caller may see it. Certifications held by a team member are
managed under ``/personnel/{personnel_id}/certifications``.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Response, status

from swat_manager.core.database.entities.certifications import PersonnelCertification
from swat_manager.core.database.entities.personnel import Personnel
from swat_manager.core.database.entities.users import User
from swat_manager.core.database.repositories import SqlRepoBundle
from swat_manager.core.errors import NotFoundError, PermissionDeniedError
from swat_manager.core.logging_config import get_logger
from swat_manager.core.models.io.certifications import PersonnelCertificationCreate, PersonnelCertificationRead
from swat_manager.core.models.io.personnel import PersonnelCreate, PersonnelRead, PersonnelUpdate
from swat_manager.server.services.deps import AgencyUser, CurrentUser, ReposDep, ensure_agency_access

logger = get_logger(__name__)

router = APIRouter(tags=["personnel"])


async def _get_member(repos: SqlRepoBundle, agency_id: str, personnel_id: str) -> Personnel:
    member = await repos.personnel.get_by_id(personnel_id)
    if not member:
        raise NotFoundError("Personnel", personnel_id)
    if member.agency_id != agency_id:
        raise PermissionDeniedError()
    return member


@router.post(
    "/agencies/{agency_id}/personnel",
    response_model=PersonnelRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add Team Member",
    description="Add a team member to an agency's roster.",
    responses={
        201: {"description": "Team member added"},
        400: {"description": "Badge number already in use"},
        403: {"description": "Access denied to this agency"},
    },
)
async def create_personnel(
    agency_id: str, payload: PersonnelCreate, repos: ReposDep, _: AgencyUser
) -> PersonnelRead:
    """
    Add a team member.

    - **first_name** / **last_name**: Name.
    - **badge_number**: Unique across the platform.
    - **status**: `available`, `on-duty`, `off-duty`, `leave` or `training`.
    """
    if await repos.personnel.get_by_badge_number(payload.badge_number):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Badge number already in use")
    member = await repos.personnel.create(Personnel(**payload.model_dump(), agency_id=agency_id))
    logger.info(f"Added personnel {member.id} to agency {agency_id}")
    return PersonnelRead.model_validate(member)


@router.get(
    "/agencies/{agency_id}/personnel",
    response_model=list[PersonnelRead],
    summary="List Team Members",
    description="List an agency's roster ordered by last name.",
)
async def list_personnel(agency_id: str, repos: ReposDep, _: AgencyUser) -> list[PersonnelRead]:
    members = await repos.personnel.list_by_agency(agency_id)
    return [PersonnelRead.model_validate(m) for m in members]


@router.get(
    "/agencies/{agency_id}/personnel/{personnel_id}",
    response_model=PersonnelRead,
    summary="Get Team Member",
    responses={403: {"description": "Access denied"}, 404: {"description": "Personnel not found"}},
)
async def get_personnel(agency_id: str, personnel_id: str, repos: ReposDep, _: AgencyUser) -> PersonnelRead:
    return PersonnelRead.model_validate(await _get_member(repos, agency_id, personnel_id))


@router.patch(
    "/agencies/{agency_id}/personnel/{personnel_id}",
    response_model=PersonnelRead,
    summary="Update Team Member",
    responses={
        400: {"description": "Badge number already in use"},
        403: {"description": "Access denied"},
        404: {"description": "Personnel not found"},
    },
)
async def update_personnel(
    agency_id: str, personnel_id: str, payload: PersonnelUpdate, repos: ReposDep, _: AgencyUser
) -> PersonnelRead:
    member = await _get_member(repos, agency_id, personnel_id)
    update_data = payload.model_dump(exclude_unset=True)
    badge = update_data.get("badge_number")
    if badge and badge != member.badge_number and await repos.personnel.get_by_badge_number(badge):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Badge number already in use")
    repos.personnel.apply_changes(member, update_data)
    member = await repos.personnel.update(member)
    return PersonnelRead.model_validate(member)


@router.delete(
    "/agencies/{agency_id}/personnel/{personnel_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove Team Member",
    responses={403: {"description": "Access denied"}, 404: {"description": "Personnel not found"}},
)
async def delete_personnel(agency_id: str, personnel_id: str, repos: ReposDep, _: AgencyUser) -> Response:
    member = await _get_member(repos, agency_id, personnel_id)
    await repos.personnel.delete(member.id)
    logger.info(f"Removed personnel {member.id} from agency {agency_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def _get_accessible_member(repos: SqlRepoBundle, user: User, personnel_id: str) -> Personnel:
    member = await repos.personnel.get_by_id(personnel_id)
    if not member:
        raise NotFoundError("Personnel", personnel_id)
    ensure_agency_access(user, member.agency_id, detail="Access denied")
    return member


@router.post(
    "/personnel/{personnel_id}/certifications",
    response_model=PersonnelCertificationRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record Certification",
    description="Record a certification held by a team member.",
    responses={403: {"description": "Access denied"}, 404: {"description": "Personnel or certification not found"}},
)
async def create_personnel_certification(
    personnel_id: str, payload: PersonnelCertificationCreate, repos: ReposDep, user: CurrentUser
) -> PersonnelCertificationRead:
    member = await _get_accessible_member(repos, user, personnel_id)
    if not await repos.certifications.get_by_id(payload.certification_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Certification not found")
    held = await repos.personnel_certifications.create(
        PersonnelCertification(**payload.model_dump(), personnel_id=member.id)
    )
    return PersonnelCertificationRead.model_validate(held)


@router.get(
    "/personnel/{personnel_id}/certifications",
    response_model=list[PersonnelCertificationRead],
    summary="List Held Certifications",
    responses={403: {"description": "Access denied"}, 404: {"description": "Personnel not found"}},
)
async def list_personnel_certifications(
    personnel_id: str, repos: ReposDep, user: CurrentUser
) -> list[PersonnelCertificationRead]:
    member = await _get_accessible_member(repos, user, personnel_id)
    held = await repos.personnel_certifications.list_by_personnel(member.id)
    return [PersonnelCertificationRead.model_validate(h) for h in held]
