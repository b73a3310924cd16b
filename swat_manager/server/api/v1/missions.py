"""
API endpoints for an agency's missions (call-outs and operations).
"""

from __future__ import annotations

from fastapi import APIRouter, status

from swat_manager.core.database.entities.missions import Mission
from swat_manager.core.logging_config import get_logger
from swat_manager.core.models.io.missions import MissionCreate, MissionRead
from swat_manager.server.services.deps import AgencyUser, ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["missions"])


@router.post(
    "/agencies/{agency_id}/missions",
    response_model=MissionRead,
    status_code=status.HTTP_201_CREATED,
    summary="Plan Mission",
    description="Record a planned or completed mission for an agency.",
    responses={201: {"description": "Mission created"}, 403: {"description": "Access denied to this agency"}},
)
async def create_mission(agency_id: str, payload: MissionCreate, repos: ReposDep, user: AgencyUser) -> MissionRead:
    """
    Create a mission.

    - **title**: Mission title.
    - **mission_type**: high-risk-warrant, barricade, hostage, surveillance, vip-protection, training or other.
    - **latitude** / **longitude**: Optional location for the map view.
    - **response_time**: Minutes from call-out to arrival.
    """
    mission = await repos.missions.create(Mission(**payload.model_dump(), agency_id=agency_id))
    logger.info(f"User {user.id} created mission {mission.id} for agency {agency_id}")
    return MissionRead.model_validate(mission)


@router.get(
    "/agencies/{agency_id}/missions",
    response_model=list[MissionRead],
    summary="List Missions",
    description="List an agency's missions by start date.",
)
async def list_missions(agency_id: str, repos: ReposDep, _: AgencyUser) -> list[MissionRead]:
    missions = await repos.missions.list_by_agency(agency_id)
    return [MissionRead.model_validate(m) for m in missions]
