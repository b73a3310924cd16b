"""
API endpoints for an agency's training sessions.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from swat_manager.core.database.entities.trainings import Training
from swat_manager.core.logging_config import get_logger
from swat_manager.core.models.io.trainings import TrainingCreate, TrainingRead
from swat_manager.server.services.deps import AgencyUser, ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["trainings"])


@router.post(
    "/agencies/{agency_id}/trainings",
    response_model=TrainingRead,
    status_code=status.HTTP_201_CREATED,
    summary="Schedule Training",
    description="Schedule a training session for an agency.",
    responses={201: {"description": "Training created"}, 403: {"description": "Access denied to this agency"}},
)
async def create_training(agency_id: str, payload: TrainingCreate, repos: ReposDep, user: AgencyUser) -> TrainingRead:
    """
    Schedule a training.

    - **title**: Training title.
    - **training_type**: tactical, firearms, medical, physical, technical, certification or other.
    - **start_date** / **end_date**: When the session runs.
    - **completion_status**: Per-participant outcomes, if already known.
    """
    training = await repos.trainings.create(Training(**payload.model_dump(), agency_id=agency_id))
    logger.info(f"User {user.id} scheduled training {training.id} for agency {agency_id}")
    return TrainingRead.model_validate(training)


@router.get(
    "/agencies/{agency_id}/trainings",
    response_model=list[TrainingRead],
    summary="List Trainings",
    description="List an agency's training sessions by start date.",
)
async def list_trainings(agency_id: str, repos: ReposDep, _: AgencyUser) -> list[TrainingRead]:
    trainings = await repos.trainings.list_by_agency(agency_id)
    return [TrainingRead.model_validate(t) for t in trainings]
