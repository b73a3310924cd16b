"""
API endpoints for corrective actions.

Corrective actions track the fixes an agency commits to after an assessment,
an after-action review or an incident.
"""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from swat_manager.core.database.entities.corrective_actions import CorrectiveAction
from swat_manager.core.database.repositories import SqlRepoBundle
from swat_manager.core.errors import NotFoundError, PermissionDeniedError
from swat_manager.core.logging_config import get_logger
from swat_manager.core.models.io.corrective_actions import (
    CorrectiveActionCreate,
    CorrectiveActionRead,
    CorrectiveActionUpdate,
)
from swat_manager.server.services.deps import AgencyUser, ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["corrective-actions"])


async def _get_action(repos: SqlRepoBundle, agency_id: str, action_id: str) -> CorrectiveAction:
    action = await repos.corrective_actions.get_by_id(action_id)
    if not action:
        raise NotFoundError("Corrective action", action_id)
    if action.agency_id != agency_id:
        raise PermissionDeniedError()
    return action


@router.post(
    "/agencies/{agency_id}/corrective-actions",
    response_model=CorrectiveActionRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Corrective Action",
    description="Raise a corrective action for an agency.",
    responses={201: {"description": "Corrective action created"}, 403: {"description": "Access denied to this agency"}},
)
async def create_corrective_action(
    agency_id: str, payload: CorrectiveActionCreate, repos: ReposDep, user: AgencyUser
) -> CorrectiveActionRead:
    """
    Create a corrective action.

    - **title**: Short description of the fix.
    - **category**: training, equipment, personnel, policy or other.
    - **date_identified**: Defaults to now.
    - **progress**: Percent complete, 0 to 100.
    """
    data = payload.model_dump()
    if data.get("date_identified") is None:
        data.pop("date_identified", None)
    action = await repos.corrective_actions.create(CorrectiveAction(**data, agency_id=agency_id))
    logger.info(f"User {user.id} raised corrective action {action.id} for agency {agency_id}")
    return CorrectiveActionRead.model_validate(action)


@router.get(
    "/agencies/{agency_id}/corrective-actions",
    response_model=list[CorrectiveActionRead],
    summary="List Corrective Actions",
    description="List an agency's corrective actions, oldest finding first.",
)
async def list_corrective_actions(agency_id: str, repos: ReposDep, _: AgencyUser) -> list[CorrectiveActionRead]:
    actions = await repos.corrective_actions.list_by_agency(agency_id)
    return [CorrectiveActionRead.model_validate(a) for a in actions]


@router.patch(
    "/agencies/{agency_id}/corrective-actions/{action_id}",
    response_model=CorrectiveActionRead,
    summary="Update Corrective Action",
    description="Record progress on a corrective action.",
    responses={403: {"description": "Access denied"}, 404: {"description": "Corrective action not found"}},
)
async def update_corrective_action(
    agency_id: str, action_id: str, payload: CorrectiveActionUpdate, repos: ReposDep, _: AgencyUser
) -> CorrectiveActionRead:
    action = await _get_action(repos, agency_id, action_id)
    update_data = payload.model_dump(exclude_unset=True)
    repos.corrective_actions.apply_changes(action, update_data)
    action = await repos.corrective_actions.update(action)
    logger.info(f"Updated corrective action {action.id}: {sorted(update_data)}")
    return CorrectiveActionRead.model_validate(action)


@router.delete(
    "/agencies/{agency_id}/corrective-actions/{action_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Corrective Action",
    responses={403: {"description": "Access denied"}, 404: {"description": "Corrective action not found"}},
)
async def delete_corrective_action(agency_id: str, action_id: str, repos: ReposDep, _: AgencyUser) -> Response:
    action = await _get_action(repos, agency_id, action_id)
    await repos.corrective_actions.delete(action.id)
    logger.info(f"Deleted corrective action {action.id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
