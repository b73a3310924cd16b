"""
API endpoints for agency equipment inventory.
"""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from swat_manager.core.database.entities.equipment import Equipment
from swat_manager.core.database.repositories import SqlRepoBundle
from swat_manager.core.errors import NotFoundError, PermissionDeniedError
from swat_manager.core.logging_config import get_logger
from swat_manager.core.models.io.equipment import EquipmentCreate, EquipmentRead, EquipmentUpdate
from swat_manager.server.services.deps import AgencyUser, ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["equipment"])


async def _get_item(repos: SqlRepoBundle, agency_id: str, equipment_id: str) -> Equipment:
    item = await repos.equipment.get_by_id(equipment_id)
    if not item:
        raise NotFoundError("Equipment", equipment_id)
    if item.agency_id != agency_id:
        raise PermissionDeniedError()
    return item


@router.post(
    "/agencies/{agency_id}/equipment",
    response_model=EquipmentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add Equipment",
    description="Add an item to an agency's inventory.",
    responses={201: {"description": "Equipment added"}, 403: {"description": "Access denied to this agency"}},
)
async def create_equipment(agency_id: str, payload: EquipmentCreate, repos: ReposDep, _: AgencyUser) -> EquipmentRead:
    """
    Add equipment.

    - **name** / **category**: Required.
    - **assigned_to_id**: Team member holding the item, if any.
    - **condition**: `excellent`, `good`, `fair` or `poor`.
    - **status**: `operational`, `maintenance`, `service_due`, `repair` or `retired`.
    """
    item = await repos.equipment.create(Equipment(**payload.model_dump(), agency_id=agency_id))
    logger.info(f"Added equipment {item.id} to agency {agency_id}")
    return EquipmentRead.model_validate(item)


@router.get(
    "/agencies/{agency_id}/equipment",
    response_model=list[EquipmentRead],
    summary="List Equipment",
)
async def list_equipment(agency_id: str, repos: ReposDep, _: AgencyUser) -> list[EquipmentRead]:
    items = await repos.equipment.list_by_agency(agency_id)
    return [EquipmentRead.model_validate(i) for i in items]


@router.get(
    "/agencies/{agency_id}/equipment/{equipment_id}",
    response_model=EquipmentRead,
    summary="Get Equipment",
    responses={403: {"description": "Access denied"}, 404: {"description": "Equipment not found"}},
)
async def get_equipment(agency_id: str, equipment_id: str, repos: ReposDep, _: AgencyUser) -> EquipmentRead:
    return EquipmentRead.model_validate(await _get_item(repos, agency_id, equipment_id))


@router.patch(
    "/agencies/{agency_id}/equipment/{equipment_id}",
    response_model=EquipmentRead,
    summary="Update Equipment",
    responses={403: {"description": "Access denied"}, 404: {"description": "Equipment not found"}},
)
async def update_equipment(
    agency_id: str, equipment_id: str, payload: EquipmentUpdate, repos: ReposDep, _: AgencyUser
) -> EquipmentRead:
    item = await _get_item(repos, agency_id, equipment_id)
    repos.equipment.apply_changes(item, payload.model_dump(exclude_unset=True))
    item = await repos.equipment.update(item)
    return EquipmentRead.model_validate(item)


@router.delete(
    "/agencies/{agency_id}/equipment/{equipment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove Equipment",
    responses={403: {"description": "Access denied"}, 404: {"description": "Equipment not found"}},
)
async def delete_equipment(agency_id: str, equipment_id: str, repos: ReposDep, _: AgencyUser) -> Response:
    item = await _get_item(repos, agency_id, equipment_id)
    await repos.equipment.delete(item.id)
    logger.info(f"Removed equipment {item.id} from agency {agency_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
