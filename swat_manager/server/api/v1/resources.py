"""
API endpoints for an agency's resource library (SOPs, manuals, forms).
"""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from swat_manager.core.database.entities.resources import Resource
from swat_manager.core.database.repositories import SqlRepoBundle
from swat_manager.core.errors import NotFoundError, PermissionDeniedError
from swat_manager.core.logging_config import get_logger
from swat_manager.core.models.io.resources import ResourceCreate, ResourceRead, ResourceUpdate
from swat_manager.server.services.deps import AgencyUser, ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["resources"])


async def _get_resource(repos: SqlRepoBundle, agency_id: str, resource_id: str) -> Resource:
    resource = await repos.resources.get_by_id(resource_id)
    if not resource:
        raise NotFoundError("Resource", resource_id)
    if resource.agency_id != agency_id:
        raise PermissionDeniedError()
    return resource


@router.post(
    "/agencies/{agency_id}/resources",
    response_model=ResourceRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add Resource",
    description="Add a document to an agency's library. The uploader is the current user.",
    responses={201: {"description": "Resource added"}, 403: {"description": "Access denied to this agency"}},
)
async def create_resource(agency_id: str, payload: ResourceCreate, repos: ReposDep, user: AgencyUser) -> ResourceRead:
    resource = await repos.resources.create(Resource(**payload.model_dump(), agency_id=agency_id, uploaded_by=user.id))
    logger.info(f"User {user.id} added resource {resource.id} to agency {agency_id}")
    return ResourceRead.model_validate(resource)


@router.get(
    "/agencies/{agency_id}/resources",
    response_model=list[ResourceRead],
    summary="List Resources",
    description="List an agency's library documents by title.",
)
async def list_resources(agency_id: str, repos: ReposDep, _: AgencyUser) -> list[ResourceRead]:
    resources = await repos.resources.list_by_agency(agency_id)
    return [ResourceRead.model_validate(r) for r in resources]


@router.patch(
    "/agencies/{agency_id}/resources/{resource_id}",
    response_model=ResourceRead,
    summary="Update Resource",
    responses={403: {"description": "Access denied"}, 404: {"description": "Resource not found"}},
)
async def update_resource(
    agency_id: str, resource_id: str, payload: ResourceUpdate, repos: ReposDep, _: AgencyUser
) -> ResourceRead:
    resource = await _get_resource(repos, agency_id, resource_id)
    repos.resources.apply_changes(resource, payload.model_dump(exclude_unset=True))
    resource = await repos.resources.update(resource)
    return ResourceRead.model_validate(resource)


@router.delete(
    "/agencies/{agency_id}/resources/{resource_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Resource",
    responses={403: {"description": "Access denied"}, 404: {"description": "Resource not found"}},
)
async def delete_resource(agency_id: str, resource_id: str, repos: ReposDep, _: AgencyUser) -> Response:
    resource = await _get_resource(repos, agency_id, resource_id)
    await repos.resources.delete(resource.id)
    logger.info(f"Deleted resource {resource.id} from agency {agency_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
