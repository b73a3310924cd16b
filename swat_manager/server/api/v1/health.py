"""
Service status endpoints.

``/health`` is what load balancers and the compose healthcheck poll: it
answers 200 while the database accepts queries and 503 otherwise. ``/version``
identifies the running build.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from swat_manager import __version__
from swat_manager.core.logging_config import get_logger
from swat_manager.server.core import constant
from swat_manager.server.services.deps import SessionDep

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Report whether the SWAT Manager API and its database are reachable.",
    responses={
        200: {"description": "API and database are up"},
        503: {"description": "Database unreachable"},
    },
)
async def health_check(session: SessionDep) -> JSONResponse:
    body = {"status": "ok", "service": constant.PROJECT_NAME, "database": "ok"}
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning(f"Health check could not reach the database: {str(e)}")
        body.update(status="degraded", database="unavailable")
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
    return JSONResponse(status_code=status.HTTP_200_OK, content=body)


@router.get(
    "/version",
    summary="Get Version",
    description="Name, release and API prefix of the running service.",
)
async def version():
    return {"service": constant.PROJECT_NAME, "version": __version__, "api": constant.API_V1_STR}
