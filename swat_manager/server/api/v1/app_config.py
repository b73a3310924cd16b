"""
Client configuration endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter

from swat_manager.core.models.io.app_config import ConfigRead
from swat_manager.server.core.config import settings
from swat_manager.server.services.deps import CurrentUser

router = APIRouter(tags=["config"])


@router.get(
    "/config",
    response_model=ConfigRead,
    summary="Get Client Config",
    description="Settings the web client needs at runtime, such as the Google Maps key.",
)
async def get_config(_: CurrentUser) -> ConfigRead:
    return ConfigRead(google_maps_api_key=settings.google_maps_api_key)
