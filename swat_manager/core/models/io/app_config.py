"""
Client configuration exposed by ``GET /config``.
"""

from typing import Optional

from pydantic import BaseModel


class ConfigRead(BaseModel):
    google_maps_api_key: Optional[str] = None
