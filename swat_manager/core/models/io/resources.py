"""
Resource library I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ..domain.enums import ResourceCategory


class ResourceRead(BaseModel):
    id: str
    agency_id: str
    title: str
    description: Optional[str] = None
    category: str
    file_url: Optional[str] = None
    file_type: Optional[str] = None
    uploaded_by: Optional[str] = None
    upload_date: datetime
    last_updated: datetime
    version: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    notes: Optional[str] = None

    class Config:
        from_attributes = True


class ResourceCreate(BaseModel):
    """Schema for adding a library document. The uploader is the current user."""

    title: str = Field(min_length=1)
    description: Optional[str] = None
    category: ResourceCategory = ResourceCategory.other
    file_url: Optional[str] = None
    file_type: Optional[str] = None
    version: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    notes: Optional[str] = None

    class Config:
        use_enum_values = True


class ResourceUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[ResourceCategory] = None
    file_url: Optional[str] = None
    file_type: Optional[str] = None
    version: Optional[str] = None
    tags: Optional[List[str]] = None
    notes: Optional[str] = None

    class Config:
        use_enum_values = True
