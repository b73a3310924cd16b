"""
Equipment I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..domain.enums import EquipmentCondition, EquipmentStatus


class EquipmentRead(BaseModel):
    """Schema for reading an equipment item from the API."""

    id: str
    agency_id: str
    name: str
    serial_number: Optional[str] = None
    category: str
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    location: Optional[str] = None
    assigned_to_id: Optional[str] = None
    purchase_date: Optional[datetime] = None
    condition: str
    last_maintenance: Optional[datetime] = None
    next_maintenance: Optional[datetime] = None
    warranty_expiration: Optional[datetime] = None
    status: str
    notes: Optional[str] = None
    photo_url: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class EquipmentCreate(BaseModel):
    """Schema for adding an equipment item. The agency comes from the URL."""

    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    serial_number: Optional[str] = None
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    location: Optional[str] = None
    assigned_to_id: Optional[str] = None
    purchase_date: Optional[datetime] = None
    condition: EquipmentCondition = EquipmentCondition.good
    last_maintenance: Optional[datetime] = None
    next_maintenance: Optional[datetime] = None
    warranty_expiration: Optional[datetime] = None
    status: EquipmentStatus = EquipmentStatus.operational
    notes: Optional[str] = None
    photo_url: Optional[str] = None

    class Config:
        use_enum_values = True


class EquipmentUpdate(BaseModel):
    """Schema for updating an equipment item via API."""

    name: Optional[str] = None
    category: Optional[str] = None
    serial_number: Optional[str] = None
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    location: Optional[str] = None
    assigned_to_id: Optional[str] = None
    purchase_date: Optional[datetime] = None
    condition: Optional[EquipmentCondition] = None
    last_maintenance: Optional[datetime] = None
    next_maintenance: Optional[datetime] = None
    warranty_expiration: Optional[datetime] = None
    status: Optional[EquipmentStatus] = None
    notes: Optional[str] = None
    photo_url: Optional[str] = None

    class Config:
        use_enum_values = True
