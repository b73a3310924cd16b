"""
Equipment entity model.

Inventory items owned by an agency, optionally assigned to a team member.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, UTCDateTime, new_id, utc_now



class EquipmentBase(Base):
    """Base fields for equipment."""

    agency_id: str = Field(foreign_key="agencies.id", ondelete="CASCADE", index=True, description="Owning agency")
    name: str = Field(max_length=255, description="Item name")
    serial_number: Optional[str] = Field(default=None, description="Manufacturer serial number")
    category: str = Field(max_length=64, description="Item category (armor, optics, breaching, ...)")
    manufacturer: Optional[str] = Field(default=None, description="Manufacturer")
    model: Optional[str] = Field(default=None, description="Model")
    location: Optional[str] = Field(default=None, description="Storage location")
    assigned_to_id: Optional[str] = Field(
        default=None, foreign_key="personnel.id", ondelete="SET NULL", description="Team member holding the item"
    )
    purchase_date: Optional[datetime] = Field(default=None, description="Date of purchase", sa_type=UTCDateTime)
    condition: str = Field(default="good", max_length=16, description="excellent, good, fair or poor")
    last_maintenance: Optional[datetime] = Field(default=None, description="Last maintenance date", sa_type=UTCDateTime)
    next_maintenance: Optional[datetime] = Field(default=None, description="Next maintenance due", sa_type=UTCDateTime)
    warranty_expiration: Optional[datetime] = Field(default=None, description="Warranty end date", sa_type=UTCDateTime)
    status: str = Field(default="operational", max_length=16, description="Operational status")
    notes: Optional[str] = Field(default=None, description="Free-form notes")
    photo_url: Optional[str] = Field(default=None, description="Photo of the item")


class Equipment(EquipmentBase, table=True):
    """Persistent equipment item.

    Table: equipment
    """

    __tablename__ = "equipment"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now}, sa_type=UTCDateTime)

    def __repr__(self) -> str:
        return f"Equipment(id={self.id}, name={self.name}, status={self.status})"
