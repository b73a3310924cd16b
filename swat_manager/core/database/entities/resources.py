"""
Resource library entity model.

Policies, SOPs, templates and other documents shared within an agency.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlmodel import JSON, Field

from ..base import Base, UTCDateTime, new_id, utc_now



class ResourceBase(Base):
    """Base fields for library resources."""

    agency_id: str = Field(foreign_key="agencies.id", ondelete="CASCADE", index=True, description="Owning agency")
    title: str = Field(max_length=255, description="Document title")
    description: Optional[str] = Field(default=None, description="Document summary")
    category: str = Field(default="other", max_length=16, description="policy, sop, training, template, external")
    file_url: Optional[str] = Field(default=None, description="Where the document lives")
    file_type: Optional[str] = Field(default=None, max_length=32, description="pdf, docx, link, ...")
    version: Optional[str] = Field(default=None, max_length=32, description="Document version")
    tags: List[str] = Field(default_factory=list, sa_type=JSON, description="Search tags")
    notes: Optional[str] = Field(default=None, description="Free-form notes")


class Resource(ResourceBase, table=True):
    """Persistent library resource.

    Table: resources
    """

    __tablename__ = "resources"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    uploaded_by: Optional[str] = Field(
        default=None, foreign_key="users.id", ondelete="SET NULL", description="User who added it"
    )
    upload_date: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    last_updated: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now}, sa_type=UTCDateTime)

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)

    def __repr__(self) -> str:
        return f"Resource(id={self.id}, title={self.title}, category={self.category})"
