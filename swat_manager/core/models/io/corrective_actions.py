"""
Corrective action I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ..domain.enums import CorrectiveActionCategory, CorrectiveActionStatus, Priority


class CorrectiveActionRead(BaseModel):
    id: str
    agency_id: str
    title: str
    description: Optional[str] = None
    category: str
    date_identified: datetime
    target_completion_date: Optional[datetime] = None
    responsible_party: Optional[str] = None
    priority: str
    status: str
    action_plan: List[str] = Field(default_factory=list)
    progress: int = 0
    completion_date: Optional[datetime] = None
    verification_method: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CorrectiveActionCreate(BaseModel):
    """Schema for raising a corrective action. The agency comes from the URL."""

    title: str = Field(min_length=1)
    description: Optional[str] = None
    category: CorrectiveActionCategory = CorrectiveActionCategory.other
    date_identified: Optional[datetime] = None
    target_completion_date: Optional[datetime] = None
    responsible_party: Optional[str] = None
    priority: Priority = Priority.medium
    status: CorrectiveActionStatus = CorrectiveActionStatus.open
    action_plan: List[str] = Field(default_factory=list)
    progress: int = Field(default=0, ge=0, le=100)
    completion_date: Optional[datetime] = None
    verification_method: Optional[str] = None
    notes: Optional[str] = None

    class Config:
        use_enum_values = True


class CorrectiveActionUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[CorrectiveActionCategory] = None
    target_completion_date: Optional[datetime] = None
    responsible_party: Optional[str] = None
    priority: Optional[Priority] = None
    status: Optional[CorrectiveActionStatus] = None
    action_plan: Optional[List[str]] = None
    progress: Optional[int] = Field(default=None, ge=0, le=100)
    completion_date: Optional[datetime] = None
    verification_method: Optional[str] = None
    notes: Optional[str] = None

    class Config:
        use_enum_values = True
