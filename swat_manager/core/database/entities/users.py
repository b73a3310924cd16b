"""
User entity models.

Users authenticate against the platform. Administrators see every agency;
agency users are bound to a single agency through ``agency_id``.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Dict, Optional

from sqlmodel import JSON, Field

from ..base import Base, UTCDateTime, new_id, utc_now


DEFAULT_PERMISSIONS: Dict[str, bool] = {"read": True, "write": False, "edit": False, "delete": False}


def default_permissions() -> Dict[str, bool]:
    return dict(DEFAULT_PERMISSIONS)


class UserBase(Base):
    """Base fields for users."""

    first_name: str = Field(max_length=128, description="Given name")
    last_name: str = Field(max_length=128, description="Family name")
    email: str = Field(max_length=255, unique=True, index=True, description="Login email")
    role: str = Field(default="agency", max_length=16, description="admin or agency")
    agency_id: Optional[str] = Field(
        default=None,
        foreign_key="agencies.id",
        ondelete="SET NULL",
        index=True,
        description="Agency the user belongs to",
    )
    permissions: Dict[str, bool] = Field(
        default_factory=default_permissions, sa_type=JSON, description="Fine-grained read/write/edit/delete flags"
    )
    interface_type: str = Field(default="assessment", max_length=16, description="assessment or tracking")
    notes: Optional[str] = Field(default=None, description="Administrator notes")
    preferences: Optional[str] = Field(default=None, description="JSON-encoded UI preferences")
    profile_picture_url: Optional[str] = Field(default=None, description="Avatar URL")
    premium_access: bool = Field(default=False, description="Whether the current session unlocked tracking")


class User(UserBase, table=True):
    """Persistent user account.

    The password hash never leaves the persistence layer; read schemas omit it.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    password_hash: str = Field(description="bcrypt hash of the user's password")

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now}, sa_type=UTCDateTime)

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def get_preferences(self) -> Dict[str, Any]:
        """Get preferences as a dict."""
        try:
            loaded = json.loads(self.preferences) if self.preferences else {}
        except (json.JSONDecodeError, TypeError):
            return {}
        return loaded if isinstance(loaded, dict) else {}

    def merge_preferences(self, updates: Dict[str, Any]) -> Dict[str, Any]:
        """Merge ``updates`` into the stored preferences and return the result."""
        merged = {**self.get_preferences(), **updates}
        self.preferences = json.dumps(merged)
        return merged

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email}, role={self.role})"
