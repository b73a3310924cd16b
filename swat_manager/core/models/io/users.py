"""
User I/O models for API requests and responses.

``UserRead`` deliberately has no password field: hashes never leave the
server.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from ..domain.enums import InterfaceType, UserRole


def _default_permissions() -> Dict[str, bool]:
    return {"read": True, "write": False, "edit": False, "delete": False}


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str
    first_name: str
    last_name: str
    email: str
    role: str
    agency_id: Optional[str] = None
    permissions: Dict[str, bool] = Field(default_factory=_default_permissions)
    interface_type: str = "assessment"
    notes: Optional[str] = None
    preferences: Optional[str] = None
    profile_picture_url: Optional[str] = None
    premium_access: bool = False
    created_at: datetime

    class Config:
        from_attributes = True


class UserCreate(BaseModel):
    """Schema for creating a user via API."""

    first_name: str = Field(min_length=1, description="Given name")
    last_name: str = Field(min_length=1, description="Family name")
    email: EmailStr = Field(description="Login email, unique")
    password: str = Field(min_length=8, description="Initial password, at least 8 characters")
    role: UserRole = Field(default=UserRole.agency, description="admin or agency")
    agency_id: Optional[str] = Field(default=None, description="Agency for agency users")
    permissions: Dict[str, bool] = Field(default_factory=_default_permissions)
    notes: Optional[str] = None
    interface_type: InterfaceType = InterfaceType.assessment
    premium_access: bool = False

    class Config:
        use_enum_values = True

    @field_validator("first_name", "last_name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()


class UserUpdate(BaseModel):
    """Schema for updating a user via API. The password is changed through its own endpoint."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None
    role: Optional[UserRole] = None
    agency_id: Optional[str] = None
    permissions: Optional[Dict[str, bool]] = None
    notes: Optional[str] = None
    interface_type: Optional[InterfaceType] = None
    premium_access: Optional[bool] = None

    class Config:
        use_enum_values = True


class PasswordChange(BaseModel):
    current_password: str
    new_password: str = Field(min_length=8)


class ProfilePictureUpdate(BaseModel):
    profile_picture_url: Optional[str] = None


class PreferencesResponse(BaseModel):
    message: str
    preferences: Dict[str, Any]


class ProfilePictureResponse(BaseModel):
    message: str
    profile_picture_url: str
