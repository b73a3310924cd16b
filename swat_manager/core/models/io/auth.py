"""
Authentication I/O models.

Login exchanges credentials for a bearer token; the token is then sent in the
``Authorization`` header of every authenticated request.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from ..domain.enums import InterfaceType
from .users import UserRead


class LoginRequest(BaseModel):
    """Schema for the login form."""

    email: str = Field(description="Login email")
    password: str = Field(description="Plaintext password")
    interface_type: Optional[InterfaceType] = Field(
        default=None, description="Product to open: assessment or tracking (premium)"
    )


class LoginResponse(BaseModel):
    """Schema returned after a successful login."""

    user: UserRead
    access_token: str
    token_type: str = "bearer"


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
