"""
Password hashing and access tokens.

Passwords are stored as bcrypt hashes. Authenticated requests carry an HS256
JWT in the ``Authorization: Bearer`` header; the token holds the user id as
``sub`` plus the role and agency so the HTTP layer can short-circuit obvious
authorization failures before loading the user row.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from swat_manager.core.errors import InvalidTokenError
from swat_manager.server.core.config import AuthConfig, settings

BCRYPT_ROUNDS = 10


@dataclass(frozen=True)
class TokenData:
    """Claims extracted from a valid access token."""

    sub: str
    role: str
    agency_id: Optional[str]


def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh salt."""
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored hash.

    A malformed hash is treated as a mismatch.
    """
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(
    user_id: str,
    role: str,
    agency_id: Optional[str] = None,
    config: Optional[AuthConfig] = None,
) -> str:
    """Issue a signed access token for a user.

    Args:
        user_id: The user's primary key, stored as ``sub``
        role: admin or agency
        agency_id: The user's agency, if any
        config: Token settings; defaults to the application settings

    Returns:
        The encoded JWT
    """
    cfg = config or settings.auth
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "role": role,
        "agency_id": agency_id,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=cfg.access_token_ttl_minutes)).timestamp()),
    }
    return jwt.encode(payload, cfg.secret_key, algorithm=cfg.algorithm)


def decode_access_token(token: str, config: Optional[AuthConfig] = None) -> TokenData:
    """Validate a token and return its claims.

    Raises:
        InvalidTokenError: If the signature, expiry or payload is invalid
    """
    cfg = config or settings.auth
    try:
        payload = jwt.decode(token, cfg.secret_key, algorithms=[cfg.algorithm])
    except jwt.PyJWTError as e:
        raise InvalidTokenError() from e
    if "sub" not in payload:
        raise InvalidTokenError()
    return TokenData(sub=payload["sub"], role=payload.get("role", ""), agency_id=payload.get("agency_id"))
