"""
Request dependencies.

Resolves the database session, the repository bundle and the authenticated
user for API endpoints, and enforces the admin and agency access rules.
"""

from __future__ import annotations

from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from swat_manager.core.database import get_session
from swat_manager.core.database.entities.assessments import Assessment
from swat_manager.core.database.entities.users import User
from swat_manager.core.database.repositories import (
    SqlRepoBundle,
    build_sql_repos_from_session,
)
from swat_manager.core.errors import InvalidTokenError, NotFoundError, PermissionDeniedError
from swat_manager.core.logging_config import get_logger
from swat_manager.core.security import decode_access_token

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_repos(session: SessionDep) -> SqlRepoBundle:
    return build_sql_repos_from_session(session=session)


ReposDep = Annotated[SqlRepoBundle, Depends(get_repos)]


async def get_optional_user(
    repos: ReposDep,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[User]:
    """Resolve the user behind the bearer token, or None for anonymous requests."""
    if credentials is None or not credentials.credentials:
        return None
    try:
        token = decode_access_token(credentials.credentials)
    except InvalidTokenError:
        logger.debug("Rejected an invalid or expired access token")
        return None
    return await repos.users.get_by_id(token.sub)


async def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
OptionalUser = Annotated[Optional[User], Depends(get_optional_user)]


async def require_admin(user: CurrentUser) -> User:
    if not user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return user


AdminUser = Annotated[User, Depends(require_admin)]


def has_agency_access(user: User, agency_id: Optional[str]) -> bool:
    """Admins see every agency; agency users only their own."""
    return user.is_admin or (user.agency_id is not None and user.agency_id == agency_id)


def ensure_agency_access(user: User, agency_id: Optional[str], detail: str = "Access denied to this agency") -> None:
    """Raise ``PermissionDeniedError`` unless ``user`` may act on ``agency_id``."""
    if not has_agency_access(user, agency_id):
        logger.debug(f"User {user.id} denied access to agency {agency_id}")
        raise PermissionDeniedError(detail)


async def require_agency_access(agency_id: str, user: CurrentUser) -> User:
    """Path-level guard for ``/agencies/{agency_id}/...`` routes."""
    ensure_agency_access(user, agency_id)
    return user


AgencyUser = Annotated[User, Depends(require_agency_access)]


async def get_accessible_assessment(
    repos: SqlRepoBundle,
    user: User,
    assessment_id: str,
    forbidden_detail: str = "Access denied to this assessment",
) -> Assessment:
    """Load an assessment the user may act on.

    Raises:
        NotFoundError: When it does not exist
        PermissionDeniedError: When it belongs to another agency and the user is not an admin
    """
    assessment = await repos.assessments.get_by_id(assessment_id)
    if not assessment:
        raise NotFoundError("Assessment", assessment_id)
    ensure_agency_access(user, assessment.agency_id, detail=forbidden_detail)
    return assessment
