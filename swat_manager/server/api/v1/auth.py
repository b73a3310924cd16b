"""
Authentication Endpoints.

Login exchanges an email and password for a bearer token. Tokens are
stateless, so logout only acknowledges the request; clients drop the token.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, status

from swat_manager.core.logging_config import get_logger
from swat_manager.core.models.domain.enums import InterfaceType
from swat_manager.core.models.io.auth import LoginRequest, LoginResponse, MessageResponse
from swat_manager.core.models.io.users import UserRead
from swat_manager.core.security import create_access_token, verify_password
from swat_manager.server.services.deps import OptionalUser, ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])

PREMIUM_REQUIRED = "SWAT Tracking requires a premium subscription. Please contact your administrator."


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Log In",
    description="Authenticate with email and password and receive a bearer token.",
    response_description="The authenticated user and an access token.",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid email or password"},
        403: {"description": "The requested interface needs a premium subscription"},
    },
)
async def login(credentials: LoginRequest, repos: ReposDep) -> LoginResponse:
    """
    Log in.

    Verifies the credentials and issues an access token. When an interface is
    requested it is remembered on the user. SWAT Tracking is a premium
    product: agency users whose agency has not paid are refused it, while
    administrators always get it.

    - **email**: Login email (case-insensitive).
    - **password**: Plaintext password.
    - **interface_type**: Optional `assessment` or `tracking`.
    """
    user = await repos.users.get_by_email(credentials.email)
    if user is None or not verify_password(credentials.password, user.password_hash):
        logger.info(f"Failed login attempt for {credentials.email}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")

    if credentials.interface_type is not None:
        interface = InterfaceType(credentials.interface_type)
        if interface is InterfaceType.tracking and not user.is_admin and user.agency_id:
            agency = await repos.agencies.get_by_id(user.agency_id)
            if agency is not None and not agency.paid_status:
                logger.info(f"Tracking login refused for user {user.id}: agency {agency.id} is not premium")
                raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=PREMIUM_REQUIRED)
        user.interface_type = interface.value
        user.premium_access = interface is InterfaceType.tracking
        user = await repos.users.update(user)

    token = create_access_token(user.id, user.role, user.agency_id)
    logger.info(f"User {user.id} logged in")
    return LoginResponse(user=UserRead.model_validate(user), access_token=token)


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Log Out",
    description="End the client session. Tokens are stateless; the client discards its token.",
)
async def logout(user: OptionalUser) -> MessageResponse:
    """
    Log out.

    Always succeeds, even for anonymous callers.
    """
    if user is not None:
        logger.info(f"User {user.id} logged out")
    return MessageResponse(message="Logged out successfully")


@router.get(
    "/user",
    response_model=Optional[UserRead],
    summary="Get Session User",
    description="Return the user behind the bearer token, or null when anonymous.",
)
async def session_user(user: OptionalUser) -> Optional[UserRead]:
    """
    Get the current user.

    Unlike `/users/me` this never fails: anonymous callers receive `null`.
    """
    if user is None:
        return None
    return UserRead.model_validate(user)
