"""
API endpoints for managing user accounts.

Administrators manage every account. Users may read accounts, and change
their own password, preferences and profile picture.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, HTTPException, Response, status

from swat_manager.core.database.entities.users import User
from swat_manager.core.logging_config import get_logger
from swat_manager.core.models.io.users import (
    PasswordChange,
    PreferencesResponse,
    ProfilePictureResponse,
    ProfilePictureUpdate,
    UserCreate,
    UserRead,
    UserUpdate,
)
from swat_manager.core.models.io.auth import MessageResponse
from swat_manager.core.security import hash_password, verify_password
from swat_manager.server.services.deps import AdminUser, CurrentUser, ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["users"])


def _ensure_self_or_admin(current: User, user_id: str) -> None:
    if current.id != user_id and not current.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")


async def _get_user_or_404(repos: ReposDep, user_id: str) -> User:
    user = await repos.users.get_by_id(user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create User",
    description="Create a user account. Administrators only.",
    response_description="The created user, without its password.",
    responses={
        201: {"description": "User created successfully"},
        400: {"description": "Email already registered"},
        403: {"description": "Admin access required"},
    },
)
async def create_user(payload: UserCreate, repos: ReposDep, _: AdminUser) -> UserRead:
    """
    Create a new user.

    The password is hashed with bcrypt before it is stored.

    - **first_name** / **last_name**: Non-empty names.
    - **email**: Login email, unique across the platform.
    - **password**: At least 8 characters.
    - **role**: `admin` or `agency`.
    - **agency_id**: The agency an agency user belongs to.
    """
    if await repos.users.get_by_email(payload.email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")
    data = payload.model_dump(exclude={"password"})
    user = User(**data, password_hash=hash_password(payload.password))
    user = await repos.users.create(user)
    logger.info(f"Created user {user.id} ({user.role})")
    return UserRead.model_validate(user)


@router.get(
    "",
    response_model=list[UserRead],
    summary="List Users",
    description="List every user account. Administrators only.",
)
async def list_users(repos: ReposDep, _: AdminUser) -> list[UserRead]:
    users = await repos.users.list()
    logger.debug(f"Retrieved {len(users)} users")
    return [UserRead.model_validate(u) for u in users]


@router.get(
    "/me",
    response_model=UserRead,
    summary="Get Current User",
    description="Return the authenticated user.",
    responses={401: {"description": "Not authenticated"}},
)
async def get_me(user: CurrentUser) -> UserRead:
    return UserRead.model_validate(user)


@router.get(
    "/{user_id}",
    response_model=UserRead,
    summary="Get User",
    description="Retrieve a user by ID.",
    responses={404: {"description": "User not found"}},
)
async def get_user(user_id: str, repos: ReposDep, _: CurrentUser) -> UserRead:
    return UserRead.model_validate(await _get_user_or_404(repos, user_id))


@router.patch(
    "/{user_id}",
    response_model=UserRead,
    summary="Update User",
    description="Update a user's profile, role or agency. Administrators only.",
    responses={
        400: {"description": "Email address is already in use"},
        404: {"description": "User not found"},
    },
)
async def update_user(user_id: str, payload: UserUpdate, repos: ReposDep, _: AdminUser) -> UserRead:
    """
    Update a user.

    Only the fields present in the request body are changed. Passwords are
    changed through `POST /users/{user_id}/password`.
    """
    user = await _get_user_or_404(repos, user_id)
    update_data = payload.model_dump(exclude_unset=True)
    new_email = update_data.get("email")
    if new_email and new_email.lower() != user.email.lower():
        existing = await repos.users.get_by_email(new_email)
        if existing and existing.id != user.id:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email address is already in use")
    repos.users.apply_changes(user, update_data)
    user = await repos.users.update(user)
    logger.info(f"Updated user {user.id}: {sorted(update_data)}")
    return UserRead.model_validate(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete User",
    description="Delete a user account. Administrators only.",
    responses={404: {"description": "User not found"}},
)
async def delete_user(user_id: str, repos: ReposDep, _: AdminUser) -> Response:
    if not await repos.users.delete(user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    logger.info(f"Deleted user {user_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{user_id}/password",
    response_model=MessageResponse,
    summary="Change Password",
    description="Change a user's password. Users may change their own; administrators anyone's.",
    responses={
        401: {"description": "Current password is incorrect"},
        403: {"description": "Access denied"},
        404: {"description": "User not found"},
    },
)
async def change_password(
    user_id: str, payload: PasswordChange, repos: ReposDep, current: CurrentUser
) -> MessageResponse:
    """
    Change a password.

    - **current_password**: The password being replaced.
    - **new_password**: At least 8 characters.
    """
    _ensure_self_or_admin(current, user_id)
    user = await _get_user_or_404(repos, user_id)
    if not verify_password(payload.current_password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Current password is incorrect")
    user.password_hash = hash_password(payload.new_password)
    await repos.users.update(user)
    logger.info(f"Password changed for user {user.id}")
    return MessageResponse(message="Password updated successfully")


@router.patch(
    "/{user_id}/preferences",
    response_model=PreferencesResponse,
    summary="Update Preferences",
    description="Merge keys into a user's UI preferences.",
    responses={403: {"description": "Access denied"}, 404: {"description": "User not found"}},
)
async def update_preferences(
    user_id: str,
    repos: ReposDep,
    current: CurrentUser,
    preferences: Dict[str, Any] = Body(..., description="Preference keys to set"),
) -> PreferencesResponse:
    _ensure_self_or_admin(current, user_id)
    user = await _get_user_or_404(repos, user_id)
    merged = user.merge_preferences(preferences)
    await repos.users.update(user)
    return PreferencesResponse(message="Preferences updated successfully", preferences=merged)


@router.post(
    "/{user_id}/profile-picture",
    response_model=ProfilePictureResponse,
    summary="Update Profile Picture",
    description="Set the URL of a user's profile picture.",
    responses={
        400: {"description": "Profile picture URL is required"},
        403: {"description": "Access denied"},
        404: {"description": "User not found"},
    },
)
async def update_profile_picture(
    user_id: str, payload: ProfilePictureUpdate, repos: ReposDep, current: CurrentUser
) -> ProfilePictureResponse:
    _ensure_self_or_admin(current, user_id)
    if not payload.profile_picture_url:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Profile picture URL is required")
    user = await _get_user_or_404(repos, user_id)
    user.profile_picture_url = payload.profile_picture_url
    await repos.users.update(user)
    return ProfilePictureResponse(
        message="Profile picture updated successfully", profile_picture_url=payload.profile_picture_url
    )
