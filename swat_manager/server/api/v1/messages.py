"""
API endpoints for internal messaging.

Administrators can write to anyone or broadcast to every user. Agency users
write to administrators and reply to what administrators sent them.
"""

from __future__ import annotations

from typing import Dict, Iterable

from fastapi import APIRouter, HTTPException, Response, status

from swat_manager.core.database.entities.messages import Message
from swat_manager.core.database.entities.users import User
from swat_manager.core.database.repositories import SqlRepoBundle
from swat_manager.core.logging_config import get_logger
from swat_manager.core.models.io.messages import MessageCreate, MessageRead
from swat_manager.server.services.deps import CurrentUser, ReposDep
from swat_manager.server.services.messaging import (
    AGENCY_MESSAGING_DENIED,
    can_delete,
    can_mark_read,
    can_message,
    enrich_messages,
)

logger = get_logger(__name__)

router = APIRouter(tags=["messages"])


async def _load_users(repos: SqlRepoBundle, messages: Iterable[Message]) -> Dict[str, User]:
    user_ids = set()
    for message in messages:
        user_ids.add(message.sender_id)
        if message.recipient_id:
            user_ids.add(message.recipient_id)
    users: Dict[str, User] = {}
    for user_id in user_ids:
        found = await repos.users.get_by_id(user_id)
        if found is not None:
            users[user_id] = found
    return users


async def _get_message(repos: SqlRepoBundle, message_id: str) -> Message:
    message = await repos.messages.get_by_id(message_id)
    if not message:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    return message


@router.post(
    "",
    response_model=MessageRead,
    status_code=status.HTTP_201_CREATED,
    summary="Send Message",
    description="Send a message, a reply, or (administrators) a broadcast.",
    responses={
        201: {"description": "Message sent"},
        403: {"description": "Agency users may only message administrators"},
        404: {"description": "Recipient or parent message not found"},
    },
)
async def send_message(payload: MessageCreate, repos: ReposDep, user: CurrentUser) -> MessageRead:
    """
    Send a message.

    - **subject** / **content**: Non-empty text.
    - **recipient_id**: Addressed user. Leave empty to broadcast.
    - **parent_message_id**: The message being replied to.
    - **category**: general, assessment, training, equipment, personnel or support.
    """
    recipient = None
    if payload.recipient_id:
        recipient = await repos.users.get_by_id(payload.recipient_id)
        if recipient is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipient not found")
    parent = parent_sender = None
    if payload.parent_message_id:
        parent = await _get_message(repos, payload.parent_message_id)
        parent_sender = await repos.users.get_by_id(parent.sender_id)

    if not can_message(user, recipient, parent, parent_sender):
        logger.info(f"User {user.id} refused messaging {payload.recipient_id or 'everyone'}")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=AGENCY_MESSAGING_DENIED)

    message = await repos.messages.create(Message(**payload.model_dump(), sender_id=user.id, agency_id=user.agency_id))
    logger.info(f"User {user.id} sent message {message.id} to {message.recipient_id or 'everyone'}")
    users = {user.id: user}
    if recipient is not None:
        users[recipient.id] = recipient
    return enrich_messages([message], users, include_recipient=True)[0]


@router.get(
    "/sent",
    response_model=list[MessageRead],
    summary="List Sent Messages",
    description="Messages the current user sent, newest first, with recipient names.",
)
async def list_sent(repos: ReposDep, user: CurrentUser) -> list[MessageRead]:
    messages = await repos.messages.list_sent(user.id)
    return enrich_messages(messages, await _load_users(repos, messages), include_recipient=True)


@router.get(
    "/received",
    response_model=list[MessageRead],
    summary="List Received Messages",
    description="Messages addressed to the current user, newest first, with sender names.",
)
async def list_received(repos: ReposDep, user: CurrentUser) -> list[MessageRead]:
    """
    List received messages.

    Agency users also receive broadcasts sent to their agency or to everyone.
    """
    messages = await repos.messages.list_received(user.id, user.agency_id, include_broadcasts=not user.is_admin)
    return enrich_messages(messages, await _load_users(repos, messages))


@router.patch(
    "/{message_id}/read",
    response_model=MessageRead,
    summary="Mark Message Read",
    responses={403: {"description": "Access denied"}, 404: {"description": "Message not found"}},
)
async def mark_read(message_id: str, repos: ReposDep, user: CurrentUser) -> MessageRead:
    message = await _get_message(repos, message_id)
    if not can_mark_read(user, message):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
    message = await repos.messages.mark_read(message)
    return enrich_messages([message], await _load_users(repos, [message]), include_recipient=True)[0]


@router.delete(
    "/{message_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Message",
    description="Delete a message the user sent or received.",
    responses={403: {"description": "Access denied"}, 404: {"description": "Message not found"}},
)
async def delete_message(message_id: str, repos: ReposDep, user: CurrentUser) -> Response:
    message = await _get_message(repos, message_id)
    if not can_delete(user, message):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
    await repos.messages.delete(message.id)
    logger.info(f"User {user.id} deleted message {message.id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
