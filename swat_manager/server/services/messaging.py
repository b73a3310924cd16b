"""
Messaging permissions and display helpers.

Administrators may message anyone, including broadcasts without a recipient.
Agency users may only write to administrators, or reply to an administrator's
message that was addressed to them or to their agency.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from swat_manager.core.database.entities.messages import Message
from swat_manager.core.database.entities.users import User
from swat_manager.core.models.io.messages import MessageRead

AGENCY_MESSAGING_DENIED = (
    "Agency users can only send messages to admin users or reply to messages from admin users"
)
BROADCAST_RECIPIENT_NAME = "Admin Team"
UNKNOWN_USER_NAME = "Unknown"


def is_reply_to_admin(sender: User, parent: Optional[Message], parent_sender: Optional[User]) -> bool:
    if parent is None or parent_sender is None or not parent_sender.is_admin:
        return False
    return parent.recipient_id == sender.id or (
        parent.agency_id is not None and parent.agency_id == sender.agency_id
    )


def can_message(
    sender: User,
    recipient: Optional[User],
    parent: Optional[Message] = None,
    parent_sender: Optional[User] = None,
) -> bool:
    """Whether ``sender`` may send a message to ``recipient``.

    Args:
        sender: The authenticated user
        recipient: Addressed user, or None for a broadcast
        parent: Message being replied to, if any
        parent_sender: Author of ``parent``

    Returns:
        True when the message is allowed
    """
    if sender.is_admin:
        return True
    if recipient is not None and recipient.is_admin:
        return True
    return is_reply_to_admin(sender, parent, parent_sender)


def can_mark_read(user: User, message: Message) -> bool:
    if message.recipient_id == user.id:
        return True
    if message.recipient_id is None:
        if message.agency_id is not None and message.agency_id == user.agency_id:
            return True
        if message.agency_id is None and not user.is_admin:
            return True
    return False


def can_delete(user: User, message: Message) -> bool:
    return message.sender_id == user.id or can_mark_read(user, message)


def display_name(user: Optional[User]) -> str:
    if user is None:
        return UNKNOWN_USER_NAME
    return user.full_name


def enrich_messages(
    messages: Iterable[Message], users: Dict[str, User], include_recipient: bool = False
) -> List[MessageRead]:
    """Attach sender (and optionally recipient) names to messages.

    ``users`` maps user ids to the users already loaded by the caller.
    """
    enriched: List[MessageRead] = []
    for message in messages:
        item = MessageRead.model_validate(message)
        sender = users.get(message.sender_id)
        item.sender_name = display_name(sender)
        item.sender_role = sender.role if sender else None
        if include_recipient:
            if message.recipient_id is None:
                item.recipient_name = BROADCAST_RECIPIENT_NAME
            else:
                recipient = users.get(message.recipient_id)
                item.recipient_name = recipient.full_name if recipient else BROADCAST_RECIPIENT_NAME
        enriched.append(item)
    return enriched
