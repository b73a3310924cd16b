"""
Unit tests for messaging permissions and display helpers.
"""

import pytest

from swat_manager.core.database.entities.messages import Message
from swat_manager.core.database.entities.users import User
from swat_manager.server.services.messaging import (
    BROADCAST_RECIPIENT_NAME,
    UNKNOWN_USER_NAME,
    can_delete,
    can_mark_read,
    can_message,
    display_name,
    enrich_messages,
    is_reply_to_admin,
)


def _user(uid: str, role: str = "agency", agency_id: str | None = "lapd", first: str = "Jane") -> User:
    return User(
        id=uid,
        first_name=first,
        last_name="Doe",
        email=f"{uid}@lapd.org",
        role=role,
        agency_id=agency_id if role == "agency" else None,
        password_hash="x",
    )


def _message(sender_id: str, recipient_id: str | None = None, agency_id: str | None = None) -> Message:
    return Message(
        id=f"m-{sender_id}-{recipient_id}",
        subject="Subject",
        content="Body",
        sender_id=sender_id,
        recipient_id=recipient_id,
        agency_id=agency_id,
    )


@pytest.fixture
def admin() -> User:
    return _user("admin", role="admin", first="Root")


@pytest.fixture
def officer() -> User:
    return _user("officer")


@pytest.fixture
def colleague() -> User:
    return _user("colleague", first="Sam")


@pytest.fixture
def outsider() -> User:
    return _user("outsider", agency_id="mdpd", first="Carlos")


class TestCanMessage:
    def test_admin_writes_to_anyone(self, admin, officer):
        assert can_message(admin, officer)
        assert can_message(admin, None)

    def test_agency_user_writes_to_admin(self, officer, admin):
        assert can_message(officer, admin)

    def test_agency_user_cannot_write_to_agency_user(self, officer, colleague):
        assert not can_message(officer, colleague)

    def test_agency_user_cannot_broadcast(self, officer):
        assert not can_message(officer, None)

    def test_reply_to_admin_message_addressed_to_user(self, officer, colleague, admin):
        parent = _message(admin.id, recipient_id=officer.id)

        assert can_message(officer, colleague, parent, admin)

    def test_reply_to_admin_message_for_agency(self, officer, admin):
        parent = _message(admin.id, agency_id="lapd")

        assert can_message(officer, None, parent, admin)

    def test_reply_to_another_agencys_message(self, outsider, admin):
        parent = _message(admin.id, agency_id="lapd")

        assert not can_message(outsider, None, parent, admin)

    def test_reply_to_agency_user_message(self, officer, colleague):
        parent = _message(colleague.id, recipient_id=officer.id)

        assert not is_reply_to_admin(officer, parent, colleague)


class TestMessageAccess:
    def test_recipient(self, officer, admin):
        message = _message(admin.id, recipient_id=officer.id)

        assert can_mark_read(officer, message)
        assert can_delete(officer, message)

    def test_agency_broadcast(self, officer, outsider, admin):
        message = _message(admin.id, agency_id="lapd")

        assert can_mark_read(officer, message)
        assert not can_mark_read(outsider, message)

    def test_global_broadcast_for_agency_users_only(self, officer, admin):
        message = _message(admin.id)

        assert can_mark_read(officer, message)
        assert not can_mark_read(_user("other-admin", role="admin"), message)

    def test_sender_may_delete_but_not_mark_read(self, officer, admin):
        message = _message(officer.id, recipient_id=admin.id, agency_id="lapd")

        assert can_delete(officer, message)
        assert not can_mark_read(officer, message)

    def test_stranger(self, outsider, officer, admin):
        message = _message(admin.id, recipient_id=officer.id)

        assert not can_mark_read(outsider, message)
        assert not can_delete(outsider, message)


class TestEnrichMessages:
    def test_display_name(self, officer):
        assert display_name(officer) == "Jane Doe"
        assert display_name(None) == UNKNOWN_USER_NAME

    def test_received_carries_sender(self, officer, admin):
        message = _message(admin.id, recipient_id=officer.id)

        [item] = enrich_messages([message], {admin.id: admin, officer.id: officer})

        assert item.sender_name == "Root Doe"
        assert item.sender_role == "admin"
        assert item.recipient_name is None

    def test_sent_carries_recipient(self, officer, admin):
        message = _message(officer.id, recipient_id=admin.id)

        [item] = enrich_messages([message], {admin.id: admin, officer.id: officer}, include_recipient=True)

        assert item.recipient_name == "Root Doe"

    def test_broadcast_recipient_name(self, admin):
        [item] = enrich_messages([_message(admin.id)], {admin.id: admin}, include_recipient=True)

        assert item.recipient_name == BROADCAST_RECIPIENT_NAME

    def test_deleted_sender(self, officer):
        [item] = enrich_messages([_message("gone", recipient_id=officer.id)], {officer.id: officer})

        assert item.sender_name == UNKNOWN_USER_NAME
        assert item.sender_role is None
