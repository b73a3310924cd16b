"""Repository tests against in-memory SQLite.

These cover the queries that go beyond plain CRUD: case-insensitive email
lookup, newest-first listings, response upserts, report joins, the message
mailboxes and event date windows.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest_asyncio

from swat_manager.core.database.entities import (
    Agency,
    Assessment,
    Event,
    Message,
    Question,
    QuestionCategory,
    Report,
    User,
)

UTC = timezone.utc


@pytest_asyncio.fixture
async def agencies(repos, sample_agency_data):
    lapd = await repos.agencies.create(Agency(id="lapd", **sample_agency_data))
    mdpd = await repos.agencies.create(
        Agency(
            id="mdpd",
            name="Miami-Dade Police Department",
            jurisdiction="Miami-Dade County, FL",
            contact_name="Ana Ruiz",
            contact_email="ana.ruiz@mdpd.org",
        )
    )
    return lapd, mdpd


@pytest_asyncio.fixture
async def users(repos, agencies, sample_user_data):
    admin = await repos.users.create(
        User(id="admin", first_name="Root", last_name="Admin", email="root@swatplatform.org", role="admin",
             password_hash="x")
    )
    jane = await repos.users.create(User(id="jane", agency_id="lapd", **sample_user_data))
    ana = await repos.users.create(
        User(id="ana", first_name="Ana", last_name="Ruiz", email="ana@mdpd.org", agency_id="mdpd", password_hash="x")
    )
    return admin, jane, ana


class TestUserRepository:
    async def test_get_by_email_ignores_case(self, repos, users):
        found = await repos.users.get_by_email("jane.doe@lapd.org")

        assert found is not None
        assert found.id == "jane"

    async def test_get_by_email_missing(self, repos, users):
        assert await repos.users.get_by_email("nobody@lapd.org") is None

    async def test_list_by_agency(self, repos, users):
        assert [u.id for u in await repos.users.list_by_agency("mdpd")] == ["ana"]

    async def test_list_ordered_by_email(self, repos, users):
        # SQLite compares emails as stored, so the capitalised address sorts first
        assert [u.id for u in await repos.users.list()] == ["jane", "ana", "admin"]


class TestAgencyRepository:
    async def test_list_by_name(self, repos, agencies):
        assert [a.id for a in await repos.agencies.list()] == ["lapd", "mdpd"]

    async def test_get_by_contact_email(self, repos, agencies):
        found = await repos.agencies.get_by_contact_email("ana.ruiz@mdpd.org")

        assert found.id == "mdpd"


class TestAssessmentRepositories:
    async def test_newest_first(self, repos, agencies):
        now = datetime(2026, 10, 1, tzinfo=UTC)
        for offset, name in enumerate(["oldest", "middle", "newest"]):
            await repos.assessments.create(
                Assessment(agency_id="lapd", name=name, started_at=now + timedelta(days=offset))
            )
        await repos.assessments.create(Assessment(agency_id="mdpd", name="other", started_at=now))

        assert [a.name for a in await repos.assessments.list_by_agency("lapd")] == ["newest", "middle", "oldest"]
        assert len(await repos.assessments.list()) == 4

    async def test_response_upsert_updates_in_place(self, repos, agencies):
        assessment = await repos.assessments.create(Assessment(agency_id="lapd", name="Annual"))
        category = await repos.categories.create(QuestionCategory(name="Breaching Operations", order_index=1))
        question = await repos.questions.create(Question(category_id=category.id, text="Breacher?", order_index=1))

        first = await repos.responses.upsert(assessment.id, question.id, {"response": True, "notes": "two"})
        second = await repos.responses.upsert(
            assessment.id, question.id, {"response": False, "assessment_id": "ignored"}
        )

        assert second.id == first.id
        assert second.response is False
        assert second.notes is None
        stored = await repos.responses.list_by_assessment(assessment.id)
        assert len(stored) == 1
        assert stored[0].assessment_id == assessment.id


class TestQuestionnaireRepositories:
    async def test_categories_in_order(self, repos):
        await repos.categories.create(QuestionCategory(name="Second", order_index=2))
        await repos.categories.create(QuestionCategory(name="First", order_index=1))

        assert [c.name for c in await repos.categories.list_ordered()] == ["First", "Second"]
        assert (await repos.categories.get_by_name("Second")).order_index == 2

    async def test_questions_for_categories(self, repos):
        a = await repos.categories.create(QuestionCategory(name="A", order_index=1))
        b = await repos.categories.create(QuestionCategory(name="B", order_index=2))
        await repos.questions.create(Question(category_id=a.id, text="A2", order_index=2))
        await repos.questions.create(Question(category_id=a.id, text="A1", order_index=1))
        await repos.questions.create(Question(category_id=b.id, text="B1", order_index=1))

        assert [q.text for q in await repos.questions.list(category_id=a.id)] == ["A1", "A2"]
        assert len(await repos.questions.list_for_categories([a.id, b.id])) == 3
        assert await repos.questions.list_for_categories([]) == []
        assert (await repos.questions.get_by_category_and_text(b.id, "B1")) is not None


class TestReportRepository:
    async def test_list_by_agency_joins_assessment(self, repos, agencies):
        ours = await repos.assessments.create(Assessment(agency_id="lapd", name="Ours"))
        theirs = await repos.assessments.create(Assessment(agency_id="mdpd", name="Theirs"))
        older = await repos.reports.create(Report(assessment_id=ours.id, generated_at=datetime(2026, 1, 1, tzinfo=UTC)))
        newer = await repos.reports.create(Report(assessment_id=ours.id, generated_at=datetime(2026, 2, 1, tzinfo=UTC)))
        await repos.reports.create(Report(assessment_id=theirs.id))

        assert [r.id for r in await repos.reports.list_by_agency("lapd")] == [newer.id, older.id]
        assert len(await repos.reports.list_all()) == 3
        assert len(await repos.reports.list_by_assessment(theirs.id)) == 1


class TestMessageRepository:
    async def test_mailboxes(self, repos, users):
        t0 = datetime(2026, 10, 1, 8, 0, tzinfo=UTC)
        direct = await repos.messages.create(
            Message(subject="Hi", content="x", sender_id="jane", recipient_id="admin", agency_id="lapd", sent_at=t0)
        )
        to_lapd = await repos.messages.create(
            Message(subject="LAPD", content="x", sender_id="admin", agency_id="lapd",
                    sent_at=t0 + timedelta(hours=1))
        )
        to_all = await repos.messages.create(
            Message(subject="All", content="x", sender_id="admin", sent_at=t0 + timedelta(hours=2))
        )
        await repos.messages.create(
            Message(subject="MDPD", content="x", sender_id="admin", agency_id="mdpd",
                    sent_at=t0 + timedelta(hours=3))
        )

        received = await repos.messages.list_received("jane", "lapd", include_broadcasts=True)
        assert [m.id for m in received] == [to_all.id, to_lapd.id]

        assert await repos.messages.list_received("jane", "lapd") == []
        assert [m.id for m in await repos.messages.list_received("admin")] == [direct.id]
        assert len(await repos.messages.list_sent("admin")) == 3

    async def test_own_broadcast_not_received(self, repos, users):
        await repos.messages.create(Message(subject="All", content="x", sender_id="admin"))

        assert await repos.messages.list_received("admin", None, include_broadcasts=True) == []

    async def test_mark_read(self, repos, users):
        message = await repos.messages.create(
            Message(subject="Hi", content="x", sender_id="jane", recipient_id="admin")
        )

        updated = await repos.messages.mark_read(message)

        assert updated.read is True
        assert updated.read_at is not None


class TestEventRepository:
    async def test_window_is_half_open(self, repos, users, sample_event_data):
        start = datetime(2025, 3, 9, tzinfo=UTC)
        end = datetime(2025, 3, 16, tzinfo=UTC)
        await repos.events.create(Event(user_id="jane", **{**sample_event_data, "start_date": start}))
        await repos.events.create(Event(user_id="jane", **{**sample_event_data, "start_date": end}))
        await repos.events.create(Event(user_id="jane", **sample_event_data))
        await repos.events.create(Event(user_id="ana", **sample_event_data))

        in_week = await repos.events.list_by_user_in_range("jane", start, end)

        assert [e.start_date for e in in_week] == [start, sample_event_data["start_date"]]
        assert len(await repos.events.list_by_user("jane")) == 3


class TestTimestamps:
    async def test_defaults_are_aware_utc(self, repos, agencies):
        assessment = await repos.assessments.create(Assessment(agency_id="lapd", name="Annual"))

        assert assessment.started_at.tzinfo is not None
        assert assessment.created_at.utcoffset() == timedelta(0)

    async def test_naive_values_are_stored_as_utc(self, repos, users, sample_event_data, in_memory_session):
        naive = datetime(2026, 10, 19, 14, 30)
        event = await repos.events.create(Event(user_id="jane", **{**sample_event_data, "start_date": naive}))
        in_memory_session.expire_all()

        stored = await repos.events.get_by_id(event.id)

        assert stored.start_date == naive.replace(tzinfo=UTC)

    async def test_offsets_are_normalised_to_utc(self, repos, users, sample_event_data, in_memory_session):
        eastern = timezone(timedelta(hours=-5))
        event = await repos.events.create(
            Event(user_id="jane", **{**sample_event_data, "start_date": datetime(2026, 10, 19, 9, 0, tzinfo=eastern)})
        )
        in_memory_session.expire_all()

        stored = await repos.events.get_by_id(event.id)

        assert stored.start_date == datetime(2026, 10, 19, 14, 0, tzinfo=UTC)
        assert stored.start_date.utcoffset() == timedelta(0)
