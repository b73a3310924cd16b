"""Unit tests for the idempotent seed loader and its command line entry point."""

from __future__ import annotations

from typing import AsyncGenerator
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from click.testing import CliRunner
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from swat_manager.core.database import entities  # noqa: F401
from swat_manager.core.database.base import Base
from swat_manager.core.database.entities.agencies import Agency
from swat_manager.core.database.entities.assessments import Assessment, AssessmentResponse
from swat_manager.core.database.entities.questionnaire import Question, QuestionCategory
from swat_manager.core.database.repositories import build_sql_repos_from_session
from swat_manager.core.security import verify_password
from swat_manager.core.seed.__main__ import main
from swat_manager.core.seed.data import CATEGORIES, GAP_ANALYSIS_CATEGORIES, SAMPLE_AGENCIES, TIER_CATEGORIES
from swat_manager.core.seed.loader import SeedReport, seed_database
from swat_manager.server.core.config import settings

TOTAL_QUESTIONS = sum(len(c.questions) for c in CATEGORIES)


@pytest_asyncio.fixture
async def session() -> AsyncGenerator[AsyncSession, None]:
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with async_sessionmaker(engine, expire_on_commit=False)() as db_session:
        yield db_session
    await engine.dispose()


class TestSeedData:
    def test_category_layout(self):
        assert len(TIER_CATEGORIES) == 16
        assert len(GAP_ANALYSIS_CATEGORIES) == 8
        assert [c.order_index for c in CATEGORIES] == sorted(c.order_index for c in CATEGORIES)
        assert all(c.impacts_tier for c in TIER_CATEGORIES)
        assert not any(c.impacts_tier for c in GAP_ANALYSIS_CATEGORIES)

    def test_question_texts_unique_per_category(self):
        for category in CATEGORIES:
            texts = [q.text for q in category.questions]
            assert len(texts) == len(set(texts)), category.name


class TestSeedDatabase:
    async def test_first_run_creates_everything(self, session):
        report = await seed_database(session)

        assert report.categories_created == len(CATEGORIES)
        assert report.questions_created == TOTAL_QUESTIONS
        assert report.admin_created is True
        assert report.agencies_created == len(SAMPLE_AGENCIES)

        repos = build_sql_repos_from_session(session=session)
        admin = await repos.users.get_by_email(settings.admin_email)
        assert admin.role == "admin"
        assert verify_password(settings.admin_password, admin.password_hash)
        assert len(await repos.questions.list()) == TOTAL_QUESTIONS

    async def test_second_run_changes_nothing(self, session):
        await seed_database(session)

        report = await seed_database(session)

        assert report == SeedReport()
        assert report.changed is False

    async def test_skip_samples(self, session):
        report = await seed_database(session, include_samples=False)

        assert report.agencies_created == 0

    async def test_legacy_numbered_category_is_renamed(self, session):
        first = CATEGORIES[0]
        session.add(QuestionCategory(id="legacy", name=f"1. {first.name}", order_index=first.order_index))
        await session.commit()

        report = await seed_database(session, include_samples=False)

        assert report.categories_updated == 1
        assert report.categories_created == len(CATEGORIES) - 1
        repos = build_sql_repos_from_session(session=session)
        assert (await repos.categories.get_by_name(first.name)).id == "legacy"

    async def test_legacy_and_plain_duplicates_are_merged(self, session):
        first = CATEGORIES[0]
        shared = first.questions[0].text
        agency = Agency(name="Metro PD", jurisdiction="Metro", contact_name="Lee", contact_email="lee@metro.example")
        session.add(agency)
        await session.flush()
        answered_once = Assessment(agency_id=agency.id, name="Spring")
        answered_twice = Assessment(agency_id=agency.id, name="Fall")
        session.add_all(
            [
                QuestionCategory(id="legacy", name=f"1. {first.name}", order_index=first.order_index),
                QuestionCategory(id="plain", name=first.name, order_index=first.order_index),
                answered_once,
                answered_twice,
            ]
        )
        await session.flush()
        session.add_all(
            [
                Question(id="old-shared", category_id="legacy", text=shared, order_index=1),
                Question(id="old-only", category_id="legacy", text="Legacy-only question?", order_index=2),
                Question(id="new-shared", category_id="plain", text=shared, order_index=1),
            ]
        )
        await session.flush()
        session.add_all(
            [
                AssessmentResponse(assessment_id=answered_once.id, question_id="old-shared", response=True),
                AssessmentResponse(assessment_id=answered_twice.id, question_id="old-shared", response=False),
                AssessmentResponse(assessment_id=answered_twice.id, question_id="new-shared", response=True),
            ]
        )
        await session.commit()

        report = await seed_database(session, include_samples=False)

        assert report.categories_merged == 1
        assert report.categories_created == len(CATEGORIES) - 1
        repos = build_sql_repos_from_session(session=session)
        assert await repos.categories.get_by_id("legacy") is None
        assert (await repos.categories.get_by_name(first.name)).id == "plain"
        assert await repos.questions.get_by_id("old-shared") is None
        assert (await repos.questions.get_by_id("old-only")).category_id == "plain"
        assert (await repos.responses.get_for_question(answered_once.id, "new-shared")).response is True
        assert (await repos.responses.get_for_question(answered_twice.id, "new-shared")).response is True
        assert len(await repos.responses.list()) == 2

    async def test_reordered_question_is_updated(self, session):
        await seed_database(session, include_samples=False)
        repos = build_sql_repos_from_session(session=session)
        category = await repos.categories.get_by_name(CATEGORIES[0].name)
        question = (await repos.questions.list(category_id=category.id))[0]
        question.order_index = 99
        await repos.questions.update(question)

        report = await seed_database(session, include_samples=False)

        assert report.questions_updated == 1
        assert (await repos.questions.get_by_id(question.id)).order_index == 1

    async def test_unlisted_question_kept_without_prune(self, session):
        await seed_database(session, include_samples=False)
        repos = build_sql_repos_from_session(session=session)
        category = await repos.categories.get_by_name(CATEGORIES[0].name)
        await repos.questions.create(Question(category_id=category.id, text="Retired question?", order_index=50))

        report = await seed_database(session, include_samples=False)

        assert report.questions_removed == 0
        assert await repos.questions.get_by_category_and_text(category.id, "Retired question?") is not None

    async def test_prune_removes_unlisted_question(self, session):
        await seed_database(session, include_samples=False)
        repos = build_sql_repos_from_session(session=session)
        category = await repos.categories.get_by_name(CATEGORIES[0].name)
        await repos.questions.create(Question(category_id=category.id, text="Retired question?", order_index=50))

        report = await seed_database(session, prune=True, include_samples=False)

        assert report.questions_removed == 1
        assert await repos.questions.get_by_category_and_text(category.id, "Retired question?") is None


class TestSeedReport:
    def test_str(self):
        text = str(SeedReport(categories_created=2))

        assert text.startswith("categories_created=2, categories_updated=0")
        assert "admin_created=False" in text

    def test_changed(self):
        assert SeedReport(admin_created=True).changed is True


class TestSeedCommand:
    def test_runs_with_url(self):
        with patch("swat_manager.core.seed.__main__._run", new_callable=AsyncMock) as mock_run:
            mock_run.return_value = SeedReport(questions_created=3)

            result = CliRunner().invoke(main, ["--database-url", "sqlite+aiosqlite://", "--prune", "--skip-samples"])

        assert result.exit_code == 0, result.output
        mock_run.assert_awaited_once_with("sqlite+aiosqlite://", prune=True, include_samples=False)
        assert "Seed finished: " in result.output
        assert "questions_created=3" in result.output

    def test_defaults_to_settings_url(self):
        with patch("swat_manager.core.seed.__main__._run", new_callable=AsyncMock) as mock_run:
            mock_run.return_value = SeedReport()

            result = CliRunner().invoke(main, [])

        assert result.exit_code == 0, result.output
        mock_run.assert_awaited_once_with(settings.database_url, prune=False, include_samples=True)
