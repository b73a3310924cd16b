"""
Idempotent seed loader.

Applies ``data.py`` to a database: categories are matched by name (ignoring
legacy ``"3. "`` numbering, with duplicates merged first), questions by
category and text. Running the loader twice leaves the database unchanged the
second time.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from swat_manager.core.database.entities.agencies import Agency
from swat_manager.core.database.entities.questionnaire import Question, QuestionCategory
from swat_manager.core.database.entities.users import User
from swat_manager.core.database.repositories import SqlRepoBundle, build_sql_repos_from_session
from swat_manager.core.logging_config import get_logger
from swat_manager.core.models.domain.enums import UserRole
from swat_manager.core.security import hash_password
from swat_manager.server.core.config import settings
from swat_manager.server.services.scoring import normalize_category_name

from .data import ADMIN_FIRST_NAME, ADMIN_LAST_NAME, ADMIN_PERMISSIONS, CATEGORIES, SAMPLE_AGENCIES, CategorySeed

logger = get_logger(__name__)


@dataclass
class SeedReport:
    """Counts of what one seed run changed."""

    categories_created: int = 0
    categories_updated: int = 0
    categories_merged: int = 0
    questions_created: int = 0
    questions_updated: int = 0
    questions_removed: int = 0
    admin_created: bool = False
    agencies_created: int = 0

    @property
    def changed(self) -> bool:
        return any(asdict(self).values())

    def __str__(self) -> str:
        return ", ".join(f"{key}={value}" for key, value in asdict(self).items())


async def _upsert_category(
    session: AsyncSession, existing: Dict[str, QuestionCategory], seed: CategorySeed, report: SeedReport
) -> QuestionCategory:
    category = existing.get(seed.name)
    if category is None:
        category = QuestionCategory(name=seed.name, description=seed.description, order_index=seed.order_index)
        session.add(category)
        report.categories_created += 1
        return category
    if (category.name, category.description, category.order_index) != (
        seed.name,
        seed.description,
        seed.order_index,
    ):
        category.name = seed.name
        category.description = seed.description
        category.order_index = seed.order_index
        session.add(category)
        report.categories_updated += 1
    return category


async def _sync_questions(
    session: AsyncSession,
    repos: SqlRepoBundle,
    category: QuestionCategory,
    seed: CategorySeed,
    prune: bool,
    report: SeedReport,
) -> None:
    current = {q.text: q for q in await repos.questions.list(category_id=category.id)}
    for order_index, question_seed in enumerate(seed.questions, start=1):
        wanted = {
            "order_index": order_index,
            "question_type": question_seed.question_type,
            "description": question_seed.description,
            "impacts_tier": seed.impacts_tier,
        }
        question = current.pop(question_seed.text, None)
        if question is None:
            session.add(Question(category_id=category.id, text=question_seed.text, **wanted))
            report.questions_created += 1
            continue
        if any(getattr(question, key) != value for key, value in wanted.items()):
            for key, value in wanted.items():
                setattr(question, key, value)
            session.add(question)
            report.questions_updated += 1

    if prune:
        for stale in current.values():
            await session.delete(stale)
            report.questions_removed += 1
    elif current:
        logger.debug(f"Keeping {len(current)} unlisted questions in category {category.name}")


async def _move_responses(session: AsyncSession, repos: SqlRepoBundle, source: Question, target: Question) -> None:
    answered = {r.assessment_id for r in await repos.responses.list(filters={"question_id": target.id})}
    for response in await repos.responses.list(filters={"question_id": source.id}):
        if response.assessment_id in answered:
            await session.delete(response)
            continue
        response.question_id = target.id
        session.add(response)
    await session.flush()


async def _merge_duplicate_categories(
    session: AsyncSession, repos: SqlRepoBundle, report: SeedReport
) -> Dict[str, QuestionCategory]:
    """Collapse categories whose names differ only by legacy numbering.

    The category already carrying the plain name survives, otherwise the first
    in order. Questions of the others move to it; a question whose text it
    already holds is dropped after its answers move to the surviving question
    (an assessment that answered both keeps the surviving answer).

    Returns:
        Surviving categories keyed by normalized name
    """
    groups: Dict[str, List[QuestionCategory]] = {}
    for category in await repos.categories.list_ordered():
        groups.setdefault(normalize_category_name(category.name), []).append(category)

    existing: Dict[str, QuestionCategory] = {}
    for name, members in groups.items():
        keeper = next((c for c in members if c.name == name), members[0])
        existing[name] = keeper
        if len(members) == 1:
            continue
        kept = {q.text: q for q in await repos.questions.list(category_id=keeper.id)}
        for duplicate in members:
            if duplicate is keeper:
                continue
            for question in await repos.questions.list(category_id=duplicate.id):
                survivor = kept.get(question.text)
                if survivor is None:
                    question.category_id = keeper.id
                    session.add(question)
                    kept[question.text] = question
                    continue
                await _move_responses(session, repos, question, survivor)
                await session.delete(question)
            await session.flush()
            await session.delete(duplicate)
            await session.flush()
            report.categories_merged += 1
            logger.info(f"Merged category {duplicate.name!r} into {keeper.name!r}")
    return existing


async def seed_database(session: AsyncSession, prune: bool = False, include_samples: bool = True) -> SeedReport:
    """Load the questionnaire, the administrator and the sample agencies.

    Args:
        session: Async session; the loader commits once at the end
        prune: Remove questions of seeded categories that are not in the table.
            Answers to removed questions are deleted with them.
        include_samples: Also insert the sample agencies

    Returns:
        What was created, updated or removed
    """
    repos = build_sql_repos_from_session(session=session)
    report = SeedReport()

    existing = await _merge_duplicate_categories(session, repos, report)

    for seed in CATEGORIES:
        category = await _upsert_category(session, existing, seed, report)
        await session.flush()
        await _sync_questions(session, repos, category, seed, prune, report)

    admin: Optional[User] = await repos.users.get_by_email(settings.admin_email)
    if admin is None:
        session.add(
            User(
                first_name=ADMIN_FIRST_NAME,
                last_name=ADMIN_LAST_NAME,
                email=settings.admin_email,
                role=UserRole.admin.value,
                permissions=dict(ADMIN_PERMISSIONS),
                password_hash=hash_password(settings.admin_password),
            )
        )
        report.admin_created = True

    if include_samples:
        for agency_seed in SAMPLE_AGENCIES:
            if await repos.agencies.get_by_contact_email(agency_seed.contact_email):
                continue
            session.add(Agency(**asdict(agency_seed)))
            report.agencies_created += 1

    await session.commit()
    if report.changed:
        logger.info(f"Seed applied: {report}")
    else:
        logger.info("Seed data already up to date")
    return report
