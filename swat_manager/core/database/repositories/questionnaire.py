"""
Questionnaire repositories.

Data access for question categories and questions. Both are always returned
in questionnaire order (``order_index``).
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.questionnaire import Question, QuestionCategory
from .base import QueryBuilder, SQLModelRepository


class QuestionCategoryRepository(SQLModelRepository[QuestionCategory]):
    """Repository for question categories."""

    default_order = "order_index"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, QuestionCategory)

    async def get_by_name(self, name: str) -> Optional[QuestionCategory]:
        """Get a category by its exact name."""
        stmt = select(QuestionCategory).where(QuestionCategory.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_ordered(self) -> List[QuestionCategory]:
        """List every category in questionnaire order."""
        return await self.list()


class QuestionRepository(SQLModelRepository[Question]):
    """Repository for questionnaire questions."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Question)

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
        category_id: Optional[str] = None,
    ) -> List[Question]:
        """List questions, optionally restricted to one category.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters
            category_id: Only return questions of this category

        Returns:
            Questions ordered by category then ``order_index``
        """
        stmt = select(Question)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Question, filters)
        if category_id:
            stmt = stmt.where(Question.category_id == category_id)
        stmt = stmt.order_by(Question.category_id, Question.order_index)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_category_and_text(self, category_id: str, text: str) -> Optional[Question]:
        """Get the question with this exact text inside a category."""
        stmt = select(Question).where((Question.category_id == category_id) & (Question.text == text))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_categories(self, category_ids: Iterable[str]) -> List[Question]:
        """List the questions belonging to any of the given categories."""
        ids = list(category_ids)
        if not ids:
            return []
        stmt = select(Question).where(Question.category_id.in_(ids)).order_by(Question.order_index)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
