"""
Assessment repositories.

Data access for assessments and their responses. Responses are keyed by
(assessment, question); saving an answer twice updates the existing row.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utc_now
from ..entities.assessments import Assessment, AssessmentResponse
from .base import QueryBuilder, SQLModelRepository

RESPONSE_FIELDS = ("response", "text_response", "numeric_response", "select_response", "notes")


class AssessmentRepository(SQLModelRepository[Assessment]):
    """Repository for assessment data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Assessment)

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[Assessment]:
        """List assessments, newest first."""
        stmt = select(Assessment)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Assessment, filters)
        stmt = stmt.order_by(Assessment.started_at.desc())
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_agency(self, agency_id: str) -> List[Assessment]:
        """List an agency's assessments, newest first."""
        return await self.list(filters={"agency_id": agency_id})


class AssessmentResponseRepository(SQLModelRepository[AssessmentResponse]):
    """Repository for assessment responses."""

    default_order = "created_at"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, AssessmentResponse)

    async def list_by_assessment(self, assessment_id: str) -> List[AssessmentResponse]:
        """List every response recorded for an assessment."""
        return await self.list(filters={"assessment_id": assessment_id})

    async def get_for_question(self, assessment_id: str, question_id: str) -> Optional[AssessmentResponse]:
        """Get the response to one question within one assessment."""
        stmt = select(AssessmentResponse).where(
            (AssessmentResponse.assessment_id == assessment_id) & (AssessmentResponse.question_id == question_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(self, assessment_id: str, question_id: str, values: Dict[str, Any]) -> AssessmentResponse:
        """Insert or update the response for (assessment, question).

        Only answer fields (``response``, ``text_response``, ``numeric_response``,
        ``select_response``, ``notes``) are taken from ``values``.

        Args:
            assessment_id: Assessment being answered
            question_id: Question being answered
            values: Answer fields

        Returns:
            The stored response
        """
        answer = {key: values.get(key) for key in RESPONSE_FIELDS}
        existing = await self.get_for_question(assessment_id, question_id)
        if existing:
            for key, value in answer.items():
                setattr(existing, key, value)
            existing.updated_at = utc_now()
            self.session.add(existing)
            await self.session.commit()
            await self.session.refresh(existing)
            return existing

        response = AssessmentResponse(assessment_id=assessment_id, question_id=question_id, **answer)
        return await self.create(response)
