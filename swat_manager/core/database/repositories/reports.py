"""
Report repository.

Reports hang off assessments; agency listings join through the assessment.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.assessments import Assessment
from ..entities.reports import Report
from .base import SQLModelRepository


class ReportRepository(SQLModelRepository[Report]):
    """Repository for report data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Report)

    async def list_all(self) -> List[Report]:
        """List every report, newest first."""
        stmt = select(Report).order_by(Report.generated_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_agency(self, agency_id: str) -> List[Report]:
        """List the reports of an agency's assessments, newest first."""
        stmt = (
            select(Report)
            .join(Assessment, Assessment.id == Report.assessment_id)
            .where(Assessment.agency_id == agency_id)
            .order_by(Report.generated_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_assessment(self, assessment_id: str) -> List[Report]:
        """List the reports produced from one assessment."""
        stmt = select(Report).where(Report.assessment_id == assessment_id).order_by(Report.generated_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
