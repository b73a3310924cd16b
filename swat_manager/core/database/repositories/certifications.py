"""
Certification repositories.

Certification definitions are agency-scoped; held certifications are listed
per team member.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.certifications import Certification, PersonnelCertification
from .base import AgencyScopedRepository, SQLModelRepository


class CertificationRepository(AgencyScopedRepository[Certification]):
    """Repository for certification definitions."""

    default_order = "name"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Certification)


class PersonnelCertificationRepository(SQLModelRepository[PersonnelCertification]):
    """Repository for certifications held by team members."""

    default_order = "issue_date"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, PersonnelCertification)

    async def list_by_personnel(self, personnel_id: str) -> List[PersonnelCertification]:
        """List the certifications held by a team member."""
        return await self.list(filters={"personnel_id": personnel_id})
