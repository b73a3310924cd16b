"""
Agency repository.

Data access for agencies, including lookup by the unique contact email.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.agencies import Agency
from .base import SQLModelRepository


class AgencyRepository(SQLModelRepository[Agency]):
    """Repository for agency data access operations using SQLModel."""

    default_order = "name"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Agency)

    async def get_by_contact_email(self, email: str) -> Optional[Agency]:
        """Get the agency registered with a contact email.

        Args:
            email: Contact email to look up

        Returns:
            Agency instance or None
        """
        stmt = select(Agency).where(Agency.contact_email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
