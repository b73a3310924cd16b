"""
User repository.

Data access for user accounts. Email lookups are case-insensitive.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.users import User
from .base import SQLModelRepository


class UserRepository(SQLModelRepository[User]):
    """Repository for user data access operations using SQLModel."""

    default_order = "email"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by login email.

        Args:
            email: Email address, compared case-insensitively

        Returns:
            User instance or None
        """
        stmt = select(User).where(func.lower(User.email) == email.lower())
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_by_agency(self, agency_id: str) -> List[User]:
        """List the users bound to an agency."""
        stmt = select(User).where(User.agency_id == agency_id).order_by(User.last_name, User.first_name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
