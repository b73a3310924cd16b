"""Equipment repository."""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.equipment import Equipment
from .base import AgencyScopedRepository


class EquipmentRepository(AgencyScopedRepository[Equipment]):
    """Repository for equipment inventory."""

    default_order = "name"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Equipment)

    async def list_assigned_to(self, personnel_id: str) -> List[Equipment]:
        """List the items assigned to a team member."""
        stmt = select(Equipment).where(Equipment.assigned_to_id == personnel_id).order_by(Equipment.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
