"""Corrective action repository."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.corrective_actions import CorrectiveAction
from .base import AgencyScopedRepository


class CorrectiveActionRepository(AgencyScopedRepository[CorrectiveAction]):
    """Repository for corrective actions."""

    default_order = "date_identified"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, CorrectiveAction)
