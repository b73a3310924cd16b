"""Training repository."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.trainings import Training
from .base import AgencyScopedRepository


class TrainingRepository(AgencyScopedRepository[Training]):
    """Repository for training sessions."""

    default_order = "start_date"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Training)
