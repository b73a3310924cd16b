"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
for easy dependency injection in services and application components.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .agencies import AgencyRepository
from .assessments import AssessmentRepository, AssessmentResponseRepository
from .certifications import CertificationRepository, PersonnelCertificationRepository
from .corrective_actions import CorrectiveActionRepository
from .equipment import EquipmentRepository
from .events import EventRepository
from .messages import MessageRepository
from .missions import MissionRepository
from .personnel import PersonnelRepository
from .questionnaire import QuestionCategoryRepository, QuestionRepository
from .reports import ReportRepository
from .resources import ResourceRepository
from .trainings import TrainingRepository
from .users import UserRepository


@dataclass(frozen=True)
class SqlRepoBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    agencies: AgencyRepository
    users: UserRepository
    categories: QuestionCategoryRepository
    questions: QuestionRepository
    assessments: AssessmentRepository
    responses: AssessmentResponseRepository
    reports: ReportRepository
    personnel: PersonnelRepository
    equipment: EquipmentRepository
    events: EventRepository
    trainings: TrainingRepository
    certifications: CertificationRepository
    personnel_certifications: PersonnelCertificationRepository
    missions: MissionRepository
    corrective_actions: CorrectiveActionRepository
    resources: ResourceRepository
    messages: MessageRepository


def build_sql_repos_from_session(*, session: AsyncSession) -> SqlRepoBundle:
    """Build a SqlRepoBundle from an existing session.

    Every repository shares the session, so one request sees one
    transactional view of the database.

    Args:
        session: Existing async session

    Returns:
        Bundle containing all repository instances
    """
    return SqlRepoBundle(
        agencies=AgencyRepository(session),
        users=UserRepository(session),
        categories=QuestionCategoryRepository(session),
        questions=QuestionRepository(session),
        assessments=AssessmentRepository(session),
        responses=AssessmentResponseRepository(session),
        reports=ReportRepository(session),
        personnel=PersonnelRepository(session),
        equipment=EquipmentRepository(session),
        events=EventRepository(session),
        trainings=TrainingRepository(session),
        certifications=CertificationRepository(session),
        personnel_certifications=PersonnelCertificationRepository(session),
        missions=MissionRepository(session),
        corrective_actions=CorrectiveActionRepository(session),
        resources=ResourceRepository(session),
        messages=MessageRepository(session),
    )
