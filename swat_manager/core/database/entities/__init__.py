"""
Database entity models.

This package contains all database entity models organized by business domain.
Importing it registers every table on ``Base.metadata``.

Modules:
- agencies: Agencies (tenants)
- users: User accounts
- questionnaire: Question categories and questions
- assessments: Assessments and their responses
- reports: Generated and uploaded reports
- personnel: Team members
- equipment: Equipment inventory
- events: Calendar events
- trainings: Training sessions
- certifications: Certification definitions and holders
- missions: Missions and deployments
- corrective_actions: Follow-up action items
- resources: Resource library documents
- messages: Internal messages
"""

from . import (
    agencies,
    assessments,
    certifications,
    corrective_actions,
    equipment,
    events,
    messages,
    missions,
    personnel,
    questionnaire,
    reports,
    resources,
    trainings,
    users,
)
from .agencies import Agency
from .assessments import Assessment, AssessmentResponse
from .certifications import Certification, PersonnelCertification
from .corrective_actions import CorrectiveAction
from .equipment import Equipment
from .events import Event
from .messages import Message
from .missions import Mission
from .personnel import Personnel
from .questionnaire import Question, QuestionCategory
from .reports import Report
from .resources import Resource
from .trainings import Training
from .users import User

__all__ = [
    "Agency",
    "Assessment",
    "AssessmentResponse",
    "Certification",
    "CorrectiveAction",
    "Equipment",
    "Event",
    "Message",
    "Mission",
    "Personnel",
    "PersonnelCertification",
    "Question",
    "QuestionCategory",
    "Report",
    "Resource",
    "Training",
    "User",
    "agencies",
    "assessments",
    "certifications",
    "corrective_actions",
    "equipment",
    "events",
    "messages",
    "missions",
    "personnel",
    "questionnaire",
    "reports",
    "resources",
    "trainings",
    "users",
]
