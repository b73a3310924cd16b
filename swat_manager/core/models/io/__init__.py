"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients. These models are separate from database
entities so the API contract can evolve independently of the tables.

Modules:
- auth: Login and logout payloads
- users: User account schemas
- agencies: Agency schemas
- questionnaire: Categories, questions and grouped questionnaire sections
- assessments: Assessments and their responses
- reports: Reports, report updates and uploads
- personnel, equipment: Team roster and inventory
- events, trainings, certifications, missions: Scheduling and operations
- corrective_actions, resources: Follow-up items and the document library
- messages: Internal messaging
- app_config: Client configuration
"""

from .agencies import (
    AgencyCreate,
    AgencyRead,
    AgencyUpdate,
)
from .app_config import ConfigRead
from .assessments import (
    AssessmentCreate,
    AssessmentRead,
    AssessmentResponseRead,
    AssessmentResponseSubmit,
)
from .auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
)
from .certifications import (
    CertificationCreate,
    CertificationRead,
    PersonnelCertificationCreate,
    PersonnelCertificationRead,
)
from .corrective_actions import (
    CorrectiveActionCreate,
    CorrectiveActionRead,
    CorrectiveActionUpdate,
)
from .equipment import (
    EquipmentCreate,
    EquipmentRead,
    EquipmentUpdate,
)
from .events import (
    EventCreate,
    EventRead,
    EventUpdate,
)
from .messages import (
    MessageCreate,
    MessageRead,
)
from .missions import (
    MissionAttachment,
    MissionCreate,
    MissionRead,
)
from .personnel import (
    EmergencyContact,
    PersonnelCreate,
    PersonnelRead,
    PersonnelUpdate,
)
from .questionnaire import (
    QuestionCategoryRead,
    QuestionRead,
    QuestionnaireSection,
)
from .reports import (
    ReportFileUpload,
    ReportRead,
    ReportSummaryRead,
    ReportUpdate,
    ReportUploadResult,
)
from .resources import (
    ResourceCreate,
    ResourceRead,
    ResourceUpdate,
)
from .trainings import (
    TrainingCompletion,
    TrainingCreate,
    TrainingRead,
)
from .users import (
    PasswordChange,
    PreferencesResponse,
    ProfilePictureResponse,
    ProfilePictureUpdate,
    UserCreate,
    UserRead,
    UserUpdate,
)

__all__ = [
    "AgencyCreate",
    "AgencyRead",
    "AgencyUpdate",
    "AssessmentCreate",
    "AssessmentRead",
    "AssessmentResponseRead",
    "AssessmentResponseSubmit",
    "CertificationCreate",
    "CertificationRead",
    "ConfigRead",
    "CorrectiveActionCreate",
    "CorrectiveActionRead",
    "CorrectiveActionUpdate",
    "EmergencyContact",
    "EquipmentCreate",
    "EquipmentRead",
    "EquipmentUpdate",
    "EventCreate",
    "EventRead",
    "EventUpdate",
    "LoginRequest",
    "LoginResponse",
    "MessageCreate",
    "MessageRead",
    "MessageResponse",
    "MissionAttachment",
    "MissionCreate",
    "MissionRead",
    "PasswordChange",
    "PersonnelCertificationCreate",
    "PersonnelCertificationRead",
    "PersonnelCreate",
    "PersonnelRead",
    "PersonnelUpdate",
    "PreferencesResponse",
    "ProfilePictureResponse",
    "ProfilePictureUpdate",
    "QuestionCategoryRead",
    "QuestionRead",
    "QuestionnaireSection",
    "ReportFileUpload",
    "ReportRead",
    "ReportSummaryRead",
    "ReportUpdate",
    "ReportUploadResult",
    "ResourceCreate",
    "ResourceRead",
    "ResourceUpdate",
    "TrainingCompletion",
    "TrainingCreate",
    "TrainingRead",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
