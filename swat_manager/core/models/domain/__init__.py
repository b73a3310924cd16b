"""Domain-level enumerations."""

from .enums import (
    AssessmentStatus,
    AssessmentType,
    CalendarView,
    CorrectiveActionCategory,
    CorrectiveActionStatus,
    EquipmentCondition,
    EquipmentStatus,
    EventType,
    InterfaceType,
    MessageCategory,
    MessagePriority,
    MissionStatus,
    MissionType,
    PersonnelCertificationStatus,
    PersonnelStatus,
    Priority,
    QuestionType,
    ResourceCategory,
    ScheduleStatus,
    TrainingOutcome,
    TrainingType,
    UserRole,
)

__all__ = [
    "AssessmentStatus",
    "AssessmentType",
    "CalendarView",
    "CorrectiveActionCategory",
    "CorrectiveActionStatus",
    "EquipmentCondition",
    "EquipmentStatus",
    "EventType",
    "InterfaceType",
    "MessageCategory",
    "MessagePriority",
    "MissionStatus",
    "MissionType",
    "PersonnelCertificationStatus",
    "PersonnelStatus",
    "Priority",
    "QuestionType",
    "ResourceCategory",
    "ScheduleStatus",
    "TrainingOutcome",
    "TrainingType",
    "UserRole",
]
