"""Domain enums for SWAT Manager models.

Values are the wire and storage representation; entities keep them as plain
strings and the I/O schemas validate against these enums.
"""

from __future__ import annotations

from enum import Enum


class UserRole(str, Enum):
    """What a user account may see and do."""

    admin = "admin"  # Platform staff, sees every agency.
    agency = "agency"  # Restricted to the user's own agency.


class InterfaceType(str, Enum):
    """Which product the user logged into."""

    assessment = "assessment"
    tracking = "tracking"  # Premium: personnel, equipment and mission tracking.


class QuestionType(str, Enum):
    boolean = "boolean"
    text = "text"
    numeric = "numeric"
    select = "select"


class AssessmentType(str, Enum):
    """The two questionnaire products."""

    tier_assessment = "tier-assessment"
    gap_analysis = "gap-analysis"


class AssessmentStatus(str, Enum):
    in_progress = "in_progress"
    completed = "completed"


class PersonnelStatus(str, Enum):
    available = "available"
    on_duty = "on-duty"
    off_duty = "off-duty"
    leave = "leave"
    training = "training"


class EquipmentCondition(str, Enum):
    excellent = "excellent"
    good = "good"
    fair = "fair"
    poor = "poor"


class EquipmentStatus(str, Enum):
    operational = "operational"
    maintenance = "maintenance"
    service_due = "service_due"
    repair = "repair"
    retired = "retired"


class EventType(str, Enum):
    training = "training"
    maintenance = "maintenance"
    certification = "certification"
    meeting = "meeting"
    deployment = "deployment"
    other = "other"


class Priority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class ScheduleStatus(str, Enum):
    """Lifecycle of a scheduled event or training."""

    scheduled = "scheduled"
    in_progress = "in-progress"
    completed = "completed"
    cancelled = "cancelled"


class TrainingType(str, Enum):
    tactical = "tactical"
    firearms = "firearms"
    medical = "medical"
    physical = "physical"
    technical = "technical"
    certification = "certification"
    other = "other"


class TrainingOutcome(str, Enum):
    """Per-participant result recorded on a training."""

    completed = "completed"
    failed = "failed"
    absent = "absent"


class PersonnelCertificationStatus(str, Enum):
    active = "active"
    expired = "expired"
    revoked = "revoked"
    renewal_required = "renewal_required"


class MissionType(str, Enum):
    high_risk_warrant = "high-risk-warrant"
    barricade = "barricade"
    hostage = "hostage"
    surveillance = "surveillance"
    vip_protection = "vip-protection"
    training = "training"
    other = "other"


class MissionStatus(str, Enum):
    planned = "planned"
    active = "active"
    completed = "completed"
    aborted = "aborted"


class CorrectiveActionCategory(str, Enum):
    training = "training"
    equipment = "equipment"
    personnel = "personnel"
    policy = "policy"
    other = "other"


class CorrectiveActionStatus(str, Enum):
    open = "open"
    in_progress = "in-progress"
    completed = "completed"
    cancelled = "cancelled"


class ResourceCategory(str, Enum):
    policy = "policy"
    sop = "sop"
    training = "training"
    template = "template"
    external = "external"
    other = "other"


class MessageCategory(str, Enum):
    general = "general"
    assessment = "assessment"
    training = "training"
    equipment = "equipment"
    personnel = "personnel"
    support = "support"


class MessagePriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"


class CalendarView(str, Enum):
    """Window used when listing events."""

    day = "day"
    week = "week"  # Sunday through Saturday.
    month = "month"
