"""
Questionnaire scoring.

The questionnaire is split into two products that share the same tables:

- the Tier Assessment, 16 categories whose Yes answers decide the team's
  tier (1 is the most capable, 4 the least)
- the Gap Analysis, 8 policy and procedure categories reported verbatim

Categories are told apart by name. Seeded names never carry a numeric prefix,
but older data may ("3. Individual Operator Equipment"), so every comparison
goes through ``normalize_category_name`` first.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from swat_manager.core.database.entities.assessments import AssessmentResponse
from swat_manager.core.database.entities.questionnaire import Question, QuestionCategory
from swat_manager.core.errors import AssessmentIncompleteError, AssessmentTypeMismatchError
from swat_manager.core.models.domain.enums import AssessmentStatus, AssessmentType

TIER_CATEGORY_NAMES = (
    "Tier 1-4 Metrics (Personnel & Leadership)",
    "Mission Profiles",
    "Individual Operator Equipment",
    "Sniper Equipment & Operations",
    "Breaching Operations",
    "Access & Elevated Tactics",
    "Less-Lethal Capabilities",
    "Noise Flash Diversionary Devices (NFDDs)",
    "Chemical Munitions",
    "K9 Operations & Integration",
    "Explosive Ordnance Disposal (EOD) Support",
    "Mobility, Transportation & Armor Support",
    "Unique Environment & Technical Capabilities",
    "SCBA & HAZMAT Capabilities",
    "Tactical Emergency Medical Support (TEMS)",
    "Negotiations & Crisis Response",
)

GAP_ANALYSIS_CATEGORY_NAMES = (
    "Team Structure and Chain of Command",
    "Supervisor-to-Operator Ratio",
    "Span of Control Adjustments for Complex Operations",
    "Training and Evaluation of Leadership",
    "Equipment Procurement and Allocation",
    "Equipment Maintenance and Inspection",
    "Equipment Inventory Management",
    "Standard Operating Guidelines (SOGs)",
)

TIER_REPORT_MIN_PROGRESS = 90
GAP_REPORT_MIN_PROGRESS = 75

# Lower bound of the Yes percentage for tiers 1, 2 and 3; anything below is tier 4.
TIER_THRESHOLDS = ((90.0, 1), (75.0, 2), (50.0, 3))

_NUMERIC_PREFIX = re.compile(r"^\s*\d+\s*[.)]\s*")


def normalize_category_name(name: str) -> str:
    """Strip a leading ``"1. "`` / ``"12) "`` prefix and surrounding whitespace."""
    return _NUMERIC_PREFIX.sub("", name or "").strip()


def is_gap_analysis_category(name: str) -> bool:
    normalized = normalize_category_name(name)
    return normalized in GAP_ANALYSIS_CATEGORY_NAMES or "Gap Analysis" in normalized


def categories_for(
    categories: Iterable[QuestionCategory], assessment_type: Optional[str]
) -> List[QuestionCategory]:
    """Return the categories belonging to an assessment type, in display order.

    Args:
        categories: Every known category
        assessment_type: tier-assessment, gap-analysis, or None for both

    Returns:
        Categories sorted by ``order_index``; with no type, tier categories
        come before gap analysis ones
    """
    ordered = sorted(categories, key=lambda c: c.order_index)
    tier = [c for c in ordered if not is_gap_analysis_category(c.name)]
    gap = [c for c in ordered if is_gap_analysis_category(c.name)]
    if assessment_type == AssessmentType.tier_assessment.value:
        return tier
    if assessment_type == AssessmentType.gap_analysis.value:
        return gap
    return tier + gap


def questions_for(
    categories: Iterable[QuestionCategory],
    questions: Iterable[Question],
    assessment_type: Optional[str],
) -> List[Question]:
    """Return the questions of an assessment type in questionnaire order."""
    by_category: Dict[str, List[Question]] = {}
    for question in questions:
        by_category.setdefault(question.category_id, []).append(question)
    ordered: List[Question] = []
    for category in categories_for(categories, assessment_type):
        ordered.extend(sorted(by_category.get(category.id, []), key=lambda q: q.order_index))
    return ordered


@dataclass
class Section:
    """One questionnaire section: a category and its ordered questions."""

    category: QuestionCategory
    questions: List[Question] = field(default_factory=list)

    @property
    def is_gap_analysis(self) -> bool:
        return is_gap_analysis_category(self.category.name)


def build_questionnaire(
    categories: Iterable[QuestionCategory],
    questions: Iterable[Question],
    assessment_type: Optional[str] = None,
) -> List[Section]:
    """Group questions under their categories for rendering a questionnaire."""
    by_category: Dict[str, List[Question]] = {}
    for question in questions:
        by_category.setdefault(question.category_id, []).append(question)
    return [
        Section(category=category, questions=sorted(by_category.get(category.id, []), key=lambda q: q.order_index))
        for category in categories_for(categories, assessment_type)
    ]


def format_response(response: Optional[AssessmentResponse]) -> str:
    """Render a stored answer the way reports print it."""
    if response is None:
        return "Not specified"
    if response.response is True:
        return "Yes"
    if response.response is False:
        return "No"
    if response.text_response:
        return response.text_response
    if response.numeric_response is not None:
        value = response.numeric_response
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
    if response.select_response:
        return response.select_response
    return "Not specified"


def progress_percentage(answered: int, total: int) -> int:
    if total <= 0:
        return 0
    return round(answered / total * 100)


def progress_status(progress: int) -> str:
    return AssessmentStatus.completed.value if progress >= 100 else AssessmentStatus.in_progress.value


def assessment_progress(questions: Sequence[Question], responses: Iterable[AssessmentResponse]) -> int:
    """Percentage of ``questions`` that have a stored response."""
    scored = {q.id for q in questions}
    answered = {r.question_id for r in responses if r.question_id in scored}
    return progress_percentage(len(answered), len(scored))


def calculate_tier(positive: int, total: int) -> int:
    """Map the number of Yes answers to a tier level.

    Examples:
        >>> calculate_tier(9, 10)
        1
        >>> calculate_tier(3, 4)
        2
        >>> calculate_tier(0, 0)
        4
    """
    percent = positive / total * 100 if total else 0.0
    for threshold, tier in TIER_THRESHOLDS:
        if percent >= threshold:
            return tier
    return 4


@dataclass
class TierResult:
    tier: int
    positive: int
    total: int
    percent: float
    unmet: List[Question] = field(default_factory=list)


def score_tier(questions: Sequence[Question], responses: Iterable[AssessmentResponse]) -> TierResult:
    """Score a tier assessment.

    Only questions flagged ``impacts_tier`` count. A question is met when its
    response is an explicit Yes.

    Args:
        questions: Tier questions in questionnaire order
        responses: Responses stored for the assessment

    Returns:
        The tier together with the counts it was derived from and the unmet
        questions in questionnaire order
    """
    yes_answers = {r.question_id for r in responses if r.response is True}
    scored = [q for q in questions if q.impacts_tier]
    met = [q for q in scored if q.id in yes_answers]
    unmet = [q for q in scored if q.id not in yes_answers]
    total = len(scored)
    percent = len(met) / total * 100 if total else 0.0
    return TierResult(
        tier=calculate_tier(len(met), total),
        positive=len(met),
        total=total,
        percent=percent,
        unmet=unmet,
    )


def ensure_report_ready(progress: Optional[int], assessment_type: str) -> None:
    """Raise ``AssessmentIncompleteError`` when an assessment is too incomplete to report on."""
    if assessment_type == AssessmentType.gap_analysis.value:
        required, label = GAP_REPORT_MIN_PROGRESS, "gap analysis report"
    else:
        required, label = TIER_REPORT_MIN_PROGRESS, "tier report"
    current = progress or 0
    if current < required:
        raise AssessmentIncompleteError(progress=current, required=required, report_label=label)


def ensure_report_type(assessment_type: Optional[str], report_type: str) -> None:
    """Raise ``AssessmentTypeMismatchError`` unless the assessment is of the report's type."""
    actual = assessment_type or AssessmentType.tier_assessment.value
    if actual != report_type:
        label = "gap analysis report" if report_type == AssessmentType.gap_analysis.value else "tier report"
        raise AssessmentTypeMismatchError(assessment_type=actual, report_label=label)
