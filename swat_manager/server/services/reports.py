"""
Report rendering and storage.

Builds the text of tier and gap analysis reports, renders them to PDF with
reportlab, and stores generated or uploaded report files under the configured
reports directory. Report records reference their file as ``/reports/<name>``.
"""

from __future__ import annotations

import base64
import binascii
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from swat_manager.core.database.entities.assessments import AssessmentResponse
from swat_manager.core.errors import ReportFileMissingError
from swat_manager.core.logging_config import get_logger
from swat_manager.server.core.config import StorageConfig, settings

from .scoring import Section, TierResult, format_response

logger = get_logger(__name__)

REPORT_URL_PREFIX = "/reports/"
ASSESSED_BY = "SWAT Accreditation Platform"

CONTENT_TYPES: Dict[str, str] = {
    ".pdf": "application/pdf",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".doc": "application/msword",
    ".txt": "text/plain",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Upload file types accepted by the report upload endpoints, by MIME type.
UPLOAD_EXTENSIONS: Dict[str, str] = {
    "application/pdf": "pdf",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "docx",
    "application/msword": "doc",
    "text/plain": "txt",
}


@dataclass
class ReportEntry:
    question: str
    answer: str
    notes: Optional[str] = None


@dataclass
class ReportSection:
    title: str
    entries: List[ReportEntry] = field(default_factory=list)


def answered_sections(sections: Iterable[Section], responses: Iterable[AssessmentResponse]) -> List[ReportSection]:
    """Collect the answered questions of each section, dropping sections with none."""
    by_question = {r.question_id: r for r in responses}
    result: List[ReportSection] = []
    for section in sections:
        entries = [
            ReportEntry(
                question=question.text,
                answer=format_response(by_question[question.id]),
                notes=by_question[question.id].notes or None,
            )
            for question in section.questions
            if question.id in by_question
        ]
        if entries:
            result.append(ReportSection(title=section.category.name, entries=entries))
    return result


def format_long_date(value: datetime) -> str:
    """``October 19, 2026``"""
    return f"{value.strftime('%B')} {value.day}, {value.year}"


def format_short_date(value: Optional[datetime]) -> str:
    """``10/19/2026``, or ``Not set`` when missing."""
    if value is None:
        return "Not set"
    return f"{value.month}/{value.day}/{value.year}"


def tier_summary(
    agency_name: str,
    result: TierResult,
    assessment_date: Optional[datetime],
    progress: Optional[int],
) -> str:
    """Build the text summary stored on a tier assessment report."""
    lines = [
        "SWAT Team Tier Assessment Report",
        f"Agency: {agency_name}",
        f"Tier Classification: {result.tier}",
        f"Assessment Date: {format_short_date(assessment_date)}",
        f"Completion: {progress or 0}%",
        "",
        "Summary:",
        f"This assessment has determined that the {agency_name} SWAT team meets the criteria for a "
        f"Tier {result.tier} classification. The team has successfully demonstrated compliance with "
        f"{result.positive} out of {result.total} critical capability requirements.",
        "",
        "Recommendations:",
    ]
    if result.tier > 1:
        lines.append("To achieve a higher tier classification, focus on the following areas:")
        lines.extend(f"- {question.text}" for question in result.unmet[:3])
    else:
        lines.append("Maintain current capabilities and continue regular training to sustain Tier 1 status.")
    return "\n".join(lines)


def gap_report_header(agency_name: str, date: datetime) -> List[str]:
    return [
        f"Prepared for: {agency_name}",
        f"Date: {format_long_date(date)}",
        f"Assessed By: {ASSESSED_BY}",
    ]


def gap_report_closing(agency_name: str) -> str:
    return f"This {agency_name} SWAT Gap Analysis Report contains only the questions and answers as requested."


def gap_report_text(agency_name: str, sections: Sequence[ReportSection], date: datetime) -> str:
    """Build the plain-text body of a gap analysis report."""
    lines = ["SWAT GAP ANALYSIS REPORT", *gap_report_header(agency_name, date), ""]
    for section in sections:
        lines.append(section.title)
        for entry in section.entries:
            lines.append(entry.question)
            lines.append(f"○ {entry.answer}")
            if entry.notes:
                lines.append(f"Notes: {entry.notes}")
        lines.append("")
    lines.append(gap_report_closing(agency_name))
    return "\n".join(lines)


def report_filename(kind: str, assessment_id: str, now: Optional[float] = None) -> str:
    """``{kind}_report_{assessment_id}_{epoch_ms}.pdf``"""
    epoch_ms = int((time.time() if now is None else now) * 1000)
    return f"{kind}_report_{assessment_id}_{epoch_ms}.pdf"


def report_url(filename: str) -> str:
    return f"{REPORT_URL_PREFIX}{filename}"


def text_filename(filename: str) -> str:
    return f"{Path(filename).stem}.txt"


def decode_data_url(data: str) -> bytes:
    """Decode a base64 data URL (or a bare base64 payload).

    Raises:
        ValueError: If the payload is empty or not valid base64
    """
    payload = data.split(",", 1)[1] if "," in data else data
    payload = payload.strip()
    if not payload:
        raise ValueError("Empty file payload")
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError("Invalid base64 payload") from e


def extension_for_file_type(file_type: Optional[str], default: str = "pdf") -> str:
    """Map a MIME type or bare extension to a file extension."""
    if not file_type:
        return default
    lowered = file_type.lower().strip()
    if lowered in UPLOAD_EXTENSIONS:
        return UPLOAD_EXTENSIONS[lowered]
    lowered = lowered.lstrip(".")
    if f".{lowered}" in CONTENT_TYPES:
        return lowered
    return default


class ReportStorage:
    """Filesystem store for report files."""

    def __init__(self, config: Optional[StorageConfig] = None) -> None:
        cfg = config or settings.storage
        self.reports_dir = Path(cfg.reports_dir)
        self.max_upload_bytes = cfg.max_upload_bytes

    def path_for(self, filename: str) -> Path:
        # Only the final path component is honoured so URLs cannot escape the directory.
        return self.reports_dir / Path(filename).name

    def _ensure_dir(self) -> None:
        self.reports_dir.mkdir(parents=True, exist_ok=True)

    def write_pdf(
        self,
        filename: str,
        title: str,
        header_lines: Sequence[str],
        sections: Sequence[ReportSection],
        summary: Optional[str] = None,
        closing: Optional[str] = None,
    ) -> Path:
        """Render a report to PDF.

        Args:
            filename: Target file name inside the reports directory
            title: Centered document title
            header_lines: Lines printed under the title
            sections: Answered questions grouped by category
            summary: Optional multi-line text printed under an "Assessment Summary" heading
            closing: Optional closing paragraph

        Returns:
            Path of the written file
        """
        self._ensure_dir()
        path = self.path_for(filename)
        styles = getSampleStyleSheet()
        body = styles["BodyText"]
        indented = styles["BodyText"].clone("Indented", leftIndent=20)
        notes_style = styles["BodyText"].clone("Notes", leftIndent=20, fontSize=9)

        elements = [Paragraph(escape(title), styles["Title"]), Spacer(1, 12)]
        for line in header_lines:
            elements.append(Paragraph(escape(line), body))
        elements.append(Spacer(1, 18))

        if summary:
            elements.append(Paragraph("Assessment Summary", styles["Heading2"]))
            for line in summary.splitlines():
                elements.append(Paragraph(escape(line), body) if line.strip() else Spacer(1, 6))
            elements.append(Spacer(1, 18))
            elements.append(Paragraph("Assessment Details", styles["Heading2"]))

        for section in sections:
            elements.append(Paragraph(escape(section.title), styles["Heading3"]))
            for entry in section.entries:
                elements.append(Paragraph(escape(entry.question), body))
                elements.append(Paragraph(escape(f"\u2022 {entry.answer}"), indented))
                if entry.notes:
                    elements.append(Paragraph(escape(f"Notes: {entry.notes}"), notes_style))
                elements.append(Spacer(1, 6))
            elements.append(Spacer(1, 12))

        if closing:
            elements.append(Spacer(1, 12))
            elements.append(Paragraph(escape(closing), body))

        doc = SimpleDocTemplate(
            str(path),
            pagesize=letter,
            title=title,
            leftMargin=54,
            rightMargin=54,
            topMargin=54,
            bottomMargin=54,
        )
        doc.build(elements)
        logger.debug(f"Wrote report PDF {path}")
        return path

    def write_bytes(self, filename: str, data: bytes) -> Path:
        self._ensure_dir()
        path = self.path_for(filename)
        path.write_bytes(data)
        logger.debug(f"Stored {len(data)} bytes at {path}")
        return path

    def remove(self, filename: str) -> None:
        path = self.path_for(filename)
        path.unlink(missing_ok=True)
        logger.debug(f"Removed {path}")

    def resolve(self, url: Optional[str]) -> Path:
        """Find the file behind a report URL.

        Raises:
            ReportFileMissingError: If the URL is empty or the file is gone
        """
        if not url:
            raise ReportFileMissingError(url)
        path = self.path_for(url)
        if not path.is_file():
            logger.warning(f"Report file missing on disk: {path}")
            raise ReportFileMissingError(url)
        return path

    @staticmethod
    def content_type_for(path: Path | str) -> str:
        return CONTENT_TYPES.get(Path(path).suffix.lower(), DEFAULT_CONTENT_TYPE)


def get_report_storage() -> ReportStorage:
    """FastAPI dependency returning storage bound to the current settings."""
    return ReportStorage()
