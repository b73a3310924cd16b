"""Error types for the SWAT Manager domain.

Services raise these instead of HTTP errors so they can be reused from the
command line tools. The server translates them to HTTP responses in
``swat_manager.server.exception_handlers``.
"""

from __future__ import annotations


class SwatError(Exception):
    """Base error for all domain exceptions."""


class NotFoundError(SwatError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity: str, entity_id: str | None = None, message: str | None = None) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(message or f"{entity} not found")


class PermissionDeniedError(SwatError):
    """Raised when the acting user may not touch the requested entity."""

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(message)


class AssessmentIncompleteError(SwatError):
    """Raised when a report is requested for an assessment below its completion threshold."""

    def __init__(self, progress: int, required: int, report_label: str) -> None:
        self.progress = progress
        self.required = required
        super().__init__(f"Assessment must be at least {required}% complete to generate a {report_label}")


class AssessmentTypeMismatchError(SwatError):
    """Raised when a report is requested for an assessment of the other type."""

    def __init__(self, assessment_type: str, report_label: str) -> None:
        self.assessment_type = assessment_type
        super().__init__(f"A {report_label} cannot be generated for a {assessment_type} assessment")


class InvalidUpdateError(SwatError):
    """Raised when an update would clear columns that must always hold a value."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(f"Fields cannot be null: {', '.join(fields)}")


class ReportFileMissingError(SwatError):
    """Raised when a report record points at a file that is not on disk."""

    def __init__(self, report_url: str | None) -> None:
        self.report_url = report_url
        super().__init__("Report file not found")


class InvalidTokenError(SwatError):
    """Raised when an access token cannot be decoded or has expired."""

    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(message)
