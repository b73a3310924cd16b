"""
Unit tests for domain error types.
"""

import pytest

from swat_manager.core.errors import (
    AssessmentIncompleteError,
    InvalidTokenError,
    NotFoundError,
    PermissionDeniedError,
    ReportFileMissingError,
    SwatError,
)


@pytest.mark.parametrize(
    "error",
    [
        NotFoundError("Agency"),
        PermissionDeniedError(),
        AssessmentIncompleteError(10, 90, "tier report"),
        ReportFileMissingError("/reports/x.pdf"),
        InvalidTokenError(),
    ],
)
def test_all_errors_share_base(error):
    assert isinstance(error, SwatError)


class TestNotFoundError:
    def test_default_message(self):
        error = NotFoundError("Assessment", "a-1")

        assert str(error) == "Assessment not found"
        assert error.entity == "Assessment"
        assert error.entity_id == "a-1"

    def test_custom_message(self):
        assert str(NotFoundError("User", message="Recipient not found")) == "Recipient not found"


def test_permission_denied_messages():
    assert str(PermissionDeniedError()) == "Access denied"
    assert str(PermissionDeniedError("Only the sender can delete")) == "Only the sender can delete"


def test_assessment_incomplete_carries_progress():
    error = AssessmentIncompleteError(60, 75, "gap analysis report")

    assert error.progress == 60
    assert error.required == 75
    assert str(error) == "Assessment must be at least 75% complete to generate a gap analysis report"


def test_report_file_missing():
    error = ReportFileMissingError("/reports/gone.pdf")

    assert error.report_url == "/reports/gone.pdf"
    assert str(error) == "Report file not found"


def test_invalid_token_message():
    assert str(InvalidTokenError()) == "Invalid or expired token"
