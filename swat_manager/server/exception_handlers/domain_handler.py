"""
Handlers for SWAT Manager domain errors.

Services raise the errors in ``swat_manager.core.errors``; each maps to one
HTTP status with the error message as ``detail``.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from swat_manager.core.errors import (
    AssessmentIncompleteError,
    AssessmentTypeMismatchError,
    InvalidTokenError,
    InvalidUpdateError,
    NotFoundError,
    PermissionDeniedError,
    ReportFileMissingError,
    SwatError,
)
from swat_manager.core.logging_config import get_logger

logger = get_logger(__name__)

STATUS_BY_ERROR = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ReportFileMissingError: status.HTTP_404_NOT_FOUND,
    PermissionDeniedError: status.HTTP_403_FORBIDDEN,
    AssessmentIncompleteError: status.HTTP_400_BAD_REQUEST,
    AssessmentTypeMismatchError: status.HTTP_400_BAD_REQUEST,
    InvalidUpdateError: status.HTTP_400_BAD_REQUEST,
    InvalidTokenError: status.HTTP_401_UNAUTHORIZED,
}


def status_for(exc: SwatError) -> int:
    """Return the HTTP status for a domain error, 400 for unmapped subclasses."""
    for error_type, status_code in STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def domain_exception_handler(request: Request, exc: SwatError) -> JSONResponse:
    status_code = status_for(exc)
    logger.info(f"{type(exc).__name__} in {request.method} {request.url.path}: {exc} -> {status_code}")
    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=status_code, content={"detail": str(exc)}, headers=headers)
