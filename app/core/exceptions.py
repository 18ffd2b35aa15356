"""
Global exception handling for the application.
Standardizes error responses using Problem Details for HTTP APIs (RFC 7807).
"""

from typing import Any, Dict, List, Optional

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(AppError):
    """Malformed or missing input, reported per field."""
    def __init__(
        self,
        errors: List[Dict[str, str]],
        message: str = "Validation failed",
    ):
        super().__init__(message, status.HTTP_400_BAD_REQUEST, {"errors": errors})


class ConflictException(AppError):
    """A uniqueness invariant would be violated.

    The message stays generic so callers cannot probe which emails or
    phones are already registered.
    """
    def __init__(self, message: str = "User registration failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_409_CONFLICT, details)


def _error_response(request: Request, status_code: int, code: str, message: str, details=None) -> JSONResponse:
    body: Dict[str, Any] = {
        "code": code,
        "message": message,
        "path": request.url.path,
    }
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content={"error": body})


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render FastAPI body parsing failures in the same shape as ValidationException."""
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        errors.append({
            "field": loc[-1] if loc else "body",
            "message": err.get("msg", "Invalid value"),
        })

    logger.info("Request validation failed", path=request.url.path, error_count=len(errors))
    return _error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        ValidationException.__name__,
        "Validation failed",
        {"errors": errors},
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions globally."""

    if isinstance(exc, AppError):
        return _error_response(
            request,
            exc.status_code,
            exc.__class__.__name__,
            exc.message,
            exc.details,
        )

    logger.exception("Unexpected error occurred", path=request.url.path)

    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "InternalServerError",
        "An unexpected error occurred. Please try again later.",
    )
