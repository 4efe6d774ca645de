"""
Custom exception classes for the application.

Every error carries a stable code, an HTTP status and a details dict,
so routes can turn it into the standard error response.
"""

from typing import Optional, Any
from datetime import datetime


class AppError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions inherit from this.

    Attributes:
        code: Error code (e.g., "SKU_INCOMPLETE")
        message: Human-readable message
        status_code: HTTP status code
        details: Additional context
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.utcnow().isoformat()
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to API response format."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "timestamp": self.timestamp
            }
        }


class ValidationError(AppError):
    """Validation failed (422)."""

    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=422,
            details=details
        )


class ExternalServiceError(AppError):
    """External service failure (503)."""

    def __init__(
        self,
        service: str,
        message: str,
        details: Optional[dict] = None
    ):
        super().__init__(
            code=f"{service.upper()}_ERROR",
            message=message,
            status_code=503,
            details={"service": service, **(details or {})}
        )


class DatabaseError(AppError):
    """Database operation failed (500)."""

    def __init__(
        self,
        operation: str,
        message: str,
        details: Optional[dict] = None
    ):
        super().__init__(
            code="DATABASE_ERROR",
            message=f"Database {operation} failed: {message}",
            status_code=500,
            details={"operation": operation, **(details or {})}
        )


# ===================
# SKU ERRORS
# ===================

class SKUIncompleteError(ValidationError):
    """Record is missing required attributes and cannot be submitted."""

    def __init__(self, missing_fields: list[str]):
        super().__init__(
            code="SKU_INCOMPLETE",
            message="Please fill all required fields",
            details={"missing_fields": missing_fields}
        )


class MissingUsernameError(ValidationError):
    """Submission has no user to record as creator."""

    def __init__(self):
        super().__init__(
            code="USERNAME_REQUIRED",
            message="Please login first",
        )


# ===================
# RECORD STORE ERRORS
# ===================

class OptionSourceError(ExternalServiceError):
    """Dropdown option data could not be fetched."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(
            service="option_source",
            message=message,
            details=details
        )


class HistorySourceError(ExternalServiceError):
    """Submitted records could not be fetched."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(
            service="history_source",
            message=message,
            details=details
        )


class SubmissionFailedError(ExternalServiceError):
    """Record store rejected or did not receive the submission."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(
            service="record_store",
            message=message,
            details=details
        )
