"""
Custom exceptions module.
"""

from exceptions.errors import (
    # Base exceptions
    AppError,
    ValidationError,
    ExternalServiceError,
    DatabaseError,

    # SKU
    SKUIncompleteError,
    MissingUsernameError,

    # Record store
    OptionSourceError,
    HistorySourceError,
    SubmissionFailedError,
)

__all__ = [
    # Base
    "AppError",
    "ValidationError",
    "ExternalServiceError",
    "DatabaseError",

    # SKU
    "SKUIncompleteError",
    "MissingUsernameError",

    # Record store
    "OptionSourceError",
    "HistorySourceError",
    "SubmissionFailedError",
]
