"""
Error taxonomy, classification and formatting for ghsync.
"""

from .categories import (
    ApiError,
    TransportError,
    AuthError,
    NotFoundError,
    MissingHeadShaError,
    UnexpectedResponseError,
    ErrorCategory,
    categorize_error,
    classify_exception,
    classify_response,
)
from .formatter import ErrorFormatter, format_error_for_user

__all__ = [
    "ApiError",
    "TransportError",
    "AuthError",
    "NotFoundError",
    "MissingHeadShaError",
    "UnexpectedResponseError",
    "ErrorCategory",
    "categorize_error",
    "classify_exception",
    "classify_response",
    "ErrorFormatter",
    "format_error_for_user",
]
