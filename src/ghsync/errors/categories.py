"""
GitHub API error taxonomy and classification.
"""

from enum import Enum
from typing import Optional, Tuple

import httpx


class ApiError(Exception):
    """Base exception for GitHub API errors"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        operation: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.operation = operation


class TransportError(ApiError):
    """Network or connection failure reaching the API"""
    pass


class AuthError(ApiError):
    """Credential rejected or missing scope (401/403)"""
    pass


class NotFoundError(ApiError):
    """Pull request, comment or commit not found or not accessible"""
    pass


class MissingHeadShaError(ApiError):
    """Pull request fetched but it has no head SHA"""
    pass


class UnexpectedResponseError(ApiError):
    """Any other malformed or unrecognized response"""
    pass


def _github_message(response: httpx.Response) -> str:
    """Extract GitHub's error message from a response body, if any."""
    try:
        data = response.json()
    except ValueError:
        return response.text
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return response.text


def classify_response(response: httpx.Response, operation: Optional[str] = None) -> ApiError:
    """
    Map a non-2xx response to a typed error.

    Args:
        response: The failed HTTP response
        operation: Name of the client operation, for context

    Returns:
        The matching ApiError subclass instance
    """
    status = response.status_code
    detail = _github_message(response)

    if status in (401, 403):
        return AuthError(
            f"GitHub rejected the credential ({status}): {detail}",
            status_code=status,
            operation=operation
        )
    if status in (404, 410):
        return NotFoundError(
            f"Resource not found ({status}): {response.request.url.path}",
            status_code=status,
            operation=operation
        )
    return UnexpectedResponseError(
        f"GitHub API error ({status}): {detail}",
        status_code=status,
        operation=operation
    )


def classify_exception(error: httpx.RequestError, operation: Optional[str] = None) -> TransportError:
    """Wrap an httpx transport failure."""
    return TransportError(
        f"Request failed: {type(error).__name__}: {error}",
        operation=operation
    )


class ErrorCategory(Enum):
    """Categories of API failures, for user-facing messages"""
    NETWORK = "network"
    AUTH = "authentication"
    NOT_FOUND = "not_found"
    PULL_REQUEST = "pull_request"
    API = "api"
    INTERNAL = "internal"


def categorize_error(error: Exception) -> Tuple[ErrorCategory, str]:
    """
    Categorize an error and provide a user-friendly explanation.

    Args:
        error: The exception to categorize

    Returns:
        Tuple of (ErrorCategory, explanation)
    """
    if isinstance(error, TransportError):
        return (
            ErrorCategory.NETWORK,
            "Network error - GitHub could not be reached"
        )

    if isinstance(error, AuthError):
        return (
            ErrorCategory.AUTH,
            "Authentication failed - the token was rejected or lacks permissions"
        )

    if isinstance(error, NotFoundError):
        return (
            ErrorCategory.NOT_FOUND,
            "Not found - the repository, pull request or comment does not exist"
        )

    if isinstance(error, MissingHeadShaError):
        return (
            ErrorCategory.PULL_REQUEST,
            "The pull request has no head commit to attach a status to"
        )

    if isinstance(error, UnexpectedResponseError):
        return (
            ErrorCategory.API,
            "API error - GitHub returned an unexpected response"
        )

    return (
        ErrorCategory.INTERNAL,
        "An unexpected error occurred"
    )
