"""
Error message formatting for command line users.
"""

from .categories import ErrorCategory, categorize_error


class ErrorFormatter:
    """
    Formats API errors into readable multi-line messages.
    """

    # Suggestions for each error category
    SUGGESTIONS = {
        ErrorCategory.NETWORK: [
            "Check your internet connection",
            "Verify GITHUB_API_URL points at a reachable endpoint",
            "Try again in a few moments"
        ],
        ErrorCategory.AUTH: [
            "Verify your GitHub token has the `repo` or `repo:status` scope",
            "Ensure the token hasn't expired"
        ],
        ErrorCategory.NOT_FOUND: [
            "Check the repository owner and name",
            "Check the pull request number or comment id",
            "Private repositories report missing access as not found"
        ],
        ErrorCategory.PULL_REQUEST: [
            "Make sure the pull request's head branch still exists"
        ],
        ErrorCategory.API: [
            "Check the GitHub status page for outages",
            "Verify your request parameters are valid"
        ],
        ErrorCategory.INTERNAL: [
            "Check the logs for more details"
        ]
    }

    @staticmethod
    def format_error(error: Exception, include_details: bool = False) -> str:
        """
        Format an error for display.

        Args:
            error: The exception to format
            include_details: Whether to append the error type and status code

        Returns:
            Formatted message
        """
        category, explanation = categorize_error(error)
        suggestions = ErrorFormatter.SUGGESTIONS.get(category, [])

        lines = [
            f"GitHub request failed ({category.value.replace('_', ' ')})",
            f"{explanation}: {str(error)[:200]}"
        ]

        if suggestions:
            lines.append("Suggestions:")
            for suggestion in suggestions:
                lines.append(f"  - {suggestion}")

        if include_details:
            lines.append(f"Error Type: {type(error).__name__}")
            status_code = getattr(error, "status_code", None)
            if status_code is not None:
                lines.append(f"Status Code: {status_code}")
            operation = getattr(error, "operation", None)
            if operation:
                lines.append(f"Operation: {operation}")

        return "\n".join(lines)


def format_error_for_user(error: Exception) -> str:
    """
    Short single-line error description.

    Args:
        error: The exception to format

    Returns:
        One-line message
    """
    category, explanation = categorize_error(error)
    return f"[{category.value}] {explanation}: {str(error)[:100]}"
