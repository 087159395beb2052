"""
Logger capability injected into the GitHub client.

The client only emits events through this interface; configuring handlers and
formats is left to the application (see logging_config).
"""

import logging
from typing import Optional, Protocol


class ApiLogger(Protocol):
    """Minimal logging capability used by CommentStatusClient"""

    def info(self, message: str) -> None:
        ...

    def error(self, error: Exception, message: str) -> None:
        ...


class StandardApiLogger:
    """
    ApiLogger backed by a standard library logger.

    Error events carry the exception (as exc_info) and structured
    ``extra_data`` that JSONFormatter renders.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("ghsync.github")

    def info(self, message: str) -> None:
        self._logger.info(message)

    def error(self, error: Exception, message: str) -> None:
        extra_data = {
            "error_type": type(error).__name__,
            "status_code": getattr(error, "status_code", None),
            "operation": getattr(error, "operation", None),
        }
        self._logger.error(
            f"{message} {error}",
            exc_info=(type(error), error, error.__traceback__),
            extra={"extra_data": extra_data}
        )
