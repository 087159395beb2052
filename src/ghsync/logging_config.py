"""
Logging configuration for ghsync command line use.

Reads environment variables:
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL
- LOG_FORMAT: simple, detailed, json

Library users configure logging themselves; the client never installs handlers.
"""

import os
import sys
import logging
import json
from datetime import datetime, timezone
from typing import Optional, TextIO

VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
SIMPLE_FORMAT = "%(levelname)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    One JSON object per line; ``extra_data`` attached by StandardApiLogger
    is emitted under "extra".
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_data"):
            log_data["extra"] = record.extra_data

        return json.dumps(log_data, default=str)


def build_formatter(format_style: str) -> logging.Formatter:
    """Formatter for a LOG_FORMAT value; unknown values fall back to simple."""
    if format_style == "json":
        return JSONFormatter()
    if format_style == "detailed":
        return logging.Formatter(fmt=DETAILED_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    return logging.Formatter(fmt=SIMPLE_FORMAT)


def configure_logging(
    level: Optional[str] = None,
    format_style: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> None:
    """
    Configure root logging for the CLI.

    Args:
        level: Log level. Defaults to LOG_LEVEL env var or INFO.
        format_style: simple, detailed or json. Defaults to LOG_FORMAT env var or simple.
        stream: Output stream (default: stderr, keeping stdout for command output)
    """
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_format = (format_style or os.getenv("LOG_FORMAT", "simple")).lower()

    if log_level not in VALID_LEVELS:
        sys.stderr.write(f"Warning: Invalid LOG_LEVEL '{log_level}', defaulting to INFO\n")
        log_level = "INFO"

    numeric_level = getattr(logging, log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Replace handlers so repeated calls don't duplicate output
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(build_formatter(log_format))
    root_logger.addHandler(console_handler)

    root_logger.debug(f"Logging configured: level={log_level}, format={log_format}")

    # httpx logs every request at INFO, including URLs
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
