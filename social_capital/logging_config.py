"""
Centralized logging configuration for the Social Capital CRM services.

Every service writes one line per record to stdout:
Format: 2026-01-06T14:05:52Z [source] LEVEL message

Environment Variables:
    LOG_LEVEL: "TRACE", "DEBUG" or "INFO" (default)
               - INFO: request-level summaries (graph sizes, paths found)
               - DEBUG: per-operation diagnostics (queue sizes, pruned searches)
               - TRACE: very verbose traversal details

Usage:
    from social_capital.logging_config import configure_logging, get_logger

    configure_logging(source="api")
    logger = get_logger(__name__)
    logger.info("Application started")
"""

from __future__ import annotations

import logging
import os
import re
import sys
from datetime import UTC, datetime

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def _trace(self: logging.Logger, message: object, *args: object, **kw: object) -> None:
    """Log a message at TRACE level (5)."""
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kw)  # type: ignore[arg-type]


logging.Logger.trace = _trace  # type: ignore[attr-defined]


class ISO8601Formatter(logging.Formatter):
    """Formatter producing ISO8601 UTC timestamps and a bracketed source tag."""

    def __init__(self, source: str = "crm"):
        """Initialize formatter with a source identifier.

        Args:
            source: Identifier shown in brackets (e.g., "api", "graph")
        """
        self.source = source
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
        message = record.getMessage()

        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        return f"{timestamp} [{self.source}] {record.levelname} {message}"


class HealthCheckFilter(logging.Filter):
    """Suppress health check access logs unless DEBUG is enabled.

    Container orchestrators poll /health every few seconds, which would
    otherwise drown out request logs.
    """

    HEALTH_PATHS = {"/health", "/api/health"}

    # Request line inside a uvicorn access log: "GET /health?ready=1 HTTP/1.1"
    REQUEST_PATH = re.compile(r'"(?:GET|HEAD) ([^\s?"]+)')

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno == logging.DEBUG:
            return True

        match = self.REQUEST_PATH.search(record.getMessage())
        return not (match and match.group(1) in self.HEALTH_PATHS)


def _level_from_env(debug: bool | None) -> int:
    log_level_env = os.getenv("LOG_LEVEL", "").upper()
    if log_level_env == "TRACE":
        return TRACE
    if log_level_env == "DEBUG" or debug:
        return logging.DEBUG
    return logging.INFO


def configure_logging(
    source: str = "crm",
    level: int | None = None,
    debug: bool | None = None,
) -> logging.Logger:
    """Configure logging for a service component.

    Args:
        source: Source identifier for log messages (e.g., "api", "graph")
        level: Logging level (defaults to INFO, or DEBUG/TRACE from LOG_LEVEL)
        debug: Enable debug mode (overrides level to DEBUG)

    Returns:
        Configured root logger
    """
    if level is None:
        level = _level_from_env(debug)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ISO8601Formatter(source=source))
    handler.addFilter(HealthCheckFilter())

    root_logger.addHandler(handler)

    # Uvicorn installs its own handlers; route them through ours so the
    # health check filter applies to access logs too
    for uvicorn_logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(uvicorn_logger_name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.addHandler(handler)
        uvicorn_logger.setLevel(level)
        uvicorn_logger.propagate = False

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(name)
