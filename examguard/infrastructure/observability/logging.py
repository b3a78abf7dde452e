"""Structured logging configuration with structlog.

Production output is one JSON object per line for the host's log
shipping. Development output is coloured console text.

Log Entry Format (production):
    {
        "timestamp": "2025-04-08T09:00:00.000000Z",
        "level": "info",
        "event": "extension_applied",
        "service": "ExtensionReconciler",
        "operation": "apply_extension",
        "activity_id": 42,
        ...additional context
    }

Usage:
    from examguard.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")

    import structlog
    log = structlog.get_logger()
    log.info("event_name", key="value")

Request-scoped context (course, user) is bound by the host with
structlog.contextvars.bind_contextvars and merged into every entry.
"""

import logging
import os

import structlog
from structlog.typing import Processor

LOG_LEVEL_ENV = "EXAMGUARD_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def _get_log_level() -> int:
    """Get the configured log level from environment.

    Returns:
        The logging level integer (e.g., logging.INFO).
    """
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.INFO)


def configure_structlog(environment: str = "production") -> None:
    """Configure structlog once at host startup.

    Args:
        environment: 'production' for JSON output, anything else for
            console output.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def bind_request_context(**context: object) -> None:
    """Bind request-scoped keys (course_id, user_id, ...) to every log entry."""
    structlog.contextvars.bind_contextvars(**context)


def clear_request_context() -> None:
    """Drop the request-scoped keys at the end of a request."""
    structlog.contextvars.clear_contextvars()
