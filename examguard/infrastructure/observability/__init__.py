"""Observability infrastructure: structured logging with structlog.

Usage:
    from examguard.infrastructure.observability import (
        bind_request_context,
        configure_structlog,
    )

    configure_structlog(environment="production")
    bind_request_context(course_id=course_id, user_id=user_id)
"""

from examguard.infrastructure.observability.logging import (
    bind_request_context,
    clear_request_context,
    configure_structlog,
)

__all__: list[str] = [
    "bind_request_context",
    "clear_request_context",
    "configure_structlog",
]
