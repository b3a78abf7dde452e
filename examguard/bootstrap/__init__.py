"""Bootstrap wiring for Exam Guard."""

from examguard.bootstrap.container import (
    InMemoryContainer,
    build_in_memory_container,
    get_examguard_container,
    get_extension_service,
    get_guard_hooks,
    reset_examguard_container,
    set_examguard_container,
)
from examguard.bootstrap.logging import configure_structlog

__all__ = [
    "InMemoryContainer",
    "build_in_memory_container",
    "configure_structlog",
    "get_examguard_container",
    "get_extension_service",
    "get_guard_hooks",
    "reset_examguard_container",
    "set_examguard_container",
]
