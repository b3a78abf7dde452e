"""Application services for Exam Guard."""

from examguard.application.services.base import LoggingMixin
from examguard.application.services.extension_reconciler import (
    ExtensionReconciler,
    PersonalOutcome,
    extended_fields,
)
from examguard.application.services.extension_service import ExtensionService
from examguard.application.services.guard_hooks import (
    COURSE_EDITING_BANNED_MESSAGE,
    GuardHooks,
)
from examguard.application.services.guard_manager import (
    EDITING_ARCHETYPES,
    GUARD_ROLE_SHORTNAME,
    GuardManager,
)

__all__: list[str] = [
    "COURSE_EDITING_BANNED_MESSAGE",
    "EDITING_ARCHETYPES",
    "GUARD_ROLE_SHORTNAME",
    "ExtensionReconciler",
    "ExtensionService",
    "GuardHooks",
    "GuardManager",
    "LoggingMixin",
    "PersonalOutcome",
    "extended_fields",
]
