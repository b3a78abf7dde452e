"""Application-layer DTOs returned to the host."""

from examguard.application.dtos.extension import (
    MAX_EXTENSION_MINUTES,
    ExtensionOutcome,
    ExtensionRequest,
    ReconciliationReport,
)
from examguard.application.dtos.guard import BANNER_TEMPLATE, GuardStatus

__all__: list[str] = [
    "BANNER_TEMPLATE",
    "MAX_EXTENSION_MINUTES",
    "ExtensionOutcome",
    "ExtensionRequest",
    "GuardStatus",
    "ReconciliationReport",
]
