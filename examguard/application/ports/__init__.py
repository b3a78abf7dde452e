"""Application ports (interfaces) for Exam Guard.

Ports define the contracts the application services depend on. The host
platform provides production implementations; examguard.infrastructure.stubs
provides in-memory ones for tests and local wiring.
"""

from examguard.application.ports.activity_catalog import ActivityCatalogProtocol
from examguard.application.ports.authorization import AuthorizationProtocol
from examguard.application.ports.exam_activity import ExamActivityProtocol
from examguard.application.ports.extension_ledger import ExtensionLedgerProtocol
from examguard.application.ports.guard_marker_repository import (
    GuardMarkerRepositoryProtocol,
)
from examguard.application.ports.override_store import OverrideStoreProtocol
from examguard.application.ports.role_manager import RoleManagerProtocol
from examguard.application.ports.roster import RosterProtocol
from examguard.application.ports.time_authority import TimeAuthorityProtocol
from examguard.application.ports.transaction import TransactionManagerProtocol

__all__: list[str] = [
    "ActivityCatalogProtocol",
    "AuthorizationProtocol",
    "ExamActivityProtocol",
    "ExtensionLedgerProtocol",
    "GuardMarkerRepositoryProtocol",
    "OverrideStoreProtocol",
    "RoleManagerProtocol",
    "RosterProtocol",
    "TimeAuthorityProtocol",
    "TransactionManagerProtocol",
]
