"""In-memory stub implementations of the application ports.

Used by the test suite and by build_in_memory_container for local wiring.
None of these are meant for production: the host platform provides real
implementations backed by its own tables.
"""

from examguard.infrastructure.stubs.activity_catalog_stub import ActivityCatalogStub
from examguard.infrastructure.stubs.authorization_stub import AuthorizationStub
from examguard.infrastructure.stubs.extension_ledger_stub import ExtensionLedgerStub
from examguard.infrastructure.stubs.guard_marker_repository_stub import (
    GuardMarkerRepositoryStub,
)
from examguard.infrastructure.stubs.override_store_stub import OverrideStoreStub
from examguard.infrastructure.stubs.role_manager_stub import (
    RoleDefinition,
    RoleManagerStub,
)
from examguard.infrastructure.stubs.roster_stub import RosterStub
from examguard.infrastructure.stubs.transaction_stub import (
    InMemoryTransactionManager,
)

__all__: list[str] = [
    "ActivityCatalogStub",
    "AuthorizationStub",
    "ExtensionLedgerStub",
    "GuardMarkerRepositoryStub",
    "InMemoryTransactionManager",
    "OverrideStoreStub",
    "RoleDefinition",
    "RoleManagerStub",
    "RosterStub",
]
