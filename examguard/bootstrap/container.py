"""Bootstrap wiring for Exam Guard services.

build_in_memory_container() assembles every service on top of the
in-memory stubs, which is what the test suite and local experiments use.
A host plugs its own port implementations in by building the services the
same way with its adapters.

The module-level getters hold one shared container, reset between tests
with reset_examguard_container().
"""

from __future__ import annotations

from dataclasses import dataclass

from examguard.application.activities.factory import ExamActivityFactory
from examguard.application.ports.time_authority import TimeAuthorityProtocol
from examguard.application.services.extension_reconciler import ExtensionReconciler
from examguard.application.services.extension_service import ExtensionService
from examguard.application.services.guard_hooks import GuardHooks
from examguard.application.services.guard_manager import GuardManager
from examguard.config.examguard_config import ExamGuardConfig
from examguard.infrastructure.adapters.system_time_authority import (
    SystemTimeAuthority,
)
from examguard.infrastructure.cache.editing_roles_cache import EditingRolesCache
from examguard.infrastructure.stubs import (
    ActivityCatalogStub,
    AuthorizationStub,
    ExtensionLedgerStub,
    GuardMarkerRepositoryStub,
    InMemoryTransactionManager,
    OverrideStoreStub,
    RoleManagerStub,
    RosterStub,
)


@dataclass
class InMemoryContainer:
    """Every stub and service of one in-memory Exam Guard instance."""

    config: ExamGuardConfig
    time_authority: TimeAuthorityProtocol
    store: OverrideStoreStub
    ledger: ExtensionLedgerStub
    roster: RosterStub
    authorization: AuthorizationStub
    catalog: ActivityCatalogStub
    roles: RoleManagerStub
    markers: GuardMarkerRepositoryStub
    transactions: InMemoryTransactionManager
    roles_cache: EditingRolesCache
    factory: ExamActivityFactory
    reconciler: ExtensionReconciler
    guard_manager: GuardManager
    extension_service: ExtensionService
    guard_hooks: GuardHooks


def build_in_memory_container(
    config: ExamGuardConfig | None = None,
    time_authority: TimeAuthorityProtocol | None = None,
) -> InMemoryContainer:
    """Wire every service over fresh in-memory stubs.

    Args:
        config: Settings, read from the environment when omitted.
        time_authority: Clock, the system clock when omitted.
    """
    config = config or ExamGuardConfig.from_environment()
    time_authority = time_authority or SystemTimeAuthority()

    store = OverrideStoreStub()
    ledger = ExtensionLedgerStub()
    roster = RosterStub(store)
    authorization = AuthorizationStub()
    catalog = ActivityCatalogStub()
    roles = RoleManagerStub()
    markers = GuardMarkerRepositoryStub()
    transactions = InMemoryTransactionManager(store, ledger, roles, markers)
    roles_cache = EditingRolesCache(time_authority)

    factory = ExamActivityFactory(catalog, store, ledger, time_authority, config)
    reconciler = ExtensionReconciler(store, ledger, roster, time_authority, transactions)
    guard_manager = GuardManager(
        factory, roles, markers, roles_cache, transactions, time_authority
    )
    extension_service = ExtensionService(
        factory, reconciler, ledger, guard_manager, authorization, config
    )
    guard_hooks = GuardHooks(guard_manager, factory, authorization, config)

    return InMemoryContainer(
        config=config,
        time_authority=time_authority,
        store=store,
        ledger=ledger,
        roster=roster,
        authorization=authorization,
        catalog=catalog,
        roles=roles,
        markers=markers,
        transactions=transactions,
        roles_cache=roles_cache,
        factory=factory,
        reconciler=reconciler,
        guard_manager=guard_manager,
        extension_service=extension_service,
        guard_hooks=guard_hooks,
    )


_container: InMemoryContainer | None = None


def get_examguard_container() -> InMemoryContainer:
    """Get the shared in-memory container."""
    global _container
    if _container is None:
        _container = build_in_memory_container()
    return _container


def get_extension_service() -> ExtensionService:
    return get_examguard_container().extension_service


def get_guard_hooks() -> GuardHooks:
    return get_examguard_container().guard_hooks


def set_examguard_container(container: InMemoryContainer) -> None:
    """Set custom container for testing."""
    global _container
    _container = container


def reset_examguard_container() -> None:
    """Reset the shared container for testing."""
    global _container
    _container = None
