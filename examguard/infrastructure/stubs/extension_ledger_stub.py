"""Extension ledger stub implementation.

In-memory implementation of ExtensionLedgerProtocol for tests and local
wiring.
"""

from __future__ import annotations

import copy
from datetime import datetime
from typing import Any

from examguard.application.ports.extension_ledger import ExtensionLedgerProtocol
from examguard.domain.errors.store import StoreError
from examguard.domain.models.extension import ExtensionRecord, GuardOverrideAudit


class ExtensionLedgerStub(ExtensionLedgerProtocol):
    """In-memory stub for extension history and override audits (testing only).

    History is a list in insertion order; the latest entry of an activity is
    its current extension. Audits are keyed by (activity_id, override_id).
    write_count and fail_on work as in OverrideStoreStub.
    """

    def __init__(self) -> None:
        self._history: list[ExtensionRecord] = []
        self._audits: dict[tuple[int, int], GuardOverrideAudit] = {}
        self.write_count = 0
        self.fail_on: set[str] = set()

    def _check(self, operation: str) -> None:
        if operation in self.fail_on:
            raise StoreError(operation)

    async def latest_extension(self, activity_id: int) -> int:
        self._check("latest_extension")
        for record in reversed(self._history):
            if record.activity_id == activity_id:
                return record.extension_minutes
        return 0

    async def record_extension(
        self,
        activity_id: int,
        minutes: int,
        applied_by: int,
        applied_at: datetime,
    ) -> ExtensionRecord:
        self._check("record_extension")
        record = ExtensionRecord(
            activity_id=activity_id,
            extension_minutes=minutes,
            applied_at=applied_at,
            applied_by=applied_by,
        )
        self._history.append(record)
        return record

    async def list_history(self, activity_id: int) -> list[ExtensionRecord]:
        self._check("list_history")
        return [r for r in self._history if r.activity_id == activity_id]

    async def get_audit(
        self, activity_id: int, override_id: int
    ) -> GuardOverrideAudit | None:
        self._check("get_audit")
        return self._audits.get((activity_id, override_id))

    async def upsert_audit(self, audit: GuardOverrideAudit) -> None:
        self._check("upsert_audit")
        self.write_count += 1
        self._audits[(audit.activity_id, audit.override_id)] = audit

    async def delete_audit(self, activity_id: int, override_id: int) -> None:
        self._check("delete_audit")
        self.write_count += 1
        self._audits.pop((activity_id, override_id), None)

    # =========================================================================
    # Transaction support
    # =========================================================================

    def snapshot(self) -> dict[str, Any]:
        return copy.deepcopy({"history": self._history, "audits": self._audits})

    def restore(self, state: dict[str, Any]) -> None:
        self._history = state["history"]
        self._audits = state["audits"]

    # =========================================================================
    # Test helper methods (not part of protocol)
    # =========================================================================

    def audits_for(self, activity_id: int) -> list[GuardOverrideAudit]:
        return [a for (act, _), a in sorted(self._audits.items()) if act == activity_id]

    def add_audit(self, audit: GuardOverrideAudit) -> None:
        """Store an audit row without counting a write (test setup)."""
        self._audits[(audit.activity_id, audit.override_id)] = audit
