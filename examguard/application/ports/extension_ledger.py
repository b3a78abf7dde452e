"""Extension ledger port.

Append-only history of bulk extension requests per activity, and the
audit rows recording which overrides carry extension-adjusted values.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from examguard.domain.models.extension import ExtensionRecord, GuardOverrideAudit


class ExtensionLedgerProtocol(Protocol):
    """Protocol for extension history and override audit storage.

    All operations raise StoreError when the underlying store fails.
    """

    async def latest_extension(self, activity_id: int) -> int:
        """Return the most recently recorded extension in minutes (0 if none)."""
        ...

    async def record_extension(
        self,
        activity_id: int,
        minutes: int,
        applied_by: int,
        applied_at: datetime,
    ) -> ExtensionRecord:
        """Append one history entry and return it."""
        ...

    async def list_history(self, activity_id: int) -> list[ExtensionRecord]:
        """Return the history of an activity, oldest first."""
        ...

    async def get_audit(
        self, activity_id: int, override_id: int
    ) -> GuardOverrideAudit | None:
        """Return the audit row of an override, None when there is none."""
        ...

    async def upsert_audit(self, audit: GuardOverrideAudit) -> None:
        """Insert the audit row or replace the existing one of its override."""
        ...

    async def delete_audit(self, activity_id: int, override_id: int) -> None:
        """Delete the audit row of an override. Missing rows are ignored."""
        ...
