"""Transaction manager port.

Each extension request and each course guard reconciliation runs inside
one transaction: every write lands or none does. The host maps this onto
its database transaction; concurrent writers are isolated by the database,
not by locks of ours.
"""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Protocol


class TransactionManagerProtocol(Protocol):
    """Protocol for opening an atomic unit of work.

    Usage:
        async with transactions.transaction():
            await store.save_override(...)
            await ledger.upsert_audit(...)
        # Any exception inside the block rolls back both writes and
        # propagates unchanged.
    """

    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Return an async context manager delimiting one transaction."""
        ...
