"""In-memory transaction manager.

Gives the in-memory stubs all-or-nothing semantics. Each transaction takes
a snapshot of every participating stub on entry and registers its restore
as a rollback handler on an AtomicOperationContext, so a failure inside
the block puts every stub back the way it was before re-raising.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Protocol

import structlog

from examguard.application.ports.transaction import TransactionManagerProtocol
from examguard.domain.primitives.ensure_atomicity import AtomicOperationContext

logger = structlog.get_logger(__name__)


class SnapshotParticipant(Protocol):
    """A stub whose state can be captured and put back."""

    def snapshot(self) -> dict[str, Any]: ...

    def restore(self, state: dict[str, Any]) -> None: ...


class InMemoryTransactionManager(TransactionManagerProtocol):
    """Transaction manager over snapshot-capable stubs (testing only).

    Nested transactions join the outer one: only the outermost block
    snapshots and rolls back, matching a host database without savepoints.

    Attributes:
        commit_count: Outermost transactions that completed.
        rollback_count: Outermost transactions that were rolled back.
    """

    def __init__(self, *participants: SnapshotParticipant) -> None:
        self._participants = list(participants)
        self._depth = 0
        self.commit_count = 0
        self.rollback_count = 0

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        if self._depth > 0:
            self._depth += 1
            try:
                yield
            finally:
                self._depth -= 1
            return

        self._depth = 1
        try:
            async with AtomicOperationContext() as ctx:
                for participant in self._participants:
                    state = participant.snapshot()
                    ctx.add_rollback(
                        lambda p=participant, s=state: p.restore(s)
                    )
                try:
                    yield
                except BaseException:
                    self.rollback_count += 1
                    logger.debug(
                        "transaction_rolled_back",
                        participants=len(self._participants),
                    )
                    raise
            self.commit_count += 1
        finally:
            self._depth = 0
