"""Atomic operation primitive with registered rollback handlers.

Every reconciliation is all-or-nothing: either every override, group,
audit and marker write lands, or none does. Stores that cannot lean on a
database transaction register an undo step here; on failure the steps run
in reverse order and the original exception is re-raised.

Usage:
    async with AtomicOperationContext() as ctx:
        snapshot = store.snapshot()
        ctx.add_rollback(lambda: store.restore(snapshot))
        await reconcile()
        # On exception: store restored, exception re-raised
"""

import inspect
from collections.abc import Callable, Coroutine
from types import TracebackType
from typing import Any

import structlog

log = structlog.get_logger()

# Rollback handlers can be sync or async
RollbackHandler = Callable[[], None] | Callable[[], Coroutine[Any, Any, None]]


class AtomicOperationContext:
    """Async context manager running rollback handlers on failure.

    Handlers run LIFO. A failing handler is logged and does not stop the
    remaining ones. The exception that aborted the block is always
    re-raised.

    Attributes:
        _rollback_handlers: Registered handlers, in registration order.
    """

    def __init__(self) -> None:
        self._rollback_handlers: list[RollbackHandler] = []

    def add_rollback(self, handler: RollbackHandler) -> None:
        """Register a no-argument handler to call if the block fails."""
        self._rollback_handlers.append(handler)

    @property
    def rollback_count(self) -> int:
        return len(self._rollback_handlers)

    async def __aenter__(self) -> "AtomicOperationContext":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool:
        if exc_val is None:
            return False

        log.info(
            "atomic_operation_failed",
            error=str(exc_val),
            error_type=exc_type.__name__ if exc_type else "Unknown",
            rollback_count=len(self._rollback_handlers),
        )

        for handler in reversed(self._rollback_handlers):
            try:
                if inspect.iscoroutinefunction(handler):
                    await handler()
                else:
                    result = handler()
                    if inspect.isawaitable(result):
                        await result
            except Exception as rollback_error:
                log.error(
                    "rollback_handler_failed",
                    rollback_error=str(rollback_error),
                    rollback_error_type=type(rollback_error).__name__,
                )

        return False
