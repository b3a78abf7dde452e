"""Unit tests for AtomicOperationContext."""

from __future__ import annotations

import pytest

from examguard.domain.primitives.ensure_atomicity import AtomicOperationContext


class TestAtomicOperationContext:
    """Tests for rollback handler execution."""

    @pytest.mark.asyncio
    async def test_success_runs_no_handlers(self) -> None:
        calls: list[str] = []
        async with AtomicOperationContext() as ctx:
            ctx.add_rollback(lambda: calls.append("undo"))
        assert calls == []

    @pytest.mark.asyncio
    async def test_failure_runs_handlers_in_reverse(self) -> None:
        calls: list[str] = []
        with pytest.raises(RuntimeError, match="boom"):
            async with AtomicOperationContext() as ctx:
                ctx.add_rollback(lambda: calls.append("first"))
                ctx.add_rollback(lambda: calls.append("second"))
                raise RuntimeError("boom")
        assert calls == ["second", "first"]

    @pytest.mark.asyncio
    async def test_async_handlers_are_awaited(self) -> None:
        calls: list[str] = []

        async def undo() -> None:
            calls.append("async")

        with pytest.raises(RuntimeError):
            async with AtomicOperationContext() as ctx:
                ctx.add_rollback(undo)
                raise RuntimeError("boom")
        assert calls == ["async"]

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_stop_others(self) -> None:
        calls: list[str] = []

        def broken() -> None:
            raise ValueError("cannot undo")

        with pytest.raises(RuntimeError, match="boom"):
            async with AtomicOperationContext() as ctx:
                ctx.add_rollback(lambda: calls.append("first"))
                ctx.add_rollback(broken)
                raise RuntimeError("boom")
        assert calls == ["first"]

    def test_rollback_count(self) -> None:
        ctx = AtomicOperationContext()
        ctx.add_rollback(lambda: None)
        ctx.add_rollback(lambda: None)
        assert ctx.rollback_count == 2
