"""Unit tests for InMemoryTransactionManager."""

from __future__ import annotations

import pytest

from examguard.domain.errors import StoreError
from examguard.domain.models.override import OverrideFields, OverrideScope
from examguard.infrastructure.stubs import (
    ExtensionLedgerStub,
    InMemoryTransactionManager,
    OverrideStoreStub,
)
from tests.helpers import T


@pytest.fixture
def store() -> OverrideStoreStub:
    return OverrideStoreStub()


@pytest.fixture
def ledger() -> ExtensionLedgerStub:
    return ExtensionLedgerStub()


@pytest.fixture
def transactions(
    store: OverrideStoreStub, ledger: ExtensionLedgerStub
) -> InMemoryTransactionManager:
    return InMemoryTransactionManager(store, ledger)


class TestTransaction:
    """Tests for commit and rollback."""

    @pytest.mark.asyncio
    async def test_commit_keeps_writes(
        self,
        store: OverrideStoreStub,
        transactions: InMemoryTransactionManager,
    ) -> None:
        async with transactions.transaction():
            await store.save_override(100, OverrideScope.user(7), OverrideFields(close=T))

        assert len(await store.list_overrides(100)) == 1
        assert transactions.commit_count == 1
        assert transactions.rollback_count == 0

    @pytest.mark.asyncio
    async def test_failure_rolls_back_every_participant(
        self,
        store: OverrideStoreStub,
        ledger: ExtensionLedgerStub,
        transactions: InMemoryTransactionManager,
    ) -> None:
        store.fail_on.add("create_group")

        with pytest.raises(StoreError):
            async with transactions.transaction():
                await store.save_override(
                    100, OverrideScope.user(7), OverrideFields(close=T)
                )
                await ledger.record_extension(100, 15, applied_by=2, applied_at=T)
                await store.create_group(5, "Group A")

        assert await store.list_overrides(100) == []
        assert await ledger.list_history(100) == []
        assert transactions.rollback_count == 1
        assert transactions.commit_count == 0

    @pytest.mark.asyncio
    async def test_nested_transaction_joins_outer(
        self,
        store: OverrideStoreStub,
        transactions: InMemoryTransactionManager,
    ) -> None:
        with pytest.raises(RuntimeError):
            async with transactions.transaction():
                async with transactions.transaction():
                    await store.save_override(
                        100, OverrideScope.user(7), OverrideFields(close=T)
                    )
                raise RuntimeError("outer failure")

        assert await store.list_overrides(100) == []
        assert transactions.rollback_count == 1

    @pytest.mark.asyncio
    async def test_manager_is_reusable_after_rollback(
        self,
        store: OverrideStoreStub,
        transactions: InMemoryTransactionManager,
    ) -> None:
        with pytest.raises(RuntimeError):
            async with transactions.transaction():
                raise RuntimeError("boom")

        async with transactions.transaction():
            await store.create_group(5, "Group A")

        assert len(store.groups_in_course(5)) == 1
