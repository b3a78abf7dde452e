"""Unit tests for EditingRolesCache."""

from __future__ import annotations

from examguard.infrastructure.cache.editing_roles_cache import EditingRolesCache
from tests.helpers import FakeTimeAuthority


class TestEditingRolesCache:
    """Tests for get/set/purge and expiry."""

    def test_empty_cache_misses(self, fake_time: FakeTimeAuthority) -> None:
        assert EditingRolesCache(fake_time).get() is None

    def test_set_then_get(self, fake_time: FakeTimeAuthority) -> None:
        cache = EditingRolesCache(fake_time)
        cache.set([3, 4])
        assert cache.get() == [3, 4]

    def test_returned_list_is_a_copy(self, fake_time: FakeTimeAuthority) -> None:
        cache = EditingRolesCache(fake_time)
        cache.set([3])
        cache.get().append(99)  # type: ignore[union-attr]
        assert cache.get() == [3]

    def test_entry_expires_after_ttl(self, fake_time: FakeTimeAuthority) -> None:
        cache = EditingRolesCache(fake_time, ttl_seconds=60)
        cache.set([3])
        fake_time.advance(seconds=59)
        assert cache.get() == [3]
        fake_time.advance(seconds=1)
        assert cache.get() is None

    def test_purge(self, fake_time: FakeTimeAuthority) -> None:
        cache = EditingRolesCache(fake_time)
        cache.set([3])
        cache.purge()
        assert cache.get() is None
