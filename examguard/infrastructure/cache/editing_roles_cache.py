"""Editing roles cache.

The ids of roles built on the editing archetypes (editingteacher, manager)
change only when a role is created or deleted, yet they are read on every
guarded page view. They are cached here and purged by the role
created/deleted hook. A TTL bounds staleness when the hook is missed.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

import structlog

from examguard.application.ports.time_authority import TimeAuthorityProtocol

logger = structlog.get_logger(__name__)

DEFAULT_TTL_SECONDS = 3600


@dataclass
class CacheEntry:
    """Cache entry with TTL.

    Attributes:
        role_ids: Cached editing role ids.
        cached_at: When the ids were cached.
        ttl_seconds: Lifetime of the entry.
    """

    role_ids: list[int]
    cached_at: datetime
    ttl_seconds: int = DEFAULT_TTL_SECONDS

    def is_expired(self, now: datetime) -> bool:
        return now >= self.cached_at + timedelta(seconds=self.ttl_seconds)


class EditingRolesCache:
    """Single-entry cache of editing role ids."""

    def __init__(
        self,
        time_authority: TimeAuthorityProtocol,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
    ) -> None:
        self._time = time_authority
        self._ttl_seconds = ttl_seconds
        self._entry: CacheEntry | None = None
        self._log = logger.bind(component="editing_roles_cache")

    def get(self) -> list[int] | None:
        """Return cached role ids, None if not cached or expired."""
        if self._entry is None:
            self._log.debug("cache_miss")
            return None

        if self._entry.is_expired(self._time.now()):
            self._log.debug("cache_expired")
            self._entry = None
            return None

        self._log.debug("cache_hit", role_count=len(self._entry.role_ids))
        return list(self._entry.role_ids)

    def set(self, role_ids: list[int]) -> None:
        self._entry = CacheEntry(
            role_ids=list(role_ids),
            cached_at=self._time.now(),
            ttl_seconds=self._ttl_seconds,
        )
        self._log.debug("cache_set", role_count=len(role_ids))

    def purge(self) -> None:
        self._entry = None
        self._log.info("cache_purged")
