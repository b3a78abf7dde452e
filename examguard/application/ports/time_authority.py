"""Time authority port - the single source of "now".

Services never call datetime.now() directly. Whether an activity is active,
which students an extension applies to and when history rows are stamped
all depend on the injected time authority, so tests can freeze the clock.

For production:
    Use SystemTimeAuthority from examguard/infrastructure/adapters/

For testing:
    Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time, timezone-aware (UTC)."""
        ...

    @abstractmethod
    def utcnow(self) -> datetime:
        """Return the current UTC time, timezone-aware."""
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Return a monotonic clock value in seconds, for measuring elapsed time."""
        ...
