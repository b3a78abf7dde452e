"""Production adapters that need no host platform."""

from examguard.infrastructure.adapters.system_time_authority import (
    SystemTimeAuthority,
)

__all__: list[str] = ["SystemTimeAuthority"]
