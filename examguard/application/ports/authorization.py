"""Authorization port: capability checks on the host."""

from __future__ import annotations

from typing import Protocol


class AuthorizationProtocol(Protocol):
    """Protocol for host capability checks."""

    async def can_manage_overrides(
        self, context_id: int, user_id: int, capability: str
    ) -> bool:
        """Check whether a user may manage overrides in an activity context.

        Args:
            context_id: The activity context.
            user_id: The requesting user.
            capability: The activity type's manage-overrides capability.
        """
        ...

    async def is_site_admin(self, user_id: int) -> bool:
        """Check whether a user holds site configuration rights."""
        ...
