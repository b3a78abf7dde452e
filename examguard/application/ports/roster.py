"""Roster port: enrolment and group membership on the host."""

from __future__ import annotations

from typing import Protocol


class RosterProtocol(Protocol):
    """Protocol for reading who takes an activity and which groups they are in."""

    async def gradeable_enrolled_users(
        self, context_id: int, capability: str
    ) -> list[int]:
        """Return enrolled users holding capability in a gradeable (student) role.

        Args:
            context_id: The activity context.
            capability: The participate capability, e.g. "mod/quiz:attempt".

        Returns:
            User ids, in a stable order.
        """
        ...

    async def user_groups(self, course_id: int, user_id: int) -> list[int]:
        """Return ids of the course groups a user belongs to."""
        ...
