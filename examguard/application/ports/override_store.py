"""Override store port.

Per-user and per-group timing overrides of activities, plus the group
primitives the reconciler needs to create and retire synthetic groups.
Backed by the host platform's override and group tables.
"""

from __future__ import annotations

from typing import Protocol

from examguard.domain.models.group import Group
from examguard.domain.models.override import Override, OverrideFields, OverrideScope


class OverrideStoreProtocol(Protocol):
    """Protocol for override and group persistence.

    Implementations must keep at most one override per (activity, scope):
    save_override on an existing scope updates that record in place.

    All operations raise StoreError when the underlying store fails.
    """

    async def list_overrides(self, activity_id: int) -> list[Override]:
        """Return every override of an activity, ordered by override id."""
        ...

    async def get_override(
        self, activity_id: int, scope: OverrideScope
    ) -> Override | None:
        """Return the override of one scope, None when there is none."""
        ...

    async def save_override(
        self,
        activity_id: int,
        scope: OverrideScope,
        fields: OverrideFields,
    ) -> int:
        """Create or update the override of a scope.

        Returns:
            The override id (existing id on update).
        """
        ...

    async def delete_override(self, override_id: int) -> None:
        """Delete an override. Unknown ids are ignored."""
        ...

    async def create_group(self, course_id: int, name: str) -> int:
        """Create a course group and return its id."""
        ...

    async def delete_group(self, group_id: int) -> None:
        """Delete a group and its memberships."""
        ...

    async def add_member(self, group_id: int, user_id: int) -> None:
        """Add a user to a group. Adding an existing member is a no-op."""
        ...

    async def list_group_members(self, group_id: int) -> list[int]:
        """Return member user ids of a group, in insertion order."""
        ...

    async def find_groups_by_name_prefix(
        self, course_id: int, prefix: str
    ) -> list[Group]:
        """Return the course groups whose name starts with prefix."""
        ...
