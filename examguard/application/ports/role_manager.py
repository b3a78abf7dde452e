"""Role manager port: role lookup and course role assignments on the host."""

from __future__ import annotations

from typing import Protocol


class RoleManagerProtocol(Protocol):
    """Protocol for the host role primitives the course guard drives."""

    async def find_role_id(self, shortname: str) -> int | None:
        """Return the id of a role by shortname, None when it does not exist."""
        ...

    async def role_ids_by_archetype(self, archetypes: list[str]) -> list[int]:
        """Return ids of every role built on one of the archetypes."""
        ...

    async def course_users(self, course_id: int) -> list[int]:
        """Return ids of users actively enrolled in a course."""
        ...

    async def user_role_ids(self, course_id: int, user_id: int) -> list[int]:
        """Return ids of roles a user holds in the course context."""
        ...

    async def assign_role(self, role_id: int, user_id: int, course_id: int) -> None:
        """Assign a role in the course context. Idempotent."""
        ...

    async def unassign_role(self, role_id: int, user_id: int, course_id: int) -> None:
        """Remove a role assignment from the course context. Idempotent."""
        ...
