"""Role manager stub implementation."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

from examguard.application.ports.role_manager import RoleManagerProtocol
from examguard.domain.errors.store import StoreError


@dataclass(frozen=True)
class RoleDefinition:
    """A host role.

    Attributes:
        role_id: Role id.
        shortname: Unique role shortname.
        archetype: The legacy archetype the role is built on, "" for none.
    """

    role_id: int
    shortname: str
    archetype: str = ""


class RoleManagerStub(RoleManagerProtocol):
    """In-memory roles, enrolments and course role assignments (testing only).

    assign_count and unassign_count record calls that changed state.
    """

    def __init__(self) -> None:
        self._roles: dict[int, RoleDefinition] = {}
        self._enrolled: dict[int, list[int]] = {}
        self._assignments: dict[tuple[int, int], set[int]] = {}
        self._next_role_id = 1
        self.assign_count = 0
        self.unassign_count = 0
        self.fail_on: set[str] = set()

    def _check(self, operation: str) -> None:
        if operation in self.fail_on:
            raise StoreError(operation)

    async def find_role_id(self, shortname: str) -> int | None:
        for role in self._roles.values():
            if role.shortname == shortname:
                return role.role_id
        return None

    async def role_ids_by_archetype(self, archetypes: list[str]) -> list[int]:
        return [
            role_id
            for role_id, role in sorted(self._roles.items())
            if role.archetype in archetypes
        ]

    async def course_users(self, course_id: int) -> list[int]:
        return list(self._enrolled.get(course_id, []))

    async def user_role_ids(self, course_id: int, user_id: int) -> list[int]:
        return sorted(self._assignments.get((course_id, user_id), set()))

    async def assign_role(self, role_id: int, user_id: int, course_id: int) -> None:
        self._check("assign_role")
        roles = self._assignments.setdefault((course_id, user_id), set())
        if role_id not in roles:
            roles.add(role_id)
            self.assign_count += 1

    async def unassign_role(self, role_id: int, user_id: int, course_id: int) -> None:
        self._check("unassign_role")
        roles = self._assignments.get((course_id, user_id), set())
        if role_id in roles:
            roles.discard(role_id)
            self.unassign_count += 1

    # =========================================================================
    # Transaction support
    # =========================================================================

    def snapshot(self) -> dict[str, Any]:
        return copy.deepcopy({"assignments": self._assignments})

    def restore(self, state: dict[str, Any]) -> None:
        self._assignments = state["assignments"]

    # =========================================================================
    # Test helper methods (not part of protocol)
    # =========================================================================

    def add_role(self, shortname: str, archetype: str = "") -> int:
        role_id = self._next_role_id
        self._next_role_id += 1
        self._roles[role_id] = RoleDefinition(role_id, shortname, archetype)
        return role_id

    def delete_role(self, role_id: int) -> None:
        self._roles.pop(role_id, None)
        for roles in self._assignments.values():
            roles.discard(role_id)

    def enrol(self, course_id: int, user_id: int, role_id: int | None = None) -> None:
        users = self._enrolled.setdefault(course_id, [])
        if user_id not in users:
            users.append(user_id)
        if role_id is not None:
            self._assignments.setdefault((course_id, user_id), set()).add(role_id)

    def has_role(self, course_id: int, user_id: int, role_id: int) -> bool:
        return role_id in self._assignments.get((course_id, user_id), set())
