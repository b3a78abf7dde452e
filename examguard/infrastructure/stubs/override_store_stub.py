"""Override store stub implementation.

In-memory implementation of OverrideStoreProtocol for tests and local
wiring. It also owns group membership, which RosterStub reads so that
groups created by the reconciler show up in a student's group list just
as they do on the host.
"""

from __future__ import annotations

import copy
from typing import Any

from examguard.application.ports.override_store import OverrideStoreProtocol
from examguard.domain.errors.store import StoreError
from examguard.domain.models.group import Group
from examguard.domain.models.override import Override, OverrideFields, OverrideScope


class OverrideStoreStub(OverrideStoreProtocol):
    """In-memory stub for overrides and groups (testing only).

    Overrides are keyed by id and looked up by (activity, scope), which
    keeps at most one override per scope. Every mutating call increments
    write_count so tests can assert that a re-application wrote nothing.

    Failure injection: put an operation name in fail_on to make that
    operation raise StoreError.
    """

    def __init__(self) -> None:
        self._overrides: dict[int, Override] = {}
        self._groups: dict[int, Group] = {}
        self._members: dict[int, list[int]] = {}
        self._next_override_id = 1
        self._next_group_id = 1
        self.write_count = 0
        self.fail_on: set[str] = set()

    def _check(self, operation: str) -> None:
        if operation in self.fail_on:
            raise StoreError(operation)

    def _write(self, operation: str) -> None:
        self._check(operation)
        self.write_count += 1

    # =========================================================================
    # OverrideStoreProtocol Implementation
    # =========================================================================

    async def list_overrides(self, activity_id: int) -> list[Override]:
        self._check("list_overrides")
        return [
            o
            for _, o in sorted(self._overrides.items())
            if o.activity_id == activity_id
        ]

    async def get_override(
        self, activity_id: int, scope: OverrideScope
    ) -> Override | None:
        self._check("get_override")
        return self._find(activity_id, scope)

    async def save_override(
        self,
        activity_id: int,
        scope: OverrideScope,
        fields: OverrideFields,
    ) -> int:
        self._write("save_override")
        existing = self._find(activity_id, scope)
        if existing is not None:
            self._overrides[existing.override_id] = existing.with_fields(fields)
            return existing.override_id

        override_id = self._next_override_id
        self._next_override_id += 1
        self._overrides[override_id] = Override(
            override_id=override_id,
            activity_id=activity_id,
            scope=scope,
            fields=fields,
        )
        return override_id

    async def delete_override(self, override_id: int) -> None:
        self._write("delete_override")
        self._overrides.pop(override_id, None)

    async def create_group(self, course_id: int, name: str) -> int:
        self._write("create_group")
        return self._insert_group(course_id, name)

    async def delete_group(self, group_id: int) -> None:
        self._write("delete_group")
        self._groups.pop(group_id, None)
        self._members.pop(group_id, None)

    async def add_member(self, group_id: int, user_id: int) -> None:
        self._write("add_member")
        members = self._members.setdefault(group_id, [])
        if user_id not in members:
            members.append(user_id)

    async def list_group_members(self, group_id: int) -> list[int]:
        self._check("list_group_members")
        return list(self._members.get(group_id, []))

    async def find_groups_by_name_prefix(
        self, course_id: int, prefix: str
    ) -> list[Group]:
        self._check("find_groups_by_name_prefix")
        return [
            g
            for _, g in sorted(self._groups.items())
            if g.course_id == course_id and g.name.startswith(prefix)
        ]

    # =========================================================================
    # Transaction support
    # =========================================================================

    def snapshot(self) -> dict[str, Any]:
        return copy.deepcopy(
            {
                "overrides": self._overrides,
                "groups": self._groups,
                "members": self._members,
                "next_override_id": self._next_override_id,
                "next_group_id": self._next_group_id,
            }
        )

    def restore(self, state: dict[str, Any]) -> None:
        self._overrides = state["overrides"]
        self._groups = state["groups"]
        self._members = state["members"]
        self._next_override_id = state["next_override_id"]
        self._next_group_id = state["next_group_id"]

    # =========================================================================
    # Test helper methods (not part of protocol)
    # =========================================================================

    def add_group(
        self, course_id: int, name: str, members: list[int] | None = None
    ) -> int:
        """Create a group without counting a write (test setup)."""
        group_id = self._insert_group(course_id, name)
        self._members[group_id] = list(members or [])
        return group_id

    def add_override(
        self, activity_id: int, scope: OverrideScope, fields: OverrideFields
    ) -> int:
        """Create an override without counting a write (test setup)."""
        override_id = self._next_override_id
        self._next_override_id += 1
        self._overrides[override_id] = Override(override_id, activity_id, scope, fields)
        return override_id

    def get_override_by_id(self, override_id: int) -> Override | None:
        return self._overrides.get(override_id)

    def get_group(self, group_id: int) -> Group | None:
        return self._groups.get(group_id)

    def groups_in_course(self, course_id: int) -> list[Group]:
        return [g for _, g in sorted(self._groups.items()) if g.course_id == course_id]

    def groups_of_user(self, course_id: int, user_id: int) -> list[int]:
        return [
            group_id
            for group_id, group in sorted(self._groups.items())
            if group.course_id == course_id
            and user_id in self._members.get(group_id, [])
        ]

    def _find(self, activity_id: int, scope: OverrideScope) -> Override | None:
        for override in self._overrides.values():
            if override.activity_id == activity_id and override.scope == scope:
                return override
        return None

    def _insert_group(self, course_id: int, name: str) -> int:
        group_id = self._next_group_id
        self._next_group_id += 1
        self._groups[group_id] = Group(group_id, course_id, name)
        return group_id
