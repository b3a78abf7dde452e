"""Roster stub implementation.

Enrolments are seeded by tests. Group membership is read from the
OverrideStoreStub so that groups created during reconciliation are visible.
"""

from __future__ import annotations

from examguard.application.ports.roster import RosterProtocol
from examguard.infrastructure.stubs.override_store_stub import OverrideStoreStub

DEFAULT_PARTICIPATE_CAPABILITY = "mod/quiz:attempt"


class RosterStub(RosterProtocol):
    """In-memory roster (testing only).

    Only students are registered through enrol_student; teachers and other
    non-gradeable roles never appear in gradeable_enrolled_users.
    """

    def __init__(self, group_source: OverrideStoreStub) -> None:
        self._group_source = group_source
        self._students: dict[tuple[int, str], list[int]] = {}

    async def gradeable_enrolled_users(
        self, context_id: int, capability: str
    ) -> list[int]:
        return list(self._students.get((context_id, capability), []))

    async def user_groups(self, course_id: int, user_id: int) -> list[int]:
        return self._group_source.groups_of_user(course_id, user_id)

    def enrol_student(
        self,
        context_id: int,
        user_id: int,
        capability: str = DEFAULT_PARTICIPATE_CAPABILITY,
    ) -> None:
        students = self._students.setdefault((context_id, capability), [])
        if user_id not in students:
            students.append(user_id)

    def unenrol_student(
        self,
        context_id: int,
        user_id: int,
        capability: str = DEFAULT_PARTICIPATE_CAPABILITY,
    ) -> None:
        students = self._students.get((context_id, capability), [])
        if user_id in students:
            students.remove(user_id)
