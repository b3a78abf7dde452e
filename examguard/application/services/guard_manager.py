"""Course guard manager.

Blocks course editing while an exam activity is running by assigning the
restrictive guard role to every user holding an editing role in the
course, and lifts the block once no exam activity is active any more.

A per-course marker records that the role is applied, so the check is a
cheap no-op when nothing changed. It runs both on page view and after an
activity is saved, and is safe to call redundantly.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from examguard.application.activities.factory import ExamActivityFactory
from examguard.application.dtos.guard import GuardStatus
from examguard.application.ports.exam_activity import ExamActivityProtocol
from examguard.application.ports.guard_marker_repository import (
    GuardMarkerRepositoryProtocol,
)
from examguard.application.ports.role_manager import RoleManagerProtocol
from examguard.application.ports.time_authority import TimeAuthorityProtocol
from examguard.application.ports.transaction import TransactionManagerProtocol
from examguard.application.services.base import LoggingMixin
from examguard.domain.errors.guard import GuardRoleNotFoundError
from examguard.infrastructure.cache.editing_roles_cache import EditingRolesCache

GUARD_ROLE_SHORTNAME = "localexamguard"
EDITING_ARCHETYPES = ("editingteacher", "manager")


class GuardManager(LoggingMixin):
    """Course-level exam detection and guard role reconciliation."""

    def __init__(
        self,
        factory: ExamActivityFactory,
        roles: RoleManagerProtocol,
        markers: GuardMarkerRepositoryProtocol,
        roles_cache: EditingRolesCache,
        transactions: TransactionManagerProtocol,
        time_authority: TimeAuthorityProtocol,
    ) -> None:
        self._factory = factory
        self._roles = roles
        self._markers = markers
        self._roles_cache = roles_cache
        self._transactions = transactions
        self._time = time_authority
        self._init_logger(component="guard")

    async def active_exam_activities(
        self, course_id: int
    ) -> list[ExamActivityProtocol]:
        """Return the active exam activities of a course, latest-ending first."""
        return [activity for _, activity in await self._active_by_end_time(course_id)]

    async def course_editing_should_be_blocked(self, course_id: int) -> bool:
        return bool(await self.active_exam_activities(course_id))

    async def editing_role_ids(self) -> list[int]:
        """Return ids of roles built on an editing archetype.

        Read through the editing roles cache. An empty result is not
        cached, so a host without editing roles is asked again next time.
        """
        cached = self._roles_cache.get()
        if cached is not None:
            return cached
        role_ids = await self._roles.role_ids_by_archetype(list(EDITING_ARCHETYPES))
        if role_ids:
            self._roles_cache.set(role_ids)
        return role_ids

    async def refresh_editing_roles(self) -> list[int]:
        """Drop the cached editing roles and load them again."""
        self._roles_cache.purge()
        return await self.editing_role_ids()

    async def user_has_editing_role(self, course_id: int, user_id: int) -> bool:
        editing_ids = await self.editing_role_ids()
        if not editing_ids:
            return False
        user_roles = await self._roles.user_role_ids(course_id, user_id)
        return any(role_id in editing_ids for role_id in user_roles)

    async def reconcile_course_guard_role(self, course_id: int) -> GuardStatus:
        """Apply or lift the guard role so it matches the course's exam state.

        Returns:
            GuardStatus after the call.

        Raises:
            GuardRoleNotFoundError: If the state changes and the guard role
                does not exist on the host. Nothing is written.
            StoreError: If a role or marker write fails. Nothing is written.
        """
        log = self._log_operation("reconcile_course_guard_role", course_id=course_id)

        async with self._transactions.transaction():
            marker = await self._markers.get_marker(course_id)
            active = await self._active_by_end_time(course_id)
            should_block = bool(active)
            status = GuardStatus(
                course_id=course_id,
                editing_blocked=should_block,
                active_activities=tuple(activity for _, activity in active),
                editing_available_after=active[0][0] if active else None,
            )

            if (marker is not None) == should_block:
                log.debug("guard_state_unchanged", editing_blocked=should_block)
                return status

            role_id = await self._roles.find_role_id(GUARD_ROLE_SHORTNAME)
            if role_id is None:
                log.error("guard_role_missing", shortname=GUARD_ROLE_SHORTNAME)
                raise GuardRoleNotFoundError(GUARD_ROLE_SHORTNAME)

            affected = 0
            for user_id in await self._roles.course_users(course_id):
                if not await self.user_has_editing_role(course_id, user_id):
                    continue
                if should_block:
                    await self._roles.assign_role(role_id, user_id, course_id)
                else:
                    await self._roles.unassign_role(role_id, user_id, course_id)
                affected += 1

            if should_block:
                await self._markers.create_marker(course_id, self._time.now())
            else:
                await self._markers.delete_marker(course_id)

        log.info(
            "guard_role_assigned" if should_block else "guard_role_revoked",
            users=affected,
            active_activities=[a.activity_id for a in status.active_activities],
        )
        return replace(status, changed=True)

    async def _active_by_end_time(
        self, course_id: int
    ) -> list[tuple[datetime, ExamActivityProtocol]]:
        active: list[tuple[datetime, ExamActivityProtocol]] = []
        for activity in await self._factory.course_activities(course_id):
            if await activity.is_active_exam_activity():
                active.append((await activity.exam_end_time(), activity))
        active.sort(key=lambda pair: pair[0], reverse=True)
        return active
