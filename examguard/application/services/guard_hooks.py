"""Host event entry points for the course guard.

The host calls these from its page rendering, activity form and role
event handlers. Each one honours the guard switch in ExamGuardConfig.
"""

from __future__ import annotations

from examguard.application.activities.factory import ExamActivityFactory
from examguard.application.dtos.guard import GuardStatus
from examguard.application.ports.authorization import AuthorizationProtocol
from examguard.application.services.base import LoggingMixin
from examguard.application.services.guard_manager import GuardManager
from examguard.config.examguard_config import ExamGuardConfig

COURSE_EDITING_BANNED_MESSAGE = "Editing is not allowed during exam."


class GuardHooks(LoggingMixin):
    """Reacts to host events by reconciling the course guard."""

    def __init__(
        self,
        manager: GuardManager,
        factory: ExamActivityFactory,
        authorization: AuthorizationProtocol,
        config: ExamGuardConfig,
    ) -> None:
        self._manager = manager
        self._factory = factory
        self._authorization = authorization
        self._config = config
        self._init_logger(component="guard")

    async def on_course_page_view(
        self, course_id: int, user_id: int
    ) -> GuardStatus | None:
        """Reconcile the guard when an editor opens a course or activity page.

        Students and other non-editors never trigger a reconciliation.

        Returns:
            The GuardStatus, whose banner_message() the host displays, or
            None when the guard is off or the viewer is not an editor.
        """
        if not self._config.guard_enabled:
            return None
        if not await self._manager.user_has_editing_role(course_id, user_id):
            return None
        return await self._manager.reconcile_course_guard_role(course_id)

    async def on_activity_saved(
        self, course_id: int, modname: str
    ) -> GuardStatus | None:
        if not self._config.guard_enabled or not self._factory.is_supported(modname):
            return None
        return await self._manager.reconcile_course_guard_role(course_id)

    async def validate_activity_edit(self, course_id: int, user_id: int) -> str | None:
        """Return an error message when an activity edit must be refused.

        Site administrators may always edit.
        """
        if not self._config.guard_enabled:
            return None
        if await self._authorization.is_site_admin(user_id):
            return None
        if await self._manager.course_editing_should_be_blocked(course_id):
            self._log_operation(
                "validate_activity_edit", course_id=course_id, user_id=user_id
            ).info("activity_edit_refused")
            return COURSE_EDITING_BANNED_MESSAGE
        return None

    async def on_role_created_or_deleted(self) -> None:
        role_ids = await self._manager.refresh_editing_roles()
        self._log_operation("on_role_created_or_deleted").info(
            "editing_roles_refreshed", role_count=len(role_ids)
        )
