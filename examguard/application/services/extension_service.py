"""Extension service - host-facing entry points for bulk extensions.

Checks run in a fixed order before anything is written:

1. The request validates (whole minutes, 0 to 999).
2. Bulk extension is enabled.
3. The requester may manage overrides of the activity.
4. The activity is an active exam activity.

A failed check comes back as ExtensionOutcome(success=False) carrying the
error. Errors raised while reconciling (inconsistent state, store
failures) propagate after the transaction is rolled back.
"""

from __future__ import annotations

from pydantic import ValidationError

from examguard.application.activities.factory import ExamActivityFactory
from examguard.application.dtos.extension import ExtensionOutcome, ExtensionRequest
from examguard.application.ports.authorization import AuthorizationProtocol
from examguard.application.ports.exam_activity import ExamActivityProtocol
from examguard.application.ports.extension_ledger import ExtensionLedgerProtocol
from examguard.application.services.base import LoggingMixin
from examguard.application.services.extension_reconciler import ExtensionReconciler
from examguard.application.services.guard_manager import GuardManager
from examguard.config.examguard_config import ExamGuardConfig
from examguard.domain.errors.extension import (
    AuthorizationError,
    BulkExtensionDisabledError,
    ExtensionError,
    InvalidExtensionError,
    NotActiveExamActivityError,
)
from examguard.domain.models.extension import ExtensionRecord


class ExtensionService(LoggingMixin):
    """Facade over the reconciler for the host's extension page."""

    def __init__(
        self,
        factory: ExamActivityFactory,
        reconciler: ExtensionReconciler,
        ledger: ExtensionLedgerProtocol,
        guard_manager: GuardManager,
        authorization: AuthorizationProtocol,
        config: ExamGuardConfig,
    ) -> None:
        self._factory = factory
        self._reconciler = reconciler
        self._ledger = ledger
        self._guard_manager = guard_manager
        self._authorization = authorization
        self._config = config
        self._init_logger(component="extension")

    async def apply_extension(
        self, activity_id: int, minutes: object, user_id: int
    ) -> ExtensionOutcome:
        """Apply a bulk extension on behalf of a teacher.

        Args:
            activity_id: Course-module id of the activity.
            minutes: Extension as submitted by the host form.
            user_id: The requesting user.

        Returns:
            ExtensionOutcome with the reconciliation report on success, or
            the refusal.

        Raises:
            ActivityNotFoundError: If the activity does not exist.
            UnsupportedActivityError: If its type has no adapter.
            InconsistentStateError: If stored state blocks reconciliation.
            StoreError: If persistence fails.
        """
        log = self._log_operation(
            "apply_extension", activity_id=activity_id, user_id=user_id
        )

        try:
            request = ExtensionRequest(
                activity_id=activity_id, minutes=minutes, requested_by=user_id
            )
        except ValidationError:
            error = InvalidExtensionError(minutes)
            log.info("extension_refused", reason=type(error).__name__)
            return ExtensionOutcome.refused(activity_id, None, error)

        try:
            activity = await self._check_preconditions(request)
        except ExtensionError as e:
            log.info("extension_refused", reason=type(e).__name__, error=str(e))
            return ExtensionOutcome.refused(activity_id, request.minutes, e)

        report = await self._reconciler.apply_extension(
            activity, request.minutes, request.requested_by
        )
        return ExtensionOutcome.applied(report)

    async def current_extension(self, activity_id: int) -> int:
        activity = await self._factory.get_exam_activity(activity_id)
        return await activity.current_extension()

    async def extension_history(self, activity_id: int) -> list[ExtensionRecord]:
        """Return every extension request of an activity, oldest first."""
        return await self._ledger.list_history(activity_id)

    async def is_active_exam_activity(self, activity_id: int) -> bool:
        activity = await self._factory.get_exam_activity(activity_id)
        return await activity.is_active_exam_activity()

    async def active_exam_activities(
        self, course_id: int
    ) -> list[ExamActivityProtocol]:
        return await self._guard_manager.active_exam_activities(course_id)

    async def can_extend_time(self, activity_id: int, user_id: int) -> bool:
        """Check whether the extension button should be offered to a user."""
        if not self._config.bulk_extension_enabled:
            return False
        activity = await self._factory.get_exam_activity(activity_id)
        try:
            await self._ensure_allowed(activity, user_id)
        except ExtensionError:
            return False
        return True

    async def _check_preconditions(
        self, request: ExtensionRequest
    ) -> ExamActivityProtocol:
        if not self._config.bulk_extension_enabled:
            raise BulkExtensionDisabledError()
        activity = await self._factory.get_exam_activity(request.activity_id)
        await self._ensure_allowed(activity, request.requested_by)
        return activity

    async def _ensure_allowed(
        self, activity: ExamActivityProtocol, user_id: int
    ) -> None:
        if not await self._authorization.can_manage_overrides(
            activity.context_id, user_id, activity.manage_capability
        ):
            raise AuthorizationError(user_id, activity.context_id)
        if not await activity.is_active_exam_activity():
            raise NotActiveExamActivityError(activity.activity_id)
