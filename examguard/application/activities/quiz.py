"""Timed quiz variant of the exam activity protocol."""

from __future__ import annotations

from datetime import datetime, timedelta

from examguard.application.ports.extension_ledger import ExtensionLedgerProtocol
from examguard.application.ports.override_store import OverrideStoreProtocol
from examguard.application.ports.time_authority import TimeAuthorityProtocol
from examguard.config.examguard_config import ExamGuardConfig
from examguard.domain.models.activity import ActivityInstance, ActivityWindow
from examguard.domain.models.effective_settings import (
    EffectiveSettings,
    resolve_effective_settings,
)
from examguard.domain.models.override import Override, OverrideFields, OverrideScope
from examguard.domain.services import time_window_policy

QUIZ_MODNAME = "quiz"


class QuizActivityAdapter:
    """Exam Guard view of one quiz.

    Timings come from the quiz's open, close and time limit settings.
    Extension-aware answers read the latest bulk extension from the ledger.
    """

    participate_capability = "mod/quiz:attempt"
    manage_capability = "mod/quiz:manageoverrides"

    def __init__(
        self,
        instance: ActivityInstance,
        store: OverrideStoreProtocol,
        ledger: ExtensionLedgerProtocol,
        time_authority: TimeAuthorityProtocol,
        config: ExamGuardConfig,
    ) -> None:
        self._instance = instance
        self._store = store
        self._ledger = ledger
        self._time = time_authority
        self._config = config

    def __repr__(self) -> str:
        return (
            f"QuizActivityAdapter(activity_id={self.activity_id}, "
            f"course_id={self.course_id})"
        )

    @property
    def instance(self) -> ActivityInstance:
        return self._instance

    @property
    def activity_id(self) -> int:
        return self._instance.activity_id

    @property
    def course_id(self) -> int:
        return self._instance.course_id

    @property
    def context_id(self) -> int:
        return self._instance.context_id

    @property
    def modname(self) -> str:
        return QUIZ_MODNAME

    def base_window(self) -> ActivityWindow:
        return ActivityWindow.from_instance(
            self._instance,
            exam_buffer=self._config.exam_buffer,
            exam_threshold=self._config.exam_threshold,
        )

    def effective_settings(
        self,
        personal: Override | None,
        group_overrides: list[Override],
    ) -> EffectiveSettings:
        return resolve_effective_settings(self.base_window(), personal, group_overrides)

    async def create_override(
        self, scope: OverrideScope, fields: OverrideFields
    ) -> int:
        return await self._store.save_override(self.activity_id, scope, fields)

    def is_exam_activity(self) -> bool:
        return time_window_policy.is_exam_activity(self.base_window())

    async def is_active_exam_activity(self) -> bool:
        """Check open - buffer < now < close + extension + buffer."""
        return time_window_policy.is_active(
            self.base_window(),
            await self._extension_delta(),
            self._time.now(),
        )

    def exam_start_time(self) -> datetime | None:
        return self._instance.time_open

    async def exam_end_time(self) -> datetime:
        return time_window_policy.exam_end_time(
            self.base_window(), await self._extension_delta()
        )

    async def current_extension(self) -> int:
        return await self._ledger.latest_extension(self.activity_id)

    async def _extension_delta(self) -> timedelta:
        return timedelta(minutes=await self.current_extension())
