"""Unit tests for QuizActivityAdapter.

The reference quiz opens at T and closes three hours later with a three
hour time limit. Exam threshold 300 minutes, buffer 10 minutes.
"""

from __future__ import annotations

from datetime import timedelta

import pytest

from examguard.application.activities.quiz import QuizActivityAdapter
from examguard.bootstrap.container import InMemoryContainer
from examguard.domain.models.override import Override, OverrideFields, OverrideScope
from tests.helpers import QUIZ_ACTIVITY_ID, TEACHER_ID, FakeTimeAuthority, T, make_quiz


def adapter_for(container: InMemoryContainer, **quiz_fields: object) -> QuizActivityAdapter:
    return QuizActivityAdapter(
        make_quiz(**quiz_fields),  # type: ignore[arg-type]
        container.store,
        container.ledger,
        container.time_authority,
        container.config,
    )


class TestIdentity:
    """Tests for the identity properties."""

    def test_properties_come_from_instance(self, quiz_adapter: QuizActivityAdapter) -> None:
        assert quiz_adapter.activity_id == QUIZ_ACTIVITY_ID
        assert quiz_adapter.course_id == 5
        assert quiz_adapter.context_id == 500
        assert quiz_adapter.modname == "quiz"

    def test_capabilities(self, quiz_adapter: QuizActivityAdapter) -> None:
        assert quiz_adapter.participate_capability == "mod/quiz:attempt"
        assert quiz_adapter.manage_capability == "mod/quiz:manageoverrides"

    def test_base_window(self, quiz_adapter: QuizActivityAdapter) -> None:
        window = quiz_adapter.base_window()
        assert window.open == T
        assert window.close == T + timedelta(hours=3)
        assert window.duration == timedelta(hours=3)
        assert window.exam_buffer == timedelta(minutes=10)
        assert window.exam_threshold == timedelta(minutes=300)


class TestExamState:
    """Tests for the exam-like and active checks."""

    @pytest.mark.asyncio
    async def test_reference_quiz_at_open(self, quiz_adapter: QuizActivityAdapter) -> None:
        """Three hour quiz, now = T: exam-like, active, ends at T+3h10m."""
        assert quiz_adapter.is_exam_activity() is True
        assert await quiz_adapter.is_active_exam_activity() is True
        assert await quiz_adapter.exam_end_time() == T + timedelta(hours=3, minutes=10)
        assert quiz_adapter.exam_start_time() == T

    @pytest.mark.asyncio
    async def test_quiz_without_open_is_not_exam_like(
        self, container: InMemoryContainer
    ) -> None:
        adapter = adapter_for(container, time_open=None)
        assert adapter.is_exam_activity() is False
        assert await adapter.is_active_exam_activity() is False

    @pytest.mark.asyncio
    async def test_long_quiz_is_not_exam_like(self, container: InMemoryContainer) -> None:
        adapter = adapter_for(container, time_close=T + timedelta(hours=6))
        assert adapter.is_exam_activity() is False

    @pytest.mark.asyncio
    async def test_inactive_after_end_time(
        self, quiz_adapter: QuizActivityAdapter, fake_time: FakeTimeAuthority
    ) -> None:
        fake_time.advance(delta=timedelta(hours=3, minutes=10))
        assert await quiz_adapter.is_active_exam_activity() is False

    @pytest.mark.asyncio
    async def test_latest_extension_keeps_quiz_active(
        self,
        quiz_adapter: QuizActivityAdapter,
        container: InMemoryContainer,
        fake_time: FakeTimeAuthority,
    ) -> None:
        await container.ledger.record_extension(
            QUIZ_ACTIVITY_ID, 30, applied_by=TEACHER_ID, applied_at=T
        )
        fake_time.advance(delta=timedelta(hours=3, minutes=20))

        assert await quiz_adapter.current_extension() == 30
        assert await quiz_adapter.is_active_exam_activity() is True
        assert await quiz_adapter.exam_end_time() == T + timedelta(hours=3, minutes=40)


class TestOverrides:
    """Tests for effective settings and override creation."""

    def test_effective_settings_prefers_personal(
        self, quiz_adapter: QuizActivityAdapter
    ) -> None:
        personal = Override(
            1, QUIZ_ACTIVITY_ID, OverrideScope.user(7), OverrideFields(close=T + timedelta(hours=1))
        )
        group = Override(
            2, QUIZ_ACTIVITY_ID, OverrideScope.group(3), OverrideFields(close=T + timedelta(hours=4))
        )

        settings = quiz_adapter.effective_settings(personal, [group])
        assert settings.close == T + timedelta(hours=1)
        assert settings.duration == timedelta(hours=3)

    @pytest.mark.asyncio
    async def test_create_override_saves_through_store(
        self, quiz_adapter: QuizActivityAdapter, container: InMemoryContainer
    ) -> None:
        override_id = await quiz_adapter.create_override(
            OverrideScope.group(3), OverrideFields(close=T)
        )

        saved = container.store.get_override_by_id(override_id)
        assert saved is not None
        assert saved.activity_id == QUIZ_ACTIVITY_ID
        assert saved.scope == OverrideScope.group(3)
