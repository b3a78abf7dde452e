"""Unit tests for ExtensionService."""

from __future__ import annotations

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from examguard.bootstrap.container import InMemoryContainer, build_in_memory_container
from examguard.config.examguard_config import ExamGuardConfig
from examguard.domain.errors import (
    ActivityNotFoundError,
    MultipleLegacyGroupsError,
    StoreError,
)
from tests.helpers import (
    COURSE_ID,
    QUIZ_ACTIVITY_ID,
    QUIZ_CONTEXT_ID,
    TEACHER_ID,
    FakeTimeAuthority,
    T,
    make_quiz,
)

OUTSIDER_ID = 99
ADMIN_ID = 1


@pytest.fixture(autouse=True)
def _students(container: InMemoryContainer, fake_time: FakeTimeAuthority) -> None:
    fake_time.advance(minutes=5)
    for user_id in (10, 11, 12):
        container.roster.enrol_student(QUIZ_CONTEXT_ID, user_id)


@pytest.fixture
def disabled_container(fake_time: FakeTimeAuthority) -> InMemoryContainer:
    built = build_in_memory_container(
        ExamGuardConfig(bulk_extension_enabled=False), fake_time
    )
    quiz = make_quiz()
    built.catalog.add(quiz)
    built.authorization.grant(quiz.context_id, TEACHER_ID, "mod/quiz:manageoverrides")
    return built


class TestApplyExtension:
    """Tests for the host-facing apply_extension."""

    @pytest.mark.asyncio
    async def test_successful_extension(self, container: InMemoryContainer) -> None:
        outcome = await container.extension_service.apply_extension(
            QUIZ_ACTIVITY_ID, 15, TEACHER_ID
        )

        assert outcome.success is True
        assert outcome.extension_minutes == 15
        assert outcome.error is None
        assert outcome.report is not None
        assert outcome.report.groups_created == 1
        assert await container.extension_service.current_extension(QUIZ_ACTIVITY_ID) == 15

    @pytest.mark.asyncio
    async def test_numeric_string_is_accepted(
        self, container: InMemoryContainer
    ) -> None:
        outcome = await container.extension_service.apply_extension(
            QUIZ_ACTIVITY_ID, "45", TEACHER_ID
        )

        assert outcome.success is True
        assert outcome.extension_minutes == 45

    @pytest.mark.asyncio
    @pytest.mark.parametrize("minutes", [-1, 1000, 1.5, "abc", None, True, " 5"])
    async def test_invalid_minutes_refused(
        self, container: InMemoryContainer, minutes: object
    ) -> None:
        outcome = await container.extension_service.apply_extension(
            QUIZ_ACTIVITY_ID, minutes, TEACHER_ID
        )

        assert outcome.success is False
        assert outcome.error_type == "InvalidExtensionError"
        assert outcome.extension_minutes is None
        assert await container.ledger.list_history(QUIZ_ACTIVITY_ID) == []

    @pytest.mark.asyncio
    async def test_disabled_feature_refused_first(
        self, disabled_container: InMemoryContainer
    ) -> None:
        outcome = await disabled_container.extension_service.apply_extension(
            QUIZ_ACTIVITY_ID, 15, OUTSIDER_ID
        )

        assert outcome.success is False
        assert outcome.error_type == "BulkExtensionDisabledError"
        assert outcome.error == "Bulk extension is not enabled."

    @pytest.mark.asyncio
    async def test_unauthorized_user_refused(
        self, container: InMemoryContainer
    ) -> None:
        outcome = await container.extension_service.apply_extension(
            QUIZ_ACTIVITY_ID, 15, OUTSIDER_ID
        )

        assert outcome.success is False
        assert outcome.error_type == "AuthorizationError"
        assert container.store.write_count == 0

    @pytest.mark.asyncio
    async def test_authorization_checked_before_activity_state(
        self, container: InMemoryContainer, fake_time: FakeTimeAuthority
    ) -> None:
        fake_time.set_time(T + timedelta(hours=4))

        outcome = await container.extension_service.apply_extension(
            QUIZ_ACTIVITY_ID, 15, OUTSIDER_ID
        )

        assert outcome.error_type == "AuthorizationError"

    @pytest.mark.asyncio
    async def test_site_admin_may_extend(self, container: InMemoryContainer) -> None:
        container.authorization.make_site_admin(ADMIN_ID)

        outcome = await container.extension_service.apply_extension(
            QUIZ_ACTIVITY_ID, 15, ADMIN_ID
        )

        assert outcome.success is True

    @pytest.mark.asyncio
    async def test_inactive_activity_refused(
        self, container: InMemoryContainer, fake_time: FakeTimeAuthority
    ) -> None:
        fake_time.set_time(T + timedelta(hours=4))

        outcome = await container.extension_service.apply_extension(
            QUIZ_ACTIVITY_ID, 15, TEACHER_ID
        )

        assert outcome.success is False
        assert outcome.error_type == "NotActiveExamActivityError"
        assert outcome.extension_minutes == 15

    @pytest.mark.asyncio
    async def test_unknown_activity_raises(self, container: InMemoryContainer) -> None:
        with pytest.raises(ActivityNotFoundError):
            await container.extension_service.apply_extension(404, 15, TEACHER_ID)

    @pytest.mark.asyncio
    async def test_inconsistent_state_propagates(
        self, container: InMemoryContainer
    ) -> None:
        container.store.add_group(COURSE_ID, "Exam_guard_activity_100_extension_15")
        container.store.add_group(COURSE_ID, "Exam_guard_activity_100_extension_20")

        with pytest.raises(MultipleLegacyGroupsError):
            await container.extension_service.apply_extension(
                QUIZ_ACTIVITY_ID, 15, TEACHER_ID
            )

    @pytest.mark.asyncio
    async def test_roster_failure_propagates(
        self, container: InMemoryContainer
    ) -> None:
        container.roster.gradeable_enrolled_users = AsyncMock(  # type: ignore[method-assign]
            side_effect=StoreError("gradeable_enrolled_users")
        )

        with pytest.raises(StoreError):
            await container.extension_service.apply_extension(
                QUIZ_ACTIVITY_ID, 15, TEACHER_ID
            )

        assert await container.ledger.list_history(QUIZ_ACTIVITY_ID) == []


class TestQueries:
    """Tests for the read-only entry points."""

    @pytest.mark.asyncio
    async def test_can_extend_time(
        self, container: InMemoryContainer, fake_time: FakeTimeAuthority
    ) -> None:
        service = container.extension_service

        assert await service.can_extend_time(QUIZ_ACTIVITY_ID, TEACHER_ID) is True
        assert await service.can_extend_time(QUIZ_ACTIVITY_ID, OUTSIDER_ID) is False

        fake_time.set_time(T + timedelta(hours=4))
        assert await service.can_extend_time(QUIZ_ACTIVITY_ID, TEACHER_ID) is False

    @pytest.mark.asyncio
    async def test_revoked_capability_hides_extension(
        self, container: InMemoryContainer
    ) -> None:
        container.authorization.revoke(
            QUIZ_CONTEXT_ID, TEACHER_ID, "mod/quiz:manageoverrides"
        )

        assert (
            await container.extension_service.can_extend_time(
                QUIZ_ACTIVITY_ID, TEACHER_ID
            )
            is False
        )

    @pytest.mark.asyncio
    async def test_can_extend_time_disabled(
        self, disabled_container: InMemoryContainer
    ) -> None:
        service = disabled_container.extension_service

        assert await service.can_extend_time(QUIZ_ACTIVITY_ID, TEACHER_ID) is False

    @pytest.mark.asyncio
    async def test_history_is_oldest_first(self, container: InMemoryContainer) -> None:
        service = container.extension_service
        for minutes in (15, 30, 0):
            await service.apply_extension(QUIZ_ACTIVITY_ID, minutes, TEACHER_ID)

        history = await service.extension_history(QUIZ_ACTIVITY_ID)

        assert [r.extension_minutes for r in history] == [15, 30, 0]
        assert all(r.applied_by == TEACHER_ID for r in history)
        assert await service.current_extension(QUIZ_ACTIVITY_ID) == 0

    @pytest.mark.asyncio
    async def test_activity_state_queries(
        self, container: InMemoryContainer, fake_time: FakeTimeAuthority
    ) -> None:
        service = container.extension_service

        assert await service.is_active_exam_activity(QUIZ_ACTIVITY_ID) is True
        active = await service.active_exam_activities(COURSE_ID)
        assert [a.activity_id for a in active] == [QUIZ_ACTIVITY_ID]

        fake_time.set_time(T + timedelta(hours=4))
        assert await service.is_active_exam_activity(QUIZ_ACTIVITY_ID) is False
        assert await service.active_exam_activities(COURSE_ID) == []
