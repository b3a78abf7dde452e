"""Unit tests for the extension and guard DTOs."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from examguard.application.dtos import (
    ExtensionOutcome,
    ExtensionRequest,
    GuardStatus,
    ReconciliationReport,
)
from examguard.domain.errors import NotActiveExamActivityError


class TestExtensionRequest:
    """Tests for ExtensionRequest validation."""

    @pytest.mark.parametrize("minutes", [0, 15, 999, "45"])
    def test_accepts_whole_minutes(self, minutes: object) -> None:
        request = ExtensionRequest(activity_id=100, minutes=minutes, requested_by=2)
        assert request.minutes == int(minutes)  # type: ignore[call-overload]

    @pytest.mark.parametrize(
        "minutes", [-1, 1000, 1.5, "abc", None, True, " 5", "+5", "5\n"]
    )
    def test_rejects_other_values(self, minutes: object) -> None:
        with pytest.raises(ValidationError):
            ExtensionRequest(activity_id=100, minutes=minutes, requested_by=2)


class TestExtensionOutcome:
    """Tests for the outcome constructors."""

    def test_refused_carries_error(self) -> None:
        outcome = ExtensionOutcome.refused(100, 15, NotActiveExamActivityError(100))
        assert outcome.success is False
        assert outcome.error_type == "NotActiveExamActivityError"
        assert outcome.report is None

    def test_applied_carries_report(self) -> None:
        report = ReconciliationReport(activity_id=100, extension_minutes=15)
        outcome = ExtensionOutcome.applied(report)
        assert outcome.success is True
        assert outcome.extension_minutes == 15
        assert outcome.error is None


class TestGuardStatus:
    """Tests for the banner message."""

    def test_banner_message_uses_twelve_hour_clock(self) -> None:
        status = GuardStatus(
            course_id=5,
            editing_blocked=True,
            editing_available_after=datetime(2025, 4, 8, 12, 10, tzinfo=timezone.utc),
        )
        assert status.banner_message() == (
            "Exam in progress! Course editing will be available after 12:10 pm"
        )

    def test_no_banner_when_not_blocked(self) -> None:
        assert GuardStatus(course_id=5, editing_blocked=False).banner_message() is None
