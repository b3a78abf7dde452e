"""Course guard DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from examguard.application.ports.exam_activity import ExamActivityProtocol

BANNER_TEMPLATE = "Exam in progress! Course editing will be available after {time}"


@dataclass(frozen=True)
class GuardStatus:
    """Outcome of a course guard reconciliation.

    Attributes:
        course_id: The reconciled course.
        editing_blocked: Whether the guard role is applied after the call.
        active_activities: Active exam activities, latest-ending first.
        editing_available_after: End time of the latest-ending active
            activity, None when nothing is active.
        changed: Whether the call assigned or revoked roles.
    """

    course_id: int
    editing_blocked: bool
    active_activities: tuple[ExamActivityProtocol, ...] = field(default=())
    editing_available_after: datetime | None = None
    changed: bool = False

    def banner_message(self) -> str | None:
        """Warning text shown to editors while editing is blocked."""
        if not self.editing_blocked or self.editing_available_after is None:
            return None
        at = self.editing_available_after
        return BANNER_TEMPLATE.format(time=f"{at:%I:%M} {at:%p}".lower())
