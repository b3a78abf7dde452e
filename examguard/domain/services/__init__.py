"""Pure domain services."""

from examguard.domain.services.time_window_policy import (
    exam_end_time,
    is_active,
    is_exam_activity,
    window_contains,
)

__all__: list[str] = [
    "exam_end_time",
    "is_active",
    "is_exam_activity",
    "window_contains",
]
