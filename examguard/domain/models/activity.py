"""Activity instance and window models.

ActivityInstance mirrors what the host stores for one timed activity.
ActivityWindow is the derived view the time window policy works on: the
instance's timings plus the plugin-wide buffer and exam threshold.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class ActivityInstance:
    """Stored configuration of one timed activity.

    Attributes:
        activity_id: Course-module id, the key used across the plugin.
        instance_id: Id of the activity record inside its module table.
        course_id: Course the activity belongs to.
        context_id: Module context used for capability checks.
        modname: Activity type tag (e.g. "quiz").
        name: Display name.
        time_open: Opening time, None when unset.
        time_close: Closing time, None when unset.
        time_limit: Attempt duration, None when unset.
    """

    activity_id: int
    instance_id: int
    course_id: int
    context_id: int
    modname: str
    name: str = ""
    time_open: datetime | None = None
    time_close: datetime | None = None
    time_limit: timedelta | None = None


@dataclass(frozen=True)
class ActivityWindow:
    """Semantic view of one timed activity instance.

    Derived, never persisted. Recomputed from the activity configuration
    plus the timeBufferMinutes and examDurationMinutes settings.

    Attributes:
        open: When the activity opens, None when unset.
        close: When the activity closes, None when unset.
        duration: Attempt time limit, None or zero when unset.
        exam_buffer: Margin around the window still counted as active.
        exam_threshold: Longest open-to-close span that is exam-like.
    """

    open: datetime | None
    close: datetime | None
    duration: timedelta | None
    exam_buffer: timedelta
    exam_threshold: timedelta

    @classmethod
    def from_instance(
        cls,
        instance: ActivityInstance,
        exam_buffer: timedelta,
        exam_threshold: timedelta,
    ) -> ActivityWindow:
        """Build the window of a stored activity instance."""
        return cls(
            open=instance.time_open,
            close=instance.time_close,
            duration=instance.time_limit or None,
            exam_buffer=exam_buffer,
            exam_threshold=exam_threshold,
        )
