"""Time window policy for exam-like activities.

Pure functions deciding whether an activity counts as an exam and whether
it is running. Nothing here reads a clock: callers pass `now` from their
injected time authority.

Rules:
    exam-like:  open and close both set, and close - open <= threshold
    active:     exam-like, and open - buffer < now < close + extension + buffer
    end time:   close + extension + buffer
"""

from __future__ import annotations

from datetime import datetime, timedelta

from examguard.domain.models.activity import ActivityWindow

NO_EXTENSION = timedelta(0)


def is_exam_activity(window: ActivityWindow) -> bool:
    """Check whether an activity window is exam-like.

    A span equal to the threshold still counts; one second more does not.
    """
    if window.open is None or window.close is None:
        return False
    return window.close - window.open <= window.exam_threshold


def is_active(
    window: ActivityWindow,
    extension: timedelta,
    now: datetime,
) -> bool:
    """Check whether an exam-like activity is inside its active period.

    Args:
        window: The activity window.
        extension: Bulk extension currently applied to the activity.
        now: Current time from the time authority.

    Returns:
        True iff the activity is exam-like and now lies strictly between
        open - buffer and the exam end time.
    """
    if not is_exam_activity(window) or window.open is None:
        return False
    return window.open - window.exam_buffer < now < exam_end_time(window, extension)


def exam_end_time(
    window: ActivityWindow, extension: timedelta = NO_EXTENSION
) -> datetime:
    """Return close + extension + buffer.

    Raises:
        ValueError: If the window has no close time.
    """
    if window.close is None:
        raise ValueError("Activity window has no close time")
    return window.close + extension + window.exam_buffer


def window_contains(
    open_at: datetime | None,
    close_at: datetime | None,
    buffer: timedelta,
    now: datetime,
) -> bool:
    """Check whether one student's effective window contains now.

    An unset open does not bound the window from below. An unset close
    never contains now, since the student is not sitting a timed exam.
    """
    if close_at is None:
        return False
    if open_at is not None and not open_at - buffer < now:
        return False
    return now < close_at + buffer
