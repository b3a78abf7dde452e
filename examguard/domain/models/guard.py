"""Course guard marker model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class GuardMarker:
    """Persisted marker: the guard role is applied in this course.

    Attributes:
        course_id: The guarded course.
        created_at: When editing was blocked.
    """

    course_id: int
    created_at: datetime
