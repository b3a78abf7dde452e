"""Guard marker repository port.

One marker row per course in which the guard role is currently applied.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from examguard.domain.models.guard import GuardMarker


class GuardMarkerRepositoryProtocol(Protocol):
    """Protocol for the per-course editing-blocked marker."""

    async def get_marker(self, course_id: int) -> GuardMarker | None:
        """Return the marker of a course, None when editing is not blocked."""
        ...

    async def create_marker(self, course_id: int, created_at: datetime) -> GuardMarker:
        """Record that editing is blocked in a course."""
        ...

    async def delete_marker(self, course_id: int) -> None:
        """Remove the marker of a course. Missing markers are ignored."""
        ...
