"""Guard marker repository stub implementation."""

from __future__ import annotations

import copy
from datetime import datetime
from typing import Any

from examguard.application.ports.guard_marker_repository import (
    GuardMarkerRepositoryProtocol,
)
from examguard.domain.models.guard import GuardMarker


class GuardMarkerRepositoryStub(GuardMarkerRepositoryProtocol):
    """In-memory per-course markers (testing only)."""

    def __init__(self) -> None:
        self._markers: dict[int, GuardMarker] = {}

    async def get_marker(self, course_id: int) -> GuardMarker | None:
        return self._markers.get(course_id)

    async def create_marker(self, course_id: int, created_at: datetime) -> GuardMarker:
        marker = GuardMarker(course_id=course_id, created_at=created_at)
        self._markers[course_id] = marker
        return marker

    async def delete_marker(self, course_id: int) -> None:
        self._markers.pop(course_id, None)

    def snapshot(self) -> dict[str, Any]:
        return copy.deepcopy({"markers": self._markers})

    def restore(self, state: dict[str, Any]) -> None:
        self._markers = state["markers"]
