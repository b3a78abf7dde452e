"""Activity catalog port: stored activity configuration on the host."""

from __future__ import annotations

from typing import Protocol

from examguard.domain.models.activity import ActivityInstance


class ActivityCatalogProtocol(Protocol):
    """Protocol for looking up activity instances."""

    async def get_instance(self, activity_id: int) -> ActivityInstance | None:
        """Return one activity by course-module id, None when unknown."""
        ...

    async def list_instances(
        self, course_id: int, modname: str
    ) -> list[ActivityInstance]:
        """Return every activity of one type in a course."""
        ...
