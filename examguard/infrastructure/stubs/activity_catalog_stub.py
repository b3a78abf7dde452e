"""Activity catalog stub implementation."""

from __future__ import annotations

from examguard.application.ports.activity_catalog import ActivityCatalogProtocol
from examguard.domain.models.activity import ActivityInstance


class ActivityCatalogStub(ActivityCatalogProtocol):
    """In-memory activity catalog keyed by activity id (testing only)."""

    def __init__(self) -> None:
        self._instances: dict[int, ActivityInstance] = {}

    async def get_instance(self, activity_id: int) -> ActivityInstance | None:
        return self._instances.get(activity_id)

    async def list_instances(
        self, course_id: int, modname: str
    ) -> list[ActivityInstance]:
        return [
            instance
            for _, instance in sorted(self._instances.items())
            if instance.course_id == course_id and instance.modname == modname
        ]

    def add(self, instance: ActivityInstance) -> None:
        """Add or replace an activity."""
        self._instances[instance.activity_id] = instance

    def remove(self, activity_id: int) -> None:
        self._instances.pop(activity_id, None)
