"""Exam activity factory.

Maps a module name to the adapter class implementing ExamActivityProtocol
for it. Supporting another activity type means writing its adapter and
adding one entry to EXAM_ACTIVITY_ADAPTERS.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog

from examguard.application.activities.quiz import QUIZ_MODNAME, QuizActivityAdapter
from examguard.application.ports.activity_catalog import ActivityCatalogProtocol
from examguard.application.ports.exam_activity import ExamActivityProtocol
from examguard.application.ports.extension_ledger import ExtensionLedgerProtocol
from examguard.application.ports.override_store import OverrideStoreProtocol
from examguard.application.ports.time_authority import TimeAuthorityProtocol
from examguard.config.examguard_config import ExamGuardConfig
from examguard.domain.errors.activity import (
    ActivityNotFoundError,
    UnsupportedActivityError,
)
from examguard.domain.models.activity import ActivityInstance

logger = structlog.get_logger(__name__)

AdapterConstructor = Callable[
    [
        ActivityInstance,
        OverrideStoreProtocol,
        ExtensionLedgerProtocol,
        TimeAuthorityProtocol,
        ExamGuardConfig,
    ],
    ExamActivityProtocol,
]

EXAM_ACTIVITY_ADAPTERS: dict[str, AdapterConstructor] = {
    QUIZ_MODNAME: QuizActivityAdapter,
}


class ExamActivityFactory:
    """Builds exam activity adapters from catalog records."""

    def __init__(
        self,
        catalog: ActivityCatalogProtocol,
        store: OverrideStoreProtocol,
        ledger: ExtensionLedgerProtocol,
        time_authority: TimeAuthorityProtocol,
        config: ExamGuardConfig,
        adapters: dict[str, AdapterConstructor] | None = None,
    ) -> None:
        self._catalog = catalog
        self._store = store
        self._ledger = ledger
        self._time = time_authority
        self._config = config
        self._adapters = dict(
            adapters if adapters is not None else EXAM_ACTIVITY_ADAPTERS
        )

    @property
    def supported_modnames(self) -> list[str]:
        return list(self._adapters)

    def is_supported(self, modname: str) -> bool:
        return modname in self._adapters

    def for_instance(self, instance: ActivityInstance) -> ExamActivityProtocol:
        """Wrap a catalog record in the adapter of its module type.

        Raises:
            UnsupportedActivityError: If no adapter exists for the module.
        """
        constructor = self._adapters.get(instance.modname)
        if constructor is None:
            logger.warning(
                "unsupported_activity_type",
                activity_id=instance.activity_id,
                modname=instance.modname,
            )
            raise UnsupportedActivityError(instance.modname)
        return constructor(
            instance, self._store, self._ledger, self._time, self._config
        )

    async def get_exam_activity(self, activity_id: int) -> ExamActivityProtocol:
        """Look up an activity and wrap it.

        Raises:
            ActivityNotFoundError: If the catalog does not know the id.
            UnsupportedActivityError: If its module type has no adapter.
        """
        instance = await self._catalog.get_instance(activity_id)
        if instance is None:
            raise ActivityNotFoundError(activity_id)
        return self.for_instance(instance)

    async def course_activities(self, course_id: int) -> list[ExamActivityProtocol]:
        """Return adapters for every supported activity in a course."""
        activities: list[ExamActivityProtocol] = []
        for modname in self._adapters:
            for instance in await self._catalog.list_instances(course_id, modname):
                activities.append(self.for_instance(instance))
        return activities
