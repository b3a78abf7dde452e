"""Exam activity port - the uniform view of one timed activity.

The reconciler and the course guard never look at activity types. Each
supported type provides one variant of this protocol, registered in the
exam activity factory under its module name. Adding a type means adding a
variant and one factory entry.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from examguard.domain.models.activity import ActivityInstance, ActivityWindow
from examguard.domain.models.effective_settings import EffectiveSettings
from examguard.domain.models.override import Override, OverrideFields, OverrideScope


class ExamActivityProtocol(Protocol):
    """Protocol for one activity instance as Exam Guard sees it."""

    @property
    def instance(self) -> ActivityInstance:
        """The stored activity configuration."""
        ...

    @property
    def activity_id(self) -> int:
        ...

    @property
    def course_id(self) -> int:
        ...

    @property
    def context_id(self) -> int:
        ...

    @property
    def modname(self) -> str:
        ...

    @property
    def participate_capability(self) -> str:
        """Capability a student needs to take the activity."""
        ...

    @property
    def manage_capability(self) -> str:
        """Capability needed to manage the activity's overrides."""
        ...

    def base_window(self) -> ActivityWindow:
        """Return the activity's base timings with buffer and threshold."""
        ...

    def effective_settings(
        self,
        personal: Override | None,
        group_overrides: list[Override],
    ) -> EffectiveSettings:
        """Resolve one student's timings (personal > best group > base)."""
        ...

    async def create_override(
        self, scope: OverrideScope, fields: OverrideFields
    ) -> int:
        """Save an override for this activity and return its id."""
        ...

    def is_exam_activity(self) -> bool:
        """Check whether the activity is exam-like."""
        ...

    async def is_active_exam_activity(self) -> bool:
        """Check whether the activity is inside its active period now."""
        ...

    def exam_start_time(self) -> datetime | None:
        """Return the opening time of the activity."""
        ...

    async def exam_end_time(self) -> datetime:
        """Return close + current extension + buffer."""
        ...

    async def current_extension(self) -> int:
        """Return the latest recorded bulk extension in minutes."""
        ...
