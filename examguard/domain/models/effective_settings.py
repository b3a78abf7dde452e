"""Effective timing settings for one student.

Resolution order, applied field by field:
    personal override field (if set)
    > best-of applicable group override fields (if any)
    > base activity window field

"Best" across group overrides is chosen independently per field: latest
close, earliest set open, largest duration. The combination can differ
from every single group override the student belongs to.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TypeVar

from examguard.domain.models.activity import ActivityWindow
from examguard.domain.models.override import Override, OverrideFields

_T = TypeVar("_T")


@dataclass(frozen=True)
class EffectiveSettings:
    """Resolved (open, close, duration) triple for one student.

    Computed and ephemeral. Also used as the bucket key that groups
    students into one synthetic extension group.

    Attributes:
        open: Effective opening time.
        close: Effective closing time.
        duration: Effective attempt time limit, None when unset.
    """

    open: datetime | None
    close: datetime | None
    duration: timedelta | None

    @property
    def bucket_key(self) -> tuple[datetime | None, datetime | None, timedelta | None]:
        return (self.open, self.close, self.duration)

    def as_fields(self) -> OverrideFields:
        return OverrideFields(open=self.open, close=self.close, duration=self.duration)


def best_group_fields(group_overrides: list[Override]) -> OverrideFields:
    """Pick the most generous value of each field across group overrides.

    Args:
        group_overrides: Group overrides applying to one student.

    Returns:
        OverrideFields with the earliest open, latest close and largest
        duration found. Fields no override sets stay None.
    """
    opens = [o.open for o in group_overrides if o.open is not None]
    closes = [o.close for o in group_overrides if o.close is not None]
    durations = [o.duration for o in group_overrides if o.duration]
    return OverrideFields(
        open=min(opens) if opens else None,
        close=max(closes) if closes else None,
        duration=max(durations) if durations else None,
    )


def resolve_effective_settings(
    window: ActivityWindow,
    personal: Override | None,
    group_overrides: list[Override],
) -> EffectiveSettings:
    """Resolve one student's effective settings.

    Args:
        window: The activity's base window.
        personal: The student's personal override, if any.
        group_overrides: Overrides of the student's groups.

    Returns:
        The resolved EffectiveSettings.
    """
    best = best_group_fields(group_overrides)
    own = personal.fields if personal is not None else OverrideFields()

    return EffectiveSettings(
        open=_first_set(own.open, best.open, window.open),
        close=_first_set(own.close, best.close, window.close),
        duration=_first_set(own.duration, best.duration, window.duration or None),
    )


def _first_set(*values: _T | None) -> _T | None:
    for value in values:
        if value is not None:
            return value
    return None


def clamp_duration(
    duration: timedelta | None,
    open_at: datetime | None,
    close_at: datetime | None,
) -> timedelta | None:
    """Keep an attempt duration within the open-to-close span.

    Args:
        duration: Proposed duration, None when unset.
        open_at: Effective opening time.
        close_at: Effective closing time.

    Returns:
        The duration, shortened to close - open when it would exceed it.
    """
    if duration is None or open_at is None or close_at is None:
        return duration
    return min(duration, close_at - open_at)
