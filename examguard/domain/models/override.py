"""Timing override models.

An override replaces one or more timing fields of an activity for a single
user or for every member of a group. Unset fields fall back to the
activity's base window.

Invariant: at most one Override per (activity, user) and at most one per
(activity, group). The store enforces it by keying overrides on scope.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum


class ScopeKind(str, Enum):
    """Who an override applies to."""

    USER = "user"
    GROUP = "group"


@dataclass(frozen=True)
class OverrideScope:
    """Target of an override: one user or one group.

    Attributes:
        kind: USER or GROUP.
        target_id: The user id or group id.
    """

    kind: ScopeKind
    target_id: int

    @classmethod
    def user(cls, user_id: int) -> OverrideScope:
        return cls(ScopeKind.USER, user_id)

    @classmethod
    def group(cls, group_id: int) -> OverrideScope:
        return cls(ScopeKind.GROUP, group_id)

    @property
    def is_user(self) -> bool:
        return self.kind is ScopeKind.USER

    @property
    def is_group(self) -> bool:
        return self.kind is ScopeKind.GROUP


@dataclass(frozen=True)
class OverrideFields:
    """Timing fields carried by an override. None means unset.

    A zero duration is normalised to None so that "no time limit" has a
    single representation.
    """

    open: datetime | None = None
    close: datetime | None = None
    duration: timedelta | None = None

    def __post_init__(self) -> None:
        if self.duration is not None and not self.duration:
            object.__setattr__(self, "duration", None)

    def is_empty(self) -> bool:
        return self.open is None and self.close is None and self.duration is None


@dataclass(frozen=True)
class Override:
    """A personal or group timing adjustment for one activity.

    Owned by the host activity subsystem. Exam Guard creates, updates and
    deletes overrides only through the OverrideStore port.

    Attributes:
        override_id: Store-assigned id.
        activity_id: The activity the override belongs to.
        scope: User or group the override targets.
        fields: The overridden timing fields.
    """

    override_id: int
    activity_id: int
    scope: OverrideScope
    fields: OverrideFields

    @property
    def open(self) -> datetime | None:
        return self.fields.open

    @property
    def close(self) -> datetime | None:
        return self.fields.close

    @property
    def duration(self) -> timedelta | None:
        return self.fields.duration

    def with_fields(self, fields: OverrideFields) -> Override:
        """Return a copy carrying new timing fields."""
        return replace(self, fields=fields)
