"""Naming scheme of synthetic extension groups.

A synthetic group exists only to carry a shared extension override for a
bucket of students. Its name encodes the activity, the extension and a
sequence number so it can be found again by prefix:

    Exam_guard_activity_{activity_id}_extension_{minutes}_{sequence}

Groups created before sequence numbers existed are named without the
trailing sequence. Those legacy names are still recognised.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

NAME_PREFIX = "Exam_guard_activity_"

_NAME_PATTERN = re.compile(
    r"^Exam_guard_activity_(?P<activity>\d+)_extension_(?P<minutes>\d+)"
    r"(?:_(?P<sequence>\d+))?$"
)


@dataclass(frozen=True)
class SyntheticGroupName:
    """Parsed synthetic group name.

    Attributes:
        activity_id: Activity the group extends.
        extension_minutes: Extension the group was created for.
        sequence: Position among the groups of one request. None for
            legacy names.
    """

    activity_id: int
    extension_minutes: int
    sequence: int | None = None

    @staticmethod
    def prefix(activity_id: int) -> str:
        """Prefix shared by every synthetic group of an activity."""
        return f"{NAME_PREFIX}{activity_id}_extension_"

    @property
    def is_legacy(self) -> bool:
        return self.sequence is None

    def render(self) -> str:
        name = f"{self.prefix(self.activity_id)}{self.extension_minutes}"
        if self.sequence is not None:
            name = f"{name}_{self.sequence}"
        return name

    @classmethod
    def parse(cls, name: str) -> SyntheticGroupName | None:
        """Parse a group name, None when it is not a synthetic group name."""
        match = _NAME_PATTERN.match(name)
        if match is None:
            return None
        sequence = match.group("sequence")
        return cls(
            activity_id=int(match.group("activity")),
            extension_minutes=int(match.group("minutes")),
            sequence=int(sequence) if sequence is not None else None,
        )
