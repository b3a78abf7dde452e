"""Course group model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Group:
    """A host course group.

    Attributes:
        group_id: Store-assigned id.
        course_id: The course the group belongs to.
        name: Group name, unique within the course.
    """

    group_id: int
    course_id: int
    name: str
