"""Test helpers for Exam Guard tests.

Helpers:
    FakeTimeAuthority: Controllable time authority for deterministic tests
    make_quiz: Builder for quiz activity instances around T

Usage:
    from tests.helpers import FakeTimeAuthority, T, make_quiz
"""

from tests.helpers.builders import (
    COURSE_ID,
    QUIZ_ACTIVITY_ID,
    QUIZ_CONTEXT_ID,
    TEACHER_ID,
    T,
    make_quiz,
)
from tests.helpers.fake_time_authority import DEFAULT_FROZEN_AT, FakeTimeAuthority

__all__ = [
    "COURSE_ID",
    "DEFAULT_FROZEN_AT",
    "QUIZ_ACTIVITY_ID",
    "QUIZ_CONTEXT_ID",
    "TEACHER_ID",
    "FakeTimeAuthority",
    "T",
    "make_quiz",
]
