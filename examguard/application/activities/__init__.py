"""Exam activity adapters, one per supported activity type."""

from examguard.application.activities.factory import (
    EXAM_ACTIVITY_ADAPTERS,
    ExamActivityFactory,
)
from examguard.application.activities.quiz import QUIZ_MODNAME, QuizActivityAdapter

__all__: list[str] = [
    "EXAM_ACTIVITY_ADAPTERS",
    "QUIZ_MODNAME",
    "ExamActivityFactory",
    "QuizActivityAdapter",
]
