"""Exam Guard plugin settings.

Read-only to the core. Values come from environment variables so the host
can tune them per deployment without code changes.

Environment Variables:
- EXAMGUARD_EXAM_DURATION_MINUTES: Longest open-to-close span that counts
  as an exam (default: 300, i.e. 5 hours)
- EXAMGUARD_TIME_BUFFER_MINUTES: Margin before open and after close during
  which editing stays blocked (default: 10)
- EXAMGUARD_BULK_EXTENSION_ENABLED: Allow teachers to extend every student
  at once (default: true)
- EXAMGUARD_GUARD_ENABLED: Block course editing during exams (default: true)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Accepts 1/0, true/false, yes/no, on/off (case-insensitive). Anything
    else falls back to the default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class ExamGuardConfig:
    """Plugin-wide settings.

    Attributes:
        exam_duration_minutes: Activities whose open-to-close span is at or
            under this many minutes are exam-like. Default: 300.
        time_buffer_minutes: Buffer before open and after close still
            counted as active. Default: 10.
        bulk_extension_enabled: Whether bulk extensions may be applied.
        guard_enabled: Whether course editing is blocked during exams.
    """

    exam_duration_minutes: int = 300
    time_buffer_minutes: int = 10
    bulk_extension_enabled: bool = True
    guard_enabled: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.exam_duration_minutes < 1:
            raise ValueError(
                "exam_duration_minutes must be positive, "
                f"got {self.exam_duration_minutes}"
            )
        if self.time_buffer_minutes < 0:
            raise ValueError(
                "time_buffer_minutes must be non-negative, "
                f"got {self.time_buffer_minutes}"
            )

    @property
    def exam_threshold(self) -> timedelta:
        return timedelta(minutes=self.exam_duration_minutes)

    @property
    def exam_buffer(self) -> timedelta:
        return timedelta(minutes=self.time_buffer_minutes)

    @classmethod
    def from_environment(cls) -> ExamGuardConfig:
        """Create configuration from environment variables.

        Returns:
            ExamGuardConfig with values from environment or defaults.
        """
        return cls(
            exam_duration_minutes=_get_int_env("EXAMGUARD_EXAM_DURATION_MINUTES", 300),
            time_buffer_minutes=_get_int_env("EXAMGUARD_TIME_BUFFER_MINUTES", 10),
            bulk_extension_enabled=_get_bool_env(
                "EXAMGUARD_BULK_EXTENSION_ENABLED", True
            ),
            guard_enabled=_get_bool_env("EXAMGUARD_GUARD_ENABLED", True),
        )


DEFAULT_EXAMGUARD_CONFIG = ExamGuardConfig()
"""Default settings: 5 hour exams, 10 minute buffer, everything enabled."""
