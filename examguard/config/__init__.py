"""Configuration module for Exam Guard.

Available Configurations:
- ExamGuardConfig: exam threshold, buffer and feature switches
"""

from examguard.config.examguard_config import (
    DEFAULT_EXAMGUARD_CONFIG,
    ExamGuardConfig,
)

__all__ = ["DEFAULT_EXAMGUARD_CONFIG", "ExamGuardConfig"]
