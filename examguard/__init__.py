"""
Exam Guard - course editing guard and bulk time extension for timed activities

Blocks course-structure editing while an exam-like activity is running and
lets teachers grant one extension to every student of a timed activity,
reconciled against existing personal and group overrides.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
