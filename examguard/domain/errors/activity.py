"""Activity lookup errors."""

from __future__ import annotations

from examguard.domain.exceptions import ExamGuardError


class UnsupportedActivityError(ExamGuardError):
    """Raised when no activity adapter exists for a module type.

    Attributes:
        modname: The module type that has no adapter.
    """

    def __init__(self, modname: str) -> None:
        super().__init__(f"Exam activity class not found for module {modname}.")
        self.modname = modname


class ActivityNotFoundError(ExamGuardError):
    """Raised when the catalog has no activity with the given id.

    Attributes:
        activity_id: The id that was looked up.
    """

    def __init__(self, activity_id: int) -> None:
        super().__init__(f"Activity {activity_id} not found")
        self.activity_id = activity_id
