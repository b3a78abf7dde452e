"""Course guard errors."""

from __future__ import annotations

from examguard.domain.exceptions import ExamGuardError


class GuardRoleNotFoundError(ExamGuardError):
    """Raised when the restrictive guard role does not exist on the host.

    The role is created at install time. Its absence means the host was
    not set up, so the guard cannot block editing.

    Attributes:
        shortname: The role shortname that was looked up.
    """

    def __init__(self, shortname: str) -> None:
        super().__init__(f"Exam Guard role not exists: {shortname}")
        self.shortname = shortname
