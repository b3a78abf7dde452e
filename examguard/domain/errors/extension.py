"""Bulk extension domain errors.

These errors are the expected refusals of an extension request. The
extension facade returns them inside an ExtensionOutcome instead of
raising them to the host.
"""

from __future__ import annotations

from examguard.domain.exceptions import ExamGuardError


class ExtensionError(ExamGuardError):
    """Base error for bulk extension requests."""

    pass


class AuthorizationError(ExtensionError):
    """Raised when the caller cannot manage overrides for the activity.

    Attributes:
        user_id: The user who made the request.
        context_id: The activity context the capability was checked in.
    """

    def __init__(
        self, user_id: int, context_id: int, message: str | None = None
    ) -> None:
        msg = message or (
            f"User {user_id} cannot manage overrides in context {context_id}"
        )
        super().__init__(msg)
        self.user_id = user_id
        self.context_id = context_id


class NotActiveExamActivityError(ExtensionError):
    """Raised when an extension is requested outside the active window.

    Attributes:
        activity_id: The activity the extension was requested for.
    """

    def __init__(self, activity_id: int, message: str | None = None) -> None:
        msg = message or f"This is not an active exam activity: {activity_id}"
        super().__init__(msg)
        self.activity_id = activity_id


class BulkExtensionDisabledError(ExtensionError):
    """Raised when the bulk extension feature is switched off."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "Bulk extension is not enabled.")


class InvalidExtensionError(ExtensionError):
    """Raised when the requested extension value is not acceptable.

    Attributes:
        minutes: The rejected value, as received.
    """

    def __init__(self, minutes: object, message: str | None = None) -> None:
        msg = message or (
            f"Extension must be a whole number of minutes between 0 and 999, "
            f"got {minutes!r}"
        )
        super().__init__(msg)
        self.minutes = minutes
