"""Persistence failure errors."""

from __future__ import annotations

from examguard.domain.exceptions import ExamGuardError


class StoreError(ExamGuardError):
    """Raised when the underlying store fails to read or write.

    Always propagates after the surrounding transaction is rolled back.

    Attributes:
        operation: The store operation that failed.
    """

    def __init__(self, operation: str, message: str | None = None) -> None:
        super().__init__(message or f"Store operation failed: {operation}")
        self.operation = operation
