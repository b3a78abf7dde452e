"""Extension DTOs for the application layer.

ExtensionRequest validates raw input from the host form through pydantic.
ReconciliationReport and ExtensionOutcome are plain frozen dataclasses
returned to the host.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator

from examguard.domain.models.extension import ExtensionRecord

MAX_EXTENSION_MINUTES = 999

_DIGITS = re.compile(r"[0-9]+")


class ExtensionRequest(BaseModel):
    """A bulk extension request as submitted by a teacher.

    The host form accepts at most three digits. Fractional or negative
    values are rejected, and text input must consist of digits only.
    """

    model_config = ConfigDict(frozen=True)

    activity_id: int
    minutes: int = Field(ge=0, le=MAX_EXTENSION_MINUTES)
    requested_by: int

    @field_validator("minutes", mode="before")
    @classmethod
    def validate_minutes_input(cls, v: object) -> object:
        """Reject booleans and text that is not plain digits."""
        if isinstance(v, bool):
            raise ValueError("minutes must be a whole number, not a boolean")
        if isinstance(v, str) and not _DIGITS.fullmatch(v):
            raise ValueError("minutes must contain digits only")
        return v


@dataclass(frozen=True)
class ReconciliationReport:
    """What one extension reconciliation changed.

    Attributes:
        activity_id: The extended activity.
        extension_minutes: Extension that was applied.
        overrides_updated: Personal overrides rewritten with new values.
        overrides_restored: Personal overrides put back to their snapshot.
        overrides_unchanged: Personal overrides already carrying the values.
        users_skipped: Roster users whose window does not contain now.
        groups_created: Synthetic groups created.
        groups_kept: Synthetic groups left in place because they matched.
        groups_deleted: Active synthetic groups removed.
        record: The history entry written for the request.
    """

    activity_id: int
    extension_minutes: int
    overrides_updated: int = 0
    overrides_restored: int = 0
    overrides_unchanged: int = 0
    users_skipped: int = 0
    groups_created: int = 0
    groups_kept: int = 0
    groups_deleted: int = 0
    record: ExtensionRecord | None = None


@dataclass(frozen=True)
class ExtensionOutcome:
    """Result of a host extension request.

    Expected refusals (not authorized, feature disabled, activity not
    active, invalid value) come back with success=False and the error
    message. Nothing is written in that case.

    Attributes:
        success: Whether the extension was applied.
        activity_id: The activity the request targeted.
        extension_minutes: The requested extension, None when it did not
            validate.
        error: Message of the refusal, None on success.
        error_type: Class name of the refusal, None on success.
        report: Reconciliation report on success.
    """

    success: bool
    activity_id: int
    extension_minutes: int | None = None
    error: str | None = None
    error_type: str | None = None
    report: ReconciliationReport | None = None

    @classmethod
    def refused(
        cls, activity_id: int, minutes: int | None, error: Exception
    ) -> ExtensionOutcome:
        return cls(
            success=False,
            activity_id=activity_id,
            extension_minutes=minutes,
            error=str(error),
            error_type=type(error).__name__,
        )

    @classmethod
    def applied(cls, report: ReconciliationReport) -> ExtensionOutcome:
        return cls(
            success=True,
            activity_id=report.activity_id,
            extension_minutes=report.extension_minutes,
            report=report,
        )
