"""Extension history and per-override audit models.

ExtensionRecord is the append-only history of bulk extension requests.
GuardOverrideAudit tracks which overrides currently carry extension-adjusted
values and what they looked like before the first extension, so that
setting the extension back to zero restores them exactly.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from examguard.domain.errors.consistency import InconsistentStateError
from examguard.domain.models.override import OverrideFields


@dataclass(frozen=True)
class ExtensionRecord:
    """One bulk extension request.

    Attributes:
        activity_id: The activity that was extended.
        extension_minutes: Extension requested, in minutes (0 revokes).
        applied_at: When the request was applied.
        applied_by: User id of the requester.
    """

    activity_id: int
    extension_minutes: int
    applied_at: datetime
    applied_by: int


class OverrideSnapshot(BaseModel):
    """Serialized pre-extension field values of an override.

    Stored as JSON text in the audit row. Durations are kept as whole
    seconds.
    """

    model_config = ConfigDict(frozen=True)

    open: datetime | None = None
    close: datetime | None = None
    duration_seconds: int | None = Field(default=None, ge=0)

    @classmethod
    def from_fields(cls, fields: OverrideFields) -> OverrideSnapshot:
        return cls(
            open=fields.open,
            close=fields.close,
            duration_seconds=(
                int(fields.duration.total_seconds())
                if fields.duration is not None
                else None
            ),
        )

    def to_fields(self) -> OverrideFields:
        return OverrideFields(
            open=self.open,
            close=self.close,
            duration=(
                timedelta(seconds=self.duration_seconds)
                if self.duration_seconds
                else None
            ),
        )

    def encode(self) -> str:
        return self.model_dump_json()

    @classmethod
    def decode(cls, raw: str) -> OverrideSnapshot:
        """Parse a stored snapshot.

        Raises:
            InconsistentStateError: If the stored text is not a snapshot.
        """
        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            raise InconsistentStateError(
                f"Stored override snapshot cannot be decoded: {e}"
            ) from e


@dataclass(frozen=True)
class GuardOverrideAudit:
    """Extension currently baked into one override.

    Exists iff the referenced override holds extension-adjusted values.
    Created on the first extension of a personal override, or together
    with a synthetic group override. Updated in place on re-extension.
    Deleted on restoration or when the synthetic override is removed.

    Attributes:
        activity_id: The activity of the override.
        override_id: The adjusted override.
        extension_minutes: Extension currently applied to the override.
        original_snapshot: Encoded OverrideSnapshot of the override before
            any extension. None for synthetic group overrides.
        modified_by: User id of the last requester.
        modified_at: When the row was last written.
    """

    activity_id: int
    override_id: int
    extension_minutes: int
    original_snapshot: str | None
    modified_by: int
    modified_at: datetime

    def original_fields(self) -> OverrideFields | None:
        """Decode the stored snapshot, None when there is none."""
        if self.original_snapshot is None:
            return None
        return OverrideSnapshot.decode(self.original_snapshot).to_fields()
