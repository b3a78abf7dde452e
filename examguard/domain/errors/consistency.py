"""Inconsistent persisted state errors.

Raised when stored records contradict each other in a way the reconciler
cannot repair on its own. The running transaction is rolled back and the
error propagates to the host.
"""

from __future__ import annotations

from examguard.domain.exceptions import ExamGuardError


class InconsistentStateError(ExamGuardError):
    """Raised when persisted guard state violates its invariants.

    Examples:
        - More than one synthetic group matches the legacy naming pattern
        - An audit row on a personal override has no original snapshot
        - An audit snapshot cannot be decoded
    """

    pass


class MultipleLegacyGroupsError(InconsistentStateError):
    """Raised when several legacy-named extension groups exist for one activity.

    Attributes:
        activity_id: The activity whose groups clash.
        group_ids: The ids of the clashing groups.
    """

    def __init__(self, activity_id: int, group_ids: list[int]) -> None:
        super().__init__(
            "Multiple exam guard extension groups found for activity "
            f"{activity_id}: {sorted(group_ids)}. This should not happen."
        )
        self.activity_id = activity_id
        self.group_ids = group_ids


class MissingOriginalSnapshotError(InconsistentStateError):
    """Raised when a personal override audit has no snapshot to restore.

    Attributes:
        activity_id: The activity of the override.
        override_id: The override that cannot be restored.
    """

    def __init__(self, activity_id: int, override_id: int) -> None:
        super().__init__(
            f"Override {override_id} of activity {activity_id} carries an "
            "extension but has no original snapshot to restore"
        )
        self.activity_id = activity_id
        self.override_id = override_id
