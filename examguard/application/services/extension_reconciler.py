"""Extension reconciler - applies a bulk time extension to an activity.

Given the roster of an activity and its existing overrides, the reconciler
brings every active student to exactly `minutes` of extension on top of
their pre-extension timings:

- Students with a personal override get that override rewritten in place.
  The first extension stores a snapshot of the override in an audit row;
  an extension of zero restores the snapshot and drops the audit row.
- Students without one are bucketed by their effective (open, close,
  duration). Each bucket shares one synthetic group carrying a group
  override with the extended timings.

Synthetic groups of earlier requests that are still active are replaced
on every call. A group that already carries exactly what the new request
would create is kept as is, so re-applying the same extension writes
nothing.

Everything runs inside one transaction: a failure leaves the previous
state intact and the error propagates to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum

from examguard.application.dtos.extension import ReconciliationReport
from examguard.application.ports.exam_activity import ExamActivityProtocol
from examguard.application.ports.extension_ledger import ExtensionLedgerProtocol
from examguard.application.ports.override_store import OverrideStoreProtocol
from examguard.application.ports.roster import RosterProtocol
from examguard.application.ports.time_authority import TimeAuthorityProtocol
from examguard.application.ports.transaction import TransactionManagerProtocol
from examguard.application.services.base import LoggingMixin
from examguard.domain.errors.consistency import (
    MissingOriginalSnapshotError,
    MultipleLegacyGroupsError,
)
from examguard.domain.errors.extension import InvalidExtensionError
from examguard.domain.models.effective_settings import EffectiveSettings, clamp_duration
from examguard.domain.models.extension import GuardOverrideAudit, OverrideSnapshot
from examguard.domain.models.group import Group
from examguard.domain.models.override import Override, OverrideFields, OverrideScope
from examguard.domain.models.synthetic_group import SyntheticGroupName
from examguard.domain.services.time_window_policy import window_contains


class PersonalOutcome(str, Enum):
    """What happened to one personal override."""

    SKIPPED = "skipped"
    UNCHANGED = "unchanged"
    UPDATED = "updated"
    RESTORED = "restored"


@dataclass
class _Bucket:
    """Students sharing one effective (open, close, duration)."""

    settings: EffectiveSettings
    members: list[int] = field(default_factory=list)
    claimed: bool = False


@dataclass
class _Tally:
    overrides_updated: int = 0
    overrides_restored: int = 0
    overrides_unchanged: int = 0
    users_skipped: int = 0
    groups_created: int = 0
    groups_kept: int = 0
    groups_deleted: int = 0

    def count(self, outcome: PersonalOutcome) -> None:
        if outcome is PersonalOutcome.SKIPPED:
            self.users_skipped += 1
        elif outcome is PersonalOutcome.UNCHANGED:
            self.overrides_unchanged += 1
        elif outcome is PersonalOutcome.UPDATED:
            self.overrides_updated += 1
        else:
            self.overrides_restored += 1


def extended_fields(settings: EffectiveSettings, delta: timedelta) -> OverrideFields:
    """Shift close and duration by delta, keeping duration within the window.

    Args:
        settings: Effective settings to shift.
        delta: Amount to add (negative when an extension shrinks).

    Returns:
        OverrideFields with the effective open, the shifted close and the
        shifted, clamped duration. Unset fields stay unset.
    """
    close = settings.close + delta if settings.close is not None else None
    duration = settings.duration + delta if settings.duration else None
    return OverrideFields(
        open=settings.open,
        close=close,
        duration=clamp_duration(duration, settings.open, close),
    )


class ExtensionReconciler(LoggingMixin):
    """Core engine of bulk time extensions.

    Activity-agnostic: everything type specific goes through the
    ExamActivityProtocol adapter passed to apply_extension.

    Authorization, the feature switch and the active-window check are the
    caller's job (see ExtensionService).
    """

    def __init__(
        self,
        store: OverrideStoreProtocol,
        ledger: ExtensionLedgerProtocol,
        roster: RosterProtocol,
        time_authority: TimeAuthorityProtocol,
        transactions: TransactionManagerProtocol,
    ) -> None:
        self._store = store
        self._ledger = ledger
        self._roster = roster
        self._time = time_authority
        self._transactions = transactions
        self._init_logger(component="extension")

    async def apply_extension(
        self,
        activity: ExamActivityProtocol,
        minutes: int,
        applied_by: int,
    ) -> ReconciliationReport:
        """Bring every active student of an activity to `minutes` of extension.

        Args:
            activity: Adapter of the activity to extend.
            minutes: Extension in minutes. 0 revokes earlier extensions.
            applied_by: User id of the requester.

        Returns:
            ReconciliationReport describing the writes.

        Raises:
            InvalidExtensionError: If minutes is negative.
            InconsistentStateError: If stored groups or audits contradict
                each other. Nothing is written.
            StoreError: If a store operation fails. Nothing is written.
        """
        if minutes < 0:
            raise InvalidExtensionError(minutes)

        log = self._log_operation(
            "apply_extension",
            activity_id=activity.activity_id,
            course_id=activity.course_id,
            minutes=minutes,
            applied_by=applied_by,
        )
        log.info("extension_reconciliation_started")
        now = self._time.now()

        try:
            async with self._transactions.transaction():
                report = await self._reconcile(activity, minutes, applied_by, now)
        except Exception as e:
            log.error(
                "extension_reconciliation_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        log.info(
            "extension_applied",
            overrides_updated=report.overrides_updated,
            overrides_restored=report.overrides_restored,
            groups_created=report.groups_created,
            groups_kept=report.groups_kept,
            groups_deleted=report.groups_deleted,
        )
        return report

    async def _reconcile(
        self,
        activity: ExamActivityProtocol,
        minutes: int,
        applied_by: int,
        now: datetime,
    ) -> ReconciliationReport:
        activity_id = activity.activity_id
        buffer = activity.base_window().exam_buffer
        tally = _Tally()

        user_overrides: dict[int, Override] = {}
        group_overrides: dict[int, Override] = {}
        for override in await self._store.list_overrides(activity_id):
            if override.scope.is_user:
                user_overrides[override.scope.target_id] = override
            else:
                group_overrides[override.scope.target_id] = override

        roster = await self._roster.gradeable_enrolled_users(
            activity.context_id, activity.participate_capability
        )
        synthetic = await self._locate_synthetic_groups(activity)
        synthetic_ids = {group.group_id for group, _ in synthetic}

        previous = timedelta(minutes=await self._ledger.latest_extension(activity_id))
        buckets: dict[tuple[object, ...], _Bucket] = {}

        for user_id in roster:
            user_group_overrides = [
                group_overrides[group_id]
                for group_id in await self._roster.user_groups(
                    activity.course_id, user_id
                )
                if group_id in group_overrides and group_id not in synthetic_ids
            ]

            personal = user_overrides.get(user_id)
            if personal is not None:
                outcome = await self._reconcile_personal(
                    activity,
                    personal,
                    user_group_overrides,
                    minutes,
                    applied_by,
                    now,
                )
                tally.count(outcome)
                continue

            settings = activity.effective_settings(None, user_group_overrides)
            current_close = (
                settings.close + previous if settings.close is not None else None
            )
            if not window_contains(settings.open, current_close, buffer, now):
                tally.users_skipped += 1
                continue

            bucket = buckets.setdefault(settings.bucket_key, _Bucket(settings))
            bucket.members.append(user_id)

        surviving_sequences = await self._retire_synthetic_groups(
            activity,
            synthetic,
            group_overrides,
            buckets,
            minutes,
            now,
            tally,
        )

        if minutes > 0:
            sequence = max(surviving_sequences, default=0)
            for bucket in buckets.values():
                if bucket.claimed:
                    continue
                sequence += 1
                await self._create_synthetic_group(
                    activity, bucket, minutes, sequence, applied_by, now
                )
                tally.groups_created += 1

        record = await self._ledger.record_extension(
            activity_id, minutes, applied_by, now
        )

        return ReconciliationReport(
            activity_id=activity_id,
            extension_minutes=minutes,
            overrides_updated=tally.overrides_updated,
            overrides_restored=tally.overrides_restored,
            overrides_unchanged=tally.overrides_unchanged,
            users_skipped=tally.users_skipped,
            groups_created=tally.groups_created,
            groups_kept=tally.groups_kept,
            groups_deleted=tally.groups_deleted,
            record=record,
        )

    async def _reconcile_personal(
        self,
        activity: ExamActivityProtocol,
        personal: Override,
        group_overrides: list[Override],
        minutes: int,
        applied_by: int,
        now: datetime,
    ) -> PersonalOutcome:
        """Extend or restore one personal override."""
        activity_id = activity.activity_id
        settings = activity.effective_settings(personal, group_overrides)
        buffer = activity.base_window().exam_buffer
        if not window_contains(settings.open, settings.close, buffer, now):
            return PersonalOutcome.SKIPPED

        audit = await self._ledger.get_audit(activity_id, personal.override_id)
        if audit is not None and audit.original_snapshot is None:
            raise MissingOriginalSnapshotError(activity_id, personal.override_id)

        if minutes == 0:
            if audit is None:
                return PersonalOutcome.UNCHANGED
            original = audit.original_fields()
            if original != personal.fields:
                await self._store.save_override(activity_id, personal.scope, original)
            await self._ledger.delete_audit(activity_id, personal.override_id)
            self._log.debug(
                "personal_override_restored",
                activity_id=activity_id,
                override_id=personal.override_id,
            )
            return PersonalOutcome.RESTORED

        previous = audit.extension_minutes if audit is not None else 0
        new_fields = extended_fields(settings, timedelta(minutes=minutes - previous))
        snapshot = (
            audit.original_snapshot
            if audit is not None
            else OverrideSnapshot.from_fields(personal.fields).encode()
        )

        changed = new_fields != personal.fields
        if changed:
            await self._store.save_override(activity_id, personal.scope, new_fields)

        if (
            audit is None
            or audit.extension_minutes != minutes
            or audit.original_snapshot != snapshot
        ):
            await self._ledger.upsert_audit(
                GuardOverrideAudit(
                    activity_id=activity_id,
                    override_id=personal.override_id,
                    extension_minutes=minutes,
                    original_snapshot=snapshot,
                    modified_by=applied_by,
                    modified_at=now,
                )
            )

        if not changed:
            return PersonalOutcome.UNCHANGED
        self._log.debug(
            "personal_override_extended",
            activity_id=activity_id,
            override_id=personal.override_id,
            previous_minutes=previous,
            minutes=minutes,
        )
        return PersonalOutcome.UPDATED

    async def _locate_synthetic_groups(
        self, activity: ExamActivityProtocol
    ) -> list[tuple[Group, SyntheticGroupName]]:
        """Find the synthetic groups of an activity by name prefix.

        Raises:
            MultipleLegacyGroupsError: If more than one group carries a
                legacy name without sequence number.
        """
        found: list[tuple[Group, SyntheticGroupName]] = []
        for group in await self._store.find_groups_by_name_prefix(
            activity.course_id, SyntheticGroupName.prefix(activity.activity_id)
        ):
            name = SyntheticGroupName.parse(group.name)
            if name is None or name.activity_id != activity.activity_id:
                continue
            found.append((group, name))

        legacy = [group.group_id for group, name in found if name.is_legacy]
        if len(legacy) > 1:
            raise MultipleLegacyGroupsError(activity.activity_id, legacy)
        return found

    async def _retire_synthetic_groups(
        self,
        activity: ExamActivityProtocol,
        synthetic: list[tuple[Group, SyntheticGroupName]],
        group_overrides: dict[int, Override],
        buckets: dict[tuple[object, ...], _Bucket],
        minutes: int,
        now: datetime,
        tally: _Tally,
    ) -> list[int]:
        """Delete active synthetic groups, keeping exact matches.

        A group counts as active until its override close plus the exam
        buffer has passed, the same rule as a student's own window.
        An active group is kept only when its name carries `minutes`, its
        override equals a bucket's payload and its members equal the
        bucket's members. Each bucket claims at most one group.

        Returns:
            Sequence numbers of the groups left in place.
        """
        surviving: list[int] = []
        delta = timedelta(minutes=minutes)
        buffer = activity.base_window().exam_buffer

        for group, name in synthetic:
            override = group_overrides.get(group.group_id)
            if (
                override is not None
                and override.close is not None
                and not window_contains(None, override.close, buffer, now)
            ):
                surviving.append(name.sequence or 0)
                continue

            if (
                minutes > 0
                and override is not None
                and name.extension_minutes == minutes
            ):
                members = await self._store.list_group_members(group.group_id)
                bucket = self._matching_bucket(buckets, override, members, delta)
                if bucket is not None:
                    bucket.claimed = True
                    surviving.append(name.sequence or 0)
                    tally.groups_kept += 1
                    self._log.debug(
                        "synthetic_group_kept",
                        activity_id=activity.activity_id,
                        group_id=group.group_id,
                    )
                    continue

            if override is not None:
                await self._ledger.delete_audit(
                    activity.activity_id, override.override_id
                )
                await self._store.delete_override(override.override_id)
            await self._store.delete_group(group.group_id)
            tally.groups_deleted += 1
            self._log.debug(
                "synthetic_group_deleted",
                activity_id=activity.activity_id,
                group_id=group.group_id,
                group_name=group.name,
            )

        return surviving

    @staticmethod
    def _matching_bucket(
        buckets: dict[tuple[object, ...], _Bucket],
        override: Override,
        members: list[int],
        delta: timedelta,
    ) -> _Bucket | None:
        for bucket in buckets.values():
            if bucket.claimed:
                continue
            if extended_fields(bucket.settings, delta) != override.fields:
                continue
            if sorted(bucket.members) != sorted(members):
                continue
            return bucket
        return None

    async def _create_synthetic_group(
        self,
        activity: ExamActivityProtocol,
        bucket: _Bucket,
        minutes: int,
        sequence: int,
        applied_by: int,
        now: datetime,
    ) -> None:
        name = SyntheticGroupName(activity.activity_id, minutes, sequence).render()
        group_id = await self._store.create_group(activity.course_id, name)
        for user_id in bucket.members:
            await self._store.add_member(group_id, user_id)

        payload = extended_fields(bucket.settings, timedelta(minutes=minutes))
        override_id = await activity.create_override(
            OverrideScope.group(group_id), payload
        )
        await self._ledger.upsert_audit(
            GuardOverrideAudit(
                activity_id=activity.activity_id,
                override_id=override_id,
                extension_minutes=minutes,
                original_snapshot=None,
                modified_by=applied_by,
                modified_at=now,
            )
        )
        self._log.debug(
            "synthetic_group_created",
            activity_id=activity.activity_id,
            group_id=group_id,
            group_name=name,
            members=len(bucket.members),
        )
