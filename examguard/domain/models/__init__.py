"""Domain models for Exam Guard."""

from examguard.domain.models.activity import ActivityInstance, ActivityWindow
from examguard.domain.models.effective_settings import (
    EffectiveSettings,
    best_group_fields,
    clamp_duration,
    resolve_effective_settings,
)
from examguard.domain.models.extension import (
    ExtensionRecord,
    GuardOverrideAudit,
    OverrideSnapshot,
)
from examguard.domain.models.group import Group
from examguard.domain.models.guard import GuardMarker
from examguard.domain.models.override import (
    Override,
    OverrideFields,
    OverrideScope,
    ScopeKind,
)
from examguard.domain.models.synthetic_group import SyntheticGroupName

__all__: list[str] = [
    "ActivityInstance",
    "ActivityWindow",
    "EffectiveSettings",
    "ExtensionRecord",
    "Group",
    "GuardMarker",
    "GuardOverrideAudit",
    "Override",
    "OverrideFields",
    "OverrideScope",
    "OverrideSnapshot",
    "ScopeKind",
    "SyntheticGroupName",
    "best_group_fields",
    "clamp_duration",
    "resolve_effective_settings",
]
