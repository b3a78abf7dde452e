"""Domain errors for Exam Guard.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from ExamGuardError.
"""

from examguard.domain.errors.activity import (
    ActivityNotFoundError,
    UnsupportedActivityError,
)
from examguard.domain.errors.consistency import (
    InconsistentStateError,
    MissingOriginalSnapshotError,
    MultipleLegacyGroupsError,
)
from examguard.domain.errors.extension import (
    AuthorizationError,
    BulkExtensionDisabledError,
    ExtensionError,
    InvalidExtensionError,
    NotActiveExamActivityError,
)
from examguard.domain.errors.guard import GuardRoleNotFoundError
from examguard.domain.errors.store import StoreError

__all__: list[str] = [
    "ActivityNotFoundError",
    "AuthorizationError",
    "BulkExtensionDisabledError",
    "ExtensionError",
    "GuardRoleNotFoundError",
    "InconsistentStateError",
    "InvalidExtensionError",
    "MissingOriginalSnapshotError",
    "MultipleLegacyGroupsError",
    "NotActiveExamActivityError",
    "StoreError",
    "UnsupportedActivityError",
]
