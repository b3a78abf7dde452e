"""Domain primitives shared across layers."""

from examguard.domain.primitives.ensure_atomicity import (
    AtomicOperationContext,
    RollbackHandler,
)

__all__: list[str] = ["AtomicOperationContext", "RollbackHandler"]
