"""AccessEvent — immutable record of one operation attempted on a view.

Only collected when ViewConfig.audit is set. A contains() check on a
private key is recorded as DENY even though it answers False instead of
raising. Operations the record itself refuses (ReadOnlyField,
NonConfigurableField) are not recorded.
"""
from __future__ import annotations

import time as time_module
import uuid
from dataclasses import dataclass

from fieldguard.domain.decisions import AccessDecision, Operation
from fieldguard.domain.types import EventId, Key, ViewId


@dataclass(frozen=True, slots=True)
class AccessEvent:
    """Immutable audit entry for a view operation."""
    event_id: EventId
    view_id: ViewId
    operation: Operation
    key: Key | None                 # None for list_keys
    decision: AccessDecision
    timestamp: float                # Unix epoch seconds (time.time())

    @classmethod
    def create(
        cls,
        view_id: ViewId,
        operation: Operation,
        key: Key | None,
        decision: AccessDecision,
    ) -> AccessEvent:
        """Factory: create an event with auto-generated ID and timestamp."""
        return cls(
            event_id=uuid.uuid4(),
            view_id=view_id,
            operation=operation,
            key=key,
            decision=decision,
            timestamp=time_module.time(),
        )
