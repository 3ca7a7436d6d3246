"""AccessControlledView: mediate every structural operation on a record.

Each operation does its own privacy check before touching the record:

    read / write / remove / define   private key -> PropertyInaccessible
    contains                         private key -> False (never raises)
    list_keys                        private keys silently omitted

Only textual keys are ever private. Symbols and other non-str keys go
straight through, whatever the predicate says.

The view keeps a reference to the record, never a copy: public writes
land on the record and direct record writes show up through the view.

has_own() and describe() are own-field introspection and deliberately
skip the privacy check, so a private field can still be seen to exist
that way even though contains() reports it absent. Both still honour
revocation.

Single-actor: no locking. Share a view across threads only with
external synchronisation.
"""
from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator, MutableMapping
from typing import Any

from fieldguard.domain.audit import AccessEvent
from fieldguard.domain.config import ViewConfig
from fieldguard.domain.decisions import AccessDecision, Operation
from fieldguard.domain.descriptor import FieldDescriptor
from fieldguard.domain.errors import PropertyInaccessible, ViewRevoked
from fieldguard.domain.predicates import prefix_predicate
from fieldguard.domain.record import Record
from fieldguard.domain.types import UNDEFINED, Key, PrivacyPredicate, ViewId
from fieldguard.view.revocation import RevocationFlag, RevocationToken, ViewState

log = logging.getLogger(__name__)


class AccessControlledView:
    """Wrap one record and hide its private fields.

    Args:
        record: any MutableMapping; Record keeps descriptor flags
        is_private: predicate on textual keys (default: starts with
            config.marker)
        config: ViewConfig (default: marker "_", no limit, no audit)
        flag: shared RevocationFlag; set by create_revocable()

    Usage:
        view = AccessControlledView({"_secret": "x", "name": "ok"})
        view.read("name")        # "ok"
        view.read("_secret")     # raises PropertyInaccessible
        view.contains("_secret") # False
        view.list_keys()         # ["name"]
    """

    __slots__ = (
        "_record",
        "_is_private",
        "_config",
        "_flag",
        "_view_id",
        "_violations",
        "_events",
        "__weakref__",
    )

    def __init__(
        self,
        record: MutableMapping[Key, Any],
        is_private: PrivacyPredicate | None = None,
        *,
        config: ViewConfig | None = None,
        flag: RevocationFlag | None = None,
    ) -> None:
        if not isinstance(record, MutableMapping):
            raise TypeError(
                f"record must be a MutableMapping, got {type(record).__name__}"
            )
        self._config = config if config is not None else ViewConfig()
        if self._config.violation_limit is not None and flag is None:
            raise ValueError("violation_limit needs a revocable view (use create_revocable)")
        if is_private is None:
            is_private = prefix_predicate(self._config.marker)
        elif not callable(is_private):
            raise TypeError("is_private must be callable")
        self._record = record
        self._is_private = is_private
        self._flag = flag
        self._view_id: ViewId = uuid.uuid4()
        self._violations = 0
        self._events: list[AccessEvent] = []

    # -- state -------------------------------------------------------------

    @property
    def view_id(self) -> ViewId:
        return self._view_id

    @property
    def state(self) -> ViewState:
        if self._flag is None:
            return ViewState.ACTIVE
        return self._flag.state

    @property
    def revoked(self) -> bool:
        return self._flag is not None and self._flag.revoked

    @property
    def revocable(self) -> bool:
        return self._flag is not None

    @property
    def violations(self) -> int:
        """Number of operations refused with PropertyInaccessible so far."""
        return self._violations

    @property
    def events(self) -> tuple[AccessEvent, ...]:
        """Audit trail; empty unless config.audit is set.

        Holds operations that completed, were denied by the privacy
        policy, or hit a revoked view. An operation the record itself
        refuses (ReadOnlyField, NonConfigurableField) leaves no event.
        """
        return tuple(self._events)

    # -- the six mediated operations ---------------------------------------

    def read(self, key: Key) -> Any:
        """Current value of a public field, UNDEFINED if absent."""
        self._check_active(Operation.READ, key)
        log.debug("get on property: %r", key)
        if self._hides(key):
            raise self._violation(Operation.READ, key)
        self._note(Operation.READ, key, AccessDecision.ALLOW)
        return self._record.get(key, UNDEFINED)

    def write(self, key: Key, value: Any) -> bool:
        """Assign a public field on the record."""
        self._check_active(Operation.WRITE, key)
        log.debug("set on property: %r", key)
        if self._hides(key):
            raise self._violation(Operation.WRITE, key)
        self._record[key] = value
        self._note(Operation.WRITE, key, AccessDecision.ALLOW)
        return True

    def contains(self, key: Key) -> bool:
        """Presence of a public field. Private fields always look absent."""
        self._check_active(Operation.CONTAINS, key)
        if self._hides(key):
            self._note(Operation.CONTAINS, key, AccessDecision.DENY)
            return False
        self._note(Operation.CONTAINS, key, AccessDecision.ALLOW)
        return key in self._record

    def remove(self, key: Key) -> bool:
        """Delete a public field. Deleting an absent field is a no-op."""
        self._check_active(Operation.REMOVE, key)
        log.debug("delete on property: %r", key)
        if self._hides(key):
            raise self._violation(Operation.REMOVE, key)
        if key in self._record:
            del self._record[key]
        self._note(Operation.REMOVE, key, AccessDecision.ALLOW)
        return True

    def define(self, key: Key, descriptor: FieldDescriptor) -> bool:
        """Define a public field from a descriptor.

        A Record stores the whole descriptor; any other mapping only
        receives descriptor.value.
        """
        self._check_active(Operation.DEFINE, key)
        log.debug("define on property: %r", key)
        if not isinstance(descriptor, FieldDescriptor):
            raise TypeError(
                f"descriptor must be a FieldDescriptor, got {type(descriptor).__name__}"
            )
        if self._hides(key):
            raise self._violation(Operation.DEFINE, key)
        if isinstance(self._record, Record):
            self._record.define(key, descriptor)
        else:
            self._record[key] = descriptor.value
        self._note(Operation.DEFINE, key, AccessDecision.ALLOW)
        return True

    def list_keys(self) -> list[Key]:
        """Public keys in the record's own order."""
        self._check_active(Operation.LIST_KEYS, None)
        keys = [k for k in self._record if not self._hides(k)]
        self._note(Operation.LIST_KEYS, None, AccessDecision.ALLOW)
        return keys

    # -- own-field introspection (not privacy filtered) --------------------

    def has_own(self, key: Key) -> bool:
        """Whether the record itself holds key, private or not."""
        self._check_active(Operation.HAS_OWN, key)
        self._note(Operation.HAS_OWN, key, AccessDecision.ALLOW)
        return key in self._record

    def describe(self, key: Key) -> FieldDescriptor | None:
        """The field's descriptor as the record reports it, or None."""
        self._check_active(Operation.DESCRIBE, key)
        self._note(Operation.DESCRIBE, key, AccessDecision.ALLOW)
        if isinstance(self._record, Record):
            return self._record.describe(key)
        if key not in self._record:
            return None
        return FieldDescriptor(self._record[key])

    # -- mapping protocol --------------------------------------------------

    def __getitem__(self, key: Key) -> Any:
        return self.read(key)

    def __setitem__(self, key: Key, value: Any) -> None:
        self.write(key, value)

    def __delitem__(self, key: Key) -> None:
        self.remove(key)

    def __contains__(self, key: object) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[Key]:
        return iter(self.list_keys())

    def __len__(self) -> int:
        return len(self.list_keys())

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"<AccessControlledView {self._view_id} state={self.state.name}>"

    # -- internals ---------------------------------------------------------

    def _hides(self, key: Key) -> bool:
        return isinstance(key, str) and bool(self._is_private(key))

    def _check_active(self, operation: Operation, key: Key | None) -> None:
        if self._flag is not None and self._flag.revoked:
            self._note(operation, key, AccessDecision.REVOKED)
            raise ViewRevoked(operation.label)

    def _violation(self, operation: Operation, key: Key) -> PropertyInaccessible:
        """Count a denied private-field operation and build its error."""
        self._violations += 1
        self._note(operation, key, AccessDecision.DENY)
        log.warning("%s on private property %r denied", operation.label, key)
        limit = self._config.violation_limit
        if limit is not None and self._violations >= limit and self._flag.revoke():
            log.warning(
                "view %s revoked after %d private-field violations",
                self._view_id, self._violations,
            )
        return PropertyInaccessible(key, operation.label)

    def _note(self, operation: Operation, key: Key | None, decision: AccessDecision) -> None:
        if self._config.audit:
            self._events.append(AccessEvent.create(self._view_id, operation, key, decision))


def create_revocable(
    record: MutableMapping[Key, Any],
    is_private: PrivacyPredicate | None = None,
    *,
    config: ViewConfig | None = None,
) -> tuple[AccessControlledView, RevocationToken]:
    """Build a fresh view over record plus the token that can revoke it.

    Usage:
        view, token = create_revocable({"_secret": "x", "name": "ok"})
        view.read("name")     # "ok"
        token.revoke()
        view.read("name")     # raises ViewRevoked
        token.revoke()        # no-op, returns False
    """
    flag = RevocationFlag()
    view = AccessControlledView(record, is_private, config=config, flag=flag)
    return view, RevocationToken(flag, view.view_id)
