"""Domain model for fieldguard.

Re-exports all public types for convenient access:
    from fieldguard.domain import Record, FieldDescriptor, Symbol, UNDEFINED
"""
from fieldguard.domain.audit import AccessEvent
from fieldguard.domain.config import ViewConfig
from fieldguard.domain.decisions import AccessDecision, Operation
from fieldguard.domain.descriptor import FieldDescriptor
from fieldguard.domain.errors import (
    AccessError,
    FieldError,
    NonConfigurableField,
    PropertyInaccessible,
    ReadOnlyField,
    ViewRevoked,
)
from fieldguard.domain.predicates import DEFAULT_MARKER, never_private, prefix_predicate
from fieldguard.domain.record import Record
from fieldguard.domain.types import (
    UNDEFINED,
    EventId,
    Key,
    PrivacyPredicate,
    Symbol,
    ViewId,
)

__all__ = [
    "AccessEvent",
    "ViewConfig",
    "AccessDecision",
    "Operation",
    "FieldDescriptor",
    "AccessError",
    "FieldError",
    "NonConfigurableField",
    "PropertyInaccessible",
    "ReadOnlyField",
    "ViewRevoked",
    "DEFAULT_MARKER",
    "never_private",
    "prefix_predicate",
    "Record",
    "UNDEFINED",
    "EventId",
    "Key",
    "PrivacyPredicate",
    "Symbol",
    "ViewId",
]
