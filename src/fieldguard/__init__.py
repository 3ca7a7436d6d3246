"""fieldguard: views that hide and protect a record's private fields.

    from fieldguard import AccessControlledView, create_revocable

    record = {"_secret": "x", "name": "ok"}
    view, token = create_revocable(record)
    view.read("name")        # "ok"
    view.contains("_secret") # False
    token.revoke()
"""
from fieldguard.domain import (
    UNDEFINED,
    AccessDecision,
    AccessError,
    AccessEvent,
    FieldDescriptor,
    FieldError,
    NonConfigurableField,
    Operation,
    PropertyInaccessible,
    ReadOnlyField,
    Record,
    Symbol,
    ViewConfig,
    ViewRevoked,
    never_private,
    prefix_predicate,
)
from fieldguard.view import (
    AccessControlledView,
    RevocationToken,
    ViewRegistry,
    ViewState,
    create_revocable,
)

__all__ = [
    "UNDEFINED",
    "AccessDecision",
    "AccessError",
    "AccessEvent",
    "FieldDescriptor",
    "FieldError",
    "NonConfigurableField",
    "Operation",
    "PropertyInaccessible",
    "ReadOnlyField",
    "Record",
    "Symbol",
    "ViewConfig",
    "ViewRevoked",
    "never_private",
    "prefix_predicate",
    "AccessControlledView",
    "RevocationToken",
    "ViewRegistry",
    "ViewState",
    "create_revocable",
]
