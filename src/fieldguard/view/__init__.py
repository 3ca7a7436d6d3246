"""Access-controlled views over a record.

AccessControlledView hides fields matched by a privacy predicate.
create_revocable() pairs a view with a RevocationToken that can cut it
off for good, and ViewRegistry issues such views over one shared
storage record.
"""
from fieldguard.view.access_view import AccessControlledView, create_revocable
from fieldguard.view.registry import ViewRegistry
from fieldguard.view.revocation import (
    RevocationFlag,
    RevocationToken,
    ViewState,
)

__all__ = [
    "AccessControlledView",
    "create_revocable",
    "ViewRegistry",
    "RevocationFlag",
    "RevocationToken",
    "ViewState",
]
