"""Privacy predicates: decide whether a field name is private.

A predicate is any callable taking a key and returning a bool. Views
only ever hand it textual (str) keys; symbols and other non-str keys
are public without consulting the predicate.
"""
from __future__ import annotations

from fieldguard.domain.types import Key, PrivacyPredicate

DEFAULT_MARKER = "_"


def prefix_predicate(marker: str = DEFAULT_MARKER) -> PrivacyPredicate:
    """Predicate matching names that start with marker.

    Raises ValueError for an empty marker, which would make every
    textual key private.
    """
    if not isinstance(marker, str):
        raise TypeError(f"marker must be a str, got {type(marker).__name__}")
    if not marker:
        raise ValueError("marker must be a non-empty string")

    def is_private(key: Key) -> bool:
        return isinstance(key, str) and key.startswith(marker)

    is_private.__name__ = f"starts_with_{marker!r}"
    return is_private


def never_private(key: Key) -> bool:
    """Pass-through predicate: nothing is private."""
    return False
