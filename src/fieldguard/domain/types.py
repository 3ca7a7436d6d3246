"""Shared key types, the Symbol key and the UNDEFINED sentinel."""
from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import TypeAlias
from uuid import UUID

Key: TypeAlias = Hashable
ViewId: TypeAlias = UUID
EventId: TypeAlias = UUID
PrivacyPredicate: TypeAlias = Callable[[Key], bool]


class Symbol:
    """Opaque symbolic key.

    Every instance is distinct, even with the same description, and
    compares/hashes by identity. Symbols never match a privacy predicate
    because the predicate only looks at textual keys.
    """
    __slots__ = ("description",)

    def __init__(self, description: str | None = None) -> None:
        self.description = description

    def __repr__(self) -> str:
        if self.description is None:
            return "Symbol()"
        return f"Symbol({self.description!r})"


class _Undefined:
    """Singleton returned by a view read of an absent public key."""
    __slots__ = ()
    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()
