"""Exceptions raised by views and records.

AccessError and its subclasses come from the view policy: the record is
never touched when one of them is raised. FieldError and its subclasses
come from a Record's own descriptor flags.
"""
from __future__ import annotations

from fieldguard.domain.types import Key


class AccessError(Exception):
    """Base class for view policy failures."""


class PropertyInaccessible(AccessError):
    """Raised when an operation targets a private key through a view."""

    def __init__(self, key: Key, operation: str) -> None:
        self.key = key
        self.operation = operation
        super().__init__(f"{operation} on {key!r}: property is inaccessible")


class ViewRevoked(AccessError):
    """Raised by every operation on a view whose token has been revoked."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot perform {operation!r} on a view that has been revoked")


class FieldError(Exception):
    """Base class for record descriptor violations."""

    def __init__(self, key: Key, message: str) -> None:
        self.key = key
        super().__init__(f"{key!r}: {message}")


class ReadOnlyField(FieldError):
    """Raised when assigning to a non-writable field."""


class NonConfigurableField(FieldError):
    """Raised when deleting or redefining a non-configurable field."""
