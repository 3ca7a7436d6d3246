"""Record — the backing key/value store a view wraps.

Any MutableMapping can back a view. Record is the one shipped here: an
insertion-ordered mapping that keeps a FieldDescriptor per field, so
view.define() can store flags and not just a value.

Rules enforced by the record itself (not by any view):
  - assigning to a non-writable field raises ReadOnlyField
  - deleting a non-configurable field raises NonConfigurableField
  - redefining a non-configurable field raises NonConfigurableField,
    unless the new descriptor is identical to the current one
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any

from fieldguard.domain.descriptor import FieldDescriptor
from fieldguard.domain.errors import NonConfigurableField, ReadOnlyField
from fieldguard.domain.types import Key


class Record(MutableMapping):
    """Insertion-ordered mapping of key -> FieldDescriptor.

    Usage:
        record = Record({"_secret": "x", "name": "ok"})
        record["name"]                     # "ok"
        record.define("id", FieldDescriptor(7, writable=False))
        record["id"] = 8                   # raises ReadOnlyField
    """

    __slots__ = ("_fields",)

    def __init__(
        self,
        data: Mapping[Key, Any] | Iterable[tuple[Key, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        self._fields: dict[Key, FieldDescriptor] = {}
        if data is not None:
            self.update(data)
        if kwargs:
            self.update(kwargs)

    def __getitem__(self, key: Key) -> Any:
        return self._fields[key].value

    def __setitem__(self, key: Key, value: Any) -> None:
        current = self._fields.get(key)
        if current is None:
            self._fields[key] = FieldDescriptor(value)
            return
        if not current.writable:
            raise ReadOnlyField(key, "field is not writable")
        self._fields[key] = current.with_value(value)

    def __delitem__(self, key: Key) -> None:
        current = self._fields[key]
        if not current.configurable:
            raise NonConfigurableField(key, "field cannot be deleted")
        del self._fields[key]

    def __iter__(self) -> Iterator[Key]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {d.value!r}" for k, d in self._fields.items())
        return f"Record({{{items}}})"

    def define(self, key: Key, descriptor: FieldDescriptor) -> None:
        """Create or replace a field from a full descriptor."""
        current = self._fields.get(key)
        if current is not None and not current.configurable and current != descriptor:
            raise NonConfigurableField(key, "field cannot be redefined")
        self._fields[key] = descriptor

    def describe(self, key: Key) -> FieldDescriptor | None:
        """The field's descriptor, or None if absent."""
        return self._fields.get(key)

    def enumerable_keys(self) -> list[Key]:
        """Keys whose descriptor is enumerable, in insertion order."""
        return [k for k, d in self._fields.items() if d.enumerable]
