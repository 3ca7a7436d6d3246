"""FieldDescriptor: a field's value plus its writable/enumerable/configurable flags."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """Describes one field of a Record.

    writable:     plain assignment may replace the value
    enumerable:   the key appears in Record.enumerable_keys()
    configurable: the field may be deleted or redefined

    All flags default to True, so FieldDescriptor(v) behaves exactly
    like a plain assignment of v.
    """
    value: Any
    writable: bool = True
    enumerable: bool = True
    configurable: bool = True

    def with_value(self, value: Any) -> FieldDescriptor:
        """Copy of this descriptor holding a new value, same flags."""
        return FieldDescriptor(
            value=value,
            writable=self.writable,
            enumerable=self.enumerable,
            configurable=self.configurable,
        )
