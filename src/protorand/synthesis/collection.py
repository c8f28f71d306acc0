"""Population policy for repeated and map fields.

Collections are always singletons: one list element, one map entry.
Consumers that depend on size variation will not get it here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from google.protobuf.descriptor import FieldDescriptor

    from protorand.synthesis.values import FieldValueSynthesizer, NestedFn


class CollectionPolicy:
    """Wraps a :class:`FieldValueSynthesizer` to fill collections."""

    size = 1

    def __init__(self, values: FieldValueSynthesizer) -> None:
        self._values = values

    def elements(self, field: FieldDescriptor, nested: NestedFn) -> list[Any]:
        """Return the elements for a repeated field."""
        return [self._values.synthesize(field, nested) for _ in range(self.size)]

    def entry(self, field: FieldDescriptor, nested: NestedFn) -> tuple[Any, Any]:
        """Return one ``(key, value)`` pair for a map field.

        The key is drawn before the value.
        """
        entry_type = field.message_type
        key = self._values.synthesize(entry_type.fields_by_name["key"], nested)
        value = self._values.synthesize(entry_type.fields_by_name["value"], nested)
        return key, value
