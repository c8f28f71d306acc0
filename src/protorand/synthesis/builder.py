"""Generic message construction behind one abstract capability.

The synthesis algorithm never touches a concrete message representation.
It asks a :class:`MessageBuilder` to set a singular value, append one list
element or put one map entry, addressed by field descriptor, and finally
to build the instance.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from google.protobuf import message_factory
from google.protobuf.descriptor import FieldDescriptor

if TYPE_CHECKING:
    from google.protobuf.descriptor import Descriptor
    from google.protobuf.message import Message


class MessageBuilder(ABC):
    """Accumulates field values for one instance of *descriptor*.

    Args:
        descriptor: Schema of the message being built. Read-only.
    """

    def __init__(self, descriptor: Descriptor) -> None:
        self._descriptor = descriptor

    @property
    def descriptor(self) -> Descriptor:
        return self._descriptor

    @abstractmethod
    def set(self, field: FieldDescriptor, value: Any) -> None:
        """Assign a singular field."""

    @abstractmethod
    def append(self, field: FieldDescriptor, value: Any) -> None:
        """Append one element to a repeated field."""

    @abstractmethod
    def put(self, field: FieldDescriptor, key: Any, value: Any) -> None:
        """Insert one entry into a map field."""

    @abstractmethod
    def build(self) -> Any:
        """Return the instance. An untouched builder yields the default instance."""


class DynamicMessageBuilder(MessageBuilder):
    """Builds a dynamic protobuf message from the descriptor alone."""

    def __init__(self, descriptor: Descriptor) -> None:
        super().__init__(descriptor)
        self._message: Message = message_factory.GetMessageClass(descriptor)()

    def set(self, field: FieldDescriptor, value: Any) -> None:
        if field.type == FieldDescriptor.TYPE_MESSAGE:
            target = getattr(self._message, field.name)
            # Presence must be recorded even when value is the empty message.
            target.SetInParent()
            target.MergeFrom(value)
        else:
            setattr(self._message, field.name, value)

    def append(self, field: FieldDescriptor, value: Any) -> None:
        container = getattr(self._message, field.name)
        if field.type == FieldDescriptor.TYPE_MESSAGE:
            container.add().MergeFrom(value)
        else:
            container.append(value)

    def put(self, field: FieldDescriptor, key: Any, value: Any) -> None:
        container = getattr(self._message, field.name)
        value_field = field.message_type.fields_by_name["value"]
        if value_field.type == FieldDescriptor.TYPE_MESSAGE:
            container[key].MergeFrom(value)
        else:
            container[key] = value

    def build(self) -> Message:
        return self._message


class DictMessageBuilder(MessageBuilder):
    """Builds a plain mapping from field number to value.

    Nested messages are dicts, repeated fields are lists and map fields
    are dicts keyed by the map key.
    """

    def __init__(self, descriptor: Descriptor) -> None:
        super().__init__(descriptor)
        self._values: dict[int, Any] = {}

    def set(self, field: FieldDescriptor, value: Any) -> None:
        self._values[field.number] = value

    def append(self, field: FieldDescriptor, value: Any) -> None:
        self._values.setdefault(field.number, []).append(value)

    def put(self, field: FieldDescriptor, key: Any, value: Any) -> None:
        self._values.setdefault(field.number, {})[key] = value

    def build(self) -> dict[int, Any]:
        return self._values
