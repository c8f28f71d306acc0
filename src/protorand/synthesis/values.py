"""Per-kind random value synthesis for a single field.

Every wire-encoding variant of an integer width/signedness (plain, zigzag,
fixed) shares the same underlying draw. Nested messages are delegated back
to the caller so that the depth budget stays with the message synthesizer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from google.protobuf.descriptor import FieldDescriptor

from protorand.config import DEFAULT_CHARS, DEFAULT_STRING_LENGTH
from protorand.exceptions import UnsupportedFieldKindError

if TYPE_CHECKING:
    from collections.abc import Callable

    from google.protobuf.descriptor import Descriptor, EnumDescriptor

    from protorand.sources.base import RandomSource

    NestedFn = Callable[[Descriptor], Any]

_SIGNED_32 = (
    FieldDescriptor.TYPE_INT32,
    FieldDescriptor.TYPE_SINT32,
    FieldDescriptor.TYPE_SFIXED32,
)
_SIGNED_64 = (
    FieldDescriptor.TYPE_INT64,
    FieldDescriptor.TYPE_SINT64,
    FieldDescriptor.TYPE_SFIXED64,
)
_UNSIGNED_32 = (FieldDescriptor.TYPE_UINT32, FieldDescriptor.TYPE_FIXED32)
_UNSIGNED_64 = (FieldDescriptor.TYPE_UINT64, FieldDescriptor.TYPE_FIXED64)


class FieldValueSynthesizer:
    """Produces one random value for a field's value kind.

    Args:
        source: Random source consumed by every draw.
        string_length: Number of characters in string and bytes values.
        alphabet: Characters drawn uniformly for string and bytes values.
    """

    def __init__(
        self,
        source: RandomSource,
        string_length: int = DEFAULT_STRING_LENGTH,
        alphabet: str = DEFAULT_CHARS,
    ) -> None:
        self._source = source
        self._string_length = string_length
        self._alphabet = alphabet

        self._dispatch: dict[int, Callable[[], Any]] = {}
        for kind in _SIGNED_32:
            self._dispatch[kind] = source.int32
        for kind in _SIGNED_64:
            self._dispatch[kind] = source.int64
        for kind in _UNSIGNED_32:
            self._dispatch[kind] = source.uint32
        for kind in _UNSIGNED_64:
            self._dispatch[kind] = source.uint64
        self._dispatch[FieldDescriptor.TYPE_FLOAT] = source.float32
        self._dispatch[FieldDescriptor.TYPE_DOUBLE] = source.float64
        self._dispatch[FieldDescriptor.TYPE_BOOL] = self.random_bool
        self._dispatch[FieldDescriptor.TYPE_STRING] = self.random_string
        self._dispatch[FieldDescriptor.TYPE_BYTES] = self.random_bytes

    @property
    def supported_kinds(self) -> frozenset[int]:
        """Value kinds with a synthesis rule, enum and message included."""
        return frozenset(self._dispatch) | {
            FieldDescriptor.TYPE_ENUM,
            FieldDescriptor.TYPE_MESSAGE,
        }

    def synthesize(self, field: FieldDescriptor, nested: NestedFn) -> Any:
        """Return one random value for *field*.

        Args:
            field: Descriptor of the field (or map key/value) to fill.
            nested: Called with the message type for message-kind fields.

        Returns:
            A value assignable to the field.

        Raises:
            UnsupportedFieldKindError: If the kind has no synthesis rule.
        """
        kind = field.type
        if kind == FieldDescriptor.TYPE_MESSAGE:
            return nested(field.message_type)
        if kind == FieldDescriptor.TYPE_ENUM:
            return self.choose_enum_value(field.enum_type)
        draw = self._dispatch.get(kind)
        if draw is None:
            raise UnsupportedFieldKindError(field.full_name, kind)
        return draw()

    def random_bool(self) -> bool:
        return self._source.int32() % 2 == 0

    def random_string(self) -> str:
        alphabet = self._alphabet
        return "".join(
            alphabet[self._source.intn(len(alphabet))] for _ in range(self._string_length)
        )

    def random_bytes(self) -> bytes:
        """Same draw as :meth:`random_string`, encoded. Never arbitrary binary."""
        return self.random_string().encode("utf-8")

    def choose_enum_value(self, enum_type: EnumDescriptor) -> int:
        """Pick a declared enum number.

        With two or more declared values the index is drawn from
        ``[0, n - 2]``, so the last declared value is never chosen. Suspected
        off-by-one, kept for compatibility.
        """
        values = enum_type.values
        if len(values) <= 1:
            return values[0].number
        return values[self._source.intn(len(values) - 1)].number
