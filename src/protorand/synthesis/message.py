"""Depth-bounded recursive synthesis of whole messages.

Walks a message descriptor in declaration order, choosing oneof members
first, then filling every eligible field. Nested messages recurse with a
decremented depth budget; once the budget is spent the nested field gets
the default (empty) instance of its type instead. This is what terminates
self-referential and mutually recursive schemas.

A single draw order is used throughout, so a fixed schema plus a fixed
random stream always produces the same message.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from google.protobuf.descriptor import FieldDescriptor

from protorand.config import DEFAULT_MAX_DEPTH

if TYPE_CHECKING:
    from collections.abc import Callable

    from google.protobuf.descriptor import Descriptor

    from protorand.synthesis.builder import MessageBuilder
    from protorand.synthesis.collection import CollectionPolicy
    from protorand.synthesis.oneof import OneofSelector
    from protorand.synthesis.values import FieldValueSynthesizer


@dataclass(frozen=True, slots=True)
class RecursionGuard:
    """Remaining levels of nested-message recursion.

    Attributes:
        remaining: Levels still allowed below the current message.
    """

    remaining: int

    def __post_init__(self) -> None:
        if self.remaining < 0:
            raise ValueError(f"Depth budget must be non-negative, got {self.remaining}")

    @property
    def exhausted(self) -> bool:
        return self.remaining == 0

    def descend(self) -> RecursionGuard:
        """Return the budget for one level further down.

        Raises:
            ValueError: If the budget is already exhausted.
        """
        return RecursionGuard(self.remaining - 1)


@dataclass(slots=True)
class SynthesisStats:
    """Counters accumulated over one top-level synthesis call.

    Attributes:
        messages_built: Messages synthesized by recursion, root included.
        fields_populated: Fields assigned across all synthesized messages.
        defaults_substituted: Nested fields given the default instance
            because the depth budget was spent.
        deepest_level: Deepest recursion level reached (root = 0).
    """

    messages_built: int = 0
    fields_populated: int = 0
    defaults_substituted: int = 0
    deepest_level: int = 0


def is_map_field(field: FieldDescriptor) -> bool:
    """Whether *field* is a map (a repeated synthetic map-entry message)."""
    return (
        field.type == FieldDescriptor.TYPE_MESSAGE
        and field.message_type.GetOptions().map_entry
    )


class MessageSynthesizer:
    """Fills every field of a message descriptor with random values.

    Args:
        values: Per-kind value synthesis.
        oneofs: Oneof member selection.
        collections: Repeated/map population policy.
        builder_factory: Creates an empty :class:`MessageBuilder` for a
            descriptor; decides the output representation.
        max_depth: Depth budget for a top-level call.
    """

    def __init__(
        self,
        values: FieldValueSynthesizer,
        oneofs: OneofSelector,
        collections: CollectionPolicy,
        builder_factory: Callable[[Descriptor], MessageBuilder],
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self._values = values
        self._oneofs = oneofs
        self._collections = collections
        self._builder_factory = builder_factory
        self._max_depth = max_depth

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def synthesize(
        self,
        descriptor: Descriptor,
        guard: RecursionGuard | None = None,
        stats: SynthesisStats | None = None,
    ) -> Any:
        """Build a fully populated instance of *descriptor*.

        Args:
            descriptor: Message schema. Never mutated.
            guard: Depth budget; defaults to ``max_depth``.
            stats: Counters to accumulate into, if the caller wants them.

        Returns:
            Whatever the builder factory's builders produce.

        Raises:
            UnsupportedFieldKindError: If any reachable field has a kind
                without a synthesis rule. Nothing is returned in that case.
        """
        if guard is None:
            guard = RecursionGuard(self._max_depth)
        if stats is None:
            stats = SynthesisStats()
        return self._synthesize(descriptor, guard, stats, 0)

    def default_instance(self, descriptor: Descriptor) -> Any:
        """Return the zero-valued instance of *descriptor*."""
        return self._builder_factory(descriptor).build()

    def _synthesize(
        self,
        descriptor: Descriptor,
        guard: RecursionGuard,
        stats: SynthesisStats,
        level: int,
    ) -> Any:
        # Oneof choices are drawn before any field value.
        selected: dict[str, int] = {}
        for oneof in descriptor.oneofs:
            member = self._oneofs.select(oneof)
            if member is not None:
                selected[oneof.full_name] = member.number

        def nested(message_type: Descriptor) -> Any:
            if guard.exhausted:
                stats.defaults_substituted += 1
                return self.default_instance(message_type)
            return self._synthesize(message_type, guard.descend(), stats, level + 1)

        builder = self._builder_factory(descriptor)
        for field in descriptor.fields:
            oneof = field.containing_oneof
            if oneof is not None and selected.get(oneof.full_name) != field.number:
                continue

            if is_map_field(field):
                key, value = self._collections.entry(field, nested)
                builder.put(field, key, value)
            elif field.is_repeated:
                for element in self._collections.elements(field, nested):
                    builder.append(field, element)
            else:
                builder.set(field, self._values.synthesize(field, nested))
            stats.fields_populated += 1

        stats.messages_built += 1
        stats.deepest_level = max(stats.deepest_level, level)
        return builder.build()
