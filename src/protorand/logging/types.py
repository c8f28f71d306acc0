"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GenerationRecord:
    """Immutable record of a single top-level generation call.

    Attributes:
        timestamp_ns: Wall-clock time of generation (nanoseconds since epoch).
        elapsed_ms: Time spent synthesizing (milliseconds).
        message_type: Full name of the generated message type.
        output_kind: ``'dynamic'`` or ``'dict'``.
        source_name: Name of the random source that provided draws.
        seed: Seed of the generator, ``None`` if unseeded.
        max_depth: Depth budget the call started with.
        deepest_level: Deepest recursion level reached (root = 0).
        messages_built: Messages synthesized by recursion, root included.
        fields_populated: Fields assigned across all messages.
        defaults_substituted: Nested fields left at the default instance
            because the depth budget was spent.
    """

    # Timing
    timestamp_ns: int
    elapsed_ms: float

    # What was generated
    message_type: str
    output_kind: str

    # Randomness
    source_name: str
    seed: int | None

    # Recursion
    max_depth: int
    deepest_level: int
    messages_built: int
    fields_populated: int
    defaults_substituted: int
