"""Public entry point: random message generation.

``ProtoRand`` owns its configuration, its random source and the synthesis
components wired to that source. Typical use::

    pr = ProtoRand(seed=42)
    msg = pr.gen(my_pb2.Order)          # concrete instance
    dyn = pr.new_dynamic(descriptor)    # dynamic message from a bare descriptor
    raw = pr.new_dict(descriptor)       # {field_number: value, ...}

A generator is not safe for concurrent use. Give each thread its own
instance, or call :meth:`ProtoRand.spawn` for an independent stream.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from protorand.config import ProtoRandConfig, resolve_config
from protorand.convert import merge_into
from protorand.exceptions import UnsupportedFieldKindError
from protorand.logging.logger import GenerationLogger
from protorand.logging.types import GenerationRecord
from protorand.sources.registry import RandomSourceRegistry
from protorand.synthesis.builder import DictMessageBuilder, DynamicMessageBuilder
from protorand.synthesis.collection import CollectionPolicy
from protorand.synthesis.message import MessageSynthesizer, SynthesisStats
from protorand.synthesis.oneof import OneofSelector
from protorand.synthesis.values import FieldValueSynthesizer

if TYPE_CHECKING:
    from collections.abc import Callable

    from google.protobuf.descriptor import Descriptor
    from google.protobuf.message import Message

    from protorand.sources.base import RandomSource
    from protorand.synthesis.builder import MessageBuilder

logger = logging.getLogger("protorand")


class ProtoRand:
    """Source of randomly populated protobuf messages.

    Args:
        seed: Seed for deterministic output. Overrides ``config.seed``.
        config: Base configuration; loaded from the environment if omitted.
        source: Random source to draw from. Built from
            ``config.random_source_type`` if omitted.
        **overrides: Per-instance config overrides (e.g. ``max_depth=4``).

    Raises:
        ConfigValidationError: If an override is unknown or invalid.
        KeyError: If ``random_source_type`` names no registered source.
    """

    def __init__(
        self,
        seed: int | None = None,
        config: ProtoRandConfig | None = None,
        source: RandomSource | None = None,
        **overrides: Any,
    ) -> None:
        if seed is not None:
            overrides["seed"] = seed
        self._config = resolve_config(config if config is not None else ProtoRandConfig(), overrides)

        if source is None:
            source = RandomSourceRegistry.build(self._config.random_source_type, self._config.seed)
        elif seed is not None:
            source.seed(seed)
        self._source = source

        self._logger = GenerationLogger(self._config)
        self._values = FieldValueSynthesizer(
            source,
            string_length=self._config.string_length,
            alphabet=self._config.string_alphabet,
        )
        self._oneofs = OneofSelector(source)
        self._collections = CollectionPolicy(self._values)

    @property
    def config(self) -> ProtoRandConfig:
        return self._config

    @property
    def source(self) -> RandomSource:
        return self._source

    @property
    def generation_logger(self) -> GenerationLogger:
        return self._logger

    def seed(self, value: int | None) -> None:
        """Reinitialize the random stream.

        Args:
            value: New seed, or ``None`` to reseed from OS entropy.
        """
        self._source.seed(value)
        self._config = self._config.model_copy(update={"seed": value})

    def spawn(self) -> ProtoRand:
        """Return a generator with an independent stream drawn from this one.

        Deterministic whenever this generator is seeded. Use one spawned
        generator per thread.
        """
        child_config = self._config.model_copy(update={"seed": None})
        return ProtoRand(config=child_config, source=self._source.spawn())

    def gen(self, message: Message | type[Message]) -> Message:
        """Return a random instance of the same concrete type as *message*.

        Args:
            message: A message class or instance; only its type is used and
                an instance is never mutated.

        Raises:
            UnsupportedFieldKindError: If the schema has a field kind with
                no synthesis rule.
        """
        message_cls = message if isinstance(message, type) else type(message)
        generic = self.new_dynamic(message_cls.DESCRIPTOR)
        return merge_into(message_cls(), generic)

    def new_dynamic(self, descriptor: Descriptor) -> Message:
        """Return a random dynamic message built from *descriptor* alone."""
        return self._generate(descriptor, DynamicMessageBuilder, "dynamic")

    def new_dict(self, descriptor: Descriptor) -> dict[int, Any]:
        """Return a random instance as a mapping from field number to value."""
        return self._generate(descriptor, DictMessageBuilder, "dict")

    def _generate(
        self,
        descriptor: Descriptor,
        builder_factory: Callable[[Descriptor], MessageBuilder],
        output_kind: str,
    ) -> Any:
        synthesizer = MessageSynthesizer(
            self._values,
            self._oneofs,
            self._collections,
            builder_factory,
            max_depth=self._config.max_depth,
        )
        stats = SynthesisStats()
        start_ns = time.time_ns()
        t0 = time.perf_counter()
        try:
            result = synthesizer.synthesize(descriptor, stats=stats)
        except UnsupportedFieldKindError as exc:
            logger.debug("Generation of %s aborted: %s", descriptor.full_name, exc)
            raise
        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        self._logger.log_generation(
            GenerationRecord(
                timestamp_ns=start_ns,
                elapsed_ms=elapsed_ms,
                message_type=descriptor.full_name,
                output_kind=output_kind,
                source_name=self._source.name,
                seed=self._config.seed,
                max_depth=synthesizer.max_depth,
                deepest_level=stats.deepest_level,
                messages_built=stats.messages_built,
                fields_populated=stats.fields_populated,
                defaults_substituted=stats.defaults_substituted,
            )
        )
        return result
