"""Name-to-class lookup for random sources.

``ProtoRandConfig.random_source_type`` is resolved here. The built-in
sources register themselves on import; applications can add their own with
``@register_random_source("name")`` before constructing a generator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from protorand.sources.base import RandomSource


class RandomSourceRegistry:
    """Class-level map from source name to :class:`RandomSource` subclass."""

    _registry: ClassVar[dict[str, type[RandomSource]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[RandomSource]], type[RandomSource]]:
        """Class decorator recording *source_cls* under *name*.

        A later registration under the same name replaces the earlier one.
        """

        def decorator(source_cls: type[RandomSource]) -> type[RandomSource]:
            cls._registry[name] = source_cls
            return source_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> type[RandomSource]:
        """Return the class registered under *name*.

        Raises:
            KeyError: If nothing is registered under *name*; the message
                lists the names that are.
        """
        try:
            return cls._registry[name]
        except KeyError:
            available = ", ".join(cls.list_available()) or "(none)"
            raise KeyError(f"Unknown random source: {name!r}. Available: {available}") from None

    @classmethod
    def build(cls, name: str, seed: int | None = None) -> RandomSource:
        """Instantiate the source registered under *name* and seed it."""
        source = cls.get(name)()
        source.seed(seed)
        return source

    @classmethod
    def list_available(cls) -> list[str]:
        return sorted(cls._registry)


register_random_source = RandomSourceRegistry.register
