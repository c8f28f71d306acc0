"""Abstract base class for all random sources.

Every random source (seeded PRNG, OS randomness, or a test double)
implements this interface. The ABC derives every primitive draw from
``get_random_bytes()`` so that a minimal source only has to provide bytes;
subclasses may override individual draws with native implementations.
Subclasses must implement ``name``, ``seed()`` and ``get_random_bytes()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

_UINT64_RANGE = 1 << 64


class RandomSource(ABC):
    """Abstract base for uniform primitive draws.

    Every draw advances the internal state. Instances are not safe for
    concurrent callers; use :meth:`spawn` to hand each execution context
    its own independent stream.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'numpy'``, ``'system'``)."""

    @abstractmethod
    def seed(self, value: int | None) -> None:
        """Reinitialize the stream.

        Args:
            value: Seed for a deterministic sequence, or ``None`` to seed
                from OS entropy.
        """

    @abstractmethod
    def get_random_bytes(self, n: int) -> bytes:
        """Return exactly *n* uniformly random bytes."""

    def int32(self) -> int:
        """Full-range signed 32-bit draw."""
        return int.from_bytes(self.get_random_bytes(4), "little", signed=True)

    def int64(self) -> int:
        """Full-range signed 64-bit draw."""
        return int.from_bytes(self.get_random_bytes(8), "little", signed=True)

    def uint32(self) -> int:
        """Full-range unsigned 32-bit draw."""
        return int.from_bytes(self.get_random_bytes(4), "little")

    def uint64(self) -> int:
        """Full-range unsigned 64-bit draw."""
        return int.from_bytes(self.get_random_bytes(8), "little")

    def float32(self) -> float:
        """Uniform float in [0, 1) with single-precision resolution."""
        return (self.uint32() >> 8) / float(1 << 24)

    def float64(self) -> float:
        """Uniform float in [0, 1) with double-precision resolution."""
        return (self.uint64() >> 11) / float(1 << 53)

    def intn(self, n: int) -> int:
        """Uniform integer in [0, n).

        Uses rejection sampling over ``uint64()`` so that the result is
        unbiased for every *n*.

        Args:
            n: Exclusive upper bound, must be positive.

        Returns:
            An integer in ``range(n)``.

        Raises:
            ValueError: If *n* is not positive.
        """
        if n <= 0:
            raise ValueError(f"intn() bound must be positive, got {n}")
        limit = _UINT64_RANGE - (_UINT64_RANGE % n)
        while True:
            value = self.uint64()
            if value < limit:
                return value % n

    def spawn(self) -> RandomSource:
        """Return an independent source seeded from this stream.

        The child is deterministic whenever the parent is. Subclasses whose
        constructor takes required arguments must override this.
        """
        child = type(self)()
        child.seed(self.uint64())
        return child

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least ``'source'`` and ``'healthy'`` keys.
        """
        return {"source": self.name, "healthy": True}
