"""Seedable random source backed by ``numpy.random.Generator``.

This is the default source. A fixed seed yields a fixed stream of draws,
which is what makes generated messages reproducible.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from protorand.sources.base import RandomSource
from protorand.sources.registry import register_random_source

_I32 = np.iinfo(np.int32)
_I64 = np.iinfo(np.int64)
_U32 = np.iinfo(np.uint32)
_U64 = np.iinfo(np.uint64)


def _stream_seed(value: int | None) -> int | None:
    """Map a signed seed onto the non-negative range ``default_rng`` accepts.

    Negative values wrap to their two's-complement 64-bit pattern, so every
    int64 seed selects its own stream and non-negative seeds are unchanged.
    """
    if value is None or value >= 0:
        return value
    return value & 0xFFFF_FFFF_FFFF_FFFF


@register_random_source("numpy")
class NumpyRandomSource(RandomSource):
    """PCG64 stream from ``np.random.default_rng``.

    Args:
        seed: Optional seed for reproducible output. ``None`` seeds from
            OS entropy.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(_stream_seed(seed))

    @property
    def name(self) -> str:
        """Return ``'numpy'``."""
        return "numpy"

    @property
    def current_seed(self) -> int | None:
        """Seed of the current stream, ``None`` if OS-seeded."""
        return self._seed

    def seed(self, value: int | None) -> None:
        self._seed = value
        self._rng = np.random.default_rng(_stream_seed(value))

    def get_random_bytes(self, n: int) -> bytes:
        return self._rng.bytes(n)

    def int32(self) -> int:
        return int(self._rng.integers(_I32.min, _I32.max, endpoint=True, dtype=np.int32))

    def int64(self) -> int:
        return int(self._rng.integers(_I64.min, _I64.max, endpoint=True, dtype=np.int64))

    def uint32(self) -> int:
        return int(self._rng.integers(0, _U32.max, endpoint=True, dtype=np.uint32))

    def uint64(self) -> int:
        return int(self._rng.integers(0, _U64.max, endpoint=True, dtype=np.uint64))

    def float32(self) -> float:
        return float(self._rng.random(dtype=np.float32))

    def float64(self) -> float:
        return float(self._rng.random(dtype=np.float64))

    def intn(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"intn() bound must be positive, got {n}")
        return int(self._rng.integers(0, n))

    def health_check(self) -> dict[str, Any]:
        return {"source": self.name, "healthy": True, "seed": self._seed}
