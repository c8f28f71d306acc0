"""System random source using ``os.urandom()``.

Cryptographically secure and always available, but never reproducible:
seeding is accepted for interface compatibility and otherwise ignored.
"""

from __future__ import annotations

import logging
import os

from protorand.sources.base import RandomSource
from protorand.sources.registry import register_random_source

logger = logging.getLogger("protorand")


@register_random_source("system")
class SystemRandomSource(RandomSource):
    """``os.urandom()`` wrapper. Useful for fuzz-style runs where
    reproducibility is not wanted."""

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    def seed(self, value: int | None) -> None:
        """No-op; logs a warning when a concrete seed is requested."""
        if value is not None:
            logger.warning("Random source 'system' cannot be seeded; ignoring seed %d", value)

    def get_random_bytes(self, n: int) -> bytes:
        """Return *n* bytes from the OS CSPRNG."""
        return os.urandom(n)

    def spawn(self) -> RandomSource:
        """Return a fresh OS-backed source; there is no stream to split."""
        return SystemRandomSource()
