"""Diagnostic logging subsystem for protorand.

Provides immutable per-generation records and a configurable logger
that supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from protorand.logging.logger import GenerationLogger
from protorand.logging.types import GenerationRecord

__all__ = [
    "GenerationLogger",
    "GenerationRecord",
]
