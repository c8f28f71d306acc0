"""protorand: random protobuf message instances for tests.

Synthesizes plausible-but-arbitrary valid messages from a descriptor alone:
depth-bounded recursion over nested messages, one member per oneof,
singleton repeated/map fields and seedable determinism.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("protorand")
except PackageNotFoundError:
    __version__ = "0.0.0"

from protorand.config import (
    DEFAULT_CHARS,
    DEFAULT_MAX_DEPTH,
    ProtoRandConfig,
    resolve_config,
)
from protorand.convert import merge_into
from protorand.exceptions import (
    ConfigValidationError,
    ProtoRandError,
    UnsupportedFieldKindError,
)
from protorand.generator import ProtoRand

__all__ = [
    "DEFAULT_CHARS",
    "DEFAULT_MAX_DEPTH",
    "ConfigValidationError",
    "ProtoRand",
    "ProtoRandConfig",
    "ProtoRandError",
    "UnsupportedFieldKindError",
    "__version__",
    "merge_into",
    "resolve_config",
]
