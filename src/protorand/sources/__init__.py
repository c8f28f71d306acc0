"""Random source subsystem for protorand.

Re-exports the ABC, registry, and all built-in source implementations::

    from protorand.sources import RandomSource, RandomSourceRegistry
    from protorand.sources import NumpyRandomSource, SystemRandomSource
"""

from protorand.sources.base import RandomSource
from protorand.sources.numpy_source import NumpyRandomSource
from protorand.sources.registry import RandomSourceRegistry, register_random_source
from protorand.sources.system import SystemRandomSource

__all__ = [
    "NumpyRandomSource",
    "RandomSource",
    "RandomSourceRegistry",
    "SystemRandomSource",
    "register_random_source",
]
