"""Random source subsystem for weighted-random.

Re-exports the ABC, registry, and all built-in source implementations::

    from weighted_random.sources import RandomSource, RandomSourceRegistry
    from weighted_random.sources import LockedRandomSource, ThreadLocalRandomSource
"""

from weighted_random.sources.base import RandomSource
from weighted_random.sources.locked import LockedRandomSource
from weighted_random.sources.mock import SequenceRandomSource
from weighted_random.sources.numpy_source import NumpyRandomSource
from weighted_random.sources.registry import RandomSourceRegistry, register_random_source
from weighted_random.sources.thread_local import ThreadLocalRandomSource

__all__ = [
    "LockedRandomSource",
    "NumpyRandomSource",
    "RandomSource",
    "RandomSourceRegistry",
    "SequenceRandomSource",
    "ThreadLocalRandomSource",
    "register_random_source",
]
