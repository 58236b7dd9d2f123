"""Random source backed by a locked ``numpy.random.Generator``.

numpy generators are not safe for concurrent use, so draws are serialized
the same way :class:`~weighted_random.sources.locked.LockedRandomSource`
serializes ``random.Random``.
"""

from __future__ import annotations

import threading

import numpy as np

from weighted_random.sources.base import RandomSource, check_bound
from weighted_random.sources.registry import register_random_source


@register_random_source("numpy")
class NumpyRandomSource(RandomSource):
    """PCG64 generator shared by all callers under a lock.

    Args:
        seed: Optional seed for reproducible draws.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        """Return ``'numpy'``."""
        return "numpy"

    def randbelow(self, n: int) -> int:
        check_bound(n)
        with self._lock:
            return int(self._rng.integers(0, n))

    def __repr__(self) -> str:
        return f"NumpyRandomSource(seed={self._seed!r})"
