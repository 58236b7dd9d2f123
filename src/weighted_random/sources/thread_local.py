"""Lock-free random source with one generator per thread.

Each thread lazily gets its own ``numpy.random.Generator`` seeded from a
fresh child of a single root ``SeedSequence``. Spawned children produce
statistically independent streams, so threads never contend on a lock
while drawing. The lock below only guards spawning.

With a fixed seed the per-thread streams are reproducible, but which
thread receives which child depends on the order in which threads make
their first draw.
"""

from __future__ import annotations

import threading
from typing import Any

import numpy as np

from weighted_random.sources.base import RandomSource, check_bound
from weighted_random.sources.registry import register_random_source


@register_random_source("thread_local")
class ThreadLocalRandomSource(RandomSource):
    """Per-thread PCG64 generators spawned from one root seed.

    Args:
        seed: Optional root seed for the ``SeedSequence``.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._root = np.random.SeedSequence(seed)
        self._spawn_lock = threading.Lock()
        self._local = threading.local()
        self._spawned = 0

    @property
    def name(self) -> str:
        """Return ``'thread_local'``."""
        return "thread_local"

    @property
    def generators_spawned(self) -> int:
        """Number of per-thread generators created so far."""
        return self._spawned

    def _generator(self) -> np.random.Generator:
        rng: np.random.Generator | None = getattr(self._local, "rng", None)
        if rng is None:
            with self._spawn_lock:
                (child,) = self._root.spawn(1)
                self._spawned += 1
            rng = np.random.default_rng(child)
            self._local.rng = rng
        return rng

    def randbelow(self, n: int) -> int:
        check_bound(n)
        return int(self._generator().integers(0, n))

    def describe(self) -> dict[str, Any]:
        return {
            "source": self.name,
            "thread_safe": True,
            "generators_spawned": self._spawned,
        }

    def __repr__(self) -> str:
        return f"ThreadLocalRandomSource(seed={self._seed!r})"
