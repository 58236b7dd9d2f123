"""Default random source: one ``random.Random`` behind a lock."""

from __future__ import annotations

import random
import threading

from weighted_random.sources.base import RandomSource, check_bound
from weighted_random.sources.registry import register_random_source


@register_random_source("locked")
class LockedRandomSource(RandomSource):
    """A single Mersenne Twister generator shared by all callers.

    Every draw takes ``_lock`` so concurrent callers each consume their own
    value from the stream. Not suitable where unpredictability matters.

    Args:
        seed: Optional seed for reproducible draws.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._random = random.Random(seed)
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        """Return ``'locked'``."""
        return "locked"

    def randbelow(self, n: int) -> int:
        check_bound(n)
        with self._lock:
            return self._random.randrange(n)

    def __repr__(self) -> str:
        return f"LockedRandomSource(seed={self._seed!r})"
