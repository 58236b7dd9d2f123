"""Deterministic random source for tests.

Replays a fixed sequence of values, reduced modulo the requested bound, so
tests can steer exactly which distribution slot a selector returns.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from weighted_random.sources.base import RandomSource, check_bound
from weighted_random.sources.registry import register_random_source


@register_random_source("mock_sequence")
class SequenceRandomSource(RandomSource):
    """Cycles through *values* forever.

    Args:
        values: Non-negative integers to replay. Defaults to ``(0,)``.
        seed: Accepted for registry compatibility and used as the single
            replayed value when *values* is omitted.
    """

    def __init__(self, values: Iterable[int] | None = None, seed: int | None = None) -> None:
        if values is None:
            values = (seed or 0,)
        self._values = tuple(values)
        if not self._values:
            raise ValueError("SequenceRandomSource needs at least one value")
        if any(v < 0 for v in self._values):
            raise ValueError("SequenceRandomSource values must be non-negative")
        self._position = 0
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        """Return ``'mock_sequence'``."""
        return "mock_sequence"

    @property
    def calls(self) -> int:
        """Number of values handed out so far."""
        return self._position

    def randbelow(self, n: int) -> int:
        check_bound(n)
        with self._lock:
            value = self._values[self._position % len(self._values)]
            self._position += 1
        return value % n

    def __repr__(self) -> str:
        return f"SequenceRandomSource(values={self._values!r})"
