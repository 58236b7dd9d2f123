"""Abstract base class for all random-index sources.

A selector draws every index through one shared source instance, so each
implementation must stay correct when ``randbelow()`` is called from many
threads at once, either by serializing access to one generator or by
giving each thread its own.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class RandomSource(ABC):
    """Abstract base for pseudo-random index sources."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry identifier of the source (e.g. ``'locked'``)."""

    @abstractmethod
    def randbelow(self, n: int) -> int:
        """Return a uniformly distributed integer in ``[0, n)``.

        Args:
            n: Exclusive upper bound. Must be at least 1.

        Returns:
            An integer ``i`` with ``0 <= i < n``.

        Raises:
            ValueError: If *n* is less than 1.
        """

    def close(self) -> None:
        """Release resources. Built-in sources hold none."""

    def describe(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least a ``'source'`` key.
        """
        return {"source": self.name, "thread_safe": True}

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def check_bound(n: int) -> None:
    """Raise ``ValueError`` unless *n* is a usable exclusive upper bound."""
    if n < 1:
        raise ValueError(f"Upper bound must be at least 1, got {n}")
