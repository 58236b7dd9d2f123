"""Thread-safe counting of drawn identifiers.

Used to check that observed frequencies track configured weights, both by
the demo program and by the statistical tests.
"""

from __future__ import annotations

import threading
from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from weighted_random.exceptions import UnexpectedIdentifierError

if TYPE_CHECKING:
    from weighted_random.selector import WeightedSelector


@dataclass(frozen=True, slots=True)
class DrawSummary:
    """Immutable, hashable snapshot of a tally.

    Both mappings are stored as read-only views of private copies. Hashing
    uses ``total_draws`` only; equality compares every field.

    Attributes:
        total_draws: Number of identifiers recorded.
        counts: Draw count per identifier, in the tally's identifier order.
        frequencies: Observed share per identifier in ``[0, 1]``.
    """

    total_draws: int
    counts: Mapping[Any, int] = field(hash=False)
    frequencies: Mapping[Any, float] = field(hash=False)

    def __post_init__(self) -> None:
        # Read-only copies, so the snapshot cannot change after creation.
        object.__setattr__(self, "counts", MappingProxyType(dict(self.counts)))
        object.__setattr__(self, "frequencies", MappingProxyType(dict(self.frequencies)))

    def percentage(self, identifier: Any) -> int:
        """Observed share of *identifier* as a whole-number percentage."""
        return round(self.frequencies[identifier] * 100.0)

    def max_abs_deviation(self, expected: Mapping[Any, float]) -> float:
        """Largest ``|observed - expected|`` over the identifiers in *expected*."""
        return max(
            (abs(self.frequencies.get(k, 0.0) - p) for k, p in expected.items()),
            default=0.0,
        )


class DrawTally:
    """Counts draws per identifier.

    Args:
        identifiers: The complete set of identifiers that may be recorded.
            Recording anything else raises ``UnexpectedIdentifierError``.
    """

    def __init__(self, identifiers: Iterable[Hashable]) -> None:
        self._counts: dict[Any, int] = dict.fromkeys(identifiers, 0)
        self._total = 0
        self._lock = threading.Lock()

    @classmethod
    def for_selector(cls, selector: WeightedSelector[Any]) -> DrawTally:
        """Create a tally covering every identifier of *selector*."""
        return cls(item.identifier for item in selector.items)

    @property
    def total(self) -> int:
        return self._total

    def record(self, identifier: Any) -> None:
        """Count one draw of *identifier*.

        Raises:
            UnexpectedIdentifierError: If *identifier* is not known to the tally.
        """
        with self._lock:
            if identifier not in self._counts:
                raise UnexpectedIdentifierError(identifier)
            self._counts[identifier] += 1
            self._total += 1

    def count(self, identifier: Any) -> int:
        return self._counts[identifier]

    def run(self, selector: WeightedSelector[Any], iterations: int) -> DrawSummary:
        """Draw *iterations* times from *selector*, recording each result.

        Returns:
            The summary after all draws.
        """
        for _ in range(iterations):
            self.record(selector.next())
        return self.summary()

    def summary(self) -> DrawSummary:
        with self._lock:
            counts = dict(self._counts)
            total = self._total
        frequencies = {k: (c / total if total else 0.0) for k, c in counts.items()}
        return DrawSummary(total_draws=total, counts=counts, frequencies=frequencies)
