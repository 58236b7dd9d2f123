"""The weighted item type accepted by selectors."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from weighted_random.exceptions import InvalidWeightError

K = TypeVar("K", bound=Hashable)


@dataclass(frozen=True, slots=True)
class WeightedItem(Generic[K]):
    """An identifier paired with its relative selection weight.

    Attributes:
        identifier: Caller-defined, hashable key for this outcome. Must be
            unique within one selector.
        weight: Positive integer. A higher weight means the identifier is
            drawn more often.
    """

    identifier: K
    weight: int

    def __post_init__(self) -> None:
        # bool is an int subclass but True/False are never meaningful weights.
        if isinstance(self.weight, bool) or not isinstance(self.weight, int) or self.weight <= 0:
            raise InvalidWeightError(self.identifier, self.weight)

    @classmethod
    def coerce(cls, value: Any) -> WeightedItem[Any]:
        """Return *value* as a WeightedItem.

        Args:
            value: A WeightedItem, or an ``(identifier, weight)`` pair.

        Returns:
            *value* itself if already a WeightedItem, otherwise a new item.

        Raises:
            TypeError: If *value* is neither an item nor a 2-element pair.
            InvalidWeightError: If the pair's weight is not a positive int.
        """
        if isinstance(value, cls):
            return value
        try:
            identifier, weight = value
        except (TypeError, ValueError):
            raise TypeError(
                f"Expected a WeightedItem or an (identifier, weight) pair, got {value!r}"
            ) from None
        return cls(identifier, weight)
