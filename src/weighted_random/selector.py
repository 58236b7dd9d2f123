"""Weighted random selection over a fixed set of identifiers.

The selector flattens its items into a slot array of ``distribution_size``
entries in which every identifier occupies as many slots as its weight. A
draw picks one slot uniformly, so each draw costs O(1) regardless of the
number of items, at the price of O(distribution_size) memory.

The slot array and item tuple never change after construction. The only
mutable state touched by ``next()`` lives inside the random source, which
is responsible for serializing (or partitioning) access to its generator.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator, Mapping
from typing import Any, Generic, TypeVar

from weighted_random.config import WeightedRandomConfig
from weighted_random.exceptions import (
    DuplicateIdentifierError,
    EmptyInputError,
    InternalConsistencyError,
    InvalidDistributionSizeError,
    WeightSumMismatchError,
)
from weighted_random.items import WeightedItem
from weighted_random.sources import RandomSource, RandomSourceRegistry

logger = logging.getLogger("weighted_random")

K = TypeVar("K", bound=Hashable)

DEFAULT_DISTRIBUTION_SIZE = 100


class WeightedSelector(Generic[K]):
    """Randomly selects identifiers according to their assigned weights.

    Items with higher weights are returned more often. Over many draws the
    share of identifier ``k`` converges to ``weight(k) / distribution_size``.

    Safe to share between threads once constructed.

    Args:
        items: WeightedItem instances or ``(identifier, weight)`` pairs.
            Identifiers must be unique and weights must add up to
            *distribution_size*.
        distribution_size: Total weight budget. ``None`` takes the value
            from *config*.
        source: Random source for draws. When omitted, one is created from
            ``config.random_source`` and ``config.seed``.
        config: Configuration supplying defaults. Defaults to
            ``WeightedRandomConfig()``.

    Raises:
        InvalidDistributionSizeError: If *distribution_size* is not an int
            of at least 1.
        EmptyInputError: If *items* is ``None`` or empty.
        DuplicateIdentifierError: If an identifier repeats.
        WeightSumMismatchError: If the weights do not add up to
            *distribution_size*.
        InvalidWeightError: If a pair carries a non-positive or non-int weight.
        InternalConsistencyError: If the built slot array has the wrong
            length. Indicates a bug, never bad input.
    """

    __slots__ = ("_distribution", "_distribution_size", "_index", "_items", "_source")

    def __init__(
        self,
        items: Iterable[WeightedItem[K] | tuple[K, int]] | None,
        distribution_size: int | None = DEFAULT_DISTRIBUTION_SIZE,
        *,
        source: RandomSource | None = None,
        config: WeightedRandomConfig | None = None,
    ) -> None:
        if distribution_size is None:
            defaults = config if config is not None else WeightedRandomConfig()
            distribution_size = defaults.distribution_size

        self._distribution_size: int = self._check_size(distribution_size)
        self._items: tuple[WeightedItem[K], ...] = self._validate(items, self._distribution_size)
        self._distribution: tuple[K, ...] = self._build_distribution(self._items)
        self._check_distribution()
        self._index: dict[K, WeightedItem[K]] = {item.identifier: item for item in self._items}

        if source is None:
            settings = config if config is not None else WeightedRandomConfig()
            source = RandomSourceRegistry.create(settings.random_source, seed=settings.seed)
        self._source: RandomSource = source

        logger.debug(
            "Built weighted selector: items=%d distribution_size=%d source=%s",
            len(self._items),
            self._distribution_size,
            self._source.name,
        )

    @classmethod
    def create(
        cls,
        items: Iterable[WeightedItem[K] | tuple[K, int]] | None,
        distribution_size: int | None = DEFAULT_DISTRIBUTION_SIZE,
        *,
        source: RandomSource | None = None,
        config: WeightedRandomConfig | None = None,
    ) -> WeightedSelector[K]:
        """Factory spelling of the constructor. Same arguments and errors."""
        return cls(items, distribution_size, source=source, config=config)

    @classmethod
    def from_mapping(
        cls,
        weights: Mapping[K, int],
        distribution_size: int | None = DEFAULT_DISTRIBUTION_SIZE,
        *,
        source: RandomSource | None = None,
        config: WeightedRandomConfig | None = None,
    ) -> WeightedSelector[K]:
        """Build a selector from an ``identifier -> weight`` mapping.

        Items are laid out in the mapping's iteration order.
        """
        return cls(
            [WeightedItem(k, w) for k, w in weights.items()],
            distribution_size,
            source=source,
            config=config,
        )

    # --- Construction ---

    @staticmethod
    def _check_size(distribution_size: object) -> int:
        # bool is an int subclass; float sizes would reach randrange().
        if (
            isinstance(distribution_size, bool)
            or not isinstance(distribution_size, int)
            or distribution_size < 1
        ):
            raise InvalidDistributionSizeError(distribution_size)
        return distribution_size

    @staticmethod
    def _validate(
        items: Iterable[WeightedItem[K] | tuple[K, int]] | None,
        distribution_size: int,
    ) -> tuple[WeightedItem[K], ...]:
        if items is None:
            raise EmptyInputError()
        checked = tuple(WeightedItem.coerce(item) for item in items)
        if not checked:
            raise EmptyInputError()

        seen: set[K] = set()
        for item in checked:
            if item.identifier in seen:
                raise DuplicateIdentifierError(item.identifier)
            seen.add(item.identifier)

        weight_sum = sum(item.weight for item in checked)
        if weight_sum != distribution_size:
            raise WeightSumMismatchError(distribution_size, weight_sum)
        return checked

    @staticmethod
    def _build_distribution(items: tuple[WeightedItem[K], ...]) -> tuple[K, ...]:
        distribution: list[K] = []
        for item in items:
            distribution.extend([item.identifier] * item.weight)
        return tuple(distribution)

    def _check_distribution(self) -> None:
        if len(self._distribution) != self._distribution_size:
            raise InternalConsistencyError(self._distribution_size, len(self._distribution))

    # --- Drawing ---

    def next(self) -> K:
        """Randomly retrieve an identifier.

        Identifiers with higher weights are returned more often than
        identifiers with lower weights.
        """
        return self._distribution[self._source.randbelow(self._distribution_size)]

    __next__ = next

    def __iter__(self) -> Iterator[K]:
        return self

    def sample(self, count: int) -> list[K]:
        """Return *count* independent draws (with replacement).

        Raises:
            ValueError: If *count* is negative.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return [self.next() for _ in range(count)]

    # --- Introspection ---

    @property
    def distribution_size(self) -> int:
        return self._distribution_size

    @property
    def distribution(self) -> tuple[K, ...]:
        """The flattened slot array. Layout is not part of the draw contract."""
        return self._distribution

    @property
    def items(self) -> tuple[WeightedItem[K], ...]:
        return self._items

    @property
    def source(self) -> RandomSource:
        return self._source

    def probability(self, identifier: K) -> float:
        """Configured probability of drawing *identifier*.

        Raises:
            KeyError: If *identifier* is not one of the selector's items.
        """
        return self._index[identifier].weight / self._distribution_size

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._index

    def __repr__(self) -> str:
        weights = ", ".join(f"{item.identifier!r}: {item.weight}" for item in self._items)
        return (
            f"WeightedSelector({{{weights}}}, distribution_size={self._distribution_size}, "
            f"source={self._source!r})"
        )
