"""weighted-random: draw identifiers at random according to integer weights.

Build a :class:`WeightedSelector` once from ``(identifier, weight)`` pairs
whose weights add up to the distribution size (100 by default), then call
``next()`` from as many threads as needed.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("weighted-random")
except PackageNotFoundError:
    __version__ = "0.0.0"

from weighted_random.config import WeightedRandomConfig, resolve_config
from weighted_random.exceptions import (
    ConfigValidationError,
    DuplicateIdentifierError,
    EmptyInputError,
    InternalConsistencyError,
    InvalidDistributionSizeError,
    InvalidWeightError,
    SelectorValidationError,
    UnexpectedIdentifierError,
    WeightedRandomError,
    WeightSumMismatchError,
)
from weighted_random.items import WeightedItem
from weighted_random.selector import WeightedSelector
from weighted_random.sources import RandomSource, RandomSourceRegistry
from weighted_random.tally import DrawSummary, DrawTally

__all__ = [
    "ConfigValidationError",
    "DrawSummary",
    "DrawTally",
    "DuplicateIdentifierError",
    "EmptyInputError",
    "InternalConsistencyError",
    "InvalidDistributionSizeError",
    "InvalidWeightError",
    "RandomSource",
    "RandomSourceRegistry",
    "SelectorValidationError",
    "UnexpectedIdentifierError",
    "WeightSumMismatchError",
    "WeightedItem",
    "WeightedRandomConfig",
    "WeightedRandomError",
    "WeightedSelector",
    "__version__",
    "resolve_config",
]
