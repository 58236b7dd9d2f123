"""Statistical property tests for weighted selection.

Validates that observed frequencies converge to ``weight / size``:

1. **Tolerance** - over 100,000 draws each identifier's share is within
   two percentage points of its weight.
2. **Goodness of fit** - a chi-square test against the expected counts
   does not reject the configured distribution.

Dependencies:
    scipy (chi-square test) - listed in [project.optional-dependencies] dev.
"""

from __future__ import annotations

import pytest
from scipy import stats

from weighted_random.items import WeightedItem
from weighted_random.selector import WeightedSelector
from weighted_random.sources import (
    LockedRandomSource,
    NumpyRandomSource,
    RandomSource,
    ThreadLocalRandomSource,
)
from weighted_random.tally import DrawTally

# Draws per test. 100,000 keeps the standard error of a 50% share near 0.16pp.
_NUM_DRAWS: int = 100_000

# Maximum allowed |observed - expected| share.
_TOLERANCE: float = 0.02

# Significance level for the chi-square test. Seeds are fixed, so the
# outcome is deterministic for a given numpy / CPython release.
_CHI2_ALPHA: float = 0.001

_SOURCES = [LockedRandomSource, NumpyRandomSource, ThreadLocalRandomSource]


@pytest.mark.parametrize("source_cls", _SOURCES)
class TestConvergence:
    def test_abc_shares_within_tolerance(
        self, source_cls: type[RandomSource], abc_items: list[WeightedItem[str]]
    ) -> None:
        selector = WeightedSelector.create(abc_items, source=source_cls(seed=12345))  # type: ignore[call-arg]
        summary = DrawTally.for_selector(selector).run(selector, _NUM_DRAWS)

        assert set(summary.counts) == {"A", "B", "C"}
        assert summary.total_draws == _NUM_DRAWS
        assert summary.frequencies["A"] == pytest.approx(0.10, abs=_TOLERANCE)
        assert summary.frequencies["B"] == pytest.approx(0.50, abs=_TOLERANCE)
        assert summary.frequencies["C"] == pytest.approx(0.40, abs=_TOLERANCE)

    def test_chi_square_goodness_of_fit(self, source_cls: type[RandomSource]) -> None:
        weights = {"w1": 1, "w5": 5, "w14": 14, "w30": 30, "w50": 50}
        selector = WeightedSelector.from_mapping(weights, source=source_cls(seed=777))  # type: ignore[call-arg]
        summary = DrawTally.for_selector(selector).run(selector, _NUM_DRAWS)

        observed = [summary.counts[k] for k in weights]
        expected = [_NUM_DRAWS * w / 100 for w in weights.values()]
        result = stats.chisquare(observed, f_exp=expected)
        assert result.pvalue > _CHI2_ALPHA


def test_custom_size_shares() -> None:
    selector = WeightedSelector.create(
        [("X", 3), ("Y", 7)], distribution_size=10, source=NumpyRandomSource(seed=1)
    )
    summary = DrawTally.for_selector(selector).run(selector, _NUM_DRAWS)
    assert summary.frequencies["X"] == pytest.approx(0.3, abs=_TOLERANCE)
    assert summary.frequencies["Y"] == pytest.approx(0.7, abs=_TOLERANCE)


def test_unseeded_default_selector_converges(abc_items: list[WeightedItem[str]]) -> None:
    selector = WeightedSelector.create(abc_items)
    summary = DrawTally.for_selector(selector).run(selector, _NUM_DRAWS)
    expected = {"A": 0.10, "B": 0.50, "C": 0.40}
    assert summary.max_abs_deviation(expected) < _TOLERANCE
