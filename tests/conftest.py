"""Shared pytest fixtures for weighted-random tests.

Provides the classic A/B/C item set, deterministic and seeded random
sources, and selectors built from them.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from weighted_random.items import WeightedItem
from weighted_random.selector import WeightedSelector
from weighted_random.sources import LockedRandomSource, SequenceRandomSource


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep WR_* variables and stray .env files out of every test."""
    for key in list(os.environ):
        if key.startswith("WR_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def abc_items() -> list[WeightedItem[str]]:
    """Return A=10, B=50, C=40 (sums to the default size of 100)."""
    return [WeightedItem("A", 10), WeightedItem("B", 50), WeightedItem("C", 40)]


@pytest.fixture
def seeded_source() -> LockedRandomSource:
    """Return a LockedRandomSource with a fixed seed for reproducibility."""
    return LockedRandomSource(seed=42)


@pytest.fixture
def abc_selector(
    abc_items: list[WeightedItem[str]], seeded_source: LockedRandomSource
) -> WeightedSelector[str]:
    """Return a seeded selector over the A/B/C items."""
    return WeightedSelector.create(abc_items, source=seeded_source)


@pytest.fixture
def slot_source() -> SequenceRandomSource:
    """Return a source replaying slots 0, 9, 10, 59, 60, 99."""
    return SequenceRandomSource([0, 9, 10, 59, 60, 99])
