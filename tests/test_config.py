"""Tests for weighted_random.config.

Covers:
- Default values
- Environment variable loading (WR_* prefix)
- resolve_config merge logic and validation
- Frozen immutability
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from weighted_random.config import WeightedRandomConfig, resolve_config
from weighted_random.exceptions import ConfigValidationError


class TestDefaults:
    def test_default_values(self) -> None:
        cfg = WeightedRandomConfig()
        assert cfg.distribution_size == 100
        assert cfg.random_source == "locked"
        assert cfg.seed is None
        assert cfg.log_level == "INFO"

    def test_frozen(self) -> None:
        cfg = WeightedRandomConfig()
        with pytest.raises(ValidationError):
            cfg.distribution_size = 10  # type: ignore[misc]

    def test_size_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            WeightedRandomConfig(distribution_size=0)

    def test_log_level_normalized(self) -> None:
        assert WeightedRandomConfig(log_level="debug").log_level == "DEBUG"

    def test_log_level_rejects_unknown(self) -> None:
        with pytest.raises(ValidationError):
            WeightedRandomConfig(log_level="chatty")


class TestEnvironment:
    def test_env_vars_loaded(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WR_DISTRIBUTION_SIZE", "1000")
        monkeypatch.setenv("WR_RANDOM_SOURCE", "numpy")
        monkeypatch.setenv("WR_SEED", "17")
        cfg = WeightedRandomConfig()
        assert cfg.distribution_size == 1000
        assert cfg.random_source == "numpy"
        assert cfg.seed == 17

    def test_init_kwargs_beat_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WR_DISTRIBUTION_SIZE", "1000")
        assert WeightedRandomConfig(distribution_size=10).distribution_size == 10

    def test_dotenv_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / ".env").write_text("WR_RANDOM_SOURCE=thread_local\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert WeightedRandomConfig().random_source == "thread_local"


class TestResolveConfig:
    def test_no_overrides_returns_defaults(self) -> None:
        defaults = WeightedRandomConfig()
        assert resolve_config(defaults, None) is defaults
        assert resolve_config(defaults, {}) is defaults

    def test_none_values_skipped(self) -> None:
        defaults = WeightedRandomConfig()
        assert resolve_config(defaults, {"seed": None}) is defaults

    def test_overrides_applied(self) -> None:
        defaults = WeightedRandomConfig()
        cfg = resolve_config(defaults, {"distribution_size": 10, "seed": 3})
        assert cfg.distribution_size == 10
        assert cfg.seed == 3
        assert defaults.distribution_size == 100

    def test_string_values_coerced(self) -> None:
        cfg = resolve_config(WeightedRandomConfig(), {"distribution_size": "10"})
        assert cfg.distribution_size == 10

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ConfigValidationError, match="no_such_field"):
            resolve_config(WeightedRandomConfig(), {"no_such_field": 1})

    def test_invalid_value_rejected(self) -> None:
        with pytest.raises(ConfigValidationError):
            resolve_config(WeightedRandomConfig(), {"distribution_size": -5})
