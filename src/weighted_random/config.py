"""Configuration system for weighted-random.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (WR_*) -> .env file -> field defaults.

Overrides are applied via resolve_config(), which creates a new config
instance without mutating the defaults.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weighted_random.exceptions import ConfigValidationError

_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class WeightedRandomConfig(BaseSettings):
    """Configuration for weighted-random.

    Resolution order: init kwargs -> env vars (WR_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="WR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    distribution_size: int = Field(
        default=100,
        ge=1,
        description="Total weight all items of a selector must add up to",
    )
    random_source: str = Field(
        default="locked",
        description="Registered random source name: 'locked', 'numpy', 'thread_local', ...",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the random source (None = nondeterministic)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level used by the demo program",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        upper = value.upper()
        if upper not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return upper


_ALL_FIELDS: frozenset[str] = frozenset(WeightedRandomConfig.model_fields.keys())


def resolve_config(
    defaults: WeightedRandomConfig,
    overrides: dict[str, Any] | None,
) -> WeightedRandomConfig:
    """Create a new config instance merging defaults with overrides.

    ``None`` values in *overrides* are skipped, so argparse namespaces can be
    passed through without filtering unset options first.

    Args:
        defaults: The base configuration.
        overrides: Field name to value mapping.

    Returns:
        A new WeightedRandomConfig with overrides applied, or *defaults*
        itself when there is nothing to apply.

    Raises:
        ConfigValidationError: If a key is unknown or a value fails validation.
    """
    if not overrides:
        return defaults

    applied: dict[str, Any] = {}
    for key, value in overrides.items():
        if key not in _ALL_FIELDS:
            raise ConfigValidationError(f"Unknown config field: {key!r}")
        if value is not None:
            applied[key] = value

    if not applied:
        return defaults

    # model_validate runs the validators; model_copy(update=...) would not.
    merged = defaults.model_dump()
    merged.update(applied)
    try:
        return WeightedRandomConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
