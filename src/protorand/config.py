"""Configuration system for protorand.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (PROTORAND_*) -> .env file -> field defaults.

Per-generator overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from protorand.exceptions import ConfigValidationError

DEFAULT_MAX_DEPTH = 16
"""Nested-message levels synthesized before default instances are substituted."""

DEFAULT_STRING_LENGTH = 10

DEFAULT_CHARS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
"""Alphabet used for string and bytes values."""

_LOG_LEVELS: frozenset[str] = frozenset({"none", "summary", "full"})


class ProtoRandConfig(BaseSettings):
    """Configuration for protorand.

    Resolution order: init kwargs -> env vars (PROTORAND_*) -> .env file -> defaults.

    Every generator owns its own config instance; nothing here is shared
    package state, so per-generator overrides never leak.
    """

    model_config = SettingsConfigDict(
        env_prefix="PROTORAND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Randomness ---

    random_source_type: str = Field(
        default="numpy",
        description="Registered random source identifier: 'numpy' or 'system'",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the random source (None = seeded from OS entropy)",
    )

    # --- Synthesis policy ---

    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        ge=0,
        description="Depth budget for nested-message recursion",
    )
    string_length: int = Field(
        default=DEFAULT_STRING_LENGTH,
        ge=0,
        description="Length of generated string and bytes values",
    )
    string_alphabet: str = Field(
        default=DEFAULT_CHARS,
        min_length=1,
        description="Characters drawn uniformly for string and bytes values",
    )

    # --- Logging ---

    log_level: str = Field(
        default="summary",
        description="Logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all generation records in memory for analysis",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        if value not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return value


_ALL_FIELDS: frozenset[str] = frozenset(ProtoRandConfig.model_fields.keys())


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Reject override keys that name no config field.

    Args:
        overrides: Mapping of config field names to new values.

    Raises:
        ConfigValidationError: If any key is unknown.
    """
    unknown = sorted(key for key in overrides if key not in _ALL_FIELDS)
    if unknown:
        raise ConfigValidationError(
            f"Unknown config field(s): {', '.join(unknown)}. "
            f"Available: {', '.join(sorted(_ALL_FIELDS))}"
        )


def resolve_config(
    defaults: ProtoRandConfig,
    overrides: dict[str, Any] | None,
) -> ProtoRandConfig:
    """Create a new config instance merging defaults with overrides.

    Args:
        defaults: The base configuration (usually loaded from environment).
        overrides: Field values to replace, keyed by field name.

    Returns:
        A new ProtoRandConfig with overrides applied, or *defaults* itself
        when there is nothing to override.

    Raises:
        ConfigValidationError: If a key is unknown or a value fails validation.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    # model_copy(update=...) skips validation; model_validate runs it.
    merged = defaults.model_dump()
    merged.update(overrides)
    try:
        return ProtoRandConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
