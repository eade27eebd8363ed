"""Configuration system for logit-sampler.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (LS_*) -> .env file -> field defaults.

Per-request overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults. Logging fields are
protected from per-request override.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from logit_sampler.exceptions import ConfigValidationError

# Fields that can be overridden per-request via "ls_"-prefixed keys.
_PER_REQUEST_FIELDS: frozenset[str] = frozenset(
    {
        "temperature",
        "top_k",
        "top_p",
        "min_p",
        "transform_order",
        "selector",
        "seed",
    }
)

_OVERRIDE_PREFIX = "ls_"

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class SamplerConfig(BaseSettings):
    """Configuration for logit-sampler.

    Resolution order: init kwargs -> env vars (LS_*) -> .env file -> defaults.

    Fields are divided into two groups:
    - **Sampling parameters**: transforms, their order, and the selector.
      Overridable per-request with the ``ls_`` prefix.
    - **Logging**: verbosity and diagnostic mode. NOT overridable
      per-request.

    Range checks on the sampling parameters are left to the transforms,
    which raise ``InvalidParameterError`` when the chain runs.
    """

    model_config = SettingsConfigDict(
        env_prefix="LS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Transforms (per-request overridable) ---

    temperature: float = Field(
        default=0.7,
        description="Temperature in [0, 2]; 0 forces greedy selection",
    )
    top_k: int = Field(
        default=0,
        description="Top-k filtering (<=0 disables)",
    )
    top_p: float = Field(
        default=1.0,
        description="Nucleus filtering threshold (>=1.0 disables)",
    )
    min_p: float = Field(
        default=0.0,
        description="Min-p filtering threshold (<=0.0 disables)",
    )
    transform_order: list[str] = Field(
        default_factory=lambda: ["temperature", "top_k", "top_p", "min_p"],
        description="Order in which enabled transforms are applied",
    )

    # --- Selection (per-request overridable) ---

    selector: str = Field(
        default="weighted",
        description="Token selector: 'weighted' or 'greedy'",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the weighted selector (None = OS entropy)",
    )

    # --- Logging (NOT per-request overridable) ---

    log_level: str = Field(
        default="summary",
        description="Logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all token records in memory for analysis",
    )


_ALL_FIELDS = frozenset(SamplerConfig.model_fields.keys())


def _strip_prefix(key: str) -> str:
    """Strip the 'ls_' prefix from an override key."""
    if key.startswith(_OVERRIDE_PREFIX):
        return key[len(_OVERRIDE_PREFIX) :]
    return key


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Validate all ls_* keys in *overrides* without creating a config.

    Lets a caller reject a bad request before any sampling happens.

    Args:
        overrides: Dictionary of per-request options, potentially with ls_ prefix.

    Raises:
        ConfigValidationError: If any ls_* key is unknown or non-overridable.
    """
    for key in overrides:
        if not key.startswith(_OVERRIDE_PREFIX):
            continue
        field_name = _strip_prefix(key)
        if field_name not in _ALL_FIELDS:
            raise ConfigValidationError(
                f"Unknown config field: '{key}' (no field '{field_name}' exists)"
            )
        if field_name not in _PER_REQUEST_FIELDS:
            raise ConfigValidationError(
                f"Field '{field_name}' is a logging field and cannot be "
                f"overridden per-request"
            )


def resolve_config(
    defaults: SamplerConfig,
    overrides: dict[str, Any] | None,
) -> SamplerConfig:
    """Create a new config instance merging defaults with per-request overrides.

    Override keys use the 'ls_' prefix (e.g., 'ls_top_k': 40). Keys
    without the prefix are silently ignored (they belong to other
    components of the caller).

    Args:
        defaults: The base configuration loaded from environment.
        overrides: Per-request options.

    Returns:
        A new SamplerConfig with overrides applied, or *defaults* itself
        when there is nothing to override.

    Raises:
        ConfigValidationError: If any ls_* key is unknown or non-overridable.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    updates: dict[str, Any] = {}
    for key, value in overrides.items():
        if key.startswith(_OVERRIDE_PREFIX):
            updates[_strip_prefix(key)] = value

    if not updates:
        return defaults

    # model_validate (not model_copy) so that "40" is coerced to 40.
    merged = defaults.model_dump()
    merged.update(updates)
    return SamplerConfig.model_validate(merged)
