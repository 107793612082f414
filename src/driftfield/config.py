"""Configuration system for driftfield.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (DF_*) -> .env file -> field defaults.

Per-call overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults. Infrastructure fields are
protected from per-call override.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from driftfield.exceptions import ConfigValidationError

# Fields that can be overridden per call. Infrastructure fields (source type,
# fallback mode, history cap, polling interval) stay fixed for a session.
_PER_CALL_FIELDS: frozenset[str] = frozenset(
    {
        "scan_sample_size",
        "probe_sample_size",
        "preview_size",
        "log_level",
        "diagnostic_mode",
    }
)

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class DriftfieldConfig(BaseSettings):
    """Configuration for driftfield.

    Resolution order: init kwargs -> env vars (DF_*) -> .env file -> defaults.

    Fields are divided into two groups:
    - **Infrastructure**: Byte source selection, fallback, polling interval and
      history cap. NOT overridable per call.
    - **Sampling parameters**: Sample sizes and logging. Overridable per call
      via resolve_config() with the df_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="DF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Infrastructure (NOT per-call overridable) ---

    entropy_source_type: str = Field(
        default="system",
        description="Primary byte source identifier",
    )
    fallback_mode: Literal["error", "system", "mock_uniform"] = Field(
        default="system",
        description="Fallback byte source: 'error', 'system', 'mock_uniform'",
    )
    mock_seed: int | None = Field(
        default=None,
        description="Seed for the mock_uniform source (None = unseeded)",
    )
    scan_interval_s: float = Field(
        default=3.0,
        gt=0.0,
        description="Seconds between polls during continuous scanning",
    )
    probe_history_limit: int = Field(
        default=30,
        ge=1,
        description="Number of most recent probes kept by a session",
    )

    # --- Sampling (per-call overridable) ---

    scan_sample_size: int = Field(
        default=2048,
        ge=1024,
        le=4096,
        description="Bytes drawn for a routine field scan",
    )
    probe_sample_size: int = Field(
        default=4096,
        ge=1024,
        le=4096,
        description="Bytes drawn for a probe (larger sample, better signal-to-noise)",
    )
    preview_size: int = Field(
        default=64,
        ge=0,
        description="Leading bytes kept on a reading for visualization",
    )

    # --- Logging (per-call overridable) ---

    log_level: Literal["none", "summary", "full"] = Field(
        default="summary",
        description="Logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all scan and probe records in memory for analysis",
    )


# Populate _ALL_FIELDS now that the class is defined.
_ALL_FIELDS = frozenset(DriftfieldConfig.model_fields.keys())


def _strip_prefix(key: str) -> str:
    """Strip the 'df_' prefix from an override key."""
    if key.startswith("df_"):
        return key[3:]
    return key


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Validate all df_* keys in *overrides* without creating a config.

    Args:
        overrides: Dictionary of overrides, potentially with df_ prefix.

    Raises:
        ConfigValidationError: If any df_* key is unknown or non-overridable.
    """
    for key in overrides:
        if not key.startswith("df_"):
            continue
        field_name = _strip_prefix(key)
        if field_name not in _ALL_FIELDS:
            raise ConfigValidationError(
                f"Unknown config field: '{key}' (no field '{field_name}' exists)"
            )
        if field_name not in _PER_CALL_FIELDS:
            raise ConfigValidationError(
                f"Field '{field_name}' is an infrastructure field and cannot be "
                f"overridden per call"
            )


def resolve_config(
    defaults: DriftfieldConfig,
    overrides: dict[str, Any] | None,
) -> DriftfieldConfig:
    """Create a new config instance merging defaults with per-call overrides.

    The override keys use the 'df_' prefix (e.g., 'df_scan_sample_size': 1024).
    Keys without the prefix are silently ignored.

    Args:
        defaults: The base configuration loaded from environment.
        overrides: Per-call overrides.

    Returns:
        A new DriftfieldConfig with overrides applied, or *defaults* itself
        when there is nothing to apply.

    Raises:
        ConfigValidationError: If any df_* key is unknown, non-overridable,
            or fails field validation.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    applied: dict[str, Any] = {
        _strip_prefix(key): value for key, value in overrides.items() if key.startswith("df_")
    }
    if not applied:
        return defaults

    # model_validate (not model_copy) so overrides are coerced and range-checked.
    merged = defaults.model_dump()
    merged.update(applied)
    try:
        return DriftfieldConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(f"Invalid override value: {exc}") from exc
