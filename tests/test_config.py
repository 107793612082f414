"""Tests for driftfield.config.

Covers defaults, environment loading, range validation, and the per-call
override path through resolve_config() and validate_overrides().
"""

from __future__ import annotations

import pytest

from driftfield.config import (
    _PER_CALL_FIELDS,
    DriftfieldConfig,
    resolve_config,
    validate_overrides,
)
from driftfield.exceptions import ConfigValidationError


def _config(**kwargs: object) -> DriftfieldConfig:
    return DriftfieldConfig(_env_file=None, **kwargs)  # type: ignore[call-arg]


class TestDefaults:
    def test_infrastructure_defaults(self, default_config: DriftfieldConfig) -> None:
        assert default_config.entropy_source_type == "system"
        assert default_config.fallback_mode == "system"
        assert default_config.mock_seed is None
        assert default_config.scan_interval_s == 3.0
        assert default_config.probe_history_limit == 30

    def test_sampling_defaults(self, default_config: DriftfieldConfig) -> None:
        assert default_config.scan_sample_size == 2048
        assert default_config.probe_sample_size == 4096
        assert default_config.preview_size == 64

    def test_logging_defaults(self, default_config: DriftfieldConfig) -> None:
        assert default_config.log_level == "summary"
        assert default_config.diagnostic_mode is False

    def test_per_call_fields_exist(self) -> None:
        assert _PER_CALL_FIELDS <= set(DriftfieldConfig.model_fields)


class TestValidation:
    @pytest.mark.parametrize("size", [1023, 4097, 0])
    def test_scan_sample_size_bounds(self, size: int) -> None:
        with pytest.raises(ValueError):
            _config(scan_sample_size=size)

    def test_sample_size_edges_accepted(self) -> None:
        cfg = _config(scan_sample_size=1024, probe_sample_size=4096)
        assert cfg.scan_sample_size == 1024

    def test_history_limit_positive(self) -> None:
        with pytest.raises(ValueError):
            _config(probe_history_limit=0)

    def test_interval_positive(self) -> None:
        with pytest.raises(ValueError):
            _config(scan_interval_s=0)

    def test_unknown_fallback_mode(self) -> None:
        with pytest.raises(ValueError):
            _config(fallback_mode="carrier_pigeon")


class TestEnvironment:
    def test_env_vars_applied(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DF_ENTROPY_SOURCE_TYPE", "mock_uniform")
        monkeypatch.setenv("DF_MOCK_SEED", "7")
        monkeypatch.setenv("DF_SCAN_INTERVAL_S", "0.5")
        monkeypatch.setenv("DF_DIAGNOSTIC_MODE", "true")
        cfg = _config()
        assert cfg.entropy_source_type == "mock_uniform"
        assert cfg.mock_seed == 7
        assert cfg.scan_interval_s == 0.5
        assert cfg.diagnostic_mode is True

    def test_init_kwargs_beat_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DF_LOG_LEVEL", "full")
        assert _config(log_level="none").log_level == "none"

    def test_invalid_env_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DF_PROBE_HISTORY_LIMIT", "lots")
        with pytest.raises(ValueError):
            _config()


class TestResolveConfig:
    def test_none_returns_defaults(self, default_config: DriftfieldConfig) -> None:
        assert resolve_config(default_config, None) is default_config

    def test_empty_returns_defaults(self, default_config: DriftfieldConfig) -> None:
        assert resolve_config(default_config, {}) is default_config

    def test_unprefixed_keys_ignored(self, default_config: DriftfieldConfig) -> None:
        assert resolve_config(default_config, {"scan_sample_size": 1024}) is default_config

    def test_override_applied(self, default_config: DriftfieldConfig) -> None:
        cfg = resolve_config(default_config, {"df_scan_sample_size": 1024, "df_log_level": "none"})
        assert cfg is not default_config
        assert cfg.scan_sample_size == 1024
        assert cfg.log_level == "none"
        assert default_config.scan_sample_size == 2048

    def test_custom_defaults_preserved(self) -> None:
        base = _config(entropy_source_type="mock_uniform", mock_seed=3)
        cfg = resolve_config(base, {"df_preview_size": 16})
        assert cfg.entropy_source_type == "mock_uniform"
        assert cfg.mock_seed == 3
        assert cfg.preview_size == 16

    def test_string_coercion(self, default_config: DriftfieldConfig) -> None:
        cfg = resolve_config(default_config, {"df_diagnostic_mode": "true", "df_preview_size": "8"})
        assert cfg.diagnostic_mode is True
        assert cfg.preview_size == 8

    def test_out_of_range_override(self, default_config: DriftfieldConfig) -> None:
        with pytest.raises(ConfigValidationError, match="Invalid override"):
            resolve_config(default_config, {"df_probe_sample_size": 8192})

    def test_wrong_type_override(self, default_config: DriftfieldConfig) -> None:
        with pytest.raises(ConfigValidationError):
            resolve_config(default_config, {"df_scan_sample_size": "big"})


class TestValidateOverrides:
    def test_valid(self) -> None:
        validate_overrides({"df_scan_sample_size": 1024, "other": object()})

    def test_unknown_field(self) -> None:
        with pytest.raises(ConfigValidationError, match="Unknown config field"):
            validate_overrides({"df_colour": "blue"})

    @pytest.mark.parametrize(
        "key",
        ["df_entropy_source_type", "df_fallback_mode", "df_scan_interval_s", "df_probe_history_limit"],
    )
    def test_infrastructure_rejected(self, key: str) -> None:
        with pytest.raises(ConfigValidationError, match="infrastructure"):
            validate_overrides({key: "x"})
