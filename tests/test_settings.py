"""Tests for environment settings and configuration sources."""

from __future__ import annotations

import pytest

from reqintent.config.settings import (
    KEY_MAX_SEGMENTS,
    KEY_VERSIONING_ALLOWED,
    KEY_VERSIONING_DEFAULT_VERSION,
    KEY_VERSIONING_SEPARATOR,
    MappingConfigSource,
    Settings,
    SettingsConfigSource,
    load_settings,
)
from reqintent.request.schema import VersioningPolicy


def _settings(**values: object) -> Settings:
    return Settings(_env_file=None, **values)


def test_defaults() -> None:
    settings = _settings()
    assert settings.versioning_allowed is False
    assert settings.versioning_strict_mode is False
    assert settings.versioning_default_version == 1.0
    assert settings.versioning_separator == "."
    assert settings.security_remove_array_params is True
    assert settings.request_max_segments == 3


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VERSIONING_ALLOWED", "true")
    monkeypatch.setenv("VERSIONING_SEPARATOR", "_")
    monkeypatch.setenv("VERSIONING_DEFAULT_VERSION", "2.0")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = _settings()
    assert settings.versioning_allowed is True
    assert settings.versioning_separator == "_"
    assert settings.versioning_default_version == 2.0
    assert settings.log_level == "DEBUG"


def test_invalid_separator_is_rejected() -> None:
    for separator in ("", "/", "1"):
        with pytest.raises(ValueError):
            _settings(VERSIONING_SEPARATOR=separator)


def test_invalid_bounds_are_rejected() -> None:
    with pytest.raises(ValueError):
        _settings(VERSIONING_DEFAULT_VERSION=0)
    with pytest.raises(ValueError):
        _settings(REQUEST_MAX_SEGMENTS=1)


def test_load_settings_wraps_validation_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VERSIONING_SEPARATOR", "/")
    with pytest.raises(RuntimeError):
        load_settings()


def test_settings_config_source_exposes_dotted_keys() -> None:
    source = SettingsConfigSource(
        _settings(VERSIONING_ALLOWED=True, VERSIONING_SEPARATOR="-", REQUEST_MAX_SEGMENTS=4)
    )
    assert source.get(KEY_VERSIONING_ALLOWED) is True
    assert source.get(KEY_VERSIONING_SEPARATOR) == "-"
    assert source.get(KEY_MAX_SEGMENTS) == 4
    assert source.get("sys.unknown", "fallback") == "fallback"


def test_policy_snapshot_from_sources() -> None:
    policy = VersioningPolicy.from_config(
        SettingsConfigSource(_settings(VERSIONING_ALLOWED=True, VERSIONING_STRICT_MODE=True))
    )
    assert policy.allowed
    assert policy.strict_mode
    assert policy.default_version == 1.0

    partial = VersioningPolicy.from_config(
        MappingConfigSource({KEY_VERSIONING_DEFAULT_VERSION: "1.5"})
    )
    assert partial.default_version == 1.5
    assert not partial.allowed
    assert partial.separator == "."
    assert partial.remove_array_params


def test_policy_snapshot_coerces_string_values() -> None:
    policy = VersioningPolicy.from_config(
        MappingConfigSource({KEY_VERSIONING_ALLOWED: "false", KEY_MAX_SEGMENTS: "4"})
    )
    assert policy.allowed is False
    assert policy.max_segments == 4
