"""Environment configuration and validation.

This module defines strongly-typed settings loaded from environment variables (optionally via a
local `.env` file), plus the read-only `ConfigSource` interface the request layer consumes.

The resolver never reads settings from ambient global state: callers hand it a `ConfigSource`
(or an explicit policy) and it takes one snapshot per resolution.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

KEY_VERSIONING_ALLOWED = "sys.versioning.allowed"
KEY_VERSIONING_STRICT_MODE = "sys.versioning.strict_mode"
KEY_VERSIONING_DEFAULT_VERSION = "sys.versioning.default_version"
KEY_VERSIONING_SEPARATOR = "sys.versioning.num_separator"
KEY_VERSIONING_REQUIRE_SEGMENT = "sys.versioning.require_segment"
KEY_REMOVE_ARRAY_PARAMS = "sys.security.remove_req_array_params"
KEY_MAX_SEGMENTS = "sys.request.max_segments"


class ConfigSource(Protocol):
    """Read-only configuration lookup."""

    def get(self, key: str, default: Any = None) -> Any: ...


class MappingConfigSource:
    """A `ConfigSource` over a plain mapping of dotted keys (handy for tests and embedding)."""

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Versioning is disabled by default; operators opt in with `VERSIONING_ALLOWED=true`.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    versioning_allowed: bool = Field(default=False, alias="VERSIONING_ALLOWED")
    versioning_strict_mode: bool = Field(default=False, alias="VERSIONING_STRICT_MODE")
    versioning_default_version: float = Field(default=1.0, alias="VERSIONING_DEFAULT_VERSION")
    versioning_separator: str = Field(default=".", alias="VERSIONING_SEPARATOR")
    versioning_require_segment: bool = Field(default=False, alias="VERSIONING_REQUIRE_SEGMENT")

    security_remove_array_params: bool = Field(default=True, alias="SECURITY_REMOVE_ARRAY_PARAMS")
    request_max_segments: int = Field(default=3, alias="REQUEST_MAX_SEGMENTS")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("versioning_separator")
    @classmethod
    def validate_separator(cls, value: str) -> str:
        """Validate that the separator can sit between two digit runs inside one path segment."""

        if not value:
            raise ValueError("VERSIONING_SEPARATOR must not be empty")
        if "/" in value:
            raise ValueError("VERSIONING_SEPARATOR must not contain '/'")
        if any(ch.isdigit() for ch in value):
            raise ValueError("VERSIONING_SEPARATOR must not contain digits")
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @model_validator(mode="after")
    def validate_bounds(self) -> Settings:
        """Validate numeric settings that the resolver relies on."""

        if self.versioning_default_version <= 0:
            raise ValueError("VERSIONING_DEFAULT_VERSION must be positive")
        # Module and scene need two segments at the very least.
        if self.request_max_segments < 2:
            raise ValueError("REQUEST_MAX_SEGMENTS must be >= 2")
        return self


class SettingsConfigSource:
    """Expose `Settings` through the dotted-key `ConfigSource` interface."""

    def __init__(self, settings: Settings) -> None:
        self._values: dict[str, Any] = {
            KEY_VERSIONING_ALLOWED: settings.versioning_allowed,
            KEY_VERSIONING_STRICT_MODE: settings.versioning_strict_mode,
            KEY_VERSIONING_DEFAULT_VERSION: settings.versioning_default_version,
            KEY_VERSIONING_SEPARATOR: settings.versioning_separator,
            KEY_VERSIONING_REQUIRE_SEGMENT: settings.versioning_require_segment,
            KEY_REMOVE_ARRAY_PARAMS: settings.security_remove_array_params,
            KEY_MAX_SEGMENTS: settings.request_max_segments,
        }

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is missing or invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
