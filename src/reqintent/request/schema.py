"""Request schema (Pydantic models).

`RequestIntent` is the contract between the request resolver and the routing layer. It is built
once per request and never changed afterwards.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from reqintent.config.settings import (
    KEY_MAX_SEGMENTS,
    KEY_REMOVE_ARRAY_PARAMS,
    KEY_VERSIONING_ALLOWED,
    KEY_VERSIONING_DEFAULT_VERSION,
    KEY_VERSIONING_REQUIRE_SEGMENT,
    KEY_VERSIONING_SEPARATOR,
    KEY_VERSIONING_STRICT_MODE,
    ConfigSource,
)


class HttpMethod(StrEnum):
    """Supported HTTP verbs."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    CONNECT = "CONNECT"


BODY_METHODS: frozenset[HttpMethod] = frozenset({HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH})


class VersioningPolicy(BaseModel):
    """A read-only snapshot of the versioning and request-shape configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    allowed: bool = False
    strict_mode: bool = False
    default_version: float = Field(default=1.0, gt=0)
    separator: str = Field(default=".", min_length=1)
    require_version_segment: bool = False
    remove_array_params: bool = True
    max_segments: int = Field(default=3, ge=2)

    @classmethod
    def from_config(cls, source: ConfigSource) -> VersioningPolicy:
        """Snapshot a policy from a configuration source, falling back to defaults per key."""

        # Raw values may be strings (e.g. "false", "1.5"); pydantic coerces them.
        return cls.model_validate(
            {
                "allowed": source.get(KEY_VERSIONING_ALLOWED, False),
                "strict_mode": source.get(KEY_VERSIONING_STRICT_MODE, False),
                "default_version": source.get(KEY_VERSIONING_DEFAULT_VERSION, 1.0),
                "separator": source.get(KEY_VERSIONING_SEPARATOR, "."),
                "require_version_segment": source.get(KEY_VERSIONING_REQUIRE_SEGMENT, False),
                "remove_array_params": source.get(KEY_REMOVE_ARRAY_PARAMS, True),
                "max_segments": source.get(KEY_MAX_SEGMENTS, 3),
            }
        )


class RequestIntent(BaseModel):
    """A fully interpreted request: what was asked for, not how it will be served."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    method: HttpMethod
    api_version: float | None = Field(default=None, gt=0)
    module_name: str | None = None
    scene_name: str | None = None
    parameters: dict[str, Any] = Field(default_factory=dict)

    @field_validator("module_name", "scene_name")
    @classmethod
    def validate_lower_case(cls, value: str | None) -> str | None:
        if value is not None and value != value.lower():
            raise ValueError("module and scene names must be lower-cased")
        return value

    @model_validator(mode="after")
    def validate_scene_needs_module(self) -> RequestIntent:
        """A scene is only meaningful inside a module."""

        if self.scene_name is not None and self.module_name is None:
            raise ValueError("scene_name requires module_name")
        return self
