"""Application composition root.

This module wires together configuration, the request resolver and the validator table for the
request-handling layer.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from reqintent.config.logging import configure_logging
from reqintent.config.settings import Settings, SettingsConfigSource
from reqintent.request.resolver import RequestResolver
from reqintent.validator.registry import VALIDATORS, Validator


@dataclass(frozen=True)
class App:
    """Shared, read-only dependencies for request handlers."""

    settings: Settings
    resolver: RequestResolver
    validators: Mapping[str, Validator]


def create_app(settings: Settings) -> App:
    """Create the application container and configure process logging from the settings."""

    configure_logging(settings)
    resolver = RequestResolver(SettingsConfigSource(settings))
    return App(settings=settings, resolver=resolver, validators=VALIDATORS)
