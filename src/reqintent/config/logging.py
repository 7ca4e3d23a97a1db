"""Logging configuration for the request layer."""

from __future__ import annotations

import logging

from reqintent.config.settings import Settings, load_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure Python logging for the process.

    The level comes from `Settings.log_level` (`LOG_LEVEL`). Logs are intended for internal
    diagnostics only. Request parameter values are never logged, only their keys.
    """

    log_level = (settings or load_settings()).log_level
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
