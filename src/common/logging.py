"""
Logging configuration helpers.
It configures the process-wide handler once and sets the level of the `listview` and `dashboard_admin` logger trees.
Engine modules log decode fallbacks and page clamps here instead of raising to the UI.
"""

from __future__ import annotations

import logging

from src.common.settings import get_settings

LOGGER_NAMES = ("listview", "dashboard_admin")

_LOGGING_CONFIGURED = False


def configure_logging() -> None:
    """Configure process-wide logging from environment settings."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    settings = get_settings()
    level = getattr(logging, settings.LOG_LEVEL, logging.INFO)

    logging.basicConfig(
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    for name in LOGGER_NAMES:
        logging.getLogger(name).setLevel(level)
    _LOGGING_CONFIGURED = True

