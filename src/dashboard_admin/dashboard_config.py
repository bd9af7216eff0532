# This file defines runtime configuration for the admin list dashboard.
# It exists so page sizes, pager width, and the record directory can be tuned through environment variables.
# Malformed values fall back to the built-in defaults so a bad `.env` never blocks the list screens.
# Keeping these values centralized avoids the per-screen page-size drift of earlier dashboards.

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from src.listview.view_state import DEFAULT_LIMIT, DEFAULT_LIMIT_OPTIONS

LOGGER = logging.getLogger("dashboard_admin.config")


@dataclass(frozen=True)
class DashboardConfig:
    default_page_size: int
    page_size_options: tuple[int, ...]
    page_window_delta: int
    data_dir: Path

    def clamp_page_size(self, requested_page_size: int | None) -> int:
        if requested_page_size is None or requested_page_size not in self.page_size_options:
            return self.default_page_size
        return requested_page_size


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        LOGGER.warning("%s=%r is not an integer; using %s", name, raw, default)
        return default


def _page_size_options_env(name: str, default: tuple[int, ...]) -> tuple[int, ...]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        options = tuple(sorted({int(part) for part in raw.split(",") if part.strip()}))
    except ValueError:
        LOGGER.warning("%s=%r is not a list of integers; using %s", name, raw, default)
        return default
    if not options or options[0] < 1:
        return default
    return options


def load_dashboard_config(*, load_env: bool = True) -> DashboardConfig:
    if load_env:
        load_dotenv()

    options = _page_size_options_env("DASHBOARD_PAGE_SIZE_OPTIONS", DEFAULT_LIMIT_OPTIONS)
    default_page_size = _int_env("DASHBOARD_DEFAULT_PAGE_SIZE", DEFAULT_LIMIT)
    if default_page_size not in options:
        LOGGER.warning(
            "DASHBOARD_DEFAULT_PAGE_SIZE=%s is not one of %s; using %s",
            default_page_size,
            list(options),
            options[0],
        )
        default_page_size = options[0]

    return DashboardConfig(
        default_page_size=default_page_size,
        page_size_options=options,
        page_window_delta=max(0, _int_env("DASHBOARD_PAGE_WINDOW_DELTA", 1)),
        data_dir=Path(os.getenv("DASHBOARD_DATA_DIR", "data")),
    )
