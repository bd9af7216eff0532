# This test file validates environment-driven dashboard configuration.
# It exists so malformed `.env` values fall back to safe page-size defaults instead of breaking list screens.

from __future__ import annotations

from pathlib import Path

import pytest

from src.dashboard_admin.dashboard_config import load_dashboard_config

_ENV_NAMES = (
    "DASHBOARD_DEFAULT_PAGE_SIZE",
    "DASHBOARD_PAGE_SIZE_OPTIONS",
    "DASHBOARD_PAGE_WINDOW_DELTA",
    "DASHBOARD_DATA_DIR",
)


@pytest.fixture(autouse=True)
def _clean_dashboard_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults_match_list_engine_defaults() -> None:
    config = load_dashboard_config(load_env=False)

    assert config.default_page_size == 10
    assert config.page_size_options == (10, 25, 50, 100)
    assert config.page_window_delta == 1
    assert config.data_dir == Path("data")


def test_custom_options_and_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DASHBOARD_PAGE_SIZE_OPTIONS", "50, 20,20")
    monkeypatch.setenv("DASHBOARD_DEFAULT_PAGE_SIZE", "50")
    monkeypatch.setenv("DASHBOARD_DATA_DIR", "/tmp/records")

    config = load_dashboard_config(load_env=False)

    assert config.page_size_options == (20, 50)
    assert config.default_page_size == 50
    assert config.data_dir == Path("/tmp/records")


def test_default_outside_options_uses_first_option(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DASHBOARD_PAGE_SIZE_OPTIONS", "20,40")

    config = load_dashboard_config(load_env=False)

    assert config.default_page_size == 20


def test_malformed_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DASHBOARD_PAGE_SIZE_OPTIONS", "ten,twenty")
    monkeypatch.setenv("DASHBOARD_DEFAULT_PAGE_SIZE", "lots")
    monkeypatch.setenv("DASHBOARD_PAGE_WINDOW_DELTA", "-4")

    config = load_dashboard_config(load_env=False)

    assert config.page_size_options == (10, 25, 50, 100)
    assert config.default_page_size == 10
    assert config.page_window_delta == 0


def test_clamp_page_size() -> None:
    config = load_dashboard_config(load_env=False)

    assert config.clamp_page_size(None) == 10
    assert config.clamp_page_size(33) == 10
    assert config.clamp_page_size(50) == 50
