"""
Shared test configuration.
It puts the repository root on `sys.path`, seeds required environment variables, and provides list-view fixtures.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.listview.filter_engine import field_equals, field_getter, search_predicate  # noqa: E402
from src.listview.query_codec import boolean_filter, choice_filter, string_filter  # noqa: E402
from src.listview.view_state import ViewSchema  # noqa: E402


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure required environment variables are present during tests."""

    defaults = {
        "PROJECT_NAME": "test-project",
        "ENV": "test",
        "LOG_LEVEL": "INFO",
    }

    for key, value in defaults.items():
        if os.getenv(key) is None:
            monkeypatch.setenv(key, value)


@pytest.fixture
def booking_schema() -> ViewSchema:
    return ViewSchema(
        filters=(
            string_filter("search"),
            choice_filter("status", ("Upcoming", "Runing", "Completed")),
            boolean_filter("paid_only"),
        ),
        sortable_fields=("client_name", "payment"),
    )


@pytest.fixture
def booking_predicates() -> dict[str, object]:
    return {
        "search": search_predicate(
            field_getter("client_name"),
            field_getter("id"),
            field_getter("license_plate"),
        ),
        "status": field_equals("status"),
        "paid_only": lambda record, value: record["payment_status"] == "Paid",
    }


@pytest.fixture
def booking_records() -> list[dict[str, object]]:
    statuses = ("Upcoming", "Runing", "Completed")
    return [
        {
            "id": f"Ik-{index}",
            "client_name": f"Client {index:02d}",
            "license_plate": f"PL-{1000 + index}",
            "status": statuses[index % 3],
            "payment": 100 + (index * 7) % 50,
            "payment_status": "Paid" if index % 2 == 0 else "Pending",
        }
        for index in range(1, 24)
    ]
