# This file collects small formatting helpers used by the list screens.
# It exists so counts, ranges, and filter labels read the same on every table.
# The functions return plain strings that Streamlit can display directly.

from __future__ import annotations

from src.listview.query_codec import NO_FILTER_SENTINEL

# Stored values whose display text differs from their title-cased form.
CHOICE_LABELS: dict[str, str] = {"Runing": "Running"}


def format_count(value: int | float | None) -> str:
    if value is None:
        return "0"
    return f"{int(value):,}"


def format_item_range(*, start_item: int, end_item: int, total_items: int) -> str:
    if total_items <= 0 or start_item <= 0:
        return "No results"
    return f"Showing {format_count(start_item)} to {format_count(end_item)} of {format_count(total_items)} results"


def format_choice_label(value: str) -> str:
    if value == NO_FILTER_SENTINEL:
        return "All"
    if value in CHOICE_LABELS:
        return CHOICE_LABELS[value]
    return value.replace("_", " ").title()


def format_column_label(column: str) -> str:
    return column.replace("_", " ").title()
