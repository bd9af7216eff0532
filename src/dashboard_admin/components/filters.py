# This file renders the search, filter, and sort controls of a list screen.
# It exists so every control reads its value from the view state and writes changes back through the engine.
# A changed widget value calls the bound setter and reruns the script, so the address bar updates immediately.
# Controls are chosen from each filter's declared kind and choices rather than per-screen markup.

from __future__ import annotations

import streamlit as st

from src.dashboard_admin.formatting import format_choice_label, format_column_label
from src.dashboard_admin.screens import ScreenDefinition
from src.dashboard_admin.ui_text import CLEAR_FILTERS_LABEL, SEARCH_PLACEHOLDER
from src.listview.list_view import FilterBinding, ListViewResult
from src.listview.query_codec import FilterSpec

_NO_SORT = ""


def _render_filter(spec: FilterSpec, binding: FilterBinding) -> object:
    label = format_column_label(spec.name)
    if spec.choices is not None:
        options = [spec.default, *[choice for choice in spec.choices if choice != spec.default]]
        current = binding.value if binding.value in options else spec.default
        return st.selectbox(
            label,
            options=options,
            index=options.index(current),
            format_func=lambda value: format_choice_label(str(value)),
        )
    if spec.kind == "boolean":
        return st.checkbox(label, value=bool(binding.value))
    if spec.kind == "number":
        return int(
            st.number_input(
                label,
                value=int(binding.value),
                min_value=spec.minimum,
                max_value=spec.maximum,
                step=1,
            )
        )
    return st.text_input(
        label,
        value=str(binding.value),
        placeholder=SEARCH_PLACEHOLDER if spec.name == "search" else None,
    )


def render_filter_controls(result: ListViewResult, *, screen: ScreenDefinition) -> None:
    columns = st.columns(len(screen.filters) + 1)
    for column, spec in zip(columns, screen.filters):
        binding = result.filters[spec.name]
        with column:
            value = _render_filter(spec, binding)
        if value != binding.value:
            binding.set_value(value)
            st.rerun()

    with columns[-1]:
        if st.button(CLEAR_FILTERS_LABEL, key=f"{screen.key}_clear"):
            result.clear_all()
            st.rerun()


def render_sort_control(result: ListViewResult, *, screen: ScreenDefinition) -> None:
    if not screen.sortable_fields:
        return

    options = [_NO_SORT, *screen.sortable_fields]
    current_field = result.sort.field if result.sort else _NO_SORT
    sort_column, order_column = st.columns(2)
    with sort_column:
        sort_field = st.selectbox(
            "Sort by",
            options=options,
            index=options.index(current_field),
            format_func=lambda value: format_column_label(value) if value else "Default",
        )
    with order_column:
        order = st.radio(
            "Order",
            options=["asc", "desc"],
            index=1 if result.sort and result.sort.descending else 0,
            horizontal=True,
        )

    current_order = result.sort.order if result.sort else "asc"
    if sort_field != current_field or (sort_field and order != current_order):
        result.set_sort(sort_field or None, order if sort_field else None)
        st.rerun()
