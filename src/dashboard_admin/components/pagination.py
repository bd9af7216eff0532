# This file renders the pager below each list table.
# It exists so page buttons, the visible range caption, and the page-size selector behave the same everywhere.
# Page numbers come from the engine's page window, including gap markers for long lists.

from __future__ import annotations

import streamlit as st

from src.dashboard_admin.formatting import format_item_range
from src.dashboard_admin.ui_text import ROWS_PER_PAGE_LABEL
from src.listview.list_view import PaginationControls
from src.listview.paginator import PAGE_GAP


def render_pagination(controls: PaginationControls, *, key_prefix: str) -> None:
    st.caption(
        format_item_range(
            start_item=controls.start_item,
            end_item=controls.end_item,
            total_items=controls.total_items,
        )
    )

    buttons = st.columns(len(controls.window) + 3)
    requested_page: int | None = None

    with buttons[0]:
        if st.button("‹", key=f"{key_prefix}_prev", disabled=not controls.can_go_previous):
            requested_page = controls.page - 1
    for index, entry in enumerate(controls.window, start=1):
        with buttons[index]:
            if entry == PAGE_GAP:
                st.markdown(PAGE_GAP)
            elif st.button(
                str(entry),
                key=f"{key_prefix}_page_{entry}",
                type="primary" if entry == controls.page else "secondary",
            ):
                requested_page = int(entry)
    with buttons[-2]:
        if st.button("›", key=f"{key_prefix}_next", disabled=not controls.can_go_next):
            requested_page = controls.page + 1
    with buttons[-1]:
        options = list(controls.limit_options)
        limit = st.selectbox(
            ROWS_PER_PAGE_LABEL,
            options=options,
            index=options.index(controls.limit) if controls.limit in options else 0,
        )

    if limit != controls.limit:
        controls.set_limit(limit)
        st.rerun()
    if requested_page is not None and requested_page != controls.page:
        controls.set_page(requested_page)
        st.rerun()
