# This file is the Streamlit entrypoint for the admin list dashboard.
# It exists to bind the selected screen's list view to the browser address bar and render its current page.
# The screen itself is part of the query string, so any dashboard URL can be shared or bookmarked.
# Records come from local JSON exports; filtering, sorting, and paging all run through src.listview.

from __future__ import annotations

from pathlib import Path

import streamlit as st

from src.common.logging import configure_logging
from src.dashboard_admin.components.filters import render_filter_controls, render_sort_control
from src.dashboard_admin.components.pagination import render_pagination
from src.dashboard_admin.components.tables import render_page_table
from src.dashboard_admin.dashboard_config import load_dashboard_config
from src.dashboard_admin.data_access import JsonRecordStore
from src.dashboard_admin.query_params import StreamlitQueryParams
from src.dashboard_admin.screens import SCREEN_PARAM, SCREENS, screen_switch_patch
from src.dashboard_admin.ui_text import APP_SUBTITLE, APP_TITLE, EMPTY_RESULTS


@st.cache_data
def load_records(data_dir: str, screen_key: str) -> list[dict[str, object]]:
    return JsonRecordStore(data_dir=Path(data_dir)).load_records(screen_key)


def main() -> None:
    configure_logging()
    st.set_page_config(page_title=APP_TITLE, layout="wide")

    config = load_dashboard_config()
    device = StreamlitQueryParams()

    screen_keys = list(SCREENS)
    current_key = SCREEN_PARAM.decode(device.read_params().get(SCREEN_PARAM.name))
    if current_key not in SCREENS:
        current_key = SCREEN_PARAM.default

    st.sidebar.header(APP_TITLE)
    selected_key = st.sidebar.radio(
        "Screen",
        options=screen_keys,
        index=screen_keys.index(current_key),
        format_func=lambda key: SCREENS[key].title,
    )
    if selected_key != current_key:
        device.write_params(
            screen_switch_patch(outgoing=SCREENS[current_key], incoming_key=selected_key, config=config)
        )
        st.rerun()

    screen = SCREENS[selected_key]
    view = screen.build_view(config=config, device=device)
    records = load_records(str(config.data_dir), screen.key)

    st.title(screen.title)
    st.caption(APP_SUBTITLE)

    result = view.snapshot(records)
    render_filter_controls(result, screen=screen)
    render_sort_control(result, screen=screen)
    render_page_table(result.items, columns=screen.columns, empty_message=EMPTY_RESULTS)
    render_pagination(result.pagination, key_prefix=screen.key)


if __name__ == "__main__":
    main()
