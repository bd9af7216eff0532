# This file wraps table rendering for the current page of a list screen.
# It exists so empty states and column labels are consistent for every screen.
# The helper accepts already-paginated records and only handles presentation.

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pandas as pd
import streamlit as st

from src.dashboard_admin.formatting import format_column_label


def page_dataframe(items: Sequence[dict[str, Any]], *, columns: Sequence[str]) -> pd.DataFrame:
    dataframe = pd.DataFrame(list(items), columns=list(columns))
    return dataframe.rename(columns={column: format_column_label(column) for column in columns})


def render_page_table(
    items: Sequence[dict[str, Any]],
    *,
    columns: Sequence[str],
    empty_message: str,
) -> None:
    dataframe = page_dataframe(items, columns=columns)
    if dataframe.empty:
        st.info(empty_message)
        return
    st.dataframe(dataframe, use_container_width=True, hide_index=True)
