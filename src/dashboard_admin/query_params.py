# This file adapts Streamlit's `st.query_params` to the list-view query-parameter device.
# It exists so the synchronizer can read and patch the browser address bar without touching Streamlit directly.
# Streamlit replaces the current URL on assignment, so filter and page changes never add history entries.
# The backing mapping is injectable so tests run without a Streamlit session.

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

import streamlit as st

from src.listview.query_params import ParamPatch


class StreamlitQueryParams:
    def __init__(self, params: MutableMapping[str, Any] | None = None) -> None:
        self._params = params if params is not None else st.query_params

    def read_params(self) -> Mapping[str, str]:
        values: dict[str, str] = {}
        for key in list(self._params.keys()):
            raw_value = self._params[key]
            if isinstance(raw_value, list):
                if not raw_value:
                    continue
                raw_value = raw_value[0]
            values[key] = str(raw_value)
        return values

    def write_params(self, patch: ParamPatch) -> None:
        for key, value in patch.items():
            if value is None:
                if key in self._params:
                    del self._params[key]
            elif self._params.get(key) != value:
                self._params[key] = value
