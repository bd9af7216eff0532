# This file keeps one list view's state and the shared query string in step.
# It exists so decoding, mutation, and write-back follow one state machine for every list screen.
# Reads re-decode only when this view's own parameters changed, so external navigation is always honored.
# Each mutation issues a single replace-style merge patch and re-hydrates from the device afterwards.

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from src.listview.query_params import QueryParamsDevice
from src.listview.view_state import SortOrder, ViewSchema, ViewState, encode_view_state

LOGGER = logging.getLogger("listview.sync")


class SyncStatus(str, Enum):
    UNINITIALIZED = "uninitialized"
    HYDRATED = "hydrated"
    DIRTY = "dirty"


class ViewSynchronizer:
    def __init__(self, *, schema: ViewSchema, device: QueryParamsDevice, name: str = "list") -> None:
        self.schema = schema
        self.device = device
        self.name = name
        self.status = SyncStatus.UNINITIALIZED
        self._snapshot: dict[str, str] | None = None
        self._state: ViewState | None = None

    def _own_params(self) -> dict[str, str]:
        params = self.device.read_params()
        return {key: params[key] for key in self.schema.param_names if key in params}

    def _hydrate(self) -> ViewState:
        own = self._own_params()
        if self._state is None or own != self._snapshot:
            self._state = ViewState.from_query(own, self.schema)
            self._snapshot = own
            LOGGER.debug("view %s hydrated from %s", self.name, own)
        self.status = SyncStatus.HYDRATED
        return self._state

    @property
    def state(self) -> ViewState:
        return self._hydrate()

    def _commit(self, next_state: ViewState) -> ViewState:
        patch = encode_view_state(next_state)
        self.status = SyncStatus.DIRTY
        LOGGER.debug("view %s writing %s", self.name, patch)
        self.device.write_params(patch)
        return self._hydrate()

    def set_filter(self, name: str, value: Any) -> ViewState:
        return self._commit(self.state.with_filter(name, value))

    def set_filters(self, values: Mapping[str, Any]) -> ViewState:
        return self._commit(self.state.with_filters(values))

    def set_sort(self, sort_field: str | None, order: SortOrder | None = None) -> ViewState:
        return self._commit(self.state.with_sort(sort_field, order))

    def set_page(self, page: Any, *, total_pages: int | None = None) -> ViewState:
        return self._commit(self.state.with_page(page, total_pages))

    def set_limit(self, limit: Any) -> ViewState:
        return self._commit(self.state.with_limit(limit))

    def clear_all(self) -> ViewState:
        return self._commit(self.state.cleared())
