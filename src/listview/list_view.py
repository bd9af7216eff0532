# This file combines synchronization, filtering, and pagination into one per-screen facade.
# It exists so UI code receives value/setter pairs and a rendered page slice without re-deriving arithmetic.
# Out-of-range pages in the address bar are clamped and written back so the URL stays canonical.
# Records and predicates are supplied by feature code; this facade never fetches data.

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from src.listview.filter_engine import Extractor, Predicate, filter_view
from src.listview.paginator import PageResult, page_window, paginate
from src.listview.query_codec import FilterValue
from src.listview.query_params import QueryParamsDevice
from src.listview.synchronizer import ViewSynchronizer
from src.listview.view_state import SortOrder, SortSpec, ViewSchema, ViewState

LOGGER = logging.getLogger("listview.view")

T = TypeVar("T")


@dataclass(frozen=True)
class FilterBinding:
    name: str
    value: FilterValue
    default: FilterValue
    set_value: Callable[[Any], ViewState] = field(repr=False, compare=False)

    @property
    def is_active(self) -> bool:
        return self.value != self.default


@dataclass(frozen=True)
class PaginationControls:
    page: int
    total_pages: int
    total_items: int
    limit: int
    limit_options: tuple[int, ...]
    start_item: int
    end_item: int
    window: tuple[int | str, ...]
    set_page: Callable[[int], ViewState] = field(repr=False, compare=False)
    set_limit: Callable[[int], ViewState] = field(repr=False, compare=False)

    @property
    def can_go_previous(self) -> bool:
        return self.page > 1

    @property
    def can_go_next(self) -> bool:
        return self.page < self.total_pages


@dataclass(frozen=True)
class ListViewResult(Generic[T]):
    state: ViewState
    items: tuple[T, ...]
    filters: Mapping[str, FilterBinding]
    pagination: PaginationControls
    sort: SortSpec | None
    set_sort: Callable[..., ViewState] = field(repr=False, compare=False)
    clear_all: Callable[[], ViewState] = field(repr=False, compare=False)


class ListView(Generic[T]):
    def __init__(
        self,
        *,
        schema: ViewSchema,
        device: QueryParamsDevice,
        predicates: Mapping[str, Predicate],
        sort_keys: Mapping[str, Extractor] | None = None,
        name: str = "list",
        window_delta: int = 1,
    ) -> None:
        self.synchronizer = ViewSynchronizer(schema=schema, device=device, name=name)
        self.predicates = dict(predicates)
        self.sort_keys = dict(sort_keys or {})
        self.name = name
        self.window_delta = window_delta
        self._page_count: tuple[tuple[object, ...], int] | None = None

    @property
    def state(self) -> ViewState:
        return self.synchronizer.state

    def set_page(self, page: int) -> ViewState:
        return self.synchronizer.set_page(page, total_pages=self._known_total_pages())

    def set_sort(self, sort_field: str | None, order: SortOrder | None = None) -> ViewState:
        return self.synchronizer.set_sort(sort_field, order)

    def _known_total_pages(self) -> int | None:
        # Only valid while the filters and page size it was counted for are still current.
        if self._page_count is None:
            return None
        key, total_pages = self._page_count
        if key != _count_key(self.synchronizer.state):
            return None
        return total_pages

    def page_of(self, records: Sequence[T]) -> PageResult[T]:
        """Filter, sort, and slice `records` for the current state, clamping stale pages."""

        state = self.synchronizer.state
        visible = filter_view(records, state, self.predicates, sort_keys=self.sort_keys)
        result = paginate(visible, page=state.page, limit=state.limit)
        self._page_count = (_count_key(state), result.total_pages)
        if result.page > result.total_pages:
            LOGGER.info(
                "view %s page %s exceeds %s pages; clamping",
                self.name,
                result.page,
                result.total_pages,
            )
            state = self.synchronizer.set_page(result.page, total_pages=result.total_pages)
            result = paginate(visible, page=state.page, limit=state.limit)
        return result

    def snapshot(self, records: Sequence[T]) -> ListViewResult[T]:
        result = self.page_of(records)
        state = self.synchronizer.state
        schema = state.schema

        bindings = {
            spec.name: FilterBinding(
                name=spec.name,
                value=state.filters[spec.name],
                default=spec.default,
                set_value=_bind(self.synchronizer.set_filter, spec.name),
            )
            for spec in schema.filters
        }
        controls = PaginationControls(
            page=result.page,
            total_pages=result.total_pages,
            total_items=result.total,
            limit=result.limit,
            limit_options=schema.limit_options,
            start_item=result.start_item,
            end_item=result.end_item,
            window=tuple(
                page_window(
                    current_page=result.page,
                    total_pages=result.total_pages,
                    delta=self.window_delta,
                )
            ),
            set_page=self.set_page,
            set_limit=self.synchronizer.set_limit,
        )
        return ListViewResult(
            state=state,
            items=result.items,
            filters=bindings,
            pagination=controls,
            sort=state.sort,
            set_sort=self.set_sort,
            clear_all=self.synchronizer.clear_all,
        )


def _bind(setter: Callable[[str, Any], ViewState], name: str) -> Callable[[Any], ViewState]:
    def _set(value: Any) -> ViewState:
        return setter(name, value)

    return _set


def _count_key(state: ViewState) -> tuple[object, ...]:
    return (tuple(sorted(state.filters.items())), state.limit)
