# This file applies list-view filters, free-text search, and sorting to in-memory records.
# It exists so every list screen uses one AND-combined filter pass instead of per-entity copies.
# Filters at their default value are inactive and their predicates are never invoked.
# Records stay opaque; callers supply predicates and extractors that know their shape.

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, TypeVar

from src.listview.query_codec import FilterValue, is_elided_text, serialize_value
from src.listview.view_state import SortSpec, ViewState

LOGGER = logging.getLogger("listview.filters")

T = TypeVar("T")

Predicate = Callable[[Any, FilterValue], bool]
Extractor = Callable[[Any], Any]


def field_getter(field: str) -> Extractor:
    """Build an extractor reading `field` from a mapping or an attribute object."""

    def _get(record: Any) -> Any:
        if isinstance(record, Mapping):
            return record.get(field)
        return getattr(record, field, None)

    return _get


def field_equals(field: str) -> Predicate:
    get = field_getter(field)

    def _matches(record: Any, value: FilterValue) -> bool:
        return get(record) == value

    return _matches


def _contains(candidate: Any, needle: str) -> bool:
    if candidate is None:
        return False
    return needle in str(candidate).lower()


def search_predicate(*extractors: Extractor) -> Predicate:
    """Match a search term case-insensitively as a substring of any extracted value."""

    def _matches(record: Any, term: FilterValue) -> bool:
        needle = str(term).strip().lower()
        if not needle:
            return True
        return any(_contains(extract(record), needle) for extract in extractors)

    return _matches


def any_item_contains(field: str) -> Extractor:
    """Build an extractor that joins a list-valued field so search can match any item."""

    get = field_getter(field)

    def _joined(record: Any) -> str | None:
        items = get(record)
        if not items:
            return None
        if isinstance(items, str):
            return items
        return "\n".join(str(item) for item in items)

    return _joined


def _is_inactive(value: FilterValue, default: FilterValue | None) -> bool:
    if default is not None and serialize_value(value) == serialize_value(default):
        return True
    return is_elided_text(serialize_value(value))


def apply_filters(
    records: Iterable[T],
    filters: Mapping[str, FilterValue],
    predicates: Mapping[str, Predicate],
    *,
    defaults: Mapping[str, FilterValue] | None = None,
) -> list[T]:
    """Keep records that satisfy every active filter, evaluated in `filters` order."""

    defaults = defaults or {}
    active: list[tuple[Predicate, FilterValue]] = []
    for name, value in filters.items():
        if _is_inactive(value, defaults.get(name)):
            continue
        predicate = predicates.get(name)
        if predicate is None:
            LOGGER.debug("filter %s has no predicate; skipping", name)
            continue
        active.append((predicate, value))

    if not active:
        return list(records)
    return [
        record for record in records if all(predicate(record, value) for predicate, value in active)
    ]


def sort_records(
    records: Sequence[T],
    sort: SortSpec | None,
    *,
    keys: Mapping[str, Extractor] | None = None,
) -> list[T]:
    """Stable sort by `sort.field`; records without a value are placed last in both orders."""

    if sort is None:
        return list(records)
    extract = (keys or {}).get(sort.field) or field_getter(sort.field)

    present: list[tuple[Any, T]] = []
    missing: list[T] = []
    for record in records:
        value = extract(record)
        if value is None:
            missing.append(record)
        else:
            present.append((value, record))

    try:
        present.sort(key=lambda pair: pair[0], reverse=sort.descending)
    except TypeError:
        present.sort(key=lambda pair: str(pair[0]), reverse=sort.descending)
    return [record for _, record in present] + missing


def filter_view(
    records: Iterable[T],
    state: ViewState,
    predicates: Mapping[str, Predicate],
    *,
    sort_keys: Mapping[str, Extractor] | None = None,
) -> list[T]:
    """Apply a view state's filters and then its sort order."""

    filtered = apply_filters(
        records,
        state.filters,
        predicates,
        defaults=state.schema.default_filters,
    )
    return sort_records(filtered, state.sort, keys=sort_keys)
