# This file defines the immutable view state of one list screen and the schema that declares it.
# It exists so filters, sort, page, and page size are decoded and re-encoded by one set of rules.
# Every transformer returns a new ViewState and applies the page-reset rules for filter, sort, and limit changes.
# The schema is validated once at construction so query decoding itself never has to raise.

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Final, Literal

from src.listview.query_codec import FilterSpec, FilterValue, decode, encode, parse_int

LOGGER = logging.getLogger("listview.state")

SortOrder = Literal["asc", "desc"]

DEFAULT_LIMIT: Final[int] = 10
DEFAULT_LIMIT_OPTIONS: Final[tuple[int, ...]] = (10, 25, 50, 100)


class SchemaError(ValueError):
    """Raised when a list-view schema is declared inconsistently."""


@dataclass(frozen=True)
class SortSpec:
    field: str
    order: SortOrder = "asc"

    @property
    def as_text(self) -> str:
        return f"{self.field}:{self.order}"

    @property
    def descending(self) -> bool:
        return self.order == "desc"


def parse_sort_text(raw: str, *, allowed_fields: Sequence[str]) -> SortSpec:
    """Parse sort text in the form `field:asc|desc`; raise ValueError when invalid."""

    text = raw.strip()
    if ":" in text:
        sort_field, order = text.split(":", 1)
    else:
        sort_field, order = text, "asc"
    order = order.strip().lower()
    if sort_field not in allowed_fields:
        raise ValueError(f"unsupported sort field {sort_field!r}")
    if order not in {"asc", "desc"}:
        raise ValueError("sort order must be 'asc' or 'desc'")
    return SortSpec(field=sort_field, order=order)  # type: ignore[arg-type]


@dataclass(frozen=True)
class ViewSchema:
    filters: tuple[FilterSpec, ...] = ()
    sortable_fields: tuple[str, ...] = ()
    default_sort: SortSpec | None = None
    limit_options: tuple[int, ...] = DEFAULT_LIMIT_OPTIONS
    default_limit: int = DEFAULT_LIMIT
    prefix: str = ""
    page_param: str = "page"
    limit_param: str = "limit"
    sort_param: str = "sort"

    def __post_init__(self) -> None:
        names = [spec.name for spec in self.filters]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise SchemaError(f"Duplicate filter names: {', '.join(duplicates)}")
        reserved = {self.page_param, self.limit_param, self.sort_param}
        if len(reserved) != 3:
            raise SchemaError("page, limit, and sort parameters must have distinct names")
        collisions = sorted(reserved.intersection(names))
        if collisions:
            raise SchemaError(f"Filter names collide with reserved parameters: {', '.join(collisions)}")
        if not self.limit_options or any(option < 1 for option in self.limit_options):
            raise SchemaError("limit_options must contain positive page sizes")
        if self.default_limit not in self.limit_options:
            raise SchemaError(
                f"default_limit {self.default_limit} is not one of {list(self.limit_options)}"
            )
        if self.default_sort is not None and self.default_sort.field not in self.sortable_fields:
            raise SchemaError(f"default sort field {self.default_sort.field!r} is not sortable")

    def filter_spec(self, name: str) -> FilterSpec | None:
        for spec in self.filters:
            if spec.name == name:
                return spec
        return None

    def param_name(self, name: str) -> str:
        return f"{self.prefix}{name}"

    @property
    def param_names(self) -> tuple[str, ...]:
        names = [self.param_name(spec.name) for spec in self.filters]
        names.extend(
            self.param_name(name) for name in (self.page_param, self.limit_param, self.sort_param)
        )
        return tuple(names)

    @property
    def default_filters(self) -> dict[str, FilterValue]:
        return {spec.name: spec.default for spec in self.filters}

    def normalize_limit(self, limit: Any) -> int:
        if isinstance(limit, bool) or not isinstance(limit, int) or limit not in self.limit_options:
            return self.default_limit
        return limit


@dataclass(frozen=True)
class ViewState:
    schema: ViewSchema = field(repr=False, compare=False)
    filters: Mapping[str, FilterValue]
    sort: SortSpec | None = None
    page: int = 1
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        object.__setattr__(self, "filters", MappingProxyType(dict(self.filters)))
        object.__setattr__(self, "page", max(1, int(self.page)))
        object.__setattr__(self, "limit", self.schema.normalize_limit(self.limit))

    def __hash__(self) -> int:
        return hash((tuple(sorted(self.filters.items())), self.sort, self.page, self.limit))

    @classmethod
    def initial(cls, schema: ViewSchema) -> ViewState:
        return cls(
            schema=schema,
            filters=schema.default_filters,
            sort=schema.default_sort,
            page=1,
            limit=schema.default_limit,
        )

    @classmethod
    def from_query(cls, raw_params: Mapping[str, str], schema: ViewSchema) -> ViewState:
        """Decode a view state from raw query parameters; undeclared parameters are ignored."""

        filters = {
            spec.name: spec.decode(raw_params.get(schema.param_name(spec.name)))
            for spec in schema.filters
        }

        raw_sort = raw_params.get(schema.param_name(schema.sort_param))
        sort = decode(
            schema.sort_param,
            raw_sort,
            schema.default_sort,
            lambda text: parse_sort_text(text, allowed_fields=schema.sortable_fields),
        )

        page = decode(
            schema.page_param, raw_params.get(schema.param_name(schema.page_param)), 1, parse_int
        )
        limit = decode(
            schema.limit_param,
            raw_params.get(schema.param_name(schema.limit_param)),
            schema.default_limit,
            parse_int,
        )
        return cls(schema=schema, filters=filters, sort=sort, page=page, limit=limit)

    def filter_value(self, name: str) -> FilterValue | None:
        return self.filters.get(name)

    def with_filter(self, name: str, value: Any) -> ViewState:
        return self.with_filters({name: value})

    def with_filters(self, values: Mapping[str, Any]) -> ViewState:
        filters = dict(self.filters)
        applied = False
        for name, value in values.items():
            spec = self.schema.filter_spec(name)
            if spec is None:
                LOGGER.warning("ignoring unknown filter %r", name)
                continue
            filters[name] = spec.coerce(value)
            applied = True
        if not applied:
            return self
        return replace(self, filters=filters, page=1)

    def with_sort(self, sort_field: str | None, order: SortOrder | None = None) -> ViewState:
        """Sort by `sort_field`; without an explicit order, repeated calls toggle asc/desc."""

        if sort_field is None or sort_field not in self.schema.sortable_fields:
            if sort_field is not None:
                LOGGER.debug("ignoring unsortable field %r", sort_field)
            return replace(self, sort=self.schema.default_sort, page=1)
        if order is None:
            toggled = self.sort is not None and self.sort.field == sort_field and self.sort.order == "asc"
            order = "desc" if toggled else "asc"
        elif order not in ("asc", "desc"):
            order = "asc"
        return replace(self, sort=SortSpec(field=sort_field, order=order), page=1)

    def with_page(self, page: Any, total_pages: int | None = None) -> ViewState:
        try:
            requested = int(page)
        except (TypeError, ValueError):
            requested = 1
        if total_pages is not None:
            requested = min(requested, max(1, total_pages))
        return replace(self, page=max(1, requested))

    def with_limit(self, limit: Any) -> ViewState:
        return replace(self, limit=self.schema.normalize_limit(limit), page=1)

    def cleared(self) -> ViewState:
        return replace(
            self, filters=self.schema.default_filters, sort=self.schema.default_sort, page=1
        )


def encode_view_state(state: ViewState) -> dict[str, str | None]:
    """Return the full parameter patch for a view; None marks a parameter to delete."""

    schema = state.schema
    patch: dict[str, str | None] = {}
    for spec in schema.filters:
        patch[schema.param_name(spec.name)] = spec.encode(state.filters[spec.name])

    default_sort_text = schema.default_sort.as_text if schema.default_sort else ""
    sort_text = state.sort.as_text if state.sort else ""
    patch[schema.param_name(schema.sort_param)] = encode(
        schema.sort_param, sort_text, default_sort_text, str
    )
    patch[schema.param_name(schema.page_param)] = encode(schema.page_param, state.page, 1)
    patch[schema.param_name(schema.limit_param)] = encode(
        schema.limit_param, state.limit, schema.default_limit
    )
    return patch


def active_filters(state: ViewState) -> dict[str, FilterValue]:
    """Return the filters whose value differs from the declared default, in declaration order."""

    return {
        spec.name: state.filters[spec.name]
        for spec in state.schema.filters
        if not spec.is_default(state.filters[spec.name])
    }
