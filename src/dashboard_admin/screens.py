# This file declares every admin list screen as data: filters, predicates, search fields, and columns.
# It exists so bookings, users, leads, and the other lists share one engine instead of per-entity reducers.
# Each definition builds its schema from the dashboard config so page sizes stay uniform across screens.
# Feature code only has to know record field names; pagination and URL rules live in src.listview.

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from src.dashboard_admin.dashboard_config import DashboardConfig
from src.listview.filter_engine import (
    Extractor,
    Predicate,
    any_item_contains,
    field_equals,
    field_getter,
    search_predicate,
)
from src.listview.list_view import ListView
from src.listview.query_codec import FilterSpec, boolean_filter, choice_filter, string_filter
from src.listview.query_params import QueryParamsDevice
from src.listview.view_state import SortSpec, ViewSchema


@dataclass(frozen=True)
class ScreenDefinition:
    key: str
    title: str
    filters: tuple[FilterSpec, ...]
    predicates: Mapping[str, Predicate]
    columns: tuple[str, ...]
    sortable_fields: tuple[str, ...] = ()
    default_sort: SortSpec | None = None
    sort_keys: Mapping[str, Extractor] = field(default_factory=dict)

    def build_schema(self, config: DashboardConfig, *, prefix: str = "") -> ViewSchema:
        return ViewSchema(
            filters=self.filters,
            sortable_fields=self.sortable_fields,
            default_sort=self.default_sort,
            limit_options=config.page_size_options,
            default_limit=config.default_page_size,
            prefix=prefix,
        )

    def build_view(
        self,
        *,
        config: DashboardConfig,
        device: QueryParamsDevice,
        prefix: str = "",
    ) -> ListView:
        return ListView(
            schema=self.build_schema(config, prefix=prefix),
            device=device,
            predicates=self.predicates,
            sort_keys=self.sort_keys,
            name=self.key,
            window_delta=config.page_window_delta,
        )


def _is_truthy(field_name: str) -> Predicate:
    get = field_getter(field_name)

    def _matches(record: object, value: object) -> bool:
        return bool(get(record)) == bool(value)

    return _matches


def _lowered(field_name: str) -> Extractor:
    get = field_getter(field_name)

    def _key(record: object) -> object:
        value = get(record)
        return value.lower() if isinstance(value, str) else value

    return _key


BOOKINGS = ScreenDefinition(
    key="bookings",
    title="Bookings",
    filters=(
        string_filter("search"),
        choice_filter("status", ("Upcoming", "Runing", "Completed")),
        choice_filter("payment_status", ("Paid", "Pending")),
    ),
    predicates={
        "search": search_predicate(
            field_getter("client_name"),
            field_getter("car_model"),
            field_getter("id"),
            field_getter("license_plate"),
        ),
        "status": field_equals("status"),
        "payment_status": field_equals("payment_status"),
    },
    columns=(
        "id",
        "client_name",
        "car_model",
        "license_plate",
        "start_date",
        "end_date",
        "plan",
        "payment",
        "payment_status",
        "status",
    ),
    sortable_fields=("start_date", "client_name", "payment"),
    sort_keys={"client_name": _lowered("client_name")},
)

USERS = ScreenDefinition(
    key="users",
    title="Users",
    filters=(
        string_filter("search"),
        choice_filter("status", ("active", "blocked", "pending", "inactive")),
        choice_filter("role", ("admin", "moderator", "editor", "user")),
    ),
    predicates={
        "search": search_predicate(
            field_getter("first_name"),
            field_getter("last_name"),
            field_getter("email"),
            field_getter("phone"),
        ),
        "status": field_equals("status"),
        "role": field_equals("role"),
    },
    columns=("id", "first_name", "last_name", "email", "phone", "role", "status", "created_at"),
    sortable_fields=("first_name", "last_name", "email", "created_at"),
    default_sort=SortSpec(field="created_at", order="desc"),
    sort_keys={"first_name": _lowered("first_name"), "last_name": _lowered("last_name")},
)

LEADS = ScreenDefinition(
    key="leads",
    title="Leads",
    filters=(
        string_filter("search"),
        choice_filter("status", ("active", "expired")),
    ),
    predicates={
        "search": search_predicate(
            field_getter("name"),
            field_getter("email"),
            field_getter("contact"),
            field_getter("required_service"),
        ),
        "status": field_equals("status"),
    },
    columns=("id", "name", "email", "contact", "required_service", "status", "updated_at"),
    sortable_fields=("name", "updated_at"),
)

BONUS = ScreenDefinition(
    key="bonus",
    title="Bonus Management",
    filters=(
        string_filter("search"),
        boolean_filter("bonus_only"),
    ),
    predicates={
        "search": search_predicate(field_getter("name"), field_getter("email")),
        "bonus_only": _is_truthy("bonus_amount"),
    },
    columns=("id", "name", "email", "bonus_amount", "bonus_status"),
    sortable_fields=("name", "bonus_amount"),
    sort_keys={"name": _lowered("name")},
)

SERVICES = ScreenDefinition(
    key="services",
    title="Services",
    filters=(
        string_filter("search"),
        choice_filter("status", ("active", "inactive")),
        string_filter("category", default="all"),
    ),
    predicates={
        "search": search_predicate(field_getter("name"), field_getter("category_name")),
        "status": field_equals("status"),
        "category": field_equals("category_id"),
    },
    columns=("id", "name", "category_name", "price", "status"),
    sortable_fields=("name", "price"),
)

CUSTOMERS = ScreenDefinition(
    key="customers",
    title="Customers",
    filters=(
        string_filter("search"),
        choice_filter("status", ("active", "inactive")),
    ),
    predicates={
        "search": search_predicate(
            field_getter("user_name"),
            field_getter("email"),
            field_getter("contact"),
            field_getter("location"),
        ),
        "status": field_equals("status"),
    },
    columns=("id", "user_name", "email", "contact", "location", "status"),
    sortable_fields=("user_name", "location"),
)

TRADE_PERSONS = ScreenDefinition(
    key="trade_persons",
    title="Trade Persons",
    filters=(
        string_filter("search"),
        choice_filter("status", ("pending", "approved", "rejected")),
    ),
    predicates={
        "search": search_predicate(
            field_getter("business_name"),
            field_getter("owner_name"),
            field_getter("email"),
            any_item_contains("services"),
            field_getter("location"),
        ),
        "status": field_equals("status"),
    },
    columns=("id", "business_name", "owner_name", "email", "services", "location", "status"),
    sortable_fields=("business_name", "owner_name"),
)

TRANSACTIONS = ScreenDefinition(
    key="transactions",
    title="Transactions History",
    filters=(
        string_filter("search"),
        choice_filter("status", ("Pending", "Completed", "Failed", "Cancelled")),
    ),
    predicates={
        "search": search_predicate(
            field_getter("transaction_id"),
            field_getter("user_name"),
            field_getter("email"),
        ),
        "status": field_equals("status"),
    },
    columns=("transaction_id", "user_name", "email", "amount", "status", "created_at"),
    sortable_fields=("amount", "created_at"),
    default_sort=SortSpec(field="created_at", order="desc"),
)

SCREENS: dict[str, ScreenDefinition] = {
    screen.key: screen
    for screen in (
        BOOKINGS,
        USERS,
        LEADS,
        BONUS,
        SERVICES,
        CUSTOMERS,
        TRADE_PERSONS,
        TRANSACTIONS,
    )
}

SCREEN_PARAM = string_filter("screen", default=BOOKINGS.key)


def get_screen(key: str) -> ScreenDefinition:
    try:
        return SCREENS[key]
    except KeyError as exc:
        supported = ", ".join(sorted(SCREENS))
        raise KeyError(f"Unknown screen '{key}'. Supported screens: {supported}") from exc


def screen_switch_patch(
    *,
    outgoing: ScreenDefinition,
    incoming_key: str,
    config: DashboardConfig,
) -> dict[str, str | None]:
    """Clear the outgoing screen's list parameters and select `incoming_key`; other parameters are kept."""

    patch: dict[str, str | None] = {name: None for name in outgoing.build_schema(config).param_names}
    patch[SCREEN_PARAM.name] = SCREEN_PARAM.encode(incoming_key)
    return patch
