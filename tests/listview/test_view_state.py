# This test file validates view-state decoding, transformers, and canonical re-encoding.
# It exists so page resets, limit fallbacks, and round-tripping hold for every list screen.
# Unknown parameters and malformed values must degrade to defaults without raising.

from __future__ import annotations

import pytest

from src.listview.query_codec import string_filter
from src.listview.view_state import (
    SchemaError,
    SortSpec,
    ViewSchema,
    ViewState,
    active_filters,
    encode_view_state,
)


def _query_of(state: ViewState) -> dict[str, str]:
    return {key: value for key, value in encode_view_state(state).items() if value is not None}


def test_from_query_defaults_when_params_absent(booking_schema: ViewSchema) -> None:
    state = ViewState.from_query({}, booking_schema)

    assert dict(state.filters) == {"search": "", "status": "all", "paid_only": False}
    assert state.sort is None
    assert state.page == 1
    assert state.limit == 10
    assert state == ViewState.initial(booking_schema)


def test_round_trip_of_non_default_state(booking_schema: ViewSchema) -> None:
    state = (
        ViewState.initial(booking_schema)
        .with_filter("search", "alice")
        .with_filter("status", "Completed")
        .with_filter("paid_only", True)
        .with_sort("payment", "desc")
        .with_limit(25)
        .with_page(3)
    )

    query = _query_of(state)

    assert query == {
        "search": "alice",
        "status": "Completed",
        "paid_only": "true",
        "sort": "payment:desc",
        "limit": "25",
        "page": "3",
    }
    assert ViewState.from_query(query, booking_schema) == state


def test_default_values_are_elided(booking_schema: ViewSchema) -> None:
    state = ViewState.initial(booking_schema).with_filter("status", "all")

    patch = encode_view_state(state)

    assert set(patch) == {"search", "status", "paid_only", "sort", "page", "limit"}
    assert all(value is None for value in patch.values())


def test_filter_and_sort_changes_reset_page(booking_schema: ViewSchema) -> None:
    state = ViewState.initial(booking_schema).with_page(4)

    assert state.page == 4
    assert state.with_filter("status", "Upcoming").page == 1
    assert state.with_sort("client_name").page == 1
    assert state.with_limit(50).page == 1
    assert state.with_filters({"search": "x", "status": "Runing"}).page == 1


def test_with_page_clamps_to_bounds(booking_schema: ViewSchema) -> None:
    state = ViewState.initial(booking_schema)

    assert state.with_page(0).page == 1
    assert state.with_page(-3).page == 1
    assert state.with_page("nope").page == 1
    assert state.with_page(9, total_pages=3).page == 3
    assert state.with_page(2, total_pages=0).page == 1


def test_with_limit_falls_back_to_default_for_unknown_sizes(booking_schema: ViewSchema) -> None:
    state = ViewState.initial(booking_schema)

    assert state.with_limit(37).limit == 10
    assert state.with_limit("25").limit == 10
    assert state.with_limit(100).limit == 100


def test_with_sort_toggles_direction_on_same_field(booking_schema: ViewSchema) -> None:
    state = ViewState.initial(booking_schema).with_sort("client_name")
    assert state.sort == SortSpec(field="client_name", order="asc")

    state = state.with_sort("client_name")
    assert state.sort == SortSpec(field="client_name", order="desc")

    state = state.with_sort("payment")
    assert state.sort == SortSpec(field="payment", order="asc")

    assert state.with_sort("not_a_field").sort is None


def test_malformed_query_values_degrade_to_defaults(booking_schema: ViewSchema) -> None:
    state = ViewState.from_query(
        {
            "page": "-7",
            "limit": "13",
            "sort": "password:asc",
            "status": "Exploded",
            "paid_only": "perhaps",
        },
        booking_schema,
    )

    assert state == ViewState.initial(booking_schema)


def test_unknown_parameters_are_ignored_and_never_reencoded(booking_schema: ViewSchema) -> None:
    state = ViewState.from_query({"foo": "bar", "status": "Completed"}, booking_schema)

    assert state.filters["status"] == "Completed"
    assert "foo" not in state.filters
    assert "foo" not in encode_view_state(state)


def test_unknown_filter_name_leaves_filters_unchanged(booking_schema: ViewSchema) -> None:
    state = ViewState.initial(booking_schema)

    assert dict(state.with_filter("colour", "red").filters) == dict(state.filters)


def test_hydration_is_idempotent(booking_schema: ViewSchema) -> None:
    query = {"search": "Ik-1", "page": "2", "sort": "payment"}

    first = ViewState.from_query(query, booking_schema)
    second = ViewState.from_query(query, booking_schema)

    assert first == second
    assert hash(first) == hash(second)
    assert first.sort == SortSpec(field="payment", order="asc")


def test_cleared_keeps_limit_and_restores_defaults(booking_schema: ViewSchema) -> None:
    state = (
        ViewState.initial(booking_schema)
        .with_limit(50)
        .with_filter("status", "Runing")
        .with_sort("payment")
        .with_page(2)
    )

    cleared = state.cleared()

    assert cleared.limit == 50
    assert cleared.page == 1
    assert cleared.sort is None
    assert active_filters(cleared) == {}


def test_active_filters_lists_non_defaults_in_declaration_order(booking_schema: ViewSchema) -> None:
    state = ViewState.initial(booking_schema).with_filters({"paid_only": True, "search": "al"})

    assert list(active_filters(state).items()) == [("search", "al"), ("paid_only", True)]


def test_filters_mapping_is_read_only(booking_schema: ViewSchema) -> None:
    state = ViewState.initial(booking_schema)

    with pytest.raises(TypeError):
        state.filters["status"] = "Completed"  # type: ignore[index]


def test_prefix_namespaces_every_parameter() -> None:
    schema = ViewSchema(filters=(string_filter("search"),), prefix="users_")
    state = ViewState.from_query({"users_search": "bob", "search": "ignored"}, schema)

    assert state.filters["search"] == "bob"
    assert set(encode_view_state(state.with_page(2))) == {
        "users_search",
        "users_sort",
        "users_page",
        "users_limit",
    }


def test_default_sort_is_elided_and_restored() -> None:
    schema = ViewSchema(
        sortable_fields=("created_at", "name"),
        default_sort=SortSpec(field="created_at", order="desc"),
    )
    state = ViewState.initial(schema)

    assert encode_view_state(state)["sort"] is None
    assert state.with_sort(None).sort == SortSpec(field="created_at", order="desc")
    assert encode_view_state(state.with_sort("name"))["sort"] == "name:asc"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"filters": (string_filter("search"), string_filter("search"))},
        {"filters": (string_filter("page"),)},
        {"default_limit": 15},
        {"limit_options": ()},
        {"default_sort": SortSpec(field="missing")},
    ],
)
def test_inconsistent_schemas_raise(kwargs: dict[str, object]) -> None:
    with pytest.raises(SchemaError):
        ViewSchema(**kwargs)  # type: ignore[arg-type]
