# This test file validates single-value query encoding and decoding.
# It exists so default elision and the "all"/empty sentinel convention stay uniform across screens.
# Decoding must never raise, whatever text arrives in the address bar.

from __future__ import annotations

import pytest

from src.listview.query_codec import (
    boolean_filter,
    choice_filter,
    decode,
    encode,
    number_filter,
    parse_bool,
    string_filter,
)


def test_encode_omits_default_empty_and_sentinel_values() -> None:
    assert encode("status", "all", "all") is None
    assert encode("search", "", "") is None
    assert encode("status", "all", "Completed") is None
    assert encode("page", 1, 1) is None
    assert encode("status", "Completed", "all") == "Completed"
    assert encode("page", 3, 1) == "3"


def test_encode_uses_caller_serializer_for_default_comparison() -> None:
    assert encode("flag", True, True, lambda value: "yes" if value else "no") is None
    assert encode("flag", False, True, lambda value: "yes" if value else "no") == "no"


def test_decode_falls_back_when_absent_or_parse_raises() -> None:
    def _explode(_: str) -> int:
        raise RuntimeError("boom")

    assert decode("page", None, 1, int) == 1
    assert decode("page", "abc", 1, int) == 1
    assert decode("page", "4", 1, _explode) == 1
    assert decode("page", "4", 1, int) == 4
    assert decode("status", "all", "Completed") == "Completed"


def test_choice_filter_rejects_unknown_choices() -> None:
    spec = choice_filter("status", ("Upcoming", "Completed"))

    assert spec.decode("Completed") == "Completed"
    assert spec.decode("Cancelled") == "all"
    assert spec.decode(None) == "all"
    assert spec.coerce("Cancelled") == "all"


def test_number_filter_clamps_out_of_range_to_default() -> None:
    spec = number_filter("rating", default=0, minimum=1, maximum=5)

    assert spec.decode("3") == 3
    assert spec.decode("9") == 0
    assert spec.decode(" 2 ") == 2
    assert spec.decode("2.5") == 0


def test_boolean_filter_accepts_common_spellings() -> None:
    spec = boolean_filter("paid_only")

    assert spec.decode("true") is True
    assert spec.decode("ON") is True
    assert spec.decode("0") is False
    assert spec.decode("maybe") is False
    assert spec.encode(True) == "true"
    assert spec.encode(False) is None
    with pytest.raises(ValueError):
        parse_bool("maybe")


def test_string_filter_coerce_normalizes_whitespace_and_sentinel() -> None:
    spec = string_filter("search")

    assert spec.coerce("  alice ") == "alice"
    assert spec.coerce("all") == ""
    assert spec.is_default("")
    assert spec.is_default("all")
    assert not spec.is_default("alice")
