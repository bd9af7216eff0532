# This file encodes and decodes single list-view values to and from query-string text.
# It exists so every list screen applies the same default elision and sentinel rules.
# Decoding never raises: absent, empty, sentinel, or unparseable values resolve to the declared default.
# The FilterSpec entries make each filter's type, default, and parse/serialize pair explicit.

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Final, Literal

LOGGER = logging.getLogger("listview.codec")

FilterValue = str | int | bool
FilterKind = Literal["string", "number", "boolean"]

NO_FILTER_SENTINEL: Final[str] = "all"
ELIDED_TEXT: Final[frozenset[str]] = frozenset({"", NO_FILTER_SENTINEL})

_TRUE_TEXT: Final[frozenset[str]] = frozenset({"true", "1", "yes", "on"})
_FALSE_TEXT: Final[frozenset[str]] = frozenset({"false", "0", "no", "off"})


def _identity(raw: str) -> str:
    return raw


def serialize_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def parse_int(raw: str) -> int:
    return int(raw.strip())


def parse_bool(raw: str) -> bool:
    text = raw.strip().lower()
    if text in _TRUE_TEXT:
        return True
    if text in _FALSE_TEXT:
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def is_elided_text(text: str) -> bool:
    return text in ELIDED_TEXT


def encode(
    name: str,
    value: Any,
    default: Any,
    serialize: Callable[[Any], str] = serialize_value,
) -> str | None:
    """Return the query text for `value`, or None when the parameter must be omitted."""

    serialized = serialize(value)
    if serialized == serialize(default) or is_elided_text(serialized):
        return None
    return serialized


def decode(
    name: str,
    raw: str | None,
    default: Any,
    parse: Callable[[str], Any] = _identity,
) -> Any:
    """Return the parsed value of `raw`, falling back to `default` on any failure."""

    if raw is None or is_elided_text(raw):
        return default
    try:
        return parse(raw)
    except Exception as exc:  # noqa: BLE001
        LOGGER.debug("query param %s=%r fell back to default: %s", name, raw, exc)
        return default


@dataclass(frozen=True)
class FilterSpec:
    name: str
    kind: FilterKind
    default: FilterValue
    parse: Callable[[str], Any]
    serialize: Callable[[Any], str] = serialize_value
    choices: tuple[FilterValue, ...] | None = None
    minimum: int | None = None
    maximum: int | None = None

    def accepts(self, value: Any) -> bool:
        if self.choices is not None and value != self.default and value not in self.choices:
            return False
        if self.kind == "number":
            if isinstance(value, bool) or not isinstance(value, int):
                return False
            if self.minimum is not None and value < self.minimum:
                return False
            if self.maximum is not None and value > self.maximum:
                return False
        if self.kind == "boolean" and not isinstance(value, bool):
            return False
        if self.kind == "string" and not isinstance(value, str):
            return False
        return True

    def decode(self, raw: str | None) -> FilterValue:
        value = decode(self.name, raw, self.default, self.parse)
        if not self.accepts(value):
            LOGGER.debug("query param %s=%r is out of range; using default", self.name, raw)
            return self.default
        return value

    def encode(self, value: FilterValue) -> str | None:
        return encode(self.name, value, self.default, self.serialize)

    def coerce(self, value: Any) -> FilterValue:
        """Normalize a programmatic value to the form a query-string round trip would yield."""

        try:
            serialized = self.serialize(value)
        except Exception as exc:  # noqa: BLE001
            LOGGER.debug("value %r for %s could not be serialized: %s", value, self.name, exc)
            return self.default
        return self.decode(serialized)

    def is_default(self, value: Any) -> bool:
        try:
            serialized = self.serialize(value)
        except Exception:  # noqa: BLE001
            return False
        return serialized == self.serialize(self.default) or is_elided_text(serialized)


def string_filter(name: str, *, default: str = "") -> FilterSpec:
    return FilterSpec(name=name, kind="string", default=default, parse=str.strip)


def choice_filter(
    name: str,
    choices: Sequence[str],
    *,
    default: str = NO_FILTER_SENTINEL,
) -> FilterSpec:
    return FilterSpec(
        name=name,
        kind="string",
        default=default,
        parse=_identity,
        choices=tuple(choices),
    )


def number_filter(
    name: str,
    *,
    default: int = 0,
    minimum: int | None = None,
    maximum: int | None = None,
) -> FilterSpec:
    return FilterSpec(
        name=name,
        kind="number",
        default=default,
        parse=parse_int,
        minimum=minimum,
        maximum=maximum,
    )


def boolean_filter(name: str, *, default: bool = False) -> FilterSpec:
    return FilterSpec(name=name, kind="boolean", default=default, parse=parse_bool)
