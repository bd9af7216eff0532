# This file defines the narrow read/write interface to the address-bar query string.
# It exists so the synchronizer never touches global navigation state directly and tests can swap in memory.
# Writes are merge patches: a string sets a parameter, None deletes it, and unrelated parameters survive.
# The parse/build helpers make hand-typed URLs decode the same way as engine-produced ones.

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol
from urllib.parse import parse_qsl, urlencode

ParamPatch = Mapping[str, str | None]


class QueryParamsDevice(Protocol):
    def read_params(self) -> Mapping[str, str]:
        ...

    def write_params(self, patch: ParamPatch) -> None:
        ...


def parse_query_string(text: str) -> dict[str, str]:
    """Parse `?a=1&b=2` text; the first occurrence of a repeated key wins."""

    params: dict[str, str] = {}
    for key, value in parse_qsl(text.lstrip("?"), keep_blank_values=True):
        params.setdefault(key, value)
    return params


def build_query_string(params: Mapping[str, str]) -> str:
    return urlencode(list(params.items()))


def merge_params(current: Mapping[str, str], patch: ParamPatch) -> dict[str, str]:
    merged = dict(current)
    for key, value in patch.items():
        if value is None:
            merged.pop(key, None)
        else:
            merged[key] = value
    return merged


class InMemoryQueryParams:
    """Query-string device held in memory; records every replace-style write."""

    def __init__(self, initial: str | Mapping[str, str] | None = None) -> None:
        if isinstance(initial, str):
            self._params = parse_query_string(initial)
        else:
            self._params = dict(initial or {})
        self.writes: list[dict[str, str | None]] = []
        self.history: list[dict[str, str]] = [dict(self._params)]

    def read_params(self) -> Mapping[str, str]:
        return dict(self._params)

    def write_params(self, patch: ParamPatch) -> None:
        self.writes.append(dict(patch))
        self._params = merge_params(self._params, patch)
        self.history[-1] = dict(self._params)

    def navigate(self, query: str | Mapping[str, str]) -> None:
        """Simulate an external navigation that pushes a new history entry."""

        self._params = parse_query_string(query) if isinstance(query, str) else dict(query)
        self.history.append(dict(self._params))

    def back(self) -> None:
        if len(self.history) > 1:
            self.history.pop()
        self._params = dict(self.history[-1])

    @property
    def query_string(self) -> str:
        return build_query_string(self._params)
