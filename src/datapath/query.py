"""Query-string encoding and decoding on top of flatten/hierarchize."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl, urlencode

from datapath.transcoder import flatten, hierarchize

__all__ = ["encode_query", "build_url", "decode_query"]

_HAS_SCHEME = re.compile(r"^[a-zA-Z]+://")


def _render(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else _render(item) for item in value)
    return str(value)


def encode_query(data: Any, traverse_array: bool = False) -> str:
    """Encode *data* as a URL query string keyed by flattened paths.

    ``{"a": {"b": 1}, "c": [1, 2]}`` encodes as ``a.b=1&c=1%2C2``.
    """
    pairs = [(path, _render(value)) for path, value in flatten(data, traverse_array).items()]
    return urlencode(pairs)


def build_url(url: str, data: Any = None, host: str | None = None) -> str:
    """Return *url* with *data* appended as its query string.

    *host* is prefixed when *url* carries no scheme.
    """
    if host is not None and _HAS_SCHEME.match(url) is None:
        url = host + url
    if not data:
        return url
    separator = "&" if "?" in url else "?"
    return url + separator + encode_query(data)


def decode_query(query: str | Mapping[str, Any]) -> dict[str, Any]:
    """Decode a query string (or an already-parsed mapping) into a nested dict.

    Repeated keys keep their last value and blank values are kept as ``""``.
    """
    if isinstance(query, Mapping):
        return hierarchize(query)
    pairs = parse_qsl(query.removeprefix("?"), keep_blank_values=True)
    return hierarchize(dict(pairs))
