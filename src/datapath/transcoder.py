"""Conversion between nested structures and flat path-to-value mappings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from datapath.accessor import set as set_value
from datapath.walker import walk

__all__ = ["flatten", "hierarchize"]


def flatten(source: Any, traverse_array: bool = False) -> dict[str, Any]:
    """Flatten *source* into a single-level dict keyed by path strings.

    Example::

        >>> flatten({"name": {"first": "Jeremy", "last": "Bankes"}})
        {'name.first': 'Jeremy', 'name.last': 'Bankes'}

    Lists are kept whole as values unless *traverse_array* is true. A root
    that is not descended into (a scalar, or a list kept whole) comes back
    under the empty path ``""``, which :func:`hierarchize` rejects.
    """
    flat: dict[str, Any] = {}

    def collect(value: Any, path: str) -> None:
        flat[path] = value

    walk(source, collect, traverse_array)
    return flat


def hierarchize(flat: Mapping[str, Any]) -> dict[str, Any]:
    """Rebuild a nested structure from a flat mapping produced by :func:`flatten`.

    Keys are applied in the mapping's order with :func:`datapath.set`, so
    numeric segments (``"a[0].b"`` or ``"a.0.b"``) rebuild lists.
    """
    result: dict[str, Any] = {}
    for path, value in flat.items():
        set_value(result, path, value)
    return result
