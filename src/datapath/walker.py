"""Depth-first traversal over the leaves of a nested structure."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from datapath.kinds import Kind, classify
from datapath.path import Segment, format_path

__all__ = ["walk", "WalkCallback"]

WalkCallback = Callable[[Any, str], None]


def _descends(value: Any, traverse_array: bool) -> bool:
    kind = classify(value)
    return kind is Kind.MAP or (kind is Kind.LIST and traverse_array)


def walk(source: Any, callback: WalkCallback, traverse_array: bool = False) -> None:
    """Call ``callback(value, path)`` for every leaf reachable from *source*.

    Dicts are always descended into, in insertion order. Lists are descended
    into, in index order, only when *traverse_array* is true; otherwise a list
    is reported as a single leaf. *path* is the bracketed path string of the
    leaf, e.g. ``"a.b[0]"``.

    A *source* that is not descended into is itself reported as a leaf at
    path ``""``. Cyclic structures are not supported.
    """

    def visit(node: Any, prefix: tuple[Segment, ...]) -> None:
        items = node.items() if classify(node) is Kind.MAP else enumerate(node)
        for key, value in items:
            segments = (*prefix, key)
            if _descends(value, traverse_array):
                visit(value, segments)
            else:
                callback(value, format_path(segments))

    if _descends(source, traverse_array):
        visit(source, ())
    else:
        callback(source, "")
