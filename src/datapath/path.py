"""Path parsing and formatting.

A path addresses a location in a nested structure. It is either a string
(``"a.b[0].c"``) or an already-split sequence of segments
(``["a", "b", "0", "c"]``). Parsing always returns a fresh tuple, so the
caller's sequence is never consumed or mutated.

Two string grammars exist:

* ``Grammar.DOTTED`` splits on ``.`` only. Brackets are part of the
  segment: ``"a[0]"`` is the single segment ``"a[0]"``.
* ``Grammar.BRACKETED`` treats both ``.`` and ``[...]`` as delimiters:
  ``"a[0].b"`` is ``("a", "0", "b")``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any, Union

from datapath.errors import InvalidPathError

__all__ = ["Grammar", "Path", "Segment", "parse_path", "is_index", "format_path"]

Segment = Union[str, int]
Path = Union[str, Sequence[Segment]]

_BRACKETED_SEGMENT = re.compile(r"[^.\[\]]+")
_INDEX_SEGMENT = re.compile(r"[0-9]+")


class Grammar(str, Enum):
    """String grammar used to split a path into segments."""

    DOTTED = "dotted"
    BRACKETED = "bracketed"


def parse_path(path: Path, grammar: Grammar | str = Grammar.DOTTED) -> tuple[Segment, ...]:
    """Split *path* into a tuple of segments.

    Empty segments are dropped, so ``""``, ``"."`` and ``"[]"`` all parse to
    an empty tuple. Sequences pass through unchanged apart from being copied.

    Raises:
        InvalidPathError: If *path* is neither a string nor a sequence.
    """
    if isinstance(path, str):
        if Grammar(grammar) is Grammar.BRACKETED:
            return tuple(_BRACKETED_SEGMENT.findall(path))
        return tuple(segment for segment in path.split(".") if segment)
    if isinstance(path, (bytes, bytearray)) or not isinstance(path, Sequence):
        raise InvalidPathError(path, reason="expected a string or a sequence of segments")
    return tuple(path)


def is_index(segment: Any) -> bool:
    """Whether *segment* looks like a non-negative list index."""
    if isinstance(segment, bool):
        return False
    if isinstance(segment, int):
        return segment >= 0
    return isinstance(segment, str) and _INDEX_SEGMENT.fullmatch(segment) is not None


def format_path(segments: Iterable[Segment]) -> str:
    """Render *segments* as a bracketed path string.

    Index segments render as ``[n]``, everything else is joined with ``.``:
    ``("a", "0", "b")`` becomes ``"a[0].b"`` and ``("0",)`` becomes ``"[0]"``.
    """
    parts: list[str] = []
    for segment in segments:
        if is_index(segment):
            parts.append(f"[{segment}]")
        else:
            parts.append(f".{segment}")
    return "".join(parts).removeprefix(".")
