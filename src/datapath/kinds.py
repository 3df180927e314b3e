"""Shape classification for values found inside nested structures."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from enum import Enum
from typing import Any

__all__ = ["Kind", "MISSING", "classify", "is_writable"]


class _Missing:
    """Singleton marking the absence of a value.

    ``None`` is a present value; ``MISSING`` is what a lookup yields when the
    key or index does not exist.
    """

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


class Kind(Enum):
    """Closed set of value shapes the accessor distinguishes."""

    MAP = "map"
    LIST = "list"
    SCALAR = "scalar"
    MISSING = "missing"


def classify(value: Any) -> Kind:
    """Return the :class:`Kind` of *value*.

    Mappings are maps; ``list`` and ``tuple`` are lists. Strings, bytes and
    everything else are scalars.
    """
    if value is MISSING:
        return Kind.MISSING
    if isinstance(value, Mapping):
        return Kind.MAP
    if isinstance(value, (list, tuple)):
        return Kind.LIST
    return Kind.SCALAR


def is_writable(value: Any) -> bool:
    """Whether *value* is a composite that can be mutated in place."""
    return isinstance(value, (MutableMapping, list))
