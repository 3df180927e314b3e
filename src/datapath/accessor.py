"""Read, write and delete values inside nested dicts and lists.

The module-level functions use a default :class:`Accessor`: ``has`` and
``get`` split string paths on ``.`` only, while ``set`` and ``delete`` also
treat ``[n]`` as a delimiter. Build an ``Accessor`` with other
:class:`~datapath.options.PathOptions` to change that.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from datapath.errors import InvalidPathError, PathTypeError
from datapath.kinds import MISSING, Kind, classify, is_writable
from datapath.options import PathOptions
from datapath.path import Path, Segment, format_path, is_index, parse_path

if TYPE_CHECKING:
    from datapath.config import Config

__all__ = ["Accessor", "has", "get", "set", "delete", "ensure"]

logger = logging.getLogger(__name__)


def _child(node: Any, segment: Segment) -> Any:
    """Return the value stored under *segment* in *node*, or ``MISSING``."""
    kind = classify(node)
    if kind is Kind.MAP:
        return node.get(segment, MISSING)
    if kind is Kind.LIST:
        if not is_index(segment):
            return MISSING
        position = int(segment)
        return node[position] if position < len(node) else MISSING
    return MISSING


def _resolve(source: Any, segments: tuple[Segment, ...]) -> Any:
    node = source
    for segment in segments:
        if classify(node) not in (Kind.MAP, Kind.LIST):
            return MISSING
        node = _child(node, segment)
    return node


def _assign(node: Any, segment: Segment, value: Any, path: Path) -> None:
    if isinstance(node, list):
        if not is_index(segment):
            raise PathTypeError(path, segment, "list indices must be non-negative integers")
        position = int(segment)
        if position > len(node):
            logger.debug("Padding list with %d empty slot(s) to reach index %d", position - len(node), position)
            node.extend([None] * (position - len(node)))
        if position == len(node):
            node.append(value)
        else:
            node[position] = value
    else:
        node[segment] = value


class Accessor:
    """Stateless path operations bound to a set of :class:`PathOptions`."""

    def __init__(self, options: PathOptions | None = None) -> None:
        self._options = options or PathOptions()

    @classmethod
    def from_config(cls, config: Config, key: str = "datapath") -> Accessor:
        """Create an accessor from the path options stored under *key* in *config*."""
        return cls(config.path_options(key))

    @property
    def options(self) -> PathOptions:
        return self._options

    def has(self, source: Any, path: Path) -> bool:
        """Whether a value (``None`` included) exists at *path* in *source*."""
        segments = parse_path(path, self._options.read_grammar)
        return _resolve(source, segments) is not MISSING

    def get(self, source: Any, path: Path, fallback: Any = None) -> Any:
        """Return the value at *path* in *source*, or *fallback* if there is none.

        Crossing a value that is neither a dict nor a list counts as absence.
        """
        segments = parse_path(path, self._options.read_grammar)
        value = _resolve(source, segments)
        return fallback if value is MISSING else value

    def _check_index_gaps(self, destination: Any, segments: tuple[Segment, ...], path: Path) -> None:
        """Reject a write that would pad any list on the path by more than ``max_index_gap``.

        Containers that ``set`` would create are stood in for by empty ones, so
        nothing is mutated when the write is refused.
        """
        limit = self._options.max_index_gap
        node = destination
        last = len(segments) - 1
        for index, segment in enumerate(segments):
            if isinstance(node, list) and is_index(segment):
                gap = int(segment) - len(node)
                if gap > limit:
                    raise PathTypeError(path, segment, f"index is {gap} past the end of the list (limit {limit})")
            if index == last:
                return
            child = _child(node, segment)
            if classify(child) in (Kind.MISSING, Kind.SCALAR):
                child = [] if is_index(segments[index + 1]) else {}
            node = child

    def set(self, destination: Any, path: Path, value: Any) -> None:
        """Store *value* at *path* in *destination*, creating containers as needed.

        A missing or non-container intermediate is replaced by a new list when
        the following segment looks like an index and by a dict otherwise, so
        ``set({}, "a.b[0].c", 5)`` produces ``{"a": {"b": [{"c": 5}]}}``.
        Writing past the end of a list pads it with ``None``, up to
        ``max_index_gap`` missing slots.

        Raises:
            InvalidPathError: If *path* has no segments.
            PathTypeError: If a container on the path cannot take the write, or an
                index lies more than ``max_index_gap`` past the end of its list.
        """
        segments = parse_path(path, self._options.write_grammar)
        if not segments:
            raise InvalidPathError(path, reason="path has no segments")
        if not is_writable(destination):
            raise PathTypeError(path, segments[0], f"{type(destination).__name__} is not a writable container")
        self._check_index_gaps(destination, segments, path)

        node = destination
        last = len(segments) - 1
        for index in range(last):
            segment = segments[index]
            child = _child(node, segment)
            kind = classify(child)
            if kind in (Kind.MISSING, Kind.SCALAR):
                if kind is Kind.SCALAR:
                    logger.debug(
                        "Replacing %s at '%s' with a container",
                        type(child).__name__,
                        format_path(segments[: index + 1]),
                    )
                child = [] if is_index(segments[index + 1]) else {}
                _assign(node, segment, child, path)
            elif not is_writable(child):
                raise PathTypeError(path, segments[index + 1], f"{type(child).__name__} is read-only")
            node = child
        _assign(node, segments[last], value, path)

    def delete(self, source: Any, path: Path) -> Any:
        """Remove the value at *path* from *source* and return it.

        Returns ``None`` and leaves *source* untouched when nothing is stored
        at *path*. List elements are popped, so later elements shift down.

        Raises:
            InvalidPathError: If *path* has no segments.
            PathTypeError: If the value sits in a read-only container.
        """
        segments = parse_path(path, self._options.write_grammar)
        if not segments:
            raise InvalidPathError(path, reason="path has no segments")

        parent = _resolve(source, segments[:-1])
        key = segments[-1]
        if _child(parent, key) is MISSING:
            return None
        if not is_writable(parent):
            raise PathTypeError(path, key, f"{type(parent).__name__} is read-only")
        if isinstance(parent, list):
            return parent.pop(int(key))
        return parent.pop(key)

    def ensure(self, destination: Any, path: Path, fallback: Any) -> Any:
        """Return the value at *path*, first storing *fallback* there if absent.

        The path is split once with the write grammar and those segments are
        used for the check, the write and the read, so ``ensure(d, "a[0]", x)``
        keeps an existing ``d["a"][0]``.
        """
        path = parse_path(path, self._options.write_grammar)
        if not self.has(destination, path):
            self.set(destination, path, fallback)
        return self.get(destination, path)


_default = Accessor()


def has(source: Any, path: Path) -> bool:
    return _default.has(source, path)


def get(source: Any, path: Path, fallback: Any = None) -> Any:
    return _default.get(source, path, fallback)


def set(destination: Any, path: Path, value: Any) -> None:
    _default.set(destination, path, value)


def delete(source: Any, path: Path) -> Any:
    return _default.delete(source, path)


def ensure(destination: Any, path: Path, fallback: Any) -> Any:
    return _default.ensure(destination, path, fallback)
