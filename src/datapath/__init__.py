"""datapath - Path-addressed access to nested dicts and lists."""

from __future__ import annotations

# Core
from datapath.accessor import Accessor, delete, ensure, get, has, set
from datapath.walker import walk
from datapath.transcoder import flatten, hierarchize

# Paths
from datapath.path import Grammar, format_path, is_index, parse_path
from datapath.kinds import MISSING, Kind, classify

# Query strings
from datapath.query import build_url, decode_query, encode_query

# Config
from datapath.config import Config
from datapath.options import PathOptions

# Errors
from datapath.errors import (
    ConfigError,
    ConfigNotFoundError,
    DataPathError,
    ErrorCodes,
    InvalidPathError,
    PathTypeError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Accessor",
    "has",
    "get",
    "set",
    "delete",
    "ensure",
    "walk",
    "flatten",
    "hierarchize",
    # Paths
    "Grammar",
    "parse_path",
    "format_path",
    "is_index",
    "Kind",
    "MISSING",
    "classify",
    # Query strings
    "encode_query",
    "build_url",
    "decode_query",
    # Config
    "Config",
    "PathOptions",
    # Errors
    "ErrorCodes",
    "DataPathError",
    "InvalidPathError",
    "PathTypeError",
    "ConfigError",
    "ConfigNotFoundError",
]
