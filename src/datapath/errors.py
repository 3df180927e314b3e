"""Error hierarchy for the datapath library."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "DataPathError",
    "InvalidPathError",
    "PathTypeError",
    "ConfigNotFoundError",
    "ConfigError",
    "ErrorCodes",
]


class DataPathError(Exception):
    """Base error for all datapath errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidPathError(DataPathError):
    """Raised when a path is empty or cannot be parsed into segments."""

    def __init__(self, path: Any, reason: str | None = None, **kwargs: Any) -> None:
        message = f'Invalid path "{path}"'
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            code="INVALID_PATH",
            message=message,
            details={"path": path},
            **kwargs,
        )

    @property
    def path(self) -> Any:
        """The path argument that was rejected."""
        return self.details["path"]


class PathTypeError(DataPathError):
    """Raised when a write cannot be applied to the container found on the path."""

    def __init__(self, path: Any, segment: Any, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="PATH_TYPE_CONFLICT",
            message=f'Cannot write "{segment}" on path "{path}": {reason}',
            details={"path": path, "segment": segment},
            **kwargs,
        )

    @property
    def path(self) -> Any:
        """The path being written."""
        return self.details["path"]

    @property
    def segment(self) -> Any:
        """The segment that could not be applied."""
        return self.details["segment"]


class ConfigNotFoundError(DataPathError):
    """Raised when a YAML config file does not exist."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"No config file at {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )

    @property
    def config_path(self) -> str:
        return self.details["config_path"]


class ConfigError(DataPathError):
    """Raised when a config file or section cannot be turned into options."""

    def __init__(self, message: str, config_path: str | None = None, **kwargs: Any) -> None:
        details = {"config_path": config_path} if config_path is not None else None
        super().__init__(code="CONFIG_INVALID", message=message, details=details, **kwargs)


class ErrorCodes:
    """All datapath error codes as constants.

    Example:
        if error.code == ErrorCodes.INVALID_PATH:
            handle_bad_path()
    """

    INVALID_PATH = "INVALID_PATH"
    PATH_TYPE_CONFLICT = "PATH_TYPE_CONFLICT"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
