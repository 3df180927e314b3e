"""Configuration loading and validation."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from datapath import accessor
from datapath.errors import ConfigError, ConfigNotFoundError
from datapath.options import PathOptions

__all__ = ["Config"]

logger = logging.getLogger(__name__)


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data if data is not None else {}

    @classmethod
    def load(cls, yaml_path: str) -> Config:
        """Load configuration from a YAML file.

        Args:
            yaml_path: Path to the YAML configuration file.

        Returns:
            A new Config holding the file's top-level mapping. An empty file
            yields an empty Config.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the YAML is invalid or is not a mapping.
        """
        if not os.path.isfile(yaml_path):
            raise ConfigNotFoundError(config_path=yaml_path)

        with open(yaml_path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {yaml_path}: {e}", config_path=yaml_path, cause=e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}", config_path=yaml_path)

        logger.debug("Loaded configuration from %s", yaml_path)
        return cls(data)

    @property
    def data(self) -> dict[str, Any]:
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        return accessor.get(self._data, key, default)

    def has(self, key: str) -> bool:
        return accessor.has(self._data, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-path key, creating sections as needed."""
        accessor.set(self._data, key, value)

    def path_options(self, key: str = "datapath") -> PathOptions:
        """Validate the section under *key* into :class:`PathOptions`.

        A missing or empty section gives the default options.

        Raises:
            ConfigError: If the section is not a mapping or fails validation.
        """
        section = self.get(key)
        if section is None:
            section = {}
        if not isinstance(section, Mapping):
            raise ConfigError(f"'{key}' must be a mapping, got {type(section).__name__}")
        try:
            return PathOptions.model_validate(dict(section))
        except PydanticValidationError as e:
            raise ConfigError(f"Invalid path options in '{key}': {e}", cause=e) from e
