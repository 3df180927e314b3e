"""Shared test fixtures for the datapath test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def person() -> dict[str, Any]:
    """A map-only nested structure."""
    return {
        "name": {"first": "Jeremy", "last": "Bankes"},
        "age": 41,
        "contact": {"email": "jeremy@example.com", "phone": None},
    }


@pytest.fixture
def order() -> dict[str, Any]:
    """A structure mixing dicts and lists."""
    return {
        "id": "A-100",
        "items": [
            {"sku": "pen", "qty": 2},
            {"sku": "ink", "qty": 1},
        ],
        "tags": ["urgent", "gift"],
    }


@pytest.fixture
def write_yaml(tmp_path: Path) -> Any:
    """Write *content* to a YAML file under tmp_path and return its path as str."""

    def _write(content: str, name: str = "datapath.yaml") -> str:
        yaml_file = tmp_path / name
        yaml_file.write_text(content)
        return str(yaml_file)

    return _write
