"""Shared fixtures for the pathconfig test suite."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from pathconfig import PathConfig

SERVER_DOCUMENT: dict[str, Any] = {
    "server": {
        "port": 8080,
        "tls": True,
        "hosts": ["a", "b"],
    }
}


@pytest.fixture
def write_json(tmp_path: Path) -> Any:
    """Factory writing text to a file under tmp_path and returning its path."""

    def factory(content: str, name: str = "config.json") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return factory


@pytest.fixture
def server_json(write_json: Any) -> Path:
    """The server scenario document written to disk."""
    return write_json(json.dumps(SERVER_DOCUMENT))


@pytest.fixture
def server_config(server_json: Path) -> PathConfig:
    """PathConfig loaded from the server scenario document."""
    return PathConfig.load(server_json)


@pytest.fixture
def mixed_config() -> PathConfig:
    """Config covering every JSON value type and numeric literal form."""
    return PathConfig.from_string(
        """
        {
            "name": "svc",
            "enabled": false,
            "nothing": null,
            "ratio": 0.25,
            "huge": 12345678901234567890,
            "negative": -42,
            "exp": 1e3,
            "literals": {
                "hex": "0x1A",
                "octal": "032",
                "binary": "0b11010",
                "decimal": "26",
                "float": "2.5",
                "junk": "twenty-six"
            },
            "levels": {"one": {"two": {"three": "deep"}}}
        }
        """
    )
