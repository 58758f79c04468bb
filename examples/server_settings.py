"""Example: read typed server settings from a JSON file."""

from __future__ import annotations

import pathlib

from pathconfig import PathConfig

CONFIG_PATH = pathlib.Path(__file__).resolve().parent / "config" / "server.json"


def read_settings(path: str | pathlib.Path = CONFIG_PATH) -> dict:
    """Collect the server settings the example service needs."""
    config = PathConfig.load(path)
    return {
        "name": config.get_string("server.name"),
        "port": config.get_int("server.port"),
        "tls": config.get_bool("server.tls"),
        "hosts": config.get_as("server.hosts", list[str], default=[]),
        "read_timeout": config.get_float("server.timeouts.read"),
        "write_timeout": config.get_float("server.timeouts.write"),
        "max_size": config.get_int("storage.max_size"),
        "file_mode": config.get_int("storage.file_mode"),
        # not in the file: falls back to the zero value
        "workers": config.get_int("server.workers"),
    }


if __name__ == "__main__":
    for key, value in read_settings().items():
        print(f"{key}: {value!r}")
