"""Strict JSON decoding of configuration documents into a ConfigTree."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import IO, Any

from pathconfig.errors import ConfigDecodeError, ConfigReadError
from pathconfig.numbers import JsonNumber

__all__ = ["decode_document", "load_file", "load_stream"]

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant '{name}'")


def decode_document(content: str | bytes, source: str) -> dict[str, Any]:
    """Decode a JSON object, keeping every number as a JsonNumber.

    Raises:
        ConfigDecodeError: If the content is not strict JSON or its root is
            not an object.
    """
    try:
        data = json.loads(
            content,
            parse_int=JsonNumber,
            parse_float=JsonNumber,
            parse_constant=_reject_constant,
        )
    except json.JSONDecodeError as e:
        raise ConfigDecodeError(
            source, f"Invalid JSON: {e.msg}", line=e.lineno, column=e.colno, cause=e
        ) from e
    except UnicodeDecodeError as e:
        raise ConfigDecodeError(source, f"Invalid text encoding: {e}", cause=e) from e
    except (ValueError, RecursionError) as e:
        raise ConfigDecodeError(source, f"Invalid JSON: {e}", cause=e) from e

    if not isinstance(data, dict):
        raise ConfigDecodeError(
            source, f"Root must be a JSON object, got {_json_type_name(data)}"
        )

    logger.debug(f"Loaded configuration from {source} ({len(data)} top-level keys)")
    return data


def load_file(path: str | Path, encoding: str = "utf-8") -> dict[str, Any]:
    """Read and decode a JSON configuration file.

    Raises:
        ConfigReadError: If the file cannot be opened or read.
        ConfigDecodeError: If the bytes are not valid text in ``encoding``
            or not a strict JSON object.
    """
    file_path = Path(path)
    source = str(file_path)
    try:
        raw = file_path.read_bytes()
    except OSError as e:
        raise ConfigReadError(source, e.strerror or str(e), cause=e) from e

    try:
        text = raw.decode(encoding)
    except UnicodeDecodeError as e:
        raise ConfigDecodeError(source, f"Invalid text encoding: {e}", cause=e) from e
    except LookupError as e:
        raise ConfigReadError(source, f"Unknown encoding '{encoding}'", cause=e) from e

    return decode_document(text, source)


def load_stream(stream: IO[Any]) -> dict[str, Any]:
    """Read an open binary or text stream to the end and decode it once."""
    source = str(getattr(stream, "name", "<stream>"))
    try:
        content = stream.read()
    except OSError as e:
        raise ConfigReadError(source, str(e), cause=e) from e
    except UnicodeDecodeError as e:
        raise ConfigDecodeError(source, f"Invalid text encoding: {e}", cause=e) from e

    if not isinstance(content, (str, bytes, bytearray)):
        raise ConfigReadError(
            source, f"Stream returned {type(content).__name__}, expected str or bytes"
        )
    return decode_document(content, source)


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, JsonNumber):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return type(value).__name__
