"""PathConfig: dotted-path lookups and typed accessors over a JSON tree."""

from __future__ import annotations

import contextlib
import copy
import functools
import threading
from pathlib import Path
from typing import IO, Any, ContextManager, Iterator, Mapping

from pydantic import TypeAdapter, ValidationError

from pathconfig.loader import decode_document, load_file, load_stream
from pathconfig.numbers import (
    INT64_MAX,
    INT64_MIN,
    JsonNumber,
    parse_float_literal,
    parse_int_literal,
)

__all__ = ["PathConfig", "to_python"]

_MISSING = object()


@functools.lru_cache(maxsize=128)
def _type_adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


def to_python(value: Any) -> Any:
    """Deep-convert a tree value, turning every JsonNumber into int or float."""
    if isinstance(value, JsonNumber):
        return value.to_python()
    if isinstance(value, dict):
        return {k: to_python(v) for k, v in value.items()}
    if isinstance(value, list):
        return [to_python(v) for v in value]
    return value


class PathConfig:
    """Read-only JSON configuration with dot-path key support.

    The tree is built once at construction and never mutated. Lookups walk
    nested objects segment by segment (``"server.port"`` is
    ``tree["server"]["port"]``); typed accessors never raise and fall back to
    the zero value of their type on a missing or mistyped path.

    Thread safety:
        With ``thread_safe=True`` (the default) every lookup runs under one
        internal lock. Since nothing writes to the tree after construction,
        ``thread_safe=False`` is also safe for concurrent readers and skips
        the lock.
    """

    def __init__(self, data: dict[str, Any], thread_safe: bool = True) -> None:
        self._data: dict[str, Any] = data
        self._lock: threading.Lock | None = threading.Lock() if thread_safe else None

    # --- construction ---

    @classmethod
    def load(
        cls, path: str | Path, *, encoding: str = "utf-8", thread_safe: bool = True
    ) -> PathConfig:
        """Load configuration from a JSON file.

        Args:
            path: Path to the JSON document. Its root must be an object.
            encoding: Text encoding of the file.
            thread_safe: Whether lookups are serialized through a lock.

        Raises:
            ConfigReadError: If the file cannot be opened or read.
            ConfigDecodeError: If the content is not a strict JSON object.
        """
        return cls(load_file(path, encoding=encoding), thread_safe=thread_safe)

    @classmethod
    def load_from_stream(cls, stream: IO[Any], *, thread_safe: bool = True) -> PathConfig:
        """Load configuration from an already-open binary or text stream."""
        return cls(load_stream(stream), thread_safe=thread_safe)

    @classmethod
    def from_string(cls, content: str | bytes, *, thread_safe: bool = True) -> PathConfig:
        return cls(decode_document(content, "<string>"), thread_safe=thread_safe)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, thread_safe: bool = True) -> PathConfig:
        """Wrap an in-memory mapping. The mapping is deep-copied."""
        return cls(copy.deepcopy(dict(data)), thread_safe=thread_safe)

    # --- lookup ---

    def _guard(self) -> ContextManager[Any]:
        if self._lock is None:
            return contextlib.nullcontext()
        return self._lock

    def _walk(self, path: str) -> tuple[dict[str, Any] | None, str]:
        """Return the object holding the last segment of ``path``, and that segment."""
        parts = path.split(".")
        current: Any = self._data
        for part in parts[:-1]:
            if not isinstance(current, dict) or part not in current:
                return None, parts[-1]
            current = current[part]
        if not isinstance(current, dict):
            return None, parts[-1]
        return current, parts[-1]

    def get(self, path: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path, or ``default`` if absent."""
        with self._guard():
            parent, last = self._walk(path)
            if parent is None or last not in parent:
                return default
            return parent[last]

    def has(self, path: str) -> bool:
        """True if the path exists, even when its value is null."""
        with self._guard():
            parent, last = self._walk(path)
            return parent is not None and last in parent

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.has(path)

    def keys(self) -> list[str]:
        return list(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"PathConfig(keys={self.keys()!r})"

    # --- typed accessors ---

    def get_string(self, path: str) -> str:
        value = self.get(path)
        return value if isinstance(value, str) else ""

    def get_bool(self, path: str) -> bool:
        value = self.get(path)
        return value if isinstance(value, bool) else False

    def get_array(self, path: str) -> list[Any]:
        value = self.get(path)
        return list(value) if isinstance(value, list) else []

    def get_map(self, path: str) -> dict[str, Any]:
        """Get a nested object whole, or an empty dict."""
        value = self.get(path)
        return dict(value) if isinstance(value, dict) else {}

    def get_int(self, path: str) -> int:
        """Get a 64-bit integer value, or 0.

        Integer numbers are returned as-is. Strings holding an integer
        literal are parsed with the base taken from their prefix, so
        ``"0x1A"`` and ``"032"`` both give 26. Floats, booleans and values
        outside the signed 64-bit range give 0.
        """
        value = self.get(path)
        if isinstance(value, bool):
            return 0
        if isinstance(value, int):
            return value if INT64_MIN <= value <= INT64_MAX else 0
        if isinstance(value, JsonNumber):
            result = value.to_int()
        elif isinstance(value, str):
            result = parse_int_literal(value)
        else:
            return 0
        return 0 if result is None else result

    def get_float(self, path: str) -> float:
        """Get a floating-point value from any number or float literal string, or 0.0."""
        value = self.get(path)
        if isinstance(value, bool):
            return 0.0
        if isinstance(value, (int, float)):
            try:
                return float(value)
            except OverflowError:
                return 0.0
        if isinstance(value, JsonNumber):
            result = value.to_float()
        elif isinstance(value, str):
            result = parse_float_literal(value)
        else:
            return 0.0
        return 0.0 if result is None else result

    def get_as(self, path: str, type_: Any, default: Any = None) -> Any:
        """Get a value validated against ``type_`` in strict mode, or ``default``.

        Example:
            hosts = config.get_as("server.hosts", list[str], default=[])
        """
        value = self.get(path, _MISSING)
        if value is _MISSING:
            return default
        try:
            return _type_adapter(type_).validate_python(to_python(value), strict=True)
        except ValidationError:
            return default

    def to_dict(self) -> dict[str, Any]:
        """Deep copy of the whole tree with plain ``int``/``float`` numbers."""
        with self._guard():
            return to_python(self._data)
