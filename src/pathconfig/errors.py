"""Error hierarchy for pathconfig."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "PathConfigError",
    "ConfigLoadError",
    "ConfigReadError",
    "ConfigDecodeError",
    "ConfigNotFoundError",
    "ErrorCodes",
]


class PathConfigError(Exception):
    """Base error for all pathconfig errors."""

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


class ConfigLoadError(PathConfigError):
    """Raised when a configuration document cannot be loaded."""

    def __init__(
        self,
        source: str,
        reason: str,
        code: str = "CONFIG_LOAD_ERROR",
        details: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            code=code,
            message=f"Failed to load configuration from {source}: {reason}",
            details={"source": source, "reason": reason, **(details or {})},
            **kwargs,
        )

    @property
    def source(self) -> str:
        """File path or stream description the load was attempted from."""
        return self.details["source"]

    @property
    def reason(self) -> str:
        return self.details["reason"]


class ConfigReadError(ConfigLoadError):
    """Raised when the configuration file or stream cannot be opened or read."""

    def __init__(self, source: str, reason: str, **kwargs: Any) -> None:
        super().__init__(source, reason, code="CONFIG_READ_ERROR", **kwargs)


class ConfigDecodeError(ConfigLoadError):
    """Raised when the content is not valid JSON or its root is not an object."""

    def __init__(
        self,
        source: str,
        reason: str,
        line: int | None = None,
        column: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            source,
            reason,
            code="CONFIG_DECODE_ERROR",
            details={"line": line, "column": column},
            **kwargs,
        )

    @property
    def line(self) -> int | None:
        """1-based line of the syntax error, if known."""
        return self.details["line"]

    @property
    def column(self) -> int | None:
        """1-based column of the syntax error, if known."""
        return self.details["column"]


class ConfigNotFoundError(PathConfigError):
    """Raised when no configuration is attached to a context."""

    def __init__(self, trace_id: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message="No configuration attached to context",
            details={"trace_id": trace_id},
            **kwargs,
        )

    @property
    def trace_id(self) -> str | None:
        return self.details["trace_id"]


class ErrorCodes:
    """All pathconfig error codes as constants.

    Example:
        if error.code == ErrorCodes.CONFIG_DECODE_ERROR:
            report_syntax_error(error.line, error.column)
    """

    CONFIG_LOAD_ERROR = "CONFIG_LOAD_ERROR"
    CONFIG_READ_ERROR = "CONFIG_READ_ERROR"
    CONFIG_DECODE_ERROR = "CONFIG_DECODE_ERROR"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
