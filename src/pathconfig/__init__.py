"""pathconfig - JSON configuration with dotted-path typed lookups."""

from __future__ import annotations

# Core
from pathconfig.config import PathConfig, to_python
from pathconfig.numbers import JsonNumber, parse_float_literal, parse_int_literal

# Context
from pathconfig.context import Context, current_context, use_context
from pathconfig.ambient import CONFIG_KEY, attach, attach_config, retrieve

# Errors
from pathconfig.errors import (
    ConfigDecodeError,
    ConfigLoadError,
    ConfigNotFoundError,
    ConfigReadError,
    ErrorCodes,
    PathConfigError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "PathConfig",
    "JsonNumber",
    "to_python",
    "parse_int_literal",
    "parse_float_literal",
    # Context
    "Context",
    "current_context",
    "use_context",
    "CONFIG_KEY",
    "attach",
    "attach_config",
    "retrieve",
    # Errors
    "ErrorCodes",
    "PathConfigError",
    "ConfigLoadError",
    "ConfigReadError",
    "ConfigDecodeError",
    "ConfigNotFoundError",
]
