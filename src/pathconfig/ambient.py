"""Associate a loaded configuration with a Context.

Core code should receive a PathConfig as an explicit argument. This module
is for boundary layers that need "the current configuration" without
threading it through every call.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pathconfig.config import PathConfig
from pathconfig.context import Context, current_context
from pathconfig.errors import ConfigNotFoundError

__all__ = ["CONFIG_KEY", "attach", "attach_config", "retrieve"]

logger = logging.getLogger(__name__)


class _ConfigKey:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<pathconfig.CONFIG_KEY>"


CONFIG_KEY = _ConfigKey()


def attach_config(context: Context, config: PathConfig) -> Context:
    """Return a context derived from ``context`` that carries ``config``."""
    logger.debug(f"[{context.trace_id}] Attached configuration to context")
    return context.with_value(CONFIG_KEY, config)


def attach(context: Context, path: str | Path, **load_kwargs: Any) -> Context:
    """Load the JSON file at ``path`` and attach it to a derived context.

    Raises:
        ConfigLoadError: If the file cannot be loaded; ``context`` is left
            untouched.
    """
    return attach_config(context, PathConfig.load(path, **load_kwargs))


def retrieve(context: Context | None = None) -> PathConfig:
    """Return the configuration attached to ``context``.

    Args:
        context: Context to look in. Defaults to the current context.

    Raises:
        ConfigNotFoundError: If no configuration was attached.
    """
    ctx = context if context is not None else current_context()
    config = ctx.value(CONFIG_KEY)
    if not isinstance(config, PathConfig):
        raise ConfigNotFoundError(trace_id=ctx.trace_id)
    return config
