"""Operation-scoped context carrying keyed values."""

from __future__ import annotations

import contextlib
import uuid
from contextvars import ContextVar
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping

__all__ = ["Context", "current_context", "use_context"]


@dataclass(frozen=True)
class Context:
    """Immutable request/operation context.

    Values are never changed in place: ``with_value`` derives a new context
    that shares the parent's ``trace_id`` and sees all of its values.
    """

    trace_id: str
    values: Mapping[Any, Any] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    @classmethod
    def create(cls, values: Mapping[Any, Any] | None = None) -> Context:
        """Create a new root Context with a generated UUID v4 trace_id."""
        return cls(
            trace_id=str(uuid.uuid4()),
            values=MappingProxyType(dict(values or {})),
        )

    def with_value(self, key: Any, value: Any) -> Context:
        return Context(
            trace_id=self.trace_id,
            values=MappingProxyType({**self.values, key: value}),
        )

    def value(self, key: Any, default: Any = None) -> Any:
        return self.values.get(key, default)


_current: ContextVar[Context | None] = ContextVar("pathconfig_context", default=None)


def current_context() -> Context:
    """Return the context active for this thread or task.

    A fresh root context is created and installed on first use.
    """
    ctx = _current.get()
    if ctx is None:
        ctx = Context.create()
        _current.set(ctx)
    return ctx


@contextlib.contextmanager
def use_context(ctx: Context) -> Iterator[Context]:
    """Make ``ctx`` the current context for the duration of the block."""
    token = _current.set(ctx)
    try:
        yield ctx
    finally:
        _current.reset(token)
