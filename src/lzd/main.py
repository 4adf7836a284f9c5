from __future__ import annotations

"""Factory helpers for creating LazyDebug debuggers."""

import threading
import typing as t

from .base import Debug
from .resolvers import resolve_name

if t.TYPE_CHECKING:
    from .config import DebugSettings
    from .registry import ColorRegistry
    from .resolvers import NameResolver
    from .sinks import Sink

_lock = threading.Lock()
_debugger_contexts: t.Dict[str, Debug] = {}

__all__ = [
    "create_debugger",
    "get_debugger",
    "clear_debuggers",
    "default_debugger",
]


def create_debugger(
    name: t.Any = None,
    sink: t.Optional["Sink"] = None,
    registry: t.Optional["ColorRegistry"] = None,
    resolver: t.Optional["NameResolver"] = None,
    settings: t.Optional["DebugSettings"] = None,
) -> Debug:
    """Create a new, independent debugger.

    Args:
        name: A string prefix, or a component object the resolver derives a
            name from. ``None`` yields ``"UNKNOWN"`` unless the resolver finds
            something.
        sink: Output adapter. Defaults to the sink named by ``LZD_SINK``.
        registry: Color registry. Defaults to the process-wide registry.
        resolver: Strategy used when ``name`` is not a string.
        settings: Settings instance, defaults to the cached environment settings.

    Returns:
        Debug: The new debugger.
    """
    return Debug(name, sink = sink, registry = registry, resolver = resolver, settings = settings)


def get_debugger(
    name: t.Any = None,
    **kwargs: t.Any,
) -> Debug:
    """Return the cached debugger for ``name``, creating it on first use.

    Keyword arguments are only used when the debugger is created.
    """
    key = resolve_name(name, kwargs.get("resolver"))
    if key in _debugger_contexts:
        return _debugger_contexts[key]
    with _lock:
        if key not in _debugger_contexts:
            _debugger_contexts[key] = create_debugger(key, **kwargs)
        return _debugger_contexts[key]


def clear_debuggers() -> None:
    """Drop every cached debugger."""
    with _lock:
        _debugger_contexts.clear()


default_debugger = get_debugger("lzd")
