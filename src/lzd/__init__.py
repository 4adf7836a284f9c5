from __future__ import annotations

"""Public façade for LazyDebug.

LazyDebug tags console output with a colored, named prefix per component and
lets callers chain temporary overrides before each message:

    >>> from lzd import create_debugger
    >>> log = create_debugger('myName')
    >>> log('hello world')
    >>> log.as_('other').warn('careful')

This module re-exports the key entry points so downstream consumers can import
everything from a single location.
"""

from .version import VERSION
from .static import (
    COLOR_TABLE,
    UNKNOWN_PREFIX,
    NEXT_COLOR,
    UNBOUNDED_VERBOSITY,
)
from .errors import (
    DebugError,
    InvalidColorSpec,
    MissingDiffTarget,
)
from .config import DebugSettings, get_settings
from .registry import ColorRegistry, get_registry, set_registry
from .sinks import (
    Channel,
    Sink,
    ConsoleSink,
    LoguruSink,
    RecordingSink,
    create_sink,
    get_default_sink,
    set_default_sink,
)
from .resolvers import (
    NameResolver,
    AttributeResolver,
    CallerResolver,
    ChainResolver,
)
from .diff import ChangeKind, DiffRecord, compute_diff, deep_merge
from .base import Debug
from .main import (
    create_debugger,
    get_debugger,
    clear_debuggers,
    default_debugger,
)

__version__ = VERSION

__all__ = [
    "COLOR_TABLE",
    "UNKNOWN_PREFIX",
    "NEXT_COLOR",
    "UNBOUNDED_VERBOSITY",
    "DebugError",
    "InvalidColorSpec",
    "MissingDiffTarget",
    "DebugSettings",
    "get_settings",
    "ColorRegistry",
    "get_registry",
    "set_registry",
    "Channel",
    "Sink",
    "ConsoleSink",
    "LoguruSink",
    "RecordingSink",
    "create_sink",
    "get_default_sink",
    "set_default_sink",
    "NameResolver",
    "AttributeResolver",
    "CallerResolver",
    "ChainResolver",
    "ChangeKind",
    "DiffRecord",
    "compute_diff",
    "deep_merge",
    "Debug",
    "create_debugger",
    "get_debugger",
    "clear_debuggers",
    "default_debugger",
    "__version__",
]
