from __future__ import annotations

"""
The chainable debugger instance

Example:
    >>> from lzd import create_debugger
    >>> log = create_debugger('myName')
    >>> log('hello world')               # [myName] hello world
    >>> log.as_('other').warn('careful')  # [other] careful, as a warning
    >>> log('back again')                # [myName] back again
"""

import typing as t

from .diff import DiffRecord, diff as _diff
from .registry import ColorRegistry, ColorSpec, get_registry
from .resolvers import NameResolver, resolve_name
from .sinks import Channel, Sink
from .static import UNBOUNDED_VERBOSITY, NEXT_COLOR
from .utils import MsgItem, flatten, is_number

if t.TYPE_CHECKING:
    from .config import DebugSettings

RestoreAction = t.Callable[['Debug'], None]


class Debug:
    """
    A named, colored debugger

    Calling the instance logs its arguments. The chainable methods (`as_`,
    `warn`, `force`, `only`) change the instance state for the next emission
    only: each queues a restore action on the drain queue, and the queue is
    run once the next message has actually been written.
    """

    def __init__(
        self,
        name: t.Any = None,
        sink: t.Optional[Sink] = None,
        registry: t.Optional[ColorRegistry] = None,
        resolver: t.Optional[NameResolver] = None,
        settings: t.Optional['DebugSettings'] = None,
    ):
        if settings is None:
            from .config import get_settings
            settings = get_settings()
        if sink is None:
            from .sinks import get_default_sink
            sink = get_default_sink()
        self.settings = settings
        self.sink = sink
        self.registry = registry
        self.resolver = resolver

        self.name: str = resolve_name(name, resolver)
        self.color: t.Optional[str] = None
        self.enabled: bool = settings.enabled
        self.channel: Channel = Channel.NORMAL
        self.verbosity: int = settings.verbosity

        self._drain: t.List[RestoreAction] = []
        self._pending: t.Set[str] = set()

    @property
    def prefix(self) -> str:
        return self.name

    def get_registry(self) -> ColorRegistry:
        return self.registry if self.registry is not None else get_registry()

    """
    Emission
    """

    def log(self, *msg: MsgItem) -> 'Debug':
        """
        Writes the messages to the sink then drains the restore queue

        A leading number is a verbosity tag, the message is dropped when the
        tag exceeds the verbosity ceiling.
        Disabled or filtered calls leave the drain queue untouched.
        """
        if not self.enabled: return self
        if msg and is_number(msg[0]):
            if msg[0] > self.verbosity: return self
            msg = msg[1:]

        if self.color is None: self.set_color(NEXT_COLOR)
        self.sink.write(
            self.channel,
            self.name,
            *(self.deconstruct(m) for m in msg),
            color = self.color,
        )
        return self.drain()

    def __call__(self, *msg: MsgItem) -> 'Debug':
        return self.log(*msg)

    def deconstruct(self, value: MsgItem) -> t.Any:
        """
        Flattens a value into a detached, plain snapshot
        Subclasses may override this to handle their own types
        """
        return flatten(value)

    """
    Drain Queue
    """

    def defer(self, action: RestoreAction) -> 'Debug':
        """
        Queues an action to run after the next emission
        """
        self._drain.append(action)
        return self

    def _defer_restore(self, field: str) -> None:
        # Only the first override of a field in a pending chain records the value to restore
        if field in self._pending: return
        self._pending.add(field)
        value = getattr(self, field)
        self._drain.append(lambda d: setattr(d, field, value))

    def drain(self) -> 'Debug':
        """
        Runs then clears every queued action, in the order they were queued
        """
        actions, self._drain = self._drain, []
        self._pending.clear()
        for action in actions:
            action(self)
        return self

    @property
    def pending(self) -> int:
        return len(self._drain)

    """
    Temporary Overrides
    """

    def as_(self, name: t.Any, *msg: MsgItem) -> 'Debug':
        """
        Temporarily sets the prefix, outputting `msg` if given

        >>> log.as_('Bar', 'Test')     # [Bar] Test
        >>> log.as_('Baz').warn('Test')
        """
        self._defer_restore('name')
        self.set_prefix(name)
        if msg: self.log(*msg)
        return self

    def warn(self, *msg: MsgItem) -> 'Debug':
        """
        Outputs through the warning channel
        """
        self._defer_restore('channel')
        self.channel = Channel.WARNING
        if msg: self.log(*msg)
        return self

    def force(self, *msg: MsgItem) -> 'Debug':
        """
        Switches output on for the next message even if disabled
        """
        self._defer_restore('enabled')
        self.enabled = True
        if msg: self.log(*msg)
        return self

    def only(self, *msg: MsgItem) -> 'Debug':
        """
        Outputs the next message then disables this debugger until another `only()` call
        """
        self.defer(lambda d: d.disable())
        self.enable(True)
        if msg: self.log(*msg)
        return self

    """
    Permanent Settings
    """

    def enable(self, enabled: t.Optional[bool] = True) -> 'Debug':
        self.enabled = True if enabled is None else bool(enabled)
        return self

    def disable(self, disabled: t.Optional[bool] = True) -> 'Debug':
        self.enabled = not (True if disabled is None else bool(disabled))
        return self

    def set_verbosity(self, verbosity: t.Optional[int] = None) -> 'Debug':
        """
        Sets the highest verbosity tag that still outputs, None removes the ceiling
        """
        self.verbosity = UNBOUNDED_VERBOSITY if verbosity is None else int(verbosity)
        return self

    def set_color(self, color: ColorSpec) -> 'Debug':
        """
        Sets the prefix color

        - int: a wrapped offset within the palette
        - '#RRGGBB': any hex color
        - 'next': the next registry color for this name
        """
        self.color = self.get_registry().resolve(color, self.name)
        return self

    def set_prefix(self, name: t.Any) -> 'Debug':
        """
        Permanently sets the prefix from a string or a component to derive one from
        Use `as_()` to set it for a single message
        """
        self.name = resolve_name(name, self.resolver)
        return self

    """
    Extras
    """

    def diff(self, original: t.Any, updated: t.Any = None, **kwargs: t.Any) -> 'Debug':
        """
        Outputs the top-level fields that differ between two objects

        See `lzd.diff.diff` for the supported options.
        """
        _diff(self, original, updated, **kwargs)
        return self

    def changes(self, original: t.Any, updated: t.Any = None, **kwargs: t.Any) -> t.List[DiffRecord]:
        """
        Same as `diff()` but returns the records rather than the debugger
        """
        return _diff(self, original, updated, **kwargs)

    def new(self, name: t.Any = None) -> 'Debug':
        """
        Returns a fresh debugger sharing this one's sink and registry

        >>> child = log.new('Child')
        """
        return type(self)(
            self.name if name is None else name,
            sink = self.sink,
            registry = self.registry,
            resolver = self.resolver,
            settings = self.settings,
        )

    clone = new

    def __str__(self) -> str:
        return '[debug]'

    def __repr__(self) -> str:
        return f'<{type(self).__name__} name={self.name!r} color={self.color!r} enabled={self.enabled}>'


__all__ = [
    'Debug',
    'RestoreAction',
]
