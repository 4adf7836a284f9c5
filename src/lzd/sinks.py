from __future__ import annotations

"""Output adapters that actually emit a debugger's text."""

import sys
import enum
import threading
import typing as t

from .static import CHANNEL_LEVELS, RESET_COLOR
from .utils import format_args, format_value

if t.TYPE_CHECKING:
    from loguru import Logger


def hex_to_ansi(color: str) -> str:
    """
    `#RRGGBB` -> 24-bit foreground escape
    """
    value = color.lstrip('#')
    if len(value) == 3: value = ''.join(c * 2 for c in value)
    r, g, b = (int(value[i:i + 2], 16) for i in (0, 2, 4))
    return f'\x1b[38;2;{r};{g};{b}m'


class Channel(str, enum.Enum):
    """
    Which output method a debugger writes through
    """
    NORMAL = 'log'
    WARNING = 'warn'


@t.runtime_checkable
class Sink(t.Protocol):
    """
    Anything that can emit a prefix and a sequence of already flattened values
    """

    def write(self, channel: Channel, prefix: str, *args: t.Any, color: t.Optional[str] = None) -> None: ...


class ConsoleSink:
    """
    Plain text output, `[prefix] arg arg ...`, optionally with a truecolor prefix

    Normal output goes to stdout and warnings to stderr. The streams are looked
    up on every write so redirection after construction is honoured.
    """

    def __init__(
        self,
        stdout: t.Optional[t.TextIO] = None,
        stderr: t.Optional[t.TextIO] = None,
        colorize: t.Optional[bool] = False,
    ):
        self._stdout = stdout
        self._stderr = stderr
        self.colorize = colorize

    def get_stream(self, channel: Channel) -> t.TextIO:
        if channel == Channel.WARNING:
            return self._stderr or sys.stderr
        return self._stdout or sys.stdout

    def render(self, prefix: str, *args: t.Any, color: t.Optional[str] = None) -> str:
        line = f'[{prefix}]'
        if self.colorize and color: line = f'{hex_to_ansi(color)}{line}{RESET_COLOR}'
        if args: line += f' {format_args(args)}'
        return line

    def write(self, channel: Channel, prefix: str, *args: t.Any, color: t.Optional[str] = None) -> None:
        stream = self.get_stream(channel)
        stream.write(self.render(prefix, *args, color = color) + '\n')
        stream.flush()


class LoguruSink:
    """
    Color-capable terminal output through a private loguru logger

    The prefix is wrapped in `<fg #RRGGBB>` markup, the values are passed as
    format arguments so their contents are never parsed as markup.
    """

    def __init__(
        self,
        logger: t.Optional['Logger'] = None,
        stream: str = 'stderr',
        colorize: t.Optional[bool] = True,
    ):
        if logger is None:
            from .logs import create_loguru_logger
            logger = create_loguru_logger(stream = stream, level = 0, colorize = bool(colorize))
        self.logger = logger

    def write(self, channel: Channel, prefix: str, *args: t.Any, color: t.Optional[str] = None) -> None:
        level = CHANNEL_LEVELS[Channel(channel).value]
        template = f'<fg {color}>[{{}}]</>' if color else '[{}]'
        values = [prefix]
        if args:
            template += ' {}'
            values.append(format_args(args))
        self.logger.opt(colors = True).log(level, template, *values)


class SinkRecord(t.NamedTuple):
    channel: Channel
    prefix: str
    args: t.Tuple[t.Any, ...]
    color: t.Optional[str]

    @property
    def text(self) -> str:
        return ' '.join([f'[{self.prefix}]', *(format_value(arg) for arg in self.args)])


class RecordingSink:
    """
    Keeps every write in memory
    """

    def __init__(self):
        self.records: t.List[SinkRecord] = []

    def write(self, channel: Channel, prefix: str, *args: t.Any, color: t.Optional[str] = None) -> None:
        self.records.append(SinkRecord(Channel(channel), prefix, tuple(args), color))

    @property
    def texts(self) -> t.List[str]:
        return [record.text for record in self.records]

    def clear(self) -> None:
        self.records.clear()

    def __len__(self) -> int:
        return len(self.records)


def create_sink(name: t.Optional[str] = None, colorize: t.Optional[bool] = None) -> Sink:
    """
    Builds a sink by name, falling back to the settings
    """
    from .config import get_settings
    settings = get_settings()
    name = name or settings.resolved_sink
    if colorize is None: colorize = settings.colorize
    if name == 'console': return ConsoleSink(colorize = bool(colorize))
    if name == 'loguru': return LoguruSink(colorize = True if colorize is None else colorize)
    if name == 'recording': return RecordingSink()
    raise ValueError(f'Unknown sink: {name!r}')


_default_sink: t.Optional[Sink] = None
_sink_lock = threading.Lock()


def get_default_sink() -> Sink:
    """
    Returns the process-wide sink shared by debuggers created without one
    """
    global _default_sink
    if _default_sink is None:
        with _sink_lock:
            if _default_sink is None:
                _default_sink = create_sink()
    return _default_sink


def set_default_sink(sink: t.Optional[Sink]) -> None:
    """
    Replaces the process-wide sink, None rebuilds it from the settings on next use
    """
    global _default_sink
    with _sink_lock:
        _default_sink = sink


__all__ = [
    'Channel',
    'Sink',
    'hex_to_ansi',
    'ConsoleSink',
    'LoguruSink',
    'SinkRecord',
    'RecordingSink',
    'create_sink',
    'get_default_sink',
    'set_default_sink',
]
