from __future__ import annotations

"""Private loguru loggers used by LazyDebug.

Each logger gets its own loguru core so that adding or removing handlers here
never touches the handlers configured on the global ``loguru.logger``.
"""

import sys
import atexit as _atexit
import typing as t

from loguru._logger import Core as _Core
from loguru._logger import Logger as _Logger

from .config import get_settings

if t.TYPE_CHECKING:
    from loguru import Logger


def _stream_writer(name: str) -> t.Callable[[str], None]:
    """
    Resolves the stream at write time so redirected streams are honoured
    """
    def _write(message: str) -> None:
        stream = getattr(sys, name)
        stream.write(message)
        stream.flush()
    return _write


def create_loguru_logger(
    stream: str = 'stderr',
    level: t.Union[str, int] = 'INFO',
    format: str = '{message}',
    colorize: bool = True,
) -> 'Logger':
    """Build a loguru logger bound to a fresh core with a single stream handler.

    Args:
        stream: Name of the :mod:`sys` stream to write to (``stdout``/``stderr``).
        level: Minimum level accepted by the handler.
        format: Loguru format string for the handler.
        colorize: Whether loguru markup is rendered as ANSI codes or stripped.

    Returns:
        Logger: The configured loguru logger.
    """
    # < 0.7.0
    try:
        _logger = _Logger(
            core=_Core(),
            exception=None,
            depth=0,
            record=False,
            lazy=False,
            colors=False,
            raw=False,
            capture=True,
            patcher=None,
            extra={},
        )
    # >= 0.7.0
    except TypeError:
        _logger = _Logger(
            core=_Core(),
            exception=None,
            depth=0,
            record=False,
            lazy=False,
            colors=False,
            raw=False,
            capture=True,
            patchers=[],
            extra={},
        )
    _logger.add(
        _stream_writer(stream),
        level = level,
        format = format,
        colorize = colorize,
        backtrace = False,
        diagnose = False,
    )
    _atexit.register(_logger.remove)
    return _logger


logger = create_loguru_logger(
    level = get_settings().log_level,
    format = '<level>{level: <8}</> <green>{time:YYYY-MM-DD HH:mm:ss.SSS}</>: <fg #a8dadc>{name}</>:<fg #219ebc>{function}</>: <level>{message}</level>',
    colorize = get_settings().is_tty,
)


__all__ = [
    'create_loguru_logger',
    'logger',
]
