from __future__ import annotations

"""Environment driven defaults for LazyDebug.

Every field can be set through an ``LZD_`` prefixed environment variable, e.g.
``LZD_VERBOSITY=2`` or ``LZD_SINK=console``.
"""

import sys
import functools
import typing as t

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .static import COLOR_TABLE, UNBOUNDED_VERBOSITY


class DebugSettings(BaseSettings):
    """
    LazyDebug Settings
    """

    enabled: bool = True
    verbosity: int = UNBOUNDED_VERBOSITY
    sink: t.Literal['auto', 'console', 'loguru'] = 'auto'
    colorize: t.Optional[bool] = None
    palette: t.List[str] = list(COLOR_TABLE)
    log_level: str = 'WARNING'

    model_config = SettingsConfigDict(
        env_prefix = 'LZD_',
        case_sensitive = False,
        extra = 'allow',
    )

    @field_validator('palette')
    @classmethod
    def validate_palette(cls, v: t.List[str]) -> t.List[str]:
        """
        The palette can never be empty
        """
        if not v: raise ValueError('palette must contain at least one color')
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def resolved_sink(self) -> str:
        """
        Returns the sink name, resolving `auto` against the attached terminal
        """
        if self.sink != 'auto': return self.sink
        return 'loguru' if self.is_tty else 'console'

    @property
    def is_tty(self) -> bool:
        stream = sys.stderr
        return bool(stream and hasattr(stream, 'isatty') and stream.isatty())


@functools.lru_cache()
def get_settings() -> DebugSettings:
    """
    Returns the cached settings instance
    """
    return DebugSettings()


__all__ = [
    'DebugSettings',
    'get_settings',
]
