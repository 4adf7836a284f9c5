from __future__ import annotations

from typing import Any


class DebugError(Exception):
    """Base class for errors raised by LazyDebug"""


class InvalidColorSpec(DebugError, ValueError):
    """Describes a color that is not a palette offset, a hex color or `'next'`"""

    def __init__(self, spec: Any) -> None:
        super().__init__(f"Unrecognised color format: {spec!r} use a number, #RRGGBB or 'next'")
        self.spec = spec
        """The color value that was supplied"""


class MissingDiffTarget(DebugError, ValueError):
    """Describes a diff call that has nothing to compare"""

    def __init__(self, msg: str = "diff() requires an original and either an updated value or a merge patch") -> None:
        super().__init__(msg)
        self.message = msg
