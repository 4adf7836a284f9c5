from __future__ import annotations

"""Process-wide color allocation for debugger prefixes."""

import re
import threading
import typing as t

from .errors import InvalidColorSpec
from .static import COLOR_TABLE, NEXT_COLOR

ColorSpec = t.Union[int, str]

HEX_COLOR = re.compile(r'^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


class ColorRegistry:
    """
    Allocates palette colors to debugger names in the order they are first seen

    Offsets wrap around the palette so any number of names can be registered,
    and a name keeps its color for the life of the registry.
    """

    def __init__(self, palette: t.Optional[t.Sequence[str]] = None):
        palette = tuple(palette if palette is not None else COLOR_TABLE)
        if not palette: raise ValueError('ColorRegistry requires a non-empty palette')
        self.palette: t.Tuple[str, ...] = palette
        self.assigned: t.Dict[str, int] = {}
        self._lock = threading.Lock()

    def color_for(self, name: str) -> str:
        """
        Returns the color for `name`, allocating the next palette offset on first use
        """
        with self._lock:
            if name not in self.assigned:
                self.assigned[name] = len(self.assigned) % len(self.palette)
            return self.palette[self.assigned[name]]

    def index_of(self, name: str) -> t.Optional[int]:
        """
        Returns the palette offset allocated to `name`, if any
        """
        return self.assigned.get(name)

    def resolve(self, spec: ColorSpec, name: str) -> str:
        """
        Resolves an explicit color spec

        - int: a wrapped offset within the palette
        - '#RGB' or '#RRGGBB': used as-is
        - 'next': the registry allocation for `name`
        """
        if isinstance(spec, int) and not isinstance(spec, bool):
            return self.palette[spec % len(self.palette)]
        if isinstance(spec, str):
            if HEX_COLOR.match(spec): return spec
            if spec == NEXT_COLOR: return self.color_for(name)
        raise InvalidColorSpec(spec)

    def reset(self) -> None:
        """
        Forgets every allocation
        """
        with self._lock:
            self.assigned.clear()

    def __len__(self) -> int:
        return len(self.assigned)

    def __repr__(self) -> str:
        return f'<ColorRegistry palette={len(self.palette)} assigned={len(self.assigned)}>'


_registry: t.Optional[ColorRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> ColorRegistry:
    """
    Returns the process-wide registry, creating it from the settings palette
    """
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                from .config import get_settings
                _registry = ColorRegistry(get_settings().palette)
    return _registry


def set_registry(registry: ColorRegistry) -> None:
    """
    Replaces the process-wide registry
    """
    global _registry
    with _registry_lock:
        _registry = registry


__all__ = [
    'ColorSpec',
    'ColorRegistry',
    'get_registry',
    'set_registry',
]
