from __future__ import annotations

"""Strategies for deriving a debugger name when none is given explicitly."""

import sys
import typing as t

from .static import UNKNOWN_PREFIX


@t.runtime_checkable
class NameResolver(t.Protocol):
    """
    Returns an identifier for `context`, or None when it cannot determine one
    """

    def __call__(self, context: t.Any = None) -> t.Optional[str]: ...


class AttributeResolver:
    """
    Reads an identifier off a component object

    Strings are used as-is, otherwise the first truthy attribute in `attrs`
    wins. Classes and instances fall back to their class name when
    `use_class_name` is set.
    """

    default_attrs: t.Tuple[str, ...] = ('debug_id', '_id', 'name', '__qualname__', '__name__')

    def __init__(self, attrs: t.Optional[t.Sequence[str]] = None, use_class_name: bool = True):
        self.attrs = tuple(attrs) if attrs is not None else self.default_attrs
        self.use_class_name = use_class_name

    def __call__(self, context: t.Any = None) -> t.Optional[str]:
        if context is None: return None
        if isinstance(context, str): return context or None
        for attr in self.attrs:
            value = getattr(context, attr, None)
            if value and isinstance(value, (str, int)):
                return str(value)
        if not self.use_class_name: return None
        cls = context if isinstance(context, type) else type(context)
        return cls.__name__


class CallerResolver:
    """
    Best-effort call-stack heuristic: the qualified name of the first function
    outside the `skip` modules
    """

    def __init__(self, skip: t.Sequence[str] = ('lzd',)):
        self.skip = tuple(skip)

    def _is_skipped(self, module: str) -> bool:
        return any(module == s or module.startswith(f'{s}.') for s in self.skip)

    def __call__(self, context: t.Any = None) -> t.Optional[str]:
        try:
            frame = sys._getframe(1)
        except ValueError:
            return None
        while frame is not None:
            module = frame.f_globals.get('__name__', '')
            if not self._is_skipped(module):
                code = frame.f_code
                name = getattr(code, 'co_qualname', code.co_name)
                if name.startswith('<'): return None
                return name
            frame = frame.f_back
        return None


class ChainResolver:
    """
    Tries each resolver in order, first non-empty result wins
    """

    def __init__(self, *resolvers: NameResolver):
        self.resolvers = resolvers

    def __call__(self, context: t.Any = None) -> t.Optional[str]:
        for resolver in self.resolvers:
            if name := resolver(context):
                return name
        return None


def resolve_name(context: t.Any = None, resolver: t.Optional[NameResolver] = None) -> str:
    """
    Resolves a name for `context`, falling back to `UNKNOWN`
    """
    if isinstance(context, str) and context: return context
    resolver = resolver or default_resolver
    return resolver(context) or UNKNOWN_PREFIX


default_resolver = ChainResolver(AttributeResolver())


__all__ = [
    'NameResolver',
    'AttributeResolver',
    'CallerResolver',
    'ChainResolver',
    'resolve_name',
    'default_resolver',
]
