from __future__ import annotations

"""Helpers for snapshotting and rendering values passed to a debugger."""

import json
import pprint
import dataclasses
from collections.abc import Mapping
import typing as t

from .logs import logger

if t.TYPE_CHECKING:
    from dataclasses import _DataclassT
    from pydantic import BaseModel

    Primitives = t.Union[str, int, float, bool, tuple, list, type(None)]
    MsgItem = t.Union[BaseModel, _DataclassT, dict[str, t.Any], Primitives]
else:
    MsgItem = t.Any


def flatten(value: MsgItem) -> t.Any:
    """Return a plain, detached snapshot of ``value``.

    Pydantic models and dataclasses are dumped first, then the result is
    serialised and parsed back so later mutations of the caller's object do not
    leak into what gets displayed. Values that cannot be round-tripped (cycles,
    objects with no JSON form) are returned unchanged.
    """
    snapshot = value
    try:
        if hasattr(value, 'model_dump'):
            snapshot = value.model_dump(mode = 'json')
        elif dataclasses.is_dataclass(value) and not isinstance(value, type):
            snapshot = dataclasses.asdict(value)
        return json.loads(json.dumps(snapshot))
    except (TypeError, ValueError, RecursionError) as e:
        logger.trace(f'Unable to flatten {type(value).__name__}: {e}')
        return value


def as_mapping(obj: t.Any) -> t.Dict[str, t.Any]:
    """
    Returns a shallow field mapping for diffing
    """
    if isinstance(obj, Mapping): return dict(obj)
    if hasattr(obj, 'model_dump'): return obj.model_dump()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if hasattr(obj, '__dict__'): return dict(vars(obj))
    raise TypeError(f'Cannot compare fields of {type(obj).__name__}')


def format_value(value: t.Any, max_length: t.Optional[int] = None) -> str:
    """Render a single value for plain text output."""
    if isinstance(value, str):
        rendered = value
    elif isinstance(value, (float, int, bool, type(None))):
        rendered = str(value)
    else:
        rendered = pprint.pformat(value, compact = True, sort_dicts = False)
    return rendered[:max_length] if max_length else rendered


def format_args(args: t.Sequence[t.Any], sep: str = ' ') -> str:
    return sep.join(format_value(arg) for arg in args)


def is_number(value: t.Any) -> bool:
    """
    True for ints and floats, bools excluded
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)


__all__ = [
    'MsgItem',
    'flatten',
    'as_mapping',
    'format_value',
    'format_args',
    'is_number',
]
