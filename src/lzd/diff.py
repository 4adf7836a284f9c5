from __future__ import annotations

"""Shallow, field level change tracking between two versions of an object."""

import copy
import enum
import typing as t
from collections.abc import Mapping, MutableMapping

from pydantic import BaseModel

from .errors import MissingDiffTarget
from .static import DEFAULT_DIFF_IGNORE, DEFAULT_DIFF_MESSAGE
from .utils import as_mapping, format_value

if t.TYPE_CHECKING:
    from .base import Debug

_MISSING = object()


class ChangeKind(str, enum.Enum):
    NEW = 'new'
    CHANGED = 'changed'


class DiffRecord(BaseModel):
    """
    A single top-level field that differs between two objects

    `old` and `new` hold the previous and current values of the field. `old` is
    left unset for new fields, so `model_dump(exclude_unset = True)` omits it.
    `key` is whatever key the mapping uses, not necessarily a string.
    """

    key: t.Any
    kind: ChangeKind
    old: t.Any = None
    new: t.Any = None

    @property
    def is_new(self) -> bool:
        return self.kind == ChangeKind.NEW


def deep_merge(target: t.Any, patch: t.Any) -> t.Any:
    """
    Recursively merges `patch` into `target` in place and returns `target`

    Nested mappings are merged key by key, any other value replaces what is
    already there. Non mapping targets have the patch applied as attributes.
    """
    for key, value in as_mapping(patch).items():
        if isinstance(target, MutableMapping):
            current = target.get(key, _MISSING)
            if isinstance(current, MutableMapping) and isinstance(value, Mapping):
                deep_merge(current, value)
            else:
                target[key] = copy.deepcopy(value)
        else:
            current = getattr(target, key, _MISSING)
            if isinstance(current, MutableMapping) and isinstance(value, Mapping):
                deep_merge(current, value)
            else:
                setattr(target, key, copy.deepcopy(value))
    return target


def compute_diff(
    original: t.Any,
    updated: t.Any,
    ignore: t.Optional[t.Iterable[str]] = None,
) -> t.List[DiffRecord]:
    """Compare the top-level fields of ``updated`` against ``original``.

    Only keys present in ``updated`` are scanned. Nested differences are not
    broken out into records of their own; a changed nested value is reported
    once, under its top-level key.

    Args:
        original: The baseline object (mapping, pydantic model, dataclass or
            plain object).
        updated: The new version of the object.
        ignore: Field names to skip. Defaults to ``{'updated'}``.

    Returns:
        List[DiffRecord]: Records in the key order of ``updated``.
    """
    ignore = DEFAULT_DIFF_IGNORE if ignore is None else frozenset(ignore)
    before, after = as_mapping(original), as_mapping(updated)
    records: t.List[DiffRecord] = []
    for key, value in after.items():
        if key in ignore: continue
        if key not in before:
            records.append(DiffRecord(key = key, kind = ChangeKind.NEW, new = value))
        elif before[key] != value:
            records.append(DiffRecord(key = key, kind = ChangeKind.CHANGED, old = before[key], new = value))
    return records


def format_new(key: t.Any, new: t.Any) -> str:
    return f'+ {key}: {format_value(new)}'


def format_changed(key: t.Any, old: t.Any, new: t.Any) -> str:
    return f'~ {key}: {format_value(old)} -> {format_value(new)}'


def render_diff(
    records: t.Sequence[DiffRecord],
    message: str = DEFAULT_DIFF_MESSAGE,
    format_new: t.Callable[[t.Any, t.Any], str] = format_new,
    format_changed: t.Callable[[t.Any, t.Any, t.Any], str] = format_changed,
) -> str:
    """
    Renders the records as a block headed by `message`
    """
    lines = [
        format_new(r.key, r.new) if r.is_new else format_changed(r.key, r.old, r.new)
        for r in records
    ]
    return '\n'.join([f'{message}:', *lines])


def diff(
    debug: 'Debug',
    original: t.Any,
    updated: t.Any = None,
    merge: t.Any = None,
    transform_original: t.Optional[t.Callable[[t.Any], t.Any]] = None,
    transform_updated: t.Optional[t.Callable[[t.Any], t.Any]] = None,
    merger: t.Callable[[t.Any, t.Any], t.Any] = deep_merge,
    ignore: t.Optional[t.Iterable[str]] = None,
    message: str = DEFAULT_DIFF_MESSAGE,
    no_changes: t.Optional[str] = None,
    format_new: t.Callable[[t.Any, t.Any], str] = format_new,
    format_changed: t.Callable[[t.Any, t.Any, t.Any], str] = format_changed,
    verbosity: t.Optional[int] = None,
) -> t.List[DiffRecord]:
    """Compute the changes between two objects and emit them through ``debug``.

    When ``merge`` is given, ``original`` is snapshotted first, then
    ``merger(original, merge)`` produces the updated object. A truthy return
    value is used as the updated object, otherwise ``original`` is assumed to
    have been mutated in place. The snapshot becomes the baseline.

    Returns:
        List[DiffRecord]: The records that were rendered (possibly empty).

    Raises:
        MissingDiffTarget: ``original`` is None, or neither ``updated`` nor
            ``merge`` was supplied.
    """
    if original is None:
        raise MissingDiffTarget('diff() requires an original object')
    if merge is not None:
        baseline = copy.deepcopy(original)
        result = merger(original, merge)
        updated = result if result else original
        original = baseline
    elif updated is None:
        raise MissingDiffTarget()

    if transform_original: original = transform_original(original)
    if transform_updated: updated = transform_updated(updated)

    records = compute_diff(original, updated, ignore = ignore)
    prefix = () if verbosity is None else (verbosity,)
    if records:
        debug.log(*prefix, render_diff(records, message = message, format_new = format_new, format_changed = format_changed))
    elif no_changes:
        debug.log(*prefix, no_changes)
    return records


__all__ = [
    'ChangeKind',
    'DiffRecord',
    'deep_merge',
    'compute_diff',
    'format_new',
    'format_changed',
    'render_diff',
    'diff',
]
