from __future__ import annotations

"""Static tables shared across the LazyDebug modules."""

import sys

# Taken from https://flatuicolors.com/palette/defo
# Nominated in the order components are first seen
COLOR_TABLE = (
    '#3498db',
    '#2ecc71',
    '#1abc9c',
    '#9b59b6',
    '#34495e',
    '#16a085',
    '#27ae60',
    '#2980b9',
    '#8e44ad',
    '#2c3e50',
    '#f1c40f',
    '#e67e22',
    '#f39c12',
    '#d35400',
    '#c0392b',
)

UNKNOWN_PREFIX = 'UNKNOWN'
NEXT_COLOR = 'next'
UNBOUNDED_VERBOSITY = sys.maxsize

DEFAULT_DIFF_IGNORE = frozenset({'updated'})
DEFAULT_DIFF_MESSAGE = 'Changes'

CHANNEL_LEVELS = {
    'log': 'INFO',
    'warn': 'WARNING',
}

RESET_COLOR = '\x1b[0m'
