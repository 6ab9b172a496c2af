"""Key arrays — ordered keys with exactly one active.

Re-exports public symbols so callers can write::

    from key_array import KeySelector, OutOfBoundsError
"""

from key_array.logging import LogEntry, Logger, LogLevel
from key_array.selector import (
    EmptySelectorError,
    KeySelector,
    KeySelectorError,
    OutOfBoundsError,
)

__all__ = [
    "EmptySelectorError",
    "KeySelector",
    "KeySelectorError",
    "LogEntry",
    "LogLevel",
    "Logger",
    "OutOfBoundsError",
]
