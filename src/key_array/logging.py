"""Selector audit log.

A ``KeySelector`` can be handed a ``Logger`` to keep a record of every
change made to it: which key became active, what was inserted or
removed, and which calls were rejected for a bad index.  The log is a
plain in-memory buffer that the caller reads back when it wants to
know how a selector got into its current state.

- **LogLevel** — severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry** — one immutable record: level, message, source, the
  index the operation was given, and the active index it left behind.
- **Logger** — an append-only buffer with filtering and clearing.

Nothing here calls back into user code.  A logger only remembers; it
is up to the owner to look.
"""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity levels for log entries.

    Successful mutations are recorded at DEBUG, rejected calls at
    WARNING.
    """

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single audit record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: Who wrote the entry (e.g. "key_selector").
        index: The index argument of the operation, if it took one.
        active_index: The selector's active index once the operation
            finished (unchanged for a rejected call; None while a
            selector is still being constructed).

    """

    level: LogLevel
    message: str
    source: str
    index: int | None = None
    active_index: int | None = None

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message``."""
        return f"[{self.level.name}] {self.source}: {self.message}"


class Logger:
    """Append-only buffer of ``LogEntry`` records.

    Several selectors may share one logger; give each a distinct
    ``source`` if you need to tell them apart when filtering.
    """

    def __init__(self) -> None:
        """Create an empty logger."""
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """Return all entries, oldest first."""
        return list(self._entries)

    def log(
        self,
        level: LogLevel,
        message: str,
        *,
        source: str,
        index: int | None = None,
        active_index: int | None = None,
    ) -> None:
        """Append a new entry.

        Args:
            level: Severity of the event.
            message: Human-readable event description.
            source: Who generated the event.
            index: Index argument of the logged operation, if any.
            active_index: Active index after the operation, if known.

        """
        entry = LogEntry(
            level=level,
            message=message,
            source=source,
            index=index,
            active_index=active_index,
        )
        self._entries.append(entry)

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
    ) -> list[LogEntry]:
        """Return entries matching the given criteria.

        Args:
            min_level: If set, only return entries at or above this level.
            source: If set, only return entries from this source.

        Returns:
            A new list of matching entries, oldest first.

        """
        return [
            e
            for e in self._entries
            if (min_level is None or e.level >= min_level)
            and (source is None or e.source == source)
        ]

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._entries)
