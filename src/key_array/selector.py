"""Key selector — a row of buttons with exactly one pressed.

A ``KeySelector`` holds an ordered list of keys and one **active
index** pointing at the key that is currently selected.  Think of the
mode dial on a fan (``Off``, ``Low``, ``High``) or a radio-button
group: the set of choices can grow and shrink, but there is always
exactly one choice in effect.

Key properties:
    - **Always one active key** — the selector can never be empty, so
      ``current`` is always defined.  Empty construction and removing
      the last remaining key both raise ``EmptySelectorError``.
    - **Positional identity** — keys are not deduplicated or compared;
      a key *is* its position.  Any Python object can be a key.
    - **The active key follows edits** — inserting or removing before
      the active position shifts the index so that ``current`` still
      names the same key.  Removing the active key itself selects the
      key that slides into its place (or the new last key, if it was
      at the end).
    - **All-or-nothing** — every argument is validated before anything
      is touched, so a rejected call leaves the selector exactly as it
      was.

Indices are plain positions in ``[0, len)``.  Negative indices are out
of bounds rather than counting from the end.

Queries hand back values or copies (``keys`` returns a fresh list), so
nothing a caller holds can alias the selector's own storage.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Generic, TypeVar

from key_array.logging import Logger, LogLevel

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

_SOURCE = "key_selector"

K = TypeVar("K")


class KeySelectorError(Exception):
    """Raise when a key selector operation cannot be carried out."""


class OutOfBoundsError(KeySelectorError, IndexError):
    """Raise when an index lies outside the range an operation accepts."""


class EmptySelectorError(KeySelectorError, ValueError):
    """Raise when an operation would leave a selector with no keys."""


class KeySelector(Generic[K]):
    """An ordered list of keys with exactly one marked active.

    The selector owns a private list of keys and an integer cursor.
    The cursor is always a valid index into the list.
    """

    def __init__(
        self,
        keys: Iterable[K],
        *,
        start_index: int = 0,
        logger: Logger | None = None,
    ) -> None:
        """Create a selector from any iterable of keys.

        Args:
            keys: The keys, in order.  Copied into a new list.
            start_index: Index of the initially active key.
            logger: Optional audit log for mutations and rejected calls.

        Raises:
            EmptySelectorError: If *keys* is empty.
            OutOfBoundsError: If *start_index* is not a valid index.

        """
        self._keys: list[K] = list(keys)
        self._logger = logger
        if not self._keys:
            msg = "new: must supply at least one key"
            self._record(LogLevel.WARNING, msg)
            raise EmptySelectorError(msg)
        self._idx = self._check_index("new", start_index, len(self._keys))

    @classmethod
    def new_with(
        cls,
        keys: Iterable[K],
        start_index: int,
        *,
        logger: Logger | None = None,
    ) -> KeySelector[K]:
        """Create a selector whose active key is *start_index*.

        Same as ``KeySelector(keys, start_index=start_index)``.
        """
        return cls(keys, start_index=start_index, logger=logger)

    # -- Queries -------------------------------------------------------------

    @property
    def current_index(self) -> int:
        """Return the index of the active key."""
        return self._idx

    @property
    def current(self) -> K:
        """Return the active key."""
        return self._keys[self._idx]

    @property
    def keys(self) -> list[K]:
        """Return a copy of all keys in order."""
        return list(self._keys)

    @property
    def logger(self) -> Logger | None:
        """Return the audit log, if one was supplied."""
        return self._logger

    def __len__(self) -> int:
        """Return the number of keys."""
        return len(self._keys)

    def __iter__(self) -> Iterator[K]:
        """Iterate over a snapshot of the keys."""
        return iter(list(self._keys))

    def __str__(self) -> str:
        """Format as ``keys=[...], current_idx=N, current=X``."""
        return f"keys={self._keys!r}, current_idx={self._idx}, current={self.current}"

    def __repr__(self) -> str:
        """Return a constructor-style representation."""
        return f"{type(self).__name__}({self._keys!r}, start_index={self._idx})"

    # -- Mutation ------------------------------------------------------------

    def change(self, index: int) -> None:
        """Make the key at *index* the active one.

        Raises:
            OutOfBoundsError: If *index* is not in ``[0, len)``.

        """
        self._idx = self._check_index("change", index, len(self._keys))
        self._record(LogLevel.DEBUG, f"change: selected {self.current!r}", self._idx)

    def push(self, key: K) -> None:
        """Append *key* after the last key.  The active index is unchanged."""
        self._keys.append(key)
        self._record(LogLevel.DEBUG, f"push: appended {key!r} at {len(self._keys) - 1}")

    def insert(self, index: int, key: K) -> None:
        """Insert *key* before position *index*.

        Inserting at or before the active position pushes the active
        key one place to the right, so the active index moves with it.

        Args:
            index: Position the new key will occupy.  ``len`` appends.
            key: The key to insert.

        Raises:
            OutOfBoundsError: If *index* is not in ``[0, len]``.

        """
        index = self._check_index("insert", index, len(self._keys) + 1)
        self._keys.insert(index, key)
        if index <= self._idx:
            self._idx += 1
        self._record(LogLevel.DEBUG, f"insert: {key!r} at {index}", index)

    def remove(self, index: int) -> K:
        """Remove and return the key at *index*.

        The active index is adjusted three ways:

        - removed before the active key: the index drops by one so the
          same key stays active;
        - removed the active key: the index stays put, so the next key
          slides into the active slot, or it is clamped to the new last
          key when the active key was at the end;
        - removed after the active key: nothing changes.

        Args:
            index: Position of the key to remove.

        Returns:
            The removed key.

        Raises:
            OutOfBoundsError: If *index* is not in ``[0, len)``.
            EmptySelectorError: If *index* names the only remaining key.

        """
        index = self._check_index("remove", index, len(self._keys))
        if len(self._keys) == 1:
            msg = "remove: cannot remove the only key"
            self._record(LogLevel.WARNING, msg, index)
            raise EmptySelectorError(msg)

        removed = self._keys.pop(index)
        if index < self._idx:
            self._idx -= 1
        elif index == self._idx:
            self._idx = min(self._idx, len(self._keys) - 1)
        self._record(LogLevel.DEBUG, f"remove: {removed!r} from {index}", index)
        return removed

    # -- Helpers -------------------------------------------------------------

    def _check_index(self, operation: str, index: int, limit: int) -> int:
        """Return *index* as an ``int`` if ``0 <= index < limit``.

        Anything that is not an integer (``operator.index`` fails on
        it, e.g. ``1.0``) is rejected like an out-of-range index.
        """
        try:
            position = operator.index(index)
        except TypeError:
            position = None
        if position is not None and 0 <= position < limit:
            return position
        msg = f"{operation}: index {index!r} out of bounds for {len(self._keys)} keys"
        self._record(LogLevel.WARNING, msg, position)
        raise OutOfBoundsError(msg)

    def _record(self, level: LogLevel, message: str, index: int | None = None) -> None:
        if self._logger is None:
            return
        # no active index yet while the constructor is still validating
        active_index: int | None = getattr(self, "_idx", None)
        self._logger.log(
            level, message, source=_SOURCE, index=index, active_index=active_index
        )
