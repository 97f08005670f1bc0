"""FIFO queue with random access and bounded memory overhead."""

from __future__ import annotations

from typing import Any


class ElasticQueue:
    """A queue of arbitrary objects supporting indexed access.

    Deleted head entries are reclaimed in bulk once they outnumber the
    live entries, keeping deletion amortized constant time.
    """

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._offset = 0

    def add(self, rec: Any) -> None:
        """Add ``rec`` to the tail of the queue."""
        self._items.append(rec)

    def delete(self) -> None:
        """Remove the head of the queue; do nothing if it is empty."""
        if not len(self):
            return
        self._items[self._offset] = None
        self._offset += 1
        if self._offset > len(self):
            del self._items[:self._offset]
            self._offset = 0

    def __len__(self) -> int:
        return len(self._items) - self._offset

    def get(self, pos: int) -> Any:
        """Return the record at ``pos`` (0 is the head), or None if out of range."""
        if not 0 <= pos < len(self):
            return None
        return self._items[self._offset + pos]

    def set(self, pos: int, rec: Any) -> None:
        """Replace the record at ``pos`` with ``rec``."""
        if not 0 <= pos < len(self):
            raise IndexError("queue position out of range")
        self._items[self._offset + pos] = rec