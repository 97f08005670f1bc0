"""Map from sequentially assigned integers to objects."""

from __future__ import annotations

from typing import Any

from corekit.elasticqueue import ElasticQueue


class SeqPtrMap:
    """Objects are numbered from 0 in the order they are added.

    Lookup and deletion by number take amortized constant time; memory
    use is proportional to the span between the lowest and highest
    numbers still present.
    """

    def __init__(self) -> None:
        self._ptrs = ElasticQueue()
        self._offset = 0

    def __len__(self) -> int:
        """Number of slots from the lowest live number to the last one added."""
        return len(self._ptrs)

    def add(self, ptr: Any) -> int:
        """Add ``ptr`` and return the integer associated with it."""
        self._ptrs.add(ptr)
        return self._offset + len(self._ptrs) - 1

    def get(self, i: int) -> Any:
        """Return the object numbered ``i``, or None if there is none."""
        pos = i - self._offset
        if not 0 <= pos < len(self._ptrs):
            return None
        return self._ptrs.get(pos)

    def getmin(self) -> int:
        """Return the lowest number still in the map, or -1 if it is empty."""
        if len(self._ptrs) == 0:
            return -1
        return self._offset

    def delete(self, i: int) -> None:
        """Remove the object numbered ``i``; unknown numbers are ignored."""
        pos = i - self._offset
        if not 0 <= pos < len(self._ptrs):
            return
        self._ptrs.set(pos, None)
        while len(self._ptrs) > 0 and self._ptrs.get(0) is None:
            self._ptrs.delete()
            self._offset += 1