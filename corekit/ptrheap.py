"""Binary min-heap of arbitrary objects with position-tracking callbacks."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

Comparator = Callable[[Any, Any], int]
CookieSetter = Callable[[Any, int], None]


class PtrHeap:
    """A min-heap ordered by a three-way comparison function.

    ``compar(x, y)`` must return a negative number, zero or a positive
    number as ``x`` is less than, equal to or greater than ``y``.  If
    ``setreccookie`` is given, it is called as ``setreccookie(item, rc)``
    every time ``item`` moves to position ``rc``; that record cookie is what
    :meth:`delete` and :meth:`increase` take.  The callback must not call
    back into the heap.
    """

    def __init__(
        self,
        compar: Comparator,
        setreccookie: Optional[CookieSetter] = None,
        items: Iterable[Any] = (),
    ) -> None:
        self._compar = compar
        self._setreccookie = setreccookie
        self._elems: list[Any] = list(items)

        # Build the heap without notifications, then report every position.
        for i in reversed(range(len(self._elems))):
            self._sift_down(i, notify=False)
        if self._setreccookie is not None:
            for i, item in enumerate(self._elems):
                self._setreccookie(item, i)

    def __len__(self) -> int:
        return len(self._elems)

    def _notify(self, i: int) -> None:
        if self._setreccookie is not None:
            self._setreccookie(self._elems[i], i)

    def _swap(self, i: int, j: int, notify: bool = True) -> None:
        elems = self._elems
        elems[i], elems[j] = elems[j], elems[i]
        if notify:
            self._notify(i)
            self._notify(j)

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if self._compar(self._elems[i], self._elems[parent]) >= 0:
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int, notify: bool = True) -> None:
        elems = self._elems
        n = len(elems)
        while True:
            smallest = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < n and self._compar(elems[smallest], elems[child]) > 0:
                    smallest = child
            if smallest == i:
                break
            self._swap(smallest, i, notify)
            i = smallest

    def add(self, ptr: Any) -> None:
        """Insert ``ptr`` into the heap."""
        self._elems.append(ptr)
        last = len(self._elems) - 1
        self._notify(last)
        self._sift_up(last)

    def getmin(self) -> Any:
        """Return the minimum item, or None if the heap is empty."""
        return self._elems[0] if self._elems else None

    def delete(self, rc: int) -> None:
        """Remove the item whose most recent record cookie is ``rc``."""
        if not 0 <= rc < len(self._elems):
            raise IndexError("record cookie out of range")
        last = self._elems.pop()
        if rc == len(self._elems):
            return
        self._elems[rc] = last
        self._notify(rc)
        if rc > 0:
            parent = (rc - 1) // 2
            if self._compar(self._elems[rc], self._elems[parent]) < 0:
                self._swap(rc, parent)
                self._sift_up(parent)
                return
        self._sift_down(rc)

    def deletemin(self) -> None:
        """Remove the minimum item."""
        if not self._elems:
            raise IndexError("deletemin from an empty heap")
        self.delete(0)

    def increase(self, rc: int) -> None:
        """Restore heap order after the item at cookie ``rc`` has increased."""
        if not 0 <= rc < len(self._elems):
            raise IndexError("record cookie out of range")
        self._sift_down(rc)

    def increasemin(self) -> None:
        """Restore heap order after the minimum item has increased."""
        self._sift_down(0)