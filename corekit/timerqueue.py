"""Priority queue of (time value, object) pairs for timer scheduling."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from corekit.ptrheap import PtrHeap


@dataclass(eq=False)
class TimerRecord:
    """A queued timer.  Returned by :meth:`TimerQueue.add` as a cookie."""

    tv: Any
    ptr: Any
    rc: int = field(default=-1, repr=False)


def _tvcmp(x: Any, y: Any) -> int:
    return (x > y) - (x < y)


class TimerQueue:
    """Min-priority queue keyed by time values.

    Time values may be any totally ordered objects, for instance floats or
    ``(seconds, microseconds)`` tuples.  The record returned by :meth:`add`
    identifies the entry for :meth:`delete` and :meth:`increase`.
    """

    def __init__(self) -> None:
        self._heap = PtrHeap(self._compar, self._setreccookie)

    @staticmethod
    def _compar(x: TimerRecord, y: TimerRecord) -> int:
        return _tvcmp(x.tv, y.tv)

    @staticmethod
    def _setreccookie(rec: TimerRecord, rc: int) -> None:
        rec.rc = rc

    def __len__(self) -> int:
        return len(self._heap)

    def add(self, tv: Any, ptr: Any) -> TimerRecord:
        """Queue ``ptr`` to fire at ``tv``; return the cookie for the entry."""
        rec = TimerRecord(tv, ptr)
        self._heap.add(rec)
        return rec

    def _check(self, cookie: TimerRecord) -> None:
        if cookie.rc < 0:
            raise ValueError("timer is not in the queue")

    def delete(self, cookie: TimerRecord) -> None:
        """Remove the entry identified by ``cookie``."""
        self._check(cookie)
        self._heap.delete(cookie.rc)
        cookie.rc = -1

    def increase(self, cookie: TimerRecord, tv: Any) -> None:
        """Move the entry identified by ``cookie`` to the later time ``tv``."""
        self._check(cookie)
        cookie.tv = tv
        self._heap.increase(cookie.rc)

    def getmin(self) -> Optional[Any]:
        """Return the earliest time value, or None if the queue is empty."""
        rec = self._heap.getmin()
        return None if rec is None else rec.tv

    def getptr(self, tv: Any) -> Optional[Any]:
        """Pop and return the earliest object if its time is at most ``tv``.

        Return None if the queue is empty or the earliest time is later
        than ``tv``.
        """
        rec = self._heap.getmin()
        if rec is None or _tvcmp(rec.tv, tv) > 0:
            return None
        self._heap.deletemin()
        rec.rc = -1
        return rec.ptr