"""Dynamically resizing array of fixed-length byte records."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


class ElasticArray:
    """A resizable array of records, each ``reclen`` bytes long.

    The allocated storage never exceeds four times the space the records
    need, and growth doubles the allocation, so appends take amortized
    constant time per byte.
    """

    def __init__(self, nrec: int = 0, reclen: int = 1) -> None:
        if reclen <= 0:
            raise ValueError("record length must be positive")
        self._reclen = reclen
        self._buf = bytearray()
        self._size = 0
        self.resize(nrec)

    @property
    def reclen(self) -> int:
        """Length of one record in bytes."""
        return self._reclen

    @property
    def capacity(self) -> int:
        """Number of bytes currently allocated."""
        return len(self._buf)

    def _resize(self, nsize: int) -> None:
        """Set the logical size to ``nsize`` bytes, adjusting the allocation."""
        alloc = len(self._buf)
        if alloc < nsize:
            nalloc = max(alloc * 2, nsize)
        elif alloc > nsize * 4:
            nalloc = nsize * 2
        else:
            nalloc = alloc

        if nalloc > alloc:
            self._buf.extend(bytes(nalloc - alloc))
        elif nalloc < alloc:
            del self._buf[nalloc:]

        # Records that come into view are always zero-filled.
        if nsize > self._size:
            self._buf[self._size:nsize] = bytes(nsize - self._size)
        self._size = nsize

    def resize(self, nrec: int) -> None:
        """Make the array hold exactly ``nrec`` records; new records are zeroed."""
        if nrec < 0:
            raise ValueError("record count must not be negative")
        self._resize(nrec * self._reclen)

    def __len__(self) -> int:
        return self._size // self._reclen

    def append(self, data: BytesLike) -> None:
        """Append one or more whole records held in ``data``."""
        data = bytes(data)
        if len(data) % self._reclen:
            raise ValueError(
                f"data length {len(data)} is not a multiple of "
                f"record length {self._reclen}"
            )
        pos = self._size
        self._resize(self._size + len(data))
        self._buf[pos:pos + len(data)] = data

    def shrink(self, nrec: int) -> None:
        """Delete the last ``nrec`` records, or all of them if there are fewer."""
        if nrec < 0:
            raise ValueError("record count must not be negative")
        drop = nrec * self._reclen
        self._resize(0 if drop > self._size else self._size - drop)

    def truncate(self) -> None:
        """Release any allocated space beyond the stored records."""
        del self._buf[self._size:]

    def _offset(self, pos: int) -> int:
        count = len(self)
        if pos < 0:
            pos += count
        if not 0 <= pos < count:
            raise IndexError("record index out of range")
        return pos * self._reclen

    def __getitem__(self, pos: int) -> bytes:
        start = self._offset(pos)
        return bytes(self._buf[start:start + self._reclen])

    def __setitem__(self, pos: int, record: BytesLike) -> None:
        record = bytes(record)
        if len(record) != self._reclen:
            raise ValueError(
                f"record must be {self._reclen} bytes, got {len(record)}"
            )
        start = self._offset(pos)
        self._buf[start:start + self._reclen] = record

    def export(self) -> bytes:
        """Return all records as one buffer and leave the array empty."""
        self.truncate()
        data = bytes(self._buf)
        self._buf = bytearray()
        self._size = 0
        return data

    def exportdup(self) -> bytes:
        """Return a copy of all records as one buffer; the array is unchanged."""
        return bytes(self._buf[:self._size])