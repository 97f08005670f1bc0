"""Constant-time byte-string comparison."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def verify_bytes(buf0: BytesLike, buf1: BytesLike) -> int:
    """Return zero if and only if ``buf0`` and ``buf1`` are identical.

    Every byte is examined regardless of where a difference occurs, so the
    running time does not reveal the position of a mismatch.  The buffers
    must have the same length.
    """
    a = memoryview(buf0).cast("B")
    b = memoryview(buf1).cast("B")
    if len(a) != len(b):
        raise ValueError("buffers must have the same length")
    rc = 0
    for x, y in zip(a, b):
        rc |= x ^ y
    return rc