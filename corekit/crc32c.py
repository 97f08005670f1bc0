"""CRC32C: 32-bit CRC using the Castagnoli polynomial 0x11EDC6F41."""

from __future__ import annotations

import struct
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

_POLY = 0x1EDC6F41

# CRC of the implicit leading 1 bit; equal to T0[0x80].
_T_0_0x80 = 0x82F63B78


def _reverse(x: int) -> int:
    """Return the 32-bit value ``x`` with its bit order reversed."""
    return int(f"{x:032b}"[::-1], 2)


def _times256(r: int) -> int:
    """Multiply ``r`` by x^8 modulo the polynomial (non-reflected form)."""
    for _ in range(8):
        if r & 0x80000000:
            r = ((r << 1) ^ _POLY) & 0xFFFFFFFF
        else:
            r = (r << 1) & 0xFFFFFFFF
    return r


def _build_tables() -> tuple[tuple[int, ...], ...]:
    tables: list[list[int]] = [[], [], [], []]
    for i in range(256):
        r = _reverse(i)
        for table in tables:
            r = _times256(r)
            table.append(_reverse(r))
    return tuple(tuple(t) for t in tables)


_T0, _T1, _T2, _T3 = _build_tables()
assert _T0[0x80] == _T_0_0x80


class CRC32C:
    """Incremental CRC32C.

    The state starts as the CRC of an implicit leading 1 bit and no final
    inversion is applied, so appending the digest to the data fed in yields
    a digest of all zero bytes.
    """

    digest_size = 4

    def __init__(self, data: BytesLike = b"") -> None:
        self._state = _T_0_0x80
        self.update(data)

    def update(self, data: BytesLike) -> None:
        """Feed ``data`` into the CRC."""
        data = memoryview(data).cast("B")
        split = len(data) - len(data) % 4
        s = self._state
        for (word,) in struct.iter_unpack("<I", data[:split]):
            s ^= word
            s = (
                _T0[s >> 24]
                ^ _T1[(s >> 16) & 0xFF]
                ^ _T2[(s >> 8) & 0xFF]
                ^ _T3[s & 0xFF]
            )
        for byte in data[split:]:
            s = (s >> 8) ^ _T0[(s & 0xFF) ^ byte]
        self._state = s

    def digest(self) -> bytes:
        """Return the 4-byte CRC, least significant byte first."""
        return struct.pack("<I", self._state)

    def hexdigest(self) -> str:
        """Return the CRC bytes as a hexadecimal string."""
        return self.digest().hex()


def crc32c(data: BytesLike) -> bytes:
    """Return the 4-byte CRC32C of ``data``."""
    return CRC32C(data).digest()