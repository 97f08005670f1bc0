"""MD5 message digest and HMAC-MD5."""

from __future__ import annotations

import struct
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

_MASK = 0xFFFFFFFF

_INIT_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_K = (
    0xd76aa478, 0xe8c7b756, 0x242070db, 0xc1bdceee,
    0xf57c0faf, 0x4787c62a, 0xa8304613, 0xfd469501,
    0x698098d8, 0x8b44f7af, 0xffff5bb1, 0x895cd7be,
    0x6b901122, 0xfd987193, 0xa679438e, 0x49b40821,
    0xf61e2562, 0xc040b340, 0x265e5a51, 0xe9b6c7aa,
    0xd62f105d, 0x02441453, 0xd8a1e681, 0xe7d3fbc8,
    0x21e1cde6, 0xc33707d6, 0xf4d50d87, 0x455a14ed,
    0xa9e3e905, 0xfcefa3f8, 0x676f02d9, 0x8d2a4c8a,
    0xfffa3942, 0x8771f681, 0x6d9d6122, 0xfde5380c,
    0xa4beea44, 0x4bdecfa9, 0xf6bb4b60, 0xbebfbc70,
    0x289b7ec6, 0xeaa127fa, 0xd4ef3085, 0x04881d05,
    0xd9d4d039, 0xe6db99e5, 0x1fa27cf8, 0xc4ac5665,
    0xf4292244, 0x432aff97, 0xab9423a7, 0xfc93a039,
    0x655b59c3, 0x8f0ccc92, 0xffeff47d, 0x85845dd1,
    0x6fa87e4f, 0xfe2ce6e0, 0xa3014314, 0x4e0811a1,
    0xf7537e82, 0xbd3af235, 0x2ad7d2bb, 0xeb86d391,
)

_SHIFTS = (
    (7, 12, 17, 22) * 4
    + (5, 9, 14, 20) * 4
    + (4, 11, 16, 23) * 4
    + (6, 10, 15, 21) * 4
)

_BLOCK = struct.Struct("<16I")


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


def _transform(state: list[int], block: BytesLike) -> None:
    """Mix one 64-byte block into ``state``."""
    w = _BLOCK.unpack(block)
    a, b, c, d = state
    for i in range(64):
        if i < 16:
            f = (b & (c ^ d)) ^ d
            g = i
        elif i < 32:
            f = (d & (b ^ c)) ^ c
            g = (5 * i + 1) % 16
        elif i < 48:
            f = b ^ c ^ d
            g = (3 * i + 5) % 16
        else:
            f = (b | (~d & _MASK)) ^ c
            g = (7 * i) % 16
        x = (a + f + w[g] + _K[i]) & _MASK
        a, b, c, d = d, (b + _rotl(x, _SHIFTS[i])) & _MASK, b, c
    for i, v in enumerate((a, b, c, d)):
        state[i] = (state[i] + v) & _MASK


class MD5:
    """Incremental MD5 hash."""

    digest_size = 16
    block_size = 64

    def __init__(self, data: BytesLike = b"") -> None:
        self._state = list(_INIT_STATE)
        self._count = 0
        self._buf = bytearray()
        self.update(data)

    def update(self, data: BytesLike) -> None:
        """Feed ``data`` into the hash."""
        data = memoryview(data).cast("B")
        if not data:
            return
        self._count += len(data)
        pos = 0
        if self._buf:
            need = 64 - len(self._buf)
            self._buf += data[:need]
            pos = need
            if len(self._buf) < 64:
                return
            _transform(self._state, self._buf)
            self._buf.clear()
        while len(data) - pos >= 64:
            _transform(self._state, data[pos:pos + 64])
            pos += 64
        self._buf += data[pos:]

    def digest(self) -> bytes:
        """Return the digest of everything fed so far; the hash stays usable."""
        h = self.copy()
        bitlen = (h._count << 3) & 0xFFFFFFFFFFFFFFFF
        r = h._count % 64
        plen = 56 - r if r < 56 else 120 - r
        h.update(b"\x80" + bytes(plen - 1))
        h.update(struct.pack("<Q", bitlen))
        return struct.pack("<4I", *h._state)

    def hexdigest(self) -> str:
        """Return the digest as a hexadecimal string."""
        return self.digest().hex()

    def copy(self) -> "MD5":
        """Return an independent copy of this hash."""
        other = MD5.__new__(MD5)
        other._state = list(self._state)
        other._count = self._count
        other._buf = bytearray(self._buf)
        return other


class HmacMD5:
    """Incremental HMAC using MD5."""

    digest_size = 16
    block_size = 64

    def __init__(self, key: BytesLike, data: BytesLike = b"") -> None:
        key = bytes(key)
        if len(key) > 64:
            key = MD5(key).digest()
        key = key.ljust(64, b"\x00")
        self._inner = MD5(bytes(k ^ 0x36 for k in key))
        self._outer = MD5(bytes(k ^ 0x5C for k in key))
        self.update(data)

    def update(self, data: BytesLike) -> None:
        """Feed ``data`` into the MAC."""
        self._inner.update(data)

    def digest(self) -> bytes:
        """Return the MAC of everything fed so far; the object stays usable."""
        outer = self._outer.copy()
        outer.update(self._inner.digest())
        return outer.digest()

    def hexdigest(self) -> str:
        """Return the MAC as a hexadecimal string."""
        return self.digest().hex()

    def copy(self) -> "HmacMD5":
        """Return an independent copy of this MAC."""
        other = HmacMD5.__new__(HmacMD5)
        other._inner = self._inner.copy()
        other._outer = self._outer.copy()
        return other


def md5(data: BytesLike) -> bytes:
    """Return the MD5 digest of ``data``."""
    return MD5(data).digest()


def hmac_md5(key: BytesLike, data: BytesLike) -> bytes:
    """Return the HMAC-MD5 of ``data`` under ``key``."""
    return HmacMD5(key, data).digest()