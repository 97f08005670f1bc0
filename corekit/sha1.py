"""SHA-1 message digest and HMAC-SHA1."""

from __future__ import annotations

import struct
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

_MASK = 0xFFFFFFFF

_INIT_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

_BLOCK = struct.Struct(">16I")


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


def _transform(state: list[int], block: BytesLike) -> None:
    """Mix one 64-byte block into ``state``."""
    w = list(_BLOCK.unpack(block))
    for i in range(16, 80):
        w.append(_rotl(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))

    a, b, c, d, e = state
    for i, wi in enumerate(w):
        if i < 20:
            f = (b & (c ^ d)) ^ d
            k = 0x5A827999
        elif i < 40:
            f = b ^ c ^ d
            k = 0x6ED9EBA1
        elif i < 60:
            f = (b & (c | d)) | (c & d)
            k = 0x8F1BBCDC
        else:
            f = b ^ c ^ d
            k = 0xCA62C1D6
        t = (_rotl(a, 5) + f + e + k + wi) & _MASK
        a, b, c, d, e = t, a, _rotl(b, 30), c, d

    state[:] = [(s + v) & _MASK for s, v in zip(state, (a, b, c, d, e))]


class SHA1:
    """Incremental SHA-1 hash."""

    digest_size = 20
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
        h.update(struct.pack(">Q", bitlen))
        return struct.pack(">5I", *h._state)

    def hexdigest(self) -> str:
        """Return the digest as a hexadecimal string."""
        return self.digest().hex()

    def copy(self) -> "SHA1":
        """Return an independent copy of this hash."""
        other = SHA1.__new__(SHA1)
        other._state = list(self._state)
        other._count = self._count
        other._buf = bytearray(self._buf)
        return other


class HmacSHA1:
    """Incremental HMAC using SHA-1."""

    digest_size = 20
    block_size = 64

    def __init__(self, key: BytesLike, data: BytesLike = b"") -> None:
        key = bytes(key)
        if len(key) > 64:
            key = SHA1(key).digest()
        key = key.ljust(64, b"\x00")
        self._inner = SHA1(bytes(k ^ 0x36 for k in key))
        self._outer = SHA1(bytes(k ^ 0x5C for k in key))
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

    def copy(self) -> "HmacSHA1":
        """Return an independent copy of this MAC."""
        other = HmacSHA1.__new__(HmacSHA1)
        other._inner = self._inner.copy()
        other._outer = self._outer.copy()
        return other


def sha1(data: BytesLike) -> bytes:
    """Return the SHA-1 digest of ``data``."""
    return SHA1(data).digest()


def hmac_sha1(key: BytesLike, data: BytesLike) -> bytes:
    """Return the HMAC-SHA1 of ``data`` under ``key``."""
    return HmacSHA1(key, data).digest()