"""SHA-256 message digest, HMAC-SHA256 and PBKDF2-HMAC-SHA256."""

from __future__ import annotations

import struct
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

_MASK = 0xFFFFFFFF

_INIT_STATE = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

_K = (
    0x428a2f98, 0x71374491, 0xb5c0fbcf, 0xe9b5dba5,
    0x3956c25b, 0x59f111f1, 0x923f82a4, 0xab1c5ed5,
    0xd807aa98, 0x12835b01, 0x243185be, 0x550c7dc3,
    0x72be5d74, 0x80deb1fe, 0x9bdc06a7, 0xc19bf174,
    0xe49b69c1, 0xefbe4786, 0x0fc19dc6, 0x240ca1cc,
    0x2de92c6f, 0x4a7484aa, 0x5cb0a9dc, 0x76f988da,
    0x983e5152, 0xa831c66d, 0xb00327c8, 0xbf597fc7,
    0xc6e00bf3, 0xd5a79147, 0x06ca6351, 0x14292967,
    0x27b70a85, 0x2e1b2138, 0x4d2c6dfc, 0x53380d13,
    0x650a7354, 0x766a0abb, 0x81c2c92e, 0x92722c85,
    0xa2bfe8a1, 0xa81a664b, 0xc24b8b70, 0xc76c51a3,
    0xd192e819, 0xd6990624, 0xf40e3585, 0x106aa070,
    0x19a4c116, 0x1e376c08, 0x2748774c, 0x34b0bcb5,
    0x391c0cb3, 0x4ed8aa4a, 0x5b9cca4f, 0x682e6ff3,
    0x748f82ee, 0x78a5636f, 0x84c87814, 0x8cc70208,
    0x90befffa, 0xa4506ceb, 0xbef9a3f7, 0xc67178f2,
)

_BLOCK = struct.Struct(">16I")

# Largest derived key PBKDF2 can produce with a 32-byte PRF.
_PBKDF2_MAXLEN = 32 * 0xFFFFFFFF


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK


def _transform(state: list[int], block: BytesLike) -> None:
    """Mix one 64-byte block into ``state``."""
    w = list(_BLOCK.unpack(block))
    for i in range(16, 64):
        x15 = w[i - 15]
        x2 = w[i - 2]
        s0 = _rotr(x15, 7) ^ _rotr(x15, 18) ^ (x15 >> 3)
        s1 = _rotr(x2, 17) ^ _rotr(x2, 19) ^ (x2 >> 10)
        w.append((s1 + w[i - 7] + s0 + w[i - 16]) & _MASK)

    a, b, c, d, e, f, g, h = state
    for k, wi in zip(_K, w):
        big_s1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        ch = (e & (f ^ g)) ^ g
        t0 = (h + big_s1 + ch + k + wi) & _MASK
        big_s0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        maj = (a & (b | c)) | (b & c)
        t1 = (big_s0 + maj) & _MASK
        h, g, f, e, d, c, b, a = g, f, e, (d + t0) & _MASK, c, b, a, (t0 + t1) & _MASK

    state[:] = [
        (s + v) & _MASK for s, v in zip(state, (a, b, c, d, e, f, g, h))
    ]


class SHA256:
    """Incremental SHA-256 hash."""

    digest_size = 32
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
        return struct.pack(">8I", *h._state)

    def hexdigest(self) -> str:
        """Return the digest as a hexadecimal string."""
        return self.digest().hex()

    def copy(self) -> "SHA256":
        """Return an independent copy of this hash."""
        other = SHA256.__new__(SHA256)
        other._state = list(self._state)
        other._count = self._count
        other._buf = bytearray(self._buf)
        return other


class HmacSHA256:
    """Incremental HMAC using SHA-256."""

    digest_size = 32
    block_size = 64

    def __init__(self, key: BytesLike, data: BytesLike = b"") -> None:
        key = bytes(key)
        if len(key) > 64:
            key = SHA256(key).digest()
        key = key.ljust(64, b"\x00")
        self._inner = SHA256(bytes(k ^ 0x36 for k in key))
        self._outer = SHA256(bytes(k ^ 0x5C for k in key))
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

    def copy(self) -> "HmacSHA256":
        """Return an independent copy of this MAC."""
        other = HmacSHA256.__new__(HmacSHA256)
        other._inner = self._inner.copy()
        other._outer = self._outer.copy()
        return other


def sha256(data: BytesLike) -> bytes:
    """Return the SHA-256 digest of ``data``."""
    return SHA256(data).digest()


def hmac_sha256(key: BytesLike, data: BytesLike) -> bytes:
    """Return the HMAC-SHA256 of ``data`` under ``key``."""
    return HmacSHA256(key, data).digest()


def pbkdf2_sha256(
    password: BytesLike, salt: BytesLike, iterations: int, dklen: int
) -> bytes:
    """Derive ``dklen`` bytes with PBKDF2 using HMAC-SHA256 as the PRF.

    An iteration count of zero behaves like one.  ``dklen`` must be at most
    32 * (2**32 - 1).
    """
    if iterations < 0:
        raise ValueError("iteration count must not be negative")
    if dklen < 0:
        raise ValueError("derived key length must not be negative")
    if dklen > _PBKDF2_MAXLEN:
        raise ValueError("derived key length too large")

    keyed = HmacSHA256(password)
    with_salt = keyed.copy()
    with_salt.update(salt)

    out = bytearray()
    block = 1
    while len(out) < dklen:
        h = with_salt.copy()
        h.update(struct.pack(">I", block))
        u = h.digest()
        t = int.from_bytes(u, "big")
        for _ in range(2, iterations + 1):
            h = keyed.copy()
            h.update(u)
            u = h.digest()
            t ^= int.from_bytes(u, "big")
        out += t.to_bytes(32, "big")[:dklen - len(out)]
        block += 1
    return bytes(out)