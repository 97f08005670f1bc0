"""HMAC_DRBG pseudo-random generator (NIST SP 800-90, section 10.1.2).

The optional personalization string and additional input are not
supported.
"""

from __future__ import annotations

import os
import threading
from typing import Callable, Optional

from corekit.sha256 import HmacSHA256, hmac_sha256

EntropySource = Callable[[int], bytes]

# Requests between reseeds; the standard would allow up to 2**48.
RESEED_INTERVAL = 256

# Largest single generate request, limited to 2**16 by the standard.
GENERATE_MAXLEN = 65536


class HmacDrbg:
    """Deterministic random bit generator seeded from ``entropy_source``.

    ``entropy_source(n)`` must return ``n`` unpredictable bytes.  The
    generator is instantiated on the first :meth:`read`.
    """

    def __init__(self, entropy_source: Optional[EntropySource] = None) -> None:
        self._source = entropy_source if entropy_source is not None else os.urandom
        self._key = b""
        self._v = b""
        self._reseed_counter = 0
        self._instantiated = False

    def _entropy(self, n: int) -> bytes:
        data = bytes(self._source(n))
        if len(data) != n:
            raise OSError(f"entropy source returned {len(data)} bytes, wanted {n}")
        return data

    def _instantiate(self) -> None:
        seed_material = self._entropy(48)
        self._key = bytes(32)
        self._v = b"\x01" * 32
        self._reseed_counter = 1
        self._update(seed_material)
        self._instantiated = True

    def _update(self, data: bytes) -> None:
        k = HmacSHA256(self._key, self._v + b"\x00" + data).digest()
        v = hmac_sha256(k, self._v)
        if data:
            k = HmacSHA256(k, v + b"\x01" + data).digest()
            v = hmac_sha256(k, v)
        self._key = k
        self._v = v

    def _reseed(self) -> None:
        self._update(self._entropy(32))
        self._reseed_counter = 1

    def _generate(self, n: int) -> bytes:
        out = bytearray()
        while len(out) < n:
            self._v = hmac_sha256(self._key, self._v)
            out += self._v[:n - len(out)]
        self._update(b"")
        self._reseed_counter += 1
        return bytes(out)

    def read(self, n: int) -> bytes:
        """Return ``n`` pseudo-random bytes."""
        if n < 0:
            raise ValueError("byte count must not be negative")
        if not self._instantiated:
            self._instantiate()
        out = bytearray()
        while len(out) < n:
            if self._reseed_counter > RESEED_INTERVAL:
                self._reseed()
            out += self._generate(min(n - len(out), GENERATE_MAXLEN))
        return bytes(out)


_drbg = HmacDrbg()
_lock = threading.Lock()


def entropy_read(n: int) -> bytes:
    """Return ``n`` unpredictable bytes from the shared generator."""
    with _lock:
        return _drbg.read(n)