"""AES in counter mode with a 64-bit nonce and a 64-bit block counter."""

from __future__ import annotations

import struct
from typing import Union

from corekit.aes import BLOCK_SIZE, AESKey

BytesLike = Union[bytes, bytearray, memoryview]

_U64 = 0xFFFFFFFFFFFFFFFF
_COUNTER_BLOCK = struct.Struct(">QQ")


def _as_key(key: Union[AESKey, BytesLike]) -> AESKey:
    return key if isinstance(key, AESKey) else AESKey(key)


class AESCTR:
    """An AES-CTR keystream.

    Block ``i`` of the keystream is the encryption of the big-endian nonce
    followed by the big-endian value ``i``.  Encryption and decryption are
    the same operation.
    """

    def __init__(self, key: Union[AESKey, BytesLike], nonce: int) -> None:
        if not 0 <= nonce <= _U64:
            raise ValueError("nonce must fit in 64 unsigned bits")
        self._key = _as_key(key)
        self._nonce = nonce
        self._bytectr = 0
        self._block = b""

    def stream(self, data: BytesLike) -> bytes:
        """XOR ``data`` with the next bytes of the keystream and return it."""
        data = memoryview(data).cast("B")
        out = bytearray(len(data))
        pos = 0
        while pos < len(data):
            bytemod = self._bytectr % BLOCK_SIZE
            if bytemod == 0:
                counter = (self._bytectr // BLOCK_SIZE) & _U64
                self._block = self._key.encrypt_block(
                    _COUNTER_BLOCK.pack(self._nonce, counter)
                )
            take = min(BLOCK_SIZE - bytemod, len(data) - pos)
            for i in range(take):
                out[pos + i] = data[pos + i] ^ self._block[bytemod + i]
            pos += take
            self._bytectr += take
        return bytes(out)


def aesctr_buf(key: Union[AESKey, BytesLike], nonce: int, data: BytesLike) -> bytes:
    """Encrypt or decrypt ``data`` with a fresh AES-CTR stream."""
    return AESCTR(key, nonce).stream(data)