"""AES block encryption with 128-bit or 256-bit keys."""

from __future__ import annotations

from typing import Union

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

BytesLike = Union[bytes, bytearray, memoryview]

BLOCK_SIZE = 16

_KEY_LENGTHS = (16, 32)


class AESKey:
    """An expanded AES key that encrypts single 16-byte blocks."""

    def __init__(self, key: BytesLike) -> None:
        key = bytes(key)
        if len(key) not in _KEY_LENGTHS:
            raise ValueError(
                f"unsupported AES key length: {len(key)} bytes (must be 16 or 32)"
            )
        self._encryptor = Cipher(algorithms.AES(key), modes.ECB()).encryptor()

    def encrypt_block(self, block: BytesLike) -> bytes:
        """Encrypt one 16-byte block and return the ciphertext."""
        block = bytes(block)
        if len(block) != BLOCK_SIZE:
            raise ValueError(
                f"AES block must be {BLOCK_SIZE} bytes, got {len(block)}"
            )
        return self._encryptor.update(block)