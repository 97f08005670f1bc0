import struct

import pytest

from corekit.aes import AESKey
from corekit.aesctr import AESCTR, aesctr_buf

KEY = bytes(range(32))
MESSAGE = bytes(range(256)) * 3 + b"tail"


def test_round_trip():
    key = AESKey(KEY)
    ciphertext = aesctr_buf(key, 7, MESSAGE)
    assert ciphertext != MESSAGE
    assert len(ciphertext) == len(MESSAGE)
    assert aesctr_buf(key, 7, ciphertext) == MESSAGE


def test_raw_key_bytes_accepted():
    assert aesctr_buf(KEY, 3, MESSAGE) == aesctr_buf(AESKey(KEY), 3, MESSAGE)


def test_first_block_is_encrypted_counter():
    key = AESKey(KEY)
    nonce = 0x0102030405060708
    keystream = aesctr_buf(key, nonce, bytes(32))
    assert keystream[:16] == key.encrypt_block(struct.pack(">QQ", nonce, 0))
    assert keystream[16:] == key.encrypt_block(struct.pack(">QQ", nonce, 1))


@pytest.mark.parametrize("chunks", [[1] * 40, [3, 13, 16, 17, 5], [15, 1, 31, 33]])
def test_incremental_matches_one_shot(chunks):
    key = AESKey(KEY)
    data = MESSAGE[: sum(chunks)]
    stream = AESCTR(key, 42)
    out = b""
    pos = 0
    for size in chunks:
        out += stream.stream(data[pos:pos + size])
        pos += size
    assert out == aesctr_buf(key, 42, data)


def test_nonce_changes_keystream():
    key = AESKey(KEY)
    assert aesctr_buf(key, 1, bytes(16)) != aesctr_buf(key, 2, bytes(16))


def test_empty_input():
    stream = AESCTR(AESKey(KEY), 0)
    assert stream.stream(b"") == b""
    assert stream.stream(bytes(16)) == aesctr_buf(KEY, 0, bytes(16))


@pytest.mark.parametrize("nonce", [-1, 1 << 64])
def test_rejects_out_of_range_nonce(nonce):
    with pytest.raises(ValueError):
        AESCTR(AESKey(KEY), nonce)