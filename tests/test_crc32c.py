import struct

import pytest

from corekit.crc32c import CRC32C, crc32c


def test_empty_digest_is_leading_bit_crc():
    assert crc32c(b"") == struct.pack("<I", 0x82F63B78)
    assert CRC32C().digest() == struct.pack("<I", 0x82F63B78)


@pytest.mark.parametrize("length", [0, 1, 3, 4, 5, 8, 13, 64, 255])
def test_appending_digest_gives_zero_residue(length):
    data = bytes((i * 37 + 11) % 256 for i in range(length))
    c = CRC32C(data)
    c.update(c.digest())
    assert c.digest() == b"\x00\x00\x00\x00"


def test_chunked_updates_match_single_update():
    data = bytes(range(256)) * 3
    whole = crc32c(data)
    for chunk in (1, 2, 3, 5, 7, 64):
        c = CRC32C()
        for start in range(0, len(data), chunk):
            c.update(data[start:start + chunk])
        assert c.digest() == whole


@pytest.mark.parametrize("length", [1, 4, 7, 32])
def test_affine_in_data(length):
    a = bytes((i * 91 + 3) % 256 for i in range(length))
    b = bytes((i * 53 + 200) % 256 for i in range(length))
    x = bytes(p ^ q for p, q in zip(a, b))
    z = bytes(length)
    ca, cb, cx, cz = (int.from_bytes(crc32c(v), "little") for v in (a, b, x, z))
    assert ca ^ cb ^ cz == cx


def test_constructor_data_same_as_update():
    c = CRC32C()
    c.update(b"hello world")
    assert CRC32C(b"hello world").digest() == c.digest()
    assert crc32c(bytearray(b"hello world")) == c.digest()


def test_single_bit_change_changes_crc():
    assert crc32c(b"\x00\x00\x00\x00") != crc32c(b"\x01\x00\x00\x00")
    assert len(crc32c(b"abc")) == 4


def test_hexdigest_matches_digest():
    c = CRC32C(b"data")
    assert c.hexdigest() == c.digest().hex()