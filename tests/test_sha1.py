import hashlib
import hmac

import pytest

from corekit.sha1 import SHA1, HmacSHA1, hmac_sha1, sha1


def test_known_vector_abc():
    assert sha1(b"abc").hex() == "a9993e364706816aba3e25717850c26c9cd0d89d"


@pytest.mark.parametrize(
    "length", [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000]
)
def test_matches_reference(length):
    data = bytes((i * 7 + 1) % 256 for i in range(length))
    assert sha1(data) == hashlib.sha1(data).digest()


def test_chunked_updates():
    data = bytes(range(256)) * 5
    for chunk in (1, 3, 63, 64, 65, 200):
        h = SHA1()
        for start in range(0, len(data), chunk):
            h.update(data[start:start + chunk])
        assert h.digest() == hashlib.sha1(data).digest()


def test_digest_does_not_finalize():
    h = SHA1(b"first")
    first = h.digest()
    assert h.digest() == first
    h.update(b" second")
    assert h.digest() == hashlib.sha1(b"first second").digest()


def test_copy_is_independent():
    h = SHA1(b"prefix")
    c = h.copy()
    c.update(b"-more")
    assert h.digest() == hashlib.sha1(b"prefix").digest()
    assert c.digest() == hashlib.sha1(b"prefix-more").digest()
    assert h.hexdigest() == hashlib.sha1(b"prefix").hexdigest()


@pytest.mark.parametrize("key_len", [0, 1, 20, 64, 65, 200])
def test_hmac_matches_reference(key_len):
    key = bytes((i * 13) % 256 for i in range(key_len))
    data = b"message to authenticate" * 4
    assert hmac_sha1(key, data) == hmac.new(key, data, hashlib.sha1).digest()


def test_hmac_incremental_and_copy():
    key = b"secret"
    m = HmacSHA1(key)
    m.update(b"part one ")
    c = m.copy()
    m.update(b"part two")
    assert m.digest() == hmac.new(key, b"part one part two", hashlib.sha1).digest()
    assert c.digest() == hmac.new(key, b"part one ", hashlib.sha1).digest()
    assert m.digest() == m.digest()