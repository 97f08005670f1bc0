import pytest

from corekit import dh


def test_group14_shape():
    assert len(dh.GROUP14) == dh.PUBLEN
    assert dh.GROUP14[:8] == b"\xff" * 8
    assert dh.GROUP14[-8:] == b"\xff" * 8
    just_below = dh.GROUP14[:-1] + b"\xfe"
    assert dh.sanity_check(just_below) is None
    with pytest.raises(ValueError):
        dh.sanity_check(dh.GROUP14)


def test_shared_secret_agrees():
    pub_a, priv_a = dh.generate()
    pub_b, priv_b = dh.generate()
    key_ab = dh.compute(pub_b, priv_a)
    key_ba = dh.compute(pub_a, priv_b)
    assert key_ab == key_ba
    assert len(key_ab) == dh.KEYLEN


def test_generate_sizes_and_consistency():
    pub, priv = dh.generate()
    assert len(priv) == dh.PRIVLEN
    assert len(pub) == dh.PUBLEN
    assert dh.generate_pub(priv) == pub


def test_blinding_does_not_change_result():
    priv_a = bytes(range(32))
    priv_b = bytes(range(32, 64))
    pub_a = dh.generate_pub(priv_a)
    pub_b = dh.generate_pub(priv_b)
    assert len(pub_a) == dh.PUBLEN
    assert dh.generate_pub(priv_a) == pub_a
    assert dh.compute(pub_b, priv_a) == dh.compute(pub_a, priv_b)


def test_generate_pub_equals_compute_with_generator():
    priv = bytes(range(1, 33))
    two = (2).to_bytes(dh.PUBLEN, "big")
    assert dh.compute(two, priv) == dh.generate_pub(priv)


def test_public_value_is_sane():
    pub, _ = dh.generate()
    assert dh.sanity_check(pub) is None
    assert pub < dh.GROUP14


def test_sanity_check_rejects_modulus_and_above():
    with pytest.raises(ValueError):
        dh.sanity_check(dh.GROUP14)
    with pytest.raises(ValueError):
        dh.sanity_check(b"\xff" * dh.PUBLEN)


def test_sanity_check_accepts_zero():
    assert dh.sanity_check(bytes(dh.PUBLEN)) is None


def test_rejects_bad_lengths():
    with pytest.raises(ValueError):
        dh.generate_pub(bytes(31))
    with pytest.raises(ValueError):
        dh.compute(bytes(255), bytes(32))
    with pytest.raises(ValueError):
        dh.compute(bytes(256), bytes(33))
    with pytest.raises(ValueError):
        dh.sanity_check(bytes(10))