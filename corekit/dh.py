"""Diffie-Hellman key exchange in the 2048-bit MODP group #14.

Private keys are 256-bit values ``priv``; the exponent actually used is
``2**258 + priv``.  All values are big-endian byte strings.
"""

from __future__ import annotations

from typing import Union

from corekit.entropy import entropy_read

BytesLike = Union[bytes, bytearray, memoryview]

PRIVLEN = 32
PUBLEN = 256
KEYLEN = 256

# p = 2^2048 - 2^1984 + 2^64 * floor(2^1918 pi + 124476) - 1; both p and
# (p - 1)/2 are prime and 2 generates the group of quadratic residues.
GROUP14 = bytes.fromhex(
    "ffffffffffffffff" "c90fdaa22168c234" "c4c6628b80dc1cd1" "29024e088a67cc74"
    "020bbea63b139b22" "514a08798e3404dd" "ef9519b3cd3a431b" "302b0a6df25f1437"
    "4fe1356d6d51c245" "e485b576625e7ec6" "f44c42e9a637ed6b" "0bff5cb6f406b7ed"
    "ee386bfb5a899fa5" "ae9f24117c4b1fe6" "49286651ece45b3d" "c2007cb8a163bf05"
    "98da48361c55d39a" "69163fa8fd24cf5f" "83655d23dca3ad96" "1c62f356208552bb"
    "9ed529077096966d" "670c354e4abc9804" "f1746c08ca18217c" "32905e462e36ce3b"
    "e39e772c180e8603" "9b2783a2ec07a28f" "b5c55df06f4c52c9" "de2bcbf695581718"
    "3995497cea956ae5" "15d2261898fa0510" "15728e5a8aacaa68" "ffffffffffffffff"
)

_P = int.from_bytes(GROUP14, "big")
_TWO_EXP_256 = 1 << 256


def _check_len(name: str, value: BytesLike, length: int) -> bytes:
    value = bytes(value)
    if len(value) != length:
        raise ValueError(f"{name} must be {length} bytes, got {len(value)}")
    return value


def _blinded_modexp(a: int, priv: bytes) -> bytes:
    """Return ``a ** (2**258 + priv) mod p`` with a randomly split exponent."""
    exponent = int.from_bytes(priv, "big") + 4 * _TWO_EXP_256
    blinding = int.from_bytes(entropy_read(PRIVLEN), "big") + _TWO_EXP_256
    r1 = pow(a, blinding, _P)
    r2 = pow(a, exponent - blinding, _P)
    return (r1 * r2 % _P).to_bytes(PUBLEN, "big")


def generate_pub(priv: BytesLike) -> bytes:
    """Return the public value ``2 ** (2**258 + priv)`` in group #14."""
    priv = _check_len("private key", priv, PRIVLEN)
    return _blinded_modexp(2, priv)


def generate() -> tuple[bytes, bytes]:
    """Generate a random private key; return ``(pub, priv)``."""
    priv = entropy_read(PRIVLEN)
    return generate_pub(priv), priv


def compute(pub: BytesLike, priv: BytesLike) -> bytes:
    """Return the shared key ``pub ** (2**258 + priv)`` in group #14.

    ``pub`` is the public value produced by the other participant.
    """
    pub = _check_len("public value", pub, PUBLEN)
    priv = _check_len("private key", priv, PRIVLEN)
    return _blinded_modexp(int.from_bytes(pub, "big"), priv)


def sanity_check(pub: BytesLike) -> None:
    """Raise ValueError unless ``pub`` is less than the group #14 modulus."""
    pub = _check_len("public value", pub, PUBLEN)
    if pub >= GROUP14:
        raise ValueError("Diffie-Hellman public value is not below the modulus")