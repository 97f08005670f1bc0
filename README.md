# corekit

A small library of data structures and cryptographic building blocks,
written in plain Python. AES uses the `cryptography` package; everything
else uses only the standard library.

## Installation

```
pip install corekit
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## Data structures

- `corekit.elasticarray.ElasticArray(nrec=0, reclen=1)`: a resizable array
  of fixed-length byte records. Storage doubles when it grows and is cut
  back when it is more than four times what the records need. Records are
  read and written with indexing (`ea[i]`, `ea[i] = record`); `append`
  adds one or more whole records, `resize` sets the record count (new
  records are zero-filled), `shrink` drops records from the end,
  `truncate` releases spare storage, `export` returns all records as one
  `bytes` and empties the array, and `exportdup` returns a copy and leaves
  the array as it is.
- `corekit.elasticqueue.ElasticQueue`: a FIFO queue of arbitrary objects
  with indexed access. `add` appends at the tail, `delete` removes the
  head (and does nothing on an empty queue), `get(pos)` returns the item
  at `pos` or `None` when out of range, and `set(pos, rec)` replaces it.
- `corekit.ptrheap.PtrHeap(compar, setreccookie=None, items=())`: a binary
  min-heap ordered by a three-way comparison `compar(x, y)`. If
  `setreccookie(item, rc)` is given, it is told each item's current
  position; that position (the record cookie) is what `delete(rc)` and
  `increase(rc)` take. `getmin` returns the minimum or `None`;
  `deletemin` and `increasemin` act on the root.
- `corekit.seqptrmap.SeqPtrMap`: numbers added objects 0, 1, 2, ... and
  looks them up again by number. `getmin` returns the lowest number still
  present, or -1 when the map is empty.
- `corekit.timerqueue.TimerQueue`: a priority queue of `(time, object)`
  pairs. Times can be any totally ordered values. `add` returns a
  `TimerRecord` used by `delete` and `increase`; `getptr(tv)` pops and
  returns the earliest object if its time is at most `tv`.

```python
from corekit.seqptrmap import SeqPtrMap

m = SeqPtrMap()
i = m.add("first")
j = m.add("second")
m.delete(i)
assert m.getmin() == j
assert m.get(j) == "second"
```

```python
from corekit.timerqueue import TimerQueue

q = TimerQueue()
cookie = q.add((10, 0), "job-a")
q.add((5, 0), "job-b")
assert q.getptr((6, 0)) == "job-b"
q.increase(cookie, (20, 0))
assert q.getmin() == (20, 0)
```

## Hashes, MACs and checksums

`corekit.md5`, `corekit.sha1` and `corekit.sha256` each provide an
incremental hash class (`MD5`, `SHA1`, `SHA256`), an HMAC class
(`HmacMD5`, `HmacSHA1`, `HmacSHA256`) and one-shot functions (`md5`,
`sha1`, `sha256`, `hmac_md5`, `hmac_sha1`, `hmac_sha256`). The classes
have `update`, `digest`, `hexdigest` and `copy`; `digest` does not
disturb the object, so more data can be fed afterwards.

`corekit.sha256.pbkdf2_sha256(password, salt, iterations, dklen)` derives
keys with PBKDF2 using HMAC-SHA256. An iteration count of zero behaves
like one.

```python
from corekit.sha256 import SHA256, hmac_sha256, pbkdf2_sha256

h = SHA256(b"hello ")
h.update(b"world")
digest = h.digest()

mac = hmac_sha256(b"secret", b"message")

password = b"password"
derived = pbkdf2_sha256(password, b"salt", 1000, 32)
```

`corekit.crc32c` computes a CRC with the Castagnoli polynomial
(`CRC32C` class and `crc32c` function, both returning 4 bytes, least
significant first). The state starts as the CRC of an implicit leading
1 bit and no final inversion is applied, so appending the CRC to the data
gives a CRC of four zero bytes. The values differ from the common
CRC-32C with its all-ones start and final inversion.

`corekit.verify.verify_bytes(buf0, buf1)` compares two equal-length byte
strings without stopping at the first difference; it returns 0 only when
they are identical and raises `ValueError` if the lengths differ.

## Random bytes, AES and Diffie-Hellman

- `corekit.entropy.entropy_read(n)` returns `n` unpredictable bytes from a
  shared, lock-protected HMAC-DRBG (SHA-256) seeded from `os.urandom`.
  `HmacDrbg(entropy_source=None)` is the generator itself and accepts any
  callable returning the requested number of bytes; it reseeds every 256
  requests.
- `corekit.aes.AESKey(key)` takes a 16- or 32-byte key and encrypts single
  16-byte blocks with `encrypt_block`.
- `corekit.aesctr.AESCTR(key, nonce)` is a CTR-mode keystream whose block
  `i` is the encryption of the 64-bit big-endian nonce followed by `i`;
  `stream(data)` encrypts or decrypts. `aesctr_buf(key, nonce, data)` does
  the same with a fresh stream. `key` may be an `AESKey` or raw key bytes.
- `corekit.dh` implements Diffie-Hellman in the 2048-bit MODP group #14
  with 32-byte private keys and an exponent of `2**258 + priv`.
  `generate()` returns `(pub, priv)`, `generate_pub(priv)` computes the
  public value, `compute(pub, priv)` the shared key, and
  `sanity_check(pub)` raises `ValueError` unless `pub` is below the
  modulus.

```python
from corekit import dh

pub_a, priv_a = dh.generate()
pub_b, priv_b = dh.generate()
dh.sanity_check(pub_b)
assert dh.compute(pub_b, priv_a) == dh.compute(pub_a, priv_b)
```

## What it does not do

corekit is a library only: it installs no command-line tools. AES is
offered for block encryption and CTR mode; there is no block decryption
and no other cipher mode. Nothing is stored on disk.