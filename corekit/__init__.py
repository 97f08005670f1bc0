"""Elastic arrays and queues, heaps, timer queues, MD5/SHA-1/SHA-256 with HMAC
and PBKDF2, CRC32C, an HMAC-DRBG, AES-CTR and Diffie-Hellman group 14."""

__version__ = "0.1.0"