"""Learning-with-errors public-key encryption of single bits, with key files.

Integers in key and ciphertext files are 32-bit little-endian.
"""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from typing import Iterable

import numpy as np

_INT = struct.Struct("<i")
_DTYPE = np.dtype("<i4")


@dataclass(eq=False)
class PublicKey:
    """Public matrix ``a`` (n rows, m columns) and vector ``b`` (length m)."""

    a: np.ndarray
    b: np.ndarray


@dataclass(eq=False)
class PrivateKey:
    """Secret vector ``s`` (length n) with entries in {-1, 0, 1}."""

    s: np.ndarray


@dataclass(eq=False)
class CipherText:
    """Encryption of one bit: vector ``c1`` (length n) and scalar ``c2``."""

    c1: np.ndarray
    c2: int


class LWE:
    """LWE scheme with dimension ``n``, ``m`` samples, modulus ``q`` and noise ``sigma``."""

    def __init__(self, n: int, m: int, q: int, sigma: float, seed: int | None = None) -> None:
        if n <= 0 or m <= 0:
            raise ValueError("dimensions must be positive")
        if q < 2:
            raise ValueError("modulus must be at least 2")
        if sigma < 0:
            raise ValueError("sigma must not be negative")
        self.n = n
        self.m = m
        self.q = q
        self.sigma = sigma
        self._rng = np.random.default_rng(seed)

    def _uniform(self, shape) -> np.ndarray:
        return self._rng.integers(0, self.q, size=shape, dtype=np.int64)

    def _gaussian(self, size: int) -> np.ndarray:
        x = self._rng.normal(0.0, self.sigma, size)
        # Round half away from zero.
        return (np.sign(x) * np.floor(np.abs(x) + 0.5)).astype(np.int64)

    def _trinary(self, size: int) -> np.ndarray:
        return self._rng.integers(-1, 2, size=size, dtype=np.int64)

    def keygen(self) -> tuple[PublicKey, PrivateKey]:
        """Generate a fresh key pair."""
        s = self._trinary(self.n)
        a = self._uniform((self.n, self.m))
        e = self._gaussian(self.m)
        b = (a.T @ s + e) % self.q
        return PublicKey(a, b), PrivateKey(s)

    def encrypt(self, public_key: PublicKey, bit: int) -> CipherText:
        """Encrypt a single bit (0 or 1)."""
        if bit not in (0, 1):
            raise ValueError("only the bits 0 and 1 can be encrypted")
        a = np.asarray(public_key.a, dtype=np.int64)
        b = np.asarray(public_key.b, dtype=np.int64)
        if a.shape != (self.n, self.m) or b.shape != (self.m,):
            raise ValueError("public key does not match the scheme parameters")
        # The mask is drawn small so that decryption noise stays below q/4.
        r = self._trinary(self.m)
        e1 = self._gaussian(self.n)
        e2 = int(self._gaussian(1)[0])
        c1 = (a @ r + e1) % self.q
        c2 = int((int(b @ r) + e2 + (self.q // 2) * bit) % self.q)
        return CipherText(c1, c2)

    def decrypt(self, private_key: PrivateKey, ciphertext: CipherText) -> int:
        """Recover the bit held by ``ciphertext``."""
        s = np.asarray(private_key.s, dtype=np.int64)
        c1 = np.asarray(ciphertext.c1, dtype=np.int64)
        if s.shape != c1.shape:
            raise ValueError("ciphertext does not match the private key")
        u = (int(ciphertext.c2) - int(s @ c1)) % self.q
        return 1 if self.q // 4 < u < 3 * self.q // 4 else 0


class _Reader:
    """Sequential reader of 32-bit integers from a byte string."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def _take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise ValueError("file is truncated")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def int(self) -> int:
        return _INT.unpack(self._take(_INT.size))[0]

    def count(self) -> int:
        value = self.int()
        if value < 0:
            raise ValueError("negative length in file")
        return value

    def ints(self, count: int) -> np.ndarray:
        raw = self._take(count * _DTYPE.itemsize)
        return np.frombuffer(raw, dtype=_DTYPE).astype(np.int64)


def _pack(values) -> bytes:
    return np.asarray(values, dtype=np.int64).astype(_DTYPE).tobytes()


def save_public_key(key: PublicKey, path: str | os.PathLike[str]) -> None:
    """Write rows, columns, ``b`` and then the rows of ``a``."""
    a = np.asarray(key.a)
    b = np.asarray(key.b)
    n, m = a.shape
    if b.shape != (m,):
        raise ValueError("vector length does not match the matrix")
    with open(path, "wb") as handle:
        handle.write(_INT.pack(n) + _INT.pack(m))
        handle.write(_pack(b))
        handle.write(_pack(a))


def load_public_key(path: str | os.PathLike[str]) -> PublicKey:
    """Read a key written by :func:`save_public_key`."""
    with open(path, "rb") as handle:
        reader = _Reader(handle.read())
    n = reader.count()
    m = reader.count()
    b = reader.ints(m)
    a = reader.ints(n * m).reshape(n, m)
    return PublicKey(a, b)


def save_private_key(key: PrivateKey, path: str | os.PathLike[str]) -> None:
    """Write the length of ``s`` followed by its entries."""
    s = np.asarray(key.s)
    with open(path, "wb") as handle:
        handle.write(_INT.pack(len(s)))
        handle.write(_pack(s))


def load_private_key(path: str | os.PathLike[str]) -> PrivateKey:
    """Read a key written by :func:`save_private_key`."""
    with open(path, "rb") as handle:
        reader = _Reader(handle.read())
    return PrivateKey(reader.ints(reader.count()))


def write_ciphertexts(ciphertexts: Iterable[CipherText], path: str | os.PathLike[str]) -> int:
    """Write a count followed by each ciphertext's ``c1`` and ``c2``; return the count."""
    items = list(ciphertexts)
    with open(path, "wb") as handle:
        handle.write(_INT.pack(len(items)))
        for ct in items:
            handle.write(_pack(ct.c1))
            handle.write(_INT.pack(int(ct.c2)))
    return len(items)


def read_ciphertexts(path: str | os.PathLike[str], n: int) -> list[CipherText]:
    """Read ciphertexts whose ``c1`` vectors have length ``n``."""
    with open(path, "rb") as handle:
        reader = _Reader(handle.read())
    count = reader.count()
    result = []
    for _ in range(count):
        c1 = reader.ints(n)
        result.append(CipherText(c1, reader.int()))
    return result