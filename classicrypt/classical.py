"""Caesar, Vigenere and affine ciphers over the letters A-Z.

Encryption drops non-letters and yields upper case; decryption yields lower case.
"""

from __future__ import annotations

from string import ascii_letters

from classicrypt.numtheory import mod_inverse

_A_LOWER = ord("a")
_A_UPPER = ord("A")


def _rem(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def _letters(text: str):
    return (c for c in text if c in ascii_letters)


def _ascii_upper(ch: str) -> str:
    return chr(ord(ch) - 32) if "a" <= ch <= "z" else ch


def caesar_encrypt(plaintext: str, key: int) -> str:
    """Shift each letter forward by ``key``."""
    return "".join(
        chr(_rem(ord(c.lower()) - _A_LOWER + key, 26) + _A_UPPER) for c in _letters(plaintext)
    )


def caesar_decrypt(ciphertext: str, key: int) -> str:
    """Shift each letter back by ``key``."""
    return caesar_encrypt(ciphertext, 26 - key).lower()


def _key_offsets(key: str):
    if not key:
        raise ValueError("key must not be empty")
    return [ord(_ascii_upper(k)) - _A_UPPER for k in key]


def vigenere_encrypt(plaintext: str, key: str) -> str:
    """Shift each letter by the matching letter of the repeating key."""
    offsets = _key_offsets(key)
    return "".join(
        chr(_rem(ord(c.lower()) - _A_LOWER + offsets[i % len(offsets)], 26) + _A_UPPER)
        for i, c in enumerate(_letters(plaintext))
    )


def vigenere_decrypt(ciphertext: str, key: str) -> str:
    """Undo :func:`vigenere_encrypt`."""
    offsets = _key_offsets(key)
    return "".join(
        chr(_rem(ord(_ascii_upper(c)) - _A_UPPER - offsets[i % len(offsets)] + 26, 26) + _A_LOWER)
        for i, c in enumerate(_letters(ciphertext))
    )


def affine_encrypt(plaintext: str, a: int, b: int) -> str:
    """Map each letter ``x`` to ``a*x + b`` modulo 26."""
    return "".join(
        chr(_rem((ord(c.lower()) - _A_LOWER) * a + b, 26) + _A_UPPER) for c in _letters(plaintext)
    )


def affine_decrypt(ciphertext: str, a: int, b: int) -> str:
    """Undo :func:`affine_encrypt`; raises ValueError if ``a`` is not invertible mod 26."""
    inverse = mod_inverse(a, 26)
    return "".join(
        chr(_rem(_rem(inverse * (ord(_ascii_upper(c)) - _A_UPPER - b), 26) + 26, 26) + _A_LOWER)
        for c in _letters(ciphertext)
    )