import math

import pytest

from classicrypt.classical import (
    affine_decrypt,
    affine_encrypt,
    caesar_decrypt,
    caesar_encrypt,
    vigenere_decrypt,
    vigenere_encrypt,
)

SAMPLE = "Meet me, after the Toga party!"
SAMPLE_LETTERS = "".join(c for c in SAMPLE if c.isalpha())


def test_caesar_known_value():
    assert caesar_encrypt("Hello, World!", 3) == "KHOORZRUOG"


def test_caesar_key_zero_uppercases_letters():
    assert caesar_encrypt(SAMPLE, 0) == SAMPLE_LETTERS.upper()


@pytest.mark.parametrize("key", range(26))
def test_caesar_round_trip(key):
    assert caesar_decrypt(caesar_encrypt(SAMPLE, key), key) == SAMPLE_LETTERS.lower()


def test_caesar_output_is_upper_and_decrypt_lower():
    enc = caesar_encrypt(SAMPLE, 7)
    assert enc.isupper() and enc.isalpha()
    assert caesar_decrypt(enc, 7).islower()


def test_vigenere_known_value():
    assert vigenere_encrypt("ATTACKATDAWN", "LEMON") == "LXFOPVEFRNHR"


def test_vigenere_ignores_case_and_punctuation():
    assert vigenere_encrypt("attack at dawn", "lemon") == vigenere_encrypt("ATTACKATDAWN", "LEMON")


def test_vigenere_single_letter_key_is_caesar():
    assert vigenere_encrypt(SAMPLE, "D") == caesar_encrypt(SAMPLE, 3)


@pytest.mark.parametrize("key", ["LEMON", "key", "A", "Zebra"])
def test_vigenere_round_trip(key):
    assert vigenere_decrypt(vigenere_encrypt(SAMPLE, key), key) == SAMPLE_LETTERS.lower()


def test_vigenere_empty_key_raises():
    with pytest.raises(ValueError):
        vigenere_encrypt("abc", "")
    with pytest.raises(ValueError):
        vigenere_decrypt("ABC", "")


@pytest.mark.parametrize("a", [a for a in range(1, 26) if math.gcd(a, 26) == 1])
@pytest.mark.parametrize("b", [0, 5, 25])
def test_affine_round_trip(a, b):
    assert affine_decrypt(affine_encrypt(SAMPLE, a, b), a, b) == SAMPLE_LETTERS.lower()


@pytest.mark.parametrize("b", [0, 4, 17])
def test_affine_with_unit_multiplier_is_caesar(b):
    assert affine_encrypt(SAMPLE, 1, b) == caesar_encrypt(SAMPLE, b)


def test_affine_identity_key():
    assert affine_encrypt(SAMPLE, 1, 0) == SAMPLE_LETTERS.upper()


@pytest.mark.parametrize("a", [2, 13, 4])
def test_affine_decrypt_non_invertible_raises(a):
    with pytest.raises(ValueError):
        affine_decrypt("ABC", a, 3)