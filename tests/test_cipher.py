import pytest

from classicrypt.cipher import main, parse_affine_key
from classicrypt.classical import (
    affine_encrypt,
    caesar_encrypt,
    vigenere_encrypt,
)


def _answer(monkeypatch, reply):
    monkeypatch.setattr("builtins.input", lambda prompt="": reply)


def test_parse_affine_key_with_comma():
    assert parse_affine_key("5,8") == (5, 8)


def test_parse_affine_key_without_comma_uses_whole_text():
    assert parse_affine_key("7") == (7, 7)


def test_parse_affine_key_rejects_garbage():
    with pytest.raises(ValueError):
        parse_affine_key("x,1")


def test_caesar_encrypt_prints_ciphertext(monkeypatch, capsys):
    _answer(monkeypatch, "3")
    assert main(["caesar", "encrypt", "Hello World"]) == 0
    assert capsys.readouterr().out.strip() == caesar_encrypt("Hello World", 3)


def test_caesar_round_trip(monkeypatch, capsys):
    _answer(monkeypatch, "11")
    ciphertext = caesar_encrypt("Attack at dawn", 11)
    assert main(["caesar", "decrypt", ciphertext]) == 0
    assert capsys.readouterr().out.strip() == "attackatdawn"


def test_vigenere_round_trip(monkeypatch, capsys):
    _answer(monkeypatch, "lemon")
    ciphertext = vigenere_encrypt("Attack at dawn", "lemon")
    assert main(["vigenere", "decrypt", ciphertext]) == 0
    assert capsys.readouterr().out.strip() == "attackatdawn"


def test_affine_encrypt(monkeypatch, capsys):
    _answer(monkeypatch, "5,8")
    assert main(["affine", "encrypt", "affine cipher"]) == 0
    assert capsys.readouterr().out.strip() == affine_encrypt("affine cipher", 5, 8)


def test_affine_round_trip(monkeypatch, capsys):
    _answer(monkeypatch, "7,3")
    ciphertext = affine_encrypt("Secret message", 7, 3)
    assert main(["affine", "decrypt", ciphertext]) == 0
    assert capsys.readouterr().out.strip() == "secretmessage"


def test_affine_key_not_coprime(monkeypatch, capsys):
    _answer(monkeypatch, "2,3")
    assert main(["affine", "encrypt", "text"]) == 1
    assert "coprime with 26" in capsys.readouterr().out


def test_empty_vigenere_key_is_reported(monkeypatch, capsys):
    _answer(monkeypatch, "")
    assert main(["vigenere", "encrypt", "text"]) == 1
    assert capsys.readouterr().err.strip() != ""


@pytest.mark.parametrize(
    "args, message",
    [
        (["caesar", "encrypt"], "Usage"),
        (["rot13", "encrypt", "text"], "valid encryption method"),
        (["caesar", "scramble", "text"], "valid operation"),
    ],
)
def test_argument_errors(args, message, capsys):
    assert main(args) == 1
    assert message in capsys.readouterr().err