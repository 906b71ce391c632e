import io
import struct

import pytest

from classicrypt.classical import caesar_encrypt, vigenere_encrypt
from classicrypt.fcipher import (
    lattice_decrypt,
    lattice_encrypt,
    lattice_keygen,
    main,
    output_path,
)
from classicrypt.lattice import load_private_key, load_public_key


def _feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_output_path_replaces_extension(tmp_path):
    assert output_path(str(tmp_path / "msg.txt"), ".enc") == str(tmp_path / "msg.enc")
    assert output_path(str(tmp_path / "msg"), ".dec") == str(tmp_path / "msg.dec")


def test_usage_on_wrong_argument_count(capsys):
    assert main(["caesar", "encrypt"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_invalid_algorithm(tmp_path, capsys):
    assert main(["rot", "encrypt", str(tmp_path / "x")]) == 1
    assert "valid encryption method" in capsys.readouterr().err


def test_invalid_operation(tmp_path, capsys):
    assert main(["caesar", "sign", str(tmp_path / "x")]) == 1
    assert "valid operation" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main(["caesar", "encrypt", str(tmp_path / "absent.txt")]) == 1
    assert "File not found" in capsys.readouterr().out


def test_caesar_round_trip(tmp_path, monkeypatch):
    source = tmp_path / "msg.txt"
    source.write_text("Hello World\nagain\n")
    _feed(monkeypatch, "3\n")
    assert main(["caesar", "encrypt", str(source)]) == 0
    encrypted = tmp_path / "msg.enc"
    assert encrypted.read_text() == caesar_encrypt("Hello World again", 3)
    _feed(monkeypatch, "3\n")
    assert main(["caesar", "decrypt", str(encrypted)]) == 0
    assert (tmp_path / "msg.dec").read_text() == "helloworldagain"


def test_vigenere_round_trip(tmp_path, monkeypatch):
    source = tmp_path / "note.txt"
    source.write_text("attack at dawn")
    _feed(monkeypatch, "lemon\n")
    assert main(["vigenere", "encrypt", str(source)]) == 0
    encrypted = tmp_path / "note.enc"
    assert encrypted.read_text() == vigenere_encrypt("attack at dawn", "lemon")
    _feed(monkeypatch, "lemon\n")
    assert main(["vigenere", "decrypt", str(encrypted)]) == 0
    assert (tmp_path / "note.dec").read_text() == "attackatdawn"


def test_affine_round_trip(tmp_path, monkeypatch):
    source = tmp_path / "plain.txt"
    source.write_text("affine cipher")
    _feed(monkeypatch, "5,8\n")
    assert main(["affine", "encrypt", str(source)]) == 0
    _feed(monkeypatch, "5,8\n")
    assert main(["affine", "decrypt", str(tmp_path / "plain.enc")]) == 0
    assert (tmp_path / "plain.dec").read_text() == "affinecipher"


def test_affine_rejects_non_coprime_key(tmp_path, monkeypatch, capsys):
    source = tmp_path / "plain.txt"
    source.write_text("text")
    _feed(monkeypatch, "2,3\n")
    assert main(["affine", "encrypt", str(source)]) == 1
    assert "coprime with 26" in capsys.readouterr().out
    assert not (tmp_path / "plain.enc").exists()


def test_caesar_rejects_bad_key(tmp_path, monkeypatch):
    source = tmp_path / "msg.txt"
    source.write_text("abc")
    _feed(monkeypatch, "abc\n")
    assert main(["caesar", "encrypt", str(source)]) == 1


def test_lattice_functions_round_trip(tmp_path):
    base = str(tmp_path / "key")
    public_path, private_path = lattice_keygen(base)
    assert public_path == base + ".pk"
    assert private_path == base + ".sk"
    assert load_public_key(public_path).a.shape == (512, 1024)
    assert len(load_private_key(private_path).s) == 512

    data = str(tmp_path / "bits.txt")
    count, out = lattice_encrypt(public_path, "1 0x1 1\n0", data)
    assert count == 5
    assert out == data + ".enc"
    with open(out, "rb") as handle:
        assert struct.unpack("<i", handle.read(4))[0] == 5
    assert lattice_decrypt(private_path, out) == "10110"
    assert (tmp_path / "bits.txt.enc.dec").read_text() == "10110"


def test_lattice_decrypt_missing_file(tmp_path):
    _, private_path = lattice_keygen(str(tmp_path / "k"))
    with pytest.raises(FileNotFoundError):
        lattice_decrypt(private_path, str(tmp_path / "none.enc"))


def test_lattice_command_round_trip(tmp_path, monkeypatch, capsys):
    base = str(tmp_path / "id")
    assert main(["lattice", "keygen", base]) == 0
    assert "Wrote:" in capsys.readouterr().out

    data = tmp_path / "bits.txt"
    data.write_text("0110\n1\n")
    _feed(monkeypatch, base + ".pk\n")
    assert main(["lattice", "encrypt", str(data)]) == 0
    assert "Encrypted: 5 bits" in capsys.readouterr().out

    encrypted = str(data) + ".enc"
    _feed(monkeypatch, base + ".sk\n")
    assert main(["lattice", "decrypt", encrypted]) == 0
    assert (tmp_path / "bits.txt.enc.dec").read_text() == "01101"