"""Command that encrypts and decrypts files with classical or lattice ciphers."""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path

from classicrypt.classical import (
    affine_decrypt,
    affine_encrypt,
    caesar_decrypt,
    caesar_encrypt,
    vigenere_decrypt,
    vigenere_encrypt,
)
from classicrypt.lattice import (
    LWE,
    load_private_key,
    load_public_key,
    read_ciphertexts,
    save_private_key,
    save_public_key,
    write_ciphertexts,
)
from classicrypt.numtheory import gcd
from classicrypt.textstats import read_text

ALGORITHMS = ("caesar", "vigenere", "affine", "lattice")
OPERATIONS = ("encrypt", "decrypt", "keygen")

LATTICE_N = 512
LATTICE_M = 1024
LATTICE_Q = 4093
LATTICE_SIGMA = 3.19

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _engine() -> LWE:
    return LWE(LATTICE_N, LATTICE_M, LATTICE_Q, LATTICE_SIGMA)


def output_path(path: str | os.PathLike[str], suffix: str) -> str:
    """Replace the extension of ``path`` with ``suffix``."""
    return str(Path(path).with_suffix(suffix))


def lattice_keygen(base: str) -> tuple[str, str]:
    """Create ``base.pk`` and ``base.sk``; return their paths."""
    public_path, private_path = f"{base}.pk", f"{base}.sk"
    public_key, private_key = _engine().keygen()
    save_public_key(public_key, public_path)
    save_private_key(private_key, private_path)
    return public_path, private_path


def lattice_encrypt(public_key_path: str, text: str, path: str) -> tuple[int, str]:
    """Encrypt the '0' and '1' characters of ``text`` to ``path.enc``.

    Returns the number of bits written and the output path.
    """
    public_key = load_public_key(public_key_path)
    engine = _engine()
    ciphertexts = [engine.encrypt(public_key, int(ch)) for ch in text if ch in "01"]
    out = f"{path}.enc"
    count = write_ciphertexts(ciphertexts, out)
    return count, out


def lattice_decrypt(private_key_path: str, path: str) -> str:
    """Decrypt ``path`` to ``path.dec`` and return the recovered bits."""
    private_key = load_private_key(private_key_path)
    engine = _engine()
    ciphertexts = read_ciphertexts(path, len(private_key.s))
    recovered = "".join(str(engine.decrypt(private_key, ct)) for ct in ciphertexts)
    with open(f"{path}.dec", "w", encoding="utf-8", newline="") as handle:
        handle.write(recovered)
    return recovered


def _ask(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        raise ValueError("no input given") from None


def _ask_token(prompt: str) -> str:
    parts = _ask(prompt).split()
    if not parts:
        raise ValueError("no input given")
    return parts[0]


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


def _parse_affine_key(text: str) -> tuple[int, int]:
    first, sep, second = text.partition(",")
    return _leading_int(first), _leading_int(second if sep else text)


def _write(path: str, content: str) -> bool:
    try:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
    except OSError:
        print("Could not open output file", file=sys.stderr)
        return False
    return True


def _run_classical(alg: str, op: str, text: str, fname: str) -> int:
    encrypting = op == "encrypt"
    if alg == "caesar":
        key = _leading_int(_ask_token("Enter your key: "))
        result = caesar_encrypt(text, key) if encrypting else caesar_decrypt(text, key)
    elif alg == "vigenere":
        key_text = _ask("Enter your key: ")
        result = vigenere_encrypt(text, key_text) if encrypting else vigenere_decrypt(text, key_text)
    else:
        a, b = _parse_affine_key(_ask_token("Enter your key a,b: "))
        if gcd(a, 26) != 1:
            print("Enter a valid key (First value must be coprime with 26)")
            return 1
        result = affine_encrypt(text, a, b) if encrypting else affine_decrypt(text, a, b)
    out = output_path(fname, ".enc" if encrypting else ".dec")
    return 0 if _write(out, result) else 1


def _run_lattice(op: str, text: str, fname: str) -> int:
    if op == "keygen":
        public_path, private_path = lattice_keygen(fname)
        print(f"Wrote: {public_path} and {private_path}")
    elif op == "encrypt":
        key_path = _ask_token("Public Key Filename: ")
        count, out = lattice_encrypt(key_path, text, fname)
        print(f"Encrypted: {count} bits -> {out}")
    else:
        key_path = _ask_token("Private Key Filename: ")
        print(f"Private key file name: {key_path}")
        lattice_decrypt(key_path, fname)
        print(f"Decrypted: {fname}.dec")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the file cipher command; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        print(
            "Usage: fcipher <encryption algorithm> <[encrypt|decrypt|keygen]> <filename>",
            file=sys.stderr,
        )
        return 1
    alg, op, fname = args
    if alg not in ALGORITHMS:
        print("Enter a valid encryption method. (caesar, vigenere, affine)", file=sys.stderr)
        return 1
    if op not in OPERATIONS:
        print("Enter a valid operation. (encrypt, decrypt)", file=sys.stderr)
        return 1

    text = ""
    if op != "keygen":
        try:
            text = read_text(fname)
        except OSError:
            print("File not found")
            return 1

    try:
        if alg == "lattice":
            return _run_lattice(op, text, fname)
        return _run_classical(alg, op, text, fname)
    except FileNotFoundError:
        print("File not found", file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())