"""Command that encrypts or decrypts text given on the command line."""

from __future__ import annotations

import re
import sys

from classicrypt.classical import (
    affine_decrypt,
    affine_encrypt,
    caesar_decrypt,
    caesar_encrypt,
    vigenere_decrypt,
    vigenere_encrypt,
)
from classicrypt.numtheory import gcd

ALGORITHMS = ("caesar", "vigenere", "affine")
OPERATIONS = ("encrypt", "decrypt")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


def parse_affine_key(text: str) -> tuple[int, int]:
    """Parse an affine key written as ``a,b``.

    Without a comma, the whole text supplies both values.
    """
    first, sep, second = text.partition(",")
    return _leading_int(first), _leading_int(second if sep else text)


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


def _run(alg: str, op: str, text: str) -> int:
    encrypting = op == "encrypt"
    if alg == "caesar":
        key = _leading_int(_ask_token("Enter your key: "))
        result = caesar_encrypt(text, key) if encrypting else caesar_decrypt(text, key)
    elif alg == "vigenere":
        key_text = _ask("Enter your key: ")
        result = vigenere_encrypt(text, key_text) if encrypting else vigenere_decrypt(text, key_text)
    else:
        a, b = parse_affine_key(_ask_token("Enter your key a,b: "))
        if gcd(a, 26) != 1:
            print("Enter a valid key (First value must be coprime with 26)")
            return 1
        result = affine_encrypt(text, a, b) if encrypting else affine_decrypt(text, a, b)
    print(result)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the text cipher command; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        print(
            "Usage: cipher <encryption algorithm> <[encrypt|decrypt]> <text>",
            file=sys.stderr,
        )
        return 1
    alg, op, text = args
    if alg not in ALGORITHMS:
        print("Enter a valid encryption method. (caesar, vigenere, affine)", file=sys.stderr)
        return 1
    if op not in OPERATIONS:
        print("Enter a valid operation. (encrypt, decrypt)", file=sys.stderr)
        return 1
    try:
        return _run(alg, op, text)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())