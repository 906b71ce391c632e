"""Command offering small number-theory and text-statistics helpers."""

from __future__ import annotations

import re
import sys
from typing import Sequence

from classicrypt.numtheory import (
    affine_key,
    fast_modular_exponentiation,
    gcd,
    is_number,
    mod_inverse_recursive,
    solve_congruences,
    totient,
)
from classicrypt.textstats import frequency, index_of_coincidence, read_text

TOOLS = ("findkey", "minverse", "mtable", "frequency", "soc", "phi", "fme")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


def mod_table(m: int) -> list[list[int]]:
    """Multiplication table modulo ``m``."""
    return [[(i * j) % m for j in range(m)] for i in range(m)]


def format_mod_table(m: int) -> str:
    """Render the table modulo ``m`` and the number of products equal to 1."""
    rows = mod_table(m)
    lines = [" ".join(f"{v} " if v < 10 else str(v) for v in row) for row in rows]
    inverses = sum(row.count(1) for row in rows)
    lines.append(f"Number of multiplicative inverses: {inverses}")
    return "\n".join(lines) + "\n"


def format_frequencies(freq: Sequence[float]) -> str:
    """Render frequencies as ``a:x, b:y, ...``."""
    return ", ".join(f"{chr(ord('a') + i)}:{value:g}" for i, value in enumerate(freq))


def _ask_token(prompt: str) -> str:
    try:
        parts = input(prompt).split()
    except EOFError:
        parts = []
    return parts[0] if parts else ""


def _find_affine_key() -> int:
    plain = _ask_token("Input plaintext (2 Letters): ")
    cipher = _ask_token("Input ciphertext: ")
    if len(plain) < 2 or len(cipher) < 2:
        print("Insufficient text length", file=sys.stderr)
        return 1
    a, b = affine_key(plain[0], plain[1], cipher[0], cipher[1])
    print(f"Affine Key: ({a},{b})")
    return 0


def _frequency_report(path: str) -> int:
    try:
        text = read_text(path)
    except OSError:
        print("File not found")
        return 1
    print(text)
    freq = frequency(text)
    print(f"Index of Coincidence: {index_of_coincidence(freq):g}")
    print(format_frequencies(freq))
    return 0


def _solve_system(a: int, m: int, b: int, n: int) -> int:
    if gcd(m, n) != 1:
        print("Modular values must be coprime", file=sys.stderr)
        return 1
    x = solve_congruences(a, m, b, n)
    print("System of Congruences:")
    print(f"x ≡ {a} (mod {m})")
    print(f"x ≡ {b} (mod {n})")
    print(f"x = {x}")
    return 0


def _usage_error(tool: str, arguments: str) -> int:
    print(f"Usage: tool {tool} {arguments}")
    return 1


def _dispatch(tool: str, rest: list[str]) -> int:
    if tool == "findkey":
        return _find_affine_key()
    if tool == "minverse":
        if len(rest) != 2 or not all(is_number(x) for x in rest):
            return _usage_error(tool, "<int> <int>")
        n, m = (_to_int(x) for x in rest)
        print(f"Mod Inverse of {n} mod {m}: {mod_inverse_recursive(n, m)}")
        return 0
    if tool == "mtable":
        if len(rest) != 1 or not is_number(rest[0]):
            return _usage_error(tool, "<int>")
        print(format_mod_table(_to_int(rest[0])), end="")
        return 0
    if tool == "frequency":
        if len(rest) != 1:
            return _usage_error(tool, "<filename>")
        return _frequency_report(rest[0])
    if tool == "soc":
        if len(rest) != 4:
            return _usage_error(tool, "<x_1> <n_1> <x_2> <n_2>")
        return _solve_system(*(_to_int(x) for x in rest))
    if tool == "phi":
        if len(rest) != 1:
            return _usage_error(tool, "<int>")
        n = _to_int(rest[0])
        print(f"φ({n}) = {totient(n)}")
        return 0
    if len(rest) != 3:
        return _usage_error(tool, "<int> <int> <int>")
    a, e, m = (_to_int(x) for x in rest)
    result = fast_modular_exponentiation(a, e, m)
    print(f"Result of pow({a},{e}) (mod {m}) = {result} (mod {m})")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the helper command; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: tool <findkey|minverse|mtable|frequency|soc> [arguments]")
        return 1
    tool, rest = args[0], args[1:]
    if tool not in TOOLS:
        print("Usage: tool <findkey|minverse|mtable|frequency|soc|phi|fme> [arguments]",
              file=sys.stderr)
        return 1
    try:
        return _dispatch(tool, rest)
    except (ValueError, ZeroDivisionError) as exc:
        print(str(exc), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())