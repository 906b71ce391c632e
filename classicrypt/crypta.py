"""Command that breaks Caesar, Vigenere and affine ciphertexts by frequency analysis."""

from __future__ import annotations

import math
import sys

from classicrypt.classical import affine_decrypt, caesar_decrypt, vigenere_decrypt
from classicrypt.numtheory import gcd
from classicrypt.textstats import (
    english_frequency,
    frequency,
    index_of_coincidence,
    mutual_index_of_coincidence,
    read_text,
    shift,
    substring,
)

ALGORITHMS = ("caesar", "bcaesar", "vigenere", "affine")


def _best_shift(text: str) -> tuple[int, list[float]]:
    """Shift whose rotated English frequencies best match ``text``, with all scores."""
    freq = frequency(text)
    english = english_frequency()
    best, best_index = 0.0, 0
    scores = []
    for i in range(26):
        score = mutual_index_of_coincidence(freq, shift(english, i))
        scores.append(score)
        if score > best:
            best, best_index = score, i
    return best_index, scores


def analyze_caesar(text: str) -> tuple[int, list[float]]:
    """Return the most likely Caesar key and the score of every shift."""
    return _best_shift(text)


def brute_force_caesar(text: str) -> list[tuple[int, str]]:
    """Decrypt ``text`` with every key from 1 to 25."""
    return [(key, caesar_decrypt(text, key)) for key in range(1, 26)]


def friedman_key_length(text: str) -> int:
    """Friedman's estimate of a Vigenere key length for ``text``."""
    n = len(text)
    ic = index_of_coincidence(frequency(text))
    if math.isnan(ic):
        raise ValueError("text contains no letters")
    denominator = ic * (n - 1) - 0.0385 * n + 0.065
    if denominator == 0:
        raise ValueError("key length cannot be estimated")
    return int(0.0265 * n / denominator + 0.5)


def _search_limit(estimate: int) -> int:
    if estimate < 0:
        raise ValueError("key length cannot be estimated")
    return estimate + int(math.sqrt(estimate) + 4)


def analyze_vigenere(text: str) -> tuple[str, list[tuple[int, float]]]:
    """Return the recovered key and the average index of coincidence per key length."""
    limit = _search_limit(friedman_key_length(text))
    averages = []
    best, best_k = 0.0, 0
    for k in range(2, limit):
        average = sum(
            index_of_coincidence(frequency(substring(text, k, s))) for s in range(k)
        ) / k
        averages.append((k, average))
        if average > best:
            best, best_k = average, k
    if best_k == 0:
        raise ValueError("no key length found")
    key = "".join(
        chr(_best_shift(substring(text, best_k, g))[0] + ord("A")) for g in range(best_k)
    )
    return key, averages


def analyze_affine(text: str) -> tuple[int, int]:
    """Return the affine key ``(a, b)`` whose decryption looks most like English."""
    english = english_frequency()
    best, best_a, best_b = 0.0, 0, 0
    for b in range(26):
        for a in range(26):
            if gcd(a, 26) != 1:
                continue
            score = mutual_index_of_coincidence(frequency(affine_decrypt(text, a, b)), english)
            if score > best:
                best, best_a, best_b = score, a, b
    return best_a, best_b


def _report_caesar(text: str) -> None:
    key, scores = analyze_caesar(text)
    for i, score in enumerate(scores):
        print(f"Mutual found for {i}: {score:g}")
    print(f"Index Found: {key}")
    print(f"Decrypted Text: {caesar_decrypt(text, key)}")


def _report_brute_force(text: str) -> None:
    for key, plaintext in brute_force_caesar(text):
        print(f"Decrypted with Key {key}: {plaintext}")


def _report_vigenere(text: str) -> None:
    estimate = friedman_key_length(text)
    print(f"Suspected Friedman Key Length: {estimate} Adjusted: {_search_limit(estimate)}")
    key, averages = analyze_vigenere(text)
    for k, average in averages:
        print(f"Key Length: {k} \tAverage IOFC: {average:g}")
    print(f"Best key length found: {len(key)}")
    print(f"Key found: {key}")
    print(f"Decrypted Text: {vigenere_decrypt(text, key)}")


def _report_affine(text: str) -> None:
    a, b = analyze_affine(text)
    print(f"Key: ({a},{b})")
    print(f"Decrypted Text: {affine_decrypt(text, a, b)}")


_REPORTS = {
    "caesar": _report_caesar,
    "bcaesar": _report_brute_force,
    "vigenere": _report_vigenere,
    "affine": _report_affine,
}


def main(argv: list[str] | None = None) -> int:
    """Run the cryptanalysis command; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: crypta <cipher> <filename>")
        return 1
    alg, path = args
    if alg not in ALGORITHMS:
        print("Enter a valid encryption method. (caesar, vigenere, affine)", file=sys.stderr)
        return 1
    try:
        text = read_text(path)
    except OSError:
        print("File not found")
        return 1
    try:
        _REPORTS[alg](text)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())