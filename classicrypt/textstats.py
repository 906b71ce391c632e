"""Letter-frequency statistics used to analyse classical ciphers."""

from __future__ import annotations

import math
import os
from string import ascii_letters, ascii_uppercase
from typing import Sequence

_ENGLISH = (
    0.082, 0.015, 0.028, 0.043, 0.127, 0.022, 0.020, 0.061, 0.070,
    0.002, 0.008, 0.040, 0.024, 0.067, 0.075, 0.019, 0.001, 0.060,
    0.063, 0.091, 0.028, 0.010, 0.023, 0.001, 0.020, 0.001,
)


def frequency(text: str) -> list[float]:
    """Relative frequency of each letter A-Z in ``text``, ignoring case.

    Text without letters yields NaN for every entry.
    """
    counts = dict.fromkeys(ascii_uppercase, 0)
    for c in text:
        if c in ascii_letters:
            counts[c.upper()] += 1
    total = sum(counts.values())
    return [count / total if total else math.nan for count in counts.values()]


def language_frequency(language: str) -> list[float]:
    """Reference letter frequencies for a language; empty if unknown."""
    if language in ("English", "english"):
        return list(_ENGLISH)
    return []


def english_frequency() -> list[float]:
    """Reference English letter frequencies."""
    return language_frequency("English")


def most_common(freq: Sequence[float]) -> tuple[int, int]:
    """Return the index of the largest entry and the previous running maximum's index."""
    if not freq:
        raise ValueError("frequency list is empty")
    best = freq[0]
    best_index = previous_index = 0
    for i, value in enumerate(freq):
        if value > best:
            previous_index, best, best_index = best_index, value, i
    return best_index, previous_index


def index_of_coincidence(freq: Sequence[float]) -> float:
    """Sum of squared frequencies."""
    return sum(f * f for f in freq)


def mutual_index_of_coincidence(freq_a: Sequence[float], freq_b: Sequence[float]) -> float:
    """Sum of products of matching entries of two frequency lists."""
    if len(freq_b) < len(freq_a):
        raise ValueError("second frequency list is shorter than the first")
    return sum(a * b for a, b in zip(freq_a, freq_b))


def shift(freq: Sequence[float], amount: int) -> list[float]:
    """Rotate a frequency list right by ``amount`` places."""
    items = list(freq)
    if not items:
        return items
    cut = len(items) - amount % len(items)
    return items[cut:] + items[:cut]


def substring(text: str, step: int, shift: int = 0) -> str:
    """Upper-cased letters whose letter index minus ``shift`` is a multiple of ``step``."""
    letters = (c for c in text if c in ascii_letters)
    return "".join(c.upper() for j, c in enumerate(letters) if (j - shift) % step == 0)


def read_text(path: str | os.PathLike[str]) -> str:
    """Read a file as one line, turning each line break into a space."""
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
        return handle.read().replace("\n", " ")