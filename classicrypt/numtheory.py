"""Integer arithmetic: gcd, modular inverses, congruences, totients, powers."""

from __future__ import annotations


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _rem(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b != 0:
        a, b = b, _rem(a, b)
    return a


def mod_inverse(a: int, m: int) -> int:
    """Return the inverse of ``a`` modulo ``m`` (iterative extended Euclid).

    Values of ``a`` not above 1 yield ``1 mod m``. Raises ValueError when
    ``a`` shares a factor with ``m``.
    """
    if m == 0:
        raise ValueError("modulus must be non-zero")
    original_a, modulus = a, m
    x, y = 0, 1
    while a > 1:
        if m == 0:
            raise ValueError(f"{original_a} has no inverse modulo {modulus}")
        q = _trunc_div(a, m)
        a, m = m, _rem(a, m)
        x, y = y - q * x, x
    return _rem(y + modulus, modulus)


def extended_coefficients(a: int, m: int) -> tuple[int, int]:
    """Return ``(x, y)`` with ``a*x + m*y == 1`` (recursive extended Euclid).

    Raises ValueError when ``a`` and ``m`` are not coprime.
    """
    if m == 1:
        return 0, 1
    if m == 0:
        raise ValueError("values are not coprime")
    q, r = _trunc_div(a, m), _rem(a, m)
    x_prev, y_prev = extended_coefficients(m, r)
    return y_prev, x_prev - y_prev * q


def mod_inverse_recursive(a: int, m: int) -> int:
    """Return the inverse of ``a`` modulo ``m`` using the recursive method."""
    x, _ = extended_coefficients(a, m)
    return _rem(x + m, m)


def affine_key(p1: str, p2: str, c1: str, c2: str) -> tuple[int, int]:
    """Recover an affine key ``(a, b)`` from two lower-case plain/cipher pairs."""
    diff = _rem(ord(p1) - ord(p2) + 26, 26)
    dinv = mod_inverse(diff, 26)
    a = _rem(_rem(ord(c1) - ord(c2) + 26, 26) * dinv, 26)
    b = _rem((ord(c1) - ord("a")) - _rem(a * (ord(p1) - ord("a")), 26) + 26, 26)
    return a, b


def is_number(text: str) -> bool:
    """True if every character is an ASCII digit (an empty string counts)."""
    return all(c in "0123456789" for c in text)


def solve_congruences(a: int, m: int, b: int, n: int) -> int:
    """Solve ``x = a (mod m)``, ``x = b (mod n)`` for coprime ``m`` and ``n``."""
    n_inv = mod_inverse_recursive(n, m)
    m_inv = mod_inverse_recursive(m, n)
    return _rem(a * n * n_inv + b * m * m_inv, m * n)


def prime_factors(n: int) -> list[int]:
    """Distinct prime factors of ``n`` in ascending order."""
    factors = []
    i = 2
    while i * i <= n:
        if n % i:
            i += 1
        else:
            n //= i
            factors.append(i)
    if n > 1:
        factors.append(n)
    return sorted(set(factors))


def totient(n: int) -> int:
    """Euler's totient of ``n`` via its prime factors."""
    result = float(n)
    for p in prime_factors(n):
        result *= 1.0 - 1.0 / p
    return int(result + 0.5)


def modular_exponentiation(a: int, e: int, m: int) -> int:
    """Compute ``a**e mod m`` by square-and-multiply."""
    result = 1
    a = _rem(a, m)
    while e > 0:
        if e & 1:
            result = _rem(result * a, m)
        a = _rem(a * a, m)
        e >>= 1
    return result


def fast_modular_exponentiation(a: int, e: int, m: int) -> int:
    """Compute ``a**e mod m``, reducing the exponent by Euler's theorem when possible."""
    a = _rem(a, m)
    if gcd(a, m) == 1:
        e = _rem(e, totient(m))
    return modular_exponentiation(a, e, m)