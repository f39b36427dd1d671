"""Modular arithmetic: gcd, inverses, linear congruences and the CRT.

Division and remainder follow truncation toward zero, so results for
negative operands match fixed-width integer arithmetic.
"""

from __future__ import annotations

from collections.abc import Sequence


def _tdiv(a: int, b: int) -> int:
    """Integer division truncated toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _tmod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _tdiv(a, b)


def mod(a: int, b: int) -> int:
    """Return ``a`` modulo ``b``, non-negative when ``b`` is positive."""
    return a % b


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, _tmod(a, b)
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple."""
    return _tdiv(a, gcd(a, b)) * b


def powermod(a: int, b: int, m: int) -> int:
    """Compute ``a**b mod m`` by repeated squaring."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    while b:
        if b & 1:
            result = mod(result * a, m)
        a = mod(a * a, m)
        b >>= 1
    return result


def extended_euclid(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``g = gcd(a, b) = a*x + b*y``."""
    x, y = 1, 0
    xx, yy = 0, 1
    while b:
        q = _tdiv(a, b)
        a, b = b, _tmod(a, b)
        x, xx = xx, x - q * xx
        y, yy = yy, y - q * yy
    return a, x, y


def modular_linear_equation_solver(a: int, b: int, n: int) -> list[int]:
    """Return every solution of ``a*x = b (mod n)``; empty if there is none."""
    g, x, _ = extended_euclid(a, n)
    if _tmod(b, g):
        return []
    x = mod(x * _tdiv(b, g), n)
    step = _tdiv(n, g)
    return [mod(x + i * step, n) for i in range(g)]


def mod_inverse(a: int, n: int) -> int:
    """Return ``b`` with ``a*b = 1 (mod n)``.

    Raises ValueError when ``a`` and ``n`` are not coprime.
    """
    g, x, _ = extended_euclid(a, n)
    if g > 1:
        raise ValueError(f"{a} has no inverse modulo {n}")
    return mod(x, n)


def chinese_remainder_theorem(m1: int, r1: int, m2: int, r2: int) -> tuple[int, int]:
    """Find ``z`` with ``z % m1 == r1`` and ``z % m2 == r2``.

    Returns ``(z, M)`` where ``M = lcm(m1, m2)``; raises ValueError if the
    congruences are inconsistent.
    """
    g, s, t = extended_euclid(m1, m2)
    if _tmod(r1, g) != _tmod(r2, g):
        raise ValueError("congruences have no common solution")
    z = _tdiv(mod(s * r2 * m1 + t * r1 * m2, m1 * m2), g)
    return z, _tdiv(m1 * m2, g)


def chinese_remainder(moduli: Sequence[int], remainders: Sequence[int]) -> tuple[int, int]:
    """Solve ``z % moduli[i] == remainders[i]`` for all ``i``.

    The moduli need not be pairwise coprime. Returns ``(z, M)`` with ``M`` the
    lcm of the moduli; raises ValueError when no solution exists.
    """
    if len(moduli) != len(remainders):
        raise ValueError("moduli and remainders differ in length")
    if not moduli:
        raise ValueError("at least one congruence is required")
    z, m = remainders[0], moduli[0]
    for mi, ri in zip(moduli[1:], remainders[1:]):
        z, m = chinese_remainder_theorem(m, z, mi, ri)
    return z, m


def linear_diophantine(a: int, b: int, c: int) -> tuple[int, int]:
    """Return ``(x, y)`` with ``a*x + b*y == c``; raise ValueError if none exist."""
    if not a and not b:
        if c:
            raise ValueError("no solution")
        return 0, 0
    if not a:
        if _tmod(c, b):
            raise ValueError("no solution")
        return 0, _tdiv(c, b)
    if not b:
        if _tmod(c, a):
            raise ValueError("no solution")
        return _tdiv(c, a), 0
    g = gcd(a, b)
    if _tmod(c, g):
        raise ValueError("no solution")
    x = _tdiv(c, g) * mod_inverse(_tdiv(a, g), _tdiv(b, g))
    y = _tdiv(c - a * x, b)
    return x, y