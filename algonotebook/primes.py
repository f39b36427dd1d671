"""Primality tests: exhaustive trial division and randomized Miller-Rabin."""

from __future__ import annotations

import math
import random


def is_prime_slow(x: int) -> bool:
    """Trial-division primality test in O(sqrt(x))."""
    if x <= 1:
        return False
    if x <= 3:
        return True
    if x % 2 == 0 or x % 3 == 0:
        return False
    limit = math.isqrt(x)
    return all(x % i and x % (i + 2) for i in range(5, limit + 1, 6))


def modular_multiplication(a: int, b: int, m: int) -> int:
    """Return ``a*b mod m``."""
    return a * b % m


def modular_exponentiation(a: int, n: int, m: int) -> int:
    """Return ``a**n mod m`` by repeated squaring."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    result, base = 1, a
    while n:
        if n & 1:
            result = modular_multiplication(result, base, m)
        n >>= 1
        base = modular_multiplication(base, base, m)
    return result


def witness(a: int, n: int) -> bool:
    """Return True if ``a`` proves the odd number ``n`` composite."""
    u, t = n - 1, 0
    while not u & 1:
        u >>= 1
        t += 1
    x0 = modular_exponentiation(a, u, n)
    for _ in range(t):
        x1 = modular_multiplication(x0, x0, n)
        if x1 == 1 and x0 != 1 and x0 != n - 1:
            return True
        x0 = x1
    return x0 != 1


def is_prime_fast(n: int, trials: int = 20, rng: random.Random | None = None) -> bool:
    """Miller-Rabin test; a composite passes with probability at most 2**-trials.

    ``n`` must be at least 3.
    """
    if n < 3:
        raise ValueError("n must be at least 3")
    rng = rng or random.Random()
    return not any(witness(rng.randrange(1, n - 1), n) for _ in range(trials))