"""Fast Fourier transforms and convolution."""

from __future__ import annotations

import cmath
import math
from collections.abc import Sequence


def _reverse_bits(k: int, bits: int) -> int:
    result = 0
    for _ in range(bits):
        result = (result << 1) | (k & 1)
        k >>= 1
    return result


def dft(a: Sequence[complex], inverse: bool = False) -> list[complex]:
    """Iterative radix-2 DFT with ``exp(+2 pi i jk / n)`` kernel.

    The input is zero-padded to the next power of two. The inverse transform
    divides by the padded length.
    """
    n, levels = 1, 0
    while n < len(a):
        n <<= 1
        levels += 1
    padded = [complex(v) for v in a] + [0j] * (n - len(a))
    values = [0j] * n
    for k, v in enumerate(padded):
        values[_reverse_bits(k, levels)] = v

    for s in range(1, levels + 1):
        m = 1 << s
        half = m // 2
        wm = cmath.exp(complex(0, 2.0 * math.pi / m))
        if inverse:
            wm = 1 / wm
        for k in range(0, n, m):
            w = 1 + 0j
            for j in range(k, k + half):
                t = w * values[j + half]
                u = values[j]
                values[j] = u + t
                values[j + half] = u - t
                w *= wm

    if inverse:
        values = [v / n for v in values]
    return values


def convolution(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return ``c`` with ``c[k] = sum(a[i] * b[k - i])``, of length len(a)+len(b)-1."""
    if not a or not b:
        raise ValueError("both sequences must be non-empty")
    levels = 1
    while (1 << levels) < len(a):
        levels += 1
    while (1 << levels) < len(b):
        levels += 1
    n = 1 << (levels + 1)

    fa = dft(list(a) + [0] * (n - len(a)))
    fb = dft(list(b) + [0] * (n - len(b)))
    product = dft([x * y for x, y in zip(fa, fb)], inverse=True)
    return [v.real for v in product[: len(a) + len(b) - 1]]


def _expi(theta: float) -> complex:
    return complex(math.cos(theta), math.sin(theta))


def fft(values: Sequence[complex], direction: int = 1) -> list[complex]:
    """Recursive FFT: ``out[k] = sum(values[j] * exp(direction * 2 pi i jk / n))``.

    The length must be a power of two. No scaling is applied.
    """
    size = len(values)
    if size == 0:
        return []
    if size & (size - 1):
        raise ValueError("length must be a power of two")
    if size == 1:
        return [complex(values[0])]
    even = fft(values[0::2], direction)
    odd = fft(values[1::2], direction)
    half = size // 2
    angle = direction * 2 * math.pi / size
    low = [e + _expi(angle * i) * o for i, (e, o) in enumerate(zip(even, odd))]
    high = [e + _expi(angle * (i + half)) * o for i, (e, o) in enumerate(zip(even, odd))]
    return low + high


def cyclic_convolution(f: Sequence[complex], g: Sequence[complex]) -> list[complex]:
    """Return ``h[n] = sum(f[k] * g[(n - k) mod N])`` for equal power-of-two lengths."""
    if len(f) != len(g):
        raise ValueError("sequences must have equal length")
    n = len(f)
    spectrum = [x * y for x, y in zip(fft(f, 1), fft(g, 1))]
    return [v / n for v in fft(spectrum, -1)]