"""Conversions between Gregorian dates and Julian day numbers."""

from __future__ import annotations

DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def _tdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def date_to_int(m: int, d: int, y: int) -> int:
    """Return the Julian day number of month ``m``, day ``d``, year ``y``."""
    c = _tdiv(m - 14, 12)
    return (
        _tdiv(1461 * (y + 4800 + c), 4)
        + _tdiv(367 * (m - 2 - c * 12), 12)
        - _tdiv(3 * _tdiv(y + 4900 + c, 100), 4)
        + d
        - 32075
    )


def int_to_date(jd: int) -> tuple[int, int, int]:
    """Return ``(month, day, year)`` for a Julian day number."""
    x = jd + 68569
    n = _tdiv(4 * x, 146097)
    x -= _tdiv(146097 * n + 3, 4)
    i = _tdiv(4000 * (x + 1), 1461001)
    x -= _tdiv(1461 * i, 4) - 31
    j = _tdiv(80 * x, 2447)
    d = x - _tdiv(2447 * j, 80)
    x = _tdiv(j, 11)
    m = j + 2 - 12 * x
    y = 100 * (n - 49) + i + x
    return m, d, y


def int_to_day(jd: int) -> str:
    """Return the three-letter weekday name for a Julian day number."""
    return DAY_NAMES[jd % 7]