"""Knuth-Morris-Pratt substring search in O(n + m)."""

from __future__ import annotations


def build_pi(p: str) -> list[int]:
    """Return the failure table: ``pi[i] + 1`` is the longest proper border of ``p[:i+1]``."""
    pi = [0] * len(p)
    k = -2
    for i, ch in enumerate(p):
        while k >= -1 and p[k + 1] != ch:
            k = -2 if k == -1 else pi[k]
        k += 1
        pi[i] = k
    return pi


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return the start index of every occurrence of ``pattern`` in ``text``.

    Overlapping occurrences are included.
    """
    if not pattern:
        raise ValueError("pattern must be non-empty")
    pi = build_pi(pattern)
    last = len(pattern) - 1
    matches = []
    k = -1
    for i, ch in enumerate(text):
        while k >= -1 and pattern[k + 1] != ch:
            k = -2 if k == -1 else pi[k]
        k += 1
        if k == last:
            matches.append(i - k)
            k = pi[k]
    return matches