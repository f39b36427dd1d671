"""Binary indexed (Fenwick) tree over positions 1..2**log_size."""

from __future__ import annotations


class FenwickTree:
    """Prefix sums with point updates, both in O(log n)."""

    def __init__(self, log_size: int = 17) -> None:
        self.size = 1 << log_size
        self._tree = [0] * (self.size + 1)

    def add(self, x: int, v: int) -> None:
        """Add ``v`` to the value at position ``x`` (1-based)."""
        if not 1 <= x <= self.size:
            raise IndexError(f"position {x} outside 1..{self.size}")
        while x <= self.size:
            self._tree[x] += v
            x += x & -x

    def prefix_sum(self, x: int) -> int:
        """Return the sum of positions 1..x inclusive."""
        if not 0 <= x <= self.size:
            raise IndexError(f"position {x} outside 0..{self.size}")
        total = 0
        while x:
            total += self._tree[x]
            x -= x & -x
        return total

    def find(self, x: int) -> int:
        """Return the largest position whose prefix sum is at most ``x``.

        Assumes non-negative values. For the smallest position with prefix
        sum at least ``x``, use ``find(x - 1) + 1``.
        """
        idx, mask = 0, self.size
        while mask and idx < self.size:
            t = idx + mask
            if x >= self._tree[t]:
                idx = t
                x -= self._tree[t]
            mask >>= 1
        return idx