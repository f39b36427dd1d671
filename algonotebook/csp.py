"""Backtracking search with forward checking for constraint satisfaction."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Optional

Consistency = Callable[[Mapping[int, Hashable], int, int], bool]


class ForwardCheckingSolver:
    """Find one assignment satisfying pairwise constraints.

    Variables are ``0 .. len(domains)-1``; ``domains[i]`` lists the values of
    variable ``i`` in the order they are tried. ``consistent(assignment, var,
    other)`` is called with both ``var`` and ``other`` present in the
    read-only ``assignment`` and returns whether their values are compatible.
    Variables are labelled in increasing index order.
    """

    def __init__(self, domains: Sequence[Iterable[Hashable]], consistent: Consistency) -> None:
        self._initial = [list(dict.fromkeys(d)) for d in domains]
        self._consistent = consistent

    def solve(self) -> Optional[dict[int, Hashable]]:
        """Return a satisfying assignment, or None when there is none."""
        n = len(self._initial)
        self._current = [set(d) for d in self._initial]
        self._values: dict[int, Hashable] = {}
        self._view = MappingProxyType(self._values)
        self._assigned: list[int] = []
        self._unassigned = set(range(n))
        self._reductions: list[list[list[Hashable]]] = [[] for _ in range(n)]
        self._forward_mods: list[list[int]] = [[] for _ in range(n)]

        var: Optional[int] = self._next_var()
        ok = True
        while var is not None:
            var, ok = self._label(var) if ok else self._unlabel(var)
            if var is None and not ok:
                return None
        return {v: self._values[v] for v in range(n)}

    def _next_var(self) -> Optional[int]:
        return min(self._unassigned) if self._unassigned else None

    def _domain(self, var: int) -> list[Hashable]:
        current = self._current[var]
        return [v for v in self._initial[var] if v in current]

    def _update_current_domain(self, var: int) -> None:
        self._current[var] = set(self._initial[var])
        for removed in self._reductions[var]:
            self._current[var].difference_update(removed)

    def _undo_reductions(self, var: int) -> None:
        for other in self._forward_mods[var]:
            self._current[other].update(self._reductions[other].pop())
        self._forward_mods[var].clear()

    def _forward_check(self, var: int, other: int) -> bool:
        removed = []
        for value in self._domain(other):
            self._values[other] = value
            if not self._consistent(self._view, var, other):
                removed.append(value)
                self._current[other].discard(value)
            del self._values[other]
        if removed:
            self._reductions[other].append(removed)
            self._forward_mods[var].append(other)
        return bool(self._current[other])

    def _label(self, var: int) -> tuple[Optional[int], bool]:
        if var in self._unassigned:
            self._unassigned.discard(var)
            self._assigned.append(var)
        for value in self._domain(var):
            self._values[var] = value
            consistent = True
            for other in sorted(self._unassigned):
                if not self._forward_check(var, other):
                    self._current[var].discard(value)
                    consistent = False
                    self._undo_reductions(var)
                    del self._values[var]
                    break
            if consistent:
                return self._next_var(), True
        return var, False

    def _unlabel(self, var: int) -> tuple[Optional[int], bool]:
        self._assigned.pop()
        self._unassigned.add(var)
        self._values.pop(var, None)
        self._undo_reductions(var)
        self._update_current_domain(var)
        if not self._assigned:
            return None, False
        prev = self._assigned[-1]
        self._undo_reductions(prev)
        self._current[prev].discard(self._values.pop(prev))
        return prev, bool(self._current[prev])