import itertools

import pytest

from algonotebook.csp import ForwardCheckingSolver


def _queens_ok(assignment, var, other):
    a, b = assignment[var], assignment[other]
    return a != b and abs(a - b) != abs(var - other)


def _different(assignment, var, other):
    return assignment[var] != assignment[other]


def _queens(n):
    return ForwardCheckingSolver([range(n)] * n, _queens_ok)


@pytest.mark.parametrize("n", [1, 4, 5, 6, 8])
def test_queens_solution_is_valid(n):
    solution = _queens(n).solve()
    assert sorted(solution) == list(range(n))
    for i, j in itertools.combinations(range(n), 2):
        assert _queens_ok(solution, i, j)


@pytest.mark.parametrize("n", [2, 3])
def test_queens_without_solution(n):
    assert _queens(n).solve() is None


def test_triangle_two_colours_fails():
    solver = ForwardCheckingSolver([["r", "g"]] * 3, _different)
    assert solver.solve() is None


def test_triangle_three_colours():
    solution = ForwardCheckingSolver([["r", "g", "b"]] * 3, _different).solve()
    assert set(solution.values()) == {"r", "g", "b"}


def test_no_variables():
    assert ForwardCheckingSolver([], _different).solve() == {}


def test_empty_domain_fails():
    assert ForwardCheckingSolver([[1, 2], []], _different).solve() is None


def test_first_value_is_preferred():
    solver = ForwardCheckingSolver([["a", "b"]], _different)
    assert solver.solve() == {0: "a"}


def test_ordering_constraint_first_solution():
    def less(assignment, var, other):
        lo, hi = sorted((var, other))
        return assignment[lo] < assignment[hi]

    solver = ForwardCheckingSolver([[1, 2, 3], [1, 2, 3]], less)
    assert solver.solve() == {0: 1, 1: 2}


def test_backtracking_needed():
    # x0 and x1 differ, x1 and x2 differ, and x0 = 1 is ruled out by x2.
    def constraint(assignment, var, other):
        pair = {var, other}
        if pair == {0, 2}:
            return assignment[0] != 1 or assignment[2] == 9
        return assignment[var] != assignment[other]

    solver = ForwardCheckingSolver([[1, 2], [1, 2], [1, 2]], constraint)
    solution = solver.solve()
    assert solution == {0: 2, 1: 1, 2: 2}
    for i, j in itertools.combinations(range(3), 2):
        assert constraint(solution, i, j)


def test_solve_is_repeatable():
    solver = _queens(6)
    first = solver.solve()
    second = solver.solve()
    assert sorted(first) == list(range(6))
    assert sorted(first.values()) == list(range(6))
    assert first == second