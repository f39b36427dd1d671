import pytest

from algonotebook.linalg import SingularMatrixError, gauss_jordan, rref

A = [[1, 2, 3, 4], [1, 0, 1, 0], [5, 3, 2, 4], [6, 1, 4, 6]]
B = [[1, 2], [4, 3], [5, 6], [8, 7]]


def _matmul(x, y):
    return [[sum(p * q for p, q in zip(row, col)) for col in zip(*y)] for row in x]


def test_determinant_matches_example():
    det, _, _ = gauss_jordan(A, B)
    assert det == pytest.approx(60)


def test_inverse_matches_example():
    _, inv, _ = gauss_jordan(A, B)
    expected = [
        [-0.233333, 0.166667, 0.133333, 0.0666667],
        [0.166667, 0.166667, 0.333333, -0.333333],
        [0.233333, 0.833333, -0.133333, -0.0666667],
        [0.05, -0.75, -0.1, 0.2],
    ]
    for row, exp in zip(inv, expected):
        assert row == pytest.approx(exp, abs=1e-5)


def test_solution_matches_example():
    _, _, x = gauss_jordan(A, B)
    expected = [[1.63333, 1.3], [-0.166667, 0.5], [2.36667, 1.7], [-1.85, -1.35]]
    for row, exp in zip(x, expected):
        assert row == pytest.approx(exp, abs=1e-4)


def test_inverse_times_matrix_is_identity():
    _, inv, _ = gauss_jordan(A, B)
    product = _matmul(A, inv)
    for i, row in enumerate(product):
        assert row == pytest.approx([1.0 if j == i else 0.0 for j in range(4)], abs=1e-9)


def test_solution_satisfies_system():
    _, _, x = gauss_jordan(A, B)
    product = _matmul(A, x)
    for row, exp in zip(product, B):
        assert row == pytest.approx(exp, abs=1e-9)


def test_inputs_not_modified():
    a = [row[:] for row in A]
    b = [row[:] for row in B]
    gauss_jordan(a, b)
    assert a == A and b == B


def test_singular_matrix_raises():
    with pytest.raises(SingularMatrixError):
        gauss_jordan([[1, 2], [2, 4]], [[1], [2]])


def test_non_square_raises():
    with pytest.raises(ValueError):
        gauss_jordan([[1, 2, 3], [4, 5, 6]], [[1], [2]])


def test_rref_example():
    m = [
        [16, 2, 3, 13],
        [5, 11, 10, 8],
        [9, 7, 6, 12],
        [4, 14, 15, 1],
        [13, 21, 21, 13],
    ]
    rank, reduced = rref(m)
    assert rank == 3
    expected = [[1, 0, 0, 1], [0, 1, 0, 3], [0, 0, 1, -3], [0, 0, 0, 0], [0, 0, 0, 0]]
    for row, exp in zip(reduced, expected):
        assert row == pytest.approx(exp, abs=1e-9)


def test_rref_of_invertible_is_identity():
    rank, reduced = rref(A)
    assert rank == 4
    for i, row in enumerate(reduced):
        assert row == pytest.approx([1.0 if j == i else 0.0 for j in range(4)], abs=1e-9)


def test_rref_zero_matrix_has_rank_zero():
    rank, reduced = rref([[0, 0], [0, 0]])
    assert rank == 0
    assert reduced == [[0.0, 0.0], [0.0, 0.0]]