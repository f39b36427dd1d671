import random

import pytest

from algonotebook.primes import (
    is_prime_fast,
    is_prime_slow,
    modular_exponentiation,
    modular_multiplication,
    witness,
)

PRIMES_BELOW_100 = [
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37,
    41, 43, 47, 53, 59, 61, 67, 71, 73, 79, 83, 89, 97,
]


def test_slow_matches_listed_primes():
    assert [x for x in range(100) if is_prime_slow(x)] == PRIMES_BELOW_100


@pytest.mark.parametrize("p", [9973, 99991, 999983, 999999937, 99999999977])
def test_slow_largest_primes_below_powers_of_ten(p):
    assert is_prime_slow(p)
    assert not is_prime_slow(p + 1) or p + 1 == 2


@pytest.mark.parametrize("x", [-5, 0, 1])
def test_slow_non_positive_and_one_not_prime(x):
    assert is_prime_slow(x) is False


def test_slow_rejects_square_of_prime():
    assert not is_prime_slow(997 * 997)


def test_fast_agrees_with_slow():
    rng = random.Random(0)
    for n in range(3, 1000):
        assert is_prime_fast(n, 20, rng) == is_prime_slow(n)


@pytest.mark.parametrize(
    "p", [9999999967, 999999999989, 99999999999973, 999999999999999989]
)
def test_fast_large_primes(p):
    assert is_prime_fast(p, 20, random.Random(1))


def test_fast_large_composite():
    assert not is_prime_fast(999999937 * 999999999989, 20, random.Random(2))


def test_fast_rejects_small_n():
    with pytest.raises(ValueError):
        is_prime_fast(2)


@pytest.mark.parametrize("a,b,m", [(123456789, 987654321, 1000000007), (5, 0, 7), (9, 9, 10)])
def test_modular_multiplication(a, b, m):
    assert modular_multiplication(a, b, m) == a * b % m


@pytest.mark.parametrize("a,n,m", [(2, 100, 1000000007), (7, 0, 13), (3, 17, 19)])
def test_modular_exponentiation_matches_pow(a, n, m):
    assert modular_exponentiation(a, n, m) == pow(a, n, m)


@pytest.mark.parametrize("p", [3, 5, 13, 97])
def test_no_witness_for_prime(p):
    assert not any(witness(a, p) for a in range(1, p - 1))


def test_witness_found_for_composite():
    assert any(witness(a, 91) for a in range(1, 90))