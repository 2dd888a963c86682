from math import factorial

import pytest

from cpsolve.construct import distinct_permutations
from cpsolve.number_theory import (
    MOD,
    count_distinct_arrangements,
    count_prime_multiples,
    divisor_count,
    max_common_divisor,
    sum_of_divisor_sums,
)


@pytest.mark.parametrize("p", [2, 3, 7, 13, 999983])
def test_divisor_count_of_prime_powers(p):
    assert divisor_count(p) == 2
    for k in range(1, 4):
        assert divisor_count(p**k) == k + 1


def test_divisor_count_one():
    assert divisor_count(1) == 1


@pytest.mark.parametrize("a, b", [(4, 9), (8, 15), (7, 10), (16, 27)])
def test_divisor_count_is_multiplicative(a, b):
    assert divisor_count(a * b) == divisor_count(a) * divisor_count(b)


def test_divisor_count_rejects_zero():
    with pytest.raises(ValueError):
        divisor_count(0)


def test_max_common_divisor_example():
    assert max_common_divisor([2, 3, 5, 8, 6]) == 3


@pytest.mark.parametrize("g, a, b", [(7, 2, 3), (12, 5, 7), (1, 4, 9)])
def test_max_common_divisor_of_pair(g, a, b):
    assert max_common_divisor([g * a, g * b]) == g


def test_max_common_divisor_repeated_value():
    assert max_common_divisor([1, 50, 50]) == 50


def test_max_common_divisor_needs_two_values():
    with pytest.raises(ValueError):
        max_common_divisor([5])


def test_sum_of_divisor_sums_example():
    assert sum_of_divisor_sums(5) == 21


@pytest.mark.parametrize("p", [2, 3, 11, 101])
def test_sum_of_divisor_sums_step_at_prime(p):
    assert sum_of_divisor_sums(p) - sum_of_divisor_sums(p - 1) == p + 1


def test_sum_of_divisor_sums_is_reduced():
    assert 0 <= sum_of_divisor_sums(10**12) < MOD


@pytest.mark.parametrize("n, p", [(20, 2), (100, 7), (10**18, 3)])
def test_count_prime_multiples_single_prime(n, p):
    assert count_prime_multiples(n, [p]) == n // p


def test_count_prime_multiples_ignores_large_primes():
    assert count_prime_multiples(20, [2, 23]) == count_prime_multiples(20, [2]) == 10


@pytest.mark.parametrize("n, primes", [(20, [2, 5]), (100, [2, 3, 5]), (60, [7, 11, 13])])
def test_count_prime_multiples_matches_enumeration(n, primes):
    expected = len([x for x in range(1, n + 1) if any(x % p == 0 for p in primes)])
    assert count_prime_multiples(n, primes) == expected


def test_count_distinct_arrangements_example():
    assert count_distinct_arrangements("aabac") == 20


@pytest.mark.parametrize("s", ["abc", "aab", "abba", "zzzz", "abcabc"])
def test_count_distinct_arrangements_matches_listing(s):
    assert count_distinct_arrangements(s) == len(distinct_permutations(s))


def test_count_distinct_arrangements_all_distinct():
    letters = "abcdefghijklmnopqrstuvwxyz"
    assert count_distinct_arrangements(letters) == factorial(26) % MOD


def test_count_distinct_arrangements_rejects_uppercase():
    with pytest.raises(ValueError):
        count_distinct_arrangements("Abc")