from math import comb

import pytest

from cpsolve.modular import (
    MOD,
    Binomials,
    distributing_apples,
    fibonacci,
    power_mod,
    tower_power,
)


@pytest.mark.parametrize("a", [2, 3, 12345, 999_999_999])
def test_power_mod_fermat(a):
    assert power_mod(a, MOD - 1) == 1


@pytest.mark.parametrize("a,b", [(3, 4), (2, 31), (7, 0), (10, 18)])
def test_power_mod_matches_exact_power(a, b):
    assert power_mod(a, b) == a**b % MOD


def test_power_mod_exponents_add():
    a, b, c = 123456789, 987654321, 555555555
    assert power_mod(a, b + c) == power_mod(a, b) * power_mod(a, c) % MOD


def test_power_mod_negative_exponent_raises():
    with pytest.raises(ValueError):
        power_mod(2, -1)


@pytest.mark.parametrize("a,b,c", [(3, 7, 1), (15, 2, 2), (16, 1, 0), (2, 5, 3)])
def test_tower_power_matches_direct_exponent(a, b, c):
    assert tower_power(a, b, c) == power_mod(a, b**c)


def test_fibonacci_start():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@pytest.mark.parametrize("n", [2, 10, 90, 1000, 10**18])
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == (fibonacci(n - 1) + fibonacci(n - 2)) % MOD


def test_fibonacci_doubling_identity():
    k = 123456
    assert fibonacci(2 * k) == fibonacci(k) * (2 * fibonacci(k + 1) - fibonacci(k)) % MOD


def test_fibonacci_negative_raises():
    with pytest.raises(ValueError):
        fibonacci(-1)


def test_binomials_match_exact_values():
    table = Binomials(200)
    for a, b in [(5, 3), (10, 0), (100, 50), (200, 199)]:
        assert table.choose(a, b) == comb(a, b) % MOD


def test_binomials_symmetry_and_pascal():
    table = Binomials(60)
    for a in range(1, 61, 7):
        for b in range(1, a):
            assert table.choose(a, b) == table.choose(a, a - b)
            assert table.choose(a, b) == (table.choose(a - 1, b - 1) + table.choose(a - 1, b)) % MOD


@pytest.mark.parametrize("a,b", [(3, 4), (5, -1), (300, 2)])
def test_binomials_invalid_arguments_raise(a, b):
    with pytest.raises(ValueError):
        Binomials(100).choose(a, b)


@pytest.mark.parametrize("children,apples", [(3, 2), (1, 9), (4, 10), (50, 1000)])
def test_distributing_apples_stars_and_bars(children, apples):
    assert distributing_apples(children, apples) == comb(apples + children - 1, children - 1) % MOD


def test_distributing_apples_needs_children():
    with pytest.raises(ValueError):
        distributing_apples(0, 5)