"""Divisor counting, divisor sums, inclusion-exclusion and multiset arrangements."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import combinations
from math import isqrt
from string import ascii_lowercase

MOD = 1_000_000_007


def divisor_count(n: int) -> int:
    """Return the number of positive divisors of ``n``."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    root = isqrt(n)
    count = sum(2 for d in range(1, root + 1) if n % d == 0)
    return count - 1 if root * root == n else count


def max_common_divisor(values: Iterable[int]) -> int:
    """Return the largest greatest common divisor of any two of ``values``."""
    counts = Counter(values)
    if sum(counts.values()) < 2:
        raise ValueError("at least two values are required")
    if any(value < 1 for value in counts):
        raise ValueError("values must be positive")
    top = max(counts)
    for g in range(top, 0, -1):
        if sum(counts[multiple] for multiple in range(g, top + 1, g)) >= 2:
            return g
    return 1


def sum_of_divisor_sums(n: int) -> int:
    """Return the sum of sigma(i) for i in 1..n, modulo 1e9+7."""
    if n < 0:
        raise ValueError("n must not be negative")
    total = 0
    low = 1
    while low <= n:
        quotient = n // low
        high = n // quotient
        total += quotient * (low + high) * (high - low + 1) // 2
        low = high + 1
    return total % MOD


def count_prime_multiples(n: int, primes: Sequence[int]) -> int:
    """Count the numbers in 1..n divisible by at least one of ``primes``."""
    if any(p < 1 for p in primes):
        raise ValueError("primes must be positive")
    total = 0
    for size in range(1, len(primes) + 1):
        sign = 1 if size % 2 else -1
        for chosen in combinations(primes, size):
            product = 1
            for p in chosen:
                product *= p
                if product > n:
                    break
            else:
                total += sign * (n // product)
    return total


def count_distinct_arrangements(s: str) -> int:
    """Return the number of distinct strings made from the letters of ``s``, modulo 1e9+7."""
    counts = Counter(s)
    if any(ch not in ascii_lowercase for ch in counts):
        raise ValueError("string must consist of letters a-z")
    factorials = [1] * (len(s) + 1)
    for i in range(1, len(s) + 1):
        factorials[i] = factorials[i - 1] * i % MOD
    result = factorials[len(s)]
    for occurrences in counts.values():
        result = result * pow(factorials[occurrences], MOD - 2, MOD) % MOD
    return result