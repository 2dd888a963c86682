"""Modular exponentiation, Fibonacci numbers and binomial coefficients."""

from __future__ import annotations

MOD = 1_000_000_007


def power_mod(a: int, b: int) -> int:
    """Return a**b modulo 1e9+7."""
    if b < 0:
        raise ValueError("exponent must not be negative")
    return pow(a % MOD, b, MOD)


def tower_power(a: int, b: int, c: int) -> int:
    """Return a**(b**c) modulo 1e9+7, reducing the exponent by Fermat's little theorem."""
    if b < 0 or c < 0:
        raise ValueError("exponents must not be negative")
    return pow(a % MOD, pow(b, c, MOD - 1), MOD)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number modulo 1e9+7, with F(0) = 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for bit in bin(n)[2:]:
        doubled = current * (2 * following - current) % MOD
        doubled_next = (current * current + following * following) % MOD
        if bit == "1":
            current, following = doubled_next, (doubled + doubled_next) % MOD
        else:
            current, following = doubled, doubled_next
    return current


class Binomials:
    """Binomial coefficients modulo 1e9+7 from precomputed factorials up to ``limit``."""

    def __init__(self, limit: int) -> None:
        if limit < 0:
            raise ValueError("limit must not be negative")
        self.limit = limit
        self._fact = [1] * (limit + 1)
        for i in range(1, limit + 1):
            self._fact[i] = self._fact[i - 1] * i % MOD
        self._inv_fact = [1] * (limit + 1)
        self._inv_fact[limit] = pow(self._fact[limit], MOD - 2, MOD)
        for i in range(limit, 0, -1):
            self._inv_fact[i - 1] = self._inv_fact[i] * i % MOD

    def choose(self, a: int, b: int) -> int:
        """Return C(a, b) modulo 1e9+7."""
        if not 0 <= b <= a <= self.limit:
            raise ValueError(f"need 0 <= b <= a <= {self.limit}")
        return self._fact[a] * self._inv_fact[b] % MOD * self._inv_fact[a - b] % MOD


def distributing_apples(children: int, apples: int) -> int:
    """Count the ways to hand ``apples`` identical apples to ``children`` children."""
    if children < 1 or apples < 0:
        raise ValueError("need at least one child and a non-negative number of apples")
    total = apples + children - 1
    return Binomials(total).choose(total, children - 1)