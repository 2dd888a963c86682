"""Introductory counting, sequence and construction puzzles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby

MOD = 1_000_000_007


class NoSolutionError(ValueError):
    """Raised when a puzzle instance has no valid answer."""


def weird_algorithm(n: int) -> list[int]:
    """Return the Collatz sequence starting at ``n`` and ending at 1."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    sequence = [n]
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        sequence.append(n)
    return sequence


def missing_number(n: int, numbers: Iterable[int]) -> int:
    """Return the one number of 1..n that is absent from ``numbers``."""
    return n * (n + 1) // 2 - sum(numbers)


def longest_repetition(s: str) -> int:
    """Return the length of the longest run of one repeated character."""
    if not s:
        raise ValueError("string must not be empty")
    return max(sum(1 for _ in run) for _, run in groupby(s))


def increasing_array_moves(values: Iterable[int]) -> int:
    """Return the total increments needed to make ``values`` non-decreasing."""
    moves = 0
    current = None
    for value in values:
        if current is not None and current > value:
            moves += current - value
        else:
            current = value
    return moves


def beautiful_permutation(n: int) -> list[int]:
    """Return a permutation of 1..n with no adjacent values differing by one."""
    if n == 1:
        return [1]
    if n <= 3:
        raise NoSolutionError(f"no beautiful permutation of {n} elements")
    return list(range(2, n + 1, 2)) + list(range(1, n + 1, 2))


def spiral_value(row: int, col: int) -> int:
    """Return the number at (row, col) of the infinite number spiral."""
    if row > col:
        if row % 2:
            return (row - 1) * (row - 1) + col
        return row * row - col + 1
    if col % 2:
        return col * col - row + 1
    return (col - 1) * (col - 1) + row


def two_knights(n: int) -> list[int]:
    """Return, for each k in 1..n, the ways to place two non-attacking knights on k x k."""
    return [(1 + (k - 1) * (k - 2) // 2) * (k - 1) * (k + 4) for k in range(1, n + 1)]


def two_sets(n: int) -> tuple[list[int], list[int]]:
    """Split 1..n into two sets of equal sum."""
    if n % 4 in (1, 2):
        raise NoSolutionError(f"1..{n} cannot be split into two equal sums")
    evens = range(2, n // 2 + 1, 2)
    odds = range(1, n // 2 + 1, 2)
    if n % 4 == 3:
        first = [x for i in evens for x in (i, n - i)] + [n]
        second = [x for i in odds for x in (i, n - i)]
    else:
        first = [x for i in evens for x in (i, n - i + 1)]
        second = [x for i in odds for x in (i, n - i + 1)]
    return first, second


def bit_strings(n: int) -> int:
    """Return the number of bit strings of length ``n`` modulo 1e9+7."""
    return pow(2, n, MOD)


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of n!."""
    zeros = 0
    while n > 0:
        n //= 5
        zeros += n
    return zeros


def can_empty_piles(a: int, b: int) -> bool:
    """Tell whether two coin piles can be emptied by removing 1 and 2 coins at a time."""
    return (a + b) % 3 == 0 and a <= 2 * b and b <= 2 * a


def digit_at(k: int) -> int:
    """Return the k-th digit (1-based) of the string 123456789101112..."""
    if k < 1:
        raise ValueError("k must be a positive integer")
    digits, block = 1, 9
    while k > digits * block:
        k -= digits * block
        block *= 10
        digits += 1
    number = 10 ** (digits - 1) + (k - 1) // digits
    return int(str(number)[(k - 1) % digits])


def apple_division(weights: Sequence[int]) -> int:
    """Return the minimum weight difference between two groups of apples."""
    total = sum(weights)
    sums = {0}
    for weight in weights:
        sums |= {s + weight for s in sums}
    return min(abs(total - 2 * s) for s in sums)


def hanoi_moves(n: int) -> list[tuple[int, int]]:
    """Return the moves that carry ``n`` discs from peg 1 to peg 3."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    moves: list[tuple[int, int]] = []

    def move(source: int, target: int, depth: int) -> None:
        if depth == 1:
            moves.append((source, target))
            return
        spare = 6 - source - target
        move(source, spare, depth - 1)
        moves.append((source, target))
        move(spare, target, depth - 1)

    move(1, 3, n)
    return moves


def gray_code(n: int) -> list[str]:
    """Return the reflected Gray code of ``n`` bits as bit strings."""
    codes = []
    for i in range(1 << n):
        code = i ^ (i >> 1)
        codes.append("".join("1" if code >> bit & 1 else "0" for bit in reversed(range(n))))
    return codes