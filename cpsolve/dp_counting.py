"""Dynamic programming problems that count arrangements modulo 1e9+7."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator, Sequence

MOD = 1_000_000_007


def dice_combinations(n: int) -> int:
    """Count the ordered ways to reach sum ``n`` by throwing a six-sided die."""
    if n < 0:
        raise ValueError("n must not be negative")
    return coin_combinations_ordered(range(1, 7), n)


def coin_combinations_ordered(coins: Iterable[int], target: int) -> int:
    """Count ordered sequences of coins that sum to ``target``."""
    values = [coin for coin in coins]
    if any(coin <= 0 for coin in values):
        raise ValueError("coins must be positive")
    ways = [1] + [0] * target
    for amount in range(1, target + 1):
        ways[amount] = sum(ways[amount - coin] for coin in values if coin <= amount) % MOD
    return ways[target]


def coin_combinations_unordered(coins: Iterable[int], target: int) -> int:
    """Count multisets of coins that sum to ``target``."""
    ways = [1] + [0] * target
    for coin in coins:
        if coin <= 0:
            raise ValueError("coins must be positive")
        for amount in range(coin, target + 1):
            ways[amount] = (ways[amount] + ways[amount - coin]) % MOD
    return ways[target]


def grid_paths(grid: Sequence[str]) -> int:
    """Count right/down paths from the top-left to the bottom-right cell avoiding '*' traps."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("all rows must have the same length")
    if grid[0][0] == "*" or grid[-1][-1] == "*":
        return 0
    ways = [0] * width
    ways[0] = 1
    for row in grid:
        for col, cell in enumerate(row):
            if cell == "*":
                ways[col] = 0
            elif col:
                ways[col] = (ways[col] + ways[col - 1]) % MOD
    return ways[-1]


def array_descriptions(values: Sequence[int], m: int) -> int:
    """Count arrays in 1..m whose neighbours differ by at most one, filling the zeros in ``values``."""
    if not values:
        raise ValueError("values must not be empty")
    if any(not 0 <= value <= m for value in values):
        raise ValueError("values must lie in 0..m")

    def allowed(value: int) -> Iterable[int]:
        return range(1, m + 1) if value == 0 else (value,)

    ways = [0] * (m + 2)
    for v in allowed(values[0]):
        ways[v] = 1
    for value in values[1:]:
        following = [0] * (m + 2)
        for v in allowed(value):
            following[v] = (ways[v - 1] + ways[v] + ways[v + 1]) % MOD
        ways = following
    return sum(ways) % MOD


def _column_transitions(rows: int, mask: int) -> Iterator[int]:
    def fill(row: int, current: int, following: int) -> Iterator[int]:
        if row == rows:
            yield following
            return
        if current >> row & 1:
            yield from fill(row + 1, current, following)
            return
        if row + 1 < rows and not current >> (row + 1) & 1:
            yield from fill(row + 2, current, following)
        yield from fill(row + 1, current, following | 1 << row)

    return fill(0, mask, 0)


def count_tilings(n: int, m: int) -> int:
    """Count the ways to tile an n x m grid with 1x2 and 2x1 dominoes."""
    if n < 0 or m < 0:
        raise ValueError("dimensions must not be negative")
    if n * m % 2:
        return 0
    rows, columns = min(n, m), max(n, m)
    transitions = {mask: list(_column_transitions(rows, mask)) for mask in range(1 << rows)}
    ways = {0: 1}
    for _ in range(columns):
        following: dict[int, int] = {}
        for mask, count in ways.items():
            for nxt in transitions[mask]:
                following[nxt] = (following.get(nxt, 0) + count) % MOD
        ways = following
    return ways.get(0, 0)


def count_increasing_subsequences(values: Sequence[int]) -> int:
    """Count non-empty strictly increasing subsequences modulo 1e9+7."""
    ordered = sorted(values)
    size = len(ordered)
    tree = [0] * (size + 1)

    def add(index: int, delta: int) -> None:
        while index <= size:
            tree[index] = (tree[index] + delta) % MOD
            index += index & -index

    def prefix(index: int) -> int:
        total = 0
        while index > 0:
            total = (total + tree[index]) % MOD
            index -= index & -index
        return total

    for value in values:
        rank = bisect_left(ordered, value) + 1
        add(rank, (prefix(rank - 1) + 1) % MOD)
    return prefix(size)


def money_sums(coins: Iterable[int]) -> list[int]:
    """Return every positive sum that some subset of ``coins`` makes, in increasing order."""
    reachable = 1
    for coin in coins:
        if coin <= 0:
            raise ValueError("coins must be positive")
        reachable |= reachable << coin
    return [total for total in range(1, reachable.bit_length()) if reachable >> total & 1]