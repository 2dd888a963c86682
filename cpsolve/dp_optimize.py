"""Dynamic programming problems that minimise or maximise a quantity."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from itertools import accumulate

from sortedcontainers import SortedList

from cpsolve.basics import NoSolutionError


def min_coins(coins: Iterable[int], target: int) -> int:
    """Return the fewest coins (unlimited supply) summing to ``target``."""
    if target < 0:
        raise ValueError("target must not be negative")
    unreachable = target + 1
    best = [0] + [unreachable] * target
    for coin in coins:
        if coin <= 0:
            raise ValueError("coins must be positive")
        for amount in range(coin, target + 1):
            best[amount] = min(best[amount], best[amount - coin] + 1)
    if best[target] == unreachable:
        raise NoSolutionError("the target cannot be formed from the coins")
    return best[target]


def removing_digits(n: int) -> int:
    """Return the fewest steps to reach zero by subtracting one of the number's digits."""
    if n < 0:
        raise ValueError("n must not be negative")
    steps = [0] * (n + 1)
    for i in range(1, n + 1):
        steps[i] = min(steps[i - int(d)] for d in str(i) if d != "0") + 1
    return steps[n]


def book_shop(prices: Sequence[int], pages: Sequence[int], budget: int) -> int:
    """Return the most pages buyable with ``budget``, each book at most once."""
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    best = [0] * (budget + 1)
    for price, count in zip(prices, pages):
        for money in range(budget, price - 1, -1):
            best[money] = max(best[money], best[money - price] + count)
    return best[budget]


def edit_distance(s: str, t: str) -> int:
    """Return the Levenshtein distance between ``s`` and ``t``."""
    previous = list(range(len(t) + 1))
    for i, a in enumerate(s, 1):
        current = [i]
        for j, b in enumerate(t, 1):
            current.append(
                min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + (a != b))
            )
        previous = current
    return previous[-1]


def rectangle_cuts(a: int, b: int) -> int:
    """Return the fewest straight cuts that split an a x b rectangle into squares."""
    if a < 1 or b < 1:
        raise ValueError("sides must be positive")
    cuts = [[0] * (b + 1) for _ in range(a + 1)]
    for i in range(1, a + 1):
        for j in range(1, b + 1):
            if i == j:
                continue
            candidates = [cuts[k][j] + cuts[i - k][j] + 1 for k in range(1, i)]
            candidates += [cuts[i][k] + cuts[i][j - k] + 1 for k in range(1, j)]
            cuts[i][j] = min(candidates)
    return cuts[a][b]


def removal_game(values: Sequence[int]) -> int:
    """Return the first player's best score when both take from either end optimally."""
    n = len(values)
    if n == 0:
        raise ValueError("values must not be empty")
    prefix = [0, *accumulate(values)]
    best = list(values)
    for length in range(2, n + 1):
        best = [
            prefix[i + length] - prefix[i] - min(best[i + 1], best[i])
            for i in range(n - length + 1)
        ]
    return best[0]


def max_project_reward(projects: Iterable[tuple[int, int, int]]) -> int:
    """Return the largest total reward of projects (start, end, reward) that do not overlap."""
    ordered = sorted(projects, key=lambda project: project[1])
    ends = [end for _, end, _ in ordered]
    best = [0]
    for start, _, reward in ordered:
        earlier = bisect_right(ends, start - 1)
        best.append(max(best[-1], best[earlier] + reward))
    return best[-1]


def elevator_rides(weights: Sequence[int], limit: int) -> int:
    """Return the fewest elevator rides carrying every person with at most ``limit`` per ride."""
    n = len(weights)
    unreached = (n + 1, 0)
    best = [unreached] * (1 << n)
    best[0] = (1, 0)
    for mask, (rides, load) in enumerate(best):
        if (rides, load) == unreached:
            continue
        for i, weight in enumerate(weights):
            if mask >> i & 1:
                continue
            candidate = (rides, load + weight) if load + weight <= limit else (rides + 1, weight)
            target = mask | 1 << i
            if candidate < best[target]:
                best[target] = candidate
    return best[-1][0]


def longest_increasing_subsequence(values: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in values:
        index = bisect_left(tails, value)
        if index == len(tails):
            tails.append(value)
        else:
            tails[index] = value
    return len(tails)


def longest_common_subsequence(a: Sequence, b: Sequence) -> list:
    """Return one longest common subsequence of ``a`` and ``b``."""
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, x in enumerate(a, 1):
        for j, y in enumerate(b, 1):
            table[i][j] = table[i - 1][j - 1] + 1 if x == y else max(table[i - 1][j], table[i][j - 1])
    result = []
    i, j = len(a), len(b)
    while i and j:
        if a[i - 1] == b[j - 1]:
            result.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    result.reverse()
    return result


def mountain_ranges(heights: Sequence[int]) -> int:
    """Return the most mountains visited gliding from one mountain to strictly lower ones."""
    n = len(heights)
    visits = [0] * (n + 1)
    taller = SortedList()
    pending: list[int] = []
    last_height = None
    for height, index in sorted(((h, i) for i, h in enumerate(heights, 1)), reverse=True):
        if height != last_height:
            taller.update(pending)
            pending.clear()
        pos = taller.bisect_left(index)
        left = taller[pos - 1] if pos else 0
        right = taller[pos] if pos < len(taller) else 0
        visits[index] = max(visits[left], visits[right]) + 1
        pending.append(index)
        last_height = height
    return max(visits)