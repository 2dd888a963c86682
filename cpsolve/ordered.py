"""Problems solved with ordered sets, counting structures and order statistics."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from sortedcontainers import SortedList


class _Fenwick:
    """Binary indexed tree over positions 1..size."""

    def __init__(self, size: int) -> None:
        self._tree = [0] * (size + 1)

    def add(self, index: int, delta: int) -> None:
        while index < len(self._tree):
            self._tree[index] += delta
            index += index & -index

    def prefix(self, index: int) -> int:
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total


def sell_tickets(prices: Iterable[int], budgets: Iterable[int]) -> list[int]:
    """Sell each customer the dearest ticket within budget; -1 when none is left."""
    tickets = SortedList(prices)
    sold = []
    for budget in budgets:
        index = tickets.bisect_right(budget)
        sold.append(tickets.pop(index - 1) if index else -1)
    return sold


class NumberCollection:
    """A permutation of 1..n that tracks how many rounds collect its numbers in order."""

    def __init__(self, values: Iterable[int]) -> None:
        self.values = list(values)
        n = len(self.values)
        if sorted(self.values) != list(range(1, n + 1)):
            raise ValueError("values must be a permutation of 1..n")
        self._position = [0] * (n + 1)
        for index, value in enumerate(self.values):
            self._position[value] = index
        self.rounds = 1 + sum(
            self._position[v] < self._position[v - 1] for v in range(2, n + 1)
        )

    def _breaks(self, affected: set[int]) -> int:
        return sum(v > 1 and self._position[v] < self._position[v - 1] for v in affected)

    def swap(self, x: int, y: int) -> int:
        """Swap the values at 1-based positions ``x`` and ``y``; return the new round count."""
        n = len(self.values)
        if not (1 <= x <= n and 1 <= y <= n):
            raise IndexError("positions must lie in 1..n")
        x -= 1
        y -= 1
        first, second = self.values[x], self.values[y]
        affected = {
            v
            for base in (first, second)
            for v in (base - 1, base, base + 1)
            if 1 <= v <= n
        }
        self.rounds -= self._breaks(affected)
        self.values[x], self.values[y] = second, first
        self._position[second] = x
        self._position[first] = y
        self.rounds += self._breaks(affected)
        return self.rounds


def collecting_rounds(values: Iterable[int]) -> int:
    """Return how many left-to-right passes collect 1..n in increasing order."""
    return NumberCollection(values).rounds


def longest_unique_playlist(songs: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive songs with no repeats."""
    last_seen: dict[int, int] = {}
    start = 0
    best = 0
    for index, song in enumerate(songs):
        if last_seen.get(song, -1) >= start:
            start = last_seen[song] + 1
        last_seen[song] = index
        best = max(best, index - start + 1)
    return best


def count_towers(cubes: Iterable[int]) -> int:
    """Return the number of towers built by stacking each cube on the smallest larger top."""
    tops = SortedList()
    for cube in cubes:
        index = tops.bisect_right(cube)
        if index < len(tops):
            tops.pop(index)
        tops.add(cube)
    return len(tops)


def traffic_light_gaps(length: int, positions: Iterable[int]) -> list[int]:
    """Return the longest unlit stretch of the street after each light is added."""
    lights = SortedList([0, length])
    gaps = SortedList([length])
    longest = []
    for position in positions:
        if not 0 < position < length:
            raise ValueError("lights must lie strictly inside the street")
        index = lights.bisect_right(position)
        upper, lower = lights[index], lights[index - 1]
        gaps.remove(upper - lower)
        gaps.add(position - lower)
        gaps.add(upper - position)
        lights.add(position)
        longest.append(gaps[-1])
    return longest


def josephus_order(n: int) -> list[int]:
    """Return the removal order when every second child in a circle of n is removed."""
    circle = deque(range(1, n + 1))
    removed = []
    while circle:
        circle.rotate(-1)
        removed.append(circle.popleft())
    return removed


def josephus_order_k(n: int, k: int) -> list[int]:
    """Return the removal order when every (k+1)-th child in a circle of n is removed."""
    if k < 0:
        raise ValueError("k must not be negative")
    circle = SortedList(range(1, n + 1))
    removed = []
    step = k + 1
    while circle:
        size = len(circle)
        step %= size
        if step == 0:
            step = size
        removed.append(circle.pop(step - 1))
        step += k
    return removed


def _range_order(ranges: Sequence[tuple[int, int]]) -> list[int]:
    return sorted(range(len(ranges)), key=lambda i: (ranges[i][0], -ranges[i][1], i))


def nested_ranges_check(ranges: Sequence[tuple[int, int]]) -> tuple[list[bool], list[bool]]:
    """For each range tell whether it contains another and whether another contains it."""
    order = _range_order(ranges)
    contains = [False] * len(ranges)
    contained = [False] * len(ranges)
    max_end = float("-inf")
    for index in order:
        end = ranges[index][1]
        contained[index] = end <= max_end
        max_end = max(max_end, end)
    min_end = float("inf")
    for index in reversed(order):
        end = ranges[index][1]
        contains[index] = end >= min_end
        min_end = min(min_end, end)
    return contains, contained


def nested_ranges_count(ranges: Sequence[tuple[int, int]]) -> tuple[list[int], list[int]]:
    """For each range count the ranges it contains and the ranges that contain it."""
    ends = sorted({end for _, end in ranges})
    rank = {end: i + 1 for i, end in enumerate(ends)}
    order = _range_order(ranges)
    contains = [0] * len(ranges)
    contained = [0] * len(ranges)

    later = _Fenwick(len(ends))
    for index in reversed(order):
        r = rank[ranges[index][1]]
        contains[index] = later.prefix(r)
        later.add(r, 1)

    earlier = _Fenwick(len(ends))
    for index in order:
        r = rank[ranges[index][1]]
        contained[index] = earlier.prefix(len(ends)) - earlier.prefix(r - 1)
        earlier.add(r, 1)
    return contains, contained