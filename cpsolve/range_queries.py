"""Range sum queries and maximum subarray sums under point updates."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate
from typing import NamedTuple


class PrefixSums:
    """Answers sum queries over 1-based inclusive ranges of a fixed sequence."""

    def __init__(self, values: Iterable[int]) -> None:
        self._prefix = [0, *accumulate(values)]

    def __len__(self) -> int:
        return len(self._prefix) - 1

    def range_sum(self, a: int, b: int) -> int:
        """Return the sum of values at positions ``a..b``."""
        if not 1 <= a <= b <= len(self):
            raise IndexError("range must satisfy 1 <= a <= b <= n")
        return self._prefix[b] - self._prefix[a - 1]


class _Segment(NamedTuple):
    total: int
    prefix: int
    suffix: int
    best: int

    @classmethod
    def leaf(cls, value: int) -> _Segment:
        clipped = max(0, value)
        return cls(value, clipped, clipped, clipped)

    def __add__(self, right: _Segment) -> _Segment:  # type: ignore[override]
        return _Segment(
            self.total + right.total,
            max(0, self.prefix, self.total + right.prefix),
            max(0, right.suffix, right.total + self.suffix),
            max(0, self.best, right.best, self.suffix + right.prefix),
        )


_EMPTY = _Segment(0, 0, 0, 0)


class MaxSubarrayTree:
    """Segment tree tracking the maximum subarray sum (empty allowed) under updates."""

    def __init__(self, values: Sequence[int]) -> None:
        self._n = len(values)
        size = 1
        while size < self._n:
            size *= 2
        self._size = size
        self._nodes = [_EMPTY] * (2 * size)
        for index, value in enumerate(values):
            self._nodes[size + index] = _Segment.leaf(value)
        for node in reversed(range(1, size)):
            self._nodes[node] = self._nodes[2 * node] + self._nodes[2 * node + 1]

    def update(self, position: int, value: int) -> int:
        """Set the value at 1-based ``position`` and return the new maximum subarray sum."""
        if not 1 <= position <= self._n:
            raise IndexError("position must lie in 1..n")
        node = self._size + position - 1
        self._nodes[node] = _Segment.leaf(value)
        node //= 2
        while node:
            self._nodes[node] = self._nodes[2 * node] + self._nodes[2 * node + 1]
            node //= 2
        return self.max_subarray_sum()

    def max_subarray_sum(self) -> int:
        """Return the largest subarray sum, counting the empty subarray as 0."""
        return self._nodes[1].best


def subarray_sum_queries(
    values: Sequence[int], updates: Iterable[tuple[int, int]]
) -> list[int]:
    """Apply each (position, value) update and collect the maximum subarray sum after it."""
    tree = MaxSubarrayTree(values)
    return [tree.update(position, value) for position, value in updates]