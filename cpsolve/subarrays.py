"""Problems on sums, windows and subsequences of integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate

from sortedcontainers import SortedList

from cpsolve.basics import NoSolutionError

MOD = 1_000_000_007


def three_sum_indices(values: Sequence[int], target: int) -> tuple[int, int, int]:
    """Return 1-based positions of three values summing to ``target``."""
    ordered = sorted((value, index + 1) for index, value in enumerate(values))
    for i, (first, first_pos) in enumerate(ordered):
        wanted = target - first
        left, right = i + 1, len(ordered) - 1
        while left < right:
            current = ordered[left][0] + ordered[right][0]
            if current == wanted:
                return first_pos, ordered[left][1], ordered[right][1]
            if current < wanted:
                left += 1
            else:
                right -= 1
    raise NoSolutionError("no three values add up to the target")


def four_sum_indices(values: Sequence[int], target: int) -> tuple[int, int, int, int]:
    """Return 1-based positions of four values summing to ``target``."""
    pair_sums: dict[int, tuple[int, int]] = {}
    for i, value in enumerate(values):
        for j in range(i + 1, len(values)):
            found = pair_sums.get(target - value - values[j])
            if found is not None:
                return found[0], found[1], i + 1, j + 1
        for k in range(i):
            pair_sums[values[k] + value] = (k + 1, i + 1)
    raise NoSolutionError("no four values add up to the target")


def nearest_smaller_positions(values: Sequence[int]) -> list[int]:
    """For each value return the 1-based position of the nearest smaller value to its left, or 0."""
    stack: list[int] = []
    result = []
    for index, value in enumerate(values):
        while stack and values[stack[-1]] >= value:
            stack.pop()
        result.append(stack[-1] + 1 if stack else 0)
        stack.append(index)
    return result


def subarray_sum_count_positive(values: Sequence[int], target: int) -> int:
    """Count subarrays of positive values summing to ``target`` with a sliding window."""
    count = 0
    left = 0
    current = 0
    for right, value in enumerate(values):
        current += value
        while current > target and left <= right:
            current -= values[left]
            left += 1
        if current == target:
            count += 1
    return count


def subarray_sum_count(values: Iterable[int], target: int) -> int:
    """Count subarrays summing to ``target``; values may be negative."""
    seen = Counter({0: 1})
    count = 0
    for prefix in accumulate(values):
        count += seen[prefix - target]
        seen[prefix] += 1
    return count


def divisible_subarray_count(values: Sequence[int]) -> int:
    """Count subarrays whose sum is divisible by the number of values."""
    n = len(values)
    if n == 0:
        raise ValueError("values must not be empty")
    remainders = Counter({0: 1})
    count = 0
    for prefix in accumulate(values):
        remainder = prefix % n
        count += remainders[remainder]
        remainders[remainder] += 1
    return count


def distinct_limited_subarrays(values: Sequence[int], k: int) -> int:
    """Count subarrays holding at most ``k`` distinct values."""
    window: Counter = Counter()
    count = 0
    left = 0
    for right, value in enumerate(values):
        window[value] += 1
        while len(window) > k:
            dropped = values[left]
            window[dropped] -= 1
            if window[dropped] == 0:
                del window[dropped]
            left += 1
        count += right - left + 1
    return count


def _parts_needed(values: Iterable[int], limit: int) -> int:
    parts = 1
    current = 0
    for value in values:
        if current + value > limit:
            parts += 1
            current = value
        else:
            current += value
    return parts


def min_max_division(values: Sequence[int], k: int) -> int:
    """Return the smallest possible maximum subarray sum when splitting into ``k`` parts."""
    if k < 1:
        raise ValueError("k must be a positive integer")
    low = max(values, default=0)
    high = sum(values)
    answer = high
    while low <= high:
        mid = (low + high) // 2
        if _parts_needed(values, mid) <= k:
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def max_movies_with_members(movies: Iterable[tuple[int, int]], members: int) -> int:
    """Return the most movies a club of ``members`` people can watch in total."""
    busy_until = SortedList()
    watched = 0
    for start, end in sorted(movies, key=lambda movie: movie[1]):
        index = busy_until.bisect_right(start)
        if index:
            busy_until.pop(index - 1)
            busy_until.add(end)
            watched += 1
        elif len(busy_until) < members:
            busy_until.add(end)
            watched += 1
    return watched


def max_window_subarray_sum(values: Sequence[int], min_len: int, max_len: int) -> int:
    """Return the largest sum of a subarray whose length lies in ``min_len..max_len``."""
    n = len(values)
    if min_len < 1 or min_len > max_len or min_len > n:
        raise ValueError("no subarray length fits the given bounds")
    prefix = [0, *accumulate(values)]
    window = SortedList()
    best = None
    for i in range(min_len, n + 1):
        window.add(prefix[i - min_len])
        if i - max_len - 1 >= 0:
            window.remove(prefix[i - max_len - 1])
        candidate = prefix[i] - window[0]
        if best is None or candidate > best:
            best = candidate
    return best


def distinct_value_subsequences(values: Iterable[int]) -> int:
    """Count non-empty subsequences with all values distinct, modulo 1e9+7."""
    total = 1
    for occurrences in Counter(values).values():
        total = total * (occurrences + 1) % MOD
    return (total - 1) % MOD