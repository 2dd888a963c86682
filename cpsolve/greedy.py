"""Greedy, sorting and binary-search problems on sequences and intervals."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import accumulate

from cpsolve.basics import NoSolutionError


def count_apartment_matches(
    applicants: Iterable[int], apartments: Iterable[int], tolerance: int
) -> int:
    """Return how many applicants get an apartment within ``tolerance`` of their desired size."""
    desired = sorted(applicants)
    sizes = sorted(apartments)
    matches = 0
    j = 0
    for wanted in desired:
        while j < len(sizes) and sizes[j] < wanted - tolerance:
            j += 1
        if j < len(sizes) and sizes[j] <= wanted + tolerance:
            matches += 1
            j += 1
    return matches


def ferris_wheel_gondolas(weights: Iterable[int], limit: int) -> int:
    """Return the minimum number of gondolas holding at most two children within ``limit``."""
    ordered = sorted(weights)
    light = 0
    heavy = len(ordered) - 1
    gondolas = 0
    while heavy >= light:
        if ordered[light] + ordered[heavy] <= limit:
            light += 1
        heavy -= 1
        gondolas += 1
    return gondolas


def max_customers(intervals: Iterable[tuple[int, int]]) -> int:
    """Return the largest number of customers present at the same time."""
    events = []
    for arrival, departure in intervals:
        events.append((arrival, 1))
        events.append((departure, -1))
    events.sort()
    return max(accumulate(delta for _, delta in events), default=0)


def max_movies(movies: Iterable[tuple[int, int]]) -> int:
    """Return the most movies that can be watched one after another without overlap."""
    watched = 0
    last_end = float("-inf")
    for start, end in sorted(movies, key=lambda movie: movie[1]):
        if start >= last_end:
            watched += 1
            last_end = end
    return watched


def stick_cost(lengths: Iterable[int]) -> int:
    """Return the minimum total change needed to make all sticks the same length."""
    ordered = sorted(lengths)
    if not ordered:
        raise ValueError("at least one stick is required")
    median = ordered[len(ordered) // 2]
    return sum(abs(length - median) for length in ordered)


def smallest_missing_sum(coins: Iterable[int]) -> int:
    """Return the smallest sum that cannot be made from a subset of ``coins``."""
    target = 1
    for coin in sorted(coins):
        if coin > target:
            break
        target += coin
    return target


def factory_time(machine_times: Sequence[int], target: int) -> int:
    """Return the shortest time in which the machines together make ``target`` products."""
    if not machine_times:
        raise ValueError("at least one machine is required")
    low, high = 0, min(machine_times) * target
    answer = high
    while low <= high:
        mid = (low + high) // 2
        if sum(mid // duration for duration in machine_times) >= target:
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def tasks_reward(tasks: Iterable[tuple[int, int]]) -> int:
    """Return the best total reward (deadline minus finish time) over all task orders."""
    reward = 0
    time = 0
    for duration, deadline in sorted(tasks, key=lambda task: task[0]):
        time += duration
        reward += deadline - time
    return reward


def reading_time(times: Sequence[int]) -> int:
    """Return the minimum time for two readers to each read every book."""
    return max(sum(times), 2 * max(times, default=0))


def allocate_rooms(customers: Sequence[tuple[int, int]]) -> tuple[int, list[int]]:
    """Assign rooms to customers; return the number of rooms and each customer's room."""
    order = sorted(range(len(customers)), key=lambda i: (customers[i][0], customers[i][1], i))
    busy: list[tuple[int, int]] = []
    free_rooms: list[int] = []
    assignment = [0] * len(customers)
    rooms_used = 0
    for index in order:
        arrival, departure = customers[index]
        while busy and busy[0][0] < arrival:
            free_rooms.append(heapq.heappop(busy)[1])
        if free_rooms:
            room = free_rooms.pop()
        else:
            rooms_used += 1
            room = rooms_used
        assignment[index] = room
        heapq.heappush(busy, (departure, room))
    return rooms_used, assignment


def count_distinct(values: Iterable[int]) -> int:
    """Return the number of distinct values."""
    return len(set(values))


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    iterator = iter(values)
    try:
        best = current = next(iterator)
    except StopIteration:
        raise ValueError("values must not be empty") from None
    for value in iterator:
        current = max(value, current + value)
        best = max(best, current)
    return best


def two_sum_indices(values: Iterable[int], target: int) -> tuple[int, int]:
    """Return 1-based positions of two values summing to ``target``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(values):
        complement = target - value
        if complement in seen:
            return seen[complement] + 1, index + 1
        seen[value] = index
    raise NoSolutionError("no two values add up to the target")