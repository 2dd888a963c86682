"""Shortest routes in weighted graphs: single source, all pairs, coupons and k-best."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

from cpsolve.basics import NoSolutionError


def _directed(n: int, flights: Iterable[tuple[int, int, int]]) -> list[list[tuple[int, int]]]:
    if n < 1:
        raise ValueError("n must be a positive integer")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b, cost in flights:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError("flight endpoints must lie in 1..n")
        adjacency[a].append((b, cost))
    return adjacency


def shortest_routes(n: int, flights: Iterable[tuple[int, int, int]]) -> list[int | None]:
    """Return the cheapest price from city 1 to each city 1..n; None where unreachable."""
    adjacency = _directed(n, flights)
    dist: list[int | None] = [None] * (n + 1)
    dist[1] = 0
    heap = [(0, 1)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, cost in adjacency[u]:
            candidate = d + cost
            if dist[v] is None or candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return dist[1:]


def all_pairs_distances(
    n: int, roads: Iterable[tuple[int, int, int]]
) -> list[list[int | None]]:
    """Return the n x n matrix of shortest road lengths (0-based rows); None where unreachable."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    dist: list[list[int | None]] = [[None] * n for _ in range(n)]
    for u, v, length in roads:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError("road endpoints must lie in 1..n")
        u -= 1
        v -= 1
        if dist[u][v] is None or length < dist[u][v]:
            dist[u][v] = length
            dist[v][u] = length
    for i in range(n):
        dist[i][i] = 0
    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            through = dist[i][k]
            if through is None or i == k:
                continue
            row_i = dist[i]
            for j, onward in enumerate(row_k):
                if onward is None or j == k:
                    continue
                candidate = through + onward
                if row_i[j] is None or candidate < row_i[j]:
                    row_i[j] = candidate
    return dist


def shortest_route_queries(
    n: int,
    roads: Iterable[tuple[int, int, int]],
    queries: Iterable[tuple[int, int]],
) -> list[int]:
    """Answer each (u, v) query with the shortest road length, or -1 if there is no route."""
    dist = all_pairs_distances(n, roads)
    answers = []
    for u, v in queries:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError("query endpoints must lie in 1..n")
        found = dist[u - 1][v - 1]
        answers.append(-1 if found is None else found)
    return answers


def discounted_price(n: int, flights: Iterable[tuple[int, int, int]]) -> int:
    """Return the cheapest price from city 1 to ``n`` using one coupon that halves a flight."""
    adjacency = _directed(n, flights)
    dist: list[list[int | None]] = [[None, None] for _ in range(n + 1)]
    dist[1][0] = 0
    heap = [(0, 1, 0)]
    while heap:
        d, u, used = heapq.heappop(heap)
        if d != dist[u][used]:
            continue
        for v, cost in adjacency[u]:
            full = d + cost
            if dist[v][used] is None or full < dist[v][used]:
                dist[v][used] = full
                heapq.heappush(heap, (full, v, used))
            if not used:
                halved = d + cost // 2
                if dist[v][1] is None or halved < dist[v][1]:
                    dist[v][1] = halved
                    heapq.heappush(heap, (halved, v, 1))
    price = dist[n][1]
    if price is None:
        raise NoSolutionError(f"city {n} cannot be reached with the coupon used")
    return price


def cheapest_routes(
    n: int, flights: Iterable[tuple[int, int, int]], k: int
) -> list[int]:
    """Return the prices of the ``k`` cheapest routes from 1 to ``n`` in increasing order."""
    if k < 1:
        raise ValueError("k must be a positive integer")
    adjacency = _directed(n, flights)
    settled = [0] * (n + 1)
    prices: list[int] = []
    heap = [(0, 1)]
    while heap and len(prices) < k:
        d, u = heapq.heappop(heap)
        if settled[u] >= k:
            continue
        settled[u] += 1
        if u == n:
            prices.append(d)
        for v, cost in adjacency[u]:
            if settled[v] < k:
                heapq.heappush(heap, (d + cost, v))
    return prices


def _as_flights(items: Sequence[tuple[int, int, int]]) -> list[tuple[int, int, int]]:
    return list(items)