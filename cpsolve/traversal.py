"""Graph and grid traversal: components, shortest routes, colourings and cycles."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from cpsolve.basics import NoSolutionError

# Row step, column step, and the move that leads back from the reached cell.
_BACK_MOVES = ((-1, 0, "D"), (1, 0, "U"), (0, -1, "R"), (0, 1, "L"))


class DisjointSet:
    """Union-find over the elements 0..size-1 with path compression and union by size."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._size = [1] * size

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if they were already one set."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        return True


def _undirected(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError("edge endpoints must lie in 1..n")
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def count_rooms(grid: Sequence[str]) -> int:
    """Count the connected areas of '.' floor cells in a map of '#' walls."""
    if not grid:
        return 0
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("all rows must have the same length")
    cells = DisjointSet(len(grid) * width)
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell != ".":
                continue
            if i + 1 < len(grid) and grid[i + 1][j] == ".":
                cells.union(i * width + j, (i + 1) * width + j)
            if j + 1 < width and row[j + 1] == ".":
                cells.union(i * width + j, i * width + j + 1)
    return len(
        {
            cells.find(i * width + j)
            for i, row in enumerate(grid)
            for j, cell in enumerate(row)
            if cell == "."
        }
    )


def roads_to_build(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return the fewest new roads that connect all cities 1..n."""
    adjacency = _undirected(n, edges)
    visited = [False] * (n + 1)
    representatives = []
    for start in range(1, n + 1):
        if visited[start]:
            continue
        representatives.append(start)
        visited[start] = True
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbour in adjacency[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append(neighbour)
    return list(zip(representatives, representatives[1:]))


def message_route(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return a shortest route of computers from 1 to ``n``."""
    adjacency = _undirected(n, edges)
    parent: list[int | None] = [None] * (n + 1)
    seen = [False] * (n + 1)
    seen[1] = True
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if not seen[neighbour]:
                seen[neighbour] = True
                parent[neighbour] = node
                queue.append(neighbour)
    if not seen[n]:
        raise NoSolutionError(f"computer {n} cannot be reached from computer 1")
    route = []
    node: int | None = n
    while node is not None:
        route.append(node)
        node = parent[node]
    route.reverse()
    return route


def build_teams(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Assign each pupil team 1 or 2 so that no two friends share a team."""
    adjacency = _undirected(n, edges)
    team = [0] * (n + 1)
    for start in range(1, n + 1):
        if team[start]:
            continue
        team[start] = 1
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in adjacency[node]:
                if not team[neighbour]:
                    team[neighbour] = 3 - team[node]
                    queue.append(neighbour)
                elif team[neighbour] == team[node]:
                    raise NoSolutionError("the friendships cannot be split into two teams")
    return team[1:]


def round_trip(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return a round trip that starts and ends in the same city without reusing a road."""
    adjacency = _undirected(n, edges)
    visited = [False] * (n + 1)
    parent = [0] * (n + 1)
    for root in range(1, n + 1):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, 0, iter(adjacency[root]))]
        while stack:
            node, came_from, neighbours = stack[-1]
            child = next(neighbours, None)
            if child is None:
                stack.pop()
                continue
            if child == came_from:
                continue
            if visited[child]:
                trip = [child]
                current = node
                while current != child:
                    trip.append(current)
                    current = parent[current]
                trip.append(child)
                return trip
            parent[child] = node
            visited[child] = True
            stack.append((child, node, iter(adjacency[child])))
    raise NoSolutionError("the road network has no round trip")


def labyrinth_path(grid: Sequence[str]) -> str:
    """Return a shortest move string (U, D, L, R) from 'A' to 'B' avoiding '#' walls."""
    start = goal = None
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == "B":
                start = (i, j)
            elif cell == "A":
                goal = (i, j)
    if start is None or goal is None:
        raise ValueError("the labyrinth must contain both 'A' and 'B'")
    rows = len(grid)
    back: dict[tuple[int, int], tuple[tuple[int, int], str]] = {}
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx, dy, move in _BACK_MOVES:
            nx, ny = x + dx, y + dy
            if (
                0 <= nx < rows
                and 0 <= ny < len(grid[nx])
                and grid[nx][ny] != "#"
                and (nx, ny) not in seen
            ):
                seen.add((nx, ny))
                back[(nx, ny)] = ((x, y), move)
                queue.append((nx, ny))
    if goal not in seen:
        raise NoSolutionError("there is no path from A to B")
    moves = []
    cell = goal
    while cell != start:
        cell, move = back[cell]
        moves.append(move)
    return "".join(moves)


def course_order(n: int, prerequisites: Iterable[tuple[int, int]]) -> list[int]:
    """Return an order of courses 1..n where each (a, b) puts ``a`` before ``b``."""
    following: list[list[int]] = [[] for _ in range(n + 1)]
    indegree = [0] * (n + 1)
    for a, b in prerequisites:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError("courses must lie in 1..n")
        following[a].append(b)
        indegree[b] += 1
    queue = deque(course for course in range(1, n + 1) if indegree[course] == 0)
    order = []
    while queue:
        course = queue.popleft()
        order.append(course)
        for nxt in following[course]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)
    if len(order) != n:
        raise NoSolutionError("the prerequisites form a cycle")
    return order