"""Tree problems: subtree sizes, diameters, distance sums, matchings and ancestors."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def _tree_adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    if n < 1:
        raise ValueError("n must be a positive integer")
    edge_list = list(edges)
    if len(edge_list) != n - 1:
        raise ValueError("a tree on n nodes has exactly n - 1 edges")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edge_list:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError("edge endpoints must lie in 1..n")
        adjacency[a].append(b)
        adjacency[b].append(a)
    if min(_distances(adjacency, 1)[1:]) < 0:
        raise ValueError("the edges do not connect all nodes")
    return adjacency


def _distances(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    dist = [-1] * len(adjacency)
    dist[start] = 0
    queue = deque([start])
    while queue:
        u = queue.popleft()
        for v in adjacency[u]:
            if dist[v] == -1:
                dist[v] = dist[u] + 1
                queue.append(v)
    return dist


def _farthest(dist: Sequence[int]) -> int:
    return max(range(1, len(dist)), key=lambda node: dist[node])


def _rooted(adjacency: Sequence[Sequence[int]]) -> tuple[list[int], list[int], list[int]]:
    """Return BFS order from node 1, each node's parent (0 for the root) and depth."""
    size = len(adjacency)
    parent = [0] * size
    depth = [-1] * size
    depth[1] = 0
    order = [1]
    for u in order:
        for v in adjacency[u]:
            if depth[v] == -1:
                depth[v] = depth[u] + 1
                parent[v] = u
                order.append(v)
    return order, parent, depth


def _hierarchy(bosses: Sequence[int]) -> tuple[list[int], list[int], list[int]]:
    n = len(bosses) + 1
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for employee, boss in enumerate(bosses, 2):
        if not 1 <= boss <= n:
            raise ValueError("bosses must lie in 1..n")
        children[boss].append(employee)
    parent = [0, 0, *bosses]
    depth = [-1] * (n + 1)
    depth[1] = 0
    order = [1]
    for u in order:
        for v in children[u]:
            depth[v] = depth[u] + 1
            order.append(v)
    if len(order) != n:
        raise ValueError("the bosses do not form a hierarchy under employee 1")
    return order, parent, depth


def subordinate_counts(bosses: Sequence[int]) -> list[int]:
    """Return, for employees 1..n, how many subordinates each has; bosses lists 2..n."""
    order, parent, _ = _hierarchy(bosses)
    size = [1] * len(parent)
    for node in reversed(order[1:]):
        size[parent[node]] += size[node]
    return [s - 1 for s in size[1:]]


def tree_diameter(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the number of edges on the longest path of the tree."""
    adjacency = _tree_adjacency(n, edges)
    end = _farthest(_distances(adjacency, 1))
    return max(_distances(adjacency, end)[1:])


def max_distances(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return, for each node 1..n, its distance to the farthest node."""
    adjacency = _tree_adjacency(n, edges)
    first = _farthest(_distances(adjacency, 1))
    from_first = _distances(adjacency, first)
    second = _farthest(from_first)
    from_second = _distances(adjacency, second)
    return [max(a, b) for a, b in zip(from_first[1:], from_second[1:])]


def distance_sums(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return, for each node 1..n, the sum of its distances to all other nodes."""
    adjacency = _tree_adjacency(n, edges)
    order, parent, _ = _rooted(adjacency)
    size = [1] * (n + 1)
    down = [0] * (n + 1)
    for node in reversed(order[1:]):
        size[parent[node]] += size[node]
        down[parent[node]] += down[node] + size[node]
    total = [0] * (n + 1)
    total[1] = down[1]
    for node in order[1:]:
        total[node] = total[parent[node]] - size[node] + (n - size[node])
    return total[1:]


def max_matching(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the size of a maximum matching of the tree."""
    adjacency = _tree_adjacency(n, edges)
    order, parent, _ = _rooted(adjacency)
    matched = [False] * (n + 1)
    pairs = 0
    for node in reversed(order[1:]):
        up = parent[node]
        if not matched[node] and not matched[up]:
            matched[node] = matched[up] = True
            pairs += 1
    return pairs


def _lifting_table(parent: Sequence[int], levels: int) -> list[list[int]]:
    table = [list(parent)]
    for _ in range(1, levels):
        previous = table[-1]
        table.append([previous[previous[node]] for node in range(len(parent))])
    return table


class Hierarchy:
    """Company hierarchy rooted at employee 1 answering k-th boss queries."""

    def __init__(self, bosses: Sequence[int]) -> None:
        _, parent, self._depth = _hierarchy(bosses)
        self.n = len(bosses) + 1
        self._up = _lifting_table(parent, max(1, self.n.bit_length()))

    def kth_boss(self, employee: int, k: int) -> int | None:
        """Return the boss ``k`` levels above ``employee``, or None if there is none."""
        if not 1 <= employee <= self.n:
            raise IndexError("employee must lie in 1..n")
        if k < 0:
            raise ValueError("k must not be negative")
        if k > self._depth[employee]:
            return None
        for level, row in enumerate(self._up):
            if k >> level & 1:
                employee = row[employee]
        return employee


class TreeDistances:
    """Lowest common ancestors and distances in a tree rooted at node 1."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]]) -> None:
        adjacency = _tree_adjacency(n, edges)
        _, parent, self._depth = _rooted(adjacency)
        self.n = n
        self._up = _lifting_table(parent, max(1, n.bit_length()))

    def _check(self, node: int) -> None:
        if not 1 <= node <= self.n:
            raise IndexError("node must lie in 1..n")

    def lca(self, u: int, v: int) -> int:
        """Return the lowest common ancestor of ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        if self._depth[u] < self._depth[v]:
            u, v = v, u
        gap = self._depth[u] - self._depth[v]
        for level, row in enumerate(self._up):
            if gap >> level & 1:
                u = row[u]
        if u == v:
            return u
        for row in reversed(self._up):
            if row[u] != row[v]:
                u, v = row[u], row[v]
        return self._up[0][u]

    def distance(self, u: int, v: int) -> int:
        """Return the number of edges between ``u`` and ``v``."""
        ancestor = self.lca(u, v)
        return self._depth[u] + self._depth[v] - 2 * self._depth[ancestor]