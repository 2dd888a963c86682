"""Construction and search puzzles on strings and grids."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Sequence
from itertools import permutations
from string import ascii_uppercase

from cpsolve.basics import NoSolutionError

_SIDE = 7
_STEPS = _SIDE * _SIDE - 1
_KNIGHT_MOVES = ((-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1))


def _uppercase_counts(s: str) -> Counter:
    counts = Counter(s)
    if any(ch not in ascii_uppercase for ch in counts):
        raise ValueError("string must consist of letters A-Z")
    return counts


def palindrome_reorder(s: str) -> str:
    """Rearrange the letters of ``s`` into a palindrome."""
    counts = _uppercase_counts(s)
    odd = [ch for ch in ascii_uppercase if counts[ch] % 2]
    if len(odd) > 1:
        raise NoSolutionError("letters cannot form a palindrome")
    half = "".join(ch * (counts[ch] // 2) for ch in ascii_uppercase)
    return half + "".join(odd) + half[::-1]


def distinct_permutations(s: str) -> list[str]:
    """Return every distinct arrangement of ``s`` in sorted order."""
    return sorted({"".join(p) for p in permutations(s)})


def count_queen_placements(board: Sequence[str]) -> int:
    """Count placements of one queen per row, avoiding '*' squares and attacks."""
    size = len(board)
    if any(len(row) != size for row in board):
        raise ValueError("board must be square")
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(r: int) -> int:
        if r == size:
            return 1
        total = 0
        for c, cell in enumerate(board[r]):
            if cell == "*" or c in columns or r + c in diagonals or r - c in anti_diagonals:
                continue
            columns.add(c)
            diagonals.add(r + c)
            anti_diagonals.add(r - c)
            total += place(r + 1)
            columns.discard(c)
            diagonals.discard(r + c)
            anti_diagonals.discard(r - c)
        return total

    return place(0)


def count_grid_paths(description: str) -> int:
    """Count paths through a 7x7 grid from top-left to bottom-left matching a move pattern."""
    if len(description) != _STEPS:
        raise ValueError(f"description must have {_STEPS} characters")
    if set(description) - set("UDLR?"):
        raise ValueError("description may only contain U, D, L, R and ?")
    visited = [[False] * _SIDE for _ in range(_SIDE)]
    visited[0][0] = True
    goal = (_SIDE - 1, 0)

    def free(r: int, c: int) -> bool:
        return 0 <= r < _SIDE and 0 <= c < _SIDE and not visited[r][c]

    def walk(r: int, c: int, step: int) -> int:
        if (r, c) == goal:
            return int(step == _STEPS)
        if step == _STEPS:
            return 0
        up, down = free(r - 1, c), free(r + 1, c)
        left, right = free(r, c - 1), free(r, c + 1)
        if left and right and not up and not down:
            return 0
        if up and down and not left and not right:
            return 0
        wanted = description[step]
        total = 0
        options = (
            ("D", down, r + 1, c),
            ("U", up, r - 1, c),
            ("L", left, r, c - 1),
            ("R", right, r, c + 1),
        )
        for direction, open_, nr, nc in options:
            if open_ and wanted in ("?", direction):
                visited[nr][nc] = True
                total += walk(nr, nc, step + 1)
                visited[nr][nc] = False
        return total

    return walk(0, 0, 0)


def knight_distances(n: int) -> list[list[int]]:
    """Return the minimum knight moves from the top-left corner to every square, -1 if unreachable."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    dist = [[-1] * n for _ in range(n)]
    dist[0][0] = 0
    queue = deque([(0, 0)])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _KNIGHT_MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < n and 0 <= ny < n and dist[nx][ny] == -1:
                dist[nx][ny] = dist[x][y] + 1
                queue.append((nx, ny))
    return dist


def mex_grid(n: int) -> list[list[int]]:
    """Return the n x n grid where each cell is the mex of the values left of and above it."""
    return [[i ^ j for j in range(n)] for i in range(n)]


def recolor_grid(grid: Sequence[str]) -> list[str]:
    """Recolor each cell with A-D so it differs from its old color and its new neighbours."""
    if grid and any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("all rows must have the same length")
    result: list[str] = []
    for row in grid:
        above_row = result[-1] if result else [None] * len(row)
        new: list[str] = []
        for cell, above in zip(row, above_row):
            left = new[-1] if new else None
            new.append(next(c for c in "ABCD" if c not in (cell, above, left)))
        result.append("".join(new))
    return result


def raab_game(n: int, a: int, b: int) -> tuple[list[int], list[int]]:
    """Return card orders for two players so they win ``a`` and ``b`` rounds respectively."""
    if a + b > n:
        raise NoSolutionError("more wins than rounds")
    if a + b > 0 and (a == 0 or b == 0):
        raise NoSolutionError("one-sided results are impossible")
    decided = a + b
    first = list(range(b + 1, decided + 1)) + list(range(1, b + 1)) + list(range(decided + 1, n + 1))
    second = list(range(1, n + 1))
    return first, second


def reorder_string(s: str) -> str:
    """Return the smallest rearrangement of ``s`` with no two equal adjacent letters."""
    counts = _uppercase_counts(s)
    n = len(s)
    if max(counts.values(), default=0) > (n + 1) // 2:
        raise NoSolutionError("no arrangement avoids equal neighbours")
    result: list[str] = []
    previous = None
    for remaining in reversed(range(n)):
        for ch in sorted(counts):
            if counts[ch] == 0 or ch == previous:
                continue
            counts[ch] -= 1
            if max(counts.values()) <= (remaining + 1) // 2:
                result.append(ch)
                previous = ch
                break
            counts[ch] += 1
        else:
            raise NoSolutionError("no arrangement avoids equal neighbours")
    return "".join(result)