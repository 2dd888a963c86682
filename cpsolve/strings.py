"""Pattern matching with the Z-function."""

from __future__ import annotations

from collections.abc import Sequence


def z_array(s: Sequence) -> list[int]:
    """Return the Z-function: longest common prefix of ``s`` and each suffix; z[0] is 0."""
    n = len(s)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i < right:
            z[i] = min(right - i, z[i - left])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] > right:
            left, right = i, i + z[i]
    return z


def count_occurrences(text: str, pattern: str) -> int:
    """Count the positions where ``pattern`` occurs in ``text``, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    combined = [*pattern, None, *text]
    m = len(pattern)
    return sum(1 for value in z_array(combined)[m + 1 :] if value >= m)