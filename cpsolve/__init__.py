"""Solvers for classic competitive-programming problems."""

__version__ = "0.1.0"

__all__ = [
    "basics",
    "construct",
    "dp_counting",
    "dp_optimize",
    "greedy",
    "modular",
    "number_theory",
    "ordered",
    "range_queries",
    "shortest_paths",
    "strings",
    "subarrays",
    "traversal",
    "trees",
]