import pytest

from cpsolve.trees import (
    Hierarchy,
    TreeDistances,
    distance_sums,
    max_distances,
    max_matching,
    subordinate_counts,
    tree_diameter,
)

EDGES = [(1, 2), (1, 3), (3, 4), (3, 5), (5, 6)]
N = 6


def _path(n):
    return [(i, i + 1) for i in range(1, n)]


def _star(n):
    return [(1, i) for i in range(2, n + 1)]


def test_subordinates_star():
    n = 5
    counts = subordinate_counts([1] * (n - 1))
    assert counts[0] == n - 1
    assert counts[1:] == [0] * (n - 1)


def test_subordinates_chain_root_has_everyone():
    n = 7
    counts = subordinate_counts(list(range(1, n)))
    assert counts[0] == n - 1
    assert counts[-1] == 0
    assert counts == sorted(counts, reverse=True)


def test_subordinates_reject_cycle():
    with pytest.raises(ValueError):
        subordinate_counts([3, 2])


def test_diameter_of_path():
    n = 8
    assert tree_diameter(n, _path(n)) == n - 1


def test_diameter_of_star():
    assert tree_diameter(6, _star(6)) == 2


def test_single_node_tree():
    assert tree_diameter(1, []) == 0
    assert max_matching(1, []) == 0


def test_max_distances_peak_is_diameter():
    distances = max_distances(N, EDGES)
    assert len(distances) == N
    assert max(distances) == tree_diameter(N, EDGES)


def test_distance_sums_match_pairwise_distances():
    tree = TreeDistances(N, EDGES)
    sums = distance_sums(N, EDGES)
    for u in range(1, N + 1):
        assert sums[u - 1] == sum(tree.distance(u, v) for v in range(1, N + 1))


def test_matching_of_path():
    n = 9
    assert max_matching(n, _path(n)) == n // 2


def test_matching_of_star():
    assert max_matching(5, _star(5)) == 1


def test_hierarchy_zero_and_too_far():
    bosses = [1, 1, 3, 3, 5]
    hierarchy = Hierarchy(bosses)
    for employee in range(1, N + 1):
        assert hierarchy.kth_boss(employee, 0) == employee
    assert hierarchy.kth_boss(1, 1) is None
    assert hierarchy.kth_boss(6, 4) is None


def test_hierarchy_steps_compose():
    bosses = [1, 1, 3, 3, 5]
    hierarchy = Hierarchy(bosses)
    assert hierarchy.kth_boss(6, 1) == bosses[6 - 2]
    assert hierarchy.kth_boss(6, 2) == hierarchy.kth_boss(hierarchy.kth_boss(6, 1), 1)
    assert hierarchy.kth_boss(6, 3) == 1


def test_hierarchy_rejects_bad_employee():
    with pytest.raises(IndexError):
        Hierarchy([1]).kth_boss(3, 0)


def test_tree_distances_invariants():
    tree = TreeDistances(N, EDGES)
    for u in range(1, N + 1):
        assert tree.distance(u, u) == 0
        assert tree.lca(1, u) == 1
        for v in range(1, N + 1):
            assert tree.distance(u, v) == tree.distance(v, u)
            assert tree.lca(u, v) == tree.lca(v, u)


def test_tree_distances_along_path():
    n = 10
    tree = TreeDistances(n, _path(n))
    assert tree.distance(1, n) == n - 1
    assert tree.lca(4, 9) == 4


def test_wrong_edge_count_rejected():
    with pytest.raises(ValueError):
        tree_diameter(4, [(1, 2)])


def test_disconnected_edges_rejected():
    with pytest.raises(ValueError):
        TreeDistances(4, [(1, 2), (2, 1), (3, 4)])