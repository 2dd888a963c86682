import pytest

from cpsolve.basics import NoSolutionError
from cpsolve.shortest_paths import (
    all_pairs_distances,
    cheapest_routes,
    discounted_price,
    shortest_route_queries,
    shortest_routes,
)

GRAPH = [
    (1, 2, 3),
    (2, 3, 1),
    (1, 3, 7),
    (3, 4, 2),
    (2, 4, 9),
    (4, 1, 5),
]


def test_single_flight():
    assert shortest_routes(2, [(1, 2, 7)]) == [0, 7]


def test_parallel_flights_pick_cheapest():
    assert shortest_routes(2, [(1, 2, 9), (1, 2, 4)])[1] == 4


def test_direction_matters():
    assert shortest_routes(2, [(2, 1, 3)]) == [0, None]


def test_shortest_routes_respect_every_edge():
    dist = shortest_routes(4, GRAPH)
    for a, b, cost in GRAPH:
        assert dist[b - 1] <= dist[a - 1] + cost


def test_cheapest_single_route_matches_shortest():
    assert cheapest_routes(4, GRAPH, 1) == [shortest_routes(4, GRAPH)[-1]]


def test_cheapest_routes_sorted_and_bounded():
    prices = cheapest_routes(4, GRAPH, 5)
    assert len(prices) == 5
    assert prices == sorted(prices)
    assert prices[0] == shortest_routes(4, GRAPH)[-1]


def test_cheapest_routes_over_parallel_flights():
    weights = [8, 2, 5]
    flights = [(1, 2, w) for w in weights]
    assert cheapest_routes(2, flights, 2) == sorted(weights)[:2]


def test_cheapest_routes_rejects_bad_k():
    with pytest.raises(ValueError):
        cheapest_routes(2, [(1, 2, 1)], 0)


def test_all_pairs_matrix_invariants():
    roads = [(a, b, c) for a, b, c in GRAPH]
    dist = all_pairs_distances(4, roads)
    for i in range(4):
        assert dist[i][i] == 0
        for j in range(4):
            assert dist[i][j] == dist[j][i]
            for k in range(4):
                assert dist[i][j] <= dist[i][k] + dist[k][j]


def test_all_pairs_keeps_shorter_parallel_road():
    dist = all_pairs_distances(2, [(1, 2, 6), (2, 1, 4)])
    assert dist[0][1] == 4


def test_queries_report_unreachable_and_self():
    answers = shortest_route_queries(3, [(1, 2, 5)], [(1, 3), (2, 2), (2, 1)])
    assert answers == [-1, 0, 5]


def test_discount_never_worse_than_full_price():
    assert discounted_price(4, GRAPH) <= shortest_routes(4, GRAPH)[-1]


def test_discount_halves_single_flight():
    assert discounted_price(2, [(1, 2, 9)]) == 4


def test_discount_unreachable_raises():
    with pytest.raises(NoSolutionError):
        discounted_price(3, [(1, 2, 4)])


def test_bad_endpoint_rejected():
    with pytest.raises(ValueError):
        shortest_routes(2, [(1, 3, 1)])