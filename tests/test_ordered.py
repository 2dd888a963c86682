import pytest

from cpsolve.ordered import (
    NumberCollection,
    collecting_rounds,
    count_towers,
    josephus_order,
    josephus_order_k,
    longest_unique_playlist,
    nested_ranges_check,
    nested_ranges_count,
    sell_tickets,
    traffic_light_gaps,
)


def test_sell_tickets_no_affordable_ticket():
    assert sell_tickets([50, 60], [10, 20, 30]) == [-1, -1, -1]


def test_sell_tickets_respects_budget_and_stock():
    prices = [5, 3, 7, 8, 5]
    budgets = [4, 8, 3, 10, 6, 5]
    sold = sell_tickets(prices, budgets)
    assert len(sold) == len(budgets)
    remaining = list(prices)
    for price, budget in zip(sold, budgets):
        if price != -1:
            assert price <= budget
            remaining.remove(price)
        else:
            assert all(p > budget for p in remaining)


def test_collecting_rounds_sorted_and_reversed():
    n = 6
    assert collecting_rounds(range(1, n + 1)) == 1
    assert collecting_rounds(range(n, 0, -1)) == n


def test_collecting_rounds_rejects_non_permutation():
    with pytest.raises(ValueError):
        collecting_rounds([1, 1, 3])


@pytest.mark.parametrize("swaps", [[(2, 3), (1, 5), (2, 3)], [(1, 1), (4, 2), (5, 3), (1, 4)]])
def test_number_collection_swaps_track_rounds(swaps):
    collection = NumberCollection([4, 2, 1, 5, 3])
    for x, y in swaps:
        rounds = collection.swap(x, y)
        assert rounds == collecting_rounds(collection.values)


def test_number_collection_bad_position():
    with pytest.raises(IndexError):
        NumberCollection([1, 2, 3]).swap(0, 2)


def test_longest_unique_playlist_bounds():
    distinct = [4, 9, 1, 7]
    assert longest_unique_playlist(distinct) == len(distinct)
    songs = [1, 2, 1, 3, 2, 7, 4, 2]
    result = longest_unique_playlist(songs)
    assert result <= len(set(songs))
    assert any(
        len(set(songs[i : i + result])) == result for i in range(len(songs) - result + 1)
    )
    assert not any(
        len(set(songs[i : i + result + 1])) == result + 1
        for i in range(len(songs) - result)
    )


def test_count_towers_increasing_and_decreasing():
    increasing = [1, 2, 3, 4, 5]
    assert count_towers(increasing) == len(increasing)
    assert count_towers(list(reversed(increasing))) == 1


def test_traffic_light_gaps_invariants():
    length = 8
    positions = [3, 6, 2]
    gaps = traffic_light_gaps(length, positions)
    assert len(gaps) == len(positions)
    assert all(a >= b for a, b in zip(gaps, gaps[1:]))
    points = sorted([0, length, *positions])
    assert gaps[-1] == max(b - a for a, b in zip(points, points[1:]))


def test_traffic_light_outside_street_raises():
    with pytest.raises(ValueError):
        traffic_light_gaps(8, [8])


def test_josephus_order_is_permutation():
    n = 9
    order = josephus_order(n)
    assert sorted(order) == list(range(1, n + 1))


@pytest.mark.parametrize("n", [1, 2, 5, 8, 13])
def test_josephus_k_one_matches_every_second(n):
    assert josephus_order_k(n, 1) == josephus_order(n)


def test_josephus_k_zero_removes_in_order():
    n = 7
    assert josephus_order_k(n, 0) == list(range(1, n + 1))


def test_josephus_k_negative_raises():
    with pytest.raises(ValueError):
        josephus_order_k(5, -1)


def test_nested_ranges_chain():
    chain = [(1, 10), (2, 9), (3, 8), (4, 7)]
    n = len(chain)
    contains, contained = nested_ranges_count(chain)
    assert contains == list(reversed(range(n)))
    assert contained == list(range(n))


@pytest.mark.parametrize(
    "ranges",
    [
        [(1, 6), (2, 4), (4, 8), (3, 6)],
        [(1, 3), (1, 3), (2, 5), (6, 9), (7, 8)],
        [(5, 6), (1, 2), (3, 4)],
    ],
)
def test_nested_check_agrees_with_count(ranges):
    contains, contained = nested_ranges_check(ranges)
    count_contains, count_contained = nested_ranges_count(ranges)
    assert contains == [c > 0 for c in count_contains]
    assert contained == [c > 0 for c in count_contained]