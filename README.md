# cpsolve

A library of solvers for well-known competitive-programming problems. Each
problem is a plain function or a small class: pass Python values in, get Python
values back.

## Installation

```
pip install cpsolve
```

For development, including the test suite:

```
pip install "cpsolve[test]"
pytest
```

The only runtime dependency is `sortedcontainers`.

## Modules

| Module | Contents |
| --- | --- |
| `cpsolve.basics` | introductory problems: `weird_algorithm`, `missing_number`, `two_sets`, `digit_at`, `apple_division`, `hanoi_moves`, `gray_code`, ... and the `NoSolutionError` exception |
| `cpsolve.construct` | constructions and searches: `palindrome_reorder`, `distinct_permutations`, `count_queen_placements`, `count_grid_paths`, `knight_distances`, `mex_grid`, `recolor_grid`, `raab_game`, `reorder_string` |
| `cpsolve.greedy` | sorting-based greedy solvers: `count_apartment_matches`, `ferris_wheel_gondolas`, `max_customers`, `max_movies`, `allocate_rooms`, `factory_time`, `two_sum_indices`, ... |
| `cpsolve.ordered` | problems built on ordered sets and Fenwick trees: `sell_tickets`, `collecting_rounds`, `NumberCollection`, `count_towers`, `traffic_light_gaps`, `josephus_order`, `josephus_order_k`, `nested_ranges_check`, `nested_ranges_count`, ... |
| `cpsolve.subarrays` | subarray and k-sum problems: `three_sum_indices`, `four_sum_indices`, `subarray_sum_count`, `divisible_subarray_count`, `min_max_division`, `max_window_subarray_sum`, ... |
| `cpsolve.range_queries` | `PrefixSums`, `MaxSubarrayTree`, `subarray_sum_queries` |
| `cpsolve.strings` | `z_array`, `count_occurrences` |
| `cpsolve.dp_counting` | counting DP: `dice_combinations`, `coin_combinations_ordered`, `coin_combinations_unordered`, `grid_paths`, `count_tilings`, `count_increasing_subsequences`, `money_sums`, ... |
| `cpsolve.dp_optimize` | optimisation DP: `min_coins`, `book_shop`, `edit_distance`, `rectangle_cuts`, `elevator_rides`, `longest_common_subsequence`, `mountain_ranges`, ... |
| `cpsolve.modular` | `power_mod`, `tower_power`, `fibonacci`, `Binomials`, `distributing_apples` |
| `cpsolve.number_theory` | `divisor_count`, `max_common_divisor`, `sum_of_divisor_sums`, `count_prime_multiples`, `count_distinct_arrangements` |
| `cpsolve.traversal` | `DisjointSet`, `count_rooms`, `roads_to_build`, `message_route`, `build_teams`, `round_trip`, `labyrinth_path`, `course_order` |
| `cpsolve.shortest_paths` | `shortest_routes`, `all_pairs_distances`, `shortest_route_queries`, `discounted_price`, `cheapest_routes` |
| `cpsolve.trees` | `subordinate_counts`, `tree_diameter`, `max_distances`, `distance_sums`, `max_matching`, `Hierarchy`, `TreeDistances` |

Counting problems whose answers grow large (bit strings, coin and dice
combinations, tilings, binomials and the like) return their result modulo
10^9 + 7. Nodes, cities and positions are 1-based, as in the usual problem
statements.

## Examples

```python
from cpsolve.basics import NoSolutionError, beautiful_permutation, digit_at, two_sets, weird_algorithm
from cpsolve.dp_optimize import edit_distance
from cpsolve.modular import Binomials
from cpsolve.ordered import sell_tickets
from cpsolve.shortest_paths import shortest_routes
from cpsolve.strings import count_occurrences
from cpsolve.trees import Hierarchy, TreeDistances

weird_algorithm(3)                              # [3, 10, 5, 16, 8, 4, 2, 1]
two_sets(7)                                     # ([2, 5, 7], [1, 6, 3, 4])
digit_at(11)                                    # 0
edit_distance("LOVE", "MOVIE")                  # 2
count_occurrences("saippuakauppias", "pp")      # 2
Binomials(10).choose(5, 2)                      # 10

sell_tickets([5, 3, 7, 8, 5], [4, 8, 3])        # [3, 8, -1]
shortest_routes(3, [(1, 2, 3), (2, 3, 1), (1, 3, 5)])  # [0, 3, 4]

tree = TreeDistances(5, [(1, 2), (1, 3), (3, 4), (3, 5)])
tree.distance(2, 4)                             # 3

company = Hierarchy([1, 1, 3, 3])               # bosses of employees 2..5
company.kth_boss(4, 1)                          # 3
company.kth_boss(4, 3)                          # None

try:
    beautiful_permutation(3)
except NoSolutionError:
    ...
```

## Errors and missing answers

A problem instance that has no answer raises `NoSolutionError` (a subclass of
`ValueError`) rather than returning a marker string; invalid arguments raise
`ValueError`, and out-of-range positions raise `IndexError`. A few functions
report a missing answer inside a list result instead, where the answers for
other items still matter: `sell_tickets` and `shortest_route_queries` use `-1`,
`shortest_routes` and `all_pairs_distances` use `None`, and
`Hierarchy.kth_boss` returns `None`.

## What this package does not do

It is a library only. It has no command-line program, does not read problem
input from standard input and does not print answers in a judge's output
format; callers parse input and format output themselves.