# contestkit

A collection of classic algorithms and data structures as plain Python
functions and small classes. Inputs are ordinary lists, strings, tuples
and callables, and every result is returned rather than printed. The
package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `contestkit.sorting` | `counting_sort`, `heap_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort` |
| `contestkit.searching` | `linear_search`, `binary_search`, `ternary_search`, `first_bad_version`, `intersection`, `search_insert` |
| `contestkit.geometry` | `Point`, `cross_product`, `direction`, `on_segment`, `segments_intersect`, `point_location`, `parallelogram_vertices` |
| `contestkit.arithmetic` | `min_lcm_split`, `power_mod`, `trailing_zeroes`, `inverse_factorial`, `factorial_digits`, `count_set_bits` |
| `contestkit.permutations` | `permute` |
| `contestkit.dynamic` | `climb_stairs`, `frog_min_cost`, `knapsack`, `nth_fibonacci`, `fib`, `min_cost_climbing_stairs` |
| `contestkit.greedy` | `selected_meetings`, `max_meetings`, `candy_store`, `movie_festival`, `max_profit`, `max_profit_unlimited`, `can_complete_circuit`, `max_ice_cream`, `minimum_rounds`, `find_min_arrow_shots`, `mad_scientist` |
| `contestkit.meet_in_middle` | `subset_sums`, `min_abs_difference`, `max_subset_sum_mod` |
| `contestkit.strings` | `string_lcm`, `mirror_smallest`, `max_distinct_split`, `find_hashed`, `prefix_table`, `find_kmp`, `add_strings`, `rabin_karp` |
| `contestkit.counting` | `second_order_statistic`, `max_socks_on_table`, `seen_before`, `has_distinct_digits`, `first_distinct_digits`, `max_frequency`, `union_count` |
| `contestkit.range_queries` | `SegmentTree`, `min_segment_tree`, `sum_segment_tree`, `SqrtRangeMinimum`, `range_xor_queries`, `range_sum_queries` |
| `contestkit.disjoint_set` | `DisjointSet`, `graph_connectivity`, `city_and_flood`, `camper_differences` |
| `contestkit.shortest_path` | `shortest_path` |
| `contestkit.spanning_tree` | `kruskal_mst`, `prim_mst` |
| `contestkit.primes` | `noldbach` |
| `contestkit.trees` | `TreeNode`, `level_order`, `max_depth` |
| `contestkit.traversal` | `has_cycle_undirected_bfs`, `has_cycle_undirected_dfs`, `level_node_count`, `connected_components`, `has_cycle_directed`, `grid_path_exists`, `valid_path`, `topological_sort`, `travelling_alex`, `unreachable_nodes`, `num_islands` |

## Examples

```python
from contestkit.sorting import merge_sort
from contestkit.searching import binary_search
from contestkit.strings import find_kmp, rabin_karp
from contestkit.range_queries import sum_segment_tree

merge_sort([6, 4, 5, 3, 2, 1])        # [1, 2, 3, 4, 5, 6]
binary_search([1, 3, 5, 7], 5)        # 2
find_kmp("sadbutsad", "sad")          # 0
rabin_karp("sadbutsad", "sad")        # [1, 7]  (1-based positions)

tree = sum_segment_tree([5, 4, 2, 3, 5])
tree.query(0, 3)                      # 11, the sum over the half-open range [0, 3)
tree.update(1, 1)
tree.query(0, 3)                      # 8
```

```python
from contestkit.geometry import Point, point_location, segments_intersect

point_location(Point(1, 1), Point(5, 3), Point(2, 3))   # "LEFT"
segments_intersect(Point(1, 1), Point(5, 3), Point(1, 2), Point(4, 3))
```

```python
from contestkit.shortest_path import shortest_path
from contestkit.permutations import permute
from contestkit.trees import TreeNode, level_order, max_depth

edges = [(1, 2, 2), (2, 5, 5), (2, 3, 4), (1, 4, 1), (4, 3, 3), (3, 5, 1)]
shortest_path(5, edges)               # [1, 4, 3, 5]

list(permute("abc"))                  # ['abc', 'acb', 'bac', 'bca', 'cba', 'cab']

root = TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))
level_order(root)                     # [[3], [9, 20], [15, 7]]
max_depth(root)                       # 3
```

## Conventions

- Sorting functions return new lists and leave their input untouched.
- `linear_search`, `binary_search`, `ternary_search`, `find_hashed`,
  `find_kmp` and `can_complete_circuit` return -1 where nothing is found;
  `first_bad_version` returns `n + 1` when no version is bad.
  `string_lcm`, `second_order_statistic` and `shortest_path` return `None`
  where there is no answer.
- `SegmentTree` uses 0-based indices and half-open ranges. `SqrtRangeMinimum`,
  `range_xor_queries` and `range_sum_queries` take 1-based, inclusive ranges.
- Invalid input raises an exception: `ValueError` for malformed arguments,
  `IndexError` for ranges out of bounds, `KeyError` for elements unknown to a
  `DisjointSet`.
- Graph functions on nodes `1..n` take edge lists; `has_cycle_undirected_bfs`,
  `has_cycle_undirected_dfs`, `topological_sort`, `kruskal_mst` and `prim_mst`
  take adjacency lists over vertices `0..n-1` (for the spanning-tree functions,
  lists of `(neighbour, weight)` pairs).

## What it does not do

contestkit is a library only. It installs no command-line programs and reads
nothing from standard input or from files: each problem is solved by calling
its function with the data already in hand.