# algokit

A small library of classic algorithms and data structures. It is written in plain
Python and has no third-party dependencies.

## Installation

From the project directory:

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
| `algokit.dp` | `coin_change`, `coin_change_tabulation`, `fib_top_down`, `fib_bottom_up`, `fib_space_optimized`, `knapsack_memoization`, `knapsack_tabulation`, `lis`, `lis_binary_search` |
| `algokit.dp_problems` | `longest_common_subsequence`, `max_product`, `rob`, `rob_circular`, `unique_paths`, `min_distance` |
| `algokit.search_problems` | `split_array`, `find_132_pattern`, `triangle_number`, `reach_number` |
| `algokit.graph` | `bfs`, `dfs`, `dfs_iterative`, `is_bipartite`, `is_cyclic`, `dijkstra`, `kruskal`, `prims`, `strongly_connected_components`, `topological_sort` |
| `algokit.trie` | `Trie` with `insert`, `search` and `in` |
| `algokit.union_find` | `UnionFind` with `find`, `union`, `connected` and `len()` |
| `algokit.grid_problems` | `num_enclaves`, `capture_surrounded`, `num_islands`, `max_area_of_island` |
| `algokit.graph_problems` | `Node`, `clone_graph`, `min_cost_connect_points`, `can_finish`, `is_bipartite`, `can_visit_all_rooms` |
| `algokit.array_problems` | `find_diagonal_order`, `diagonal_traverse`, `min_remove_to_make_valid`, `find_anagrams` |
| `algokit.tree_problems` | `TreeNode`, `vertical_traversal` |
| `algokit.union_find_problems` | `valid_tree`, `accounts_merge` |

## Notes on behaviour

- `coin_change` and `coin_change_tabulation` return `-1` when the amount cannot
  be made. A negative amount or a non-positive coin raises `ValueError`.
- `knapsack_memoization` and `knapsack_tabulation` solve the unbounded knapsack:
  each item may be taken any number of times. Weights and values must be the
  same length, and every weight must be positive.
- The functions in `algokit.graph` take an adjacency list: entry `i` lists the
  neighbours of vertex `i`. They return their results as lists rather than
  printing them. A neighbour or start vertex outside the graph raises
  `ValueError`.
- `dijkstra`, `kruskal` and `prims` give every edge a weight of 1. `dijkstra`
  returns one distance per vertex, with `math.inf` for unreachable vertices;
  `kruskal` and `prims` return the order in which vertices join the tree.
- `strongly_connected_components` returns a list of components, each a list of
  vertices.
- `UnionFind.union` returns `True` when it merged two separate sets and `False`
  when the elements were already together.
- `capture_surrounded` returns a new board and leaves its argument unchanged.

## Examples

Dynamic programming:

```python
from algokit.dp import coin_change_tabulation, lis

coin_change_tabulation([1, 2, 5], 11)    # 3
lis([10, 9, 2, 5, 3, 7, 101, 18])        # 4
```

Graphs:

```python
from algokit.graph import bfs, dijkstra, topological_sort

adj = [[1, 2], [3], [4], [], []]
bfs(adj, 0)               # [0, 1, 2, 3, 4]
topological_sort(adj)     # [0, 2, 4, 1, 3]
dijkstra(adj, 0)          # [0, 1, 1, 2, 2]
```

Data structures:

```python
from algokit.trie import Trie
from algokit.union_find import UnionFind

trie = Trie()
trie.insert("hello")
trie.search("hello")      # True
trie.search("world")      # False

uf = UnionFind(5)
uf.union(0, 1)
uf.union(1, 3)
uf.connected(0, 3)        # True
```

Solved problems:

```python
from algokit.array_problems import min_remove_to_make_valid
from algokit.union_find_problems import valid_tree

min_remove_to_make_valid("lee(t(c)o)de)")             # "lee(t(c)o)de"
valid_tree(5, [[0, 1], [0, 2], [0, 3], [1, 4]])       # True
```

## What it does not do

There is no command-line program: nothing reads input from the terminal or
prints results. Everything is used by importing the modules and calling their
functions. The graph algorithms work only with unit edge weights.