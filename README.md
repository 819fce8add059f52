# algobox

Classic algorithms and data structures as plain Python functions and classes.
Standard library only; Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests, install the test extra:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algobox.sorting` | `bubble_sort`, `selection_sort`, `heap_sort`, `is_sorted` |
| `algobox.searching` | `binary_search`, `prefix_function`, `kmp_search`, `find_triplet`, `trapped_water`, `longest_consecutive_run`, `largest`, `has_subset_sum` |
| `algobox.numbers` | `ComplexNumber`, `is_armstrong`, `fibonacci`, `primes_up_to`, `sompal_answer` |
| `algobox.strings` | `is_palindrome`, `replace_pi`, `to_morse`, `unique_morse_representations` |
| `algobox.backtracking` | `solve_n_queens`, `solve_n_queens_by_column`, `first_n_queens`, `graph_coloring`, `rat_in_maze`, `solve_sudoku`, `flood_fill` |
| `algobox.knapsack` | `knapsack`, `min_coins`, `coin_change_ways`, `unbounded_knapsack`, `cut_rod` |
| `algobox.graphs` | `Graph`, `adjacency_matrix`, `adjacency_list`, `bfs_order`, `dfs_order`, `bfs_distances` |
| `algobox.weighted` | `ShortestPaths`, `DisjointSet`, `Edge`, `dijkstra_paths`, `dijkstra_distances`, `prim_mst`, `cheapest_edges` |
| `algobox.linkedlist` | `Node`, `LinkedList`, `from_values`, `to_values`, `add_numbers`, `intersection`, `cycle_start`, `merge_sorted`, `middle`, `remove_nth_from_end`, `reverse` |
| `algobox.bloom` | `BloomFilter` |

The sorting functions return new lists and leave their input alone, as do
`solve_sudoku` and `flood_fill`. Functions that find nothing return `None`
(`find_triplet`, `min_coins`, `graph_coloring`, `solve_sudoku`,
`first_n_queens`) or `-1` (`binary_search`); bad arguments raise `ValueError`
or `IndexError`.

## Examples

```python
from algobox.sorting import heap_sort
from algobox.searching import binary_search, kmp_search
from algobox.knapsack import knapsack, coin_change_ways
from algobox.backtracking import solve_n_queens

heap_sort([22, 19, 3, 25, 26, 7])             # [3, 7, 19, 22, 25, 26]
binary_search([1, 4, 9, 16, 25], 16)          # 3
kmp_search("abababa", "aba")                  # [0, 2, 4]
knapsack([1, 2, 4, 5], [5, 4, 8, 6], 5)       # 13
coin_change_ways(5, [1, 2, 5])                # 4
len(solve_n_queens(4))                        # 2
```

### Graphs

The free functions in `algobox.graphs` number vertices from 1 to n; an
adjacency matrix for n vertices has n + 1 rows and columns, the first unused.
`Graph` is directed and numbers its vertices from 0.

```python
from algobox.graphs import Graph, adjacency_matrix, bfs_order, dfs_order

edges = [(1, 2), (1, 3), (2, 4), (3, 4), (4, 5), (4, 6)]
matrix = adjacency_matrix(6, edges)
bfs_order(matrix, 1)                          # [1, 2, 3, 4, 5, 6]
dfs_order(matrix, 1)                          # [1, 2, 4, 3, 5, 6]

g = Graph(6)
for v, w in [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]:
    g.add_edge(v, w)
g.topological_sort()                          # [5, 4, 2, 3, 1, 0]
```

`algobox.weighted` works on square cost matrices numbered from 0. In
`dijkstra_paths` and `dijkstra_distances` a zero entry means no edge and
unreachable vertices get an infinite distance; in `prim_mst` entries of
`NO_EDGE` (999) or more mean no edge.

### Linked lists

```python
from algobox.linkedlist import LinkedList, from_values, to_values, reverse

items = LinkedList([1, 2, 3])
items.push_front(0)
list(items)                                   # [0, 1, 2, 3]
items.pop_back()                              # 3

to_values(reverse(from_values([5, 2, 3, 1, 4])))   # [4, 1, 3, 2, 5]
```

### Bloom filter

```python
from algobox.bloom import BloomFilter

bloom = BloomFilter(32)
bloom.check_and_add("apple")                  # False: surely absent, now added
"apple" in bloom                              # True
```

## What it does not do

algobox is a library only: it has no command-line programs and reads nothing
from standard input. There is no general-purpose hash table; `BloomFilter`
is the only hashing structure in the package.