# algolab

Classic algorithms as plain Python functions: backtracking, brute-force
searching, divide and conquer, dynamic programming and greedy methods.
It has no runtime dependencies.

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
| `algolab.backtracking` | `n_queens_solutions` (generator of queen columns per row), `solve_n_queens` (first 0/1 board or `None`), `hamiltonian_cycle`, `permutations_with_repetition`, `permutations` |
| `algolab.strings` | brute-force matching: `find_all`, `find_first`, `find_reversed`, `reverse_search`, `reverse_substring`, `skip_search`, `skip_count`, `growing_skip_search`, `growing_skip_count` |
| `algolab.geometry` | `Point` (with `distance`), `closest_pair`, `farthest_pair`, `convex_hull_edges`, `most_central_point`, `most_remote_point`, `sort_by_x`, `closest_pair_divide_and_conquer` |
| `algolab.sorting` | `binary_search`, `merge_sort`, `quick_sort` |
| `algolab.fibonacci` | `fibonacci`, `fibonacci_table`, `count_stair_ways` |
| `algolab.knapsack` | `Item`, `knapsack`, `knapsack_table`, `unbounded_knapsack`, `fractional_knapsack` |
| `algolab.coins` | `count_ways`, `min_coins` |
| `algolab.subset_sum` | `has_subset_sum`, `count_subsets` |
| `algolab.chain` | `matrix_chain_cost`, `matrix_chain_table`, `optimal_bst_cost` |
| `algolab.sequences` | `count_dice_ways`, `shortest_common_supersequence_length` |
| `algolab.graphs` | `Edge`, `ShortestPath`, `dijkstra`, `kruskal`, `prim` |
| `algolab.huffman` | `HuffmanNode`, `build_huffman_tree`, `huffman_codes` |
| `algolab.merging` | `optimal_merge_cost` |

Points and knapsack items may be given as `Point`/`Item` objects or as plain
tuples. Graph functions take an adjacency matrix in which `0` means "no edge"
and vertices are numbered from 0. Results that may not exist (a search miss,
an unsolvable board, an amount no coins can make) come back as `None`;
invalid input such as a negative size, an empty pattern or a non-square
matrix raises `ValueError`.

## Examples

Matrix chain multiplication, given the dimension list of the chain:

```python
from algolab.chain import matrix_chain_cost

matrix_chain_cost([10, 20, 30, 40])  # 18000
```

The cheapest way to merge sorted files of the given sizes, two at a time:

```python
from algolab.merging import optimal_merge_cost

optimal_merge_cost([25, 15, 5, 10, 12, 9, 7, 6, 4])  # 276
```

The shortest string that has both inputs as subsequences:

```python
from algolab.sequences import shortest_common_supersequence_length

shortest_common_supersequence_length("AGGTAB", "GXTXAYB")  # 9
```

Sorting and searching:

```python
from algolab.sorting import binary_search, merge_sort

data = merge_sort([5, 2, 9, 1])  # [1, 2, 5, 9]
binary_search(data, 9)           # 3
binary_search(data, 4)           # None
```

Minimum spanning trees come back as lists of `Edge(u, v, weight)`:

```python
from algolab.graphs import prim

prim([[0, 2, 3], [2, 0, 1], [3, 1, 0]])
# [Edge(u=0, v=1, weight=2), Edge(u=1, v=2, weight=1)]
```

## What it does not do

The package is a library only. It has no command-line program, does not
read problem data from a terminal or file, and prints nothing; call the
functions from your own code and use the values they return.