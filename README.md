# dsbook

A collection of classic data structures and algorithms in plain Python, meant
for studying how they work. It has no runtime dependencies and needs
Python 3.10 or later.

## What is inside

- `dsbook.introduction`: array exercises such as `sum_array`,
  `sequential_search`, `binary_search`, `rotate_array`, `max_sub_array_sum`
  (Kadane's algorithm), `wave_array`, the `smallest_positive_missing_number`
  variants, `max_circular_sum`, `max_path_sum`, plus `factorial`, `gcd`,
  `fibonacci`, `format_int`, `tower_of_hanoi` and `permutations` (the last
  two are generators).
- `dsbook.recursion`: `n_queens` (yields one column tuple per solution),
  `towers_of_hanoi`, `fibonacci` and `fibonacci_iterative` (counting from 1,
  so `fibonacci(1) == 0`) and `is_prime`.
- `dsbook.graph`: an adjacency-list `Graph` with `dfs`, `dfs_stack`, `bfs`,
  `topological_sort`, `all_paths`, `count_all_path`, `transitive_closure`,
  `bfs_level_node`, `bfs_distance`, cycle checks, `transpose`,
  `strongly_connected_components`, `is_strongly_connected` and the Euler
  checks `is_eulerian` (returning an `Eulerian` value) and
  `is_eulerian_cycle`; also `tree_height` and `tree_height_bfs` for parent
  arrays.
- `dsbook.graph_paths`: `dijkstra`, `prims`, `shortest_path` (fewest edges),
  `bellman_ford` and `best_first_search` over a `Graph`. All but the last
  return one `Route(vertex, previous, distance)` per vertex; `distance` is
  `None` for unreachable vertices.
- `dsbook.graph_matrix`: an adjacency-matrix `MatrixGraph` with `dijkstra`,
  `prims`, `hamiltonian_path` and `hamiltonian_cycle` (each returning a list
  of vertices or `None`).
- `dsbook.heap`: a binary `Heap` (min or max, chosen by `is_min`) with `add`,
  `remove`, `peek` and `to_list`; `heap_sort` sorts a list in place;
  `is_min_heap` and `is_max_heap` check an array. Taking from an empty heap
  raises `HeapEmptyError`.
- `dsbook.median_heap`: `MedianHeap`, a running median over two heaps.
- `dsbook.count_map`: `CountMap`, counting how often each key was added.
- `dsbook.hash_table`: `HashTable`, open addressing with lazy deletion.
  `get` raises `KeyError` for a missing key; `add` returns `False` when the
  table is full.
- `dsbook.hash_table_chaining`: `ChainedHashTable`, separate chaining with
  23 buckets by default.
- `dsbook.hash_exercises`: `is_anagram`, `remove_duplicate`, `find_missing`,
  `repeating`, `first_repeating` and `horner_hash`.
- `dsbook.queues`: `ArrayQueue` (fixed capacity, circular array),
  `LinkedQueue`, `StackQueue` (two stacks), `TwoStack` (two stacks sharing
  one array), and the deque-backed `DequeQueue` and `DequeStack`. They raise
  `QueueEmptyError`, `QueueFullError`, `StackEmptyError` and
  `StackFullError`.
- `dsbook.queue_exercises`: `circular_tour`, `convert_xy` and the
  sliding-window problems `max_sliding_windows`,
  `min_of_max_sliding_windows`, `max_of_min_sliding_windows` and
  `first_neg_sliding_windows`.

## Installing

```
pip install .
```

## Examples

```python
from dsbook.graph import Graph
from dsbook.graph_paths import dijkstra
from dsbook.heap import heap_sort
from dsbook.median_heap import MedianHeap

graph = Graph(4)
graph.add_directed_edge(0, 1, 1)
graph.add_directed_edge(1, 2, 1)
graph.add_directed_edge(2, 3, 1)
print(graph.path_exist(0, 3))      # True
print(graph.topological_sort())    # [0, 1, 2, 3]
for route in dijkstra(graph, 0):
    print(route.vertex, route.previous, route.distance)

values = [1, 9, 6, 7, 8, -1, 2, 4, 5, 3]
heap_sort(values, True)            # sorts in place
print(values)                      # [-1, 1, 2, 3, 4, 5, 6, 7, 8, 9]

median = MedianHeap()
for value in (1, 9, 2):
    median.insert(value)
print(median.median())             # 2
```

## What it does not provide

There are no linked list types in the package: no singly, doubly or
circular linked lists. The only node-based structure is `LinkedQueue` in
`dsbook.queues`. There is no command-line program; everything is used as a
library.

## Running the tests

```
pip install .[test]
pytest
```