# algolib

Classic data structures and algorithms in plain Python, with no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Data structures

- `algolib.linked_list` – `LinkedList`, a doubly linked list of `Node`s.
  It supports `len()`, iteration over values, `is_empty`, `prepend`,
  `append`, `add(value, index)`, `remove(value)` (first match), `get(index)`
  (returns the `Node`), `find(value)` (returns a **1-based** position),
  `clear` and `concat(other)`. Bad indexes raise `IndexError`; missing
  values and empty lists raise `ValueError`.
- `algolib.fifo_queue` – `Queue` with `push`, `shift`, `peek`, `is_empty`
  and `len()`. Shifting or peeking an empty queue raises `IndexError`.
- `algolib.stack` – lock-guarded `Stack` with `push`, `pop`, `peek`,
  `is_empty`, `len()` and iteration from top to bottom.
- `algolib.heap` – binary `Heap` of comparable items, made with `new_min()`
  or `new_max()`. `insert`, `extract` (raises `IndexError` when empty),
  `less`, indexing and `len()`.
- `algolib.priority_queue` – `PriorityQueue` of `Item(value, priority)`,
  made with `new_min()` or `new_max()`; `insert`, `extract` and
  `change_priority(value, priority)` (raises `KeyError` for an unknown value).
- `algolib.hash_table` – `HashTable(capacity)` with separate chaining over
  string keys: `put`, `get` (raises `KeyError`), `delete` (ignores missing
  keys), `len()` and iteration over `(key, value)` pairs. `hash_code(text)`
  is the 32-bit Horner hash (factor 31) it uses.
- `algolib.bst` – unbalanced binary search `Tree` of `Node`s: `insert`,
  `search` (raises `KeyError`), `delete` (returns whether a node was
  removed), `len()` and in-order iteration; `iter_on_tree(node, func)` calls
  a function on every node in order.
- `algolib.graph` – `DirectedGraph` and `UndirectedGraph` with weighted
  edges: `add_vertex`, `remove_vertex`, `touch_vertex`, `add_edge`,
  `remove_edge`, `is_edge`, `get_edge`, `get_neighbours`, `get_successors`,
  `get_predecessors`, `edges_iter` (yielding `Edge`s), `vertices_iter`,
  `order` and `edges_count`. `DirectedGraph.reverse()` returns a copy with
  every edge turned round, each of weight 1. Invalid operations, such as
  self loops or duplicate edges, raise `GraphError`.
- `algolib.matrix` – dense `Matrix(elements, rows, cols)` of floats with
  `m[i, j]` indexing, `diagonal`, `copy`, `trace`, `scale`, in-place `+=`
  and `-=`, and the functions `add`, `subtract` and `multiply`. Mismatched
  shapes raise `ValueError`.

## Algorithms

- `algolib.graph_search` – `bfs(graph, start, visit)`,
  `shortest_path(graph, start)` (edge counts to every reachable vertex),
  `get_dist(graph, source, target)`, `undirected_dfs` and `directed_dfs`.
- `algolib.dijkstra` – `shortest_path(graph, source)` returns, for each
  vertex reached from the source, its predecessor on a shortest path.
- `algolib.kosaraju` – `scc(graph)` returns the strongly connected
  components that hold more than one vertex.
- `algolib.topological` – `topological_sort(graph)` returns the vertices in
  topological order and raises `NotADagError` on a cycle.
- `algolib.strassen` – `multiply(a, b)` for square matrices of equal size,
  padded internally to a power of two.
- `algolib.karatsuba` – `karatsuba_multiply(a, b)` for integers.
- `algolib.fibonacci` – `fib_iter`, `fib_recursive` and `fib_matrix`.
- `algolib.power` – `fast_power(n, power)` and `slow_power(n, power)`,
  both computed modulo 2**32; a negative power raises `ValueError`.
- `algolib.newton_sqrt` – `newton_sqrt(n, precision=1e-7,
  max_iterations=1e7)` finds a square root by bisecting an interval and
  returns an exact integer when `n` is a perfect square.
- `algolib.gcd` – Stein's binary GCD (`binary_gcd_recursive`,
  `binary_gcd_iterative`), `divide` and `bezout_coefficients(a, b)`, which
  returns `(x, y)` with `x * a + y * b == gcd(|a|, |b|)`.
- `algolib.closest_pair` – `Point`, `Pair`, `distance`, `make_pair`, and the
  closest pair of points by `brute_force` or `divide_and_conquer`.
- `algolib.rselect` – `rselect(items, n, i)` returns the i-th smallest
  (0-based) of the first `n` items by random pivoting; orders below 0 or
  from `n` up are clamped to the smallest or largest.
- `algolib.primes` – `primes_up_to(n)` sieves the numbers below `n`; note
  that its result starts with 1.
- `algolib.shuffle` – Fisher–Yates `shuffle(items)`, in place.
- `algolib.inversions` – `recursive_count(items)` returns the sorted items
  and the number of inversions; `iterative_count(items)` returns the count.
- `algolib.binary_search` – `search(sorted_items, target)` returns an index
  of the target or -1.
- `algolib.sorting` – `bubble_sort`, `heap_sort`, `insertion_sort`,
  `merge_sort`, `quick_sort`, `selection_sort` and `shell_sort`; each sorts
  its list in place and returns it.

## Examples

```python
from algolib.fibonacci import fib_iter
from algolib.binary_search import search
from algolib.graph import DirectedGraph
from algolib.graph_search import get_dist

fib_iter(25)                     # 75025
search([1, 2, 3, 4, 5], 4)       # 3
search([1, 2, 3, 4, 5], 6)       # -1

g = DirectedGraph()
for v in range(4):
    g.add_vertex(v)
for v in range(3):
    g.add_edge(v, v + 1, 1)
get_dist(g, 0, 3)                # 3
```

```python
from algolib.hash_table import HashTable

table = HashTable(1000)
table.put("foo", "bar")
table.get("foo")                 # "bar"
```

## Command line

Shuffle the digits 0 to 9 and print the result:

```
algolib-shuffle
```