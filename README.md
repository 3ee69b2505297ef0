# algoshelf

A shelf of small, classic algorithms written as plain Python functions. It is meant
for study: each routine is short and easy to read, and it returns its result
instead of printing it.

## Installation

```
pip install .
```

To also install what the test suite needs:

```
pip install ".[test]"
```

## What is inside

Vertices are numbered from 0 throughout.

### `algoshelf.graphs`

- `bfs_order(adjacency, source)`: every vertex in breadth-first order over a square
  0/1 adjacency matrix (an entry equal to 1 is an edge). The search starts from
  `source`, then starts again from each vertex not yet reached, in index order.
- `dfs_order(adjacency_list, start)`: the vertices reachable from `start` in
  depth-first order. The adjacency list may be a mapping from vertex to neighbours
  or a sequence indexed by vertex; neighbours are explored in the order listed.
- `shortest_distances(cost, source)`: shortest distance from `source` to every
  vertex over a square cost matrix. `None` or `math.inf` marks a missing edge, the
  diagonal is ignored, and unreachable vertices get `math.inf`.

A matrix that is not square raises `ValueError`; a source vertex outside the graph
raises `IndexError`. Negative edge weights in `shortest_distances` raise
`ValueError`.

### `algoshelf.arrays`

- `max_subarray_sum(values)`: the largest sum of a contiguous run of values. The
  empty run counts, so the result is never below 0.
- `linear_search(values, target)`: index of the first element equal to `target`,
  or `None`.
- `binary_search(values, target)`: index of `target` in sorted `values`, or `None`.
- `bubble_sort`, `insertion_sort`, `quick_sort`, `counting_sort`: each returns a
  new sorted list and leaves its input alone. `counting_sort` takes non-negative
  integers only and raises `ValueError` otherwise.

### `algoshelf.numbers`

- `hcf(a, b)`: highest common factor of two non-negative integers. It returns 0 if
  either argument is 0, and raises `ValueError` for negative arguments.
- `fibonacci(n)`: the n-th Fibonacci number; values of `n` below 2 are returned
  unchanged.
- `power(x, y)`: `x` to the non-negative power `y`, by repeated squaring. A
  negative exponent raises `ValueError`.
- `ascii_value(char)`: the code of a single ASCII character. Anything other than
  exactly one ASCII character raises `ValueError`.

### `algoshelf.patterns`

These return text made of `*` characters or numbers, each line ending in a newline:

- `heart()`: a fixed heart shape.
- `left_triangle()` and `right_triangle()`: nine-row triangles, aligned left or right.
- `full_pyramid(rows)`: a centred pyramid of stars.
- `inverted_left_triangle(rows)`: a left triangle with its widest row first.
- `number_pyramid(rows)`: a pyramid whose row `i` counts up from `i` to `2i - 1`
  and back down.

### `algoshelf.bst`

`BinarySearchTree` is an unbalanced tree of integers in which equal values go to
the left. It can be built from an iterable of values and supports `insert`,
membership testing with `in`, `len()`, iteration in ascending order, `minimum` and
`maximum` (both raise `ValueError` on an empty tree), `height` (edges on the
longest root-to-leaf path, -1 when empty), and the traversals `inorder`,
`preorder` and `postorder`, each returning a list.

## Example

```python
from algoshelf.arrays import quick_sort, binary_search
from algoshelf.bst import BinarySearchTree
from algoshelf.patterns import full_pyramid

data = quick_sort([5, 3, 9, 1])
print(data)                     # [1, 3, 5, 9]
print(binary_search(data, 9))   # 3

tree = BinarySearchTree([8, 3, 10, 1, 6])
print(6 in tree, tree.height(), tree.inorder())   # True 2 [1, 3, 6, 8, 10]

print(full_pyramid(3), end="")
```

## What it does not do

The package is a library only. It has no command-line programs and does not
prompt for or read input; callers pass values in and get results back.

## Running the tests

```
pytest
```