# dsakit

A library of classic data structures and algorithms in plain Python, with no
runtime dependencies. Everything works on ordinary Python values: trees and
lists are built from iterables, results come back as lists, tuples or nodes,
and misuse raises an exception (`IndexError`, `KeyError`, `ValueError`, or the
queue-specific `QueueEmpty` and `QueueFull`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.binary_tree`

`BinaryTreeNode(data, left=None, right=None)` and functions on binary trees.

- `build_preorder(values)` and `build_level_order(values)` build a tree from
  integers, `-1` marking a missing child; running out of values raises
  `ValueError`.
- `preorder`, `inorder`, `postorder` return lists of values.
- `count_nodes`, `height` (nodes on the longest root-to-leaf path),
  `diameter` (edges on the longest path), `height_and_diameter`.
- `contains(root, x)`, `root_to_node_path(root, data)` (from the node up to
  the root, or `None`).
- `describe_nodes(root)` gives lines such as `1 : L2 R3`;
  `describe_level_wise(root)` gives lines such as `1:L:2,R:-1`.

### `dsakit.bst`

- `BST(values=())` with `insert`, `remove` (absent values are ignored),
  `search`, `describe`, plus `in` and in-order iteration. Equal values go to
  the left.
- On plain `BinaryTreeNode` trees: `bst_search`, `elements_in_range(root, k1, k2)`
  (ascending), `is_bst`, `bst_path`, `level_lists` (values of each level),
  `insert_duplicate_nodes`.

### `dsakit.general_tree`

`TreeNode(data, children=[])` for n-ary trees.

- `build_recursive(values)` reads `data, child count, children...` depth
  first; `build_level_order(values)` reads the root value and then, for each
  node in level order, its child count and its children's values.
- `preorder`, `postorder`, `describe`, `describe_level_wise`.
- `count_nodes`, `sum_nodes`, `height`, `count_leaves`, `contains`,
  `nodes_at_depth(root, k)`, `count_greater(root, x)`.
- `max_data_node`, `max_child_sum_node`, `next_larger(root, x)`,
  `are_identical(root1, root2)`, `replace_with_depth(root)`.

### `dsakit.queues`

- `BoundedQueue(capacity)`: circular queue; `enqueue` raises `QueueFull`
  when full.
- `DynamicQueue(capacity)`: circular queue that doubles its capacity.
- `LinkedQueue()`: linked first-in first-out queue.
- `LinkedDeque()`: doubly linked deque with `push_front`, `push_back`,
  `pop_front`, `pop_back`, `front`, `rear`.

All have `is_empty`, `len()` and iteration; reading from an empty one raises
`QueueEmpty`.

### `dsakit.dynamic_array`

`DynamicArray(values=())` starts with capacity 5 and doubles when full.
`add`, `get(i)` (raises `IndexError` out of range), `set_at(i, element)`
(replaces, appends when `i` equals the length, ignores indexes past the end),
`copy()`, and the `capacity` property.

### `dsakit.linked_list`

`Node(data, next=None)` and functions taking and returning list heads:
`from_iterable`, `to_list`, `length`, `ith`, `find`, `insert_at`,
`delete_at`, `remove_nth_from_end`, `append_last_n_to_first`,
`is_palindrome`, `remove_duplicates`, `midpoint`, `merge_sorted`,
`merge_sort`, `reverse`, `bubble_sort`, `even_after_odd`, `swap_nodes`,
`k_reverse`, `skip_m_delete_n`.

### `dsakit.stack_problems`

`is_balanced`, `has_redundant_brackets`, `count_bracket_reversals` (raises
`ValueError` for odd lengths), `stock_span`, `reverse_stack` (a list, top at
the end) and `reverse_queue` (a `collections.deque`).

### `dsakit.graphs`

- `adjacency_matrix(n, edges)` for undirected graphs.
- `path_bfs` and `path_dfs` return a path listed from `v2` back to `v1`, or
  `None`.
- `connected_components`, `count_triangles`.
- Grid searches: `has_word_path(board, word="CODINGNINJA")` (cells touching
  by edge or corner), `biggest_piece(cake)` (largest edge-joined group of 1s),
  `has_colour_cycle(board)`.

### `dsakit.hashing`

- `ChainedMap()`: string-keyed map using separate chaining, starting with 5
  buckets and doubling past a load factor of 0.7. `insert`, `get`, `remove`
  (both raise `KeyError` when absent), plus `[]`, `del`, `in`, `len()` and
  iteration over keys.
- `remove_duplicates`, `highest_frequency`, `unique_chars`,
  `count_zero_sum_pairs`, `intersection`, `longest_zero_sum_length`,
  `pairs_with_difference`, `longest_consecutive_sequence`.

### `dsakit.algorithms`

`DisjointSet(n)` over `0..n` with `find` and `union` (union by rank);
`fibonacci(n)` by matrix exponentiation; `count_scc(n, adj)` (Kosaraju);
`count_inversions`; `kmp_prefix` and `kmp_contains`;
`count_good_substrings(s, good, max_bad)`.

### `dsakit.fraction`

`Fraction(numerator, denominator)` with `+`, `+=`, `==`, `simplify()`,
`increment()` (adds one in place) and `post_increment()` (adds one, returns
the former value).

### `dsakit.trie`

`Trie()` for words of the letters a to z: `insert`, `search`, `remove`,
`pattern_match(words, pattern)` (stores every suffix of the words),
`autocomplete(words, pattern)` (stored words beginning with `pattern`, in
alphabetical order), plus `in` and iteration.

## Examples

```python
from dsakit.binary_tree import build_level_order, inorder, height_and_diameter

root = build_level_order([1, 2, 3, 4, 5, 6, 7, -1, -1, -1, -1, 8, 9, -1, -1, -1, -1, -1, -1])
print(inorder(root))              # [4, 2, 5, 1, 8, 6, 9, 3, 7]
print(height_and_diameter(root))  # (4, 5)
```

```python
from dsakit.bst import BST

tree = BST([8, 3, 10, 1, 6])
tree.remove(3)
print(tree.search(6))  # True
print(list(tree))      # [1, 6, 8, 10]
```

```python
from dsakit.trie import Trie

trie = Trie()
trie.insert("apple")
print(trie.search("apple"))  # True
```

```python
from dsakit.stack_problems import is_balanced, stock_span

print(is_balanced("{[()]}"))                          # True
print(stock_span([60, 70, 80, 100, 90, 75, 80, 120]))  # [1, 2, 3, 4, 1, 1, 2, 8]
```

## What it does not do

dsakit is a library only: it has no command-line program and does not read
input interactively. Trees, lists and graphs are built from Python values you
pass in, and results are returned rather than printed.