# dsakit

Plain-Python implementations of classic data structures and algorithms. The package
has no runtime dependencies. Every function returns its result and prints nothing.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Contents

| Module | Contents |
| --- | --- |
| `dsakit.graph` | `Graph`, a weighted directed graph on the integers `0 .. len(graph) - 1`, plus `Edge` and `DuplicateEdgeError`. It provides `add_vertex`, `add_edge`, `add_undirected_edge`, `has_edge`, `weight`, `neighbours`, `edges`, `transpose`, `dfs`, `bfs` and `is_strongly_connected`. |
| `dsakit.shortest_paths` | `dijkstra`, `bellman_ford`, the `ShortestPaths` result with `path_to`, and `NegativeCycleError` |
| `dsakit.linked_list` | `Node`, plus `from_iterable`, `iter_nodes`, `to_list`, `iter_backwards`, `link_backwards`, `duplicate`, `reverse`, `reverse_recursive` and `lists_equal` |
| `dsakit.list_checks` | `from_iterable_with_cycle`, `find_cycle_start`, `has_cycle` and `is_palindrome` |
| `dsakit.bst` | `TreeNode`, plus `insert`, `build`, `build_balanced`, `inorder`, `inorder_iterative`, `preorder`, `postorder`, `level_order`, `height`, `size`, `root_to_leaf_paths`, `copy_tree` and `same_tree` |
| `dsakit.tree_transforms` | `mirror`, `is_mirror` and `reverse_level_order` |
| `dsakit.weighted_tree` | `WeightedNode` (with `add_child` and `is_leaf`), `leaf_costs` and `find_min_leaf` |
| `dsakit.sequences` | `has_pair_with_sum`, `word_frequencies`, `sort_by_name` and `sorted_unique_pairs` |

## Examples

### Graphs and shortest paths

```python
from dsakit.graph import Graph
from dsakit.shortest_paths import dijkstra, bellman_ford

g = Graph(3)
g.add_edge(0, 1, 4)
g.add_edge(1, 2, 8)
g.add_edge(0, 2, 15)

g.bfs(0)                     # [0, 1, 2]
g.is_strongly_connected()    # False: nothing leads back to 0

result = dijkstra(g, 0)
result.distances             # (0, 4, 12)
result.path_to(2)            # [0, 1, 2]

bellman_ford(g, 0)           # raises NegativeCycleError if a negative cycle is reachable
```

Adding an edge that already exists raises `DuplicateEdgeError`. `dijkstra` raises
`ValueError` if any edge has a negative weight. Unreachable vertices have distance
`math.inf` and predecessor `None`.

### Binary search trees

```python
from dsakit import bst
from dsakit.tree_transforms import mirror, is_mirror

root = bst.build([76, 3, 101, 987, 2, 99, 7, 10])
list(bst.inorder(root))      # [2, 3, 7, 10, 76, 99, 101, 987]
bst.height(root)             # 4
bst.root_to_leaf_paths(root)

copy = bst.copy_tree(root)
mirror(copy)
is_mirror(root, copy)        # True
```

When a value equals a node's value, `insert` puts it in that node's left subtree.

### Linked lists

```python
from dsakit.linked_list import from_iterable, reverse, to_list
from dsakit.list_checks import from_iterable_with_cycle, has_cycle, is_palindrome

head = from_iterable([1, 2, 3, 2, 1])
is_palindrome(head)          # True
to_list(reverse(head))       # [1, 2, 3, 2, 1]

looped = from_iterable_with_cycle([1, 2, 3, 4, 5], 2)
has_cycle(looped)            # True
```

### Weighted trees

```python
from dsakit.weighted_tree import WeightedNode, find_min_leaf

root = WeightedNode("A")
b = root.add_child(4, WeightedNode("B"))
d = root.add_child(5, WeightedNode("D"))
b.add_child(6, WeightedNode("E"))
d.add_child(1, WeightedNode("H"))
find_min_leaf(root).label    # "H"
```

## Not included

This is a library only. It has no command-line program and no prefix-tree (trie)
structure, and it does not store anything on disk.