"""Binary search trees of comparable values: building, traversals and comparisons."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, repr=False)
class TreeNode:
    """A binary tree node."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None

    def __repr__(self) -> str:
        return f"TreeNode({self.value!r})"

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def insert(root: TreeNode | None, value: Any) -> TreeNode:
    """Insert ``value`` into the search tree at ``root`` and return the root.

    Values equal to a node's value go into its left subtree.
    """
    new_node = TreeNode(value)
    if root is None:
        return new_node
    node = root
    while True:
        if value <= node.value:
            if node.left is None:
                node.left = new_node
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new_node
                return root
            node = node.right


def build(values: Iterable[Any]) -> TreeNode | None:
    """Build a search tree by inserting ``values`` in the order given."""
    root: TreeNode | None = None
    for value in values:
        root = insert(root, value)
    return root


def build_balanced(sorted_values: Sequence[Any]) -> TreeNode | None:
    """Build a height-balanced search tree from values in ascending order.

    The middle value of each range is inserted first, then the lower half,
    then the upper half.
    """
    root: TreeNode | None = None
    ranges = [(0, len(sorted_values) - 1)]
    while ranges:
        start, end = ranges.pop()
        if start > end:
            continue
        mid = (start + end) // 2
        root = insert(root, sorted_values[mid])
        ranges.append((mid + 1, end))
        ranges.append((start, mid - 1))
    return root


def inorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values in left, node, right order."""
    if root is None:
        return
    yield from inorder(root.left)
    yield root.value
    yield from inorder(root.right)


def inorder_iterative(root: TreeNode | None) -> Iterator[Any]:
    """Yield values in left, node, right order using an explicit stack."""
    stack: list[TreeNode] = []
    node = root
    while True:
        while node is not None:
            stack.append(node)
            node = node.left
        if not stack:
            return
        node = stack.pop()
        yield node.value
        node = node.right


def preorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values in node, left, right order."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def postorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values in left, right, node order."""
    if root is None:
        return
    yield from postorder(root.left)
    yield from postorder(root.right)
    yield root.value


def level_order(root: TreeNode | None) -> list[list[Any]]:
    """Values grouped by depth, each level read from left to right."""
    levels: list[list[Any]] = []
    queue: deque[tuple[TreeNode, int]] = deque()
    if root is not None:
        queue.append((root, 0))
    while queue:
        node, depth = queue.popleft()
        if depth == len(levels):
            levels.append([])
        levels[depth].append(node.value)
        for child in (node.left, node.right):
            if child is not None:
                queue.append((child, depth + 1))
    return levels


def height(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    return len(level_order(root))


def size(root: TreeNode | None) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in preorder(root))


def root_to_leaf_paths(root: TreeNode | None) -> list[list[Any]]:
    """Every path from the root down to a leaf, leaves taken from left to right."""
    paths: list[list[Any]] = []
    stack: list[tuple[TreeNode, list[Any]]] = []
    if root is not None:
        stack.append((root, [root.value]))
    while stack:
        node, path = stack.pop()
        if node.is_leaf:
            paths.append(path)
            continue
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, [*path, child.value]))
    return paths


def copy_tree(root: TreeNode | None) -> TreeNode | None:
    """A deep copy of the tree's structure; values are shared, nodes are new."""
    if root is None:
        return None
    return TreeNode(root.value, copy_tree(root.left), copy_tree(root.right))


def same_tree(first: TreeNode | None, second: TreeNode | None) -> bool:
    """Whether two trees have the same shape and equal values in each position."""
    pairs = [(first, second)]
    while pairs:
        a, b = pairs.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.value != b.value:
            return False
        pairs.append((a.right, b.right))
        pairs.append((a.left, b.left))
    return True