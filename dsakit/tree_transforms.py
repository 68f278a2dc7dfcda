"""Transformations and comparisons of binary trees that depend on left/right symmetry."""

from __future__ import annotations

from typing import Any

from .bst import TreeNode, level_order


def mirror(root: TreeNode | None) -> TreeNode | None:
    """Swap the children of every node in place and return the root."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        node.left, node.right = node.right, node.left
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return root


def is_mirror(first: TreeNode | None, second: TreeNode | None) -> bool:
    """Whether ``second`` is the mirror image of ``first``: same values, sides swapped."""
    pairs = [(first, second)]
    while pairs:
        a, b = pairs.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.value != b.value:
            return False
        pairs.append((a.right, b.left))
        pairs.append((a.left, b.right))
    return True


def reverse_level_order(root: TreeNode | None) -> list[list[Any]]:
    """Levels from the deepest up to the root, each read from right to left.

    Flattened, this is the breadth-first visiting order reversed.
    """
    return [level[::-1] for level in reversed(level_order(root))]