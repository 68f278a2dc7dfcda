"""N-ary trees with weighted edges, and the search for the cheapest leaf."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class WeightedNode:
    """A tree node whose edges to its children each carry a non-negative cost."""

    label: Any = None
    children: list[tuple[int, WeightedNode]] = field(default_factory=list)

    def add_child(self, cost: int, child: WeightedNode) -> WeightedNode:
        """Attach ``child`` through an edge of ``cost`` and return the child."""
        if cost < 0:
            raise ValueError(f"edge cost cannot be negative: {cost}")
        self.children.append((cost, child))
        return child

    def is_leaf(self) -> bool:
        """Whether the node has no children."""
        return not self.children


def leaf_costs(root: WeightedNode | None) -> list[tuple[int, WeightedNode]]:
    """Each leaf with the total cost of the path from the root, in depth-first order."""
    found: list[tuple[int, WeightedNode]] = []
    stack = [(0, root)] if root is not None else []
    while stack:
        cost, node = stack.pop()
        if node.is_leaf():
            found.append((cost, node))
            continue
        stack.extend((cost + edge, child) for edge, child in reversed(node.children))
    return found


def find_min_leaf(root: WeightedNode | None) -> WeightedNode | None:
    """The leaf reached by the cheapest path from the root, or None for no tree.

    Paths already costlier than the best leaf found are not followed; on a
    tie the leaf met first in depth-first order wins.
    """
    best: WeightedNode | None = None
    best_cost = math.inf
    stack = [(0, root)] if root is not None else []
    while stack:
        cost, node = stack.pop()
        if cost >= best_cost:
            continue
        if node.is_leaf():
            best, best_cost = node, cost
            continue
        stack.extend(
            (cost + edge, child)
            for edge, child in reversed(node.children)
            if cost + edge < best_cost
        )
    return best