"""Checks on singly linked lists: cycle detection and palindromes."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .linked_list import Node, from_iterable, iter_nodes


def from_iterable_with_cycle(values: Iterable[Any], position: int) -> Node:
    """Build a list of ``values`` whose tail links back to the node at ``position``."""
    head = from_iterable(values)
    if head is None:
        raise ValueError("cannot make a cycle in an empty list")
    nodes = list(iter_nodes(head))
    if not 0 <= position < len(nodes):
        raise IndexError(f"position {position} is out of range ({len(nodes)})")
    nodes[-1].next = nodes[position]
    return head


def find_cycle_start(head: Node | None) -> Node | None:
    """The node where the list's cycle begins, or None if the list ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            start = head
            while start is not fast:
                start = start.next
                fast = fast.next
            return start
    return None


def has_cycle(head: Node | None) -> bool:
    """Whether following ``next`` from ``head`` loops forever."""
    return find_cycle_start(head) is not None


def is_palindrome(head: Node | None) -> bool:
    """Whether the list reads the same forwards and backwards.

    Walks the list once, stacking the first half's values while a second
    pointer runs at double speed to find the middle.
    """
    if has_cycle(head):
        raise ValueError("list has a cycle")
    first_half: list[Any] = []
    slow = fast = head
    while fast is not None and fast.next is not None:
        first_half.append(slow.data)
        slow = slow.next
        fast = fast.next.next
    if fast is not None:
        slow = slow.next
    for node in iter_nodes(slow):
        if node.data != first_half.pop():
            return False
    return True