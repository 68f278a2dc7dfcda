"""Linked list nodes and the usual operations on chains of them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import zip_longest
from typing import Any


@dataclass(eq=False, repr=False)
class Node:
    """A list node; ``prev`` is only filled in for doubly linked lists."""

    data: Any
    next: Node | None = None
    prev: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def from_iterable(values: Iterable[Any]) -> Node | None:
    """Build a singly linked list holding ``values`` in order; return its head."""
    head: Node | None = None
    last: Node | None = None
    for value in values:
        node = Node(value)
        if last is None:
            head = node
        else:
            last.next = node
        last = node
    return head


def iter_nodes(head: Node | None) -> Iterator[Node]:
    """Yield the nodes of the list starting at ``head``, following ``next``."""
    node = head
    while node is not None:
        yield node
        node = node.next


def to_list(head: Node | None) -> list[Any]:
    """The values of the list starting at ``head``, in order."""
    return [node.data for node in iter_nodes(head)]


def iter_backwards(tail: Node | None) -> Iterator[Any]:
    """Yield values from ``tail`` towards the head, following ``prev``."""
    node = tail
    while node is not None:
        yield node.data
        node = node.prev


def link_backwards(head: Node | None) -> Node | None:
    """Fill in the ``prev`` links so the list becomes doubly linked; return its tail."""
    previous: Node | None = None
    for node in iter_nodes(head):
        node.prev = previous
        previous = node
    return previous


def duplicate(head: Node | None) -> Node | None:
    """A new, doubly linked copy of the list; return the copy's head."""
    copy_head: Node | None = None
    last: Node | None = None
    for node in iter_nodes(head):
        clone = Node(node.data, prev=last)
        if last is None:
            copy_head = clone
        else:
            last.next = clone
        last = clone
    return copy_head


def reverse(head: Node | None) -> Node | None:
    """Reverse the ``next`` links in place and return the new head.

    ``prev`` links are left as they were.
    """
    previous: Node | None = None
    node = head
    while node is not None:
        following = node.next
        node.next = previous
        previous = node
        node = following
    return previous


def reverse_recursive(head: Node | None) -> Node | None:
    """Reverse the ``next`` links in place by recursion and return the new head."""
    if head is None or head.next is None:
        return head
    rest = head.next
    new_head = reverse_recursive(rest)
    rest.next = head
    head.next = None
    return new_head


def lists_equal(first: Node | None, second: Node | None) -> bool:
    """Whether two lists hold equal values in the same order and have the same length."""
    missing = object()
    for a, b in zip_longest(iter_nodes(first), iter_nodes(second), fillvalue=missing):
        if a is missing or b is missing:
            return False
        if a.data != b.data:
            return False
    return True