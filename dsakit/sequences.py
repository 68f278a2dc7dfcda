"""Small sequence and collection routines: pair sums, word counts and pair sorting."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable
from typing import Any


def has_pair_with_sum(values: Iterable[int], target: int) -> bool:
    """Whether two distinct positions in ``values`` hold numbers adding up to ``target``.

    Works in one pass by remembering the complement each value still needs.
    """
    needed: set[int] = set()
    for value in values:
        if value in needed:
            return True
        needed.add(target - value)
    return False


def word_frequencies(text: str) -> Counter[str]:
    """How often each whitespace-separated word appears in ``text``."""
    return Counter(text.split())


def sort_by_name(pairs: Iterable[tuple[Any, str]]) -> list[tuple[Any, str]]:
    """Pairs of (value, name) ordered by name; pairs with equal names keep their order."""
    return sorted(pairs, key=lambda pair: pair[1])


def sorted_unique_pairs(
    pairs: Iterable[tuple[Hashable, Hashable]],
) -> list[tuple[Hashable, Hashable]]:
    """Distinct pairs ordered by their first item and then by their second."""
    return sorted(set(pairs), key=lambda pair: (pair[0], pair[1]))