from collections import Counter

import pytest

from dsakit.sequences import (
    has_pair_with_sum,
    sort_by_name,
    sorted_unique_pairs,
    word_frequencies,
)

DATA = [1, 3, 5, 2, -1, 21]


@pytest.mark.parametrize("target", [4, 0, 26, 8, 20, 6])
def test_has_pair_with_sum_found(target):
    assert has_pair_with_sum(DATA, target) is True


def test_has_pair_with_sum_does_not_reuse_one_element():
    assert has_pair_with_sum([2], 4) is False
    assert has_pair_with_sum([2, 2], 4) is True


def test_has_pair_with_sum_empty():
    assert has_pair_with_sum([], 0) is False


def test_has_pair_with_sum_accepts_generator():
    assert has_pair_with_sum((v for v in DATA), 4) is True


def test_word_frequencies_source_sentence():
    text = "geeks for geeks geeks quiz practice qa for"
    counts = word_frequencies(text)
    assert counts["geeks"] == 3
    assert counts["for"] == 2
    assert counts["quiz"] == 1
    assert set(counts) == {"geeks", "for", "quiz", "practice", "qa"}
    assert sum(counts.values()) == len(text.split())


def test_word_frequencies_ignores_extra_whitespace():
    assert word_frequencies("  a\tb \n a  ") == Counter({"a": 2, "b": 1})


def test_word_frequencies_empty():
    assert word_frequencies("") == Counter()


def test_sort_by_name_source_data():
    ages = [23, 32, 43, 12, 2, 34]
    names = ["om", "Shree", "Ganesha", "Namah", "Jsi", "Bajarangbali"]
    pairs = list(zip(ages, names))
    result = sort_by_name(pairs)
    assert [name for _, name in result] == [
        "Bajarangbali",
        "Ganesha",
        "Jsi",
        "Namah",
        "Shree",
        "om",
    ]
    assert sorted(result) == sorted(pairs)
    assert dict((name, age) for age, name in result) == dict(zip(names, ages))


def test_sort_by_name_keeps_order_of_equal_names():
    pairs = [(5, "b"), (1, "a"), (3, "b"), (2, "a")]
    assert sort_by_name(pairs) == [(1, "a"), (2, "a"), (5, "b"), (3, "b")]


def test_sort_by_name_does_not_modify_input():
    pairs = [(1, "z"), (2, "a")]
    sort_by_name(pairs)
    assert pairs == [(1, "z"), (2, "a")]


def test_sorted_unique_pairs_source_data():
    pairs = [
        ("c", "k"), ("b", "c"), ("a", "d"), ("b", "a"), ("a", "b"),
        ("b", "b"), ("a", "c"), ("c", "d"), ("c", "c"),
        ("a", "k"), ("a", "e"), ("a", "l"),
    ]
    result = sorted_unique_pairs(pairs)
    assert len(result) == len(pairs)
    assert set(result) == set(pairs)
    assert all(earlier < later for earlier, later in zip(result, result[1:]))
    assert result[0] == ("a", "b")
    assert result[-1] == ("c", "k")


def test_sorted_unique_pairs_drops_duplicates():
    result = sorted_unique_pairs([("b", "a"), ("a", "z"), ("b", "a"), ("a", "a")])
    assert result == [("a", "a"), ("a", "z"), ("b", "a")]


def test_sorted_unique_pairs_empty():
    assert sorted_unique_pairs([]) == []