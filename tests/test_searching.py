import math

import pytest

from stepcount.searching import binary_search, kmp_search, linear_search, prefix_table


def _occurrences(pattern, text):
    found = []
    start = text.find(pattern)
    while start != -1:
        found.append(start)
        start = text.find(pattern, start + 1)
    return found


@pytest.mark.parametrize(
    "values,target",
    [([4, 8, 15, 16, 23, 42], 4), ([4, 8, 15, 16, 23, 42], 23), ([7, 7, 7], 7), ([9, 1, 9], 9)],
)
def test_linear_search_finds_first(values, target):
    outcome = linear_search(values, target)
    assert outcome.result == values.index(target)
    assert outcome.steps == values.index(target) + 1


@pytest.mark.parametrize("values", [[], [1, 2, 3], [5]])
def test_linear_search_missing(values):
    outcome = linear_search(values, 99)
    assert outcome.result is None
    assert outcome.steps == len(values)


@pytest.mark.parametrize("target", [1, 3, 5, 8, 13, 21, 34])
def test_binary_search_finds_every_element(target):
    values = [1, 3, 5, 8, 13, 21, 34]
    outcome = binary_search(values, target)
    assert values[outcome.result] == target
    assert 1 <= outcome.steps <= math.floor(math.log2(len(values))) + 1


def test_binary_search_middle_takes_one_probe():
    values = list(range(0, 101))
    outcome = binary_search(values, 50)
    assert outcome.result == 50
    assert outcome.steps == 1


@pytest.mark.parametrize("target", [0, 4, 100])
def test_binary_search_missing(target):
    values = [1, 3, 5, 8, 13]
    outcome = binary_search(values, target)
    assert outcome.result is None
    assert outcome.steps <= math.floor(math.log2(len(values))) + 1


def test_binary_search_empty():
    outcome = binary_search([], 3)
    assert outcome.result is None
    assert outcome.steps == 0


def test_prefix_table_repeated_letter():
    outcome = prefix_table("AAAA")
    assert outcome.result == [0, 1, 2, 3]
    assert outcome.steps == 3


def test_prefix_table_alternating():
    assert prefix_table("ABAB").result == [0, 0, 1, 2]


@pytest.mark.parametrize("pattern", ["ABCDABD", "AABAACAABAA", "abcabcabc", "xyz"])
def test_prefix_table_entries_are_prefix_suffixes(pattern):
    table = prefix_table(pattern).result
    assert len(table) == len(pattern)
    for end, length in enumerate(table):
        assert 0 <= length <= end
        assert pattern[:length] == pattern[end + 1 - length : end + 1]


def test_prefix_table_empty_pattern():
    outcome = prefix_table("")
    assert outcome.result == []
    assert outcome.steps == 0


def test_kmp_overlapping_matches():
    assert kmp_search("AA", "AAAA").result == [0, 1, 2]


@pytest.mark.parametrize(
    "pattern,text",
    [
        ("ABABCABAB", "ABABDABACDABABCABAB"),
        ("abc", "abcabcabc"),
        ("aab", "aaabaabaab"),
        ("zz", "abcdef"),
        ("longpattern", "short"),
        ("x", "xxyxx"),
    ],
)
def test_kmp_agrees_with_str_find(pattern, text):
    assert kmp_search(pattern, text).result == _occurrences(pattern, text)


@pytest.mark.parametrize("pattern,text", [("ABAB", "ABABABAB"), ("abc", "xxabcxxabc")])
def test_kmp_steps_are_linear(pattern, text):
    outcome = kmp_search(pattern, text)
    assert outcome.steps >= len(text)
    assert outcome.steps <= 2 * (len(text) + len(pattern))


def test_kmp_rejects_empty_pattern():
    with pytest.raises(ValueError):
        kmp_search("", "text")