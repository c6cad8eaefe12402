"""Linear, binary and Knuth-Morris-Pratt search with step counts."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from stepcount.counter import Measured, StepCounter


def linear_search(values: Sequence[int], target: int) -> Measured[Optional[int]]:
    """Return the index of the first ``target`` in ``values``, or None.

    Each element examined counts as one step.
    """
    counter = StepCounter()
    for index, value in enumerate(values):
        counter.tick()
        if value == target:
            return counter.measured(index)
    return counter.measured(None)


def binary_search(values: Sequence[int], target: int) -> Measured[Optional[int]]:
    """Return an index of ``target`` in the ascending ``values``, or None.

    Each probe of a middle element counts as one step.
    """
    counter = StepCounter()
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        counter.tick()
        if values[mid] == target:
            return counter.measured(mid)
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return counter.measured(None)


def prefix_table(pattern: str) -> Measured[list[int]]:
    """Return the longest-proper-prefix-suffix table of ``pattern``.

    Each pass of the building loop counts as one step.
    """
    counter = StepCounter()
    if not pattern:
        return counter.measured([])
    table = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        counter.tick()
        if pattern[i] == pattern[length]:
            length += 1
            table[i] = length
            i += 1
        elif length:
            length = table[length - 1]
        else:
            table[i] = 0
            i += 1
    return counter.measured(table)


def kmp_search(pattern: str, text: str) -> Measured[list[int]]:
    """Return every index at which ``pattern`` starts in ``text``.

    Matches may overlap. Steps cover building the prefix table and each
    pass of the scanning loop.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    built = prefix_table(pattern)
    table = built.result
    counter = StepCounter(built.steps)
    found: list[int] = []
    n, m = len(text), len(pattern)
    i = j = 0
    while i < n:
        counter.tick()
        if pattern[j] == text[i]:
            i += 1
            j += 1
        if j == m:
            found.append(i - j)
            j = table[j - 1]
        elif i < n and pattern[j] != text[i]:
            if j:
                j = table[j - 1]
            else:
                i += 1
    return counter.measured(found)