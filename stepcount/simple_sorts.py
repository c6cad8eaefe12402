"""Quadratic sorts: bubble, insertion and selection, with step counts."""

from __future__ import annotations

from collections.abc import Iterable

from stepcount.counter import Measured, StepCounter


def bubble_sort(values: Iterable[int]) -> Measured[list[int]]:
    """Return ``values`` sorted ascending; every comparison is one step."""
    items = list(values)
    counter = StepCounter()
    n = len(items)
    for done in range(n):
        for j in range(n - done - 1):
            counter.tick()
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return counter.measured(items)


def insertion_sort(values: Iterable[int]) -> Measured[list[int]]:
    """Return ``values`` sorted ascending; every element shifted is one step."""
    items = list(values)
    counter = StepCounter()
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            counter.tick()
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return counter.measured(items)


def selection_sort(values: Iterable[int]) -> Measured[list[int]]:
    """Return ``values`` sorted ascending; every comparison is one step."""
    items = list(values)
    counter = StepCounter()
    n = len(items)
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            counter.tick()
            if items[j] < items[smallest]:
                smallest = j
        items[i], items[smallest] = items[smallest], items[i]
    return counter.measured(items)