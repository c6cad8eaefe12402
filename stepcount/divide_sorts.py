"""Divide-and-conquer sorts: merge, quick and heap sort, with step counts."""

from __future__ import annotations

from collections.abc import Iterable

from stepcount.counter import Measured, StepCounter


def merge_sort(values: Iterable[int]) -> Measured[list[int]]:
    """Return ``values`` sorted ascending.

    Each split of a range into halves counts as one step, and so does each
    element written back while merging.
    """
    items = list(values)
    counter = StepCounter()

    def merge(low: int, mid: int, high: int) -> None:
        left = items[low : mid + 1]
        right = items[mid + 1 : high + 1]
        li = ri = 0
        k = low
        while li < len(left) and ri < len(right):
            counter.tick()
            if left[li] <= right[ri]:
                items[k] = left[li]
                li += 1
            else:
                items[k] = right[ri]
                ri += 1
            k += 1
        for value in (*left[li:], *right[ri:]):
            counter.tick()
            items[k] = value
            k += 1

    def split(low: int, high: int) -> None:
        if low < high:
            mid = (low + high) // 2
            counter.tick()
            split(low, mid)
            split(mid + 1, high)
            merge(low, mid, high)

    split(0, len(items) - 1)
    return counter.measured(items)


def quick_sort(values: Iterable[int]) -> Measured[list[int]]:
    """Return ``values`` sorted ascending, partitioning on the last element.

    Each comparison against the pivot counts as one step, and so does each
    partitioning of a range.
    """
    items = list(values)
    counter = StepCounter()

    def partition(low: int, high: int) -> int:
        pivot = items[high]
        i = low - 1
        for j in range(low, high):
            counter.tick()
            if items[j] < pivot:
                i += 1
                items[i], items[j] = items[j], items[i]
        items[i + 1], items[high] = items[high], items[i + 1]
        return i + 1

    def sort(low: int, high: int) -> None:
        if low < high:
            pivot_index = partition(low, high)
            counter.tick()
            sort(low, pivot_index - 1)
            sort(pivot_index + 1, high)

    sort(0, len(items) - 1)
    return counter.measured(items)


def heap_sort(values: Iterable[int]) -> Measured[list[int]]:
    """Return ``values`` sorted ascending by building a max-heap.

    Each sift-down visit of a node counts as one step, and so does each pass
    of the build and extraction loops.
    """
    items = list(values)
    counter = StepCounter()

    def sift_down(size: int, root: int) -> None:
        while True:
            counter.tick()
            largest = root
            left, right = 2 * root + 1, 2 * root + 2
            if left < size and items[left] > items[largest]:
                largest = left
            if right < size and items[right] > items[largest]:
                largest = right
            if largest == root:
                return
            items[root], items[largest] = items[largest], items[root]
            root = largest

    n = len(items)
    for root in range(n // 2 - 1, -1, -1):
        counter.tick()
        sift_down(n, root)
    for end in range(n - 1, 0, -1):
        counter.tick()
        items[0], items[end] = items[end], items[0]
        sift_down(end, 0)
    return counter.measured(items)