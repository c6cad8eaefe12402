"""Non-comparison sorts: counting sort and least-significant-digit radix sort."""

from __future__ import annotations

from collections.abc import Iterable

from stepcount.counter import Measured, StepCounter


def count_sort(values: Iterable[int]) -> Measured[list[int]]:
    """Return the non-negative ``values`` sorted ascending.

    Steps are one per counter slot cleared, one per element tallied, one per
    running sum, one per element placed and one per element copied back.
    """
    items = list(values)
    counter = StepCounter()
    if not items:
        return counter.measured(items)
    if any(value < 0 for value in items):
        raise ValueError("count sort needs non-negative values")
    largest = max(items)

    counts = [0] * (largest + 1)
    counter.tick(largest + 1)

    for value in items:
        counts[value] += 1
        counter.tick()

    for i in range(1, largest + 1):
        counts[i] += counts[i - 1]
        counter.tick()

    placed = [0] * len(items)
    for value in reversed(items):
        counts[value] -= 1
        placed[counts[value]] = value
        counter.tick()

    counter.tick(len(placed))
    return counter.measured(placed)


def _digit(value: int, place: int) -> int:
    """Digit of ``value`` at ``place`` with truncating division, sign kept."""
    magnitude = abs(value) // place % 10
    return -magnitude if value < 0 else magnitude


def _stable_order(digits: list[int], counter: StepCounter) -> list[int]:
    """Indices of ``digits`` in ascending order, earliest first among equals.

    Each selection round is one step, and so is each improvement of the
    current minimum within a round.
    """
    used = [False] * len(digits)
    order: list[int] = []
    for _ in digits:
        counter.tick()
        best = used.index(False)
        for j, digit in enumerate(digits):
            if not used[j] and digits[best] > digit:
                counter.tick()
                best = j
        used[best] = True
        order.append(best)
    return order


def radix_sort(values: Iterable[int]) -> Measured[list[int]]:
    """Return ``values`` sorted by decimal digits, least significant first.

    Passes run while the largest value still has digits at the current
    place. Each pass counts one step, plus one per digit extracted and the
    steps of ordering the digits.
    """
    items = list(values)
    counter = StepCounter()
    if not items:
        return counter.measured(items)
    largest = max(items)
    place = 1
    while largest // place > 0:
        counter.tick()
        digits = []
        for value in items:
            counter.tick()
            digits.append(_digit(value, place))
        order = _stable_order(digits, counter)
        items = [items[i] for i in order]
        place *= 10
    return counter.measured(items)