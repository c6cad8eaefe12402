"""A 1-based array max-heap that counts the steps of its operations."""

from __future__ import annotations

from collections.abc import Iterator

from stepcount.counter import StepCounter


class MaxHeap:
    """Max-heap kept in a list whose slot 0 is unused.

    Each insertion counts one step, and each swap while sifting a value
    upward counts one more.
    """

    def __init__(self, first: int) -> None:
        self._slots: list[int] = [0, first]
        self._counter = StepCounter()

    @property
    def steps(self) -> int:
        """Steps counted over every operation so far."""
        return self._counter.steps

    def __len__(self) -> int:
        return len(self._slots) - 1

    def __iter__(self) -> Iterator[int]:
        """Yield the elements in array order, root first."""
        return iter(self._slots[1:])

    def __repr__(self) -> str:
        return f"MaxHeap({list(self)!r})"

    def _sift_up_last(self) -> None:
        slots = self._slots
        i = len(self)
        while i > 1 and slots[i] > slots[i // 2]:
            self._counter.tick()
            slots[i], slots[i // 2] = slots[i // 2], slots[i]
            i //= 2

    def insert(self, value: int) -> None:
        """Add ``value`` and restore the heap order."""
        self._counter.tick()
        self._slots.append(value)
        self._sift_up_last()

    def delete(self, position: int) -> int:
        """Remove and return the element at the 1-based ``position``.

        The last element takes the freed slot, then the element at the end
        is sifted upward once for each position from ``position`` up to half
        the new size.

        Raises IndexError when the heap is empty or the position is outside
        ``1..len(self)``.
        """
        if not len(self):
            raise IndexError("heap is empty")
        if not 1 <= position <= len(self):
            raise IndexError(f"position must be between 1 and {len(self)}")
        removed = self._slots[position]
        self._slots[position] = self._slots[-1]
        self._slots.pop()
        for _ in range(position, len(self) // 2 + 1):
            self._sift_up_last()
        return removed