"""Amortized analysis: a doubling dynamic array and a multi-pop stack."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from stepcount.counter import Measured, StepCounter


class DynamicArray:
    """Array that starts with capacity one and doubles whenever it is full.

    It accepts at most ``max_length`` elements; each append is one step.
    """

    def __init__(self, max_length: int) -> None:
        if max_length < 0:
            raise ValueError("maximum length must not be negative")
        self.max_length = max_length
        self.capacity = 1
        self._items: list[int] = []
        self._counter = StepCounter()

    @property
    def steps(self) -> int:
        """Total steps spent appending."""
        return self._counter.steps

    @property
    def amortized_steps(self) -> int:
        """Steps per element, rounded down."""
        if not self._items:
            raise ValueError("no elements have been appended")
        return self.steps // len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return (
            f"DynamicArray({self._items!r}, capacity={self.capacity}, "
            f"max_length={self.max_length})"
        )

    def append(self, value: int) -> None:
        """Add ``value``, doubling the capacity first if the array is full.

        Raises OverflowError once ``max_length`` elements are stored.
        """
        if len(self._items) >= self.max_length:
            raise OverflowError("dynamic array has reached its maximum length")
        self._counter.tick()
        if len(self._items) == self.capacity:
            self.capacity *= 2
        self._items.append(value)


def fill_dynamic_array(values: Iterable[int]) -> DynamicArray:
    """Return a dynamic array sized to ``values`` and filled with them."""
    items = list(values)
    array = DynamicArray(len(items))
    for value in items:
        array.append(value)
    return array


def multi_pop(
    stack: Sequence[int], k: int
) -> Measured[tuple[list[int], list[int]]]:
    """Pop ``k`` elements off the top of ``stack``.

    The stack's top is its last element. Returns the remaining stack and the
    popped elements in their stack order, bottom first; each pop is one step.
    Raises ValueError when ``k`` is negative or larger than the stack.
    """
    if k < 0:
        raise ValueError("pop count must not be negative")
    if k > len(stack):
        raise ValueError("cannot pop more elements than the stack holds")
    counter = StepCounter()
    counter.tick(k)
    top = len(stack) - k
    return counter.measured((list(stack[:top]), list(stack[top:])))