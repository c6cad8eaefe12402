"""Step counting shared by every algorithm in the package."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Measured(Generic[T]):
    """The result of an algorithm together with the number of steps it took."""

    result: T
    steps: int


@dataclass
class StepCounter:
    """A running tally of elementary steps."""

    steps: int = 0

    def tick(self, amount: int = 1) -> None:
        """Add ``amount`` steps to the tally."""
        if amount < 0:
            raise ValueError("step amount must not be negative")
        self.steps += amount

    def measured(self, result: T) -> Measured[T]:
        """Pair ``result`` with the steps counted so far."""
        return Measured(result, self.steps)