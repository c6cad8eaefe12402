"""Fibonacci series, computed iteratively and by naive recursion."""

from __future__ import annotations

from stepcount.counter import Measured, StepCounter


def fibonacci_iterative(n: int) -> Measured[list[int]]:
    """Return the first terms of the series and one step per term produced.

    The first two terms are always produced, whatever ``n`` is.
    """
    counter = StepCounter()
    a, b = 0, 1
    counter.tick(2)
    terms = [a, b]
    for _ in range(2, n):
        counter.tick()
        a, b = b, a + b
        terms.append(b)
    return counter.measured(terms)


def fibonacci_recursive(n: int) -> Measured[list[int]]:
    """Return the first ``n`` terms, each computed by naive recursion.

    Every call of the recursive function counts as one step, summed over
    all ``n`` terms.
    """
    counter = StepCounter()

    def fib(k: int) -> int:
        counter.tick()
        if k <= 1:
            return k
        return fib(k - 1) + fib(k - 2)

    terms = [fib(i) for i in range(n)]
    return counter.measured(terms)