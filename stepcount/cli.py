"""Command line front end: run an algorithm and report its step count."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import Optional, TextIO

from stepcount.amortized import fill_dynamic_array, multi_pop
from stepcount.counter import Measured
from stepcount.counting_sorts import count_sort, radix_sort
from stepcount.divide_sorts import heap_sort, merge_sort, quick_sort
from stepcount.fibonacci import fibonacci_iterative, fibonacci_recursive
from stepcount.heap import MaxHeap
from stepcount.searching import binary_search, kmp_search, linear_search
from stepcount.simple_sorts import bubble_sort, insertion_sort, selection_sort

_SORTS: dict[str, tuple[Callable[[list[int]], Measured[list[int]]], str]] = {
    "bubble": (bubble_sort, "O(n^2)"),
    "insertion": (insertion_sort, "O(n^2)"),
    "selection": (selection_sort, "O(n^2)"),
    "merge": (merge_sort, "O(n*log(n))"),
    "quick": (quick_sort, "O(n*log(n))"),
    "heapsort": (heap_sort, "O(n*log(n))"),
    "radix": (radix_sort, "O(d*n)"),
}

_MENU = (
    "\nMenu:\n"
    "1. Press 'i' or 'I' to insert data.\n"
    "2. Press 'e' or 'E' to exit the program.\n"
    "3. Press 'd' or 'D' to display the heap.\n"
    "4. Press 'r' or 'R' to delete data.\n"
    "Enter your choice: "
)


def _join(values: Sequence[int]) -> str:
    return " ".join(str(value) for value in values)


def _read_char(stream: TextIO) -> str:
    """Next non-whitespace character, or an empty string at end of input."""
    while True:
        char = stream.read(1)
        if not char or not char.isspace():
            return char


def _read_int(stream: TextIO) -> int:
    """Next whitespace-delimited integer from ``stream``."""
    char = _read_char(stream)
    if not char:
        raise EOFError("input ended while reading a number")
    token = [char]
    while True:
        char = stream.read(1)
        if not char or char.isspace():
            break
        token.append(char)
    return int("".join(token))


def _heap_session(stdin: TextIO, out: TextIO) -> int:
    """Interactive max-heap menu; returns the exit status."""
    out.write("Write the first value to insert: ")
    heap = MaxHeap(_read_int(stdin))
    wrong_keys = 0
    while True:
        out.write(_MENU)
        key = _read_char(stdin).lower()
        if not key:
            raise EOFError("input ended before the program was exited")
        if key == "i":
            out.write("Enter the value to insert: ")
            heap.insert(_read_int(stdin))
            wrong_keys = 0
        elif key == "r":
            if not len(heap):
                out.write("Heap is empty.\n")
            else:
                out.write(
                    "Enter the position of the element to delete "
                    f"(1 to {len(heap)}): "
                )
                try:
                    heap.delete(_read_int(stdin))
                except IndexError:
                    out.write("Invalid position.\n")
            wrong_keys = 0
        elif key == "e":
            out.write("Exiting the program.\n")
            out.write(f"Time complexity: {heap.steps}\n")
            return 0
        elif key == "d":
            if len(heap):
                out.write(f"Heap Elements: {_join(list(heap))}\n")
            else:
                out.write("Heap is empty.\n")
            wrong_keys = 0
        else:
            wrong_keys += 1
            out.write("Incorrect key. Try again...\n")
            if wrong_keys == 3:
                out.write(f"Time complexity: {heap.steps}\n")
                out.write(
                    "You entered the wrong key three times. "
                    "The program will now terminate.\n"
                )
                return 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stepcount",
        description="Run a classic algorithm and report how many steps it took.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("fib", "Fibonacci series by iteration"),
        ("fib-recursive", "Fibonacci series by naive recursion"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("terms", type=int)

    for name, help_text in (
        ("linear", "linear search"),
        ("binary", "binary search in an ascending array"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("target", type=int)
        sub.add_argument("values", type=int, nargs="*")

    sub = commands.add_parser("kmp", help="Knuth-Morris-Pratt pattern search")
    sub.add_argument("pattern")
    sub.add_argument("text")

    for name in _SORTS:
        sub = commands.add_parser(name, help=f"{name} sort")
        sub.add_argument("values", type=int, nargs="*")

    sub = commands.add_parser("count", help="counting sort of non-negative values")
    sub.add_argument("values", type=int, nargs="+")

    commands.add_parser("heap", help="interactive max-heap read from standard input")

    sub = commands.add_parser("dynamic", help="fill a doubling dynamic array")
    sub.add_argument("values", type=int, nargs="+")

    sub = commands.add_parser("multipop", help="pop k elements off a stack")
    sub.add_argument("k", type=int)
    sub.add_argument("values", type=int, nargs="*")
    return parser


def _run(args: argparse.Namespace, out: TextIO) -> int:
    command = args.command
    if command in ("fib", "fib-recursive"):
        if command == "fib":
            measured, label = fibonacci_iterative(args.terms), "O(n)"
        else:
            measured, label = fibonacci_recursive(args.terms), "O(2^n)"
        out.write("Your fibonacci series is: \n")
        for term in measured.result:
            out.write(f"{term}\n")
        out.write(f"Time complexity: {label} = {measured.steps}\n")
        return 0

    if command in ("linear", "binary"):
        if command == "linear":
            found, label = linear_search(args.values, args.target), "O(n)"
        else:
            found, label = binary_search(args.values, args.target), "O(log(n))"
        if found.result is not None:
            out.write(f"Element found at index {found.result}\n")
        elif command == "binary":
            out.write("Element not found\n")
        out.write(f"Time complexity: {label} = {found.steps}\n")
        return 0

    if command == "kmp":
        matches = kmp_search(args.pattern, args.text)
        for index in matches.result:
            out.write(f"Pattern found at index {index}\n")
        out.write(f"Time Complexity: O(N + M) {matches.steps}\n")
        return 0

    if command in _SORTS:
        sorter, label = _SORTS[command]
        ordered = sorter(args.values)
        out.write(f"Sorted array is: {_join(ordered.result)}\n")
        out.write(f"Time complexity: {label} = {ordered.steps}\n")
        return 0

    if command == "count":
        ordered = count_sort(args.values)
        out.write(f"Max value is: {max(args.values)}\n")
        out.write(f"Sorted array is: {_join(ordered.result)}\n")
        out.write(f"Complexity is: {ordered.steps}\n")
        return 0

    if command == "heap":
        return _heap_session(sys.stdin, out)

    if command == "dynamic":
        array = fill_dynamic_array(args.values)
        out.write(f"Your array is: {_join(list(array))}\n")
        out.write(f"Time complexity: O(n) = {array.steps}\n")
        out.write(f"Amortized time complexity: O(1) = {array.amortized_steps}\n")
        return 0

    # multipop
    if not 1 <= args.k <= len(args.values):
        out.write("Invalid pop time.\n")
        return 1
    popped = multi_pop(args.values, args.k)
    remaining, removed = popped.result
    out.write(f"Your stack after popping {args.k} times is: {_join(remaining)}\n")
    out.write(f"Popped values are: {_join(removed)}\n")
    out.write(f"Time complexity: O(n) = {popped.steps}\n")
    out.write(f"Amortized time complexity: O(1) = {popped.steps // args.k}\n")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse ``argv``, run the chosen algorithm and return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        return _run(args, sys.stdout)
    except (ValueError, EOFError) as error:
        print(f"stepcount: error: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())