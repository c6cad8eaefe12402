# stepcount

Textbook algorithms that report how much work they did.

Every algorithm in `stepcount` runs the way it is usually taught and keeps a
count of the basic steps it performs. You can then set the growth of that
count next to the expected complexity: linear, logarithmic, quadratic,
`n log n`, exponential or amortized constant.

## What is included

| Module | Contents |
| --- | --- |
| `stepcount.counter` | `StepCounter` (a running tally with `tick` and `measured`) and `Measured` (a result paired with its `steps`) |
| `stepcount.fibonacci` | `fibonacci_iterative`, `fibonacci_recursive` |
| `stepcount.searching` | `linear_search`, `binary_search`, `prefix_table`, `kmp_search` |
| `stepcount.simple_sorts` | `bubble_sort`, `insertion_sort`, `selection_sort` |
| `stepcount.divide_sorts` | `merge_sort`, `quick_sort`, `heap_sort` |
| `stepcount.counting_sorts` | `count_sort`, `radix_sort` |
| `stepcount.heap` | `MaxHeap`, a 1-based binary max-heap with `insert` and `delete` |
| `stepcount.amortized` | `DynamicArray`, `fill_dynamic_array`, `multi_pop` |
| `stepcount.cli` | `main`, the `stepcount` command |

The functions return a `Measured` value. Its `result` holds the answer and
its `steps` holds the count. The sorts copy their input and never change it.
The searches return `None` as the result when the target is absent.
`kmp_search` returns every start index, overlapping matches included, and
raises `ValueError` for an empty pattern. `count_sort` raises `ValueError`
for negative values.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from stepcount.simple_sorts import bubble_sort
from stepcount.searching import kmp_search
from stepcount.heap import MaxHeap

sorted_run = bubble_sort([5, 1, 4, 2, 8])
print(sorted_run.result, sorted_run.steps)   # [1, 2, 4, 5, 8] 10

print(kmp_search("aba", "abababa").result)   # [0, 2, 4]

heap = MaxHeap(3)
heap.insert(10)
heap.insert(7)
print(list(heap), len(heap), heap.steps)
print(heap.delete(1))                         # removes the element at position 1
```

`MaxHeap.delete` takes a 1-based position. It raises `IndexError` when the
heap is empty or when the position is out of range.

A `DynamicArray(max_length)` starts with a `capacity` of one and doubles it
whenever it fills up. Each `append` counts as one step. `append` raises
`OverflowError` once the array holds `max_length` elements.
`amortized_steps` is the step count divided by the number of elements,
rounded down. `fill_dynamic_array(values)` builds an array sized to the
values it is given and fills it.

`multi_pop(stack, k)` treats the last element of `stack` as its top. It
returns the remaining stack and the popped elements, counting one step per
pop. It raises `ValueError` when `k` is negative or larger than the stack.

## Command line

Installing the package provides the `stepcount` command. Each subcommand
runs one algorithm, prints its result and prints the step count:

```
stepcount fib 10
stepcount fib-recursive 10
stepcount linear 7 3 9 7 1
stepcount binary 7 1 3 7 9
stepcount kmp aba abababa
stepcount bubble 5 1 4 2 8
stepcount count 3 0 2 3 1
stepcount dynamic 4 8 15 16 23
stepcount multipop 2 1 2 3 4
stepcount heap
```

For `linear` and `binary`, the first number is the target and the rest are
the values to search. `binary` expects its values in ascending order. The
other sorting subcommands are `insertion`, `selection`, `merge`, `quick`,
`heapsort` and `radix`.

For `multipop`, the first number is `k`. The command exits with status 1 and
prints `Invalid pop time.` unless `k` is between 1 and the number of values.

`stepcount heap` runs an interactive max-heap on standard input. It first
reads one starting value. It then shows a menu:

- `i` inserts a value.
- `r` deletes the element at a position.
- `d` displays the heap.
- `e` exits.

Three wrong keys in a row end the session with status 1.

When an algorithm rejects its input, the error goes to standard error and
the command exits with status 1.

## What it does not do

Only the `heap` subcommand reads its input interactively. Every other
subcommand takes its input as command-line arguments. Nothing is saved
between runs.