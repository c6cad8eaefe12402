import pytest

from stepcount.counting_sorts import count_sort, radix_sort

NON_NEGATIVE = [
    [7],
    [2, 1],
    [5, 3, 8, 1, 9, 2],
    [4, 4, 4, 4],
    [0, 0, 3, 0],
    [170, 45, 75, 90, 802, 24, 2, 66],
    [1000, 1, 100, 10],
]


@pytest.mark.parametrize("values", NON_NEGATIVE)
def test_count_sort_sorts(values):
    assert count_sort(values).result == sorted(values)


@pytest.mark.parametrize("values", NON_NEGATIVE)
def test_radix_sort_sorts(values):
    assert radix_sort(values).result == sorted(values)


@pytest.mark.parametrize("sort", [count_sort, radix_sort])
def test_empty_input(sort):
    measured = sort([])
    assert measured.result == []
    assert measured.steps == 0


@pytest.mark.parametrize("sort", [count_sort, radix_sort])
def test_input_is_not_modified(sort):
    values = [30, 1, 22]
    sort(values)
    assert values == [30, 1, 22]


def test_count_sort_rejects_negative_values():
    with pytest.raises(ValueError):
        count_sort([3, -1, 2])


def test_count_sort_single_zero_steps():
    assert count_sort([0]).steps == 4


@pytest.mark.parametrize("values", NON_NEGATIVE)
def test_count_sort_steps_cover_every_phase(values):
    n = len(values)
    largest = max(values)
    # Clearing, prefix sums, and three passes over the elements.
    assert count_sort(values).steps == (largest + 1) + largest + 3 * n


def test_count_sort_steps_depend_on_range():
    assert count_sort([0, 100]).steps > count_sort([0, 1]).steps


def test_radix_sort_all_zero_makes_no_pass():
    measured = radix_sort([0, 0, 0])
    assert measured.result == [0, 0, 0]
    assert measured.steps == 0


def test_radix_sort_passes_grow_with_digits():
    short = radix_sort([9, 3, 5]).steps
    longer = radix_sort([999, 3, 5]).steps
    assert longer > short


@pytest.mark.parametrize("values", NON_NEGATIVE)
def test_radix_sort_steps_lower_bound(values):
    n = len(values)
    passes = len(str(max(values))) if max(values) > 0 else 0
    # Each pass: one step, one per digit, one per selection round.
    assert radix_sort(values).steps >= passes * (1 + 2 * n)


def test_radix_sort_with_negative_among_positives():
    values = [25, -3, 14]
    assert radix_sort(values).result == sorted(values)