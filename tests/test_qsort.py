import numpy as np
import pytest

from progbasics.core.properties import is_nondecreasing, is_permutation
from progbasics.core.qsort import partition, qsort


def _sorted_copy(xs):
    out = list(xs)
    assert qsort(out) is None
    return out


def test_sample_arrays():
    assert _sorted_copy([3, 2, 4, 1, 6, 5, 9]) == [1, 2, 3, 4, 5, 6, 9]
    assert _sorted_copy([2, 1]) == [1, 2]
    assert _sorted_copy([2, 4, 6, 3, 1, 5]) == [1, 2, 3, 4, 5, 6]


def test_duplicates_keep_multiset():
    assert _sorted_copy([5, 3, 5, 1]) == [1, 3, 5, 5]
    assert _sorted_copy([2, 2, 2, 1, 1]) == [1, 1, 2, 2, 2]


def test_empty_and_single_are_noops():
    assert _sorted_copy([]) == []
    assert _sorted_copy([42]) == [42]


def test_sorted_input_unchanged_and_idempotent():
    xs = _sorted_copy([7, 1, 3, 3, 0, -4])
    assert _sorted_copy(xs) == xs


def test_random_inputs_match_builtin_sorted():
    rng = np.random.default_rng(1234)
    for n in (0, 1, 2, 3, 10, 57, 200):
        xs = rng.integers(-20, 20, size=n).tolist()
        out = _sorted_copy(xs)
        assert out == sorted(xs)
        assert is_nondecreasing(out)
        assert is_permutation(xs, out)


def test_other_comparable_types():
    assert _sorted_copy(["pear", "apple", "fig"]) == ["apple", "fig", "pear"]
    assert _sorted_copy([2.5, -1.0, 0.0]) == [-1.0, 0.0, 2.5]
    assert _sorted_copy([(2, "b"), (1, "z"), (2, "a")]) == [(1, "z"), (2, "a"), (2, "b")]


def test_sub_range_only():
    xs = [9, 8, 3, 1, 2, 0]
    qsort(xs, 2, 5)
    assert xs == [9, 8, 1, 2, 3, 0]


def test_partition_shifts_smaller_elements_in_order():
    xs = [(5, "p"), (3, "a"), (7, "x"), (1, "b"), (2, "c")]
    pos = partition(xs, 0, len(xs))
    assert pos == 3
    assert xs == [(3, "a"), (1, "b"), (2, "c"), (5, "p"), (7, "x")]


def test_partition_keeps_equal_elements_right_of_pivot():
    xs = [4, 4, 1, 9, 4]
    pos = partition(xs, 0, len(xs))
    assert pos == 1
    assert xs[pos] == 4
    assert all(v < 4 for v in xs[:pos])
    assert all(v >= 4 for v in xs[pos + 1:])


def test_ordered_inputs_do_not_hit_recursion_limit():
    n = 2000
    asc = list(range(n))
    qsort(asc)
    assert asc == list(range(n))

    desc = list(range(n, 0, -1))
    qsort(desc)
    assert desc == list(range(1, n + 1))


def test_ndarray_sub_range():
    X = np.array([5.0, 4.0, 3.0, 2.0, 1.0])
    qsort(X, 1, 4)
    assert np.array_equal(X, [5.0, 2.0, 3.0, 4.0, 1.0])


def test_invalid_ranges_raise_index_error():
    xs = [3, 1, 2]
    with pytest.raises(IndexError):
        qsort(xs, 0, 4)
    with pytest.raises(IndexError):
        qsort(xs, 2, 1)
    with pytest.raises(IndexError):
        qsort(xs, -1)
    assert xs == [3, 1, 2]


def test_incomparable_elements_propagate_type_error():
    with pytest.raises(TypeError):
        qsort([1, "a"])


def test_partition_single_element_range():
    xs = [3, 1, 2]
    assert partition(xs, 1, 2) == 1
    assert xs == [3, 1, 2]
