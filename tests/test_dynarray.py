import random

import pytest

from candyquest.dynarray import BLOCK_SIZE, DynArray


def make(values):
    array = DynArray()
    for v in values:
        array.append(v)
    return array


def test_append_and_index():
    array = make([3, 1, 2])
    assert list(array) == [3, 1, 2]
    assert array[1] == 1
    assert len(array) == 3


def test_capacity_grows_by_block():
    array = make(range(BLOCK_SIZE))
    assert array.capacity == BLOCK_SIZE
    array.append(99)
    assert array.capacity == 2 * BLOCK_SIZE


def test_zero_capacity_grows_on_append():
    array = DynArray(0)
    array.append("a")
    assert array.capacity == BLOCK_SIZE
    assert array[0] == "a"


def test_index_out_of_range_raises():
    array = make([1])
    with pytest.raises(IndexError):
        array[1]
    with pytest.raises(IndexError):
        array[-1] = 5
    assert list(array) == [1]
    assert len(array) == 1


def test_pop_returns_last_and_empty_raises():
    array = make([1, 2])
    assert array.pop() == 2
    assert array.pop() == 1
    with pytest.raises(IndexError):
        array.pop()


def test_clear_empties():
    array = make([1, 2, 3])
    array.clear()
    assert len(array) == 0
    assert array.at(0) is None


def test_insert_positions():
    array = make([1, 3])
    array.insert(2, 1)
    array.insert(0, 0)
    array.insert(4, 4)
    assert list(array) == [0, 1, 2, 3, 4]


def test_insert_past_end_raises():
    array = make([1])
    with pytest.raises(IndexError):
        array.insert(5, 2)


def test_insert_all_in_middle():
    array = make([1, 4])
    array.insert_all([2, 3], 1)
    assert list(array) == [1, 2, 3, 4]


def test_insert_all_past_end_raises():
    with pytest.raises(IndexError):
        make([]).insert_all([1], 1)


def test_iadd_extends():
    array = make([1])
    array += make([2, 3])
    assert list(array) == [1, 2, 3]


def test_at_returns_none_out_of_range():
    array = make(["x"])
    assert array.at(0) == "x"
    assert array.at(1) is None


@pytest.mark.parametrize("method", ["bubble_sort", "bubble_sort_optimized", "comb_sort"])
def test_sorts_produce_sorted_order(method):
    rng = random.Random(7)
    values = [rng.randint(-50, 50) for _ in range(40)]
    array = make(values)
    comparisons = getattr(array, method)()
    assert list(array) == sorted(values)
    assert comparisons > 0


@pytest.mark.parametrize("method", ["bubble_sort", "bubble_sort_optimized", "comb_sort"])
def test_sorts_on_tiny_arrays(method):
    empty = make([])
    single = make([5])
    assert getattr(empty, method)() == 0
    assert getattr(single, method)() == 0
    assert list(single) == [5]


def test_bubble_sort_on_sorted_input_is_one_pass():
    values = list(range(10))
    array = make(values)
    assert array.bubble_sort() == len(values) - 1


def test_flip_reverses():
    array = make([1, 2, 3, 4])
    array.flip()
    assert list(array) == [4, 3, 2, 1]