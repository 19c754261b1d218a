import bisect
import random

import pytest

from wcetbench.blockmerge import (
    Item,
    Span,
    binary_first,
    binary_last,
    block_swap,
    floor_power_of_two,
    insertion_sort,
    less_than,
    reverse,
    rotate,
    wiki_merge,
)


def _items(values, first_index=0):
    return [Item(value, first_index + offset) for offset, value in enumerate(values)]


def _key(item):
    return item.value


def test_less_than_orders_by_value_only():
    assert less_than(Item(1, 9), Item(2, 0))
    assert not less_than(Item(2, 0), Item(2, 1))
    assert not less_than(Item(3, 0), Item(2, 5))


def test_span_length():
    assert Span(3, 10).length() == 7
    assert Span(4, 4).length() == 0


@pytest.mark.parametrize("value, expected", [(63, 32), (64, 64), (1, 1), (400, 256)])
def test_floor_power_of_two(value, expected):
    assert floor_power_of_two(value) == expected


def test_floor_power_of_two_non_positive():
    assert floor_power_of_two(0) == 0
    assert floor_power_of_two(-5) == 0


def test_floor_power_of_two_invariant():
    for value in range(1, 2000):
        result = floor_power_of_two(value)
        assert result <= value < 2 * result
        assert result & (result - 1) == 0


def test_binary_first_and_last_match_bisect():
    rng = random.Random(3)
    values = sorted(rng.randrange(10) for _ in range(40))
    for probe in range(11):
        array = _items(values) + [Item(probe, 99)]
        index = len(array) - 1
        span = Span(0, len(values))
        assert binary_first(array, index, span, less_than) == bisect.bisect_left(
            values, probe
        )
        assert binary_last(array, index, span, less_than) == bisect.bisect_right(
            values, probe
        )


def test_binary_search_on_subspan():
    values = [0, 5, 1, 2, 2, 3, 9]
    array = _items(values)
    span = Span(2, 6)
    array.append(Item(2, 50))
    assert binary_first(array, 7, span, less_than) == 3
    assert binary_last(array, 7, span, less_than) == 5


def test_insertion_sort_is_stable():
    rng = random.Random(7)
    array = _items([rng.randrange(4) for _ in range(30)])
    expected = sorted(array, key=_key)
    insertion_sort(array, Span(0, len(array)), less_than)
    assert array == expected


def test_insertion_sort_only_touches_span():
    array = _items([9, 3, 2, 1, 0])
    insertion_sort(array, Span(1, 4), less_than)
    assert [item.value for item in array] == [9, 1, 2, 3, 0]


def test_reverse():
    array = _items(range(6))
    reverse(array, Span(1, 5))
    assert [item.value for item in array] == [0, 4, 3, 2, 1, 5]


def test_block_swap():
    array = _items(range(8))
    block_swap(array, 0, 5, 3)
    assert [item.value for item in array] == [5, 6, 7, 3, 4, 0, 1, 2]


@pytest.mark.parametrize("cache_size", [0, 1, 4])
def test_rotate_left_by_one(cache_size):
    array = _items([0, 1, 2, 3])
    cache = [Item(0, 0)] * 4
    rotate(array, 1, Span(0, 4), cache, cache_size)
    assert [item.value for item in array] == [1, 2, 3, 0]


@pytest.mark.parametrize("cache_size", [0, 2, 16])
@pytest.mark.parametrize("amount", [-7, -3, -1, 0, 1, 4, 9])
def test_rotate_matches_slicing(cache_size, amount):
    values = list(range(20))
    array = _items(values)
    cache = [Item(-1, -1)] * 16
    span = Span(5, 15)
    rotate(array, amount, span, cache, cache_size)
    segment = values[5:15]
    shift = amount % len(segment)
    expected = values[:5] + segment[shift:] + segment[:shift] + values[15:]
    assert [item.value for item in array] == expected


def test_rotate_without_cache_leaves_cache_alone():
    array = _items(range(10))
    sentinel = Item(-1, -1)
    cache = [sentinel] * 4
    rotate(array, 3, Span(0, 10), cache, 0)
    assert cache == [sentinel] * 4


def test_rotate_empty_span_is_noop():
    array = _items([3, 1, 2])
    rotate(array, 2, Span(1, 1), [], 0)
    assert [item.value for item in array] == [3, 1, 2]


def test_wiki_merge_with_cache_is_stable_merge():
    a_values = _items([1, 2, 2, 5, 8], 0)
    b_values = _items([0, 2, 3, 8, 9, 10], 5)
    array = a_values + b_values
    cache = list(a_values) + [Item(0, 0)] * 10
    wiki_merge(array, Span(0, 0), Span(0, 5), Span(5, 11), less_than, cache, 16)
    assert array == sorted(a_values + b_values, key=_key)


def test_wiki_merge_with_internal_buffer():
    junk = _items([100, 101, 102, 103], 200)
    a_values = _items([1, 4, 4, 7], 0)
    b_values = _items([2, 4, 6, 7, 11], 10)
    # buffer holds the A values; A's region holds junk awaiting the merge
    array = list(a_values) + list(junk) + list(b_values)
    buffer = Span(0, 4)
    a = Span(4, 8)
    b = Span(8, 13)
    wiki_merge(array, buffer, a, b, less_than, [], 0)
    assert array[4:13] == sorted(a_values + b_values, key=_key)
    assert sorted(array[0:4], key=lambda item: item.index) == junk


def test_wiki_merge_empty_b_copies_a():
    a_values = _items([3, 1, 2])
    array = [Item(0, 0)] * 3
    cache = list(a_values)
    wiki_merge(array, Span(0, 0), Span(0, 3), Span(3, 3), less_than, cache, 3)
    assert array == a_values


def test_wiki_merge_random_inputs_both_paths():
    rng = random.Random(11)
    for _ in range(20):
        a_values = _items(sorted(rng.randrange(6) for _ in range(8)), 0)
        b_values = _items(sorted(rng.randrange(6) for _ in range(9)), 8)
        expected = sorted(a_values + b_values, key=_key)

        array = list(a_values) + list(b_values)
        cache = list(a_values)
        wiki_merge(array, Span(0, 0), Span(0, 8), Span(8, 17), less_than, cache, 8)
        assert array == expected

        junk = _items(range(8), 100)
        array = list(a_values) + list(junk) + list(b_values)
        wiki_merge(array, Span(0, 8), Span(8, 16), Span(16, 25), less_than, [], 0)
        assert array[8:25] == expected
        assert sorted(array[0:8], key=lambda item: item.index) == junk