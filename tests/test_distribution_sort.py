from dataclasses import dataclass
from operator import attrgetter

import pytest

from algopack.distribution_sort import counting_sort, radix_sort


@dataclass(frozen=True)
class Custom:
    key: int
    tag: str = ""


def _customs(keys):
    return [Custom(k) for k in keys]


def _keys(items):
    return [item.key for item in items]


def test_counting_basic():
    assert counting_sort([5, 4, 1, 6, 0]) == [0, 1, 4, 5, 6]


def test_counting_basic_struct():
    output = counting_sort(_customs([5, 4, 1, 6, 0]), key=attrgetter("key"))
    assert _keys(output) == [0, 1, 4, 5, 6]


def test_counting_repeated_elements():
    assert counting_sort([5, 5, 1, 6, 1, 0, 2, 6]) == [0, 1, 1, 2, 5, 5, 6, 6]


def test_counting_repeated_elements_struct():
    output = counting_sort(_customs([5, 5, 1, 6, 1, 0, 2, 6]), key=attrgetter("key"))
    assert _keys(output) == [0, 1, 1, 2, 5, 5, 6, 6]


def test_counting_pre_sorted():
    assert counting_sort([1, 2, 3, 4, 5, 6]) == [1, 2, 3, 4, 5, 6]


def test_counting_pre_sorted_struct():
    output = counting_sort(_customs([1, 2, 3, 4, 5, 6]), key=attrgetter("key"))
    assert _keys(output) == [1, 2, 3, 4, 5, 6]


def test_counting_empty():
    assert counting_sort([]) == []


def test_counting_is_stable():
    items = [Custom(2, "a"), Custom(1, "b"), Custom(2, "c"), Custom(1, "d")]
    output = counting_sort(items, key=attrgetter("key"))
    assert [item.tag for item in output] == ["b", "d", "a", "c"]


def test_counting_leaves_input_untouched():
    data = [3, 1, 2]
    counting_sort(data)
    assert data == [3, 1, 2]


def test_counting_rejects_negative_key():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])


def test_radix_empty():
    a: list[int] = []
    radix_sort(a)
    assert a == []


def test_radix_descending():
    v = [201, 127, 64, 37, 24, 4, 1]
    radix_sort(v)
    assert v == [1, 4, 24, 37, 64, 127, 201]


def test_radix_ascending():
    v = [1, 4, 24, 37, 64, 127, 201]
    radix_sort(v)
    assert v == [1, 4, 24, 37, 64, 127, 201]


def test_radix_single_element():
    v = [42]
    radix_sort(v)
    assert v == [42]


def test_radix_large_values_and_duplicates():
    v = [2**63, 0, 17, 2**40, 17, 5, 2**63]
    radix_sort(v)
    assert v == [0, 5, 17, 17, 2**40, 2**63, 2**63]


def test_radix_all_zero():
    v = [0, 0, 0]
    radix_sort(v)
    assert v == [0, 0, 0]


def test_radix_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([1, -2, 3])