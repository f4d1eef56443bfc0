"""Comparison sorts and a sortedness check.

All sorts except :func:`merge_sort` rearrange the given list in place.
"""

from __future__ import annotations

import heapq
from collections.abc import Iterable, MutableSequence, Sequence
from itertools import pairwise
from typing import Any, TypeVar

T = TypeVar("T")


def is_sorted(iterable: Iterable[Any]) -> bool:
    """True when no element is smaller than the one before it."""
    return not any(b < a for a, b in pairwise(iterable))


def bubble_sort(array: MutableSequence[T]) -> None:
    """Sort in place by repeatedly swapping adjacent out-of-order pairs."""
    n = len(array)
    for i in range(n):
        for j in range(n - 1 - i):
            if array[j] > array[j + 1]:
                array[j], array[j + 1] = array[j + 1], array[j]


def insertion_sort(array: MutableSequence[T]) -> None:
    """Sort in place by moving each element left until it is in order."""
    for i in range(len(array)):
        j = i
        while j > 0 and array[j] < array[j - 1]:
            array[j], array[j - 1] = array[j - 1], array[j]
            j -= 1


def selection_sort(array: MutableSequence[T]) -> None:
    """Sort in place by swapping the smallest remaining element forward."""
    n = len(array)
    for i in range(n):
        smallest = min(range(i, n), key=array.__getitem__)
        array[i], array[smallest] = array[smallest], array[i]


def shell_sort(values: MutableSequence[T]) -> None:
    """Sort in place with gapped insertion sorts, halving the gap each pass."""
    n = len(values)
    gap = n // 2
    while gap > 0:
        for start in range(gap):
            for i in range(start + gap, n, gap):
                current = values[i]
                pos = i
                while pos >= gap and values[pos - gap] > current:
                    values[pos] = values[pos - gap]
                    pos -= gap
                values[pos] = current
        gap //= 2


def _siftdown(array: MutableSequence[T], root: int, end: int) -> None:
    while 2 * root < end:
        child = 2 * root + 1
        swap = root
        if array[swap] < array[child]:
            swap = child
        if child < end and array[swap] < array[child + 1]:
            swap = child + 1
        if swap == root:
            return
        array[root], array[swap] = array[swap], array[root]
        root = swap


def heap_sort(array: MutableSequence[T]) -> None:
    """Sort in place by building a max-heap and extracting its top."""
    n = len(array)
    if n < 2:
        return
    for i in range((n - 2) // 2, -1, -1):
        _siftdown(array, i, n - 1)
    for end in range(n - 1, 0, -1):
        array[end], array[0] = array[0], array[end]
        _siftdown(array, 0, end - 1)


def _partition(array: MutableSequence[T], lo: int, hi: int) -> int:
    pivot = array[hi]
    i = lo - 1
    j = hi
    while True:
        i += 1
        while array[i] < pivot:
            i += 1
        j -= 1
        while j >= 0 and array[j] > pivot:
            j -= 1
        if i >= j:
            break
        array[i], array[j] = array[j], array[i]
    array[i], array[hi] = array[hi], array[i]
    return i


def quick_sort(array: MutableSequence[T]) -> None:
    """Sort in place with quicksort, using the last element as pivot."""
    ranges = [(0, len(array) - 1)]
    while ranges:
        lo, hi = ranges.pop()
        if lo < hi:
            p = _partition(array, lo, hi)
            ranges.append((lo, p - 1))
            ranges.append((p + 1, hi))


def merge_sort(array: Sequence[T]) -> list[T]:
    """Return a new sorted list; equal elements keep their order."""
    if len(array) < 2:
        return list(array)
    middle = len(array) // 2
    left = merge_sort(array[:middle])
    right = merge_sort(array[middle:])
    return list(heapq.merge(left, right))