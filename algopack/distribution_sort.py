"""Non-comparison sorts: counting sort by integer key and LSD radix sort."""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence
from itertools import chain
from typing import Optional, TypeVar

T = TypeVar("T")


def counting_sort(
    array: Iterable[T], key: Optional[Callable[[T], int]] = None
) -> list[T]:
    """Return a new list ordered by the non-negative integer ``key`` of each item.

    Without ``key`` the items themselves are used as keys. The sort is
    stable: items with equal keys keep their original order.
    """
    items = list(array)
    keys = [item if key is None else key(item) for item in items]
    for k in keys:
        if not isinstance(k, int) or k < 0:
            raise ValueError(f"key {k!r} is not a non-negative integer")

    buckets: list[list[T]] = [[] for _ in range(max(keys, default=0) + 1)]
    for k, item in zip(keys, items):
        buckets[k].append(item)
    return list(chain.from_iterable(buckets))


def _next_power_of_two(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


def radix_sort(arr: MutableSequence[int]) -> None:
    """Sort non-negative integers in place, least significant digit first.

    The radix is the smallest power of two not below ``len(arr)``, which
    keeps the running time close to linear when the values are not much
    larger than the number of elements.
    """
    for value in arr:
        if not isinstance(value, int) or value < 0:
            raise ValueError(f"{value!r} is not a non-negative integer")
    if len(arr) < 2:
        return

    largest = max(arr)
    radix = _next_power_of_two(len(arr))
    place = 1
    while place <= largest:
        buckets: list[list[int]] = [[] for _ in range(radix)]
        for value in arr:
            buckets[value // place % radix].append(value)
        arr[:] = list(chain.from_iterable(buckets))
        place *= radix