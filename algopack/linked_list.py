"""A singly linked list with a tail pointer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class EmptyListError(IndexError):
    """Raised when removing from an empty linked list."""


@dataclass
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """Singly linked list supporting pushes at both ends and pops at both ends."""

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._count = 0
        self.extend(iterable)

    def add_last(self, value: T) -> None:
        """Append ``value`` at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._count += 1

    def add_first(self, value: T) -> None:
        """Insert ``value`` at the front."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._count += 1

    def pop_first(self) -> T:
        """Remove and return the first value; raise EmptyListError if empty."""
        head = self._head
        if head is None:
            raise EmptyListError("pop from an empty linked list")
        self._head = head.next
        if self._head is None:
            self._tail = None
        self._count -= 1
        return head.value

    def pop_last(self) -> T:
        """Remove and return the last value; raise EmptyListError if empty."""
        head = self._head
        if head is None or self._tail is None:
            raise EmptyListError("pop from an empty linked list")
        last = self._tail
        if head is last:
            self._head = self._tail = None
        else:
            node = head
            while node.next is not last:
                assert node.next is not None
                node = node.next
            node.next = None
            self._tail = node
        self._count -= 1
        return last.value

    def peek_first(self) -> Optional[T]:
        """Return the first value without removing it, or None if empty."""
        return self._head.value if self._head is not None else None

    def peek_last(self) -> Optional[T]:
        """Return the last value without removing it, or None if empty."""
        return self._tail.value if self._tail is not None else None

    def extend(self, iterable: Iterable[T]) -> None:
        """Append every value of ``iterable`` in order."""
        for value in iterable:
            self.add_last(value)

    def drain(self) -> Iterator[T]:
        """Yield values from the front, removing each as it is yielded."""
        while self._head is not None:
            yield self.pop_first()

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"