"""First-in-first-out queue and last-in-first-out stack."""

from collections import deque
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """A FIFO queue. ``dequeue`` and ``peek`` return None when it is empty."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the back."""
        self._items.append(item)

    def dequeue(self) -> Optional[T]:
        """Remove and return the front item, or None if the queue is empty."""
        return self._items.popleft() if self._items else None

    def peek(self) -> Optional[T]:
        """Return the front item without removing it, or None."""
        return self._items[0] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"


class Stack(Generic[T]):
    """A LIFO stack. ``pop`` and ``peek`` return None when it is empty."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Put ``item`` on top."""
        self._items.append(item)

    def pop(self) -> Optional[T]:
        """Remove and return the top item, or None if the stack is empty."""
        return self._items.pop() if self._items else None

    def peek(self) -> Optional[T]:
        """Return the top item without removing it, or None."""
        return self._items[-1] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"