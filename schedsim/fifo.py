"""A first-in, first-out queue with an optional capacity limit."""

from __future__ import annotations

from collections import deque
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 10


class BoundedQueue(Generic[T]):
    """FIFO queue that holds at most ``capacity`` items (``None`` for no limit)."""

    def __init__(
        self,
        items: Iterable[T] = (),
        capacity: Optional[int] = DEFAULT_CAPACITY,
    ) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: deque[T] = deque()
        for item in items:
            self.enqueue(item)

    @property
    def capacity(self) -> Optional[int]:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return "{ " + "".join(f"{item} " for item in self._items) + "}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r}, capacity={self._capacity!r})"

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self._capacity is not None and len(self._items) >= self._capacity

    def clear(self) -> None:
        self._items.clear()

    def enqueue(self, item: T) -> None:
        """Append ``item`` at the tail; raise OverflowError when the queue is full."""
        if self.is_full():
            raise OverflowError("queue is full")
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the item at the head."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def head(self) -> T:
        if not self._items:
            raise IndexError("head of an empty queue")
        return self._items[0]

    def tail(self) -> T:
        if not self._items:
            raise IndexError("tail of an empty queue")
        return self._items[-1]