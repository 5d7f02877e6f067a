"""Last-in, first-out stacks: an unbounded one and a fixed-capacity one."""

from __future__ import annotations

from typing import Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 10


class LinkedStack(Generic[T]):
    """Unbounded LIFO stack."""

    def __init__(self) -> None:
        self._items: List[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __str__(self) -> str:
        return "{ " + "".join(f"{item} " for item in self) + "}"

    def is_empty(self) -> bool:
        return not self._items

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def clear(self) -> None:
        self._items.clear()


class ArrayStack(Generic[T]):
    """LIFO stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: List[T] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __str__(self) -> str:
        return "[ " + "".join(f"{item} " for item in self) + "]"

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def push(self, item: T) -> None:
        """Push ``item``; raise OverflowError when the stack is full."""
        if self.is_full():
            raise OverflowError("stack is full")
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> T:
        """Return the most recently pushed item."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def rear(self) -> T:
        """Return the item at the bottom of the stack."""
        if not self._items:
            raise IndexError("rear of an empty stack")
        return self._items[0]

    def clear(self) -> None:
        self._items.clear()