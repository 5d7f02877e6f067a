"""A bounded binary min-heap ordered by a key function."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 10


class MinHeap(Generic[T]):
    """Priority queue in which the item with the smallest key comes first.

    Iteration and ``str`` show the items in their internal array order.
    """

    def __init__(
        self,
        capacity: Optional[int] = DEFAULT_CAPACITY,
        key: Optional[Callable[[T], Any]] = None,
    ) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._key = key
        self._items: List[T] = []

    @property
    def capacity(self) -> Optional[int]:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return "[ " + "".join(f"{item} " for item in self._items) + "]"

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self._capacity is not None and len(self._items) >= self._capacity

    def clear(self) -> None:
        self._items.clear()

    def push(self, item: T) -> None:
        """Insert ``item``; raise OverflowError when the heap is full."""
        if self.is_full():
            raise OverflowError("heap is full")
        self._items.append(item)
        self._sift_up()

    def pop(self) -> T:
        """Remove and return the item with the smallest key."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        last = self._items.pop()
        if not self._items:
            return last
        root = self._items[0]
        self._items[0] = last
        self._sift_down()
        return root

    def head(self) -> T:
        if not self._items:
            raise IndexError("head of an empty heap")
        return self._items[0]

    def tail(self) -> T:
        """Return the last item in array order."""
        if not self._items:
            raise IndexError("tail of an empty heap")
        return self._items[-1]

    def _key_of(self, item: T) -> Any:
        if self._key is None:
            return item
        return self._key(item)

    def _sift_up(self) -> None:
        items, key = self._items, self._key_of
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if not key(items[parent]) > key(items[index]):
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def _sift_down(self) -> None:
        items, key = self._items, self._key_of
        count = len(items)
        index = 0
        while (left := 2 * index + 1) < count:
            child = left
            right = left + 1
            if right < count and key(items[right]) < key(items[left]):
                child = right
            if key(items[index]) < key(items[child]):
                break
            items[index], items[child] = items[child], items[index]
            index = child