"""A bounded list kept in ascending order of a key."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 20


class SortedList(Generic[T]):
    """List of items kept sorted by ``key`` as they are added.

    ``str`` shows the key of each item in order.
    """

    def __init__(
        self,
        key: Optional[Callable[[T], Any]] = None,
        capacity: Optional[int] = DEFAULT_CAPACITY,
    ) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must not be negative")
        self._key: Optional[Callable[[T], Any]] = key
        self._capacity = capacity
        self._items: List[T] = []

    @property
    def capacity(self) -> Optional[int]:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __str__(self) -> str:
        return "[ " + "".join(f"{self._key_of(item)} " for item in self._items) + "]"

    def add(self, item: T) -> None:
        """Insert ``item`` at its sorted position; raise OverflowError when full."""
        if self._capacity is not None and len(self._items) >= self._capacity:
            raise OverflowError("sorted list is full")
        self._items.insert(self._insertion_point(self._key_of(item)), item)

    def _key_of(self, item: T) -> Any:
        if self._key is None:
            return item
        return self._key(item)

    def _insertion_point(self, value: Any) -> int:
        items = self._items
        if not items:
            return 0
        if len(items) == 1:
            return 1 if value > self._key_of(items[0]) else 0
        low, high = 0, len(items) - 1
        while True:
            if high <= low:
                return low + 1 if value > self._key_of(items[low]) else low
            mid = (low + high) // 2
            mid_key = self._key_of(items[mid])
            if value == mid_key:
                return mid + 1
            if value > mid_key:
                low = mid + 1
            else:
                high = mid - 1