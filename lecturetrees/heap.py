"""An array-backed binary min-heap."""

from __future__ import annotations

from typing import Generic, Iterator, List, TypeVar

T = TypeVar("T")


class Heap(Generic[T]):
    """A binary min-heap stored in a list in level order."""

    def __init__(self) -> None:
        self._items: List[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate over the items in their storage (level) order."""
        return iter(list(self._items))

    def insert(self, key: T) -> None:
        """Add ``key`` and restore the heap property."""
        self._items.append(key)
        self._heapify_up(len(self._items) - 1)

    def remove_min(self) -> T:
        """Remove and return the smallest item."""
        if not self._items:
            raise IndexError("remove_min() on an empty heap")
        items = self._items
        items[0], items[-1] = items[-1], items[0]
        minimum = items.pop()
        self._heapify_down(0)
        return minimum

    @staticmethod
    def _parent(index: int) -> int:
        return (index - 1) // 2

    def _is_leaf(self, index: int) -> bool:
        return 2 * index + 1 >= len(self._items)

    def _min_child(self, index: int) -> int:
        left = 2 * index + 1
        right = left + 1
        if right >= len(self._items) or self._items[left] <= self._items[right]:
            return left
        return right

    def _heapify_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = self._parent(index)
            if not items[index] < items[parent]:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _heapify_down(self, index: int) -> None:
        items = self._items
        while not self._is_leaf(index):
            child = self._min_child(index)
            if not items[index] > items[child]:
                break
            items[index], items[child] = items[child], items[index]
            index = child