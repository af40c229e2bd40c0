"""A singly linked list that grows at the front."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    data: T
    next: Optional[_Node[T]] = None


class LinkedList(Generic[T]):
    """A singly linked list with insertion at the front."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._size = 0

    def insert_at_front(self, data: T) -> None:
        """Put ``data`` at the front of the list."""
        self._head = _Node(data, self._head)
        self._size += 1

    def __getitem__(self, index: int) -> T:
        """Return the item at ``index``.

        An index past the end yields the last item.
        """
        if index < 0:
            raise IndexError("negative list index")
        node = self._head
        if node is None:
            raise IndexError("index into an empty list")
        while index > 0 and node.next is not None:
            node = node.next
            index -= 1
        return node.data

    def find(self, data: T) -> Optional[T]:
        """Return the first stored item equal to ``data``, or None."""
        return next((item for item in self if item == data), None)

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size