"""Nodes of a binary search tree and helpers for walking them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, List, Optional, TypeVar

K = TypeVar("K")
D = TypeVar("D")


@dataclass(eq=False)
class BSTNode(Generic[K, D]):
    """A search-tree node holding a key, its data and two child links."""

    key: K
    data: D
    left: Optional[BSTNode[K, D]] = None
    right: Optional[BSTNode[K, D]] = None

    @property
    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None


def rightmost(node: Optional[BSTNode[K, D]]) -> Optional[BSTNode[K, D]]:
    """Return the right-most node of the subtree at ``node``, or None if it is empty."""
    if node is None:
        return None
    while node.right is not None:
        node = node.right
    return node


def in_order_predecessor(node: Optional[BSTNode[K, D]]) -> Optional[BSTNode[K, D]]:
    """Return the right-most node of ``node``'s left subtree.

    Returns None when ``node`` is None or has no left child.
    """
    if node is None:
        return None
    return rightmost(node.left)


def iter_in_order(node: Optional[BSTNode[K, D]]) -> Iterator[BSTNode[K, D]]:
    """Yield the nodes of the subtree at ``node`` in key order."""
    stack: List[BSTNode[K, D]] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current
        current = current.right