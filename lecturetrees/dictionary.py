"""A dictionary of keys and data kept in an unbalanced binary search tree."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, Tuple, TypeVar

from lecturetrees.bst_nodes import BSTNode, in_order_predecessor, iter_in_order

K = TypeVar("K")
D = TypeVar("D")


def _without_rightmost(node: BSTNode[K, D]) -> Optional[BSTNode[K, D]]:
    """Return the subtree at ``node`` with its right-most node spliced out."""
    if node.right is None:
        return node.left
    node.right = _without_rightmost(node.right)
    return node


class Dictionary(Generic[K, D]):
    """Maps unique, ordered keys to data using a binary search tree."""

    def __init__(self) -> None:
        self._head: Optional[BSTNode[K, D]] = None

    def _find_node(self, key: K) -> Optional[BSTNode[K, D]]:
        node = self._head
        while node is not None and key != node.key:
            node = node.left if key < node.key else node.right  # type: ignore[operator]
        return node

    def find(self, key: K) -> D:
        """Return the data stored under ``key``; raise KeyError if it is absent."""
        node = self._find_node(key)
        if node is None:
            raise KeyError(key)
        return node.data

    def insert(self, key: K, data: D) -> None:
        """Store ``data`` under a new ``key``; raise ValueError if the key exists."""
        new_node = BSTNode(key, data)
        if self._head is None:
            self._head = new_node
            return
        node = self._head
        while True:
            if key == node.key:
                raise ValueError(f"insert() used on an existing key: {key!r}")
            if key < node.key:  # type: ignore[operator]
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right

    def remove(self, key: K) -> D:
        """Remove ``key`` and return its data; raise KeyError if it is absent."""
        self._head, data = self._remove_from(self._head, key)
        return data

    def _remove_from(
        self, node: Optional[BSTNode[K, D]], key: K
    ) -> Tuple[Optional[BSTNode[K, D]], D]:
        if node is None:
            raise KeyError(key)
        if key == node.key:
            data = node.data
            if node.left is None:
                return node.right, data
            if node.right is None:
                return node.left, data
            # Two children: the in-order predecessor takes this node's place.
            predecessor = in_order_predecessor(node)
            assert predecessor is not None and node.left is not None
            node.key, node.data = predecessor.key, predecessor.data
            node.left = _without_rightmost(node.left)
            return node, data
        if key < node.key:  # type: ignore[operator]
            node.left, data = self._remove_from(node.left, key)
        else:
            node.right, data = self._remove_from(node.right, key)
        return node, data

    def is_empty(self) -> bool:
        """True when the dictionary holds no entries."""
        return self._head is None

    def items(self) -> Iterator[Tuple[K, D]]:
        """Yield ``(key, data)`` pairs in key order."""
        for node in iter_in_order(self._head):
            yield node.key, node.data

    def format_in_order(self) -> str:
        """Render the tree in order: each entry as ``[key : data]``, each empty link as a space."""
        parts = []

        def walk(node: Optional[BSTNode[K, D]]) -> None:
            if node is None:
                parts.append(" ")
                return
            walk(node.left)
            parts.append(f"[{node.key} : {node.data}]")
            walk(node.right)

        walk(self._head)
        return "".join(parts)

    def clear(self) -> None:
        """Remove every entry."""
        self._head = None