"""A binary tree that stores its own copies of values, with the classic traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class TreeNode(Generic[T]):
    """A node holding a value and links to its left and right children."""

    data: T
    left: Optional[TreeNode[T]] = None
    right: Optional[TreeNode[T]] = None


class ValueBinaryTree(Generic[T]):
    """A binary tree of values, optionally built as a complete tree from a sequence."""

    def __init__(self, contents: Optional[Iterable[T]] = None) -> None:
        self.root: Optional[TreeNode[T]] = None
        if contents is not None:
            self.create_complete_tree(contents)

    def create_complete_tree(self, contents: Iterable[T]) -> None:
        """Replace the tree with a complete tree filled level by level, left to right."""
        self.clear()
        items = iter(contents)
        try:
            first = next(items)
        except StopIteration:
            return
        self.root = TreeNode(first)
        # Each open node appears once per free child slot: left, then right.
        open_slots: Deque[TreeNode[T]] = deque([self.root, self.root])
        for item in items:
            parent = open_slots.popleft()
            child = TreeNode(item)
            if parent.left is None:
                parent.left = child
            else:
                parent.right = child
            open_slots.append(child)
            open_slots.append(child)

    def clear(self) -> None:
        """Remove every node from the tree."""
        self.root = None

    def pre_order(self, node: Optional[TreeNode[T]]) -> Iterator[T]:
        """Yield the values of the subtree at ``node``: node, then left, then right."""
        stack: List[TreeNode[T]] = [node] if node is not None else []
        while stack:
            current = stack.pop()
            yield current.data
            if current.right is not None:
                stack.append(current.right)
            if current.left is not None:
                stack.append(current.left)

    def in_order(self, node: Optional[TreeNode[T]]) -> Iterator[T]:
        """Yield the values of the subtree at ``node``: left, then node, then right."""
        stack: List[TreeNode[T]] = []
        current = node
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.data
            current = current.right

    def post_order(self, node: Optional[TreeNode[T]]) -> Iterator[T]:
        """Yield the values of the subtree at ``node``: left, then right, then node."""
        stack: List[tuple[TreeNode[T], bool]] = [(node, False)] if node is not None else []
        while stack:
            current, children_done = stack.pop()
            if children_done:
                yield current.data
                continue
            stack.append((current, True))
            if current.right is not None:
                stack.append((current.right, False))
            if current.left is not None:
                stack.append((current.left, False))

    def level_order(self) -> Iterator[T]:
        """Yield the values of the whole tree level by level, left to right."""
        queue: Deque[TreeNode[T]] = deque([self.root] if self.root is not None else [])
        while queue:
            current = queue.popleft()
            yield current.data
            if current.left is not None:
                queue.append(current.left)
            if current.right is not None:
                queue.append(current.right)