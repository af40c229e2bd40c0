"""Teaching data structures: a min-heap, a linked list, binary trees with traversals, a BST dictionary and the Tower of Hanoi."""

__version__ = "0.1.0"