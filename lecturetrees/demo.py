"""Command-line demonstrations of the package's data structures."""

from __future__ import annotations

import argparse
from typing import Callable, Dict, Iterator, List, Optional, Sequence

from lecturetrees.dictionary import Dictionary
from lecturetrees.heap import Heap
from lecturetrees.linked_list import LinkedList
from lecturetrees.tower import Game
from lecturetrees.value_tree import TreeNode, ValueBinaryTree


def _spaced(values) -> str:
    return " ".join(str(value) for value in values)


def _traversals_demo() -> Iterator[str]:
    seven_tree = ValueBinaryTree([1, 2, 3, 4, 5, 6, 7])
    root = seven_tree.root

    yield "Example of pre-order traversal with a complete tree:"
    yield _spaced(seven_tree.pre_order(root))
    yield ""
    yield "Example of in-order traversal with a complete tree:"
    yield _spaced(seven_tree.in_order(root))
    yield ""
    yield "Example of post-order traversal with a complete tree:"
    yield _spaced(seven_tree.post_order(root))
    yield ""
    yield "Example of level-order traversal with a complete tree:"
    yield _spaced(seven_tree.level_order())
    yield ""

    algebra_tree = ValueBinaryTree(["+", "-", "*", "a", "/", "d", "e"])
    root = algebra_tree.root
    assert root is not None and root.left is not None and root.left.right is not None
    slash = root.left.right
    slash.left = TreeNode("b")
    slash.right = TreeNode("c")

    yield "Pre-order traversal of algebraic syntax tree:"
    yield " (This output won't make sense...)"
    yield _spaced(algebra_tree.pre_order(root))
    yield ""
    yield "In-order traversal of algebraic syntax tree:"
    yield " (This one should make sense.)"
    yield _spaced(algebra_tree.in_order(root))
    yield ""
    yield "Post-order traversal of algebraic syntax tree:"
    yield " (This output won't make sense...)"
    yield _spaced(algebra_tree.post_order(root))
    yield ""


def _bool_word(flag: bool) -> str:
    return "true" if flag else "false"


def _bst_demo() -> Iterator[str]:
    tree: Dictionary[int, str] = Dictionary()
    yield f"Dictionary empty at the beginning? {_bool_word(tree.is_empty())}"

    yield "Inserting items..."
    for key, data in (
        (37, "thirty seven"),
        (19, "nineteen"),
        (51, "fifty one"),
        (55, "fifty five"),
        (4, "four"),
        (11, "eleven"),
        (20, "twenty"),
        (2, "two"),
    ):
        tree.insert(key, data)

    yield f"Dictionary empty after insertions? {_bool_word(tree.is_empty())}"
    yield "Current tree contents in order:"
    yield tree.format_in_order()

    yield "Using find to show that 51 has been inserted:"
    yield f"t.find(51): {tree.find(51)}"

    yield "Trying to remove some items:"
    yield f"t.remove(11): {tree.remove(11)} (zero child remove)"
    yield f"t.remove(51): {tree.remove(51)} (one child remove)"
    yield f"t.remove(19): {tree.remove(19)} (two child remove)"

    yield "Current tree contents in order:"
    yield tree.format_in_order()

    yield "Attempting to find a non-existent item, 51:"
    try:
        yield f"t.find(51): {tree.find(51)}"
    except KeyError:
        yield "Caught exception with error message: error: key not found"

    yield "Attempting to remove a non-existent item, 99:"
    try:
        yield f"t.remove(99): {tree.remove(99)}"
    except KeyError:
        yield "Caught exception with error message: error: remove() used on non-existent key"


def _heap_demo() -> Iterator[str]:
    heap: Heap[int] = Heap()
    keys = [4, 10, 2, 22, 45, 18, -8, 95, 13, 42]

    yield f" === {len(keys)} calls to heap.insert() === "
    for key in keys:
        heap.insert(key)
        yield f"After Heap.insert(key = {key}): {_spaced(heap)}"

    yield ""
    yield f" === {len(keys)} calls to heap.remove_min() === "
    for _ in keys:
        yield str(heap.remove_min())


def _list_demo() -> Iterator[str]:
    items: LinkedList[int] = LinkedList()

    yield "Inserting element 3 at front..."
    items.insert_at_front(3)
    yield f"list[0]: {items[0]}"

    yield "Inserting element 30 at front..."
    items.insert_at_front(30)
    yield f"list[0]: {items[0]}"
    yield f"list[1]: {items[1]}"


def _tower_demo() -> Iterator[str]:
    game = Game()
    yield "Initial game state:"
    yield str(game)
    yield ""

    for source, target in game.solve():
        yield f"Move cube from Stack[{source}] to Stack[{target}]"

    yield ""
    yield "Final game state:"
    yield str(game)


_DEMOS: Dict[str, Callable[[], Iterator[str]]] = {
    "traversals": _traversals_demo,
    "bst": _bst_demo,
    "heap": _heap_demo,
    "list": _list_demo,
    "tower": _tower_demo,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the named demonstrations (all of them when none is named)."""
    parser = argparse.ArgumentParser(
        prog="lecturetrees",
        description="Demonstrate trees, heaps, lists and the Tower of Hanoi.",
    )
    parser.add_argument(
        "demos",
        nargs="*",
        choices=list(_DEMOS),
        metavar="DEMO",
        help=f"demonstrations to run: {', '.join(_DEMOS)}",
    )
    args = parser.parse_args(argv)
    chosen: List[str] = args.demos or list(_DEMOS)

    for name in chosen:
        print(f"--- {name} ---")
        for line in _DEMOS[name]():
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())