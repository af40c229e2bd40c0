# lecturetrees

Small, readable implementations of classic data structures. There are no dependencies beyond the standard library.

## Modules

- `lecturetrees.shapes`
  - `HSLAPixel` is a frozen colour dataclass with fields `h`, `s`, `l`, `a`. Its default is opaque white. It has the presets `BLUE`, `ORANGE`, `YELLOW` and `PURPLE`.
  - `Shape` has a `width` field, 1 by default.
  - `Cube(width, color)` has a `length` property, which is the width, and `volume()` and `surface_area()`.
  - `my_max(a, b)` returns `a` if `a > b`, otherwise `b`.
- `lecturetrees.heap`
  - `Heap` is a list-backed binary min-heap.
  - It has `insert(key)` and `remove_min()`. On an empty heap, `remove_min()` raises `IndexError`.
  - It supports `len()`, and iteration in storage (level) order.
- `lecturetrees.linked_list`
  - `LinkedList` is a singly linked list with `insert_at_front(data)`, `find(data)`, `len()` and iteration.
  - For indexing, an index past the end gives the last item. A negative index, or any index into an empty list, raises `IndexError`.
- `lecturetrees.value_tree`
  - `TreeNode` is a node with `data`, `left` and `right`.
  - `ValueBinaryTree(contents)` builds a complete tree level by level, left to right. You can do the same later with `create_complete_tree(contents)`.
  - `clear()` empties the tree.
  - `pre_order(node)`, `in_order(node)` and `post_order(node)` are generators over the subtree at `node`. Pass `tree.root` to walk the whole tree.
  - `level_order()` walks the whole tree.
- `lecturetrees.bst_nodes`
  - `BSTNode` is a search-tree node with an `is_leaf` property.
  - The helpers are `rightmost(node)`, `in_order_predecessor(node)` and `iter_in_order(node)`.
- `lecturetrees.dictionary`
  - `Dictionary` is an unbalanced binary-search-tree map.
  - `insert(key, data)` raises `ValueError` for a key that is already present.
  - `find(key)` and `remove(key)` raise `KeyError` for a missing key. `remove` handles the zero-, one- and two-child cases; in the last case the in-order predecessor takes the node's place. It returns the removed data.
  - It also has `is_empty()`, `items()` (pairs in key order), `format_in_order()` and `clear()`. `format_in_order()` gives `[key : data]` for each entry and a space for each empty link.
- `lecturetrees.tower`
  - This module plays the Tower of Hanoi with cubes.
  - `Stack` has `push(cube)`, `remove_top()`, `peek_top()`, `len()` and `str()`.
    - `push` raises `IllegalMoveError`, a `RuntimeError`, when a cube is larger than the current top.
    - On an empty stack, `remove_top()` and `peek_top()` raise `IndexError`.
  - `Game()` starts with cubes of length 4, 3, 2 and 1 on stack 0. Each of two methods solves the game and returns the moves it made, as `(source, target)` pairs:
    - `solve()` repeats the only legal move between stacks (0, 1), (0, 2) and (1, 2) until every cube is on stack 2.
    - `solve_recursive()` uses the classic recursive strategy.
- `lecturetrees.demo`
  - `main(argv=None)` runs the demonstrations.

## Installation

```
pip install .
```

To install with the test tools:

```
pip install .[test]
```

## Example

```python
from lecturetrees.heap import Heap
from lecturetrees.dictionary import Dictionary
from lecturetrees.value_tree import ValueBinaryTree
from lecturetrees.tower import Game

heap = Heap()
for key in (4, 10, 2, 22):
    heap.insert(key)
print(heap.remove_min())  # 2

d = Dictionary()
d.insert(37, "thirty seven")
d.insert(19, "nineteen")
print(d.find(19))         # nineteen
print(d.remove(37))       # thirty seven

tree = ValueBinaryTree([1, 2, 3, 4, 5, 6, 7])
print(list(tree.in_order(tree.root)))  # [4, 2, 5, 1, 6, 3, 7]

game = Game()
moves = game.solve_recursive()
print(len(moves))         # 15
print(game)
```

## Demo

To run every demonstration:

```
lecturetrees-demo
```

To run only some of them, name any of `traversals`, `bst`, `heap`, `list` and `tower`:

```
lecturetrees-demo heap tower
```