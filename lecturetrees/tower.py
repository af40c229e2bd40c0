"""The Tower of Hanoi played with stacks of coloured cubes."""

from __future__ import annotations

from typing import List, Tuple

from lecturetrees.shapes import Cube, HSLAPixel

Move = Tuple[int, int]


class IllegalMoveError(RuntimeError):
    """Raised when a cube would be placed on top of a smaller cube."""


class Stack:
    """A pile of cubes where a cube may only rest on a larger one."""

    def __init__(self) -> None:
        self._cubes: List[Cube] = []

    def push(self, cube: Cube) -> None:
        """Place ``cube`` on top; raise IllegalMoveError if it is larger than the top."""
        if self._cubes and cube.length > self.peek_top().length:
            raise IllegalMoveError(
                "A smaller cube cannot be placed on top of a larger cube. "
                f"Tried to add Cube(length={cube.length:g}) to stack: {self}"
            )
        self._cubes.append(cube)

    def remove_top(self) -> Cube:
        """Remove and return the top cube."""
        if not self._cubes:
            raise IndexError("remove_top() on an empty stack")
        return self._cubes.pop()

    def peek_top(self) -> Cube:
        """Return the top cube without removing it."""
        if not self._cubes:
            raise IndexError("peek_top() on an empty stack")
        return self._cubes[-1]

    def __len__(self) -> int:
        return len(self._cubes)

    def __str__(self) -> str:
        return " ".join(f"{cube.length:g}" for cube in self._cubes)


class Game:
    """Three stacks, with four cubes of decreasing size on the first one."""

    def __init__(self) -> None:
        self.stacks: List[Stack] = [Stack() for _ in range(3)]
        for length, color in (
            (4, HSLAPixel.BLUE),
            (3, HSLAPixel.ORANGE),
            (2, HSLAPixel.PURPLE),
            (1, HSLAPixel.YELLOW),
        ):
            self.stacks[0].push(Cube(length, color))
        self._total = sum(len(stack) for stack in self.stacks)

    def _move(self, source: int, target: int) -> Move:
        self.stacks[target].push(self.stacks[source].remove_top())
        return source, target

    def _legal_move(self, first: int, second: int) -> List[Move]:
        a, b = self.stacks[first], self.stacks[second]
        if not a and not b:
            return []
        if not a:
            return [self._move(second, first)]
        if not b or a.peek_top().length < b.peek_top().length:
            return [self._move(first, second)]
        return [self._move(second, first)]

    def solve(self) -> List[Move]:
        """Solve by cycling the only legal move between each pair of stacks.

        Returns the moves made as ``(source, target)`` index pairs.
        """
        moves: List[Move] = []
        while len(self.stacks[2]) != self._total:
            for first, second in ((0, 1), (0, 2), (1, 2)):
                moves.extend(self._legal_move(first, second))
        return moves

    def solve_recursive(self) -> List[Move]:
        """Solve by recursively moving all cubes from stack 0 to stack 2 via stack 1.

        Returns the moves made as ``(source, target)`` index pairs.
        """
        moves: List[Move] = []

        def move_range(start: int, end: int, source: int, target: int, spare: int) -> None:
            if start == end:
                moves.append(self._move(source, target))
                return
            move_range(start + 1, end, source, spare, target)
            move_range(start, start, source, target, spare)
            move_range(start + 1, end, spare, target, source)

        count = len(self.stacks[0])
        if count:
            move_range(0, count - 1, 0, 2, 1)
        return moves

    def __str__(self) -> str:
        return "\n".join(f"Stack[{i}]: {stack}" for i, stack in enumerate(self.stacks))