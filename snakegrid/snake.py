"""The snake: a queue of cells that moves one step per tick."""

from __future__ import annotations

from collections import deque
from enum import Enum

from snakegrid.common import Cell


class Direction(Enum):
    """A heading on the grid; row numbers grow downwards."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

    def step(self, cell: Cell) -> Cell:
        """Return the cell one step from ``cell`` in this direction."""
        dx, dy = self.value
        return cell[0] + dx, cell[1] + dy


class Snake:
    """A snake of one or more cells; the first cell is the head."""

    def __init__(self, start_x: int, start_y: int) -> None:
        start = (start_x, start_y)
        self._body: deque[Cell] = deque([start])
        self._cells: set[Cell] = {start}
        self._direction = Direction.RIGHT
        self._pending_grow = False

    @property
    def head(self) -> Cell:
        return self._body[0]

    @property
    def body(self) -> tuple[Cell, ...]:
        """All segments, head first."""
        return tuple(self._body)

    @property
    def body_set(self) -> frozenset[Cell]:
        return frozenset(self._cells)

    @property
    def direction(self) -> Direction:
        return self._direction

    def __len__(self) -> int:
        return len(self._body)

    def move(self) -> bool:
        """Advance one cell; return False, leaving the body as it was, on self-collision."""
        new_head = self._direction.step(self.head)
        if new_head in self._cells:
            return False
        self._body.appendleft(new_head)
        self._cells.add(new_head)
        if self._pending_grow:
            self._pending_grow = False
        else:
            self._cells.discard(self._body.pop())
        return True

    def grow(self) -> None:
        """Keep the tail on the next move, lengthening the snake by one."""
        self._pending_grow = True

    def set_direction(self, new_dir: Direction) -> None:
        """Turn, unless the turn would reverse the snake onto itself."""
        if new_dir is not self._direction.opposite:
            self._direction = new_dir

    def occupies(self, x: int, y: int) -> bool:
        return (x, y) in self._cells