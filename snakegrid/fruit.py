"""The fruit, placed uniformly at random on a free grid cell."""

from __future__ import annotations

import random
from collections.abc import Collection

from snakegrid.common import Cell


class GridFullError(RuntimeError):
    """Raised when every grid cell is occupied and no fruit can be placed."""


class Fruit:
    """A single fruit on a ``grid_w`` by ``grid_h`` grid."""

    def __init__(
        self,
        grid_w: int,
        grid_h: int,
        occupied: Collection[Cell],
        rng: random.Random | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._position: Cell = (0, 0)
        self._place(grid_w, grid_h, occupied)

    @property
    def position(self) -> Cell:
        return self._position

    def respawn(self, grid_w: int, grid_h: int, occupied: Collection[Cell]) -> None:
        """Move the fruit to a new random free cell."""
        self._place(grid_w, grid_h, occupied)

    def _place(self, grid_w: int, grid_h: int, occupied: Collection[Cell]) -> None:
        blocked = set(occupied)
        free = [
            (col, row)
            for col in range(grid_w)
            for row in range(grid_h)
            if (col, row) not in blocked
        ]
        if not free:
            raise GridFullError("no free cell available (grid is full)")
        self._position = self._rng.choice(free)