"""Static obstacles on the grid."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from snakegrid.common import Cell

logger = logging.getLogger(__name__)


class Wall:
    """A set of wall cells within a grid of size ``space`` (columns, rows)."""

    def __init__(self, cells: Iterable[Cell], space: tuple[int, int]) -> None:
        self._space = (space[0], space[1])
        self._walls: set[Cell] = set()
        for cell in cells:
            pos = (cell[0], cell[1])
            if self.is_valid(pos):
                self._walls.add(pos)
            else:
                logger.warning("position (%d,%d) is invalid", pos[0], pos[1])

    def is_wall(self, pos: Cell) -> bool:
        return tuple(pos) in self._walls

    def is_valid(self, pos: Cell) -> bool:
        """True if ``pos`` is inside the grid and not already a wall."""
        x, y = pos
        width, height = self._space
        if not (0 <= x < width and 0 <= y < height):
            return False
        return not self.is_wall(pos)

    @property
    def walls(self) -> frozenset[Cell]:
        return frozenset(self._walls)