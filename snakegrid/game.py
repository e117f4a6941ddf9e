"""Game state: owns the snake, the fruit and the walls, and advances them."""

from __future__ import annotations

import random
from collections.abc import Iterable

from snakegrid.common import GRID_H, GRID_W, Cell, GameState
from snakegrid.fruit import Fruit
from snakegrid.snake import Direction, Snake
from snakegrid.wall import Wall

ESCAPE = "\x1b"


class Game:
    """One game of snake on a ``GRID_W`` by ``GRID_H`` grid.

    The snake starts in the centre heading right. Each call to
    :meth:`update` moves it one cell and checks for collisions and fruit.
    """

    def __init__(
        self,
        wall_cells: Iterable[Cell] = (),
        rng: random.Random | None = None,
    ) -> None:
        self._snake = self._new_snake()
        self._wall = Wall(wall_cells, (GRID_W, GRID_H))
        self._fruit = Fruit(GRID_W, GRID_H, self.occupied(), rng)
        self._score = 0
        self._hi_score = 0
        self._state = GameState.PLAYING

    @staticmethod
    def _new_snake() -> Snake:
        return Snake(GRID_W // 2, GRID_H // 2)

    @property
    def snake(self) -> Snake:
        return self._snake

    @property
    def fruit(self) -> Fruit:
        return self._fruit

    @property
    def wall(self) -> Wall:
        return self._wall

    @property
    def score(self) -> int:
        return self._score

    @property
    def hi_score(self) -> int:
        return self._hi_score

    @property
    def state(self) -> GameState:
        return self._state

    def occupied(self) -> set[Cell]:
        """Cells taken by the snake or a wall, where no fruit may go."""
        return set(self._snake.body_set) | set(self._wall.walls)

    def update(self) -> None:
        """Advance one tick; does nothing unless the game is being played."""
        if self._state is not GameState.PLAYING:
            return
        if not self._snake.move():
            self._state = GameState.GAME_OVER
            return
        head = self._snake.head
        if self._wall.is_wall(head):
            self._state = GameState.GAME_OVER
            return
        if head == self._fruit.position:
            self._snake.grow()
            self._score += 1
            self._hi_score = max(self._hi_score, self._score)
            self._fruit.respawn(GRID_W, GRID_H, self.occupied())

    def handle_key(self, key: str | int) -> None:
        """React to a character key: P pauses, R restarts, Escape quits.

        Escape raises :class:`SystemExit`.
        """
        if isinstance(key, int):
            key = chr(key)
        if key in ("p", "P"):
            if self._state is GameState.PLAYING:
                self._state = GameState.PAUSED
            elif self._state is GameState.PAUSED:
                self._state = GameState.PLAYING
        elif key in ("r", "R"):
            self.reset()
        elif key == ESCAPE:
            raise SystemExit(0)

    def handle_arrow(self, direction: Direction) -> None:
        """Steer the snake; ignored unless the game is being played."""
        if self._state is not GameState.PLAYING:
            return
        self._snake.set_direction(direction)

    def reset(self) -> None:
        """Start a new game with the same walls; the best score is kept."""
        self._score = 0
        self._state = GameState.PLAYING
        self._snake = self._new_snake()
        self._fruit.respawn(GRID_W, GRID_H, self.occupied())