"""Window, event loop and the default level: the command that starts a game."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

import pygame

from snakegrid.common import WIN_H, WIN_W, Cell
from snakegrid.game import ESCAPE, Game
from snakegrid.renderer import Renderer
from snakegrid.snake import Direction

TICK_MS = 150
"""Milliseconds between game ticks; lower is faster."""

TICK_EVENT = pygame.USEREVENT

_ARROWS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def default_walls() -> list[Cell]:
    """The wall layout of the standard level on a 30 by 30 grid."""
    cells: list[Cell] = []

    # Border: top and bottom rows, then left and right columns without corners.
    cells += [(c, 0) for c in range(30)]
    cells += [(c, 29) for c in range(30)]
    cells += [(0, r) for r in range(1, 29)]
    cells += [(29, r) for r in range(1, 29)]

    # Corner decorations.
    cells += [(3, 3), (4, 3), (5, 3), (3, 4), (3, 5)]
    cells += [(24, 3), (25, 3), (26, 3), (26, 4), (26, 5)]
    cells += [(3, 24), (3, 25), (3, 26), (4, 26), (5, 26)]
    cells += [(26, 24), (26, 25), (24, 26), (25, 26), (26, 26)]

    # Centre diamond.
    cells += [(14, 12), (13, 13), (15, 13), (14, 14)]
    cells += [(15, 15), (14, 16), (16, 16), (15, 17)]

    # Left and right mid barriers.
    cells += [(7, r) for r in range(12, 17)]
    cells += [(22, r) for r in range(12, 17)]

    # Top and bottom mid barriers.
    cells += [(c, 6) for c in range(12, 17)]
    cells += [(c, 23) for c in range(12, 17)]

    return cells


def build_game(rng: random.Random | None = None) -> Game:
    """A new game on the standard level."""
    return Game(default_walls(), rng)


def key_to_direction(key: int) -> Direction | None:
    """The direction an arrow key steers to, or None for any other key."""
    return _ARROWS.get(key)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="snakegrid",
        description="Play snake: arrows steer, P pauses, R restarts, Escape quits.",
    )
    return parser.parse_args(argv)


def _run(game: Game, renderer: Renderer) -> None:
    renderer.draw(game)
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return
        if event.type == TICK_EVENT:
            game.update()
            renderer.draw(game)
        elif event.type == pygame.VIDEORESIZE:
            renderer.reshape(event.w, event.h)
            renderer.draw(game)
        elif event.type == pygame.KEYDOWN:
            direction = key_to_direction(event.key)
            if direction is not None:
                game.handle_arrow(direction)
                continue
            if event.key == pygame.K_ESCAPE:
                game.handle_key(ESCAPE)
            elif getattr(event, "unicode", ""):
                game.handle_key(event.unicode)
            renderer.draw(game)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and play until it is closed or Escape is pressed."""
    _parse_args(argv)
    pygame.init()
    try:
        surface = pygame.display.set_mode((WIN_W, WIN_H), pygame.RESIZABLE)
        pygame.display.set_caption("Snake")
        renderer = Renderer(surface)
        game = build_game()
        pygame.time.set_timer(TICK_EVENT, TICK_MS)
        try:
            _run(game, renderer)
        except SystemExit as exc:
            return int(exc.code or 0)
        return 0
    finally:
        pygame.quit()