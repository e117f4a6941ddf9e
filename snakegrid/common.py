"""Shared grid dimensions and the game state enumeration."""

from __future__ import annotations

from enum import Enum

Cell = tuple[int, int]

CELL = 20
"""Pixel size of one grid cell."""

GRID_W = 30
"""Number of grid columns."""

GRID_H = 30
"""Number of grid rows."""

HUD_H = 40
"""Pixel height of the score bar above the grid."""

WIN_W = GRID_W * CELL
WIN_H = GRID_H * CELL + HUD_H


class GameState(Enum):
    """The phase a game is in; the renderer uses it to pick an overlay."""

    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"