"""Drawing of a game onto a pygame surface: grid, walls, fruit, snake, HUD, overlays."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from snakegrid.common import CELL, GRID_H, GRID_W, HUD_H, WIN_H, WIN_W, GameState
from snakegrid.game import Game

Color = tuple[int, int, int]


def _rgb(r: float, g: float, b: float) -> Color:
    return int(r * 255 + 0.5), int(g * 255 + 0.5), int(b * 255 + 0.5)


COLOR_BG = _rgb(0.04, 0.04, 0.04)
COLOR_GRID = _rgb(0.10, 0.10, 0.10)
COLOR_SNAKE_HEAD = _rgb(0.40, 1.00, 0.30)
COLOR_SNAKE_BODY = _rgb(0.20, 0.75, 0.15)
COLOR_FRUIT = _rgb(0.90, 0.15, 0.15)
COLOR_WALL = _rgb(0.30, 0.30, 0.30)
COLOR_TEXT = _rgb(0.85, 0.85, 0.85)
COLOR_OVER = _rgb(0.90, 0.20, 0.20)
COLOR_HUD_BG = _rgb(0.08, 0.08, 0.08)

OVERLAY_ALPHA = int(0.70 * 255)

SMALL = 12
MEDIUM = 18
LARGE = 24

WALL_INSET = 1
FRUIT_INSET = 3
HEAD_INSET = 1
BODY_INSET = 2


@dataclass(frozen=True)
class Label:
    """A line of text; ``y`` is the baseline, measured down from the window top."""

    text: str
    x: int
    y: int
    color: Color
    size: int


def cell_rect(col: int, row: int, inset: int = 2) -> pygame.Rect:
    """Pixel rectangle of grid cell (``col``, ``row``) shrunk by ``inset`` on every side.

    Row 0 is the top row of the grid, directly below the HUD bar.
    """
    size = CELL - inset * 2
    return pygame.Rect(col * CELL + inset, HUD_H + row * CELL + inset, size, size)


def hud_texts(game: Game) -> list[Label]:
    """The score, best score and pause hint shown in the HUD bar."""
    baseline = HUD_H - 12
    status = "[PAUSED]" if game.state is GameState.PAUSED else "[P] Pause"
    return [
        Label(f"SCORE: {game.score}", 10, baseline, COLOR_TEXT, MEDIUM),
        Label(f"BEST: {game.hi_score}", WIN_W // 2 - 50, baseline, COLOR_TEXT, MEDIUM),
        Label(status, WIN_W - 130, baseline, COLOR_TEXT, SMALL),
    ]


def overlay_texts(game: Game) -> list[Label]:
    """The pause or game-over message; empty while the game is being played."""
    mid_x, mid_y = WIN_W // 2, WIN_H // 2
    if game.state is GameState.PLAYING:
        return []
    if game.state is GameState.GAME_OVER:
        return [
            Label("GAME  OVER", mid_x - 68, mid_y - 20, COLOR_OVER, LARGE),
            Label(f"Score: {game.score}", mid_x - 50, mid_y + 10, COLOR_TEXT, MEDIUM),
            Label("Press R to restart", mid_x - 90, mid_y + 40, COLOR_TEXT, SMALL),
        ]
    return [
        Label("PAUSED", mid_x - 42, mid_y - 10, COLOR_SNAKE_HEAD, LARGE),
        Label("Press P to continue", mid_x - 78, mid_y + 20, COLOR_TEXT, SMALL),
    ]


class Renderer:
    """Draws whole frames of a :class:`Game` onto ``surface``."""

    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface
        self._canvas = pygame.Surface((WIN_W, WIN_H))
        self._viewport: tuple[int, int] = surface.get_size()
        self._fonts: dict[int, pygame.font.Font] = {}

    @property
    def viewport(self) -> tuple[int, int]:
        return self._viewport

    def reshape(self, width: int, height: int) -> None:
        """Set the area of the target surface that a frame is scaled to."""
        if width < 0 or height < 0:
            raise ValueError(f"viewport size must not be negative: {width}x{height}")
        self._viewport = (width, height)

    def draw(self, game: Game) -> None:
        """Draw one complete frame; flips the display if drawing onto it."""
        canvas = self._canvas
        canvas.fill(COLOR_BG)
        self._draw_grid(canvas)

        for col, row in game.wall.walls:
            pygame.draw.rect(canvas, COLOR_WALL, cell_rect(col, row, WALL_INSET))

        fx, fy = game.fruit.position
        pygame.draw.rect(canvas, COLOR_FRUIT, cell_rect(fx, fy, FRUIT_INSET))

        head, *rest = game.snake.body
        for col, row in rest:
            pygame.draw.rect(canvas, COLOR_SNAKE_BODY, cell_rect(col, row, BODY_INSET))
        pygame.draw.rect(canvas, COLOR_SNAKE_HEAD, cell_rect(head[0], head[1], HEAD_INSET))

        self._draw_hud(canvas, game)
        if game.state is not GameState.PLAYING:
            self._draw_overlay(canvas, game)

        self._present()

    def _present(self) -> None:
        if self._viewport == self._canvas.get_size():
            self._surface.blit(self._canvas, (0, 0))
        else:
            self._surface.blit(pygame.transform.scale(self._canvas, self._viewport), (0, 0))
        if pygame.display.get_init() and self._surface is pygame.display.get_surface():
            pygame.display.flip()

    @staticmethod
    def _draw_grid(canvas: pygame.Surface) -> None:
        for c in range(GRID_W + 1):
            x = c * CELL
            pygame.draw.line(canvas, COLOR_GRID, (x, HUD_H), (x, WIN_H))
        for r in range(GRID_H + 1):
            y = HUD_H + r * CELL
            pygame.draw.line(canvas, COLOR_GRID, (0, y), (WIN_W, y))

    def _draw_hud(self, canvas: pygame.Surface, game: Game) -> None:
        canvas.fill(COLOR_HUD_BG, pygame.Rect(0, 0, WIN_W, HUD_H))
        for label in hud_texts(game):
            self._draw_label(canvas, label)

    def _draw_overlay(self, canvas: pygame.Surface, game: Game) -> None:
        box = pygame.Surface((WIN_W // 2, WIN_H // 2), pygame.SRCALPHA)
        box.fill((0, 0, 0, OVERLAY_ALPHA))
        canvas.blit(box, (WIN_W // 4, WIN_H // 4))
        for label in overlay_texts(game):
            self._draw_label(canvas, label)

    def _font(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def _draw_label(self, canvas: pygame.Surface, label: Label) -> None:
        font = self._font(label.size)
        image = font.render(label.text, True, label.color)
        canvas.blit(image, (label.x, label.y - font.get_ascent()))