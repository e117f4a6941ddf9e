# snakegrid

A classic Snake game played on a 30 × 30 grid. Steer the snake with the arrow
keys, eat the fruit to grow and score, and avoid the walls and your own body.
The best score is kept across restarts within a session.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
snakegrid
```

This opens a resizable 600 × 640 window. A score bar sits at the top and the
grid is below it. The frame is scaled to fit the window.

Controls:

| Key         | Action                                   |
|-------------|------------------------------------------|
| Arrow keys  | Change direction (reversing is ignored)  |
| `P`         | Pause / resume                           |
| `R`         | Restart (best score is kept)             |
| `Esc`       | Quit                                     |

The snake starts in the centre of the grid. It is one cell long and heads
right. It advances one cell every 150 ms, and arrow keys are ignored while the
game is paused or over.

The game ends when the head lands on a wall or the snake runs into itself.
Each fruit eaten adds one to the score and one cell to the snake. A new fruit
is then placed at random on a cell that holds no snake and no wall.

The standard level has a wall around the edge of the grid. Inside it are
decorations in the four corners, a diamond in the centre, and four short
barriers.

## Using the game logic

The rules do not depend on the window and can be driven directly:

```python
import random

from snakegrid.app import build_game
from snakegrid.common import GameState
from snakegrid.snake import Direction

game = build_game(random.Random(1))
game.handle_arrow(Direction.UP)
game.update()
print(game.score, game.state is GameState.PLAYING)
```

`Game(wall_cells, rng)` builds a game with any wall layout you choose.
Cells outside the grid are skipped with a logged warning. On a game with no
walls around its edge, nothing stops the snake from leaving the grid.

`Game.handle_key` takes a character: `p`/`P` toggles pause and `r`/`R` resets
the game. Escape (`"\x1b"`) raises `SystemExit`.

The building blocks live in their own modules:

- `snakegrid.common`: grid and window sizes, `GameState`
- `snakegrid.snake`: `Snake` and `Direction`
- `snakegrid.wall`: `Wall`, a set of static obstacle cells
- `snakegrid.fruit`: `Fruit`, and `GridFullError`, which is raised when no free cell is left
- `snakegrid.game`: `Game`, with the update step, scoring and state changes
- `snakegrid.renderer`: `Renderer`, which draws a `Game` onto a pygame surface; also `cell_rect`, `hud_texts` and `overlay_texts`
- `snakegrid.app`: `default_walls`, `build_game`, `key_to_direction` and `main`

## What it does not do

Scores are not saved. The best score lasts only until the window is closed.
There is a single built-in level. The speed of the snake is fixed.