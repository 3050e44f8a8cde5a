# tetris

A compact falling-block puzzle game that draws with pygame. Pieces fall on a
10 × 20 board. Each full row you complete disappears and earns 100 points.

## Installing

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Playing

```
tetris
```

This opens a window that holds the board and a side panel. The panel shows
the score and, if you turn it on, the next-piece preview. A piece drops one
row every half second. When a piece cannot fall any further, it locks into
place, full rows are cleared and a new piece appears at the top. Each piece
is one of the seven standard shapes in a random colour.

The text uses pygame's default font. To use a different TrueType font:

```
tetris --font path/to/font.ttf
```

If the font cannot be loaded or the window cannot be created, the command
prints a message to standard error and exits with status 1.

### Keys

| Key          | Action                                  |
|--------------|-----------------------------------------|
| Left / Right | Move the piece sideways                 |
| Down         | Move the piece down one row             |
| Up           | Rotate the piece clockwise, if it fits  |
| Space        | Hard drop: lock the piece at the bottom |
| G            | Show or hide the ghost (landing spot)   |
| H            | Show or hide the next-piece preview     |
| P            | Pause or resume                         |
| Q            | Quit                                    |

Movement, rotation, drops and gravity do nothing while the game is paused.
During a pause the window shows only "PAUSED".

## Using the game logic

The rules do not depend on the display, so you can drive them directly:

```python
import random

from tetris.game import Game

game = Game(random.Random(1))
game.move_left()
game.rotate()
game.hard_drop()
print(game.score)
```

- `tetris.game.Game` holds the current piece, the next piece, the score, and
  the pause, ghost and preview toggles. It has `move_left`, `move_right`,
  `soft_drop`, `rotate`, `hard_drop`, `gravity_step` and `ghost`. While the
  game is paused, the moves return `False` and do nothing.
- `tetris.board.Board` holds the grid. It has `is_filled`, collision checks
  (`can_move`), piece locking (`place`), line clearing (`clear_lines`, which
  returns the number of rows removed) and the landing position (`ghost`).
- `tetris.tetromino.Tetromino` is an immutable piece. `spawn` creates a
  random one, `cells` yields its board coordinates, `moved` and `rotated`
  return new pieces, and `preview_cells` gives pixel offsets that centre it
  in the preview box.
- `tetris.app` holds the drawing functions (`draw_board`, `draw_piece`,
  `draw_preview`, `draw_frame`), the key handling (`handle_key`) and `main`.

## What it does not do

The game has no game-over state. When a new piece has no room, play goes on.
It has no levels and no speed-up. It does not store high scores.

## Running the tests

```
pytest
```