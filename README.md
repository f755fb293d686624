# tulipwar

War of the Tulips is a small paddle game played between a bee and a wasp in a
tulip field. You pick a side and move your paddle up and down; the other
paddle is moved by the computer, sweeping up and down the field and turning
round at the flower borders. The grub bounces off the borders and the paddles,
a point is scored when it reaches a side edge of the field, and the game is
over once either side has five points.

## Installing

```
pip install .
```

## Playing

```
tulipwar
```

This opens a 1000 x 1000 window titled "War of the Tulips". The command takes
no options apart from `--help`.

| Key        | Action                                                  |
|------------|---------------------------------------------------------|
| Space      | Go on to the next screen; on the game-over screen, quit |
| B          | Play as the bee                                         |
| W          | Play as the wasp                                        |
| Up / Down  | Move your paddle                                        |
| Y          | On the game-over screen: play again                     |
| N          | Quit                                                    |
| F          | Switch to full screen                                   |
| Escape     | Quit                                                    |

The game goes through four screens: the title, the choice of side, the match
itself, and the game-over screen asking whether to play again.

## Artwork and fonts

The game looks for its images in `Images/Drawn/` and `Images/Additional/`,
and for its fonts in `Fonts/`, relative to the directory it is started from.
These files are not part of the package. An image that is missing is simply
not drawn, and a missing font is replaced by pygame's default font, so the
game still runs without them, only plainly.

## Using it from Python

The game is built from a few classes that can also be used on their own:

- `tulipwar.game.Game(title, width, height)` opens the window; `loop()` runs
  the match, and it can be used as a context manager that shuts pygame down
  on exit. `tulipwar.game.main()` starts it with the default window.
- `tulipwar.ai.AI` moves the computer paddle and the ball and detects paddle
  hits (`check_paddle`, `move_enemy_paddle`, `check_collision`, `move_ball`,
  `play_ball`).
- `tulipwar.events.Events` decides what is drawn at each stage and keeps score
  (`call_text`, `show_point`, `call_point`, `call_end_game`).
- `tulipwar.pics.Pics` and `tulipwar.text.Text` draw the artwork and the text
  onto a pygame surface and return the rectangles they used;
  `tulipwar.pics.Win` draws the winning poses.

## What it does not do

There is no sound, no two-player mode, and no saved scores or settings: the
score lives only as long as the window is open.

## Running the tests

```
pip install ".[test]"
pytest
```