# snakegame

A snake arcade game played on a grid inside a walled arena. Steer the snake
toward the food, grow longer with each bite and avoid the walls and your own
body.

## Installing

```
pip install .
```

The game opens its window and reads the keyboard through pygame.

## Playing

```
snakegame [interval_seconds] [max_food_count]
```

The two arguments are read only when both are given:

- `interval_seconds`: how often a new piece of food appears (default 5 seconds).
- `max_food_count`: the most food that can be on the board at once (default 50).

With fewer than two arguments the defaults are used. If either value is not
greater than zero, the defaults are used and a usage message is printed on
stderr. The settings in use are reported when the game starts.

The window is 1280 x 800 pixels; the arena is drawn in cells of 8 pixels
inside a blue wall. The start screen offers three difficulty levels, which set
how often the snake moves:

| Level  | Move interval |
|--------|---------------|
| EASY   | 100 ms        |
| NORMAL | 60 ms         |
| HARD   | 30 ms         |

### Controls

- Arrow keys or `W` `A` `S` `D` steer the snake.
- Up and Down move through the menus, Enter or Space confirms.
- `Esc`, `Ctrl+C`, `Ctrl+D` or closing the window quits.

Each piece of food is worth 10 points. The round ends when the snake hits a
wall, turns straight back on itself or runs into its own body, and is won when
the snake fills the whole arena. After a round you can play again or leave.

## What is not included

Menu text is drawn with the font at `assets/PixelOperatorMono8.ttf`, looked up
relative to the directory the game is started from. The package does not ship
this font. Without it, each attempt to draw menu text prints a
"Failed to load font" message on stderr and the menus show no text, though
the keys still work.

## Using it as a library

The parts of the game can be used on their own:

- `snakegame.canvas`: `Canvas`, an in-memory grid of 0xRRGGBB colours with
  `put_pixel`, `get_pixel`, `clear`, `draw_cell` and `draw_border`, plus
  `make_color` and `color_components`.
- `snakegame.coord`: `Coord`, a frozen (x, y) position with `moved(dx, dy)`.
- `snakegame.coordqueue`: `CoordQueue`, the FIFO of coordinates that makes up
  the snake's body (`enqueue`, `dequeue`, `head`, `tail`, `is_empty`, `len`,
  iteration).
- `snakegame.snake`: `Direction`, `Collision`, `init_snake`, `new_position`,
  `draw_snake`, `move_snake`, `get_collision_type` and `is_reverse_turn`.
- `snakegame.food`: `generate_food` and `spawn_food`, which place food on a
  random empty cell, optionally with your own `random.Random`.
- `snakegame.display`: `Display`, a pygame window showing a `Canvas`, usable
  as a context manager.
- `snakegame.menu`: `Difficulty`, `select_option`, `show_start_screen` and
  `show_end_screen`.
- `snakegame.game`: `GameSettings`, `parse_settings`, `difficulty_to_interval`,
  `next_direction`, `elapsed_ms`, `play_round` and `main`.

## Running the tests

```
pip install .[test]
pytest
```