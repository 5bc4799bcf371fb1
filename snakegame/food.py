"""Placing food on free cells of the playing field."""

from __future__ import annotations

import random
import sys

from .canvas import Canvas
from .coord import Coord


def _playable_range(canvas: Canvas, border_offset: int, zoom: int) -> tuple[int, int, int, int]:
    origin = -(-border_offset // zoom) * zoom
    x_range = (canvas.width - border_offset - origin) // zoom
    y_range = (canvas.height - border_offset - origin) // zoom
    return origin, origin, x_range, y_range


def generate_food(
    canvas: Canvas,
    border_offset: int,
    zoom: int,
    empty_color: int,
    rng: random.Random | None = None,
) -> Coord:
    """Pick a random grid-aligned cell inside the border whose corner pixel is empty.

    Raises ValueError when the playable area holds no cell at all.
    """
    rng = rng if rng is not None else random.Random()
    x_min, y_min, x_range, y_range = _playable_range(canvas, border_offset, zoom)
    if x_range <= 0 or y_range <= 0:
        raise ValueError("playable area too small to place food")

    while True:
        candidate = Coord(
            rng.randrange(x_range) * zoom + x_min,
            rng.randrange(y_range) * zoom + y_min,
        )
        if canvas.get_pixel(candidate.x, candidate.y) == empty_color:
            return candidate


def spawn_food(
    canvas: Canvas,
    border_offset: int,
    zoom: int,
    empty_color: int,
    food_color: int,
    rng: random.Random | None = None,
) -> Coord | None:
    """Draw a food cell at a random empty place and return where it went.

    When no cell fits, an error is reported on stderr and None is returned.
    """
    try:
        food = generate_food(canvas, border_offset, zoom, empty_color, rng)
    except ValueError as exc:
        print(f"Error: {exc}.", file=sys.stderr)
        return None
    canvas.draw_cell(food.x, food.y, zoom, food_color)
    return food