"""Snake body, movement and collision detection on a canvas."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from .canvas import COLOR_BLUE, COLOR_RED, COLOR_WHITE, Canvas
from .coord import Coord
from .coordqueue import CoordQueue


class Direction(Enum):
    """Movement direction; opposite directions have values summing to 3."""

    LEFT = 0
    UP = 1
    DOWN = 2
    RIGHT = 3


class Collision(Enum):
    NONE = 0
    WALL = 1
    SNAKE = 2
    FOOD = 3


_OFFSETS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}

_COLLISIONS = {
    COLOR_BLUE: Collision.WALL,
    COLOR_WHITE: Collision.SNAKE,
    COLOR_RED: Collision.FOOD,
}


def is_reverse_turn(previous: Direction, current: Direction) -> bool:
    """True when current points exactly opposite to previous."""
    return previous.value + current.value == 3


def init_snake(width: int, height: int, zoom: int) -> CoordQueue:
    """Build a three-segment snake around the grid-aligned centre, head last."""
    x = (width // 2 // zoom) * zoom
    y = (height // 2 // zoom) * zoom
    body = CoordQueue()
    body.enqueue(Coord(x, y - 2 * zoom))
    body.enqueue(Coord(x, y - zoom))
    body.enqueue(Coord(x, y))
    return body


def new_position(direction: Direction, coord: Coord, zoom: int) -> Coord:
    """Return the cell one step of size zoom from coord in the given direction."""
    dx, dy = _OFFSETS[direction]
    return coord.moved(dx * zoom, dy * zoom)


def draw_snake(canvas: Canvas, body: Iterable[Coord], zoom: int, color: int) -> None:
    """Paint every segment of the snake."""
    for segment in body:
        canvas.draw_cell(segment.x, segment.y, zoom, color)


def move_snake(
    canvas: Canvas,
    body: CoordQueue,
    new_pos: Coord,
    zoom: int,
    snake_color: int,
    empty_color: int,
) -> None:
    """Advance the snake to new_pos, erasing its last segment."""
    canvas.draw_cell(new_pos.x, new_pos.y, zoom, snake_color)
    body.enqueue(new_pos)
    old = body.dequeue()
    canvas.draw_cell(old.x, old.y, zoom, empty_color)


def get_collision_type(canvas: Canvas, pos: Coord, zoom: int) -> Collision:
    """Classify what occupies the cell at pos by the first coloured pixel found."""
    for ix in range(zoom):
        for iy in range(zoom):
            found = _COLLISIONS.get(canvas.get_pixel(pos.x + ix, pos.y + iy))
            if found is not None:
                return found
    return Collision.NONE