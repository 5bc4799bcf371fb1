"""Game settings, the main play loop and the command entry point."""

from __future__ import annotations

import random
import re
import sys
import time
from dataclasses import dataclass

import pygame

from .canvas import COLOR_BLACK, COLOR_BLUE, COLOR_RED, COLOR_WHITE
from .display import Display, DisplayError
from .food import spawn_food
from .menu import Difficulty, show_end_screen, show_start_screen
from .snake import (
    Collision,
    Direction,
    draw_snake,
    get_collision_type,
    init_snake,
    is_reverse_turn,
    move_snake,
    new_position,
)

FOOD_SPAWN_INTERVAL_MS = 5000.0
MAX_FOOD_COUNT = 50

BORDER_OFFSET = 16
ZOOM = 8

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 800
WINDOW_TITLE = "Snake - TP"

FRAMES_PER_SECOND = 60.0
_FRAME_TIME_US = 1.0 / FRAMES_PER_SECOND * 1e6

EMPTY = COLOR_BLACK
SNAKE = COLOR_WHITE
FOOD = COLOR_RED
WALL = COLOR_BLUE

_PROG = "snakegame"

_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}

_INTERVALS = {
    Difficulty.EASY: 100.0,
    Difficulty.NORMAL: 60.0,
    Difficulty.HARD: 30.0,
    Difficulty.LEAVE: 0.0,
}

_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


@dataclass(frozen=True)
class GameSettings:
    """Food spawning parameters for a session."""

    food_spawn_interval: float = FOOD_SPAWN_INTERVAL_MS
    max_food_count: int = MAX_FOOD_COUNT


@dataclass(frozen=True)
class RoundResult:
    """Outcome of one round: the score, whether the snake filled the field, and
    whether the player asked to quit."""

    score: int
    won: bool
    quit: bool


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else 0


def parse_settings(argv: list[str]) -> GameSettings:
    """Read [interval_seconds] [max_food_count] from the arguments.

    Missing or non-positive values fall back to the defaults; the chosen
    settings are reported on stdout, invalid ones on stderr.
    """
    defaults = GameSettings()
    if len(argv) < 2:
        print(
            f"No parameters provided. Using defaults: {defaults.food_spawn_interval:.0f} ms "
            f"interval, {defaults.max_food_count} max food"
        )
        return defaults

    interval = _leading_float(argv[0])
    food = _leading_int(argv[1])
    if interval > 0 and food > 0:
        settings = GameSettings(interval * 1000.0, food)
        print(
            f"Using custom settings: {settings.food_spawn_interval:.0f} ms interval, "
            f"{settings.max_food_count} max food"
        )
        return settings

    print(
        f"Invalid parameters. Using defaults: {defaults.food_spawn_interval:.0f} ms "
        f"interval, {defaults.max_food_count} max food",
        file=sys.stderr,
    )
    print(f"Usage: {_PROG} [interval_seconds > 0] [max_food_count > 0]", file=sys.stderr)
    return defaults


def difficulty_to_interval(difficulty: Difficulty) -> float:
    """Milliseconds between snake moves for a difficulty; 0.0 for LEAVE."""
    return _INTERVALS.get(difficulty, 60.0)


def next_direction(current: Direction, key: int) -> Direction:
    """Direction requested by a key (arrows or WASD), or current for any other key."""
    return _KEY_DIRECTIONS.get(key, current)


def elapsed_ms(start: float, end: float) -> float:
    """Milliseconds between two timestamps given in seconds."""
    return (end - start) * 1000.0


def _check_dimensions(width: int, height: int) -> None:
    if (width - 2 * BORDER_OFFSET) % ZOOM or (height - 2 * BORDER_OFFSET) % ZOOM:
        raise ValueError(f"screen dimensions must align with zoom ({ZOOM}).")


def play_round(display, settings: GameSettings, difficulty: Difficulty) -> RoundResult:
    """Play one round on the display until the snake dies, wins or the player quits."""
    canvas = display.canvas
    move_interval = difficulty_to_interval(difficulty)
    rng = random.Random()

    x_min = (BORDER_OFFSET // ZOOM) * ZOOM
    y_min = (BORDER_OFFSET // ZOOM) * ZOOM
    x_max = display.width - BORDER_OFFSET - ZOOM
    y_max = display.height - BORDER_OFFSET - ZOOM

    # The walls sit just outside the playable area.
    canvas.draw_border(x_min - 1, x_max + ZOOM + 1, y_min - 1, y_max + ZOOM + 1, WALL)

    max_snake_size = ((x_max - x_min) // ZOOM) * ((y_max - y_min) // ZOOM)

    body = init_snake(x_max, y_max, ZOOM)
    draw_snake(canvas, body, ZOOM, SNAKE)

    food_count = 1
    score = 0
    spawn_food(canvas, BORDER_OFFSET, ZOOM, EMPTY, FOOD, rng)

    direction = Direction.RIGHT
    last_food_time = time.monotonic()
    last_move_time: float | None = None
    done = False
    won = False

    while not done:
        frame_start = time.monotonic()

        last_direction = direction
        direction = next_direction(direction, display.poll_key())

        done = display.quit_signal()
        display.present()

        won = len(body) >= max_snake_size
        if won:
            print("You win")
            break

        now = time.monotonic()

        spawn_due = (
            elapsed_ms(last_food_time, now) >= settings.food_spawn_interval
            and food_count < settings.max_food_count
        )
        if spawn_due or food_count == 0:
            food_count += 1
            spawn_food(canvas, BORDER_OFFSET, ZOOM, EMPTY, FOOD, rng)
            last_food_time = time.monotonic()

        if last_move_time is None:
            last_move_time = time.monotonic()
            continue

        if elapsed_ms(last_move_time, now) >= move_interval:
            new_head = new_position(direction, body.tail, ZOOM)
            collision = get_collision_type(canvas, new_head, ZOOM)

            if collision is Collision.WALL or is_reverse_turn(last_direction, direction):
                print("Wall collision or reverse turn detected")
                break
            if collision is Collision.SNAKE:
                print("Snake self-collision detected")
                break

            if collision is Collision.FOOD:
                score += 10
                print("Food eaten!")
                canvas.draw_cell(new_head.x, new_head.y, ZOOM, EMPTY)
                canvas.draw_cell(new_head.x, new_head.y, ZOOM, SNAKE)
                body.enqueue(new_head)
                food_count -= 1
            else:
                move_snake(canvas, body, new_head, ZOOM, SNAKE, EMPTY)
            last_move_time = time.monotonic()

        frame_ms = elapsed_ms(frame_start, time.monotonic())
        pause_us = _FRAME_TIME_US - frame_ms
        if pause_us > 0.0:
            time.sleep(pause_us / 1e6)

    return RoundResult(score=score, won=won, quit=done)


def main(argv: list[str] | None = None) -> int:
    """Run the game: menus and rounds until the player leaves."""
    args = sys.argv[1:] if argv is None else list(argv)
    settings = parse_settings(args)

    try:
        _check_dimensions(SCREEN_WIDTH, SCREEN_HEIGHT)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        display = Display(WINDOW_TITLE, SCREEN_WIDTH, SCREEN_HEIGHT)
    except DisplayError:
        print("Graphics initialization failed!", file=sys.stderr)
        return 1

    with display:
        while True:
            display.canvas.clear(EMPTY)
            difficulty = show_start_screen(display)
            if difficulty is Difficulty.LEAVE:
                break
            result = play_round(display, settings, difficulty)
            if result.quit:
                break
            if not show_end_screen(display, result.score, result.won):
                break
    return 0


if __name__ == "__main__":
    sys.exit(main())