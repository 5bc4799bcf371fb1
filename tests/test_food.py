import random

import pytest

from snakegame.canvas import COLOR_BLACK, COLOR_RED, COLOR_WHITE, Canvas
from snakegame.coord import Coord
from snakegame.food import generate_food, spawn_food


def test_generated_food_is_aligned_and_inside_the_border():
    canvas = Canvas(64, 64)
    for seed in range(50):
        food = generate_food(canvas, 16, 8, COLOR_BLACK, random.Random(seed))
        assert food.x % 8 == 0 and food.y % 8 == 0
        assert 16 <= food.x < 48
        assert 16 <= food.y < 48


def test_border_offset_is_rounded_up_to_the_grid():
    canvas = Canvas(80, 80)
    for seed in range(50):
        food = generate_food(canvas, 10, 8, COLOR_BLACK, random.Random(seed))
        assert food.x >= 16 and food.y >= 16
        assert food.x % 8 == 0 and food.y % 8 == 0
        assert food.x < 70 and food.y < 70


def test_same_seed_gives_same_cell():
    canvas = Canvas(128, 96)
    first = generate_food(canvas, 16, 8, COLOR_BLACK, random.Random(7))
    second = generate_food(canvas, 16, 8, COLOR_BLACK, random.Random(7))
    assert first == second


def test_only_free_cell_is_found():
    canvas = Canvas(48, 48)
    canvas.clear(COLOR_WHITE)
    canvas.draw_cell(24, 16, 8, COLOR_BLACK)
    food = generate_food(canvas, 16, 8, COLOR_BLACK, random.Random(3))
    assert food == Coord(24, 16)


def test_too_small_area_raises():
    canvas = Canvas(32, 32)
    with pytest.raises(ValueError):
        generate_food(canvas, 16, 8, COLOR_BLACK, random.Random(0))


def test_spawn_food_paints_the_cell():
    canvas = Canvas(64, 64)
    food = spawn_food(canvas, 16, 8, COLOR_BLACK, COLOR_RED, random.Random(11))
    assert food is not None
    painted = {
        canvas.get_pixel(food.x + dx, food.y + dy) for dx in range(8) for dy in range(8)
    }
    assert painted == {COLOR_RED}
    assert canvas.pixels.count(COLOR_RED) == 64


def test_spawn_food_never_overwrites_occupied_cells():
    canvas = Canvas(48, 48)
    canvas.clear(COLOR_WHITE)
    canvas.draw_cell(16, 24, 8, COLOR_BLACK)
    food = spawn_food(canvas, 16, 8, COLOR_BLACK, COLOR_RED, random.Random(5))
    assert food == Coord(16, 24)
    assert canvas.pixels.count(COLOR_RED) == 64
    assert canvas.pixels.count(COLOR_BLACK) == 0


def test_spawn_food_in_too_small_area_reports_and_returns_none(capsys):
    canvas = Canvas(32, 32)
    result = spawn_food(canvas, 16, 8, COLOR_BLACK, COLOR_RED, random.Random(0))
    assert result is None
    assert "playable area too small" in capsys.readouterr().err
    assert COLOR_RED not in canvas.pixels