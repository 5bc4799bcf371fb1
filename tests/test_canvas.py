import pytest

from snakegame.canvas import (
    COLOR_BLACK,
    COLOR_BLUE,
    COLOR_RED,
    COLOR_WHITE,
    Canvas,
    color_components,
    make_color,
)


def test_make_color_matches_named_colors():
    assert make_color(255, 0, 0) == COLOR_RED
    assert make_color(0, 0, 255) == COLOR_BLUE
    assert make_color(255, 255, 255) == COLOR_WHITE


@pytest.mark.parametrize("rgb", [(0, 0, 0), (1, 2, 3), (200, 100, 50), (255, 255, 255)])
def test_color_round_trip(rgb):
    assert color_components(make_color(*rgb)) == rgb


def test_new_canvas_is_black():
    canvas = Canvas(4, 3)
    assert all(canvas.get_pixel(x, y) == COLOR_BLACK for x in range(4) for y in range(3))


def test_put_and_get_pixel():
    canvas = Canvas(5, 5)
    canvas.put_pixel(2, 3, COLOR_RED)
    assert canvas.get_pixel(2, 3) == COLOR_RED
    assert canvas.get_pixel(3, 2) == COLOR_BLACK


def test_put_pixel_outside_is_ignored():
    canvas = Canvas(3, 3)
    canvas.put_pixel(-1, 0, COLOR_RED)
    canvas.put_pixel(3, 0, COLOR_RED)
    canvas.put_pixel(0, 3, COLOR_RED)
    assert set(canvas.pixels) == {COLOR_BLACK}


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (4, 0), (0, 4)])
def test_get_pixel_outside_raises(x, y):
    with pytest.raises(IndexError):
        Canvas(4, 4).get_pixel(x, y)


def test_invalid_dimensions_raise():
    with pytest.raises(ValueError):
        Canvas(0, 5)


def test_clear_fills_canvas():
    canvas = Canvas(3, 2)
    canvas.clear(COLOR_WHITE)
    assert set(canvas.pixels) == {COLOR_WHITE}
    assert len(canvas.pixels) == 6


def test_draw_cell_fills_square_only():
    canvas = Canvas(10, 10)
    canvas.draw_cell(2, 4, 3, COLOR_RED)
    red = {(x, y) for x in range(10) for y in range(10) if canvas.get_pixel(x, y) == COLOR_RED}
    assert red == {(x, y) for x in range(2, 5) for y in range(4, 7)}


def test_draw_cell_clips_at_edge():
    canvas = Canvas(4, 4)
    canvas.draw_cell(3, 3, 2, COLOR_RED)
    assert canvas.get_pixel(3, 3) == COLOR_RED
    assert canvas.pixels.count(COLOR_RED) == 1


def test_draw_border_outline():
    canvas = Canvas(8, 8)
    canvas.draw_border(1, 6, 2, 7, COLOR_BLUE)
    blue = {(x, y) for x in range(8) for y in range(8) if canvas.get_pixel(x, y) == COLOR_BLUE}
    expected = set()
    for x in range(1, 6):
        expected.add((x, 2))
        expected.add((x, 6))
    for y in range(2, 7):
        expected.add((1, y))
        expected.add((5, y))
    assert blue == expected
    assert canvas.get_pixel(3, 4) == COLOR_BLACK