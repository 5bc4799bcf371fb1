"""An in-memory 0xRRGGBB pixel canvas and colour helpers."""

from __future__ import annotations

COLOR_BLACK = 0x000000
COLOR_RED = 0xFF0000
COLOR_GREEN = 0x00FF00
COLOR_BLUE = 0x0000FF
COLOR_WHITE = 0xFFFFFF
COLOR_YELLOW = 0xFFFF00


def make_color(r: int, g: int, b: int) -> int:
    """Pack red, green and blue components into a 0xRRGGBB integer."""
    return (b & 0xFF) | ((g & 0xFF) << 8) | ((r & 0xFF) << 16)


def color_components(color: int) -> tuple[int, int, int]:
    """Split a 0xRRGGBB integer into its (red, green, blue) components."""
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


class Canvas:
    """A width x height grid of colours, initially black."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = [COLOR_BLACK] * (width * height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the canvas are ignored."""
        if self._inside(x, y):
            self.pixels[self.width * y + x] = color

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour at (x, y); raises IndexError outside the canvas."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return self.pixels[self.width * y + x]

    def clear(self, color: int) -> None:
        """Fill the whole canvas with one colour."""
        self.pixels = [color] * (self.width * self.height)

    def draw_cell(self, x: int, y: int, zoom: int, color: int) -> None:
        """Fill the zoom x zoom square whose top-left corner is (x, y)."""
        for ix in range(zoom):
            for iy in range(zoom):
                self.put_pixel(x + ix, y + iy, color)

    def draw_border(self, x0: int, x1: int, y0: int, y1: int, color: int) -> None:
        """Draw a one-pixel rectangle outline over [x0, x1) x [y0, y1)."""
        for ix in range(x0, x1):
            self.put_pixel(ix, y0, color)
            self.put_pixel(ix, y1 - 1, color)
        for iy in range(y0, y1):
            self.put_pixel(x0, iy, color)
            self.put_pixel(x1 - 1, iy, color)