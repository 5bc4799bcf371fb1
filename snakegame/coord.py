"""Grid coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coord:
    """An (x, y) position in pixels."""

    x: int
    y: int

    def moved(self, dx: int, dy: int) -> Coord:
        """Return a new coordinate shifted by (dx, dy)."""
        return Coord(self.x + dx, self.y + dy)