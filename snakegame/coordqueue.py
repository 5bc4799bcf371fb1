"""First-in first-out queue of coordinates."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from .coord import Coord


class CoordQueue:
    """A FIFO of coordinates: items are added at the tail and removed from the head."""

    def __init__(self) -> None:
        self._items: deque[Coord] = deque()

    def enqueue(self, coord: Coord) -> None:
        """Append a coordinate at the tail."""
        self._items.append(coord)

    def dequeue(self) -> Coord:
        """Remove and return the head; raises IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._items)

    @property
    def head(self) -> Coord:
        """The oldest coordinate; raises IndexError when empty."""
        if not self._items:
            raise IndexError("empty queue has no head")
        return self._items[0]

    @property
    def tail(self) -> Coord:
        """The newest coordinate; raises IndexError when empty."""
        if not self._items:
            raise IndexError("empty queue has no tail")
        return self._items[-1]