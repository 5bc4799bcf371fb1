"""A window that shows a Canvas and reads the keyboard."""

from __future__ import annotations

import sys
from array import array

import pygame

from .canvas import COLOR_BLACK, Canvas, color_components

_TYPECODE = next(code for code in "IL" if array(code).itemsize == 4)


class DisplayError(RuntimeError):
    """The window or the font system could not be set up."""


class Display:
    """A resizable window backed by an in-memory canvas."""

    def __init__(self, title: str, width: int, height: int) -> None:
        try:
            pygame.display.init()
            pygame.font.init()
            self._screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        except pygame.error as exc:
            pygame.font.quit()
            pygame.display.quit()
            raise DisplayError(str(exc)) from exc
        pygame.display.set_caption(title)
        pygame.mouse.set_visible(False)
        self.width = width
        self.height = height
        self.canvas = Canvas(width, height)
        self.canvas.clear(COLOR_BLACK)
        self._texts: list[tuple[pygame.Surface, tuple[int, int]]] = []
        self._open = True

    def _canvas_surface(self) -> pygame.Surface:
        data = array(_TYPECODE, self.canvas.pixels)
        if sys.byteorder == "little":
            data.byteswap()
        raw = data.tobytes()
        # Big-endian 0x00RRGGBB words shifted by one byte read as R, G, B, X.
        return pygame.image.frombuffer(raw[1:] + b"\x00", (self.width, self.height), "RGBX")

    def present(self) -> None:
        """Show the canvas, with any text drawn since the last call on top."""
        screen = pygame.display.get_surface()
        frame = self._canvas_surface()
        if screen.get_size() != frame.get_size():
            frame = pygame.transform.scale(frame, screen.get_size())
        screen.blit(frame, (0, 0))
        for surface, position in self._texts:
            screen.blit(surface, position)
        self._texts.clear()
        pygame.display.flip()

    def poll_key(self) -> int:
        """Take one pending event; return its key code if it is a key press, else 0."""
        event = pygame.event.poll()
        if event.type == pygame.KEYDOWN:
            return event.key
        return 0

    def quit_signal(self) -> bool:
        """Drain pending events and report a close request, Ctrl+C, Ctrl+D or Escape."""
        signal = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                signal = True
            elif event.type == pygame.KEYDOWN:
                if event.mod & pygame.KMOD_CTRL:
                    signal = event.key in (pygame.K_c, pygame.K_d)
            elif event.type == pygame.KEYUP:
                signal = event.key == pygame.K_ESCAPE
        return signal

    def wait_for_quit_signal(self) -> None:
        """Block until a quit signal arrives."""
        while not self.quit_signal():
            pass

    def draw_text(
        self,
        text: str,
        x: int,
        y: int,
        size: int,
        color: int,
        font_path: str | None,
    ) -> None:
        """Render text at (x, y) for the next present; failures are reported on stderr."""
        try:
            font = pygame.font.Font(font_path, size)
        except (OSError, pygame.error) as exc:
            print(f"Failed to load font: {exc}", file=sys.stderr)
            return
        try:
            surface = font.render(text, False, color_components(color))
        except pygame.error as exc:
            print(f"Failed to render text: {exc}", file=sys.stderr)
            return
        self._texts.append((surface, (x, y)))

    def close(self) -> None:
        """Close the window and shut the display and font systems down."""
        if not self._open:
            return
        self._open = False
        self._texts.clear()
        if pygame.display.get_init():
            pygame.mouse.set_visible(True)
        pygame.font.quit()
        pygame.display.quit()

    def __enter__(self) -> Display:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()