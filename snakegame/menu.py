"""Start and end screens."""

from __future__ import annotations

import time
from enum import IntEnum

import pygame

from .canvas import COLOR_BLACK, COLOR_BLUE, COLOR_RED, COLOR_WHITE

FONT_PATH = "assets/PixelOperatorMono8.ttf"

_SPACING = 60
_ITEM_SIZE = 32
_KEY_DELAY = 0.002


class Difficulty(IntEnum):
    EASY = 0
    NORMAL = 1
    HARD = 2
    LEAVE = 3


def select_option(selection: int, minimum: int, maximum: int, key: int) -> tuple[int, bool]:
    """Apply one key press to a menu selection; return (selection, confirmed)."""
    if key == pygame.K_UP:
        return (selection - 1 if selection > minimum else selection), False
    if key == pygame.K_DOWN:
        return (selection + 1 if selection < maximum else selection), False
    if key in (pygame.K_RETURN, pygame.K_SPACE):
        return selection, True
    return selection, False


def _draw_label(display, text: str, y: int, size: int, color: int) -> None:
    display.draw_text(text, display.width // 2 - 100, y, size, color, FONT_PATH)


def _draw_item(display, label: str, y: int, selected: bool) -> None:
    _draw_label(display, label, y, _ITEM_SIZE, COLOR_RED if selected else COLOR_WHITE)


def _run_menu(display, selection: int, minimum: int, maximum: int, draw) -> int | None:
    """Show a menu until confirmed; None means the player asked to quit."""
    while True:
        if display.quit_signal():
            return None
        display.canvas.clear(COLOR_BLACK)
        draw(selection)
        display.present()

        selection, confirmed = select_option(selection, minimum, maximum, display.poll_key())
        if confirmed:
            return selection
        if display.quit_signal():
            return None
        time.sleep(_KEY_DELAY)


def show_start_screen(display) -> Difficulty:
    """Let the player pick a difficulty; LEAVE when the window is closed."""
    top = display.height // 2 - 2 * _SPACING

    def draw(selection: int) -> None:
        _draw_label(display, "SNAKE", top - 2 * _SPACING, 48, COLOR_WHITE)
        _draw_item(display, "EASY", top, selection == Difficulty.EASY)
        _draw_item(display, "NORMAL", top + _SPACING, selection == Difficulty.NORMAL)
        _draw_item(display, "HARD", top + 2 * _SPACING, selection == Difficulty.HARD)
        _draw_label(display, "PRESS ENTER", top + 4 * _SPACING, 24, COLOR_BLUE)

    chosen = _run_menu(display, Difficulty.NORMAL, Difficulty.EASY, Difficulty.HARD, draw)
    return Difficulty.LEAVE if chosen is None else Difficulty(chosen)


def show_end_screen(display, score: int, player_won: bool) -> bool:
    """Show the result and score; True when the player chooses to play again."""
    top = display.height // 2 - 2 * _SPACING
    result_text = "YOU WIN" if player_won else "GAME OVER"

    def draw(selection: int) -> None:
        _draw_label(display, result_text, top - 2 * _SPACING, 48, COLOR_WHITE)
        _draw_label(display, f"Your score is {score}", top - _SPACING, 32, COLOR_WHITE)
        _draw_item(display, "PLAY AGAIN", top, selection == 0)
        _draw_item(display, "LEAVE", top + _SPACING, selection == 1)

    chosen = _run_menu(display, 0, 0, 1, draw)
    return chosen == 0