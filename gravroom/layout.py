"""Screen size and the placement of menu buttons."""

from __future__ import annotations

from gravroom.physics import Rect

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600

START_SIZE = 200
EXIT_SIZE = 150


def start_button_rect() -> Rect:
    """Rectangle of the start button, centred on the screen."""
    return Rect(
        (DEFAULT_WIDTH - START_SIZE) // 2,
        (DEFAULT_HEIGHT - START_SIZE) // 2,
        START_SIZE,
        START_SIZE,
    )


def exit_button_rect() -> Rect:
    """Rectangle of the exit button, centred horizontally below the start button."""
    return Rect(
        (DEFAULT_WIDTH - EXIT_SIZE) // 2,
        (DEFAULT_HEIGHT + 600) // 2,
        EXIT_SIZE,
        EXIT_SIZE,
    )