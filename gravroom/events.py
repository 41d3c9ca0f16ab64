"""Input events and how the game reacts to them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from gravroom.physics import Rect

GROUND_SCROLL = 10


class EventType(Enum):
    QUIT = "quit"
    KEY_DOWN = "key_down"
    KEY_UP = "key_up"


class Key(Enum):
    ESCAPE = "escape"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    OTHER = "other"


@dataclass(frozen=True)
class InputEvent:
    """One input event; key is set for key events."""

    type: EventType
    key: Optional[Key] = None


def handle_event(event: InputEvent, ground: Rect) -> bool:
    """React to an event; return True when the game should quit.

    Arrow keys scroll the ground opposite to the direction pressed.
    """
    if event.type is EventType.QUIT:
        return True
    if event.type is not EventType.KEY_DOWN:
        return False
    if event.key is Key.ESCAPE:
        return True
    if event.key is Key.RIGHT:
        ground.x -= GROUND_SCROLL
    elif event.key is Key.LEFT:
        ground.x += GROUND_SCROLL
    return False