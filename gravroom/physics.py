"""Room physics: a body that walks on any face of a room and flips gravity."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

DEFAULT_GRAVITY = 0.0012
DEFAULT_JUMP = 0.6


@dataclass
class Rect:
    """An axis-aligned rectangle with float coordinates."""

    x: float
    y: float
    w: float
    h: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def copy(self) -> Rect:
        return dataclasses.replace(self)


class Gravity(Enum):
    """The face of the room that gravity pulls towards."""

    DOWN = 0
    UP = 1
    LEFT = 2
    RIGHT = 3


@dataclass(frozen=True)
class Keys:
    """Which arrow keys are held during one frame."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    def pressed(self, name: str) -> bool:
        return bool(getattr(self, name))


@dataclass
class RepeatKeys:
    """Double-press progress per arrow key: 0 idle, 1 pressed, 2 released."""

    up: int = 0
    down: int = 0
    right: int = 0
    left: int = 0


def collide_floor(body: Rect, room: Rect) -> bool:
    """Keep a body standing on the floor inside the room.

    Returns True when the body fits; otherwise clamps it and returns False.
    """
    if body.right > room.right:
        body.x = room.right - body.w
        return False
    if body.left < room.left:
        body.x = room.left
        return False
    if body.top < room.top:
        body.y = room.top
        return False
    return True


def collide_ceiling(body: Rect, room: Rect) -> bool:
    """Keep a body standing on the ceiling inside the room."""
    if body.right > room.right:
        body.x = room.right - body.w
        return False
    if body.left < room.left:
        body.x = room.left
        return False
    if body.bottom > room.bottom:
        body.y = room.bottom - body.h
        return False
    return True


def collide_right_wall(body: Rect, room: Rect) -> bool:
    """Keep a body standing on the right wall inside the room."""
    if body.top < room.top:
        body.y = room.top
        return False
    if body.bottom > room.bottom:
        body.y = room.bottom - body.h
        return False
    if body.left < room.left:
        body.x = room.left
        return False
    return True


def collide_left_wall(body: Rect, room: Rect) -> bool:
    """Keep a body standing on the left wall inside the room."""
    if body.top < room.top:
        body.y = room.top
        return False
    if body.bottom > room.bottom:
        body.y = room.bottom - body.h
        return False
    if body.right > room.right:
        body.x = room.right - body.w
        return False
    return True


@dataclass(frozen=True)
class _Surface:
    collide: Callable[[Rect, Rect], bool]
    axis: str
    sign: int
    away: str
    away_gravity: Gravity
    sides: tuple[tuple[str, Gravity], ...]

    @property
    def walk_axis(self) -> str:
        return "x" if self.axis == "y" else "y"

    @property
    def walk_keys(self) -> tuple[tuple[str, int], ...]:
        if self.axis == "y":
            return (("left", -1), ("right", 1))
        return (("up", -1), ("down", 1))


_VERTICAL_SIDES = (("right", Gravity.RIGHT), ("left", Gravity.LEFT))
_HORIZONTAL_SIDES = (("up", Gravity.UP), ("down", Gravity.DOWN))

_SURFACES = {
    Gravity.DOWN: _Surface(collide_floor, "y", 1, "up", Gravity.UP, _VERTICAL_SIDES),
    Gravity.UP: _Surface(collide_ceiling, "y", -1, "down", Gravity.DOWN, _VERTICAL_SIDES),
    Gravity.RIGHT: _Surface(collide_right_wall, "x", 1, "left", Gravity.LEFT, _HORIZONTAL_SIDES),
    Gravity.LEFT: _Surface(collide_left_wall, "x", -1, "right", Gravity.RIGHT, _HORIZONTAL_SIDES),
}

_ORDER = (Gravity.DOWN, Gravity.UP, Gravity.LEFT, Gravity.RIGHT)


@dataclass
class GravityController:
    """Moves a body inside a room under switchable gravity, one frame at a time."""

    body: Rect
    room: Rect
    gravity: float = DEFAULT_GRAVITY
    jump: float = DEFAULT_JUMP
    state: Gravity = Gravity.DOWN
    vx: float = 0.0
    vy: float = 0.0
    jumping: bool = False
    switching: bool = False
    repeat: RepeatKeys = field(default_factory=RepeatKeys)

    def step(self, keys: Keys) -> None:
        """Advance one frame with the given keys held."""
        # Each face is checked in turn, so a switch made by one face lets a
        # later face act in the same frame.
        for gravity in _ORDER:
            if self.state is gravity:
                self._apply(_SURFACES[gravity], keys)

    def _velocity(self, axis: str) -> float:
        return self.vx if axis == "x" else self.vy

    def _set_velocity(self, axis: str, value: float) -> None:
        if axis == "x":
            self.vx = value
        else:
            self.vy = value

    def _rest_position(self, surface: _Surface) -> float:
        size = "w" if surface.axis == "x" else "h"
        start = getattr(self.room, surface.axis)
        if surface.sign > 0:
            return start + getattr(self.room, size) - getattr(self.body, size)
        return start

    def _double_press(self, keys: Keys, name: str, target: Gravity) -> bool:
        held = keys.pressed(name)
        stage = getattr(self.repeat, name)
        if held and stage == 0:
            stage = 1
        if not held and stage == 1:
            stage = 2
        if held and stage == 2:
            self.state = target
            self.switching = True
            setattr(self.repeat, name, 0)
            return True
        setattr(self.repeat, name, stage)
        return False

    def _apply(self, surface: _Surface, keys: Keys) -> None:
        if not self.switching:
            if self._double_press(keys, surface.away, surface.away_gravity):
                return
            if self.jumping:
                for name, target in surface.sides:
                    if keys.pressed(name):
                        self.state = target
                        self.switching = True
                        return

        rest = self._rest_position(surface)
        axis = surface.axis

        if not self.jumping and not self.switching:
            walk_axis = surface.walk_axis
            probe = self.body.copy()
            for name, delta in surface.walk_keys:
                if keys.pressed(name):
                    setattr(probe, walk_axis, getattr(probe, walk_axis) + delta)
                    if surface.collide(probe, self.room):
                        setattr(self.body, walk_axis, getattr(probe, walk_axis))
            if keys.pressed(surface.away):
                self._set_velocity(axis, self._velocity(axis) - surface.sign * self.jump)
                self.jumping = True

        if not self.jumping:
            return

        self._set_velocity(axis, self._velocity(axis) + surface.sign * self.gravity)
        probe = self.body.copy()
        probe.x += self.vx
        if surface.collide(probe, self.room):
            self.body.x = probe.x
        probe.y += self.vy
        if surface.collide(probe, self.room):
            self.body.y = probe.y

        position = getattr(self.body, axis)
        landed = position >= rest if surface.sign > 0 else position <= rest
        if landed:
            setattr(self.body, axis, rest)
            self.vx = 0.0
            self.vy = 0.0
            self.jumping = False
            self.switching = False
            setattr(self.repeat, surface.away, 0)
            for name, _ in surface.walk_keys:
                setattr(self.repeat, name, 0)