"""The game: world loading, per-frame logic and the main loop."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

import pygame

from gravroom.assets import AssetError, load_texture
from gravroom.events import EventType, InputEvent, Key, handle_event
from gravroom.layout import DEFAULT_HEIGHT, DEFAULT_WIDTH
from gravroom.physics import GravityController, Keys, Rect

ROOM_SPRITES = tuple(f"MapSquare_{index}.png" for index in range(6))
CHARACTER_SPRITE = "Player.png"
CHARACTER_START = (100, 100)
CHARACTER_SIZE = 64
FRAME_DELAY_MS = 16
WINDOW_TITLE = "gravroom"

_PYGAME_KEYS = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
}


class GameState(Enum):
    MENU = 0
    GAME = 1
    PAUSE = 2


def _to_input_event(event: pygame.event.Event) -> Optional[InputEvent]:
    if event.type == pygame.QUIT:
        return InputEvent(EventType.QUIT)
    if event.type == pygame.KEYDOWN:
        return InputEvent(EventType.KEY_DOWN, _PYGAME_KEYS.get(event.key, Key.OTHER))
    if event.type == pygame.KEYUP:
        return InputEvent(EventType.KEY_UP, _PYGAME_KEYS.get(event.key, Key.OTHER))
    return None


def _held_keys() -> Keys:
    pressed = pygame.key.get_pressed()
    return Keys(
        up=bool(pressed[pygame.K_UP]),
        down=bool(pressed[pygame.K_DOWN]),
        left=bool(pressed[pygame.K_LEFT]),
        right=bool(pressed[pygame.K_RIGHT]),
    )


def _to_pygame_rect(rect: Rect) -> pygame.Rect:
    return pygame.Rect(int(rect.x), int(rect.y), int(rect.w), int(rect.h))


@dataclass
class Game:
    """Game state shared by every frame."""

    sprite_dir: Path = Path("sprite")
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    screen: Optional[pygame.Surface] = None
    state: GameState = GameState.GAME
    quit: bool = False
    room: Rect = field(default_factory=lambda: Rect(0, 0, DEFAULT_WIDTH, DEFAULT_HEIGHT))
    character: Rect = field(
        default_factory=lambda: Rect(*CHARACTER_START, CHARACTER_SIZE, CHARACTER_SIZE)
    )
    ground: Rect = field(
        default_factory=lambda: Rect(
            0, DEFAULT_HEIGHT * 2 // 3, DEFAULT_WIDTH, DEFAULT_HEIGHT - DEFAULT_HEIGHT * 2 // 3
        )
    )
    room_textures: List[pygame.Surface] = field(default_factory=list)
    character_texture: Optional[pygame.Surface] = None
    controller: Optional[GravityController] = None

    def load_world(self) -> None:
        """Load room and character images and place them; raises AssetError."""
        directory = Path(self.sprite_dir)
        self.room_textures = [load_texture(directory / name) for name in ROOM_SPRITES]
        self.room = Rect(0, 0, self.width, self.height)
        self.character_texture = load_texture(directory / CHARACTER_SPRITE)
        self.character = Rect(*CHARACTER_START, CHARACTER_SIZE, CHARACTER_SIZE)
        # The physics works on its own copy of the room bounds.
        self.controller = GravityController(body=self.character, room=self.room.copy())

    def game_frame(self, keys: Keys) -> None:
        """Advance physics by one frame and draw the room and character."""
        if self.controller is None:
            raise RuntimeError("world is not loaded")
        self.controller.step(keys)
        if self.screen is None:
            return
        self.screen.fill((0, 0, 0))
        self._draw(self.room_textures[0], self.room)
        if self.character_texture is not None:
            self._draw(self.character_texture, self.character)
        self._present()

    def pause_frame(self) -> None:
        """Keep the last picture on screen without advancing the game."""
        self._present()

    def _menu_frame(self) -> None:
        if self.screen is not None:
            self.screen.fill((0, 0, 0))
        self._present()

    def _draw(self, texture: pygame.Surface, rect: Rect) -> None:
        target = _to_pygame_rect(rect)
        scaled = pygame.transform.scale(texture, (max(target.w, 0), max(target.h, 0)))
        self.screen.blit(scaled, target.topleft)

    def _present(self) -> None:
        if self.screen is not None and self.screen is pygame.display.get_surface():
            pygame.display.flip()

    def run(self) -> None:
        """Open a window and run frames until the player quits."""
        pygame.init()
        try:
            self.screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(WINDOW_TITLE)
            while not self.quit:
                for raw in pygame.event.get():
                    event = _to_input_event(raw)
                    if event is not None and handle_event(event, self.ground):
                        self.quit = True
                if self.quit:
                    break
                if self.state is GameState.GAME:
                    self.game_frame(_held_keys())
                elif self.state is GameState.PAUSE:
                    self.pause_frame()
                else:
                    self._menu_frame()
                pygame.time.delay(FRAME_DELAY_MS)
        finally:
            self.screen = None
            pygame.quit()


def main(argv=None) -> int:
    """Load the world from a sprite directory and play."""
    parser = argparse.ArgumentParser(prog="gravroom")
    parser.add_argument("--sprites", default="sprite", help="directory holding the images")
    args = parser.parse_args(argv)

    game = Game(sprite_dir=Path(args.sprites))
    try:
        game.load_world()
    except AssetError as exc:
        print(f"Error loading textures: {exc}", file=sys.stderr)
        return 1
    print("Textures loaded successfully")
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())