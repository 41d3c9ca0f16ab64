"""Loading images from disk and building menu buttons from them."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

import pygame

from gravroom.physics import Rect

PathLike = Union[str, "os.PathLike[str]"]


class AssetError(Exception):
    """Raised when an image cannot be loaded."""


@dataclass
class Button:
    """A menu button with a normal and a hover image."""

    texture: pygame.Surface
    hover_texture: pygame.Surface
    rect: Rect


def load_texture(path: PathLike) -> pygame.Surface:
    """Load an image file as a surface, raising AssetError on failure."""
    filename = os.fspath(path)
    try:
        return pygame.image.load(filename)
    except (pygame.error, OSError) as exc:
        raise AssetError(f"cannot load image {filename}: {exc}") from exc


def create_button(normal_path: PathLike, hover_path: PathLike, rect: Rect) -> Button:
    """Build a button from its two images placed at rect."""
    return Button(load_texture(normal_path), load_texture(hover_path), rect)