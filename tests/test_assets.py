from pathlib import Path

import pygame
import pytest

from gravroom.assets import AssetError, Button, create_button, load_texture
from gravroom.physics import Rect


def _save_image(path: Path, size, colour) -> Path:
    surface = pygame.Surface(size)
    surface.fill(colour)
    pygame.image.save(surface, str(path))
    return path


def test_load_texture_reads_size(tmp_path):
    path = _save_image(tmp_path / "a.bmp", (7, 5), (255, 0, 0))
    texture = load_texture(path)
    assert texture.get_size() == (7, 5)


def test_load_texture_keeps_pixels(tmp_path):
    path = _save_image(tmp_path / "a.bmp", (3, 3), (0, 255, 0))
    texture = load_texture(str(path))
    assert tuple(texture.get_at((1, 1)))[:3] == (0, 255, 0)


def test_load_texture_missing_file(tmp_path):
    with pytest.raises(AssetError):
        load_texture(tmp_path / "missing.bmp")


def test_load_texture_not_an_image(tmp_path):
    path = tmp_path / "bad.bmp"
    path.write_bytes(b"not an image at all")
    with pytest.raises(AssetError):
        load_texture(path)


def test_create_button(tmp_path):
    normal = _save_image(tmp_path / "n.bmp", (4, 4), (10, 20, 30))
    hover = _save_image(tmp_path / "h.bmp", (6, 2), (40, 50, 60))
    rect = Rect(1, 2, 3, 4)
    button = create_button(normal, hover, rect)
    assert isinstance(button, Button)
    assert button.texture.get_size() == (4, 4)
    assert button.hover_texture.get_size() == (6, 2)
    assert button.rect == rect


def test_create_button_missing_hover(tmp_path):
    normal = _save_image(tmp_path / "n.bmp", (4, 4), (10, 20, 30))
    missing = tmp_path / "hover.bmp"
    with pytest.raises(AssetError, match="hover.bmp"):
        create_button(normal, missing, Rect(0, 0, 1, 1))


def test_create_button_missing_normal(tmp_path):
    hover = _save_image(tmp_path / "h.bmp", (4, 4), (10, 20, 30))
    with pytest.raises(AssetError, match="normal.bmp"):
        create_button(tmp_path / "normal.bmp", hover, Rect(0, 0, 1, 1))