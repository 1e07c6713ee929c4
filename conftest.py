"""Shared pytest fixtures."""

from pathlib import Path

import numpy as np
import pytest
from PIL import Image as PILImage

from models.image import Image

_ENV_VARS = (
    "LOCKSCREEN_SCREEN_SIZE",
    "LOCKSCREEN_XRANDR_CMD",
    "LOCKSCREEN_FONT_PATH",
    "LOCKSCREEN_FONT_SIZE",
    "LOCKSCREEN_BLUR_SIGMA",
    "LOCKSCREEN_CAPTIONS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's .env / shell from leaking into tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def solid_pixels():
    def _make(width, height, rgba=(255, 0, 0, 255)):
        pixels = np.zeros((height, width, 4), dtype=np.uint8)
        pixels[:, :] = rgba
        return pixels
    return _make


@pytest.fixture
def solid_image(solid_pixels):
    def _make(width, height, rgba=(255, 0, 0, 255)):
        return Image(pixels=solid_pixels(width, height, rgba))
    return _make


@pytest.fixture
def image_file(tmp_path: Path):
    """Write a solid-colour image to disk and return its path."""
    def _write(name="input.png", size=(100, 50), color=(255, 0, 0, 255), mode="RGBA"):
        path = tmp_path / name
        fill = {"RGBA": color, "RGB": color[:3], "L": color[0]}[mode]
        PILImage.new(mode, size, fill).save(path)
        return path
    return _write
