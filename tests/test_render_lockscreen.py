import random
from unittest.mock import MagicMock

import numpy as np
import pytest
from PIL import Image as PILImage

from models.errors import ImageLoadError, ImageSaveError, ScreenResolutionError
from models.rect import Rect
from models.screen_size import ScreenSize
from pipeline.render_lockscreen import caption_box, render_lockscreen
from repositories.display_repository import FixedDisplayRepository
from services.caption_service import CaptionService
from services.display_service import DisplayService


@pytest.fixture
def captions():
    return CaptionService(captions=["L"], font_size=20)


def test_output_matches_screen(tmp_path, image_file, captions):
    out_path = tmp_path / "lock.png"
    result = render_lockscreen(image_file(size=(100, 50)), out_path, ScreenSize(200, 110),
                               caption_service=captions)
    assert result.path == out_path
    assert result.pixels.shape == (110, 200, 4)
    with PILImage.open(out_path) as saved:
        assert saved.size == (200, 110)


def test_screen_from_display_service(tmp_path, image_file, captions):
    display = DisplayService(FixedDisplayRepository([ScreenSize(64, 48), ScreenSize(999, 999)]))
    result = render_lockscreen(image_file(size=(30, 30)), tmp_path / "lock.png",
                               display_service=display, caption_service=captions)
    assert (result.width, result.height) == (64, 48)


def test_box_is_blended_over_blurred_image(tmp_path, image_file, captions):
    result = render_lockscreen(image_file(size=(400, 300), color=(255, 0, 0, 255)),
                               tmp_path / "lock.png", ScreenSize(400, 300), caption_service=captions)
    # uniform input: blur leaves it as is outside the overlays
    assert tuple(result.pixels[0, 0]) == (255, 0, 0, 255)
    # inside the box: half black over red
    assert tuple(result.pixels[200, 40]) == (127, 0, 0, 255)
    # just right of the box
    assert tuple(result.pixels[200, 335]) == (255, 0, 0, 255)


def test_tiny_screen_clips_box(tmp_path, image_file, captions):
    result = render_lockscreen(image_file(size=(50, 50)), tmp_path / "lock.png",
                               ScreenSize(20, 20), caption_service=captions)
    assert result.pixels.shape == (20, 20, 4)


def test_caption_choice_uses_rng(tmp_path, image_file):
    service = CaptionService(captions=["A", "B"], font_size=20)
    service.draw_caption = MagicMock(side_effect=lambda pixels, text, position: pixels)
    render_lockscreen(image_file(), tmp_path / "a.png", ScreenSize(40, 40),
                      caption_service=service, rng=random.Random(3))
    first = service.draw_caption.call_args[0][1]
    render_lockscreen(image_file(), tmp_path / "b.png", ScreenSize(40, 40),
                      caption_service=service, rng=random.Random(3))
    assert service.draw_caption.call_args[0][1] == first
    assert service.draw_caption.call_args[0][2] == (-40, -80)


def test_no_display(tmp_path, image_file):
    with pytest.raises(ScreenResolutionError):
        render_lockscreen(image_file(), tmp_path / "lock.png",
                          display_service=DisplayService(FixedDisplayRepository([])))
    assert not (tmp_path / "lock.png").exists()


def test_bad_input_writes_nothing(tmp_path, captions):
    with pytest.raises(ImageLoadError):
        render_lockscreen(tmp_path / "missing.jpg", tmp_path / "lock.png", ScreenSize(10, 10),
                          caption_service=captions)
    assert not (tmp_path / "lock.png").exists()


def test_bad_output_format(tmp_path, image_file, captions):
    with pytest.raises(ImageSaveError):
        render_lockscreen(image_file(), tmp_path / "lock.nope", ScreenSize(10, 10),
                          caption_service=captions)


def test_caption_box_geometry():
    assert caption_box(ScreenSize(1920, 1080)) == Rect(30, 970, 300, 80)
    assert caption_box(ScreenSize(100, 50)) == Rect(30, -60, 300, 80)
