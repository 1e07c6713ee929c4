import logging
import os
from pathlib import Path
from typing import Union

from PIL import ImageFont

logger = logging.getLogger(__name__)


class FontRepository:
    """
    Loads the caption font.

    A TrueType/OpenType file named by LOCKSCREEN_FONT_PATH wins; otherwise
    Pillow's embedded default font is used at the requested size.
    """

    def __init__(self, font_path: Union[str, Path] = None) -> None:
        path = font_path or os.getenv("LOCKSCREEN_FONT_PATH")
        self.font_path = Path(path) if path else None
        # True once load() had to use Pillow's embedded font
        self.is_fallback = self.font_path is None

    def load(self, size: int):
        if self.font_path is not None:
            try:
                font = ImageFont.truetype(str(self.font_path), size)
                self.is_fallback = False
                return font
            except OSError as e:
                logger.warning(f"Falling back to default font: {e}")
        self.is_fallback = True
        return ImageFont.load_default(size=size)
