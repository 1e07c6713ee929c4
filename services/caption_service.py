# services/caption_service.py
from typing import Optional, Sequence, Tuple
import logging
import os
import random

import numpy as np
from dotenv import load_dotenv
from PIL import Image as PILImage, ImageDraw

from models.color import Color, WHITE_HALF
from models.screen_size import ScreenSize
from repositories.font_repository import FontRepository

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

# Nerd Font lock glyphs: nf-fa-lock, nf-md-lock, nf-oct-lock
GLYPH_CAPTIONS: Tuple[str, ...] = ("\uf023", "\U000f033e", "\uf46a")
# Pillow's embedded font has no icon glyphs
TEXT_CAPTIONS: Tuple[str, ...] = ("LOCKED", "AWAY", "BRB")


def _captions_from_env() -> Optional[Tuple[str, ...]]:
    raw = os.getenv("LOCKSCREEN_CAPTIONS")
    if not raw:
        return None
    captions = tuple(c.strip() for c in raw.split(",") if c.strip())
    return captions or None


class CaptionService:
    """
    Picks the lock caption and renders it onto an RGBA buffer.
    *   Randomness is injectable so callers can pin the choice.
    *   Text is drawn on a transparent layer and alpha-composited.
    """

    def __init__(self,
                 captions: Sequence[str] = None,
                 font_size: int = None,
                 font_repository: FontRepository = None,
                 rng: random.Random = None):
        self._captions = tuple(captions) if captions else _captions_from_env()
        if font_size is None:
            raw = os.getenv("LOCKSCREEN_FONT_SIZE", "200")
            try:
                font_size = int(raw)
            except ValueError:
                raise ValueError(f"Invalid LOCKSCREEN_FONT_SIZE: {raw!r}") from None
        self.font_size = font_size
        self.font_repository = font_repository or FontRepository()
        self.rng = rng or random.Random()
        self._font = None

    @property
    def font(self):
        if self._font is None:
            self._font = self.font_repository.load(self.font_size)
        return self._font

    @property
    def captions(self) -> Tuple[str, ...]:
        """
        Configured captions, or the default set matching the loaded font:
        lock glyphs for an icon font, plain words for the embedded one.
        """
        if self._captions is None:
            self._captions = GLYPH_CAPTIONS if self._has_icon_font() else TEXT_CAPTIONS
        return self._captions

    def _has_icon_font(self) -> bool:
        # is_fallback is only settled once the font has been loaded
        return self.font is not None and not self.font_repository.is_fallback

    def choose_caption(self, rng: random.Random = None) -> str:
        """Uniform pick from the caption set."""
        return (rng or self.rng).choice(self.captions)

    @staticmethod
    def caption_position(screen: ScreenSize) -> Tuple[int, int]:
        """Top-left of the caption, slightly up-left of the screen centre."""
        return screen.width // 2 - 60, screen.height // 2 - 100

    def draw_caption(
        self,
        pixels: np.ndarray,
        text: str,
        position: Tuple[int, int],
        color: Color = WHITE_HALF,
    ) -> np.ndarray:
        base = PILImage.fromarray(pixels)
        layer = PILImage.new("RGBA", base.size, (0, 0, 0, 0))
        ImageDraw.Draw(layer).text(position, text, font=self.font, fill=color.as_tuple())

        logger.debug(f"Caption U+{ord(text[0]):04X} drawn at {position}" if text else "Empty caption")
        return np.array(PILImage.alpha_composite(base, layer))
