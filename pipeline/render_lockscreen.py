# pipeline/render_lockscreen.py
from pathlib import Path
import logging
import random
from typing import Union

from models.color import BLACK_HALF, Color
from models.image import Image
from models.rect import Rect
from models.screen_size import ScreenSize
from services.blend_service import BlendService
from services.caption_service import CaptionService
from services.display_service import DisplayService
from services.image_service import ImageService
from services.resize_service import ResizeService

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------
# caption box, anchored bottom-left
BOX_LEFT         = 30
BOX_FROM_BOTTOM  = 110
BOX_SIZE         = (300, 80)
BOX_COLOR: Color = BLACK_HALF


def caption_box(screen: ScreenSize) -> Rect:
    """Caption box for *screen*; may extend past the edges on tiny screens."""
    return Rect(BOX_LEFT, screen.height - BOX_FROM_BOTTOM, *BOX_SIZE)


# ------------------------------------------------------------------
def render_lockscreen(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    screen: ScreenSize = None,
    *,
    display_service: DisplayService = None,
    image_service: ImageService    = None,
    resize_service: ResizeService  = ResizeService(),
    blend_service: BlendService    = BlendService(),
    caption_service: CaptionService = None,
    rng: random.Random             = None,
) -> Image:
    """
    Build the lock-screen wallpaper for *input_path* and write it to
    *output_path*:
        • cover-fit the image to the screen (nearest-neighbour + centre crop)
        • Gaussian blur
        • translucent black caption box, bottom-left
        • random lock caption, white at half alpha, near the centre
    Nothing is written until every step has succeeded.
    Returns the saved Image.
    """
    # 1. viewport
    if screen is None:
        screen = (display_service or DisplayService()).get_screen_size()
    image_service = image_service or ImageService()
    caption_service = caption_service or CaptionService()

    # 2. load
    img = image_service.load(input_path)
    logger.info(f"Loaded {img.path} ({img.width}x{img.height})")

    # 3. resize + crop
    fitted = image_service.create_image(resize_service.cover_fit(img, screen))

    # 4. blur
    image_service.update_pixels(fitted, image_service.blur(fitted))

    # 5. caption box
    image_service.update_pixels(
        fitted, blend_service.blend_rect(fitted.pixels, caption_box(screen), BOX_COLOR)
    )

    # 6. caption glyph
    caption = caption_service.choose_caption(rng)
    image_service.update_pixels(
        fitted,
        caption_service.draw_caption(fitted.pixels, caption, caption_service.caption_position(screen)),
    )

    # 7. save
    fitted.path = Path(output_path)
    image_service.save(fitted)
    logger.info(f"Wallpaper written to {fitted.path} ({screen})")
    return fitted
