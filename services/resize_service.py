# services/resize_service.py
from typing import Tuple
import logging

import cv2
import numpy as np

from models.image import Image
from models.screen_size import ScreenSize
from repositories.image_repository import ImageRepository

logger = logging.getLogger(__name__)


class ResizeService:
    """
    Cover-fit planning and execution.

    The planner is pure integer arithmetic: the scaled image covers the
    screen on both axes and matches it exactly on the binding axis.
    """

    def __init__(self):
        self.image_repository = ImageRepository()

    # ─── Planner ───────────────────────────────────────────────────
    @staticmethod
    def calculate_resize(screen: ScreenSize, img_size: Tuple[int, int]) -> Tuple[int, int]:
        """
        Args:
            screen: target viewport.
            img_size: (width, height) of the source image, both > 0.

        Returns:
            (width, height) the source must be scaled to.
        """
        img_w, img_h = img_size
        if img_w <= 0 or img_h <= 0:
            raise ValueError(f"Image size must be positive, got {img_w}x{img_h}")

        # screen.h / screen.w > img_h / img_w, cross-multiplied
        if screen.height * img_w > img_h * screen.width:
            # screen is relatively taller: height binds
            return img_w * screen.height // img_h, screen.height
        return screen.width, img_h * screen.width // img_w

    @staticmethod
    def calculate_crop_offset(screen: ScreenSize, img_size: Tuple[int, int]) -> Tuple[int, int]:
        """Top-left corner of a screen-sized window centred on *img_size*."""
        img_w, img_h = img_size
        x = (img_w - screen.width) // 2 if img_w > screen.width else 0
        y = (img_h - screen.height) // 2 if img_h > screen.height else 0
        return x, y

    # ─── Execution ─────────────────────────────────────────────────
    @staticmethod
    def resize(img: Image, size: Tuple[int, int]) -> np.ndarray:
        """Nearest-neighbour resize to (width, height)."""
        return cv2.resize(img.pixels, size, interpolation=cv2.INTER_NEAREST)

    def crop(self, img: Image, x: int, y: int, width: int, height: int) -> np.ndarray:
        img_h, img_w = self.image_repository.retrieve_image_dimensions(img)
        if x < 0 or y < 0 or width <= 0 or height <= 0 or x + width > img_w or y + height > img_h:
            raise ValueError(
                f"Invalid crop window ({x},{y}) {width}x{height} for {img_w}x{img_h} image"
            )
        return img.pixels[y:y + height, x:x + width].copy()

    def cover_fit(self, img: Image, screen: ScreenSize) -> np.ndarray:
        """Resize *img* to cover *screen*, then crop the centred window."""
        target = self.calculate_resize(screen, (img.width, img.height))
        logger.debug(f"Resize {img.width}x{img.height} -> {target[0]}x{target[1]}")
        resized = self.image_repository.create_image(self.resize(img, target))

        x, y = self.calculate_crop_offset(screen, target)
        logger.debug(f"Crop {screen} at ({x},{y})")
        return self.crop(resized, x, y, screen.width, screen.height)
