from pathlib import Path
from typing import Union
import logging
import os

import cv2
import numpy as np
from dotenv import load_dotenv

from models.image import Image
from repositories.image_repository import ImageRepository

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class ImageService:
    """I/O helpers plus the blur step. No layout logic here."""
    def __init__(self, blur_sigma: float = None):
        if blur_sigma is None:
            raw = os.getenv("LOCKSCREEN_BLUR_SIGMA", "5.0")
            try:
                blur_sigma = float(raw)
            except ValueError:
                raise ValueError(f"Invalid LOCKSCREEN_BLUR_SIGMA: {raw!r}") from None
        self.blur_sigma = blur_sigma
        self.image_repository = ImageRepository()

    def create_image(self, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def load(self, path: Union[str, Path]) -> Image:
        """Load a single image from disk into an RGBA Image object."""
        return self.image_repository.load(path)

    def save(self, image: Image) -> None:
        """
        Business-level method to save the image to its path.
        The format follows the path's extension.
        """
        self.image_repository.save(image)

    def update_pixels(self, image: Image, new_pixels: np.ndarray) -> None:
        """
        Business-level method to replace the current image pixels.
        """
        self.image_repository.set_pixels(image, new_pixels)

    def blur(self, img: Image) -> np.ndarray:
        """
        Gaussian blur with ``self.blur_sigma``; the kernel size is derived
        from sigma. A sigma of 0 returns an unchanged copy.
        """
        if self.blur_sigma <= 0:
            return img.pixels.copy()
        return cv2.GaussianBlur(img.pixels, (0, 0), sigmaX=self.blur_sigma, sigmaY=self.blur_sigma)
