from pathlib import Path
from typing import Union
import logging
import numpy as np
import cv2
from PIL import Image as PILImage
from models.image import Image
from models.errors import ImageLoadError, ImageSaveError

logger = logging.getLogger(__name__)

# Formats Pillow cannot write with an alpha channel.
_NO_ALPHA_FORMATS = {"JPEG", "PPM", "EPS"}

# OpenCV channel layout -> RGBA conversion
_TO_RGBA = {
    1: cv2.COLOR_GRAY2RGBA,
    3: cv2.COLOR_BGR2RGBA,
    4: cv2.COLOR_BGRA2RGBA,
}


class ImageRepository:
    """
    Handles file I/O and pixel updates for Image entities.
    Decoding goes through OpenCV, encoding through Pillow.
    """

    @staticmethod
    def create_image(pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    @staticmethod
    def retrieve_image_dimensions(img: Image):
        """(height, width) of the pixel buffer."""
        return img.pixels.shape[:2]

    @staticmethod
    def _to_rgba(arr: np.ndarray, path: Path) -> np.ndarray:
        if arr.dtype == np.uint16:
            arr = (arr >> 8).astype(np.uint8)
        elif arr.dtype != np.uint8:
            raise ImageLoadError(f"Unsupported pixel depth {arr.dtype} in {path}")

        channels = 1 if arr.ndim == 2 else arr.shape[2]
        code = _TO_RGBA.get(channels)
        if code is None:
            raise ImageLoadError(f"Unsupported channel count {channels} in {path}")
        return cv2.cvtColor(arr, code)

    @staticmethod
    def load(path: Union[str, Path]) -> Image:
        path = Path(path)
        if not path.is_file():
            raise ImageLoadError(f"Fail to load image from {path}: no such file")

        arr = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
        if arr is None or arr.size == 0:
            raise ImageLoadError(f"Fail to load image from {path}: unreadable or unknown format")

        pixels = ImageRepository._to_rgba(arr, path)
        logger.debug("Loaded %s (%dx%d)", path, pixels.shape[1], pixels.shape[0])
        return Image(pixels=pixels, path=path)

    @staticmethod
    def save(image: Image) -> None:
        if image.path is None:
            raise ImageSaveError("Cannot save image without a destination path")
        path = Path(image.path)

        fmt = PILImage.registered_extensions().get(path.suffix.lower())
        if fmt is None:
            raise ImageSaveError(f"Fail to save image to {path}: unsupported format '{path.suffix}'")

        pil_img = PILImage.fromarray(image.pixels)
        if fmt in _NO_ALPHA_FORMATS:
            pil_img = pil_img.convert("RGB")

        try:
            pil_img.save(path, format=fmt)
        except (OSError, ValueError, KeyError) as err:
            raise ImageSaveError(f"Fail to save image to {path}: {err}") from err
        logger.debug("Saved %s as %s", path, fmt)

    @staticmethod
    def set_pixels(image: Image, new_pixels: np.ndarray) -> None:
        image.pixels = new_pixels
