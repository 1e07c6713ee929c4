# services/blend_service.py
import numpy as np

from models.color import Color
from models.rect import Rect


class BlendService:
    """
    Source-over blending of a solid colour into a rectangle.

    The rectangle is clipped to the buffer first. Over an opaque pixel this is
    out = a * colour + (1 - a) * existing, with a = colour.a / 255; over a
    translucent pixel the destination alpha weights the existing colour.
    """

    @staticmethod
    def _source_over(dst: np.ndarray, src: np.ndarray) -> np.ndarray:
        """Unpremultiplied Porter-Duff OVER; both arrays float32 in [0, 1]."""
        src_a = src[..., 3:4]
        dst_a = dst[..., 3:4]
        out_a = src_a + dst_a * (1.0 - src_a)

        weighted = src[..., :3] * src_a + dst[..., :3] * dst_a * (1.0 - src_a)
        safe_a = np.where(out_a > 0, out_a, 1.0)
        out_rgb = np.where(out_a > 0, weighted / safe_a, dst[..., :3])
        return np.concatenate([out_rgb, out_a], axis=-1)

    @classmethod
    def blend_rect(cls, pixels: np.ndarray, rect: Rect, color: Color) -> np.ndarray:
        """
        Args:
            pixels: (H, W, 4) uint8 RGBA buffer. Not modified.
            rect: target rectangle, may lie partly or fully outside.
            color: fill colour with its own alpha.

        Returns:
            New buffer with the blended rectangle.
        """
        out = pixels.copy()
        h, w = pixels.shape[:2]
        area = Rect.bounds_of(w, h).intersect(rect)
        if area is None or color.opacity == 0.0:
            return out

        region = out[area.y:area.bottom, area.x:area.right].astype("float32") / 255.0
        src = np.array(color.as_tuple(), dtype="float32") / 255.0

        blended = cls._source_over(region, np.broadcast_to(src, region.shape))
        out[area.y:area.bottom, area.x:area.right] = np.clip(np.rint(blended * 255.0), 0, 255).astype("uint8")
        return out
