from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    x: int          # left
    y: int          # top
    width: int
    height: int

    @classmethod
    def bounds_of(cls, width: int, height: int) -> "Rect":
        """Rectangle covering a whole (width x height) buffer."""
        return cls(0, 0, width, height)

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def intersect(self, other: "Rect") -> Rect | None:
        """Overlap of two rectangles, or None when they do not overlap."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        overlap = Rect(left, top, right - left, bottom - top)
        return None if overlap.is_empty() else overlap
