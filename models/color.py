from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Color:
    """RGBA colour, 8 bits per channel. ``a`` = 255 is fully opaque."""
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for name, value in zip("rgba", self.as_tuple()):
            if not 0 <= value <= 255:
                raise ValueError(f"Color channel {name}={value} outside 0..255")

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return self.r, self.g, self.b, self.a

    @property
    def opacity(self) -> float:
        """Alpha normalised to [0, 1]."""
        return self.a / 255.0


BLACK_HALF = Color(0, 0, 0, 128)
WHITE_HALF = Color(255, 255, 255, 128)
