from __future__ import annotations
from dataclasses import dataclass
import re

_SIZE_RE = re.compile(r"^\s*(\d+)\s*[xX]\s*(\d+)\s*$")


@dataclass(frozen=True)
class ScreenSize:
    """Viewport the final wallpaper must exactly fill, in pixels."""
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Screen size must be positive, got {self.width}x{self.height}")

    @classmethod
    def parse(cls, text: str) -> "ScreenSize":
        """Parse the ``WIDTHxHEIGHT`` form, e.g. ``1920x1080``."""
        match = _SIZE_RE.match(text or "")
        if match is None:
            raise ValueError(f"Invalid screen size: {text!r} (expected WIDTHxHEIGHT)")
        return cls(width=int(match.group(1)), height=int(match.group(2)))

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"
