# repositories/display_repository.py
import logging
import os
import re
import subprocess
from typing import List, Sequence

from models.screen_size import ScreenSize

logger = logging.getLogger(__name__)

# "Screen 0: minimum 8 x 8, current 1920 x 1080, maximum 32767 x 32767"
_SCREEN_LINE = re.compile(r"^Screen\s+\d+:.*?current\s+(\d+)\s*x\s*(\d+)")


class DisplayRepository:
    """
    Access layer for the windowing system.

    Implementations return zero or more candidate viewport sizes, in a
    deterministic order. An unavailable windowing system yields [].
    """

    def retrieve_sizes(self) -> List[ScreenSize]:
        raise NotImplementedError


class FixedDisplayRepository(DisplayRepository):
    """Fixed sizes, for headless runs and tests."""

    def __init__(self, sizes: Sequence[ScreenSize] = ()) -> None:
        self._sizes = list(sizes)

    def retrieve_sizes(self) -> List[ScreenSize]:
        return list(self._sizes)


class XrandrDisplayRepository(DisplayRepository):
    """
    Reads X screen sizes from ``xrandr --current``.

    One entry per X screen, in the order xrandr reports them.
    """

    def __init__(self, command: str = None, timeout: float = 5.0) -> None:
        self.command = command or os.getenv("LOCKSCREEN_XRANDR_CMD", "xrandr")
        self.timeout = timeout

    @staticmethod
    def parse(output: str) -> List[ScreenSize]:
        sizes = []
        for line in output.splitlines():
            match = _SCREEN_LINE.match(line.strip())
            if match is None:
                continue
            width, height = int(match.group(1)), int(match.group(2))
            if width > 0 and height > 0:
                sizes.append(ScreenSize(width, height))
        return sizes

    def retrieve_sizes(self) -> List[ScreenSize]:
        if not os.environ.get("DISPLAY"):
            logger.debug("DISPLAY is not set; no X screens available")
            return []
        try:
            output = subprocess.check_output(
                [self.command, "--current"],
                stderr=subprocess.DEVNULL,
                timeout=self.timeout,
            ).decode("utf-8", errors="replace")
        except (OSError, subprocess.SubprocessError) as err:
            logger.warning(f"Error running '{self.command}': {err}")
            return []

        sizes = self.parse(output)
        logger.debug("xrandr reported screens: %s", ", ".join(map(str, sizes)) or "none")
        return sizes
