# services/display_service.py
import logging
import os

from dotenv import load_dotenv

from models.errors import ScreenResolutionError
from models.screen_size import ScreenSize
from repositories.display_repository import (
    DisplayRepository,
    FixedDisplayRepository,
    XrandrDisplayRepository,
)

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def default_display_repository() -> DisplayRepository:
    """
    LOCKSCREEN_SCREEN_SIZE (``WxH``) pins the viewport; otherwise ask X11.
    """
    fixed = os.getenv("LOCKSCREEN_SCREEN_SIZE")
    if fixed:
        return FixedDisplayRepository([ScreenSize.parse(fixed)])
    return XrandrDisplayRepository()


class DisplayService:
    """Business-level access to the primary display resolution."""

    def __init__(self, display_repository: DisplayRepository = None):
        self.display_repository = display_repository or default_display_repository()

    def get_screen_size(self) -> ScreenSize:
        """
        Size of the first available display.

        Raises:
            ScreenResolutionError: no display was reported.
        """
        sizes = self.display_repository.retrieve_sizes()
        if not sizes:
            raise ScreenResolutionError("cannot get screen resolution")
        logger.info(f"Screen resolution: {sizes[0]}")
        return sizes[0]
