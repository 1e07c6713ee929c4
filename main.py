#!/usr/bin/env python3
"""
ilock: render a blurred lock-screen wallpaper sized to the primary display.

    ilock <img_path> <out_path>
"""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from models.errors import LockscreenError, UsageError
from pipeline.render_lockscreen import render_lockscreen
from services.display_service import DisplayService

USAGE = "usage : ilock <img_path> <out_path>"

logger = logging.getLogger("ilock")


class _ArgumentParser(argparse.ArgumentParser):
    """argparse that raises UsageError instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    ap = _ArgumentParser(prog="ilock", usage=USAGE.split(" : ", 1)[1],
                         description="Render a blurred lock-screen wallpaper for the primary display.")
    ap.add_argument("img_path", help="input image")
    ap.add_argument("out_path", help="output image; format follows the extension")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def _configure_logging(verbose: bool = False) -> None:
    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S',
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None, display_service: DisplayService = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    _configure_logging(verbose="-v" in argv or "--verbose" in argv)

    try:
        screen = (display_service or DisplayService()).get_screen_size()
        try:
            args = build_parser().parse_args(argv)
        except UsageError as err:
            print(USAGE, file=sys.stderr)
            logger.debug(f"Argument error: {err}")
            return 1
        render_lockscreen(args.img_path, args.out_path, screen)
    except (LockscreenError, OSError, ValueError) as err:
        logger.error(str(err))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
