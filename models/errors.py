"""
Error taxonomy for the wallpaper renderer.

Every failure is fatal: lower layers raise one of these, the CLI logs the
message and exits with status 1.
"""


class LockscreenError(Exception):
    """Base class for all renderer failures."""


class ScreenResolutionError(LockscreenError, RuntimeError):
    """No display could be queried (environment error)."""


class UsageError(LockscreenError, ValueError):
    """Command line arguments are missing or malformed."""


class ImageLoadError(LockscreenError, OSError):
    """Input image is missing, unreadable or not a decodable format."""


class ImageSaveError(LockscreenError, OSError):
    """Output image format is unsupported or the write failed."""
