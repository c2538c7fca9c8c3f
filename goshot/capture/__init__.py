"""Screen capture module - display enumeration and capture."""

from .screen_capture import ScreenCapture

__all__ = ["ScreenCapture"]
