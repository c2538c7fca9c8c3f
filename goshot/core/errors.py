"""Exception types raised while loading configuration and capturing displays."""

from typing import Optional


class GoshotError(Exception):
    """Base class for errors that abort a screenshot run."""


class ConfigError(GoshotError):
    """Configuration file could not be read, parsed or validated."""


class CaptureError(GoshotError):
    """A display could not be captured."""

    def __init__(self, display_index: Optional[int], reason: str):
        self.display_index = display_index
        self.reason = reason
        if display_index is None:
            super().__init__(f"failed to capture display: {reason}")
        else:
            super().__init__(f"failed to capture display {display_index + 1}: {reason}")


class CaptureCancelled(GoshotError):
    """Run was interrupted before all displays were captured."""

    def __init__(self, message: str = "capture cancelled"):
        super().__init__(message)
