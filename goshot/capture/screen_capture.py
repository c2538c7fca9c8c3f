"""Display enumeration and capture using MSS, returned as PIL images."""

import logging
from typing import List, Optional

import mss
import mss.exception
from PIL import Image

from ..core.errors import CaptureError
from ..core.models import DisplayBounds

logger = logging.getLogger(__name__)


class ScreenCapture:
    """Capture whole displays through a single MSS session.

    MSS lists the virtual screen spanning all monitors at index 0 and the
    physical displays from index 1, so display index i maps to monitors[i + 1].
    """

    def __init__(self, sct_factory=mss.mss):
        self._sct_factory = sct_factory
        self._sct = None

    def open(self) -> None:
        if self._sct is None:
            self._sct = self._sct_factory()
            logger.debug("MSS session opened")

    def close(self) -> None:
        if self._sct is not None:
            self._sct.close()
            self._sct = None
            logger.debug("MSS session closed")

    def __enter__(self) -> "ScreenCapture":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def sct(self):
        if self._sct is None:
            raise RuntimeError("ScreenCapture not opened. Use it as a context manager or call open() first.")
        return self._sct

    def _displays(self) -> List[dict]:
        return list(self.sct.monitors[1:])

    def get_display_count(self) -> int:
        count = len(self._displays())
        logger.debug(f"Found {count} active display(s)")
        return count

    def get_display_bounds(self, index: int) -> DisplayBounds:
        displays = self._displays()
        if index < 0 or index >= len(displays):
            raise CaptureError(index, f"no such display (found {len(displays)})")
        return DisplayBounds.from_monitor(displays[index])

    def capture_rect(self, bounds: DisplayBounds, display_index: Optional[int] = None) -> Image.Image:
        """Grab exactly the given rectangle as an RGB image."""
        try:
            shot = self.sct.grab(bounds.to_monitor())
        except mss.exception.ScreenShotError as e:
            raise CaptureError(display_index, str(e)) from e

        # MSS returns BGRA rows, drop the padding byte while converting
        image = Image.frombytes("RGB", shot.size, shot.bgra, "raw", "BGRX")
        logger.debug(f"Captured {image.width}x{image.height} at ({bounds.left}, {bounds.top})")
        return image
