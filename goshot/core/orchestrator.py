"""Capture pipeline: grab every active display and save it as a PNG file."""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from PIL import Image

from ..utils.file_utils import FileUtils
from .cancellation import CancellationToken
from .models import CaptureResult, GoshotConfig

logger = logging.getLogger(__name__)


class CapturePipeline:
    """Capture displays in index order and write one file per display.

    The screen object provides get_display_count(), get_display_bounds(index)
    and capture_rect(bounds, display_index). The cancellation token is checked
    before each display; a capture or write already in progress always
    finishes first. Files written before an error or cancellation are kept.
    """

    def __init__(
        self,
        config: GoshotConfig,
        screen,
        token: Optional[CancellationToken] = None,
        clock: Optional[Callable[[], datetime]] = None,
        notify: Callable[[str], None] = print,
    ):
        self.config = config
        self.screen = screen
        self.token = token or CancellationToken()
        self.clock = clock
        self.notify = notify

    def run(self) -> List[CaptureResult]:
        count = self.screen.get_display_count()
        if count == 0:
            logger.info("No active displays found, nothing to capture")
            return []

        timestamp = FileUtils.formatted_timestamp(self.clock() if self.clock else None)
        logger.info(f"Capturing {count} display(s) with timestamp {timestamp}")

        results = []
        for index in range(count):
            self.token.raise_if_cancelled()
            results.append(self.capture_display(index, timestamp))

        logger.info(f"Saved {len(results)} screenshot(s) to {self.config.path}")
        return results

    def capture_display(self, index: int, timestamp: str) -> CaptureResult:
        bounds = self.screen.get_display_bounds(index)
        logger.debug(f"Display {index + 1} bounds: {bounds}")

        image = self.screen.capture_rect(bounds, index)
        file_path = FileUtils.capture_path(self.config.path, timestamp, index)
        self.save_png(image, file_path)

        self.notify(f"Saved {file_path}")
        return CaptureResult(display_index=index, file_path=file_path, bounds=bounds)

    @staticmethod
    def save_png(image: Image.Image, file_path: str) -> None:
        # Encoding errors propagate so a broken file never counts as saved
        with open(file_path, "wb") as f:
            image.save(f, format="PNG")
