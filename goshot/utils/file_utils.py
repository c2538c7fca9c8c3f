"""File naming and directory helpers for screenshot output."""

import logging
import os
from datetime import datetime, timezone
from typing import Optional

logger = logging.getLogger(__name__)

IMAGE_EXTENSION = ".png"


class FileUtils:
    """File operations and utilities."""

    @staticmethod
    def formatted_timestamp(now: Optional[datetime] = None) -> str:
        """UTC RFC 3339 timestamp with colons removed, e.g. 2024-05-01T120304Z."""
        now = now or datetime.now(timezone.utc)
        stamp = now.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        return stamp.replace(":", "")

    @staticmethod
    def capture_path(directory: str, timestamp: str, display_index: int) -> str:
        # display_index is 0-based, filenames are 1-based
        return f"{directory}/{timestamp}_{display_index + 1}{IMAGE_EXTENSION}"

    @staticmethod
    def ensure_directory_exists(dirpath: str) -> bool:
        """Create dirpath (single level) if missing. Returns True when it was created."""
        if os.path.exists(dirpath):
            return False

        os.mkdir(dirpath)
        logger.debug(f"Created directory: {dirpath}")
        return True
