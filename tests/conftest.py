"""
Shared pytest fixtures for the goshot test suite.

Provides a fake screen with configurable displays so the capture pipeline
and CLI run without a real display server.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional, Tuple

import pytest
from PIL import Image

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from goshot.core.errors import CaptureError
from goshot.core.models import DisplayBounds

FIXED_NOW = datetime(2024, 5, 1, 12, 3, 4, tzinfo=timezone.utc)
FIXED_STAMP = "2024-05-01T120304Z"


class FakeScreen:
    """Stand-in for ScreenCapture with a fixed list of display sizes."""

    def __init__(
        self,
        sizes: List[Tuple[int, int]],
        fail_at: Optional[int] = None,
        on_capture: Optional[Callable[[int], None]] = None,
    ):
        self.sizes = sizes
        self.fail_at = fail_at
        self.on_capture = on_capture
        self.captured: List[int] = []
        self.opened = False
        self.closed = False

    def __enter__(self):
        self.opened = True
        return self

    def __exit__(self, exc_type, exc, tb):
        self.closed = True

    def get_display_count(self) -> int:
        return len(self.sizes)

    def get_display_bounds(self, index: int) -> DisplayBounds:
        width, height = self.sizes[index]
        left = sum(w for w, _ in self.sizes[:index])
        return DisplayBounds(left=left, top=0, width=width, height=height)

    def capture_rect(self, bounds: DisplayBounds, display_index: Optional[int] = None) -> Image.Image:
        if display_index == self.fail_at:
            raise CaptureError(display_index, "display disconnected")
        self.captured.append(display_index)
        image = Image.new("RGB", bounds.size, (display_index * 40 % 256, 80, 160))
        if self.on_capture:
            self.on_capture(display_index)
        return image


@pytest.fixture
def fake_screen_factory():
    return FakeScreen


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML config file and return its path as a string."""

    def _write(text: str, name: str = "goshot.yaml") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def output_dir(tmp_path):
    out = tmp_path / "shots"
    out.mkdir()
    return out
