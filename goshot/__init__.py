"""A lightweight screenshot tool that saves every active display as a PNG."""

__version__ = "0.1.0"
__author__ = "David Haukeness"

from .core import (
    GoshotConfig,
    CaptureResult,
    DisplayBounds,
    CapturePipeline,
    CancellationToken,
    SignalCancellationSource,
    load_config,
    merge_config,
    GoshotError,
    ConfigError,
    CaptureError,
    CaptureCancelled,
)
from .capture import ScreenCapture
from .utils import FileUtils

__all__ = [
    "GoshotConfig",
    "CaptureResult",
    "DisplayBounds",
    "CapturePipeline",
    "CancellationToken",
    "SignalCancellationSource",
    "load_config",
    "merge_config",
    "GoshotError",
    "ConfigError",
    "CaptureError",
    "CaptureCancelled",
    "ScreenCapture",
    "FileUtils",
]
