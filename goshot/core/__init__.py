# Core components: configuration, cancellation and the capture pipeline
from .errors import GoshotError, ConfigError, CaptureError, CaptureCancelled
from .models import GoshotConfig, CaptureResult, DisplayBounds
from .config_loader import load_config, merge_config
from .cancellation import CancellationToken, SignalCancellationSource
from .orchestrator import CapturePipeline

__all__ = [
    "GoshotError",
    "ConfigError",
    "CaptureError",
    "CaptureCancelled",
    "GoshotConfig",
    "CaptureResult",
    "DisplayBounds",
    "load_config",
    "merge_config",
    "CancellationToken",
    "SignalCancellationSource",
    "CapturePipeline",
]
