# Data models for configuration and capture results
import os
from dataclasses import dataclass
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_OUTPUT_PATH = "."


def _separators() -> str:
    seps = "/" + os.sep
    if os.altsep:
        seps += os.altsep
    return seps


class GoshotConfig(BaseModel):
    """Settings for a single screenshot run."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    path: str = Field(default=DEFAULT_OUTPUT_PATH, description="Directory that receives the PNG files")

    @field_validator("path")
    @classmethod
    def strip_trailing_separators(cls, value: str) -> str:
        # "///" collapses to "", which fails later at directory creation
        return value.rstrip(_separators())


@dataclass(frozen=True)
class DisplayBounds:  # Pixel rectangle of one display
    left: int
    top: int
    width: int
    height: int

    @staticmethod
    def from_monitor(monitor: Dict) -> "DisplayBounds":  # Build from an mss monitor mapping
        return DisplayBounds(
            left=int(monitor["left"]),
            top=int(monitor["top"]),
            width=int(monitor["width"]),
            height=int(monitor["height"]),
        )

    def to_monitor(self) -> Dict[str, int]:
        return {"left": self.left, "top": self.top, "width": self.width, "height": self.height}

    @property
    def size(self) -> tuple:
        return (self.width, self.height)


@dataclass(frozen=True)
class CaptureResult:  # One written screenshot
    display_index: int  # 0-based
    file_path: str
    bounds: DisplayBounds

    @property
    def display_number(self) -> int:
        return self.display_index + 1
