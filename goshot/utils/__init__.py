# Utility components
from .file_utils import FileUtils

__all__ = ["FileUtils"]
