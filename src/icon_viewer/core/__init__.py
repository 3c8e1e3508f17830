"""Core engine — configuration and filesystem discovery."""

from icon_viewer.core.config import ScanConfig
from icon_viewer.core.discover import (
    SUPPORTED_EXTENSIONS,
    find_icons_recursively,
    iter_icon_files,
)

__all__ = [
    "ScanConfig",
    "SUPPORTED_EXTENSIONS",
    "find_icons_recursively",
    "iter_icon_files",
]
