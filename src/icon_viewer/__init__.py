"""icon_viewer — browse every icon under a folder as a themeable grid."""

__all__ = [
    "__version__",
    "scan_folder",
    "show_icons",
    "ViewerOutcome",
]
__version__ = "0.1.0"

# Programmatic entrypoints.
from icon_viewer.api import (  # noqa: E402, F401
    ViewerOutcome,
    scan_folder,
    show_icons,
)
