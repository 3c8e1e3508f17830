"""Shared utilities for icon_viewer."""

from icon_viewer.utils.exit_codes import ExitCode
from icon_viewer.utils.json_norm import stable_json_dump, stable_json_dumps

__all__ = [
    "ExitCode",
    "stable_json_dump",
    "stable_json_dumps",
]
