"""
UI-facing helpers.

Pure lookups over bundled message catalogs, shared by the CLI, the HTML
viewer and the web API.
"""
from icon_viewer.ui.copy import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    normalize_locale,
    resolve_copy,
)

__all__ = ["DEFAULT_LOCALE", "SUPPORTED_LOCALES", "normalize_locale", "resolve_copy"]
