"""Export formats for scan results.

Supports:

*  **JSON** — the ``icon_scan_v1`` document, machine-readable.
*  **HTML** — the themeable icon viewer page.

All exporters accept a :class:`ScanResult` and produce a string.
"""

from __future__ import annotations

from icon_viewer.model import Theme
from icon_viewer.model.scan_result import ScanResult
from icon_viewer.reports.viewer import DEFAULT_COLUMNS, UriFor, render_viewer
from icon_viewer.utils.json_norm import stable_json_dumps


def export_json(result: ScanResult, *, indent: int = 2) -> str:
    """Export a ``ScanResult`` as indented JSON."""
    return stable_json_dumps(result.to_dict(), indent=indent)


def export_html(
    result: ScanResult,
    *,
    theme: Theme = Theme.DARK,
    columns: int = DEFAULT_COLUMNS,
    uri_for: UriFor | None = None,
    locale: str | None = None,
) -> str:
    """Export a ``ScanResult`` as the viewer page."""
    return render_viewer(
        result, theme=theme, columns=columns, uri_for=uri_for, locale=locale
    )


def export_result(
    result: ScanResult,
    fmt: str = "html",
    *,
    theme: Theme = Theme.DARK,
    columns: int = DEFAULT_COLUMNS,
    locale: str | None = None,
) -> str:
    """Export a ``ScanResult`` in the specified format.

    Parameters
    ----------
    result:
        The scan to export.
    fmt:
        One of ``"json"``, ``"html"``.
    theme, columns, locale:
        Passed to the HTML viewer; ignored for JSON.

    Raises
    ------
    ValueError
        If *fmt* is not recognised.
    """
    if fmt == "json":
        return export_json(result)
    if fmt == "html":
        return export_html(result, theme=theme, columns=columns, locale=locale)
    raise ValueError(f"Unknown export format: {fmt!r} (use json|html)")
