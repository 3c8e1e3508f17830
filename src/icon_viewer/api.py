"""
icon_viewer.api
===============

Programmatic entrypoints for using icon_viewer as a library.

Goals:
  - No argparse / CLI dependencies
  - Deterministic mode support (ci_mode=True)
  - JSON-friendly outputs that match ``icon_scan.schema.json``

Usage::

    from icon_viewer.api import scan_folder, show_icons

    result, result_dict = scan_folder("assets/icons", ci_mode=True)
    outcome = show_icons("assets/icons", theme="light")
    if outcome.html:
        Path("icons.html").write_text(outcome.html, encoding="utf-8")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from icon_viewer.contracts.load import validate_instance
from icon_viewer.core.config import SUPPORTED_EXTENSIONS, ScanConfig
from icon_viewer.core.discover import iter_icon_files
from icon_viewer.model import OutcomeKind, Theme
from icon_viewer.model.scan_result import ScanResult
from icon_viewer.reports.viewer import DEFAULT_COLUMNS, UriFor, render_viewer
from icon_viewer.ui.copy import resolve_copy

_logger = logging.getLogger(__name__)

# Fixed timestamp for deterministic mode.
_DETERMINISTIC_TIMESTAMP = "2000-01-01T00:00:00+00:00"


def _to_path(p: str | Path) -> Path:
    return p if isinstance(p, Path) else Path(p)


# ── scan_folder ─────────────────────────────────────────────────────


def scan_folder(
    root: str | Path,
    *,
    extensions: tuple[str, ...] = SUPPORTED_EXTENSIONS,
    ci_mode: bool = False,
) -> tuple[ScanResult, dict[str, Any]]:
    """Scan *root* recursively for icons.

    Parameters
    ----------
    root:
        Directory to scan.
    extensions:
        Allowed suffixes; defaults to the fixed image allow-list.
    ci_mode:
        If True, icons are sorted by relative path and ``created_at`` is
        fixed, so output is byte-stable across runs.

    Returns
    -------
    ``(ScanResult, scan_dict)``
        The dataclass and the schema-aligned JSON dict.

    Raises
    ------
    FileNotFoundError
        If *root* does not exist.
    ValueError
        If an entry of *extensions* cannot be a file suffix.
    OSError
        Any other filesystem error raised during the walk.
    """
    root_p = _to_path(root).resolve()
    if not root_p.exists():
        raise FileNotFoundError(f"scan_folder: root does not exist: {root_p}")

    cfg = ScanConfig(root=root_p, extensions=extensions, sort=ci_mode)
    icons = list(iter_icon_files(cfg))
    _logger.info("Found %d icon(s) under %s", len(icons), root_p)

    result = ScanResult(root=root_p, icons=icons, extensions=cfg.extensions)
    if ci_mode:
        result.created_at = _DETERMINISTIC_TIMESTAMP

    result_dict = result.to_dict()
    validate_instance(result_dict, "icon_scan.schema.json")
    return result, result_dict


# ── show_icons ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class ViewerOutcome:
    """Result of the "show icons" command.

    ``html`` is set only when ``kind`` is ``RENDERED``; otherwise
    ``message`` holds the localized text to show the user.
    """

    kind: OutcomeKind
    message: str = ""
    html: Optional[str] = None
    result: Optional[ScanResult] = None

    @property
    def rendered(self) -> bool:
        return self.kind is OutcomeKind.RENDERED


def show_icons(
    folder: str | Path | None,
    *,
    theme: Theme | str = Theme.DARK,
    locale: str | None = None,
    columns: int = DEFAULT_COLUMNS,
    uri_for: UriFor | None = None,
    ci_mode: bool = False,
) -> ViewerOutcome:
    """Scan *folder* and render the viewer page.

    Only two conditions are turned into messages: no folder was given, and
    the folder holds no icons.  Everything else propagates.
    """
    if folder is None or str(folder) == "":
        return ViewerOutcome(
            kind=OutcomeKind.NO_FOLDER,
            message=resolve_copy("messages.no_folder", locale),
        )

    result, _ = scan_folder(folder, ci_mode=ci_mode)
    if result.is_empty:
        return ViewerOutcome(
            kind=OutcomeKind.NO_ICONS,
            message=resolve_copy("messages.no_icons", locale),
            result=result,
        )

    page = render_viewer(
        result,
        theme=Theme(theme),
        columns=columns,
        uri_for=uri_for,
        locale=locale,
    )
    return ViewerOutcome(kind=OutcomeKind.RENDERED, html=page, result=result)
