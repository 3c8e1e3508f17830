"""Reports — HTML viewer and JSON export of scan results."""

from icon_viewer.reports.exporters import export_html, export_json, export_result
from icon_viewer.reports.viewer import render_icon_card, render_message_page, render_viewer

__all__ = [
    "export_html",
    "export_json",
    "export_result",
    "render_icon_card",
    "render_message_page",
    "render_viewer",
]
