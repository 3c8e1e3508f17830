"""
Viewer Router
=============
Serves the icon grid page and the images it references.

Image URLs point back at ``/viewer/icon``, which only hands out files that
sit inside the scanned folder and carry an allowed extension.
"""
import os
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import FileResponse, HTMLResponse

from icon_viewer import api as core_api
from icon_viewer.core.config import SUPPORTED_EXTENSIONS
from icon_viewer.model import Theme
from icon_viewer.model.icon_file import IconFile
from icon_viewer.reports.viewer import render_message_page
from icon_viewer.ui.copy import resolve_copy
from icon_viewer.web_api.config import settings

router = APIRouter()


@router.get("", response_class=HTMLResponse)
async def show_viewer(
    request: Request,
    folder: str = Query(default="", description="Local folder to scan"),
    theme: Optional[Theme] = Query(default=None),
    locale: Optional[str] = Query(default=None),
    columns: Optional[int] = Query(default=None, ge=1, le=64),
):
    """
    Render the icon grid for a folder.

    Returns 400 with the "select a folder" message when *folder* is empty,
    and a page with the "no icons" message when nothing matches.
    """
    locale = locale or settings.DEFAULT_LOCALE
    if not folder:
        raise HTTPException(
            status_code=400, detail=resolve_copy("messages.no_folder", locale)
        )

    target = Path(folder)
    if not target.exists():
        raise HTTPException(status_code=404, detail=f"Path not found: {folder}")
    if not target.is_dir():
        raise HTTPException(status_code=400, detail=f"Not a folder: {folder}")
    root = target.resolve()

    icon_url = request.url_for("viewer_icon")

    def uri_for(icon: IconFile) -> str:
        return str(icon_url.include_query_params(folder=str(root), path=icon.relative_path))

    try:
        outcome = core_api.show_icons(
            root,
            theme=theme or Theme(settings.DEFAULT_THEME),
            locale=locale,
            columns=columns or settings.GRID_COLUMNS,
            uri_for=uri_for,
        )
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    if not outcome.rendered:
        return HTMLResponse(render_message_page(outcome.message, locale=locale))
    return HTMLResponse(outcome.html)


@router.get("/icon", name="viewer_icon")
async def get_icon(
    folder: str = Query(..., description="Folder the icon was found in"),
    path: str = Query(..., description="Icon path relative to the folder"),
):
    """
    Return one icon file.

    The joined path must stay inside *folder* and end in a supported
    extension, otherwise 403.
    """
    root = os.path.normpath(os.path.abspath(folder))
    candidate = os.path.normpath(os.path.join(root, path))

    if os.path.commonpath([root, candidate]) != root or candidate == root:
        raise HTTPException(status_code=403, detail="Path escapes the scanned folder")
    if os.path.splitext(candidate)[1].lower() not in SUPPORTED_EXTENSIONS:
        raise HTTPException(status_code=403, detail="Not an icon file")
    if not os.path.isfile(candidate):
        raise HTTPException(status_code=404, detail=f"Icon not found: {path}")

    return FileResponse(candidate)
