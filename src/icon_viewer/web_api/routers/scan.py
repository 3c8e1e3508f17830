"""
Scan Router
===========
Endpoint returning the icon_scan_v1 document for a folder.
"""
from pathlib import Path

from fastapi import APIRouter, HTTPException

from icon_viewer import api as core_api
from icon_viewer.web_api.schemas.scan import (
    ScanRequest,
    ScanResponse,
    ScanSummary,
)

router = APIRouter()


@router.post("/", response_model=ScanResponse)
async def run_scan(request: ScanRequest):
    """
    Scan a folder for icons.

    - **folder**: Local folder to scan
    - **ci_mode**: Sort icons and fix the timestamp
    """
    target = Path(request.folder)
    if not target.exists():
        raise HTTPException(status_code=404, detail=f"Path not found: {request.folder}")
    if not target.is_dir():
        raise HTTPException(status_code=400, detail=f"Not a folder: {request.folder}")

    try:
        scan_result, result = core_api.scan_folder(target, ci_mode=request.ci_mode)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    counts = result.get("counts", {})
    return ScanResponse(
        status="empty" if scan_result.is_empty else "complete",
        folder=result["run"]["root"],
        summary=ScanSummary(
            icons_found=counts.get("total", 0),
            by_extension=counts.get("by_extension", {}),
        ),
        result=result,
    )
