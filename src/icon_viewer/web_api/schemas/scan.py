"""
Scan Schemas
============
Request and response models for scan endpoints.
"""
from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import BaseModel, Field


class ScanRequest(BaseModel):
    """Request to scan a folder for icons"""

    folder: str = Field(..., description="Local folder to scan recursively")
    ci_mode: bool = Field(default=False, description="Sorted icons and a fixed timestamp")

    class Config:
        json_schema_extra = {
            "example": {
                "folder": "/path/to/assets/icons",
                "ci_mode": False,
            }
        }


class ScanSummary(BaseModel):
    """Summary of scan results"""

    icons_found: int = Field(default=0)
    by_extension: Dict[str, int] = Field(default_factory=dict)


class ScanResponse(BaseModel):
    """Response from a scan operation"""

    status: str = Field(..., description="Scan status: complete, empty")
    folder: str
    summary: ScanSummary
    result: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Config:
        json_schema_extra = {
            "example": {
                "status": "complete",
                "folder": "/path/to/assets/icons",
                "summary": {
                    "icons_found": 3,
                    "by_extension": {".png": 2, ".svg": 1},
                },
                "result": {},
            }
        }
