"""ScanResult — the schema-aligned artifact of one folder scan."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from icon_viewer import __version__
from icon_viewer.model.icon_file import IconFile


@dataclass(slots=True)
class ScanResult:
    """Icons found under ``root`` in discovery order.

    Built once per invocation by :func:`icon_viewer.api.scan_folder` and
    discarded after rendering.
    """

    root: Path
    icons: list[IconFile] = field(default_factory=list)
    extensions: tuple[str, ...] = ()
    created_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(),
    )
    tool_version: str = __version__

    @property
    def is_empty(self) -> bool:
        return not self.icons

    def to_dict(self) -> dict[str, Any]:
        """Produce the ``icon_scan_v1`` document."""
        by_extension: dict[str, int] = {}
        for icon in self.icons:
            by_extension[icon.extension] = by_extension.get(icon.extension, 0) + 1

        return {
            "schema_version": "icon_scan_v1",
            "run": {
                "root": self.root.as_posix(),
                "created_at": self.created_at,
                "tool_version": self.tool_version,
                "extensions": list(self.extensions),
            },
            "counts": {
                "total": len(self.icons),
                "by_extension": by_extension,
            },
            "icons": [icon.to_dict() for icon in self.icons],
        }
