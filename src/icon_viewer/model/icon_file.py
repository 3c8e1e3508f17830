"""IconFile — one matched image under the scan root."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class IconFile:
    path: Path
    relative_path: str
    extension: str
    size_bytes: int = 0

    @classmethod
    def from_path(cls, path: Path, root: Path, *, size_bytes: int = 0) -> IconFile:
        """Build a record for *path*, which must live under *root*."""
        return cls(
            path=path,
            relative_path=path.relative_to(root).as_posix(),
            extension=path.suffix.lower(),
            size_bytes=size_bytes,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path.as_posix(),
            "relative_path": self.relative_path,
            "extension": self.extension,
            "size_bytes": self.size_bytes,
        }
