"""Scan configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

# Fixed allow-list, compared case-insensitively against file suffixes.
SUPPORTED_EXTENSIONS: tuple[str, ...] = (".png", ".jpg", ".jpeg", ".svg", ".ico")


def normalize_extensions(exts: tuple[str, ...] | list[str]) -> tuple[str, ...]:
    """Lower-case *exts* and make sure each one starts with a dot.

    Raises ``ValueError`` for a suffix no file name can end with, such as
    ``.tar.gz`` or one holding a path separator.
    """
    out: list[str] = []
    for ext in exts:
        e = ext.strip().lower()
        if not e:
            continue
        if not e.startswith("."):
            e = "." + e
        if e == "." or any(c in e[1:] for c in "./\\"):
            raise ValueError(f"not a file suffix: {ext!r}")
        if e not in out:
            out.append(e)
    return tuple(out)


@dataclass(frozen=True)
class ScanConfig:
    """Immutable scan configuration.

    ``sort`` orders icons by relative path; leave it off to keep the
    filesystem enumeration order.
    """

    root: Path = field(default_factory=lambda: Path("."))
    extensions: tuple[str, ...] = SUPPORTED_EXTENSIONS
    sort: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "extensions", normalize_extensions(self.extensions))
