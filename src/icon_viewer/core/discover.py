"""File discovery — depth-first walk collecting image files by extension."""

from __future__ import annotations

import logging
import os
import stat as _stat
from pathlib import Path
from typing import Iterator

from icon_viewer.core.config import SUPPORTED_EXTENSIONS, ScanConfig, normalize_extensions
from icon_viewer.model.icon_file import IconFile

_logger = logging.getLogger(__name__)

__all__ = ["SUPPORTED_EXTENSIONS", "find_icons_recursively", "iter_icon_files"]


def _walk(
    dir_path: Path,
    extensions: tuple[str, ...],
    ancestors: frozenset[tuple[int, int]],
) -> Iterator[tuple[Path, os.stat_result]]:
    _logger.debug("Listing %s", dir_path)
    for name in os.listdir(dir_path):
        full = dir_path / name
        # Follows symlinks; a broken link raises FileNotFoundError here.
        st = full.stat()

        if _stat.S_ISDIR(st.st_mode):
            ident = (st.st_dev, st.st_ino)
            if ident in ancestors:
                _logger.warning("Skipping symlink cycle at %s", full)
                continue
            yield from _walk(full, extensions, ancestors | {ident})
        elif _stat.S_ISREG(st.st_mode) and os.path.splitext(name)[1].lower() in extensions:
            yield full, st


def _root_ident(root: Path) -> frozenset[tuple[int, int]]:
    st = root.stat()
    return frozenset({(st.st_dev, st.st_ino)})


def find_icons_recursively(
    dir_path: Path | str,
    extensions: tuple[str, ...] | list[str] = SUPPORTED_EXTENSIONS,
) -> list[Path]:
    """Return every file under *dir_path* whose suffix is in *extensions*.

    Parameters
    ----------
    dir_path:
        Directory to walk.
    extensions:
        Allowed suffixes.  Compared case-insensitively.

    Returns
    -------
    Paths in depth-first, filesystem enumeration order.  No sorting.

    Raises
    ------
    OSError
        Unreadable directories and broken symlinks are not swallowed.
    """
    root = Path(dir_path)
    exts = normalize_extensions(tuple(extensions))
    return [p for p, _ in _walk(root, exts, _root_ident(root))]


def iter_icon_files(cfg: ScanConfig) -> Iterator[IconFile]:
    """Yield :class:`IconFile` records for everything matching *cfg*."""
    root = cfg.root
    found = (
        IconFile.from_path(p, root, size_bytes=st.st_size)
        for p, st in _walk(root, cfg.extensions, _root_ident(root))
    )
    if cfg.sort:
        yield from sorted(found, key=lambda icon: icon.relative_path)
    else:
        yield from found
