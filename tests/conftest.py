"""Shared fixtures: small folder trees with and without icons."""

from __future__ import annotations

from pathlib import Path

import pytest

# Relative paths that must be found under ``icon_tree``.
EXPECTED_ICONS = {
    "a.png",
    "B.JPG",
    "sub/c.svg",
    "sub/deeper/d.ico",
    "sub/deeper/e.jpeg",
}


def _touch(path: Path, data: bytes = b"\x89PNG\r\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


@pytest.fixture()
def icon_tree(tmp_path: Path) -> Path:
    """A folder mixing icons, non-icons and look-alikes at several depths."""
    root = tmp_path / "assets"
    for rel in EXPECTED_ICONS:
        _touch(root / rel)

    # Non-matching files.
    _touch(root / "notes.txt", b"hello")
    _touch(root / "sub" / "readme.md", b"# readme")
    _touch(root / "archive.png.bak")
    _touch(root / "icon.gif")
    # Dot-file: no extension at all.
    _touch(root / ".png")
    # A directory named like an image is descended into, never listed.
    (root / "fake.svg").mkdir()
    (root / "empty_dir").mkdir()
    return root


@pytest.fixture()
def empty_tree(tmp_path: Path) -> Path:
    """A folder with subfolders and files but no icons."""
    root = tmp_path / "docs"
    _touch(root / "index.html", b"<html></html>")
    _touch(root / "nested" / "data.json", b"{}")
    (root / "nested" / "blank").mkdir()
    return root


@pytest.fixture()
def expected_icons() -> set[str]:
    return set(EXPECTED_ICONS)
