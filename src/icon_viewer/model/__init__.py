"""Enums shared across discovery, rendering and the web layer."""

from __future__ import annotations

from enum import Enum


class Theme(str, Enum):
    """Viewer colour scheme, toggled client-side."""

    LIGHT = "light"
    DARK = "dark"

    @property
    def css_class(self) -> str:
        return f"{self.value}-theme"


class OutcomeKind(str, Enum):
    """What the "show icons" command ended up doing."""

    NO_FOLDER = "no_folder"
    NO_ICONS = "no_icons"
    RENDERED = "rendered"
