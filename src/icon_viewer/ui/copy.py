"""
User-facing copy.

Message catalogs live in ``data/i18n/<locale>/viewer.json`` and are addressed
by dotted keys such as ``messages.no_icons`` or ``viewer.theme.dark``.
Lookups never fail: an unknown locale falls back to English, and an unknown
key resolves to the key itself so the UI can still show something.
"""
from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict

DEFAULT_LOCALE = "en"
SUPPORTED_LOCALES = ("en", "ru")

_CATALOG_DIR = "data/i18n"
_CATALOG_FILE = "viewer.json"


def normalize_locale(locale: str | None) -> str:
    """Map ``ru_RU.UTF-8`` / ``ru-RU`` / ``RU`` to ``ru``; unknown → default."""
    if not locale:
        return DEFAULT_LOCALE
    lang = locale.replace("-", "_").split("_", 1)[0].split(".", 1)[0].lower()
    return lang if lang in SUPPORTED_LOCALES else DEFAULT_LOCALE


@lru_cache(maxsize=None)
def load_catalog(locale: str) -> Dict[str, Any]:
    """Load the catalog for a supported *locale*."""
    ref = resources.files("icon_viewer") / _CATALOG_DIR / locale / _CATALOG_FILE
    return json.loads(ref.read_text(encoding="utf-8"))


def _lookup(catalog: Dict[str, Any], key: str) -> str | None:
    node: Any = catalog
    for part in key.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part)
    if isinstance(node, str) and node.strip():
        return node
    return None


def resolve_copy(key: str, locale: str | None = None) -> str:
    """
    Resolve the localized string for *key*.

    Fallback chain: requested locale, then English, then the key itself.
    """
    loc = normalize_locale(locale)
    for candidate in dict.fromkeys((loc, DEFAULT_LOCALE)):
        val = _lookup(load_catalog(candidate), key)
        if val is not None:
            return val
    return key
