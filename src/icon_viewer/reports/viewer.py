"""HTML viewer — a self-contained page showing every icon as a grid card.

The page carries its own CSS and a small script: two radio inputs named
``background`` switch ``body`` between ``light-theme`` and ``dark-theme``.
Images are referenced by URI, never inlined, so the browser does all the
decoding.
"""

from __future__ import annotations

import html as html_mod
from typing import Callable

from icon_viewer.model import Theme
from icon_viewer.model.icon_file import IconFile
from icon_viewer.model.scan_result import ScanResult
from icon_viewer.ui.copy import normalize_locale, resolve_copy

UriFor = Callable[[IconFile], str]

DEFAULT_COLUMNS = 8


def file_uri(icon: IconFile) -> str:
    """Absolute ``file://`` URI for *icon*."""
    return icon.path.resolve().as_uri()


_CARD_TEMPLATE = """\
<div class="icon-card">
  <img src="{src}" alt="{alt}" loading="lazy">
  <span>{label}</span>
</div>"""


def render_icon_card(icon: IconFile, uri: str) -> str:
    rel = html_mod.escape(icon.relative_path, quote=True)
    return _CARD_TEMPLATE.format(
        src=html_mod.escape(uri, quote=True),
        alt=rel,
        label=rel,
    )


_PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="{lang}">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{title}</title>
<style>
  body {{ font-family: Arial, sans-serif; margin: 0; padding: 0; transition: color 0.3s ease, background-color 0.3s ease; }}
  header {{ position: sticky; top: 0; display: flex; justify-content: center; align-items: center; gap: 20px; padding: 10px; background: #f4f4f9; border-bottom: 1px solid #ccc; color: black; }}
  .container {{ display: grid; grid-template-columns: repeat({columns}, 1fr); gap: 15px; padding: 20px; transition: background-color 0.3s ease; }}
  .icon-card {{ background: #fff; border-radius: 8px; box-shadow: 0 2px 4px rgba(0, 0, 0, 0.1); overflow: hidden; text-align: center; padding: 10px; transition: transform 0.2s ease, box-shadow 0.2s ease; }}
  .icon-card:hover {{ transform: translateY(-5px); box-shadow: 0 4px 8px rgba(0, 0, 0, 0.2); }}
  .icon-card img {{ max-width: 100px; max-height: 100px; margin: 0 auto; display: block; }}
  .icon-card span {{ display: block; margin-top: 10px; font-size: 14px; color: #555; word-wrap: break-word; }}
  .controls label {{ font-size: 16px; }}
  .light-theme .container {{ background-color: #f4f4f9; color: #333; }}
  .dark-theme .container {{ background-color: #333; color: #fff; }}
</style>
</head>
<body class="{body_class}">
<header class="controls">
  <label><input type="radio" name="background" value="light"{light_checked}> {light_label}</label>
  <label><input type="radio" name="background" value="dark"{dark_checked}> {dark_label}</label>
</header>
<div class="container">
{cards}
</div>
<script>
  const radios = document.querySelectorAll('input[name="background"]');
  const body = document.body;
  radios.forEach((radio) => {{
    radio.addEventListener('change', (event) => {{
      if (event.target.value === 'dark') {{
        body.classList.remove('light-theme');
        body.classList.add('dark-theme');
      }} else {{
        body.classList.remove('dark-theme');
        body.classList.add('light-theme');
      }}
    }});
  }});
</script>
</body>
</html>
"""


def render_viewer(
    result: ScanResult,
    *,
    theme: Theme = Theme.DARK,
    columns: int = DEFAULT_COLUMNS,
    uri_for: UriFor | None = None,
    locale: str | None = None,
) -> str:
    """Render the viewer page for *result*.

    Parameters
    ----------
    result:
        Scan to display.  Cards appear in ``result.icons`` order.
    theme:
        Initial theme; sets the ``body`` class and the checked radio.
    columns:
        Grid column count.
    uri_for:
        Maps an icon to its ``<img src>``.  Defaults to :func:`file_uri`.
    locale:
        Catalog used for the page title and radio labels.

    Returns
    -------
    str
        A complete HTML document.
    """
    if columns < 1:
        raise ValueError(f"columns must be >= 1, got {columns}")
    theme = Theme(theme)
    to_uri = uri_for or file_uri
    cards = "\n".join(render_icon_card(icon, to_uri(icon)) for icon in result.icons)

    return _PAGE_TEMPLATE.format(
        lang=normalize_locale(locale),
        title=html_mod.escape(resolve_copy("viewer.title", locale)),
        columns=columns,
        body_class=theme.css_class,
        light_checked=" checked" if theme is Theme.LIGHT else "",
        dark_checked=" checked" if theme is Theme.DARK else "",
        light_label=html_mod.escape(resolve_copy("viewer.theme.light", locale)),
        dark_label=html_mod.escape(resolve_copy("viewer.theme.dark", locale)),
        cards=cards,
    )


_MESSAGE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="{lang}">
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
<p class="message">{message}</p>
</body>
</html>
"""


def render_message_page(message: str, *, locale: str | None = None) -> str:
    """Minimal page carrying a single user-facing message."""
    return _MESSAGE_TEMPLATE.format(
        lang=normalize_locale(locale),
        title=html_mod.escape(resolve_copy("viewer.title", locale)),
        message=html_mod.escape(message),
    )
