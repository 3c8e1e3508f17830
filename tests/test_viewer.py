"""Tests for reports.viewer and reports.exporters."""

from __future__ import annotations

import json
import re
from pathlib import Path

import pytest

from icon_viewer.model import Theme
from icon_viewer.model.icon_file import IconFile
from icon_viewer.model.scan_result import ScanResult
from icon_viewer.reports.exporters import export_html, export_json, export_result
from icon_viewer.reports.viewer import (
    file_uri,
    render_icon_card,
    render_message_page,
    render_viewer,
)


# ── helpers ──────────────────────────────────────────────────────────


def _make_result(root: Path, names: list[str]) -> ScanResult:
    icons = [IconFile.from_path(root / n, root, size_bytes=10) for n in names]
    return ScanResult(
        root=root,
        icons=icons,
        extensions=(".png", ".svg"),
        created_at="2000-01-01T00:00:00+00:00",
    )


@pytest.fixture()
def result(tmp_path: Path) -> ScanResult:
    return _make_result(tmp_path, ["a.png", "sub/b.svg", "sub/deep/c.png"])


# ════════════════════════════════════════════════════════════════════
# Cards
# ════════════════════════════════════════════════════════════════════


class TestIconCard:
    def test_card_has_image_and_caption(self, tmp_path: Path):
        icon = IconFile.from_path(tmp_path / "sub" / "b.svg", tmp_path)
        card = render_icon_card(icon, "file:///x/sub/b.svg")
        assert '<img src="file:///x/sub/b.svg" alt="sub/b.svg"' in card
        assert "<span>sub/b.svg</span>" in card
        assert 'class="icon-card"' in card

    def test_card_escapes_markup(self, tmp_path: Path):
        icon = IconFile.from_path(tmp_path / 'a"<b>&.png', tmp_path)
        card = render_icon_card(icon, 'file:///a"b.png')
        assert "<b>" not in card
        assert "&lt;b&gt;&amp;.png" in card
        assert 'src="file:///a&quot;b.png"' in card

    def test_file_uri_is_absolute(self, tmp_path: Path):
        icon = IconFile.from_path(tmp_path / "a b.png", tmp_path)
        uri = file_uri(icon)
        assert uri.startswith("file://")
        assert uri.endswith("/a%20b.png")


# ════════════════════════════════════════════════════════════════════
# Page
# ════════════════════════════════════════════════════════════════════


class TestRenderViewer:
    def test_document_shape(self, result: ScanResult):
        page = render_viewer(result)
        assert page.startswith("<!DOCTYPE html>")
        assert "<title>Icons viewer</title>" in page
        assert page.rstrip().endswith("</html>")

    def test_one_card_per_icon_in_order(self, result: ScanResult):
        page = render_viewer(result)
        assert page.count('class="icon-card"') == 3
        captions = re.findall(r"<span>([^<]*)</span>", page)
        assert captions == ["a.png", "sub/b.svg", "sub/deep/c.png"]

    def test_default_uris_are_file_uris(self, result: ScanResult):
        page = render_viewer(result)
        for icon in result.icons:
            assert f'src="{icon.path.resolve().as_uri()}"' in page

    def test_custom_uri_for(self, result: ScanResult):
        page = render_viewer(result, uri_for=lambda i: f"/img/{i.relative_path}")
        assert 'src="/img/sub/deep/c.png"' in page
        assert "file://" not in page

    def test_default_theme_is_dark(self, result: ScanResult):
        page = render_viewer(result)
        assert '<body class="dark-theme">' in page
        assert 'value="dark" checked' in page
        assert 'value="light" checked' not in page

    def test_light_theme(self, result: ScanResult):
        page = render_viewer(result, theme=Theme.LIGHT)
        assert '<body class="light-theme">' in page
        assert 'value="light" checked' in page
        assert 'value="dark" checked' not in page

    def test_theme_accepts_string(self, result: ScanResult):
        assert '<body class="light-theme">' in render_viewer(result, theme="light")

    def test_two_radios_share_a_group(self, result: ScanResult):
        page = render_viewer(result)
        radios = re.findall(r'<input type="radio" name="background" value="(\w+)"', page)
        assert radios == ["light", "dark"]

    def test_toggle_script_swaps_classes(self, result: ScanResult):
        """Each branch removes the other class before adding its own.

        classList.add is a set insert, so re-selecting the same radio leaves
        the body unchanged.
        """
        page = render_viewer(result)
        script = page[page.index("<script>"):page.index("</script>")]
        assert "addEventListener('change'" in script
        dark = script.index("body.classList.remove('light-theme');")
        assert script.index("body.classList.add('dark-theme');") > dark
        light = script.index("body.classList.remove('dark-theme');")
        assert script.index("body.classList.add('light-theme');") > light
        assert "toggle(" not in script

    def test_columns(self, result: ScanResult):
        assert "repeat(8, 1fr)" in render_viewer(result)
        assert "repeat(3, 1fr)" in render_viewer(result, columns=3)

    def test_invalid_columns(self, result: ScanResult):
        with pytest.raises(ValueError, match="columns"):
            render_viewer(result, columns=0)

    def test_russian_labels(self, result: ScanResult):
        page = render_viewer(result, locale="ru")
        assert '<html lang="ru">' in page
        assert "Светлый" in page
        assert "Темный" in page

    def test_unknown_locale_falls_back_to_english(self, result: ScanResult):
        page = render_viewer(result, locale="xx")
        assert '<html lang="en">' in page
        assert "> Light</label>" in page

    def test_empty_result_renders_empty_grid(self, tmp_path: Path):
        page = render_viewer(_make_result(tmp_path, []))
        assert 'class="icon-card"' not in page


def test_message_page_escapes(tmp_path: Path):
    page = render_message_page("<no icons>", locale="en")
    assert "&lt;no icons&gt;" in page


# ════════════════════════════════════════════════════════════════════
# Exporters
# ════════════════════════════════════════════════════════════════════


class TestExporters:
    def test_export_json(self, result: ScanResult):
        doc = json.loads(export_json(result))
        assert doc["schema_version"] == "icon_scan_v1"
        assert doc["counts"] == {"total": 3, "by_extension": {".png": 2, ".svg": 1}}
        assert [i["relative_path"] for i in doc["icons"]] == [
            "a.png",
            "sub/b.svg",
            "sub/deep/c.png",
        ]

    def test_export_html_matches_viewer(self, result: ScanResult):
        assert export_html(result, theme=Theme.LIGHT) == render_viewer(
            result, theme=Theme.LIGHT
        )

    def test_dispatch(self, result: ScanResult):
        assert export_result(result, "json").startswith("{")
        assert export_result(result, "html").startswith("<!DOCTYPE html>")

    def test_unknown_format(self, result: ScanResult):
        with pytest.raises(ValueError, match="Unknown export format"):
            export_result(result, "pdf")
