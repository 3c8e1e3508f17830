"""Tests for contracts.load — icon_scan.schema.json validation."""

from __future__ import annotations

import json
from pathlib import Path

import jsonschema
import pytest

from icon_viewer.contracts.load import load_schema, validate_file, validate_instance


def _doc(**overrides):
    doc = {
        "schema_version": "icon_scan_v1",
        "run": {
            "root": "/icons",
            "created_at": "2000-01-01T00:00:00+00:00",
            "tool_version": "0.1.0",
            "extensions": [".png", ".svg"],
        },
        "counts": {"total": 1, "by_extension": {".png": 1}},
        "icons": [
            {
                "path": "/icons/a.png",
                "relative_path": "a.png",
                "extension": ".png",
                "size_bytes": 12,
            }
        ],
    }
    doc.update(overrides)
    return doc


def test_schema_loads():
    schema = load_schema("icon_scan.schema.json")
    assert schema["properties"]["schema_version"]["const"] == "icon_scan_v1"


def test_valid_document():
    validate_instance(_doc(), "icon_scan.schema.json")


def test_wrong_version_rejected():
    with pytest.raises(jsonschema.ValidationError):
        validate_instance(_doc(schema_version="icon_scan_v0"), "icon_scan.schema.json")


def test_negative_size_rejected():
    doc = _doc()
    doc["icons"][0]["size_bytes"] = -1
    with pytest.raises(jsonschema.ValidationError):
        validate_instance(doc, "icon_scan.schema.json")


def test_uppercase_extension_rejected():
    doc = _doc()
    doc["icons"][0]["extension"] = ".PNG"
    with pytest.raises(jsonschema.ValidationError):
        validate_instance(doc, "icon_scan.schema.json")


def test_underscore_extension_accepted():
    doc = _doc()
    doc["run"]["extensions"] = [".jpg_large"]
    doc["counts"]["by_extension"] = {".jpg_large": 1}
    doc["icons"][0]["extension"] = ".jpg_large"
    validate_instance(doc, "icon_scan.schema.json")


def test_separator_in_extension_rejected():
    doc = _doc()
    doc["icons"][0]["extension"] = ".a/b"
    with pytest.raises(jsonschema.ValidationError):
        validate_instance(doc, "icon_scan.schema.json")


def test_unknown_schema():
    with pytest.raises(FileNotFoundError):
        load_schema("nope.schema.json")


def test_validate_file_checks_version_first(tmp_path: Path):
    p = tmp_path / "x.json"
    p.write_text(json.dumps({"schema_version": "other"}), encoding="utf-8")
    with pytest.raises(jsonschema.ValidationError, match="expected schema_version"):
        validate_file(p, "icon_scan.schema.json")
