"""JSON-schema contracts for icon_viewer artifacts."""

from icon_viewer.contracts.load import load_schema, validate_file, validate_instance

__all__ = ["load_schema", "validate_file", "validate_instance"]
