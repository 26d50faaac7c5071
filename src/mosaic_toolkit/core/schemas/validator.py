"""
Schema Validation Utilities

Validates persisted layout documents before they are turned back into
node trees.

Two levels:
- Basic checks (always): version, page list, node shape
- Full JSON Schema validation (strict): every field of every node,
  via jsonschema against ``layout_document.schema.json``
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Schema version written by document_to_dict()
DOCUMENT_SCHEMA_VERSION = 1


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_document(data: Any, *, strict: bool = True) -> None:
    """
    Validate a serialized layout document.

    Args:
        data: Dictionary from JSON
        strict: Also run full JSON Schema validation

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Document must be an object, got {type(data).__name__}")

    missing = [f for f in ("version", "pages") if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing],
        )

    version = data["version"]
    if version != DOCUMENT_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported document version: {version} (expected {DOCUMENT_SCHEMA_VERSION})",
            path="version",
        )

    pages = data["pages"]
    if not isinstance(pages, list) or not pages:
        raise ValidationError("Document must have at least one page", path="pages")

    for index, page in enumerate(pages):
        validate_node(page, f"pages.{index}")

    if strict:
        schema = _load_schema("layout_document")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message],
            )


def validate_node(data: Any, path: str = "") -> None:
    """Basic recursive shape check of one serialized node."""
    if not isinstance(data, dict):
        raise ValidationError(f"Node must be an object at {path}", path=path)
    if not data.get("id"):
        raise ValidationError(f"Node without id at {path}", path=f"{path}.id")

    if data.get("splitState") == "split":
        children = data.get("children")
        if not isinstance(children, list) or len(children) != 2:
            raise ValidationError(
                f"Split node {data['id']!r} must have exactly two children",
                path=f"{path}.children",
            )
        if data.get("orientation") not in ("vertical", "horizontal"):
            raise ValidationError(
                f"Split node {data['id']!r} has invalid orientation: {data.get('orientation')!r}",
                path=f"{path}.orientation",
            )
        for index, child in enumerate(children):
            validate_node(child, f"{path}.children.{index}")
