"""
Schema Validation Utilities

Validates layout JSON before it is turned into models.

The layout file is checked once at load time:
- JSON Schema (`layout.schema.json`) for shape and primitive types
- Explicit ordering checks that JSON Schema cannot express
  (links sorted and non-overlapping, rows stacked top to bottom)

Any violation is a fatal configuration error.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


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


def validate_layout(data: Any) -> None:
    """
    Validate raw layout data against the layout schema.

    Args:
        data: Parsed layout JSON

    Raises:
        ValidationError: If data is invalid
    """
    schema = _load_schema("layout")
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        path = ".".join(str(p) for p in e.absolute_path)
        raise ValidationError(
            f"Schema validation failed at '{path or '<root>'}': {e.message}",
            path=path,
            errors=[e.message],
        ) from e

    previous_bottom = 0
    for row_index, row in enumerate(data["rows"]):
        row_path = f"rows.{row_index}"
        if row["bottomY"] <= previous_bottom:
            raise ValidationError(
                f"Rows must be stacked top to bottom: bottomY {row['bottomY']} "
                f"<= previous bottomY {previous_bottom}",
                path=f"{row_path}.bottomY",
            )
        previous_bottom = row["bottomY"]
        _validate_links(row["links"], row_path)


def _validate_links(links: list[dict[str, Any]], row_path: str) -> None:
    """Links must be well-formed and sorted left to right without overlap."""
    cursor = 0
    for link_index, link in enumerate(links):
        link_path = f"{row_path}.links.{link_index}"
        if link["rightX"] < link["leftX"]:
            raise ValidationError(
                f"rightX {link['rightX']} < leftX {link['leftX']}",
                path=link_path,
            )
        if link["leftX"] < cursor:
            raise ValidationError(
                f"Link overlaps previous link: leftX {link['leftX']} < {cursor}",
                path=link_path,
            )
        cursor = link["rightX"]
