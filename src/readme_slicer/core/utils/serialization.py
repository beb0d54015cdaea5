"""
Serialization Utilities

Load the banner layout file.

- `deserialize_layout` converts a parsed dict into models
- `load_layout_json` reads the file on disk
- Raw data is validated against the layout schema before deserialization
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..models.layout import LayoutConfig
from ..schemas.validator import validate_layout, ValidationError

logger = logging.getLogger(__name__)


def deserialize_layout(data: dict[str, Any], *, validate: bool = True) -> LayoutConfig:
    """
    Deserialize a LayoutConfig from a dictionary.

    Args:
        data: Parsed layout JSON
        validate: Whether to validate against the schema first

    Returns:
        LayoutConfig instance

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_layout(data)
    try:
        return LayoutConfig.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError(f"Invalid layout data: {e}") from e


def load_layout_json(path: Path) -> LayoutConfig:
    """
    Load and validate a layout file.

    Args:
        path: Path to the layout JSON file

    Returns:
        LayoutConfig instance

    Raises:
        FileNotFoundError: If the file does not exist
        ValidationError: If the file is not valid JSON or fails validation
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Layout file is not valid JSON: {path}: {e}") from e

    layout = deserialize_layout(data)
    logger.debug(
        f"Loaded layout from {path}: {len(layout.rows)} rows, {layout.link_count} links"
    )
    return layout
