"""
Utils Package

Serialization and utility functions.
"""

from .serialization import (
    deserialize_layout,
    load_layout_json,
)

__all__ = [
    "deserialize_layout",
    "load_layout_json",
]
