"""
README Slicer Core Package

Shared data models, schema validation and serialization for the generator.

All models are frozen dataclasses so they can be handed to worker threads
during slicing without copying or locking.
"""

from .models import CropBounds, Link, Row, LayoutConfig, CropRegion, CropOutput

__all__ = [
    "CropBounds",
    "Link",
    "Row",
    "LayoutConfig",
    "CropRegion",
    "CropOutput",
]
