"""
Core Models Package

Immutable, validated data models that flow through the generator.

| Model | Produced by | Consumed by |
|-------|-------------|-------------|
| `LayoutConfig` / `Row` / `Link` | `core.utils.serialization` | `generator.planner` |
| `CropRegion` | `generator.planner` | `generator.slicer` |
| `CropOutput` | `generator.slicer` | `generator.markup` |
"""

from .bounds import CropBounds
from .layout import Link, Row, LayoutConfig
from .crops import CropRegion, CropOutput

__all__ = [
    "CropBounds",
    "Link",
    "Row",
    "LayoutConfig",
    "CropRegion",
    "CropOutput",
]
