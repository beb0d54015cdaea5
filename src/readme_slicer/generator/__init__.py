"""
Module: generator

Purpose:
    Builds the interactive README banner: plans crop regions from the
    layout, slices the source image into content-addressed PNGs and
    assembles the linked markup.

Key Functions:
    - generate_readme(): Main entry point for generation

Key Classes:
    - GeneratorConfig: Configuration for generation settings
    - GenerationResult: Container for generation output

Dependencies:
    - PIL: Image cropping and PNG encoding
    - portalocker: Output directory locking
    - readme_slicer.core.models: Layout and crop models

Used By:
    - readme_slicer.cli: Command-line interface
"""

from .config import GeneratorConfig
from .file_locking import OutputLockedError
from .pipeline import generate_readme, GenerationResult
from .planner import plan_crops, LayoutError
from .slicer import ImageDimensionsError, SourceImage

__all__ = [
    "generate_readme",
    "GeneratorConfig",
    "GenerationResult",
    "ImageDimensionsError",
    "LayoutError",
    "OutputLockedError",
    "plan_crops",
    "SourceImage",
]
