"""
Module: crops

Purpose:
    Planned and rendered crops. A CropRegion is what the planner decides to
    cut; a CropOutput is what the slicer produced for it.

Key Classes:
    - CropRegion: CropBounds plus optional href (None = filler)
    - CropOutput: Encoded PNG bytes, content hash and inherited href

Dependencies:
    - dataclasses (std)
    - core.models.bounds: CropBounds

Used By:
    - generator.planner: Produces CropRegion
    - generator.slicer: Produces CropOutput
    - generator.markup: Renders CropOutput
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .bounds import CropBounds


@dataclass(frozen=True, slots=True)
class CropRegion:
    """
    A rectangle of the source image plus an optional hyperlink target.

    Attributes:
        bounds: Pixel rectangle to cut
        href: Resolved link target, or None for a non-interactive filler
    """

    bounds: CropBounds
    href: Optional[str] = None

    @property
    def is_filler(self) -> bool:
        return self.href is None

    def to_dict(self) -> dict:
        return {"bounds": self.bounds.to_dict(), "href": self.href}


@dataclass(frozen=True, slots=True)
class CropOutput:
    """
    Rendered artifact for one CropRegion.

    Attributes:
        png_bytes: Encoded PNG data
        content_hash: Hex digest of png_bytes, used as the file stem
        width: Pixel width of the crop
        height: Pixel height of the crop
        href: Inherited from the CropRegion
    """

    png_bytes: bytes = field(repr=False)
    content_hash: str
    width: int
    height: int
    href: Optional[str] = None

    @property
    def filename(self) -> str:
        """Content-addressed filename, e.g. '<hash>.png'."""
        return f"{self.content_hash}.png"

    @property
    def is_filler(self) -> bool:
        return self.href is None
