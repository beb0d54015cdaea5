"""
Module: bounds

Purpose:
    Provides the CropBounds dataclass - a pixel rectangle within the source
    image that becomes one slice of the generated banner.

Key Functions:
    - CropBounds.as_box(): (left, top, right, bottom) tuple for PIL.Image.crop
    - CropBounds.fits_within(width, height): Check the rectangle is inside an image
    - CropBounds.overlaps(other): Check two rectangles share a pixel
    - CropBounds.to_dict(): Serialize for JSON

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.crops.CropRegion
    - generator.planner
    - generator.slicer
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CropBounds:
    """
    Image region specification in pixels.

    Coordinates are relative to the source image origin (0, 0).
    The region covers [left, left + width) x [top, top + height):
    left/top are inclusive, right/bottom are exclusive.

    Attributes:
        left: X-coordinate of left edge (inclusive)
        top: Y-coordinate of top edge (inclusive)
        width: Width in pixels
        height: Height in pixels

    Invariants:
        - left >= 0, top >= 0
        - width > 0, height > 0

    Example:
        >>> bounds = CropBounds(left=5, top=0, width=10, height=10)
        >>> bounds.right
        15
        >>> bounds.as_box()
        (5, 0, 15, 10)
    """

    left: int
    top: int
    width: int
    height: int

    def __post_init__(self) -> None:
        """Validate bounds on construction."""
        if self.left < 0:
            raise ValueError(f"left must be >= 0: {self.left}")
        if self.top < 0:
            raise ValueError(f"top must be >= 0: {self.top}")
        if self.width <= 0:
            raise ValueError(f"width must be > 0: {self.width}")
        if self.height <= 0:
            raise ValueError(f"height must be > 0: {self.height}")

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def right(self) -> int:
        """X-coordinate of the right edge (exclusive)."""
        return self.left + self.width

    @property
    def bottom(self) -> int:
        """Y-coordinate of the bottom edge (exclusive)."""
        return self.top + self.height

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def fits_within(self, width: int, height: int) -> bool:
        """
        Check if this region lies entirely inside an image of the given size.

        Args:
            width: Image width in pixels
            height: Image height in pixels

        Returns:
            True if right <= width and bottom <= height
        """
        return self.right <= width and self.bottom <= height

    def overlaps(self, other: CropBounds) -> bool:
        """
        Check if this region shares at least one pixel with another.

        Adjacent regions (one.right == other.left) do NOT overlap.
        """
        return not (
            self.right <= other.left
            or other.right <= self.left
            or self.bottom <= other.top
            or other.bottom <= self.top
        )

    def as_box(self) -> tuple[int, int, int, int]:
        """
        Get as (left, top, right, bottom) tuple for PIL.

        Returns:
            Tuple suitable for PIL.Image.crop
        """
        return (self.left, self.top, self.right, self.bottom)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "left": self.left,
            "top": self.top,
            "width": self.width,
            "height": self.height,
        }

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"CropBounds({self.left}, {self.top}, {self.width}x{self.height})"
