"""
Module: generator.planner

Purpose:
    Turns the declarative layout into an ordered list of crop regions.
    Each row is tiled left to right across the full image width: linked
    regions come from the layout, filler regions are synthesized for the
    gaps between and after them.

Key Functions:
    - plan_crops(): Plan all crops for a layout

Dependencies:
    - readme_slicer.core.models: CropBounds, CropRegion, LayoutConfig

Used By:
    - generator.pipeline: First stage of generation
"""

from __future__ import annotations

import logging
from typing import List, Optional

from readme_slicer.core.models import CropBounds, CropRegion, LayoutConfig, Row
from .config import (
    DEFAULT_LATEST_CONTENT_URL,
    DEFAULT_LINE_HEIGHT_PX,
    LATEST_CONTENT_PLACEHOLDER,
)

logger = logging.getLogger(__name__)


class LayoutError(ValueError):
    """Raised when a layout cannot be tiled over the source image."""


def plan_crops(
    layout: LayoutConfig,
    image_width: int,
    *,
    image_height: Optional[int] = None,
    line_height: int = DEFAULT_LINE_HEIGHT_PX,
    latest_content_url: str = DEFAULT_LATEST_CONTENT_URL,
    placeholder: str = LATEST_CONTENT_PLACEHOLDER,
) -> List[CropRegion]:
    """
    Plan crop regions for every row of the layout.

    Rows are stacked top to bottom: a row's band is [y, row.bottom_y) where
    y starts at 0 and advances to row.bottom_y + line_height after each row.

    Args:
        layout: Validated layout
        image_width: Source image width in pixels
        image_height: Source image height; when given, rows reaching past
            it are rejected up front
        line_height: Gap in pixels between consecutive rows
        latest_content_url: Replacement for the placeholder in hrefs
        placeholder: Token substituted in hrefs

    Returns:
        Crop regions in row order, left to right within each row

    Raises:
        LayoutError: If a row band is empty, links overlap, or a link
            extends past the image

    Example:
        >>> layout = LayoutConfig.from_dict(
        ...     {"rows": [{"bottomY": 10, "links": [{"leftX": 5, "rightX": 15, "href": "http://x"}]}]}
        ... )
        >>> [(r.bounds.left, r.bounds.right, r.href) for r in plan_crops(layout, 20)]
        [(0, 5, None), (5, 15, 'http://x'), (15, 20, None)]
    """
    if image_width <= 0:
        raise LayoutError(f"image_width must be > 0: {image_width}")

    crops: List[CropRegion] = []
    current_y = 0

    for row_index, row in enumerate(layout.rows):
        if row.bottom_y <= current_y:
            raise LayoutError(
                f"Row {row_index} has an empty band: bottomY {row.bottom_y} <= top {current_y}"
            )
        if image_height is not None and row.bottom_y > image_height:
            raise LayoutError(
                f"Row {row_index} bottomY {row.bottom_y} exceeds image height {image_height}"
            )

        row_crops = _plan_row(
            row,
            row_index=row_index,
            top=current_y,
            image_width=image_width,
            latest_content_url=latest_content_url,
            placeholder=placeholder,
        )
        logger.debug(
            f"Row {row_index}: band [{current_y}, {row.bottom_y}), {len(row_crops)} crops"
        )
        crops.extend(row_crops)

        current_y = row.bottom_y + line_height

    logger.debug(f"Planned {len(crops)} crops across {len(layout.rows)} rows")
    return crops


def _plan_row(
    row: Row,
    *,
    row_index: int,
    top: int,
    image_width: int,
    latest_content_url: str,
    placeholder: str,
) -> List[CropRegion]:
    """Tile one row band [0, image_width) x [top, row.bottom_y)."""
    height = row.bottom_y - top
    crops: List[CropRegion] = []
    current_x = 0

    for link_index, link in enumerate(row.links):
        if link.left_x < current_x:
            raise LayoutError(
                f"Row {row_index} link {link_index} overlaps previous region: "
                f"leftX {link.left_x} < {current_x}"
            )
        if link.right_x > image_width:
            raise LayoutError(
                f"Row {row_index} link {link_index} rightX {link.right_x} "
                f"exceeds image width {image_width}"
            )

        # Gap before this link becomes a plain image
        if current_x < link.left_x:
            crops.append(
                CropRegion(
                    bounds=CropBounds(
                        left=current_x, top=top, width=link.left_x - current_x, height=height
                    ),
                    href=None,
                )
            )

        if link.width == 0:
            logger.warning(
                f"Skipping zero-width link in row {row_index} at x={link.left_x}: {link.href}"
            )
        else:
            crops.append(
                CropRegion(
                    bounds=CropBounds(left=link.left_x, top=top, width=link.width, height=height),
                    href=link.resolve_href(placeholder, latest_content_url),
                )
            )

        current_x = link.right_x

    if current_x < image_width:
        crops.append(
            CropRegion(
                bounds=CropBounds(
                    left=current_x, top=top, width=image_width - current_x, height=height
                ),
                href=None,
            )
        )

    return crops
