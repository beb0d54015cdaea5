"""
Module: generator.markup

Purpose:
    Assembles the README from rendered slices. Slices are emitted inline
    with no separators so the browser's flow layout puts them back
    together left to right, top to bottom.

Key Functions:
    - render_fragment(): HTML for one slice (anchor or picture element)
    - assemble_readme(): Concatenate fragments and append the footer
    - write_readme(): Atomically overwrite the README file

Used By:
    - generator.pipeline: Final stage of generation
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Iterable

from readme_slicer.core.models import CropOutput
from .config import DEFAULT_FOOTER, DEFAULT_IMAGE_BASE_URL

logger = logging.getLogger(__name__)


def image_url(filename: str, base_url: str = DEFAULT_IMAGE_BASE_URL) -> str:
    """Public URL of a slice."""
    return f"{base_url}{filename}"


def format_width(width: int, image_width: int) -> str:
    """
    Width as a percentage of the full image width.

    Whole percentages are written without a fractional part ("25%",
    not "25.0%"); others use the shortest round-trip float repr.
    """
    percent = width / image_width * 100
    if percent.is_integer():
        return f"{int(percent)}%"
    return f"{percent!r}%"


def render_fragment(
    output: CropOutput,
    image_width: int,
    *,
    base_url: str = DEFAULT_IMAGE_BASE_URL,
) -> str:
    """
    Render one slice.

    Linked slices become an anchor around the image. Fillers become a
    picture element whose light and dark sources are the same file.

    Args:
        output: Rendered slice
        image_width: Full source image width, for the percentage width
        base_url: Public URL prefix for slice files

    Returns:
        HTML fragment with no trailing whitespace
    """
    src = image_url(output.filename, base_url)
    img = f'<img src="{src}" height="{output.height}" width="{format_width(output.width, image_width)}"/>'

    if output.is_filler:
        return (
            "<picture>"
            f'<source media="(prefers-color-scheme: light)" srcset="{src}">'
            f'<source media="(prefers-color-scheme: dark)" srcset="{src}">'
            f"{img}"
            "</picture>"
        )
    return f'<a href="{output.href}">{img}</a>'


def assemble_readme(
    outputs: Iterable[CropOutput],
    image_width: int,
    *,
    base_url: str = DEFAULT_IMAGE_BASE_URL,
    footer: str = DEFAULT_FOOTER,
) -> str:
    """
    Build the README text.

    Args:
        outputs: Slices in planner order
        image_width: Full source image width
        base_url: Public URL prefix for slice files
        footer: Text appended after the slices

    Returns:
        README contents
    """
    fragments = [render_fragment(o, image_width, base_url=base_url) for o in outputs]
    logger.debug(f"Assembled {len(fragments)} fragments")
    return "".join(fragments) + footer


def write_readme(text: str, path: Path) -> Path:
    """
    Overwrite the README at path.

    Written to a temp file in the same directory then renamed, so readers
    never see a half-written README.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        newline="",
        suffix=".tmp",
        dir=path.parent,
        delete=False,
    ) as f:
        temp_path = Path(f.name)
        try:
            f.write(text)
        except BaseException:
            f.close()
            temp_path.unlink(missing_ok=True)
            raise

    try:
        temp_path.replace(path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
    return path
