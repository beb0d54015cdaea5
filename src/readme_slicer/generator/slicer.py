"""
Module: generator.slicer

Purpose:
    Cuts planned regions out of the source image, encodes them as PNG and
    names each slice after the sha512 digest of its encoded bytes.

Key Classes:
    - SourceImage: Read-only handle on the loaded source image

Key Functions:
    - slice_region(): Crop + encode + hash one region
    - write_crop(): Atomically write a slice into the output directory

Dependencies:
    - PIL: Image loading, cropping and PNG encoding
    - hashlib (std): Content hash

Used By:
    - generator.write_queue: Runs slice_region/write_crop per region
    - generator.pipeline: Opens the SourceImage
"""

from __future__ import annotations

import hashlib
import io
import logging
import tempfile
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from readme_slicer.core.models import CropBounds, CropOutput, CropRegion

logger = logging.getLogger(__name__)

# PNG compression used when none is configured (zlib level)
DEFAULT_COMPRESS_LEVEL = 6


class ImageDimensionsError(RuntimeError):
    """Raised when the source image size cannot be determined."""


@dataclass(frozen=True)
class SourceImage:
    """
    The banner source image, loaded once and shared by reference.

    The pixel data is never modified; every extraction returns an
    independent copy, so concurrent slice jobs do not race.

    Attributes:
        image: Fully loaded PIL image
        path: Where the image was read from (None for in-memory images)
    """
    image: Image.Image
    path: Path | None = None

    @classmethod
    def open(cls, path: Path) -> SourceImage:
        """
        Load the source image from disk.

        Args:
            path: Image file path

        Returns:
            SourceImage with pixel data loaded

        Raises:
            FileNotFoundError: If path does not exist
            ImageDimensionsError: If the file is not a readable image or
                has no usable width/height
        """
        path = Path(path)
        try:
            with Image.open(path) as opened:
                opened.load()
                image = opened.copy()
        except UnidentifiedImageError as e:
            raise ImageDimensionsError(f"Could not get image dimensions: {path}") from e

        source = cls.from_image(image, path=path)
        logger.debug(f"Opened source image {path} ({source.width}x{source.height}, {image.mode})")
        return source

    @classmethod
    def from_image(cls, image: Image.Image, *, path: Path | None = None) -> SourceImage:
        """Wrap an in-memory image, checking it has a usable size."""
        width, height = image.size
        if not width or not height:
            raise ImageDimensionsError(
                f"Could not get image dimensions: {path or '<memory>'} reports {width}x{height}"
            )
        return cls(image=image, path=path)

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def extract(self, bounds: CropBounds) -> Image.Image:
        """
        Crop a region from the source image.

        Args:
            bounds: Region to crop

        Returns:
            Cropped image (new copy, not a view)

        Raises:
            ValueError: If bounds fall outside the image
        """
        if not bounds.fits_within(self.width, self.height):
            raise ValueError(
                f"Crop {bounds!r} exceeds image size {self.width}x{self.height}"
            )
        return self.image.crop(bounds.as_box())


def encode_png(image: Image.Image, compress_level: int = DEFAULT_COMPRESS_LEVEL) -> bytes:
    """Encode an image as PNG bytes."""
    buffer = io.BytesIO()
    image.save(buffer, format="PNG", compress_level=compress_level)
    return buffer.getvalue()


def content_hash(data: bytes) -> str:
    """sha512 hex digest used as a slice's file stem."""
    return hashlib.sha512(data).hexdigest()


def slice_region(
    source: SourceImage,
    region: CropRegion,
    *,
    compress_level: int = DEFAULT_COMPRESS_LEVEL,
) -> CropOutput:
    """
    Produce the rendered slice for one region.

    The filename depends only on the encoded pixels, never on the href.

    Args:
        source: Shared source image
        region: Region to render
        compress_level: PNG compression (0=none, 9=smallest)

    Returns:
        CropOutput carrying the PNG bytes and the region's href

    Raises:
        ValueError: If the region falls outside the image
    """
    crop = source.extract(region.bounds)
    png_bytes = encode_png(crop, compress_level)
    return CropOutput(
        png_bytes=png_bytes,
        content_hash=content_hash(png_bytes),
        width=region.bounds.width,
        height=region.bounds.height,
        href=region.href,
    )


def write_crop(output: CropOutput, directory: Path) -> Path:
    """
    Write a slice into directory under its content-addressed name.

    The write is atomic (temp file then rename), so a slice file is either
    complete or absent.

    Returns:
        Path of the written file
    """
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / output.filename

    with tempfile.NamedTemporaryFile(
        mode="wb",
        suffix=".png.tmp",
        dir=directory,
        delete=False,
    ) as f:
        temp_path = Path(f.name)
        try:
            f.write(output.png_bytes)
        except BaseException:
            f.close()
            temp_path.unlink(missing_ok=True)
            raise

    try:
        temp_path.replace(path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
    logger.debug(f"Wrote {output.filename[:16]}... ({output.width}x{output.height})")
    return path
