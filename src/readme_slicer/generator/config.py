"""
Module: generator.config

Purpose:
    Configuration dataclass for a README generation run. Provides
    immutable settings for row spacing, public URLs and concurrency.

Key Classes:
    - GeneratorConfig: Main configuration for generation

Dependencies:
    - dataclasses: For frozen dataclass support

Used By:
    - generator.pipeline: Uses GeneratorConfig for run settings
    - cli: Builds GeneratorConfig from command-line flags
"""

from dataclasses import dataclass

# GitHub Pages is used to host the slices; it is more reliable than
# raw.githubusercontent.com URLs.
DEFAULT_IMAGE_BASE_URL = "https://leonsilicon.github.io/leonsilicon/generator/generated/"
DEFAULT_LATEST_CONTENT_URL = "https://www.tiktok.com/@leonsilicon/video/7350626104736025862"
LATEST_CONTENT_PLACEHOLDER = "${LATEST_CONTENT_URL}"
DEFAULT_FOOTER = "\n###### 👆 The above image is interactive! Try clicking on the tabs :)"

# Vertical gap between rows in the source image
DEFAULT_LINE_HEIGHT_PX = 6


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Configuration for the README generator.

    Attributes:
        line_height: Vertical gap in pixels between one row's bottom and
            the next row's top (default 6)
        image_base_url: Public URL prefix the slice filenames are appended to
        latest_content_url: Substituted for the placeholder in link hrefs
        placeholder: Token replaced in hrefs (default "${LATEST_CONTENT_URL}")
        footer: Text appended after the slices
        max_workers: Concurrent slice jobs (default 4)
        compress_level: PNG compression level, 0-9 (default 6)
    """
    line_height: int = DEFAULT_LINE_HEIGHT_PX
    image_base_url: str = DEFAULT_IMAGE_BASE_URL
    latest_content_url: str = DEFAULT_LATEST_CONTENT_URL
    placeholder: str = LATEST_CONTENT_PLACEHOLDER
    footer: str = DEFAULT_FOOTER
    max_workers: int = 4
    compress_level: int = 6

    def __post_init__(self) -> None:
        if self.line_height < 0:
            raise ValueError(f"line_height must be >= 0: {self.line_height}")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1: {self.max_workers}")
        if not 0 <= self.compress_level <= 9:
            raise ValueError(f"compress_level must be 0-9: {self.compress_level}")
