"""
Command-line interface for the README slicer.

Usage:
    readme-slicer generate [--root DIR] [--image PATH] [--layout PATH] ...
    readme-slicer plan [--root DIR] [--image PATH] [--layout PATH]

Paths default to the generator project layout, relative to --root:
    data/image.png, data/image-config.json, generated/, ../readme.markdown
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from readme_slicer import __version__
from readme_slicer.core.schemas import ValidationError
from readme_slicer.core.utils import load_layout_json
from readme_slicer.generator import (
    GeneratorConfig,
    ImageDimensionsError,
    LayoutError,
    OutputLockedError,
    SourceImage,
    generate_readme,
    plan_crops,
)
from readme_slicer.generator.config import (
    DEFAULT_IMAGE_BASE_URL,
    DEFAULT_LATEST_CONTENT_URL,
    DEFAULT_LINE_HEIGHT_PX,
)

logger = logging.getLogger("readme_slicer")

DEFAULT_IMAGE = Path("data") / "image.png"
DEFAULT_LAYOUT = Path("data") / "image-config.json"
DEFAULT_OUTPUT_DIR = Path("generated")
DEFAULT_README = Path("..") / "readme.markdown"


def _add_input_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--root", type=Path, default=Path("."), help="Generator project directory")
    parser.add_argument("--image", type=Path, help=f"Source image (default: <root>/{DEFAULT_IMAGE})")
    parser.add_argument("--layout", type=Path, help=f"Layout JSON (default: <root>/{DEFAULT_LAYOUT})")
    parser.add_argument("--line-height", type=int, default=DEFAULT_LINE_HEIGHT_PX,
                        help="Gap in pixels between rows")
    parser.add_argument("--latest-content-url", default=DEFAULT_LATEST_CONTENT_URL,
                        help="URL substituted for ${LATEST_CONTENT_URL} in hrefs")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readme-slicer",
        description="Slice a banner image into a clickable README",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Write slices and README")
    _add_input_args(gen)
    gen.add_argument("--output-dir", type=Path,
                     help=f"Slice directory, cleared each run (default: <root>/{DEFAULT_OUTPUT_DIR})")
    gen.add_argument("--readme", type=Path,
                     help=f"README to overwrite (default: <root>/{DEFAULT_README})")
    gen.add_argument("--base-url", default=DEFAULT_IMAGE_BASE_URL, help="Public URL prefix for slices")
    gen.add_argument("--workers", type=int, default=4, help="Concurrent slice jobs")

    plan = sub.add_parser("plan", help="Print planned crop regions as JSON without writing files")
    _add_input_args(plan)

    return parser


def _resolve(root: Path, value: Optional[Path], default: Path) -> Path:
    return value if value is not None else root / default


def cmd_generate(args: argparse.Namespace) -> int:
    config = GeneratorConfig(
        line_height=args.line_height,
        image_base_url=args.base_url,
        latest_content_url=args.latest_content_url,
        max_workers=args.workers,
    )
    layout = load_layout_json(_resolve(args.root, args.layout, DEFAULT_LAYOUT))
    result = generate_readme(
        _resolve(args.root, args.image, DEFAULT_IMAGE),
        layout,
        _resolve(args.root, args.output_dir, DEFAULT_OUTPUT_DIR),
        _resolve(args.root, args.readme, DEFAULT_README),
        config=config,
    )
    print(f"crops={result.crop_count} files={result.unique_files} readme={result.readme_path}")
    return 0


def cmd_plan(args: argparse.Namespace) -> int:
    layout = load_layout_json(_resolve(args.root, args.layout, DEFAULT_LAYOUT))
    source = SourceImage.open(_resolve(args.root, args.image, DEFAULT_IMAGE))
    regions = plan_crops(
        layout,
        source.width,
        image_height=source.height,
        line_height=args.line_height,
        latest_content_url=args.latest_content_url,
    )
    json.dump([r.to_dict() for r in regions], sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    handlers = {"generate": cmd_generate, "plan": cmd_plan}
    try:
        return handlers[args.command](args)
    except (ValidationError, LayoutError, ImageDimensionsError, OutputLockedError, OSError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    except ValueError as e:
        # Bad flag values or out-of-bounds regions
        logger.error(f"{args.command} failed: invalid value: {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
