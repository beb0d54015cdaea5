"""
Module: generator.pipeline

Purpose:
    Main orchestrator for README generation. Coordinates crop planning,
    concurrent slicing and markup assembly into a single all-or-nothing
    run.

Key Functions:
    - generate_readme(): Main entry point for generation

Key Classes:
    - GenerationResult: Container for generation output

Dependencies:
    - PIL (via generator.slicer): Image access
    - portalocker (via generator.file_locking): Output directory ownership

Used By:
    - readme_slicer.cli: Command-line generation
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from readme_slicer.core.models import LayoutConfig
from .config import GeneratorConfig
from .file_locking import output_dir_lock
from .markup import assemble_readme, write_readme
from .planner import plan_crops
from .slicer import SourceImage
from .timing import TimingLog, timed_phase
from .write_queue import SliceQueue

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """
    Result of a generation run.

    Attributes:
        crop_count: Number of slices produced (duplicates included).
        filenames: Slice filenames in planner order.
        readme_path: Where the README was written.
        output_dir: Directory holding the slices.
        readme: README contents.
        timings: Seconds spent per phase.
    """
    crop_count: int
    filenames: List[str]
    readme_path: Path
    output_dir: Path
    readme: str = field(repr=False, default="")
    timings: Dict[str, float] = field(default_factory=dict)

    @property
    def unique_files(self) -> int:
        """Number of distinct slice files (identical slices share a file)."""
        return len(set(self.filenames))


def prepare_output_dir(output_dir: Path) -> None:
    """Remove output_dir and everything in it, then recreate it empty."""
    if output_dir.exists():
        shutil.rmtree(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)


def generate_readme(
    image_path: Path,
    layout: LayoutConfig,
    output_dir: Path,
    readme_path: Path,
    *,
    config: Optional[GeneratorConfig] = None,
) -> GenerationResult:
    """
    Generate slices and README for a banner image.

    Pipeline:
    1. Open the source image (fails before any output is touched)
    2. Plan crop regions from the layout
    3. Lock, clear and recreate output_dir
    4. Slice, hash and write every region concurrently, keeping order
    5. Assemble the README and write it once every slice succeeded

    Args:
        image_path: Source banner image.
        layout: Validated layout.
        output_dir: Directory for slice files. Cleared on every run.
        readme_path: README file to overwrite.
        config: Generation settings (default GeneratorConfig()).

    Returns:
        GenerationResult describing what was written.

    Raises:
        ImageDimensionsError: If the source image size is unreadable.
        LayoutError: If the layout cannot be tiled over the image.
        OutputLockedError: If another run owns output_dir.
        Exception: Any slice failure; output_dir may then be partial
            and the README is left untouched.

    Example:
        >>> layout = load_layout_json(Path("data/image-config.json"))
        >>> result = generate_readme(
        ...     Path("data/image.png"), layout, Path("generated"), Path("../readme.markdown")
        ... )
        >>> result.crop_count
        42
    """
    config = config or GeneratorConfig()
    output_dir = Path(output_dir)
    readme_path = Path(readme_path)
    timings = TimingLog()

    with timed_phase(timings, "load"):
        source = SourceImage.open(image_path)

    with timed_phase(timings, "plan"):
        regions = plan_crops(
            layout,
            source.width,
            image_height=source.height,
            line_height=config.line_height,
            latest_content_url=config.latest_content_url,
            placeholder=config.placeholder,
        )
    fillers = sum(1 for r in regions if r.is_filler)
    logger.info(
        f"Planned {len(regions)} crops ({len(regions) - fillers} linked, {fillers} filler) "
        f"from {len(layout.rows)} rows ({source.width}x{source.height} source)"
    )

    with output_dir_lock(output_dir):
        prepare_output_dir(output_dir)

        with timed_phase(timings, "slice"):
            with SliceQueue(
                source,
                output_dir,
                max_workers=config.max_workers,
                compress_level=config.compress_level,
            ) as queue:
                for region in regions:
                    queue.submit(region)
                outputs = queue.results()

        with timed_phase(timings, "markup"):
            readme = assemble_readme(
                outputs,
                source.width,
                base_url=config.image_base_url,
                footer=config.footer,
            )
            write_readme(readme, readme_path)

    result = GenerationResult(
        crop_count=len(outputs),
        filenames=[o.filename for o in outputs],
        readme_path=readme_path,
        output_dir=output_dir,
        readme=readme,
        timings=timings.to_dict(),
    )
    logger.info(
        f"Wrote {result.unique_files} slice files to {output_dir} and README to {readme_path}"
    )
    logger.debug(timings.summary())
    return result
