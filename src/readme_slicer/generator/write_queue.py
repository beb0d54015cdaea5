"""
Module: generator.write_queue

Purpose:
    Order-preserving thread pool for slice jobs. Each job crops, encodes,
    hashes and writes one region; jobs share nothing but the read-only
    source image.

Key Classes:
    - SliceQueue: Thread pool-based slice queue

Dependencies:
    - concurrent.futures: Thread pool execution
    - generator.slicer: slice_region, write_crop

Used By:
    - generator.pipeline: Fans out all planned regions
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional

from readme_slicer.core.models import CropOutput, CropRegion
from .slicer import DEFAULT_COMPRESS_LEVEL, SourceImage, slice_region, write_crop

logger = logging.getLogger(__name__)


class SliceQueue:
    """
    Thread pool-based queue of slice jobs.

    Results come back in submission order regardless of which job
    finishes first, so the planner's order carries through to markup.

    Usage:
        with SliceQueue(source, output_dir, max_workers=4) as queue:
            for region in regions:
                queue.submit(region)
            outputs = queue.results()

    Attributes:
        max_workers: Maximum concurrent slice threads.
    """

    def __init__(
        self,
        source: SourceImage,
        output_dir: Path,
        *,
        max_workers: int = 4,
        compress_level: int = DEFAULT_COMPRESS_LEVEL,
    ):
        """
        Initialize slice queue.

        Args:
            source: Shared source image.
            output_dir: Directory slices are written into.
            max_workers: Maximum concurrent slice threads.
            compress_level: PNG compression (0=none, 9=smallest).
        """
        self.max_workers = max_workers
        self._source = source
        self._output_dir = output_dir
        self._compress_level = compress_level
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="slice"
        )
        self._futures: List[Future] = []

    def submit(self, region: CropRegion) -> Future:
        """Queue a slice job for one region."""
        future = self._executor.submit(self._run, region)
        self._futures.append(future)
        return future

    def results(self, timeout: Optional[float] = None) -> List[CropOutput]:
        """
        Wait for all queued jobs and return their outputs in order.

        Args:
            timeout: Max seconds to wait per job (None = indefinite).

        Returns:
            CropOutputs in submission order.

        Raises:
            Exception: The first job failure, in submission order. Jobs
                not yet started are cancelled.
        """
        outputs: List[CropOutput] = []
        try:
            for index, future in enumerate(self._futures):
                try:
                    outputs.append(future.result(timeout=timeout))
                except Exception as e:
                    logger.error(f"Slice job {index} failed: {e}")
                    for pending in self._futures[index + 1:]:
                        pending.cancel()
                    raise
        finally:
            self._futures.clear()
        return outputs

    def shutdown(self) -> None:
        """Shutdown the thread pool, dropping jobs that have not started."""
        self._executor.shutdown(wait=True, cancel_futures=True)

    def _run(self, region: CropRegion) -> CropOutput:
        output = slice_region(self._source, region, compress_level=self._compress_level)
        write_crop(output, self._output_dir)
        return output

    def __enter__(self) -> "SliceQueue":
        return self

    def __exit__(self, *args) -> None:
        self.shutdown()
