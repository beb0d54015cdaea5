"""
Tests for generator.write_queue

Test Coverage:
- SliceQueue: Ordered results, file writes, failure propagation
"""

import pytest

from readme_slicer.core.models import CropBounds, CropRegion
from readme_slicer.generator.slicer import SourceImage, slice_region
from readme_slicer.generator.write_queue import SliceQueue


@pytest.fixture
def source(gradient_image) -> SourceImage:
    return SourceImage.from_image(gradient_image)


@pytest.fixture
def regions():
    """One region per 5px column of the top band."""
    return [
        CropRegion(bounds=CropBounds(left=x, top=0, width=5, height=10), href=f"http://x/{x}")
        for x in range(0, 40, 5)
    ]


def test_results_preserve_submission_order(tmp_path, source, regions):
    with SliceQueue(source, tmp_path, max_workers=4) as queue:
        for region in regions:
            queue.submit(region)
        outputs = queue.results()

    assert [o.href for o in outputs] == [r.href for r in regions]
    assert [o.filename for o in outputs] == [slice_region(source, r).filename for r in regions]


def test_every_output_is_written(tmp_path, source, regions):
    with SliceQueue(source, tmp_path) as queue:
        for region in regions:
            queue.submit(region)
        outputs = queue.results()

    for output in outputs:
        assert (tmp_path / output.filename).read_bytes() == output.png_bytes


def test_results_clears_queue(tmp_path, source, regions):
    with SliceQueue(source, tmp_path) as queue:
        queue.submit(regions[0])
        assert len(queue.results()) == 1
        assert queue.results() == []


def test_failed_job_is_raised(tmp_path, source, regions):
    bad = CropRegion(bounds=CropBounds(left=35, top=0, width=10, height=10))

    with SliceQueue(source, tmp_path, max_workers=2) as queue:
        queue.submit(regions[0])
        queue.submit(bad)
        queue.submit(regions[1])
        with pytest.raises(ValueError, match="exceeds image size"):
            queue.results()


def test_single_worker_matches_parallel_output(tmp_path, source, regions):
    def run(workers, out):
        with SliceQueue(source, out, max_workers=workers) as queue:
            for region in regions:
                queue.submit(region)
            return [o.filename for o in queue.results()]

    assert run(1, tmp_path / "serial") == run(8, tmp_path / "parallel")
