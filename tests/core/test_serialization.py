"""
Unit Tests for Layout Serialization

Tests for loading layout files.
"""

import json

import pytest

from readme_slicer.core.models import LayoutConfig
from readme_slicer.core.schemas import ValidationError
from readme_slicer.core.utils import deserialize_layout, load_layout_json


def test_load_layout_json_returns_validated_layout(tmp_path, layout_data):
    path = tmp_path / "image-config.json"
    path.write_text(json.dumps(layout_data), encoding="utf-8")

    layout = load_layout_json(path)

    assert isinstance(layout, LayoutConfig)
    assert len(layout.rows) == 2
    assert layout.rows[0].links[1].left_x == 20


def test_load_layout_json_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_layout_json(tmp_path / "missing.json")


def test_load_layout_json_invalid_json_raises_validation_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{rows: [", encoding="utf-8")
    with pytest.raises(ValidationError, match="not valid JSON"):
        load_layout_json(path)


def test_load_layout_json_schema_violation_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"rows": [{"bottomY": -1, "links": []}]}), encoding="utf-8")
    with pytest.raises(ValidationError):
        load_layout_json(path)


def test_deserialize_without_validation_still_checks_model_invariants():
    data = {"rows": [{"bottomY": 10, "links": [{"leftX": 9, "rightX": 3, "href": "x"}]}]}
    with pytest.raises(ValidationError, match="Invalid layout data"):
        deserialize_layout(data, validate=False)


def test_load_layout_json_with_integral_floats_gives_int_coordinates(tmp_path):
    path = tmp_path / "image-config.json"
    path.write_text(
        json.dumps({"rows": [{"bottomY": 10.0, "links": [
            {"leftX": 5.0, "rightX": 15.0, "href": "http://x"},
        ]}]}),
        encoding="utf-8",
    )

    layout = load_layout_json(path)

    row = layout.rows[0]
    assert type(row.bottom_y) is int
    assert (row.links[0].left_x, row.links[0].right_x) == (5, 15)
    assert type(row.links[0].left_x) is int


def test_deserialize_without_validation_rejects_boolean_coordinates():
    data = {"rows": [{"bottomY": True, "links": []}]}
    with pytest.raises(ValidationError, match="bottomY must be an integer"):
        deserialize_layout(data, validate=False)
