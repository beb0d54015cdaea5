"""
Unit Tests for Layout Models

Tests for Link, Row, LayoutConfig and the crop models.
"""

import pytest

from readme_slicer.core.models import CropBounds, CropOutput, CropRegion, LayoutConfig, Link, Row


class TestLink:
    """Tests for Link dataclass."""

    def test_from_dict_maps_json_keys(self):
        link = Link.from_dict({"leftX": 5, "rightX": 15, "href": "http://x"})
        assert link == Link(left_x=5, right_x=15, href="http://x")
        assert link.width == 10

    def test_from_dict_when_integral_floats_then_stores_ints(self):
        link = Link.from_dict({"leftX": 5.0, "rightX": 15.0, "href": "http://x"})
        assert link == Link(left_x=5, right_x=15, href="http://x")
        assert type(link.left_x) is int
        assert type(link.right_x) is int

    @pytest.mark.parametrize("value", [5.5, "5", True, None])
    def test_init_when_coordinate_not_integer_then_raises_error(self, value):
        with pytest.raises(ValueError, match="leftX must be an integer"):
            Link(left_x=value, right_x=15, href="http://x")

    def test_from_dict_when_fractional_float_then_raises_error(self):
        with pytest.raises(ValueError, match="rightX must be an integer"):
            Link.from_dict({"leftX": 5, "rightX": 15.5, "href": "http://x"})

    def test_zero_width_link_is_allowed(self):
        link = Link(left_x=7, right_x=7, href="http://x")
        assert link.width == 0

    def test_init_when_right_before_left_then_raises_error(self):
        with pytest.raises(ValueError, match="rightX must be >= leftX"):
            Link(left_x=10, right_x=5, href="http://x")

    def test_init_when_negative_left_then_raises_error(self):
        with pytest.raises(ValueError, match="leftX must be >= 0"):
            Link(left_x=-1, right_x=5, href="http://x")

    def test_resolve_href_replaces_placeholder(self):
        link = Link(left_x=0, right_x=5, href="${LATEST_CONTENT_URL}")
        assert link.resolve_href("${LATEST_CONTENT_URL}", "https://latest") == "https://latest"

    def test_resolve_href_without_placeholder_is_unchanged(self):
        link = Link(left_x=0, right_x=5, href="https://github.com")
        assert link.resolve_href("${LATEST_CONTENT_URL}", "https://latest") == "https://github.com"

    def test_resolve_href_replaces_first_occurrence_only(self):
        link = Link(left_x=0, right_x=5, href="${P}?next=${P}")
        assert link.resolve_href("${P}", "u") == "u?next=${P}"


class TestRow:
    """Tests for Row dataclass."""

    def test_from_dict_builds_links_in_order(self):
        row = Row.from_dict({
            "bottomY": 10,
            "links": [
                {"leftX": 0, "rightX": 5, "href": "a"},
                {"leftX": 5, "rightX": 9, "href": "b"},
            ],
        })
        assert row.bottom_y == 10
        assert [link.href for link in row.links] == ["a", "b"]

    def test_from_dict_without_links_gives_empty_tuple(self):
        assert Row.from_dict({"bottomY": 10}).links == ()

    def test_init_when_bottom_not_positive_then_raises_error(self):
        with pytest.raises(ValueError, match="bottomY must be > 0"):
            Row(bottom_y=0)

    def test_from_dict_when_integral_float_bottom_then_stores_int(self):
        row = Row.from_dict({"bottomY": 10.0, "links": []})
        assert row.bottom_y == 10
        assert type(row.bottom_y) is int

    def test_init_when_bottom_is_bool_then_raises_error(self):
        with pytest.raises(ValueError, match="bottomY must be an integer"):
            Row(bottom_y=True)


class TestLayoutConfig:
    """Tests for LayoutConfig dataclass."""

    def test_from_dict_builds_rows_in_order(self, layout_data):
        layout = LayoutConfig.from_dict(layout_data)
        assert [row.bottom_y for row in layout.rows] == [10, 24]
        assert layout.rows[1].links[0].href == "${LATEST_CONTENT_URL}"

    def test_link_count_sums_all_rows(self, layout):
        assert layout.link_count == 3

    def test_empty_layout_has_no_rows(self):
        layout = LayoutConfig.from_dict({"rows": []})
        assert layout.rows == ()
        assert layout.link_count == 0


class TestCropModels:
    """Tests for CropRegion and CropOutput."""

    def test_region_without_href_is_filler(self):
        region = CropRegion(bounds=CropBounds(0, 0, 5, 10))
        assert region.is_filler is True
        assert region.to_dict() == {
            "bounds": {"left": 0, "top": 0, "width": 5, "height": 10},
            "href": None,
        }

    def test_output_filename_is_hash_with_png_suffix(self):
        output = CropOutput(png_bytes=b"", content_hash="abc123", width=5, height=10, href="http://x")
        assert output.filename == "abc123.png"
        assert output.is_filler is False

    def test_output_repr_hides_bytes(self):
        output = CropOutput(png_bytes=b"\x89PNG" * 100, content_hash="abc", width=1, height=1)
        assert "PNG" not in repr(output)
