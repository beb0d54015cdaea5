"""
Module: layout

Purpose:
    Declarative banner layout: rows of clickable link spans over the
    source image. Mirrors the layout JSON file one-to-one.

Key Classes:
    - Link: Horizontal span [left_x, right_x) with an href template
    - Row: Bottom boundary of a horizontal band plus its links
    - LayoutConfig: Ordered rows, top to bottom

Dependencies:
    - dataclasses (std)

Used By:
    - core.utils.serialization: Builds LayoutConfig from JSON
    - generator.planner: Walks rows and links to plan crops
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Tuple


def _check_pixel(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer: {value!r}")


def _pixel(value: Any) -> Any:
    """Integral floats such as 10.0 are valid JSON integers; store them as int."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


@dataclass(frozen=True, slots=True)
class Link:
    """
    A clickable horizontal span within a row.

    Attributes:
        left_x: Left pixel boundary (inclusive)
        right_x: Right pixel boundary (exclusive)
        href: Target URL; may contain a placeholder token that is
            substituted at planning time (see Link.resolve_href)
    """

    left_x: int
    right_x: int
    href: str

    def __post_init__(self) -> None:
        _check_pixel("leftX", self.left_x)
        _check_pixel("rightX", self.right_x)
        if self.left_x < 0:
            raise ValueError(f"leftX must be >= 0: {self.left_x}")
        if self.right_x < self.left_x:
            raise ValueError(f"rightX must be >= leftX: {self.right_x} < {self.left_x}")

    @property
    def width(self) -> int:
        return self.right_x - self.left_x

    def resolve_href(self, placeholder: str, replacement: str) -> str:
        """Return href with the first occurrence of placeholder replaced."""
        return self.href.replace(placeholder, replacement, 1)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Link:
        return cls(
            left_x=_pixel(data["leftX"]),
            right_x=_pixel(data["rightX"]),
            href=data["href"],
        )


@dataclass(frozen=True, slots=True)
class Row:
    """
    One horizontal band of the banner.

    The band starts where the previous row ended (plus the line height)
    and ends at bottom_y, exclusive.

    Attributes:
        bottom_y: Bottom pixel boundary of the band (exclusive)
        links: Links in left-to-right order
    """

    bottom_y: int
    links: Tuple[Link, ...] = ()

    def __post_init__(self) -> None:
        _check_pixel("bottomY", self.bottom_y)
        if self.bottom_y <= 0:
            raise ValueError(f"bottomY must be > 0: {self.bottom_y}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Row:
        return cls(
            bottom_y=_pixel(data["bottomY"]),
            links=tuple(Link.from_dict(link) for link in data.get("links", [])),
        )


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """
    Complete banner layout.

    Attributes:
        rows: Rows in top-to-bottom order

    Example:
        >>> layout = LayoutConfig.from_dict(
        ...     {"rows": [{"bottomY": 10, "links": [{"leftX": 5, "rightX": 15, "href": "http://x"}]}]}
        ... )
        >>> layout.link_count
        1
    """

    rows: Tuple[Row, ...] = field(default_factory=tuple)

    @property
    def link_count(self) -> int:
        return sum(len(row.links) for row in self.rows)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LayoutConfig:
        return cls(rows=tuple(Row.from_dict(row) for row in data.get("rows", [])))
