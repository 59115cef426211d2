"""Region - a rectangle in virtual-screen coordinates.

The virtual screen is the coordinate space spanning every monitor. Its
origin is not necessarily (0, 0): monitors placed left of or above the
primary one have negative coordinates.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..capture_exceptions import InvalidRegion


@dataclass(frozen=True)
class Region:
    """Represents a rectangular area of the virtual screen.

    Regions are always non-empty: construction fails with InvalidRegion
    unless width and height are positive.
    """

    x: int
    """X coordinate of top-left corner."""

    y: int
    """Y coordinate of top-left corner."""

    width: int
    """Width of the region."""

    height: int
    """Height of the region."""

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidRegion(
                f"width and height must be positive, got {self.width}x{self.height}"
            )

    @property
    def right(self) -> int:
        """X coordinate one past the right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Y coordinate one past the bottom edge."""
        return self.y + self.height

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def as_bbox(self) -> tuple[int, int, int, int]:
        """Get the region as a (left, top, right, bottom) box.

        Returns:
            Bounding box tuple as used by Pillow
        """
        return (self.x, self.y, self.right, self.bottom)

    @classmethod
    def from_bbox(cls, left: int, top: int, right: int, bottom: int) -> Region:
        """Create a region from its edges."""
        return cls(left, top, right - left, bottom - top)

    @classmethod
    def from_string(cls, value: str) -> Region:
        """Parse an ``x,y,width,height`` string.

        Args:
            value: Four comma-separated integers, whitespace allowed

        Returns:
            Parsed region

        Raises:
            InvalidRegion: If the string is malformed or describes an empty area
        """
        parts = value.split(",")
        if len(parts) != 4:
            raise InvalidRegion("expected x,y,width,height", value=value)

        values = []
        for part in parts:
            try:
                values.append(int(part.strip()))
            except ValueError:
                raise InvalidRegion(f"invalid number: {part.strip()!r}", value=value) from None

        return cls(*values)

    @staticmethod
    def union(regions: Iterable[Region]) -> Region:
        """Get the smallest region containing every given region.

        Gaps between non-adjacent regions are part of the result.

        Args:
            regions: Non-empty collection of regions

        Returns:
            Bounding box of all regions

        Raises:
            ValueError: If no regions are given
        """
        regions = list(regions)
        if not regions:
            raise ValueError("union of zero regions is undefined")

        return Region.from_bbox(
            min(r.x for r in regions),
            min(r.y for r in regions),
            max(r.right for r in regions),
            max(r.bottom for r in regions),
        )

    def __str__(self) -> str:
        return f"{self.width}x{self.height} at {self.x},{self.y}"
