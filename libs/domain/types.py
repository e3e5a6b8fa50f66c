from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coord:
    x: int
    y: int


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box in pixel space; Y grows downward."""

    top_left: Coord
    top_right: Coord
    bottom_left: Coord
    bottom_right: Coord

    @classmethod
    def new(cls, x: int, y: int, width: int, height: int) -> BoundingBox:
        if width < 0 or height < 0:
            raise ValueError(f"negative box size: {width}x{height}")
        return cls(
            top_left=Coord(x, y),
            top_right=Coord(x + width, y),
            bottom_left=Coord(x, y + height),
            bottom_right=Coord(x + width, y + height),
        )

    @classmethod
    def new_from_coords(cls, x1: int, y1: int, x2: int, y2: int) -> BoundingBox:
        """(x1, y1) and (x2, y2) are opposite corners, taken as given.

        Use :meth:`normalized` when the points may come in either order.
        """
        return cls(
            top_left=Coord(x1, y1),
            top_right=Coord(x2, y1),
            bottom_left=Coord(x1, y2),
            bottom_right=Coord(x2, y2),
        )

    @classmethod
    def normalized(cls, x1: int, y1: int, x2: int, y2: int) -> BoundingBox:
        return cls.new_from_coords(min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))

    @property
    def width(self) -> int:
        return self.top_right.x - self.top_left.x

    @property
    def height(self) -> int:
        return self.bottom_left.y - self.top_left.y

    def intersects(self, other: BoundingBox) -> bool:
        # Edge contact is not overlap: both axes need a positive extent.
        return not (
            self.top_right.x <= other.bottom_left.x
            or self.bottom_left.x >= other.top_right.x
            or self.top_right.y >= other.bottom_left.y
            or self.bottom_left.y <= other.top_right.y
        )

    def contains_box(self, other: BoundingBox) -> bool:
        return (
            self.top_left.x <= other.top_left.x
            and self.top_left.y <= other.top_left.y
            and other.bottom_right.x <= self.bottom_right.x
            and other.bottom_right.y <= self.bottom_right.y
        )

    def translate(self, dx: int, dy: int) -> BoundingBox:
        return BoundingBox.new_from_coords(
            self.top_left.x + dx,
            self.top_left.y + dy,
            self.bottom_right.x + dx,
            self.bottom_right.y + dy,
        )
