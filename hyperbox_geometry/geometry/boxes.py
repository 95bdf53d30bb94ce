"""
Box Shapes Module
=================

Axis-aligned boxes described by two opposite corners.

Design:
- Immutable shapes (frozen dataclass pattern)
- Corners accepted in either order, normalized once in __post_init__
- Rectangle is the 2D analogue of Volume but a separate type with x/y accessors
- Shared min/max math in geometry.bounds

Invariants (hold for the whole life of the object):
    Rectangle: lower_left.x <= upper_right.x and lower_left.y <= upper_right.y
    Volume: lower_corner[i] <= upper_corner[i] for every axis i
"""

from dataclasses import dataclass
from typing import Tuple

from hyperbox_geometry.errors import DimensionMismatchError
from hyperbox_geometry.geometry import bounds
from hyperbox_geometry.geometry.base import Geometry
from hyperbox_geometry.geometry.points import Point, Point2D
from hyperbox_geometry.logging import LogEvent, create_logger
from hyperbox_geometry.rendering.text import format_box

logger = create_logger("geometry")


@dataclass(frozen=True)
class Rectangle(Geometry):
    """
    Immutable axis-aligned rectangle.

    Attributes:
        lower_left: Corner with the smallest x and y
        upper_right: Corner with the largest x and y

    Example:
        >>> r = Rectangle(Point2D(4, 0), Point2D(0, 3))
        >>> r.lower_left, r.upper_right
        (Point2D(x=0.0, y=0.0), Point2D(x=4.0, y=3.0))
        >>> r.hypervolume()
        12.0
    """

    lower_left: Point2D
    upper_right: Point2D

    def __post_init__(self):
        """Validate corner types and normalize."""
        for corner in (self.lower_left, self.upper_right):
            if not isinstance(corner, Point2D):
                raise TypeError(
                    f"Rectangle corners must be Point2D, got {type(corner).__name__}"
                )

        given = (self.lower_left.as_tuple(), self.upper_right.as_tuple())
        lower, upper = bounds.enclose(*given)
        if (lower, upper) != given:
            logger.debug(
                event=LogEvent.SHAPE_NORMALIZED,
                message="Rectangle corners reordered",
                metadata={'given': [list(c) for c in given]}
            )

        object.__setattr__(self, 'lower_left', Point2D(*lower))
        object.__setattr__(self, 'upper_right', Point2D(*upper))

    def dimensions(self) -> int:
        return 2

    def width(self) -> float:
        return self.upper_right.x - self.lower_left.x

    def height(self) -> float:
        return self.upper_right.y - self.lower_left.y

    def hypervolume(self) -> float:
        return self.width() * self.height()

    def to_text(self, decimals: int = 2) -> str:
        return format_box(
            "Rectangle",
            "Area",
            self.lower_left.as_tuple(),
            self.upper_right.as_tuple(),
            self.hypervolume(),
            decimals,
        )


@dataclass(frozen=True)
class Volume(Geometry):
    """
    Immutable n-dimensional axis-aligned box.

    Attributes:
        lower_corner: Corner with the smallest value on every axis
        upper_corner: Corner with the largest value on every axis

    Raises (construction):
        TypeError: If a corner is not a Point
        DimensionMismatchError: If the corners differ in dimensionality

    Example:
        >>> v = Volume(Point.of(2, 3, 4), Point.of(0, 0, 0))
        >>> v.edge_lengths()
        (2.0, 3.0, 4.0)
        >>> v.hypervolume()
        24.0
    """

    lower_corner: Point
    upper_corner: Point

    def __post_init__(self):
        """Validate corners and normalize per axis."""
        for corner in (self.lower_corner, self.upper_corner):
            if not isinstance(corner, Point):
                raise TypeError(
                    f"Volume corners must be Point, got {type(corner).__name__}"
                )

        first, second = self.lower_corner, self.upper_corner
        if first.dimensions() != second.dimensions():
            raise DimensionMismatchError(
                first.dimensions(),
                second.dimensions(),
                f"Volume corners must have the same dimensions, "
                f"got {first.dimensions()} and {second.dimensions()}"
            )

        lower, upper = bounds.enclose(first.coordinates, second.coordinates)
        if (lower, upper) != (first.coordinates, second.coordinates):
            logger.debug(
                event=LogEvent.SHAPE_NORMALIZED,
                message="Volume corners reordered",
                metadata={'given': [list(first.coordinates), list(second.coordinates)]}
            )

        object.__setattr__(self, 'lower_corner', Point(lower))
        object.__setattr__(self, 'upper_corner', Point(upper))

    def dimensions(self) -> int:
        return self.lower_corner.dimensions()

    def edge_length(self, axis: int) -> float:
        """
        Extent along one axis.

        Raises:
            IndexError: If axis is outside [0, dimensions())
        """
        return self.upper_corner.coordinate(axis) - self.lower_corner.coordinate(axis)

    def edge_lengths(self) -> Tuple[float, ...]:
        return bounds.edge_lengths(self.lower_corner.coordinates, self.upper_corner.coordinates)

    def hypervolume(self) -> float:
        return bounds.measure(self.edge_lengths())

    def to_text(self, decimals: int = 2) -> str:
        return format_box(
            "Volume",
            "Volume",
            self.lower_corner.coordinates,
            self.upper_corner.coordinates,
            self.hypervolume(),
            decimals,
        )
