"""
Point Shapes Module
===================

Zero-hypervolume members of the shape family.

Design:
- Immutable shapes (frozen dataclass pattern)
- Point2D: fixed 2D, named x/y accessors
- Point: n-dimensional, indexed axes, coordinates copied into a tuple
- Thread-safe by design (immutability)
"""

import numpy as np
from dataclasses import dataclass
from typing import Tuple

from hyperbox_geometry.geometry.base import Geometry
from hyperbox_geometry.rendering.text import format_point


@dataclass(frozen=True)
class Point2D(Geometry):
    """
    Immutable point in the plane.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate
    """

    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    def dimensions(self) -> int:
        return 2

    def hypervolume(self) -> float:
        return 0.0

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_text(self, decimals: int = 2) -> str:
        return format_point(self.as_tuple(), decimals)


@dataclass(frozen=True)
class Point(Geometry):
    """
    Immutable n-dimensional point.

    The caller's sequence is copied into a tuple of floats, so mutating the
    original buffer afterwards has no effect on the point.

    Attributes:
        coordinates: One value per axis (at least 2)

    Example:
        >>> p = Point.of(1, 2, 3)
        >>> p.dimensions()
        3
        >>> p.coordinate(2)
        3.0
    """

    coordinates: Tuple[float, ...]

    def __post_init__(self):
        """Copy coordinates and validate length."""
        if isinstance(self.coordinates, str):
            raise TypeError(
                f"Point coordinates must be a sequence of numbers, got str {self.coordinates!r}"
            )
        coordinates = tuple(float(c) for c in self.coordinates)
        if len(coordinates) < 2:
            raise ValueError(
                f"Point needs at least 2 coordinates, got {len(coordinates)}"
            )
        object.__setattr__(self, 'coordinates', coordinates)

    @classmethod
    def of(cls, *coordinates: float) -> "Point":
        return cls(coordinates)

    def dimensions(self) -> int:
        return len(self.coordinates)

    def hypervolume(self) -> float:
        return 0.0

    def coordinate(self, index: int) -> float:
        """
        Single coordinate by axis.

        Raises:
            IndexError: If index is outside [0, dimensions())
        """
        if not 0 <= index < len(self.coordinates):
            raise IndexError(
                f"Axis {index} out of range for {len(self.coordinates)}-dimensional point"
            )
        return self.coordinates[index]

    def to_array(self) -> np.ndarray:
        """Fresh numpy copy of the coordinates."""
        return np.array(self.coordinates, dtype=float)

    def to_text(self, decimals: int = 2) -> str:
        return format_point(self.coordinates, decimals)
