"""
Geometry Layer
==============

Bounded Context: Axis-aligned shapes.

Responsibilities:
- Shape representation (immutable)
- Corner normalization
- Hypervolume
- NO dispatch (see hyperbox_geometry.algebra), NO formatting rules

Design Philosophy:
- Immutable data structures
- Fail-fast validation
- Zero side effects
"""

from hyperbox_geometry.geometry.base import Geometry
from hyperbox_geometry.geometry.points import Point, Point2D
from hyperbox_geometry.geometry.boxes import Rectangle, Volume

__all__ = [
    "Geometry",
    "Point",
    "Point2D",
    "Rectangle",
    "Volume",
]
