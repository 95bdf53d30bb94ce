"""
hyperbox Geometry v1.0
======================

Bounded Context: Axis-aligned shapes and their encapsulation algebra.

Design Philosophy:
- Closed family: Point2D, Point, Rectangle, Volume
- Immutable shapes, every operation returns a new value
- Dimension check first, then one rule per pair of shape types
- Ordering by hypervolume only (see geometry.base)

Architecture:

    hyperbox_geometry/
    ├── geometry/          # Shapes (immutable, stateless)
    │   ├── base.py        # Geometry contract + hypervolume ordering
    │   ├── bounds.py      # Per-axis min/max math (numpy)
    │   ├── points.py      # Point2D, Point
    │   └── boxes.py       # Rectangle, Volume
    │
    ├── algebra/           # Encapsulation dispatch
    │   └── union.py       # Pair rules, encapsulate, encapsulate_all
    │
    ├── rendering/         # Canonical text form
    │   └── text.py        # format_* helpers, TextRenderer
    │
    ├── logging/           # Structured JSON logs
    ├── config.py          # YAML configuration
    └── errors.py          # DimensionMismatchError, ClosedAlgebraError

Usage:

    from hyperbox_geometry import Point2D, Point, Rectangle, Volume

    rect = Point2D(0, 0).encapsulate(Point2D(4, 3))
    print(rect)                     # Rectangle[Point(0.00, 0.00), Point(4.00, 3.00)] (Area: 12.00)

    box = Volume(Point.of(0, 0, 0), Point.of(2, 2, 2)).encapsulate(Point.of(3, 3, 3))
    box.hypervolume()               # 27.0

    try:
        Point2D(1, 1).encapsulate(Point.of(0, 0, 0))
    except DimensionMismatchError as e:
        ...                         # e.expected == 2, e.actual == 3
"""

from hyperbox_geometry.errors import (
    ClosedAlgebraError,
    DimensionMismatchError,
    HyperboxError,
)

# Geometry Layer
from hyperbox_geometry.geometry import Geometry, Point, Point2D, Rectangle, Volume

# Algebra Layer
from hyperbox_geometry.algebra import encapsulate, encapsulate_all, supported_pairs

# Rendering Layer
from hyperbox_geometry.rendering import TextRenderer

# Configuration
from hyperbox_geometry.config import HyperboxConfig, LoggingConfig, RenderConfig

__all__ = [
    # Errors
    "HyperboxError",
    "DimensionMismatchError",
    "ClosedAlgebraError",
    # Geometry
    "Geometry",
    "Point",
    "Point2D",
    "Rectangle",
    "Volume",
    # Algebra
    "encapsulate",
    "encapsulate_all",
    "supported_pairs",
    # Rendering
    "TextRenderer",
    # Configuration
    "HyperboxConfig",
    "LoggingConfig",
    "RenderConfig",
]

__version__ = "1.0.0"
