"""
Union Algebra Module
====================

Encapsulation (bounding-box union) for every valid pair of shapes.

Design:
- One rule table keyed by (type(left), type(right))
- Dimension check always runs before the table lookup
- Mixed pairs are registered once and served in both orders with the
  operands swapped, so a.encapsulate(b) and b.encapsulate(a) run the same rule
- Operands are never mutated; every rule builds a new box

Closed set of pairings:
    Point2D   + Point2D     -> Rectangle
    Point2D   + Rectangle   -> Rectangle   (either order)
    Rectangle + Rectangle   -> Rectangle
    Point     + Point       -> Volume
    Point     + Volume      -> Volume      (either order)
    Volume    + Volume      -> Volume

The 2D family (Point2D, Rectangle) and the n-D family (Point, Volume) stay
disjoint even at dimensionality 2: such a pair passes the dimension check
and then fails with ClosedAlgebraError.
"""

from functools import reduce
from typing import Callable, Dict, FrozenSet, Sequence, Tuple, Type

from hyperbox_geometry.errors import ClosedAlgebraError, DimensionMismatchError
from hyperbox_geometry.geometry import bounds
from hyperbox_geometry.geometry.base import Geometry
from hyperbox_geometry.geometry.boxes import Rectangle, Volume
from hyperbox_geometry.geometry.points import Point, Point2D
from hyperbox_geometry.logging import LogEvent, create_logger

logger = create_logger("algebra")

Rule = Callable[[Geometry, Geometry], Geometry]

_RULES: Dict[Tuple[Type[Geometry], Type[Geometry]], Rule] = {}


def _register(left: Type[Geometry], right: Type[Geometry], rule: Rule) -> None:
    _RULES[(left, right)] = rule
    if left is not right:
        _RULES[(right, left)] = lambda a, b: rule(b, a)


def _bounding_rectangle(*rows: Sequence[float]) -> Rectangle:
    lower, upper = bounds.enclose(*rows)
    return Rectangle(Point2D(*lower), Point2D(*upper))


def _bounding_volume(*rows: Sequence[float]) -> Volume:
    lower, upper = bounds.enclose(*rows)
    return Volume(Point(lower), Point(upper))


# ========== 2D family ==========

def _point2d_with_point2d(a: Point2D, b: Point2D) -> Rectangle:
    return _bounding_rectangle(a.as_tuple(), b.as_tuple())


def _rectangle_with_point2d(rect: Rectangle, point: Point2D) -> Rectangle:
    return _bounding_rectangle(
        rect.lower_left.as_tuple(),
        rect.upper_right.as_tuple(),
        point.as_tuple(),
    )


def _rectangle_with_rectangle(a: Rectangle, b: Rectangle) -> Rectangle:
    return _bounding_rectangle(
        a.lower_left.as_tuple(),
        a.upper_right.as_tuple(),
        b.lower_left.as_tuple(),
        b.upper_right.as_tuple(),
    )


# ========== n-D family ==========

def _point_with_point(a: Point, b: Point) -> Volume:
    return _bounding_volume(a.coordinates, b.coordinates)


def _volume_with_point(volume: Volume, point: Point) -> Volume:
    return _bounding_volume(
        volume.lower_corner.coordinates,
        volume.upper_corner.coordinates,
        point.coordinates,
    )


def _volume_with_volume(a: Volume, b: Volume) -> Volume:
    return _bounding_volume(
        a.lower_corner.coordinates,
        a.upper_corner.coordinates,
        b.lower_corner.coordinates,
        b.upper_corner.coordinates,
    )


_register(Point2D, Point2D, _point2d_with_point2d)
_register(Rectangle, Point2D, _rectangle_with_point2d)
_register(Rectangle, Rectangle, _rectangle_with_rectangle)
_register(Point, Point, _point_with_point)
_register(Volume, Point, _volume_with_point)
_register(Volume, Volume, _volume_with_volume)


def supported_pairs() -> FrozenSet[Tuple[str, str]]:
    """Names of every (left, right) pairing that has a rule."""
    return frozenset((left.__name__, right.__name__) for left, right in _RULES)


def encapsulate(left: Geometry, right: Geometry) -> Geometry:
    """
    Smallest axis-aligned box containing both shapes.

    Args:
        left: Receiving shape
        right: Shape to include

    Returns:
        New Rectangle (2D family) or Volume (n-D family)

    Raises:
        TypeError: If an operand is not a Geometry
        DimensionMismatchError: If the operands differ in dimensionality
        ClosedAlgebraError: If the pair of types has no rule
    """
    for operand in (left, right):
        if not isinstance(operand, Geometry):
            raise TypeError(f"Cannot encapsulate {type(operand).__name__}: not a Geometry")

    left_name, right_name = type(left).__name__, type(right).__name__

    if left.dimensions() != right.dimensions():
        logger.warning(
            event=LogEvent.DIMENSION_MISMATCH,
            message=f"Cannot encapsulate {left_name} with {right_name}",
            metadata={'expected': left.dimensions(), 'actual': right.dimensions()}
        )
        raise DimensionMismatchError(
            left.dimensions(),
            right.dimensions(),
            f"Cannot encapsulate {left_name} ({left.dimensions()}D) "
            f"with {right_name} ({right.dimensions()}D)"
        )

    rule = _RULES.get((type(left), type(right)))
    if rule is None:
        logger.warning(
            event=LogEvent.UNSUPPORTED_PAIR,
            message=f"No encapsulation rule for {left_name} + {right_name}",
            metadata={'left': left_name, 'right': right_name}
        )
        raise ClosedAlgebraError(
            f"No encapsulation rule for {left_name} + {right_name}; "
            f"{left_name} and {right_name} belong to different shape families"
        )

    result = rule(left, right)
    logger.debug(
        event=LogEvent.ENCAPSULATED,
        message=f"{left_name} + {right_name} -> {type(result).__name__}",
        metadata={'dimensions': result.dimensions(), 'hypervolume': result.hypervolume()}
    )
    return result


def encapsulate_all(*shapes: Geometry) -> Geometry:
    """
    Fold encapsulation over shapes, left to right.

    A single shape is returned unchanged.

    Raises:
        ValueError: If no shapes are given
        DimensionMismatchError: On the first pair with differing dimensionality
    """
    if not shapes:
        raise ValueError("encapsulate_all() needs at least one shape")
    return reduce(encapsulate, shapes)
