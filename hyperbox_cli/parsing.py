"""
Shape text parsing for the command line.

Syntax:
    point2d:X,Y
    point:C0,C1,...
    rect:X1,Y1:X2,Y2
    volume:A0,A1,...:B0,B1,...
"""

from typing import List

from hyperbox_geometry import Geometry, Point, Point2D, Rectangle, Volume
from hyperbox_geometry.logging import LogEvent, create_logger

logger = create_logger("parsing")

SHAPE_KINDS = ("point2d", "point", "rect", "volume")


def _parse_numbers(group: str, text: str) -> List[float]:
    if not group.strip():
        raise ValueError(f"Empty coordinate group in '{text}'")
    try:
        return [float(value) for value in group.split(",")]
    except ValueError:
        raise ValueError(f"Invalid number in '{text}'")


def parse_shape(text: str) -> Geometry:
    """
    Parse one shape from its command-line form.

    Args:
        text: e.g. "rect:0,0:2,2"

    Returns:
        Constructed shape

    Raises:
        ValueError: If the kind is unknown, a group is malformed, or the shape
            rejects its coordinates (DimensionMismatchError is a ValueError)
    """
    kind, sep, rest = text.partition(":")
    kind = kind.strip().lower()
    if not sep or kind not in SHAPE_KINDS:
        raise ValueError(
            f"Invalid shape '{text}'. Expected one of: "
            + ", ".join(f"{k}:..." for k in SHAPE_KINDS)
        )

    groups = [_parse_numbers(group, text) for group in rest.split(":")]
    shape = _build(kind, groups, text)

    logger.debug(
        event=LogEvent.SHAPE_CREATED,
        message=f"Parsed {type(shape).__name__} from '{text}'",
        metadata={'kind': kind, 'dimensions': shape.dimensions()}
    )
    return shape


def _build(kind: str, groups: List[List[float]], text: str) -> Geometry:
    if kind == "point2d":
        if len(groups) != 1 or len(groups[0]) != 2:
            raise ValueError(f"point2d expects exactly 2 coordinates: '{text}'")
        return Point2D(*groups[0])

    if kind == "point":
        if len(groups) != 1:
            raise ValueError(f"point expects one coordinate group: '{text}'")
        return Point(groups[0])

    if len(groups) != 2:
        raise ValueError(f"{kind} expects two corner groups separated by ':': '{text}'")

    if kind == "rect":
        if any(len(group) != 2 for group in groups):
            raise ValueError(f"rect corners need exactly 2 coordinates: '{text}'")
        return Rectangle(Point2D(*groups[0]), Point2D(*groups[1]))

    return Volume(Point(groups[0]), Point(groups[1]))
