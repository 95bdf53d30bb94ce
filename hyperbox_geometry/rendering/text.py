"""
Text Rendering Module
=====================

Canonical text form of shapes.

Design:
- Stateless formatting helpers (pure functions)
- No geometry imports (shapes call into this module, never the reverse)
- Fixed-point formatting, two decimals by default

Formats:
    Point(c0, c1, ..., cn)
    Rectangle[<lower_left>, <upper_right>] (Area: <measure>)
    Volume[<lower_corner>, <upper_corner>] (Volume: <measure>)
"""

from typing import Iterable

DEFAULT_DECIMALS = 2


def format_value(value: float, decimals: int = DEFAULT_DECIMALS) -> str:
    """Format a single number with a fixed number of decimals."""
    return f"{value:.{decimals}f}"


def format_point(coordinates: Iterable[float], decimals: int = DEFAULT_DECIMALS) -> str:
    """
    Format a coordinate sequence as ``Point(c0, c1, ...)``.

    Args:
        coordinates: Coordinate values in axis order
        decimals: Digits after the decimal point

    Returns:
        Canonical point text, no trailing comma
    """
    body = ", ".join(format_value(c, decimals) for c in coordinates)
    return f"Point({body})"


def format_box(
    type_name: str,
    measure_label: str,
    lower: Iterable[float],
    upper: Iterable[float],
    measure: float,
    decimals: int = DEFAULT_DECIMALS,
) -> str:
    """
    Format a box as ``TypeName[<lower>, <upper>] (Label: <measure>)``.

    Args:
        type_name: "Rectangle" or "Volume"
        measure_label: "Area" or "Volume"
        lower: Lower corner coordinates
        upper: Upper corner coordinates
        measure: Hypervolume of the box
        decimals: Digits after the decimal point
    """
    return (
        f"{type_name}[{format_point(lower, decimals)}, {format_point(upper, decimals)}] "
        f"({measure_label}: {format_value(measure, decimals)})"
    )


class TextRenderer:
    """
    Configurable renderer for shapes and algebra results.

    Every shape knows its own layout through ``to_text(decimals)``; the
    renderer only fixes the precision and builds report lines around it.

    Usage:
        renderer = TextRenderer(decimals=3)
        renderer.render(rect)            # Rectangle[...] (Area: 12.000)
        renderer.render_encapsulation(a, b, result)
    """

    def __init__(self, decimals: int = DEFAULT_DECIMALS):
        if decimals < 0:
            raise ValueError(f"decimals must be >= 0, got {decimals}")
        self.decimals = decimals

    def render(self, shape) -> str:
        return shape.to_text(self.decimals)

    def render_measure(self, shape) -> str:
        """Shape text followed by its hypervolume."""
        return (
            f"{self.render(shape)} -> hypervolume "
            f"{format_value(shape.hypervolume(), self.decimals)}"
        )

    def render_encapsulation(self, left, right, result) -> str:
        return f"{self.render(left)} + {self.render(right)} = {self.render(result)}"

    def render_comparison(self, left, right, outcome: int) -> str:
        if outcome < 0:
            verdict = "smaller than"
        elif outcome > 0:
            verdict = "larger than"
        else:
            verdict = "same hypervolume as"
        return f"{self.render(left)} is {verdict} {self.render(right)} ({outcome})"
