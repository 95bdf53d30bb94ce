"""
Rendering Layer
===============

Bounded Context: Canonical text form of shapes.

Responsibilities:
- Fixed-precision number and coordinate formatting
- Box layout (corners + measure)
- Report lines for the command-line driver
- NO geometry, NO I/O
"""

from hyperbox_geometry.rendering.text import (
    DEFAULT_DECIMALS,
    TextRenderer,
    format_box,
    format_point,
    format_value,
)

__all__ = [
    "DEFAULT_DECIMALS",
    "TextRenderer",
    "format_box",
    "format_point",
    "format_value",
]
