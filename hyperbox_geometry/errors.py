"""
Error Types
===========

Bounded Context: Failure taxonomy of the encapsulation algebra.

Categories:
- DimensionMismatchError: recoverable, raised during normal use when two
  shapes of different dimensionality meet. Callers are expected to catch it.
- ClosedAlgebraError: a pairing outside the closed shape family reached the
  dispatcher. Internal-consistency failure, never caught by the library.

Construction-time precondition violations (too few coordinates, wrong corner
types, out-of-range axes) use the builtin ValueError / TypeError / IndexError.
"""


class HyperboxError(Exception):
    """Base class for all hyperbox errors."""


class DimensionMismatchError(HyperboxError, ValueError):
    """
    Two shapes (or two box corners) have different dimensionality.

    Attributes:
        expected: Dimensionality of the receiving shape
        actual: Dimensionality of the offending shape

    Example:
        >>> try:
        ...     Point2D(1, 1).encapsulate(Point.of(0, 0, 0))
        ... except DimensionMismatchError as e:
        ...     print(e.expected, e.actual)
        2 3
    """

    def __init__(self, expected: int, actual: int, message: str = None):
        self.expected = expected
        self.actual = actual
        super().__init__(
            message or f"Dimension mismatch: expected {expected}, got {actual}"
        )


class ClosedAlgebraError(HyperboxError, TypeError):
    """A shape pairing has no encapsulation rule."""
