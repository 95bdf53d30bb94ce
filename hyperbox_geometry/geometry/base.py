"""
Geometry Contract
=================

Common contract of every shape in the closed family
(Point2D, Point, Rectangle, Volume).

Design:
- Abstract base with no data (concrete shapes are frozen dataclasses)
- Encapsulation dispatch lives in hyperbox_geometry.algebra, not here
- Ordering compares hypervolume ONLY

Ordering vs equality:
    ``a < b`` holds iff ``a.hypervolume() < b.hypervolume()``. Two shapes
    with the same hypervolume compare as 0 even when they are different
    shapes in different places: ``Rectangle(0,0 -> 2,2)`` and
    ``Rectangle(5,5 -> 9,6)`` are neither smaller nor larger than each
    other. ``==`` is structural equality (same type, same corners), so
    ``a <= b and a >= b`` does NOT imply ``a == b``.
"""

import abc


class Geometry(abc.ABC):
    """
    Extent contract: dimensionality, hypervolume, encapsulation,
    hypervolume ordering and canonical text form.
    """

    @abc.abstractmethod
    def dimensions(self) -> int:
        """Fixed dimensionality (>= 2)."""

    @abc.abstractmethod
    def hypervolume(self) -> float:
        """Non-negative measure: 0 for points, product of edges for boxes."""

    @abc.abstractmethod
    def to_text(self, decimals: int = 2) -> str:
        """Canonical text form with ``decimals`` digits per number."""

    def encapsulate(self, other: "Geometry") -> "Geometry":
        """
        Smallest axis-aligned box containing ``self`` and ``other``.

        Never mutates either operand.

        Raises:
            DimensionMismatchError: If dimensionalities differ
            ClosedAlgebraError: If the pair of shape types has no rule
        """
        from hyperbox_geometry.algebra.union import encapsulate

        return encapsulate(self, other)

    def compare_to(self, other: "Geometry") -> int:
        """
        Order by hypervolume.

        Returns:
            -1 if smaller, 0 if equal hypervolume, 1 if larger
        """
        if not isinstance(other, Geometry):
            raise TypeError(f"Cannot compare {type(self).__name__} with {type(other).__name__}")
        mine, theirs = self.hypervolume(), other.hypervolume()
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other):
        if not isinstance(other, Geometry):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other):
        if not isinstance(other, Geometry):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Geometry):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Geometry):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return self.to_text()
