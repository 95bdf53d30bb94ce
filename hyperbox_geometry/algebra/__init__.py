"""
Algebra Layer
=============

Bounded Context: Encapsulation across the closed shape family.

Responsibilities:
- Dimension check before any union
- Pair-rule dispatch for the six valid pairings
- Folding many shapes into one bounding box
"""

from hyperbox_geometry.algebra.union import encapsulate, encapsulate_all, supported_pairs

__all__ = [
    "encapsulate",
    "encapsulate_all",
    "supported_pairs",
]
