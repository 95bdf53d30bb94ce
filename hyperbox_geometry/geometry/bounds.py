"""
Axis Bounds Module
==================

Per-axis min/max math shared by every box type.

Design:
- Free functions over coordinate rows (no shape types here)
- numpy reductions along axis 0 (one row per corner or point)
- Returns plain Python floats so shapes never hold numpy scalars
"""

import numpy as np
from typing import Iterable, Sequence, Tuple

Coordinates = Tuple[float, ...]


def enclose(*rows: Sequence[float]) -> Tuple[Coordinates, Coordinates]:
    """
    Smallest axis-aligned bounds containing every row.

    Args:
        *rows: Coordinate sequences of equal length (corners or points)

    Returns:
        (lower, upper) tuples with lower[i] <= upper[i] on every axis

    Raises:
        ValueError: If no rows are given or rows differ in length
    """
    if not rows:
        raise ValueError("enclose() needs at least one coordinate row")

    lengths = {len(row) for row in rows}
    if len(lengths) != 1:
        raise ValueError(f"Coordinate rows differ in length: {sorted(lengths)}")

    stacked = np.asarray(rows, dtype=float)
    lower = stacked.min(axis=0)
    upper = stacked.max(axis=0)
    return tuple(lower.tolist()), tuple(upper.tolist())


def is_normalized(lower: Sequence[float], upper: Sequence[float]) -> bool:
    """True if lower <= upper on every axis."""
    return bool(np.all(np.asarray(lower, dtype=float) <= np.asarray(upper, dtype=float)))


def edge_lengths(lower: Sequence[float], upper: Sequence[float]) -> Coordinates:
    """Upper minus lower on every axis."""
    edges = np.asarray(upper, dtype=float) - np.asarray(lower, dtype=float)
    return tuple(edges.tolist())


def measure(edges: Iterable[float]) -> float:
    """
    Product of edge lengths (hypervolume).

    Starts from the multiplicative identity, so any zero-length edge
    gives 0.0 and every dimensionality is handled the same way.
    """
    return float(np.prod(np.fromiter(edges, dtype=float), initial=1.0))
