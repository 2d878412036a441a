"""Shared geometry primitives for control points and cursor positions."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Tuple, Union

if TYPE_CHECKING:
    from .points import ControlPoint


Coordinate = Tuple[float, float]
PointLike = Union["ControlPoint", Coordinate]


def to_coordinate_pair(point: PointLike) -> Coordinate:
    """Return ``(x, y)`` for a control point or an existing coordinate pair."""
    if hasattr(point, "x") and hasattr(point, "y"):
        return float(point.x), float(point.y)  # type: ignore[union-attr]
    x, y = point  # type: ignore[misc]
    return float(x), float(y)


def from_coordinate_pair(pair: Coordinate) -> "ControlPoint":
    """Build a new, independent control point from an ``(x, y)`` pair."""
    from .points import ControlPoint

    x, y = pair
    return ControlPoint(float(x), float(y))


def manhattan_distance(a: PointLike, b: PointLike) -> float:
    """Sum of absolute coordinate differences."""
    ax, ay = to_coordinate_pair(a)
    bx, by = to_coordinate_pair(b)
    return abs(bx - ax) + abs(by - ay)


def euclidean_distance(a: PointLike, b: PointLike) -> float:
    ax, ay = to_coordinate_pair(a)
    bx, by = to_coordinate_pair(b)
    return math.hypot(bx - ax, by - ay)


def lerp(a: Coordinate, b: Coordinate, t: float) -> Coordinate:
    """Affine blend of two positions; ``t=0`` yields ``a`` and ``t=1`` yields ``b``."""
    return (
        (1.0 - t) * a[0] + t * b[0],
        (1.0 - t) * a[1] + t * b[1],
    )
