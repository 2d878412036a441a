"""Control-point data model: the ordered, append-only point sequence."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List

import numpy as np

from .geometry import Coordinate, PointLike, to_coordinate_pair

logger = logging.getLogger(__name__)


class PointIndexError(IndexError):
    """Raised when a point index falls outside ``[0, count())``."""


@dataclass(eq=False)
class ControlPoint:
    """A mutable 2D control point.

    Equality is identity based: two points at the same coordinates are still
    distinct entities.
    """

    x: float = 0.0
    y: float = 0.0

    def move_to(self, position: PointLike) -> None:
        self.x, self.y = to_coordinate_pair(position)

    def as_pair(self) -> Coordinate:
        return self.x, self.y


class PointStore:
    """Ordered sequence of control points.

    Insertion order is the curve parametrisation order: point 0 is the curve
    start and the last point is the curve end. Points are appended and moved in
    place; they are never removed or reordered.
    """

    def __init__(self) -> None:
        self._points: List[ControlPoint] = []

    def add_point(self, position: PointLike) -> int:
        """Append a new point at ``position`` and return its index."""
        x, y = to_coordinate_pair(position)
        self._points.append(ControlPoint(x, y))
        index = len(self._points) - 1
        logger.debug("Added control point %d at (%.2f, %.2f)", index, x, y)
        return index

    def count(self) -> int:
        return len(self._points)

    def at(self, index: int) -> ControlPoint:
        if not 0 <= index < len(self._points):
            raise PointIndexError(
                f"Point index {index} out of range for {len(self._points)} point(s)"
            )
        return self._points[index]

    def coordinates(self) -> np.ndarray:
        """Snapshot of all positions as an ``(n, 2)`` float64 array."""
        if not self._points:
            return np.empty((0, 2), dtype=np.float64)
        return np.array([p.as_pair() for p in self._points], dtype=np.float64)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[ControlPoint]:
        return iter(self._points)
